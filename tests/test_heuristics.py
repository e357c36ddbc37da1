import pytest

from gearsmith.heuristics import (
    AP_PER_COH,
    CRIT_W,
    CRIT_W_CAP,
    EXPERTISE_W,
    HIT_W,
    HIT_W_CAP,
    character_ap_equivalent,
    estimate_special_stats_high,
    estimate_special_stats_low,
    estimate_special_stats_smart_no_skill,
    estimate_stat_diff,
    hit_crit_expertise_ap_equivalent,
    hit_effect_ap_equivalent,
)
from gearsmith.models import (
    HitEffect,
    HitEffectType,
    SpecialStats,
    Weapon,
    WeaponSocket,
    WeaponType,
)


def _wep(speed=2.0, low=100, high=100, wtype=WeaponType.AXE, effects=()):
    return Weapon("test_wep", speed, low, high, WeaponSocket.ONE_HAND, wtype, hit_effects=effects)


def test_hit_crit_zero_stats():
    assert hit_crit_expertise_ap_equivalent(SpecialStats(), WeaponType.UNARMED) == pytest.approx(-192.0)


def test_hit_weight_below_and_above_cap():
    f = hit_crit_expertise_ap_equivalent
    below = f(SpecialStats(hit=2), WeaponType.UNARMED) - f(SpecialStats(hit=1), WeaponType.UNARMED)
    above = f(SpecialStats(hit=12), WeaponType.UNARMED) - f(SpecialStats(hit=11), WeaponType.UNARMED)
    assert below == pytest.approx(HIT_W)
    assert above == pytest.approx(HIT_W_CAP)


def test_crit_weight_below_and_above_cap():
    f = hit_crit_expertise_ap_equivalent
    low = f(SpecialStats(critical_strike=20), WeaponType.UNARMED) - f(
        SpecialStats(critical_strike=10), WeaponType.UNARMED
    )
    high = f(SpecialStats(critical_strike=60), WeaponType.UNARMED) - f(
        SpecialStats(critical_strike=50), WeaponType.UNARMED
    )
    assert low == pytest.approx(10 * CRIT_W)
    assert high == pytest.approx(10 * CRIT_W_CAP)


def test_weapon_expertise_only_counts_for_its_type():
    stats = SpecialStats(critical_strike=60, sword_expertise=20)
    sword = hit_crit_expertise_ap_equivalent(stats, WeaponType.SWORD)
    axe = hit_crit_expertise_ap_equivalent(stats, WeaponType.AXE)
    assert sword > axe
    assert axe == hit_crit_expertise_ap_equivalent(SpecialStats(critical_strike=60), WeaponType.AXE)


def test_damage_hit_effect_scales_with_factor():
    effect = HitEffect("bolt", HitEffectType.DAMAGE_MAGIC, damage=100, probability=0.1)
    full = hit_effect_ap_equivalent(effect, 0, 2.0, 1.0)
    half = hit_effect_ap_equivalent(effect, 0, 2.0, 0.5)
    assert full == pytest.approx(0.1 * 100 * AP_PER_COH / 2.0)
    assert half == pytest.approx(full / 2)


def test_extra_hit_and_stat_boost_effects():
    extra = HitEffect("extra", HitEffectType.EXTRA_HIT, probability=0.1)
    assert hit_effect_ap_equivalent(extra, 0, 2.0, 1.0) == pytest.approx(100 * 0.1 * 2.0 * CRIT_W)
    boost = HitEffect("haste", HitEffectType.STAT_BOOST, SpecialStats(haste=0.2), probability=1)
    assert hit_effect_ap_equivalent(boost, 2000, 2.0, 1.0) == pytest.approx(2000 * 0.2 * 0.25)


def test_windfury_effect_is_not_valued():
    wf = HitEffect("wf", HitEffectType.WINDFURY_HIT, probability=0.2)
    assert hit_effect_ap_equivalent(wf, 2000, 2.0, 1.0) == 0.0


def test_off_hand_adds_weighted_weapon_ap():
    stats = SpecialStats(attack_power=1000, critical_strike=20, hit=5)
    mh = _wep()
    single = character_ap_equivalent(stats, mh)
    dual = character_ap_equivalent(stats, mh, mh)
    assert dual - single == pytest.approx(0.625 * 100 / 2.0 * 14)


def test_hit_effect_raises_character_value():
    stats = SpecialStats(attack_power=1000)
    effect = HitEffect("extra", HitEffectType.EXTRA_HIT, probability=0.05)
    plain = character_ap_equivalent(stats, _wep())
    proc = character_ap_equivalent(stats, _wep(effects=(effect,)))
    assert proc - plain == pytest.approx(hit_effect_ap_equivalent(effect, 0, 2.0, 1.0))


def test_estimates_of_attack_power():
    stats = SpecialStats(attack_power=100)
    assert estimate_special_stats_high(stats) == 100
    assert estimate_special_stats_low(stats) == 100 + EXPERTISE_W


def test_high_estimate_not_below_low_for_positive_stats():
    stats = SpecialStats(critical_strike=5, hit=3, attack_power=50, bonus_damage=10, damage_mod_physical=0.02)
    assert estimate_special_stats_high(stats) > estimate_special_stats_low(stats)


def test_stat_diff_of_equal_stats():
    stats = SpecialStats(critical_strike=5, attack_power=50)
    assert estimate_stat_diff(stats, stats) == pytest.approx(EXPERTISE_W)


def test_stat_diff_prefers_large_ap_gain():
    weak = SpecialStats(attack_power=10)
    strong = SpecialStats(attack_power=200)
    assert estimate_stat_diff(weak, strong) > 0
    assert estimate_stat_diff(strong, weak) < 0


def test_smart_no_skill_comparison():
    weak = SpecialStats(attack_power=10)
    strong = SpecialStats(attack_power=200)
    assert estimate_special_stats_smart_no_skill(weak, strong)
    assert not estimate_special_stats_smart_no_skill(strong, weak)
    crit = SpecialStats(critical_strike=2)
    ap = SpecialStats(attack_power=60)
    assert not estimate_special_stats_smart_no_skill(ap, crit)