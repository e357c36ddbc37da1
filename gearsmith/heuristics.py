"""Rough attack-power equivalents used to rank gear without simulating it."""

from __future__ import annotations

from dataclasses import fields, replace

from gearsmith.models import HitEffect, HitEffectType, SpecialStats, Weapon, WeaponType

__all__ = [
    "CRIT_W",
    "CRIT_W_CAP",
    "HIT_W",
    "HIT_W_CAP",
    "EXPERTISE_W",
    "AP_PER_COH",
    "hit_crit_expertise_ap_equivalent",
    "hit_effect_ap_equivalent",
    "character_ap_equivalent",
    "estimate_special_stats_high",
    "estimate_special_stats_low",
    "estimate_special_stats_smart_no_skill",
    "estimate_stat_diff",
]

CRIT_W = 40.0
CRIT_W_CAP = 25.0
HIT_W = 45.0
HIT_W_CAP = 15.0
EXPERTISE_W = 10.0
AP_PER_COH = 50 / 6.2

_TARGET_DEFENCE_LEVEL = 365
_SKILL_DIFF = _TARGET_DEFENCE_LEVEL - 350
_BASE_SKILL_DIFF = 15
_FLAT_CRIT_AURA = 1.8

_TYPE_EXPERTISE = {
    WeaponType.SWORD: "sword_expertise",
    WeaponType.MACE: "mace_expertise",
    WeaponType.AXE: "axe_expertise",
}


def _base_miss_and_penalty(skill_diff: int) -> tuple[float, int]:
    if skill_diff > 10:
        return 5.0 + skill_diff * 0.2, 1
    if skill_diff > 0:
        return 5.0 + skill_diff * 0.1, 0
    return 5.0, 0


def hit_crit_expertise_ap_equivalent(special_stats: SpecialStats, weapon_type: WeaponType) -> float:
    """Attack power worth of crit, hit and expertise against a raid boss."""
    crit_chance = special_stats.critical_strike - _BASE_SKILL_DIFF * 0.2 - _FLAT_CRIT_AURA

    base_miss_chance, hit_penalty = _base_miss_and_penalty(_SKILL_DIFF)
    miss_chance_yellow = base_miss_chance + hit_penalty
    dw_miss_chance = base_miss_chance * 0.8 + 20.0
    miss_chance = dw_miss_chance - max(special_stats.hit - hit_penalty, 0.0)

    expertise = special_stats.expertise
    type_field = _TYPE_EXPERTISE.get(weapon_type)
    if type_field is not None:
        expertise += getattr(special_stats, type_field)
    if _BASE_SKILL_DIFF > 0:
        base_dodge = max(5 + _SKILL_DIFF * 0.1, 5.0)
    else:
        base_dodge = max(5 - _BASE_SKILL_DIFF * 0.04, 0.0)
    dodge_chance = max(base_dodge - int(expertise) * 0.25, 0.0)

    crit_cap = 100 - (miss_chance + dodge_chance + 40)

    if crit_chance > crit_cap:
        ap_from_crit = (crit_chance - crit_cap) * CRIT_W_CAP + crit_cap * CRIT_W
    else:
        ap_from_crit = crit_chance * CRIT_W

    if special_stats.hit > miss_chance_yellow:
        ap_from_hit = (special_stats.hit - miss_chance_yellow) * HIT_W_CAP + miss_chance_yellow * HIT_W
    else:
        ap_from_hit = special_stats.hit * HIT_W

    ap_from_expertise = int(special_stats.expertise) * 0.25 * EXPERTISE_W if dodge_chance > 0 else 0.0

    return ap_from_crit + ap_from_hit + ap_from_expertise


def hit_effect_ap_equivalent(
    hit_effect: HitEffect, total_ap: float, swing_speed: float, factor: float
) -> float:
    """Attack power worth of a weapon's on-hit effect."""
    if hit_effect.type in (HitEffectType.DAMAGE_MAGIC, HitEffectType.DAMAGE_PHYSICAL):
        return hit_effect.probability * hit_effect.damage * AP_PER_COH / swing_speed * factor
    if hit_effect.type is HitEffectType.EXTRA_HIT:
        # An extra hit is valued like a crit.
        return 100.0 * hit_effect.probability * swing_speed * CRIT_W * factor
    if hit_effect.type is HitEffectType.STAT_BOOST:
        # Haste procs are assumed to be up a quarter of the time.
        return total_ap * hit_effect.special_stats_boost.haste * 0.25 * factor
    return 0.0


def _weapon_ap(weapon: Weapon, bonus_damage: float) -> float:
    return (weapon.average_damage + bonus_damage) / weapon.swing_speed * 14


def character_ap_equivalent(
    special_stats: SpecialStats, mh_weapon: Weapon, oh_weapon: Weapon | None = None
) -> float:
    """Attack power worth of a character's stats and weapons.

    Without an off-hand weapon the main-hand weapon is treated as wielded alone.
    """
    mh_hce = hit_crit_expertise_ap_equivalent(special_stats, mh_weapon.type)
    mh_ap = _weapon_ap(mh_weapon, special_stats.bonus_damage)

    if oh_weapon is None:
        special_stats_ap = special_stats.attack_power + mh_hce + mh_ap
    else:
        oh_hce = hit_crit_expertise_ap_equivalent(special_stats, oh_weapon.type)
        # Weighted by how often each hand swings relative to the other.
        hce = (mh_hce + oh_hce * 0.5) / 1.5
        oh_ap = _weapon_ap(oh_weapon, special_stats.bonus_damage) * 0.625
        special_stats_ap = special_stats.attack_power + hce + mh_ap + oh_ap

    hit_effects_ap = sum(
        hit_effect_ap_equivalent(effect, special_stats_ap, mh_weapon.swing_speed, 1.0)
        for effect in mh_weapon.hit_effects
    )
    if oh_weapon is not None:
        hit_effects_ap += sum(
            hit_effect_ap_equivalent(effect, special_stats_ap, oh_weapon.swing_speed, 0.5)
            for effect in oh_weapon.hit_effects
        )
    return special_stats_ap + hit_effects_ap


def estimate_special_stats_high(special_stats: SpecialStats) -> float:
    """Generous attack power estimate: fast weapon, 3000 AP, uncapped weights."""
    estimate = special_stats.bonus_damage / 1.8 * 14
    estimate += (
        special_stats.damage_mod_physical * 3000
        + special_stats.damage_mod_physical * 3000 * special_stats.critical_strike / 100
    )
    estimate += (
        special_stats.attack_power
        + special_stats.hit * HIT_W
        + special_stats.critical_strike * CRIT_W
        + special_stats.expertise * EXPERTISE_W
    )
    return estimate


def estimate_special_stats_low(special_stats: SpecialStats) -> float:
    """Conservative attack power estimate: slow weapon, 1500 AP, capped weights."""
    estimate = special_stats.bonus_damage / 2.6 * 14
    estimate += (
        special_stats.damage_mod_physical * 1500
        + special_stats.damage_mod_physical * 1500 * special_stats.critical_strike / 100
    )
    estimate += (
        special_stats.attack_power
        + special_stats.hit * HIT_W_CAP
        + special_stats.critical_strike * CRIT_W_CAP
        + special_stats.expertise
        + EXPERTISE_W
    )
    return estimate


def _split_diff(
    special_stats1: SpecialStats, special_stats2: SpecialStats, names: tuple[str, ...]
) -> tuple[SpecialStats, SpecialStats]:
    """Split the difference into what the first and the second side have more of."""
    diff = special_stats2 - special_stats1
    gains_1: dict[str, float] = {}
    gains_2: dict[str, float] = {}
    for name in names:
        value = getattr(diff, name)
        if value > 0:
            gains_2[name] = value
        else:
            gains_1[name] = -value
    return replace(SpecialStats(), **gains_1), replace(SpecialStats(), **gains_2)


_SMART_FIELDS = ("critical_strike", "hit", "attack_power", "bonus_damage", "expertise")
_DIFF_FIELDS = (
    "critical_strike",
    "hit",
    "attack_power",
    "bonus_damage",
    "damage_mod_physical",
    "axe_expertise",
    "sword_expertise",
    "mace_expertise",
    "expertise",
)
assert set(_DIFF_FIELDS) <= {f.name for f in fields(SpecialStats)}


def estimate_special_stats_smart_no_skill(
    special_stats1: SpecialStats, special_stats2: SpecialStats
) -> bool:
    """Return whether the second stats are better even when judged pessimistically."""
    res_1, res_2 = _split_diff(special_stats1, special_stats2, _SMART_FIELDS)
    return estimate_special_stats_low(res_2) > estimate_special_stats_high(res_1)


def estimate_stat_diff(special_stats1: SpecialStats, special_stats2: SpecialStats) -> float:
    """Pessimistic attack power advantage of the second stats over the first."""
    res_1, res_2 = _split_diff(special_stats1, special_stats2, _DIFF_FIELDS)
    return estimate_special_stats_low(res_2) - estimate_special_stats_high(res_1)