"""Pruning of items that are clearly weaker than others for the same slot."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from gearsmith.heuristics import estimate_stat_diff
from gearsmith.models import Armor, Socket, SpecialStats, Weapon, WeaponSocket
from gearsmith.strings import string_with_precision

__all__ = [
    "FilterResult",
    "is_strictly_weaker_weapon",
    "estimate_weapon_stat_diff",
    "remove_weaker_weapons",
    "remove_weaker_items",
]

T = TypeVar("T")

_WEAPON_STAT_FIELDS = (
    "hit",
    "critical_strike",
    "attack_power",
    "axe_expertise",
    "sword_expertise",
    "mace_expertise",
    "expertise",
)


@dataclass(frozen=True)
class FilterResult(Generic[T]):
    """Items that survived filtering and an HTML report of the decisions."""

    kept: list[T] = field(default_factory=list)
    report: str = ""


def _weapon_can_be_estimated(weapon: Weapon) -> bool:
    return weapon.set_name.is_none and not weapon.hit_effects and not weapon.use_effects


def _armor_can_be_estimated(armor: Armor) -> bool:
    return (
        armor.set_name.is_none
        and not armor.hit_effects
        and not armor.use_effects
        and armor.socket is not Socket.TRINKET
    )


def _dps(weapon: Weapon) -> float:
    return weapon.average_damage / weapon.swing_speed


def is_strictly_weaker_weapon(weapon1: Weapon, weapon2: Weapon, socket: WeaponSocket) -> bool:
    """Return whether ``weapon2`` is at least as good as ``weapon1`` everywhere and better somewhere.

    In the main hand a slower weapon counts as better; elsewhere a faster one does.
    """
    stats1: SpecialStats = weapon1.special_stats
    stats2: SpecialStats = weapon2.special_stats
    pairs = [(getattr(stats1, name), getattr(stats2, name)) for name in _WEAPON_STAT_FIELDS]

    if socket is WeaponSocket.MAIN_HAND:
        speed_ge = weapon2.swing_speed >= weapon1.swing_speed
        speed_gt = weapon2.swing_speed > weapon1.swing_speed
    else:
        speed_ge = weapon2.swing_speed <= weapon1.swing_speed
        speed_gt = weapon2.swing_speed < weapon1.swing_speed

    greater_eq = (
        all(theirs >= mine for mine, theirs in pairs)
        and speed_ge
        and _dps(weapon2) >= _dps(weapon1)
    )
    greater = (
        any(theirs > mine for mine, theirs in pairs)
        or speed_gt
        or _dps(weapon2) > _dps(weapon1)
    )
    return greater_eq and greater


def estimate_weapon_stat_diff(weapon1: Weapon, weapon2: Weapon, main_hand: bool) -> float:
    """Attack power advantage of ``weapon2``'s damage and speed over ``weapon1``'s."""

    def weapon_ap(weapon: Weapon) -> float:
        ap = _dps(weapon) * 14
        if main_hand:
            ap += 100 * (weapon.swing_speed - 2.3)
        return ap

    diff = weapon_ap(weapon2) - weapon_ap(weapon1)
    return diff if main_hand else 0.5 * diff


def _counter(found: int, keep: int) -> str:
    return f"{string_with_precision(found)}/{string_with_precision(keep)}"


def _filter(
    items: Sequence[T],
    estimable: list[bool],
    keep_n_stronger_items: int,
    compare: Callable[[T, T], tuple[bool, float]],
    name_of: Callable[[T], str],
    heading: str,
) -> FilterResult[T]:
    report: list[str] = []
    removed = [False] * len(items)

    for i, item1 in enumerate(items):
        if not estimable[i]:
            continue
        stronger_found = 0
        for j, item2 in enumerate(items):
            if i == j or not estimable[j]:
                continue
            dominated, estimate = compare(item1, item2)
            if dominated:
                stronger_found += 1
                report.append(
                    f"{_counter(stronger_found, keep_n_stronger_items)} since <b>{name_of(item2)}"
                    f"</b> is better than <b>{name_of(item1)}</b> in all aspects.<br>"
                )
            elif estimate > 0:
                stronger_found += 1
                report.append(
                    f"{_counter(stronger_found, keep_n_stronger_items)} since <b>{name_of(item2)}"
                    f"</b> was estimated to be <b>{string_with_precision(estimate, 3)}"
                    f" AP </b>better than <b>{name_of(item1)}</b>.<br>"
                )
            if stronger_found >= keep_n_stronger_items:
                removed[i] = True
                report.append(f"REMOVED:<b> {name_of(item1)}</b>.<br>")
                break

    report.append(heading)
    kept = [item for item, gone in zip(items, removed) if not gone]
    report.extend(f"<b>{name_of(item)}</b><br>" for item in kept)
    return FilterResult(kept=kept, report="".join(report))


def remove_weaker_weapons(
    weapon_socket: WeaponSocket,
    weapons: Iterable[Weapon],
    keep_n_stronger_items: int,
    exclude: Callable[[Weapon], bool] | None = None,
) -> FilterResult[Weapon]:
    """Drop weapons for which at least ``keep_n_stronger_items`` others look stronger.

    Weapons for which ``exclude`` returns true are left out altogether. Weapons with
    set membership, hit effects or use effects are never judged and always kept.
    """
    candidates = [w for w in weapons if exclude is None or not exclude(w)]
    main_hand = weapon_socket is WeaponSocket.MAIN_HAND

    def compare(weapon1: Weapon, weapon2: Weapon) -> tuple[bool, float]:
        if weapon1.type == weapon2.type and is_strictly_weaker_weapon(
            weapon1, weapon2, weapon_socket
        ):
            return True, 0.0
        return False, estimate_stat_diff(
            weapon1.special_stats, weapon2.special_stats
        ) + estimate_weapon_stat_diff(weapon1, weapon2, main_hand)

    return _filter(
        candidates,
        [_weapon_can_be_estimated(w) for w in candidates],
        keep_n_stronger_items,
        compare,
        lambda w: w.name,
        "Weapons left:<br>",
    )


def remove_weaker_items(
    armors: Iterable[Armor],
    keep_n_stronger_items: int,
    exclude: Callable[[Armor], bool] | None = None,
) -> FilterResult[Armor]:
    """Drop armor pieces for which at least ``keep_n_stronger_items`` others look stronger.

    Pieces for which ``exclude`` returns true are left out altogether. Trinkets and
    pieces with set membership, hit effects or use effects are always kept.
    """
    candidates = [a for a in armors if exclude is None or not exclude(a)]

    def compare(armor1: Armor, armor2: Armor) -> tuple[bool, float]:
        if armor1.special_stats.dominated_by(armor2.special_stats):
            return True, 0.0
        return False, estimate_stat_diff(armor1.special_stats, armor2.special_stats)

    return _filter(
        candidates,
        [_armor_can_be_estimated(a) for a in candidates],
        keep_n_stronger_items,
        compare,
        lambda a: a.name,
        "Armors left:<br>",
    )