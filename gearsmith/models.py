"""Item, weapon and stat models used by the optimizer heuristics."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Callable

__all__ = [
    "SpecialStats",
    "WeaponType",
    "WeaponSocket",
    "Socket",
    "ItemSet",
    "NO_SET",
    "HitEffectType",
    "HitEffect",
    "Armor",
    "Weapon",
    "SetBonus",
]


@dataclass(frozen=True)
class SpecialStats:
    """Combat stats that items, buffs and procs contribute."""

    critical_strike: float = 0.0
    hit: float = 0.0
    attack_power: float = 0.0
    chance_for_extra_hit: float = 0.0
    haste: float = 0.0
    sword_expertise: float = 0.0
    axe_expertise: float = 0.0
    mace_expertise: float = 0.0
    expertise: float = 0.0
    bonus_damage: float = 0.0
    damage_mod_physical: float = 0.0
    damage_mod_spell: float = 0.0
    stat_multiplier: float = 0.0
    crit_multiplier: float = 0.0
    ap_multiplier: float = 0.0
    attack_speed: float = 0.0
    gear_armor_pen: float = 0.0

    def _combine(self, other: SpecialStats, op: Callable[[float, float], float]) -> SpecialStats:
        if not isinstance(other, SpecialStats):
            return NotImplemented
        return SpecialStats(
            **{f.name: op(getattr(self, f.name), getattr(other, f.name)) for f in fields(self)}
        )

    def __add__(self, other: SpecialStats) -> SpecialStats:
        return self._combine(other, operator.add)

    def __sub__(self, other: SpecialStats) -> SpecialStats:
        return self._combine(other, operator.sub)

    def dominated_by(self, other: SpecialStats) -> bool:
        """Return whether ``other`` is at least as good everywhere and better somewhere."""
        pairs = [(getattr(self, f.name), getattr(other, f.name)) for f in fields(self)]
        return all(mine <= theirs for mine, theirs in pairs) and any(
            mine < theirs for mine, theirs in pairs
        )


class WeaponType(Enum):
    SWORD = "sword"
    AXE = "axe"
    DAGGER = "dagger"
    MACE = "mace"
    FIST = "fist"
    UNARMED = "unarmed"


class WeaponSocket(Enum):
    ONE_HAND = "one_hand"
    MAIN_HAND = "main_hand"
    OFF_HAND = "off_hand"
    TWO_HAND = "two_hand"


class Socket(Enum):
    HEAD = "head"
    NECK = "neck"
    SHOULDER = "shoulder"
    BACK = "back"
    CHEST = "chest"
    WRIST = "wrist"
    HANDS = "hands"
    BELT = "belt"
    LEGS = "legs"
    BOOTS = "boots"
    RING = "ring"
    TRINKET = "trinket"
    RANGED = "ranged"


@dataclass(frozen=True)
class ItemSet:
    """An item set identified by name; the name ``none`` means no set."""

    name: str = "none"

    @property
    def is_none(self) -> bool:
        return self.name == "none"


NO_SET = ItemSet()


class HitEffectType(Enum):
    EXTRA_HIT = "extra_hit"
    STAT_BOOST = "stat_boost"
    DAMAGE_PHYSICAL = "damage_physical"
    DAMAGE_MAGIC = "damage_magic"
    WINDFURY_HIT = "windfury_hit"
    SWORD_SPEC = "sword_spec"


@dataclass(frozen=True)
class HitEffect:
    """An effect that may trigger when a weapon hits."""

    name: str
    type: HitEffectType
    special_stats_boost: SpecialStats = field(default_factory=SpecialStats)
    damage: float = 0.0
    duration: float = 0.0
    cooldown: float = 0.0
    probability: float = 0.0


@dataclass(frozen=True)
class Armor:
    """A non-weapon item worn in one socket."""

    name: str
    socket: Socket
    special_stats: SpecialStats = field(default_factory=SpecialStats)
    set_name: ItemSet = NO_SET
    hit_effects: tuple[HitEffect, ...] = ()
    use_effects: tuple[str, ...] = ()


@dataclass(frozen=True)
class Weapon:
    """A melee weapon."""

    name: str
    swing_speed: float
    min_damage: float
    max_damage: float
    socket: WeaponSocket
    type: WeaponType
    special_stats: SpecialStats = field(default_factory=SpecialStats)
    set_name: ItemSet = NO_SET
    hit_effects: tuple[HitEffect, ...] = ()
    use_effects: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.swing_speed <= 0:
            raise ValueError("swing_speed must be positive")

    @property
    def average_damage(self) -> float:
        return (self.min_damage + self.max_damage) / 2


@dataclass(frozen=True)
class SetBonus:
    """A bonus granted when enough pieces of one set are worn."""

    name: str
    set: ItemSet
    pieces: int
    special_stats: SpecialStats = field(default_factory=SpecialStats)