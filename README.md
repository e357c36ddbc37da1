# gearsmith

Stat heuristics and item filtering for choosing the gear of a dual-wield
melee character.

Given candidate armor pieces and weapons, `gearsmith` helps you:

- describe items, weapons and their stats (`gearsmith.models`)
- estimate how much attack power a set of stats or a weapon setup is worth
  (`gearsmith.heuristics`)
- drop items that are clearly weaker than others for the same slot
  (`gearsmith.filtering`)

## Installation

```
pip install gearsmith
```

## Models

`gearsmith.models` holds frozen dataclasses and enums:

- `SpecialStats`: crit, hit, attack power, expertise (general and per
  weapon type), bonus damage, damage modifiers and a few more. It supports
  `+` and `-`, and `a.dominated_by(b)` tells whether `b` is at least as good
  as `a` in every stat and better in at least one.
- `Armor(name, socket, special_stats=..., set_name=..., hit_effects=..., use_effects=...)`
- `Weapon(name, swing_speed, min_damage, max_damage, socket, type, ...)`;
  a non-positive swing speed raises `ValueError`.
- `HitEffect`, `SetBonus` and `ItemSet` (`NO_SET` means no set).
- Enums `Socket`, `WeaponSocket`, `WeaponType` and `HitEffectType`.

## Stat estimates

```python
from gearsmith.models import SpecialStats, Weapon, WeaponSocket, WeaponType
from gearsmith.heuristics import (
    character_ap_equivalent,
    estimate_stat_diff,
    hit_crit_expertise_ap_equivalent,
)

a = SpecialStats(attack_power=40)
b = SpecialStats(critical_strike=1, hit=1)

# Positive when the second set of stats is estimated to be stronger.
print(estimate_stat_diff(a, b))

print(hit_crit_expertise_ap_equivalent(b, WeaponType.SWORD))

sword = Weapon("sword", 2.6, 150, 280, WeaponSocket.ONE_HAND, WeaponType.SWORD)
axe = Weapon("axe", 1.5, 80, 150, WeaponSocket.ONE_HAND, WeaponType.AXE)
print(character_ap_equivalent(b, sword, axe))   # dual wield
print(character_ap_equivalent(b, sword))        # main hand only
```

The module also has `hit_effect_ap_equivalent`, `estimate_special_stats_high`,
`estimate_special_stats_low` and `estimate_special_stats_smart_no_skill`,
and the weights it uses: `CRIT_W`, `CRIT_W_CAP`, `HIT_W`, `HIT_W_CAP`,
`EXPERTISE_W` and `AP_PER_COH`.

## Filtering weaker items

```python
from gearsmith.filtering import remove_weaker_items
from gearsmith.models import Armor, Socket, SpecialStats

helmets = [
    Armor("strong_helm", Socket.HEAD, SpecialStats(attack_power=40)),
    Armor("weak_helm", Socket.HEAD, SpecialStats(attack_power=30)),
]
result = remove_weaker_items(helmets, keep_n_stronger_items=1)
print([a.name for a in result.kept])   # ['strong_helm']
print(result.report)                   # HTML account of each decision
```

An item is dropped once at least `keep_n_stronger_items` other items are
found stronger, either because they dominate it outright or because they
are estimated to be worth more attack power. Items with a set, hit effects
or use effects, and all trinkets, are never judged and are always kept.
An optional `exclude` callable leaves items out altogether.

`remove_weaker_weapons(weapon_socket, weapons, keep_n_stronger_items, exclude=None)`
does the same for weapons, also weighing damage per second and swing
speed. `is_strictly_weaker_weapon` and `estimate_weapon_stat_diff` expose
the comparisons. Both functions return a `FilterResult` with `kept` and
`report`.

## Small helpers

`gearsmith.strings` formats percentages and numbers for HTML reports
(`format_percent`, `percent_stat`, `percent_stat_pair`,
`string_with_precision`) and looks up names (`find_string`, `find_value`;
the latter logs a warning and returns `0.0` when the name is missing).

`gearsmith.find_values.FindValues(names, values)` looks up a value by name
in two parallel sequences of equal length and returns a default when the
name is absent.

## What it does not do

`gearsmith` does not enumerate or rank whole item sets, does not simulate
combat, and ships no item database: you build the `Armor` and `Weapon`
objects yourself and get estimates and filtered lists back. It has no
command-line program.

## Running the tests

```
pip install "gearsmith[test]"
pytest
```