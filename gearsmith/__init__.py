"""Stat heuristics and weaker-item filtering for the gear of a dual-wield melee character."""

__version__ = "0.1.0"