"""Top-level package for the President game engine."""

from . import actions, cards, engine, opponents, rules, state

__all__ = [
    "actions",
    "cards",
    "engine",
    "opponents",
    "rules",
    "state",
]
