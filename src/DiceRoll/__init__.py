"""Dice rolls for tabletop-style randomness."""

# ruff: noqa: N999  # Package name uses project-specific casing 'DiceRoll'

from DiceRoll.conditions import Comparator, Condition, InvalidCondition, parse_condition
from DiceRoll.dice import VALID_FACES, Dice, DiceRNG, get_default_rng, roll_die, set_default_rng
from DiceRoll.roll import Roll

__all__ = [
    "Comparator",
    "Condition",
    "Dice",
    "DiceRNG",
    "InvalidCondition",
    "Roll",
    "VALID_FACES",
    "get_default_rng",
    "parse_condition",
    "roll_die",
    "set_default_rng",
]
