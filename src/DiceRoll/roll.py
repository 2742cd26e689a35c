# roll.py

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from DiceRoll.conditions import parse_condition
from DiceRoll.dice import DEFAULT_FACES, VALID_FACES, DiceRNG, get_default_rng, roll_die
from DiceRoll.logging import get_logger
from DiceRoll.metrics import inc_counter, observe_histogram

_log = get_logger(__name__)

DEFAULT_DICE = "1d20"


def _parse_int(text: str | None) -> int | None:
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        pass
    # Integral float text such as "6.0" or "1e1" is still a whole number
    try:
        value = float(text)
    except ValueError:
        return None
    return int(value) if value.is_integer() else None


def _split_dice(dice: str) -> tuple[str, str | None]:
    """Split "<quantity>d<faces>" on the first two 'd'-separated parts."""
    parts = dice.split("d")
    return parts[0], (parts[1] if len(parts) > 1 else None)


def _parse_quantity(text: str) -> int:
    # Unparseable or non-positive quantities still roll one die.
    quantity = _parse_int(text)
    return quantity if quantity is not None and quantity > 0 else 1


class Roll:
    """Roll n dice of one type and add a modifier to the total.

    Dice notation is ``"<quantity>d<faces>"``; the default is ``"1d20"``.
    Parsing is permissive and never raises: an unparseable or non-positive
    quantity rolls one die, and any face count other than 4, 6, 8, 10, 12 or
    20 rolls a d20.

    Example::

        roll = Roll("3d6", 1)
        roll.results  # (5, 2, 3)
        roll.result   # 11

    Rolls are immutable. ``where`` returns a new Roll over the matching
    results with the same faces and modifier.
    """

    __slots__ = ("_faces", "_modifier", "_results", "_result")

    def __init__(self, dice: str = DEFAULT_DICE, modifier: int = 0, *, rng: DiceRNG | None = None):
        quantity_text, faces_text = _split_dice(dice)
        faces = _parse_int(faces_text)
        if faces not in VALID_FACES:
            inc_counter("dice.roll.faces_fallback")
            _log.debug("dice.roll.faces_fallback", dice=dice, faces=faces_text, fallback=DEFAULT_FACES)
            faces = DEFAULT_FACES
        quantity = _parse_quantity(quantity_text)
        rng = rng or get_default_rng()
        self._assign(faces, modifier, rng.roll_many(faces, quantity))
        inc_counter("dice.roll.created")
        observe_histogram("dice.roll.quantity", quantity)
        _log.debug("dice.roll.created", dice=dice, **self.to_dict())

    @classmethod
    def from_results(cls, results: Iterable[int], faces: int = DEFAULT_FACES, modifier: int = 0) -> Roll:
        """Build a Roll from outcomes that were already rolled."""
        if faces not in VALID_FACES:
            raise ValueError(f"Unsupported die d{faces}; expected one of {sorted(VALID_FACES)}")
        results = tuple(results)
        bad = [r for r in results if not 1 <= r <= faces]
        if bad:
            raise ValueError(f"Results {bad} are outside 1..{faces}")
        roll = cls.__new__(cls)
        roll._assign(faces, modifier, results)
        return roll

    def _assign(self, faces: int, modifier: int, results: Iterable[int]) -> None:
        results = tuple(results)
        object.__setattr__(self, "_faces", faces)
        object.__setattr__(self, "_modifier", modifier)
        object.__setattr__(self, "_results", results)
        object.__setattr__(self, "_result", sum(results) + modifier)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through from_results, not slot assignment
        return (type(self).from_results, (self._results, self._faces, self._modifier))

    @property
    def faces(self) -> int:
        return self._faces

    @property
    def modifier(self) -> int:
        return self._modifier

    @property
    def results(self) -> tuple[int, ...]:
        return self._results

    @property
    def result(self) -> int:
        return self._result

    @staticmethod
    def d(faces: int, rng: DiceRNG | None = None) -> int:
        """Roll.d(20) -> 1..20"""
        return roll_die(faces, rng)

    @staticmethod
    def range(dice: str, modifier: int = 0) -> tuple[int, int]:
        """Return the lowest and highest totals a roll could produce.

        Roll.range("3d6", 1) -> (4, 19)

        Unlike the constructor, the face count is taken literally and is not
        snapped to a d20, so Roll.range("2d7") is (2, 14).

        This is the one parse that can fail: the constructor falls back to a
        d20, but bounds need a literal face count, so a string without a
        numeric one raises ValueError instead of degrading.
        """
        quantity_text, faces_text = _split_dice(dice)
        faces = _parse_int(faces_text)
        if faces is None:
            raise ValueError(f"No face count in dice notation {dice!r}")
        quantity = _parse_quantity(quantity_text)
        return quantity + modifier, faces * quantity + modifier

    def min(self) -> int:
        """Lowest result in the set."""
        if not self._results:
            raise ValueError("Roll has no results")
        return min(self._results)

    def max(self) -> int:
        """Highest result in the set."""
        if not self._results:
            raise ValueError("Roll has no results")
        return max(self._results)

    def count(self, where: int | str | None = None) -> dict[int, int] | int:
        """Count results per face, for one face, or matching a condition.

        Roll("3d6").count()     -> {1: 2, 2: 0, 3: 0, 4: 1, 5: 0, 6: 0}
        Roll("3d6").count(4)    -> 1
        Roll("3d6").count(">3") -> 1
        """
        if isinstance(where, str):
            return len(self.where(where).results)
        tally = dict.fromkeys(range(1, self._faces + 1), 0)
        for r in self._results:
            tally[r] += 1
        if where is None:
            return tally
        return tally.get(where, 0)

    def where(self, condition: str) -> Roll:
        """Return a new Roll holding only the results that meet condition.

        Roll("3d6").where(">3").results          -> (5, 4)
        Roll("3d6").where(">2").where("<5").results -> (4,)
        """
        cond = parse_condition(condition)
        return type(self).from_results(
            (r for r in self._results if cond.matches(r)),
            faces=self._faces,
            modifier=self._modifier,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "faces": self._faces,
            "modifier": self._modifier,
            "results": list(self._results),
            "result": self._result,
        }

    @property
    def notation(self) -> str:
        mod = f"{self._modifier:+d}" if self._modifier else ""
        return f"{len(self._results)}d{self._faces}{mod}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Roll):
            return NotImplemented
        return (self._faces, self._modifier, self._results) == (
            other._faces,
            other._modifier,
            other._results,
        )

    def __hash__(self) -> int:
        return hash((self._faces, self._modifier, self._results))

    def __repr__(self) -> str:
        return f"Roll({self.notation!r}, results={list(self._results)}, result={self._result})"

    def __str__(self) -> str:
        return f"{self.notation}: {list(self._results)} = {self._result}"
