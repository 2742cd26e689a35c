# dice.py

from __future__ import annotations

import enum
import random
import threading

from DiceRoll.metrics import inc_counter


class Dice(enum.IntEnum):
    """The die types a Roll accepts, valued by face count."""

    d4 = 4
    d6 = 6
    d8 = 8
    d10 = 10
    d12 = 12
    d20 = 20


VALID_FACES: frozenset[int] = frozenset(int(d) for d in Dice)
DEFAULT_FACES = int(Dice.d20)


class DiceRNG:
    """Source of uniform die draws.

    Wraps a private random.Random so tests can pass a seed and get repeatable
    outcomes. Draws are serialised with a lock so one instance can be shared
    between threads.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def roll(self, faces: int) -> int:
        if faces < 1:
            raise ValueError(f"A die needs at least one face, got {faces}")
        with self._lock:
            value = self._rng.randint(1, faces)
        inc_counter("dice.rng.draws")
        return value

    def roll_many(self, faces: int, quantity: int) -> list[int]:
        return [self.roll(faces) for _ in range(quantity)]


_default_rng = DiceRNG()


def get_default_rng() -> DiceRNG:
    return _default_rng


def set_default_rng(rng: DiceRNG) -> DiceRNG:
    """Install rng as the process default and return the previous one."""
    global _default_rng
    previous, _default_rng = _default_rng, rng
    return previous


def roll_die(faces: int, rng: DiceRNG | None = None) -> int:
    """Roll a single die with the given number of faces: 1..faces inclusive."""
    return (rng or _default_rng).roll(faces)
