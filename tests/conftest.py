# tests/conftest.py

from collections.abc import Iterator

import pytest

from DiceRoll.dice import DiceRNG, set_default_rng
from DiceRoll.metrics import reset_counters


@pytest.fixture
def rng() -> DiceRNG:
    return DiceRNG(seed=42)


@pytest.fixture(autouse=True)
def _isolate_globals() -> Iterator[None]:
    """Give each test a seeded default RNG and empty counters, then restore."""
    previous = set_default_rng(DiceRNG(seed=1234))
    reset_counters()
    yield None
    set_default_rng(previous)
    reset_counters()
