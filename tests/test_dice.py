# test_dice.py
import pytest

from DiceRoll.dice import VALID_FACES, Dice, DiceRNG, get_default_rng, roll_die, set_default_rng
from DiceRoll.metrics import get_counter


def test_valid_faces_are_the_standard_polyhedrals():
    assert VALID_FACES == {4, 6, 8, 10, 12, 20}
    assert Dice.d20 == 20
    assert sorted(int(d) for d in Dice) == [4, 6, 8, 10, 12, 20]


@pytest.mark.parametrize("faces", sorted(VALID_FACES))
def test_roll_die_stays_in_bounds(faces, rng):
    values = [roll_die(faces, rng) for _ in range(500)]
    assert all(1 <= v <= faces for v in values)
    # 500 draws hit both ends of every die we support
    assert min(values) == 1
    assert max(values) == faces


def test_same_seed_same_sequence():
    a = DiceRNG(seed=7)
    b = DiceRNG(seed=7)
    assert a.roll_many(20, 10) == b.roll_many(20, 10)


def test_roll_die_rejects_faceless_die(rng):
    with pytest.raises(ValueError):
        roll_die(0, rng)


def test_roll_die_uses_default_rng():
    set_default_rng(DiceRNG(seed=99))
    expected = DiceRNG(seed=99).roll(6)
    assert roll_die(6) == expected


def test_set_default_rng_returns_previous():
    mine = DiceRNG(seed=5)
    previous = set_default_rng(mine)
    assert get_default_rng() is mine
    assert set_default_rng(previous) is mine


def test_draws_are_counted(rng):
    rng.roll_many(6, 3)
    assert get_counter("dice.rng.draws") == 3
