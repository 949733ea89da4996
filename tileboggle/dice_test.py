import random

from tileboggle.dice import CLASSIC_DICE, DICE, faces, roll_grid


def test_dice():
    assert len(DICE) == 16
    assert len(CLASSIC_DICE) == 16
    for die in DICE + CLASSIC_DICE:
        assert len(die) == 6


def test_faces():
    assert faces("himnqu") == ["h", "i", "m", "n", "qu", "u"]


def test_roll_grid():
    g1 = roll_grid(4, 4, random.Random(1234))
    g2 = roll_grid(4, 4, random.Random(1234))
    assert g1 == g2
    assert g1.dimensions() == (4, 4)
    for i in range(g1.num_cells()):
        assert g1.tile(i) in {face for die in DICE for face in faces(die)}


def test_roll_big_grid():
    g = roll_grid(5, 5, random.Random(0), CLASSIC_DICE)
    assert g.dimensions() == (5, 5)
    assert g.num_cells() == 25
