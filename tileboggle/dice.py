"""Roll random Boggle boards.

The "q" face of a die is really a "Qu" tile, so it rolls as "qu".
"""

import random

from tileboggle.grid import Grid

# https://www.bananagrammer.com/2013/10/the-boggle-cube-redesign-and-its-effect.html
# "New" Boggle dice, 1987 to ~2008
DICE = [
    "aaeegn",
    "abbjoo",
    "achops",
    "affkps",
    "aoottw",
    "cimotu",
    "deilrx",
    "delrvy",
    "distty",
    "eeghnw",
    "eeinsu",
    "ehrtvw",
    "eiosst",
    "elrtty",
    "himnqu",
    "hlnnrz",
]

# "Classic" Boggle dice, 1976 to 1986
CLASSIC_DICE = [
    "aaciot",
    "abilty",
    "abjmoq",
    "acdemp",
    "acelrs",
    "adenvz",
    "ahmors",
    "biforx",
    "denosw",
    "dknotu",
    "eefhiy",
    "egkluy",
    "egintv",
    "ehinps",
    "elpstu",
    "gilruw",
]


def faces(die: str) -> list[str]:
    return ["qu" if face == "q" else face for face in die]


def roll_grid(
    rows: int, cols: int, rng: random.Random, dice: list[str] = DICE
) -> Grid:
    """Shake the dice into a rows x cols grid.

    Boards with more cells than there are dice reuse the dice.
    """
    n = rows * cols
    order = [dice[i % len(dice)] for i in range(n)]
    rng.shuffle(order)
    tiles = [rng.choice(faces(die)) for die in order]
    return Grid([tiles[r * cols : (r + 1) * cols] for r in range(rows)])
