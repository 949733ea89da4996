import pytest

from tileboggle.grid import Grid
from tileboggle.parallel import chunked, find_all_solutions_parallel
from tileboggle.solver import find_all_solutions

GRID = Grid(
    [
        ["Qu", "A", "X", "St", "L"],
        ["A", "R", "R", "I", "L"],
        ["Y", "F", "I", "E", "D"],
        ["M", "R", "I", "C", "K"],
        ["A", "N", "D", "M", "O"],
    ]
)
WORDS = [
    "arf",
    "ciel",
    "ARF",
    "derrick",
    "army",
    "hawaii",
    "hero",
    "academia",
    "still",
    "ax",
    "quay",
    "fir",
    "Fir",
]


def test_chunked():
    assert chunked([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunked([], 3) == []


@pytest.mark.parametrize("num_threads", [1, 2])
@pytest.mark.parametrize("use_trie", [False, True])
def test_matches_serial(num_threads, use_trie):
    expected = find_all_solutions(GRID, WORDS)
    assert expected == ["arf", "ciel", "derrick", "army", "still", "quay", "fir"]
    assert (
        find_all_solutions_parallel(
            GRID, WORDS, num_threads, chunk_size=3, use_trie=use_trie
        )
        == expected
    )
