"""Find the words from a word list that can be traced on a grid of tiles.

A word is on the grid if a path of adjacent tiles (including diagonals) spells
it, with no tile used twice in the same word. Multi-letter tiles like "qu"
must be used whole. Matching ignores case, and words shorter than three
letters are never found.
"""

import sys
import time
from typing import Sequence

from tqdm import tqdm

from tileboggle.boggler import TrieBoggler
from tileboggle.grid import Grid
from tileboggle.trie import PyTrie, is_candidate_word, normalize_word


class PathSearcher:
    """Depth-first search for one word at a time."""

    def __init__(self, grid: Grid):
        self._grid = grid
        self._n = grid.num_cells()
        self._max_length = grid.max_word_length()
        self._used = [False] * self._n
        self._seq: list[int] = []
        self.timed_out = False
        # Each tile on a path is one stack frame.
        sys.setrecursionlimit(max(sys.getrecursionlimit(), self._n + 1000))

    def _search(self, word: str, deadline: float | None) -> bool:
        self.timed_out = False
        if not word or len(word) > self._max_length:
            return False
        for i in range(0, self._n):
            if deadline is not None and time.time() >= deadline:
                self.timed_out = True
                return False
            self._seq = []
            if self._dfs(i, word, 0):
                return True
        return False

    def _dfs(self, i: int, word: str, offset: int) -> bool:
        tile = self._grid.tile(i)
        if not word.startswith(tile, offset):
            return False
        self._seq.append(i)
        end = offset + len(tile)
        if end == len(word):
            return True

        self._used[i] = True
        found = False
        for idx in self._grid.neighbor_ids(i):
            if not self._used[idx] and self._dfs(idx, word, end):
                found = True
                break
        self._used[i] = False

        if not found:
            self._seq.pop()
        return found

    def can_spell(self, word: str, deadline: float | None = None) -> bool:
        """Is there a path of distinct, adjacent tiles that spells word?

        deadline is an absolute time.time() value. If it passes, the search
        gives up and reports False.
        """
        return self._search(normalize_word(word), deadline)

    def find_path(self, word: str) -> list[tuple[int, int]] | None:
        """One path of (row, col) cells that spells word, or None."""
        if not self._search(normalize_word(word), None):
            return None
        return [self._grid.pos(i) for i in self._seq]


def find_all_solutions(
    grid: Grid | Sequence[Sequence[str]],
    words: Sequence[str],
    *,
    use_trie=False,
    deadline_s: float | None = None,
    progress=False,
) -> list[str]:
    """Return the words that can be traced on the grid.

    Each word appears at most once, using the casing of its first occurrence
    in words, and in the order of words. If deadline_s elapses, this returns
    whatever has been found so far.
    """
    if not isinstance(grid, Grid):
        grid = Grid(grid)

    if use_trie:
        trie = PyTrie.create_from_wordlist(words)
        return TrieBoggler(trie, words).find_words(grid, deadline_s, progress)

    deadline = time.time() + deadline_s if deadline_s is not None else None
    searcher = PathSearcher(grid)
    seen = set[str]()
    out = []
    candidates = [word for word in words if is_candidate_word(word)]
    for word in tqdm(candidates, smoothing=0, disable=not progress):
        if deadline is not None and time.time() >= deadline:
            break
        key = normalize_word(word)
        if key in seen:
            continue
        if searcher.can_spell(key, deadline):
            out.append(word)
        elif searcher.timed_out:
            break
        seen.add(key)
    return out
