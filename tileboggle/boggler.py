import sys
import time
from typing import Sequence

from tqdm import tqdm

from tileboggle.grid import Grid
from tileboggle.trie import PyTrie


class TrieBoggler:
    """Finds all the words on a grid with a single DFS that walks a Trie.

    Words that share a prefix share the work of matching it. The same Trie
    can be reused across many grids.
    """

    _trie: PyTrie

    def __init__(self, trie: PyTrie, words: Sequence[str]):
        self._trie = trie
        self._words = words
        self._runs = 0
        self._grid: Grid | None = None
        self._used: list[bool] = []
        self._found: list[int] = []
        self.timed_out = False
        assert not self._trie.is_word()

    def find_words(
        self, grid: Grid, deadline_s: float | None = None, progress=False
    ) -> list[str]:
        """Return each word in the list that's on the grid, in word list order.

        progress shows a bar over the starting cells.
        """
        # Each tile on a path is one stack frame.
        sys.setrecursionlimit(max(sys.getrecursionlimit(), grid.num_cells() + 1000))
        # This allows the same Trie to be used by multiple bogglers.
        self._runs = 1 + self._trie.mark()
        self._trie.set_mark(self._runs)
        self._grid = grid
        self._used = [False] * grid.num_cells()
        self._found = []
        self.timed_out = False
        start_s = time.time()
        t = self._trie
        for i in tqdm(range(0, grid.num_cells()), smoothing=0, disable=not progress):
            if deadline_s is not None and time.time() - start_s >= deadline_s:
                self.timed_out = True
                break
            d = t.descend_text(grid.tile(i))
            if d:
                self.do_dfs(i, d)
        return [self._words[word_id] for word_id in sorted(self._found)]

    def do_dfs(self, i: int, t: PyTrie):
        self._used[i] = True
        if t.is_word() and t.mark() != self._runs:
            t.set_mark(self._runs)
            self._found.append(t.word_id)

        grid = self._grid
        for idx in grid.neighbor_ids(i):
            if not self._used[idx]:
                d = t.descend_text(grid.tile(idx))
                if d:
                    self.do_dfs(idx, d)

        self._used[i] = False
