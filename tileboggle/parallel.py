"""Solve a grid against a large word list using several processes."""

import multiprocessing
from typing import Sequence, TypeVar

from tqdm import tqdm

from tileboggle.grid import Grid
from tileboggle.solver import find_all_solutions
from tileboggle.trie import normalize_word


def solve_init(tiles: list[list[str]], use_trie: bool):
    # See https://stackoverflow.com/a/30816116/388951 for this trick to avoid a global
    solve_worker.grid = Grid(tiles)
    solve_worker.use_trie = use_trie


def solve_worker(words: list[str]) -> list[str]:
    return find_all_solutions(solve_worker.grid, words, use_trie=solve_worker.use_trie)


T = TypeVar("T")


def chunked(seq: Sequence[T], size: int) -> list[list[T]]:
    assert size > 0
    return [list(seq[i : i + size]) for i in range(0, len(seq), size)]


def find_all_solutions_parallel(
    grid: Grid,
    words: Sequence[str],
    num_threads: int,
    *,
    chunk_size=1000,
    use_trie=False,
    progress=False,
) -> list[str]:
    """Same result as find_all_solutions, with the word list split across processes."""
    # Case-insensitive duplicates may land in different chunks, so keep only
    # the first spelling of each word before splitting.
    seen = set[str]()
    uniq = []
    for word in words:
        key = normalize_word(word)
        if key not in seen:
            seen.add(key)
            uniq.append(word)
    chunks = chunked(uniq, chunk_size)
    tiles = grid.rows_of_tiles()

    pool = None
    if num_threads > 1:
        pool = multiprocessing.Pool(num_threads, solve_init, (tiles, use_trie))
        it = pool.imap(solve_worker, chunks)
    else:
        # This keeps stack traces simpler in the single-threaded case.
        solve_init(tiles, use_trie)
        it = (solve_worker(chunk) for chunk in chunks)

    out = []
    for found in tqdm(it, smoothing=0, total=len(chunks), disable=not progress):
        out.extend(found)

    if pool:
        pool.close()
        pool.join()
    return out
