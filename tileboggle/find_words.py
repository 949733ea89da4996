#!/usr/bin/env python
"""Find all the words from a dictionary on Boggle boards and print them."""

import argparse
import fileinput
import sys
import time

from tileboggle.args import (
    add_standard_args,
    get_dims_from_args,
    get_rng_from_args,
    get_trie_from_args,
)
from tileboggle.boggler import TrieBoggler
from tileboggle.dice import roll_grid
from tileboggle.grid import Grid
from tileboggle.parallel import find_all_solutions_parallel
from tileboggle.solver import PathSearcher, find_all_solutions
from tileboggle.trie import load_words


def get_boards(args: argparse.Namespace, parser: argparse.ArgumentParser):
    if args.board:
        lines = args.board
    elif args.num_random:
        rng = get_rng_from_args(args)
        dims = get_dims_from_args(args)
        for _ in range(args.num_random):
            yield roll_grid(*dims, rng)
        return
    else:
        lines = fileinput.input(files=args.files)

    for line in lines:
        line = line.strip()
        if not line:
            continue
        try:
            yield Grid.parse(line)
        except ValueError as e:
            parser.error(f"Invalid board {line!r}: {e}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find all the dictionary words on boggle boards"
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help="Files containing boards, one per line (e.g. 'a qu / c st'), or stdin",
    )
    parser.add_argument(
        "--board",
        action="append",
        help="Solve this board instead of reading files. May be repeated.",
    )
    parser.add_argument(
        "--num_random",
        type=int,
        default=0,
        help="Roll this many random boards of --size instead of reading files.",
    )
    parser.add_argument(
        "--trie",
        action="store_true",
        help="Search for all words at once by walking a Trie of the dictionary.",
    )
    parser.add_argument(
        "--num_threads",
        type=int,
        default=1,
        help="Split the dictionary across this many processes.",
    )
    parser.add_argument(
        "--deadline_s",
        type=float,
        default=None,
        help="Give up on a board after this many seconds and report partial results.",
    )
    parser.add_argument(
        "--print_words",
        action="store_true",
        help="Print all the words that can be found on each board.",
    )
    parser.add_argument(
        "--print_paths",
        action="store_true",
        help="Print the cells used to spell each word. Implies --print_words.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while searching each board.",
    )

    args = parser.parse_args(argv)
    if args.num_threads > 1:
        assert args.deadline_s is None, "--deadline_s is not supported with --num_threads"
    boggler = None
    if args.trie:
        trie, words = get_trie_from_args(args)
        boggler = TrieBoggler(trie, words)
    else:
        words = load_words(args.dictionary)

    start_s = time.time()
    n = 0
    for grid in get_boards(args, parser):
        if args.num_threads > 1:
            found = find_all_solutions_parallel(
                grid,
                words,
                args.num_threads,
                use_trie=args.trie,
                progress=args.progress,
            )
        elif boggler:
            found = boggler.find_words(grid, args.deadline_s, args.progress)
        else:
            found = find_all_solutions(
                grid, words, deadline_s=args.deadline_s, progress=args.progress
            )
        print(f"{grid}: {len(found)} words")
        if args.print_paths:
            searcher = PathSearcher(grid)
            for word in sorted(found):
                print(f"{word}: {searcher.find_path(word)}")
        elif args.print_words:
            print("\n".join(sorted(found)))
        n += 1
    end_s = time.time()
    elapsed_s = end_s - start_s
    rate = n / elapsed_s if elapsed_s else 0
    sys.stderr.write(f"{n} boards in {elapsed_s:.2f}s = {rate:.2f} boards/s\n")


if __name__ == "__main__":
    main()
