"""
Knuth-style minimax scoring of candidate guesses.

For a guess c, every code t still in `untried` falls into exactly one
partition, keyed by evaluate_score(c, t). The worst case of c is the size of
its largest partition: the number of candidates that could remain after
guessing c, whatever the oracle answers. The best guess minimizes it.
"""

from __future__ import annotations

import sys
from typing import Sequence

from game.score import Score, all_scores, evaluate_score
from game.secret_code import OPENING_GUESS, Code

# (worst case count, code)
Best = tuple[int, Code]


def partition_sizes(guess: Code, untried: Sequence[Code]) -> dict[Score, int]:
    """
    Count how many codes of `untried` produce each legal score against `guess`.

    Args:
        guess (Code): The candidate guess.
        untried (Sequence[Code]): The current candidate set.
    Returns:
        dict[Score, int]: One entry per legal score (zero counts included).
        The values sum to len(untried).
    """
    sizes = dict.fromkeys(all_scores(), 0)
    for code in untried:
        sizes[evaluate_score(guess, code)] += 1
    return sizes


def worst_case(guess: Code, untried: Sequence[Code]) -> int:
    """Largest partition size of `untried` under `guess`."""
    return max(partition_sizes(guess, untried).values())


def best_in_chunk(untried: Sequence[Code], chunk: Sequence[Code]) -> Best:
    """
    Scan `chunk` in order and return the code with the lowest worst case.
    Ties keep the first code seen.

    Args:
        untried (Sequence[Code]): The current candidate set.
        chunk (Sequence[Code]): The guesses to score, a contiguous slice of
        the code space.
    Returns:
        Best: (worst case count, code). For an empty chunk the count is
        sys.maxsize so the result never wins a reduction.
    """
    best: Best = (sys.maxsize, OPENING_GUESS)
    for code in chunk:
        count = worst_case(code, untried)
        if count < best[0]:
            best = (count, code)
    return best


def reduce_bests(bests: Sequence[Best]) -> Best:
    """
    Pick the lowest worst case from per-chunk results. `bests` must be in
    chunk order; min() keeps the first of equal counts, so the winner is the
    one with the lowest index in the code space.
    """
    return min(bests, key=lambda best: best[0])
