from __future__ import annotations

from functools import lru_cache
from typing import Iterable, NamedTuple

from .ruleset import DEFAULT_RULES
from .secret_code import ALL_PEGS, Code


class Score(NamedTuple):
    """
    Feedback for one guess.

    Attributes:
        blacks (int): Pegs with the correct color in the correct position.
        whites (int): Further pegs with a correct color in the wrong position
        (blacks are not counted again).
    """

    blacks: int
    whites: int

    @property
    def indicates_win(self) -> bool:
        return self.blacks == DEFAULT_RULES["code_length"]

    def __str__(self):
        return "B" * self.blacks + "W" * self.whites


@lru_cache(maxsize=None)
def all_scores() -> tuple[Score, ...]:
    """
    The 14 legal scores: every (blacks, whites) with blacks + whites <= 4,
    except (3, 1), which no pair of codes can produce.
    """
    length = DEFAULT_RULES["code_length"]
    return tuple(
        Score(blacks, whites)
        for blacks in range(length + 1)
        for whites in range(length + 1)
        if blacks + whites <= length and not (blacks == length - 1 and whites == 1)
    )


def evaluate_score(code1: Code, code2: Code) -> Score:
    """
    Compute Mastermind feedback between two codes.

    The total number of color matches is the size of the multiset
    intersection, i.e. the sum over all pegs of min(count in code1,
    count in code2). Blacks are the position-wise matches and whites are
    the remainder.

    Args:
        code1 (Code): One code (guess or secret, the result is symmetric).
        code2 (Code): The other code.
    Returns:
        Score: (blacks, whites)
    """
    sum_of_mins = 0
    for peg in ALL_PEGS:
        n1 = code1.count(peg)
        if n1:
            n2 = code2.count(peg)
            sum_of_mins += n1 if n1 < n2 else n2
    blacks = 0
    for a, b in zip(code1, code2):
        if a is b:
            blacks += 1
    return Score(blacks, sum_of_mins - blacks)


def filter_candidates(
    untried: Iterable[Code], guess: Code, score: Score
) -> list[Code]:
    """
    Keep only the codes that would have produced `score` for `guess`.
    The secret always survives this filter. Order is preserved.
    """
    return [code for code in untried if evaluate_score(code, guess) == score]
