from __future__ import annotations

from dataclasses import dataclass

from .score import Score
from .secret_code import Code


@dataclass(frozen=True)
class Turn:
    """
    One exchange with the oracle: the guess made and the score received.

    Attributes:
        guess (Code): The guessed code.
        score (Score): The feedback for the guess.
    """

    guess: Code
    score: Score

    @property
    def is_win(self) -> bool:
        return self.score.indicates_win

    def as_string(self) -> str:
        """Return e.g. 'R-R-G-G BW'."""
        return f"{self.guess} {self.score}"

    def __str__(self):
        return self.as_string()
