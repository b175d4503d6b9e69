from __future__ import annotations

import random

from .guess import Turn
from .ruleset import DEFAULT_RULES
from .score import Score, evaluate_score
from .secret_code import Code, random_secret


class Board:
    """Game board holding the secret code; acts as the oracle for the solver."""

    def __init__(self, secret: Code | str | None = None, rules=None):
        """
        Initialize the board with a given ruleset.

        Args:
            secret (Code | str, optional): A fixed secret. If omitted, call
            initialize_game() to draw one at random.
            rules (dict, optional): The ruleset. Defaults to DEFAULT_RULES.
        """
        self.rules = rules or DEFAULT_RULES
        if isinstance(secret, str):
            secret = Code.parse(secret)
        self.secret_code = secret
        self.turns: list[Turn] = []
        self.current_attempt = 0
        self.max_attempts = self.rules.get("max_attempts", 10)
        self.is_over = False
        self.is_won = False

    def initialize_game(self, rng: random.Random | None = None):
        """Set up a new game: generate a secret code and reset state."""
        self.secret_code = random_secret(rng)
        self.reset()

    def reset(self):
        """Clear the history but keep the secret."""
        self.turns = []
        self.current_attempt = 0
        self.is_over = False
        self.is_won = False

    def make_guess(self, guess: Code) -> Score:
        """
        Score a guess against the secret and record the turn.

        Args:
            guess (Code): The guessed code.
        Returns:
            Score: The feedback for the guess.
        Raises:
            RuntimeError: If no secret is set or the game is already over.
        """
        if self.secret_code is None:
            raise RuntimeError("No secret code; call initialize_game() first.")
        if self.is_over:
            raise RuntimeError("The game is already over.")

        score = evaluate_score(self.secret_code, guess)
        self.turns.append(Turn(guess, score))
        self.current_attempt += 1

        if score.indicates_win:
            self.is_won = True
            self.is_over = True
        elif self.remaining_attempts() <= 0:
            self.is_over = True

        return score

    # Boards are passed directly as the solve loop's oracle
    __call__ = make_guess

    def get_feedback_history(self) -> list[tuple[str, str]]:
        """Return the full history of guesses and feedback as strings."""
        return [(str(t.guess), str(t.score)) for t in self.turns]

    def remaining_attempts(self) -> int:
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)

    def reveal_code(self) -> str:
        """Return the secret code (used at the end of the game)."""
        return str(self.secret_code) if self.secret_code else "EMPTY"
