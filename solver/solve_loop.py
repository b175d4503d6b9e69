"""
Turn-by-turn solve loop.

States: START -> GUESSING -> SCORING -> (WON | GUESSING)

START emits the fixed opening guess against the full code space. GUESSING
submits the current guess to the oracle. SCORING either finishes on a
winning score or narrows the candidate set to the codes consistent with
the score and selects the next guess.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from game.guess import Turn
from game.ruleset import DEFAULT_RULES
from game.score import Score, filter_candidates
from game.secret_code import OPENING_GUESS, Code, all_codes
from solver.errors import InvariantViolation
from solver.solver_manager import MinimaxSolver

# Oracle: knows the secret, returns the score of a guess
Oracle = Callable[[Code], Score]


class SolveState(Enum):
    START = auto()
    GUESSING = auto()
    SCORING = auto()
    WON = auto()


@dataclass(frozen=True)
class SolveResult:
    """
    Outcome of one game.

    Attributes:
        answer: The code that scored a win.
        turns: Every (guess, score) exchange, in order.
        selection_times: Seconds spent choosing each guess (0.0 for the
        opening guess).
        candidate_counts: Size of the candidate set each guess was chosen for.
    """

    answer: Code
    turns: tuple[Turn, ...]
    selection_times: tuple[float, ...]
    candidate_counts: tuple[int, ...]

    @property
    def num_turns(self) -> int:
        return len(self.turns)


def solve(
    attempt: Oracle,
    solver: MinimaxSolver | None = None,
    *,
    rules=None,
) -> SolveResult:
    """
    Play one game against `attempt` until it reports a win.

    Args:
        attempt (Oracle): Returns the score of a guess against the secret.
        solver (MinimaxSolver, optional): Guess selector; sequential by default.
        rules (dict, optional): Ruleset, for the max_attempts guard.
    Returns:
        SolveResult: The answer and the full turn history.
    Raises:
        InvariantViolation: If the candidate set becomes empty (the oracle
        is inconsistent) or the game runs past max_attempts.
    """
    solver = solver or MinimaxSolver()
    rules = rules or DEFAULT_RULES
    max_attempts = rules.get("max_attempts", 10)

    turns: list[Turn] = []
    selection_times: list[float] = []
    candidate_counts: list[int] = []

    state = SolveState.START
    untried: list[Code] = []
    guess: Code = OPENING_GUESS
    score: Score | None = None

    while state is not SolveState.WON:
        if state is SolveState.START:
            untried = list(all_codes())
            guess = OPENING_GUESS
            selection_times.append(0.0)
            candidate_counts.append(len(untried))
            state = SolveState.GUESSING

        elif state is SolveState.GUESSING:
            if len(turns) >= max_attempts:
                raise InvariantViolation(
                    f"No win after {max_attempts} turns; {len(untried)} candidates left."
                )
            score = attempt(guess)
            turns.append(Turn(guess, score))
            solver.log(f"guess: {guess}; score: {score}")
            state = SolveState.SCORING

        elif state is SolveState.SCORING:
            if score.indicates_win:
                state = SolveState.WON
                continue

            untried = filter_candidates(untried, guess, score)
            if not untried:
                raise InvariantViolation(
                    f"No code is consistent with the scores so far: "
                    f"{[str(t) for t in turns]}"
                )

            t0 = time.perf_counter()
            guess = solver.choose_guess(untried)
            selection_times.append(time.perf_counter() - t0)
            candidate_counts.append(len(untried))
            state = SolveState.GUESSING

    solver.log(f"answer: {guess}")
    return SolveResult(
        answer=guess,
        turns=tuple(turns),
        selection_times=tuple(selection_times),
        candidate_counts=tuple(candidate_counts),
    )
