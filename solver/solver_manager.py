from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from game.ruleset import DEFAULT_RULES
from game.secret_code import Code
from solver.errors import InvariantViolation
from solver.minimax import Best
from solver.offload import choose_offload
from solver.solver_interface import get_backend
from solver.strategies import ExecutorKind, choose_multi_worker, choose_sequential
from ui.console import log_print

Strategy = Literal["sequential", "multi_worker", "offload"]
STRATEGIES: tuple[str, ...] = ("sequential", "multi_worker", "offload")


@dataclass(frozen=True)
class MinimaxConfig:
    strategy: Strategy = "sequential"
    num_workers: int = DEFAULT_RULES["parallel"]["num_workers"]
    executor: ExecutorKind = "thread"
    # bulk evaluator for the offload strategy
    backend: str = "numpy"
    verbose: bool = False

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy: {self.strategy}. Available: {', '.join(STRATEGIES)}"
            )
        if self.num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {self.num_workers}")


class MinimaxSolver:
    """
    Minimax Guess Selection:
    - for every code of the code space, the worst-case number of candidates
      left over all legal scores
    - best guess = min over worst case, first in enumeration order on ties
    - the search itself runs on the configured strategy

    Attributes:
        cfg: MinimaxConfig

    Methods:
        choose_best(untried): (worst case, code) of the minimax search.
        choose_guess(untried): Next guess for the current candidate set.
    """

    def __init__(self, config: MinimaxConfig | None = None):
        self.cfg = config or MinimaxConfig()

    def log(self, msg: str) -> None:
        if self.cfg.verbose:
            log_print(msg)

    def choose_best(self, untried: Sequence[Code]) -> Best:
        """
        Run the minimax search over the whole code space.

        Args:
            untried: The current candidate set; not modified.
        Returns:
            (worst case count, code)
        """
        if self.cfg.strategy == "sequential":
            return choose_sequential(untried)
        if self.cfg.strategy == "multi_worker":
            return choose_multi_worker(
                untried,
                num_workers=self.cfg.num_workers,
                executor=self.cfg.executor,
                log=self.log if self.cfg.verbose else None,
            )
        return choose_offload(untried, get_backend(self.cfg.backend))

    def choose_guess(self, untried: Sequence[Code]) -> Code:
        """
        Choose the next guess for the candidate set `untried`.

        A single remaining candidate is returned directly without a search.

        Raises:
            InvariantViolation: If `untried` is empty.
        """
        self.log(f"untried.count: {len(untried)}")
        if not untried:
            raise InvariantViolation("No candidates left to choose a guess from.")
        if len(untried) == 1:
            return untried[0]
        _, code = self.choose_best(untried)
        return code
