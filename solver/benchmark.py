from __future__ import annotations

import time
from typing import Sequence

from game.board import Board
from game.secret_code import Code, all_codes
from solver.solve_loop import solve
from solver.solver_manager import MinimaxConfig, MinimaxSolver
from ui.console import progress_print


def run_benchmark(
    secrets: Sequence[Code] | None = None,
    config: MinimaxConfig | None = None,
    *,
    progress: bool = False,
) -> dict:
    """
    Solve every secret in `secrets` and collect per-game columns.

    Args:
        secrets: Secrets to play; defaults to the whole code space.
        config: Solver configuration for every game.
        progress: Show an in-place progress line.
    Returns:
        dict with keys:
            strategy (str), secret (list[str]), turns (list[int]),
            total_time_s (list[float]), turn_headers (list[str]),
            turn_time_s_columns (dict[str, list[float | None]]) -- selection
            time per turn index, None where a game had already ended.
    """
    secrets = all_codes() if secrets is None else secrets
    solver = MinimaxSolver(config)

    games = {
        "strategy": solver.cfg.strategy,
        "secret": [],
        "turns": [],
        "total_time_s": [],
    }
    per_game_times: list[tuple[float, ...]] = []

    start = time.perf_counter()
    last_report = start
    total = len(secrets)
    for done, secret in enumerate(secrets, 1):
        board = Board(secret)
        t0 = time.perf_counter()
        result = solve(board, solver)
        games["total_time_s"].append(time.perf_counter() - t0)
        games["secret"].append(secret.as_string())
        games["turns"].append(result.num_turns)
        per_game_times.append(result.selection_times)

        now = time.perf_counter()
        # periodic progress report
        if progress and (now - last_report >= 1.0 or done == total):
            rate = done / max(1e-9, now - start)
            progress_print(f"Progress: {done}/{total} games ({rate:.1f} games/sec)")
            last_report = now

    max_turns = max((len(t) for t in per_game_times), default=0)
    headers = [f"turn {i}" for i in range(1, max_turns + 1)]
    games["turn_headers"] = headers
    games["turn_time_s_columns"] = {
        header: [t[i] if i < len(t) else None for t in per_game_times]
        for i, header in enumerate(headers)
    }
    return games


def summarize(games: dict) -> dict:
    """
    Reduce benchmark columns to avg/min/max turns and total time.
    """
    turns = games["turns"]
    times = games["total_time_s"]
    if not turns:
        raise ValueError("No games to summarize.")
    return {
        "games": len(turns),
        "avg_turns": sum(turns) / len(turns),
        "min_turns": min(turns),
        "max_turns": max(turns),
        "avg_time_s": sum(times) / len(times),
        "min_time_s": min(times),
        "max_time_s": max(times),
        "turn_distribution": {n: turns.count(n) for n in sorted(set(turns))},
    }
