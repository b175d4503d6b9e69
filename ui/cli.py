# Command-line interface: pick an execution strategy and let the solver play

from __future__ import annotations

import argparse
import random
import sys

from game.board import Board
from game.ruleset import DEFAULT_RULES
from game.secret_code import Code, all_codes
from plot.plot import plot_results
from solver.benchmark import run_benchmark, summarize
from solver.solve_loop import solve
from solver.solver_interface import BACKENDS
from solver.solver_manager import MinimaxConfig, MinimaxSolver
from ui.console import log_print

USAGE_EXIT_CODE = 1


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        sys.stderr.write(f"{self.prog}: error: {message}\n")
        sys.exit(USAGE_EXIT_CODE)


def build_parser() -> argparse.ArgumentParser:
    colors = ", ".join(
        f"{c}={DEFAULT_RULES['display']['names'][c]}" for c in DEFAULT_RULES["colors"]
    )
    ap = _Parser(
        prog="mastermind",
        description="Mastermind minimax solver",
    )
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument(
        "-st", "--single-thread", dest="strategy", action="store_const",
        const="sequential", help="sequential scan (default)",
    )
    mode.add_argument(
        "-mt", "--multiple-threads", dest="strategy", action="store_const",
        const="multi_worker", help="fork-join over chunks of the code space",
    )
    mode.add_argument(
        "-off", "--offload", dest="strategy", action="store_const",
        const="offload", help="one bulk batch on the offload backend",
    )
    ap.set_defaults(strategy="sequential")

    ap.add_argument("--secret", help=f"fixed secret code, e.g. RGBY ({colors})")
    ap.add_argument("--seed", type=int, help="seed for the random secret")
    ap.add_argument(
        "--workers", type=int, default=DEFAULT_RULES["parallel"]["num_workers"],
        help="workers for --multiple-threads",
    )
    ap.add_argument(
        "--processes", action="store_true",
        help="use a process pool instead of threads for --multiple-threads",
    )
    ap.add_argument(
        "--backend", choices=sorted(BACKENDS), default="numpy",
        help="bulk evaluator for --offload",
    )
    ap.add_argument(
        "--benchmark", type=int, nargs="?", const=0, default=None, metavar="N",
        help="solve N random secrets (all 1296 if N is omitted) and report statistics",
    )
    ap.add_argument("--plot-dir", help="write benchmark charts to this directory")
    ap.add_argument("--quiet", action="store_true", help="only print the answer")
    return ap


def config_from_args(args) -> MinimaxConfig:
    if args.workers < 1:
        raise ValueError(f"--workers must be >= 1, got {args.workers}")
    return MinimaxConfig(
        strategy=args.strategy,
        num_workers=args.workers,
        executor="process" if args.processes else "thread",
        backend=args.backend,
        verbose=not args.quiet and args.benchmark is None,
    )


def play(args, config: MinimaxConfig) -> int:
    board = Board(args.secret)
    if board.secret_code is None:
        board.initialize_game(random.Random(args.seed))

    result = solve(board, MinimaxSolver(config))
    if args.quiet:
        print(result.answer)
    else:
        log_print(f"turns: {result.num_turns}")
    return 0


def benchmark(args, config: MinimaxConfig) -> int:
    secrets = list(all_codes())
    if args.benchmark:
        secrets = random.Random(args.seed).sample(secrets, min(args.benchmark, len(secrets)))

    games = run_benchmark(secrets, config, progress=not args.quiet)
    stats = summarize(games)
    log_print(
        f"Games: {stats['games']} ({config.strategy})\n"
        f"Average attempts: {stats['avg_turns']:.3f}\n"
        f"Min attempts: {stats['min_turns']}\n"
        f"Max attempts: {stats['max_turns']}\n"
        f"Turn distribution: {stats['turn_distribution']}\n"
        f"Average time: {stats['avg_time_s']:.3f} seconds\n"
        f"Min time: {stats['min_time_s']:.3f} seconds\n"
        f"Max time: {stats['max_time_s']:.3f} seconds"
    )

    if args.plot_dir:
        for path in plot_results({config.strategy: games}, args.plot_dir):
            log_print(f"Wrote: {path}")
    return 0


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.secret is not None:
        try:
            args.secret = Code.parse(args.secret)
        except ValueError as e:
            ap.error(str(e))
    if args.plot_dir and args.benchmark is None:
        ap.error("--plot-dir requires --benchmark")

    try:
        config = config_from_args(args)
    except ValueError as e:
        ap.error(str(e))

    if args.benchmark is not None:
        return benchmark(args, config)
    return play(args, config)
