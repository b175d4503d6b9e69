from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt


def _natural_turn_sort_key(s: str):
    parts = str(s).split()
    return int(parts[-1]) if parts and parts[-1].isdigit() else s


def _annotate_points(ax, xs, ys, *, fmt="{:.2f}", dx=0, dy=6, fontsize=8):
    """
    Annotate points (x, y) on ax with formatted y values.

    Args:
        ax: matplotlib Axes
        xs: list of x coordinates
        ys: list of y coordinates
        fmt: format string for y values
        dx: x offset in points
        dy: y offset in points
        fontsize: font size for annotations
    """

    for x, y in zip(xs, ys):
        if y is None or np.isnan(y):
            continue
        ax.annotate(
            fmt.format(y),
            (x, y),
            textcoords="offset points",
            xytext=(dx, dy),
            ha="center",
            va="center",
            fontsize=fontsize,
        )


def compute_run_stats(games: dict) -> dict:
    """
    Returns a dict with:
      avg/min/max_total_time (float, np.nan if no games)
      avg/min/max_turn_times (list[float]) selection time per turn index
      avg/min/max_turns (float, np.nan if no games)
      turn_counts (np.ndarray), turn_histogram (dict[int, int])
      n_games (int)
    """
    total_time = np.array(games.get("total_time_s", []), dtype=np.float64)
    turns = np.array(games.get("turns", []), dtype=np.int64)

    # Guard against length mismatches
    n = min(len(total_time), len(turns))
    total_time = total_time[:n]
    turns = turns[:n]

    def _stats(values):
        if len(values) == 0:
            return np.nan, np.nan, np.nan
        return float(np.mean(values)), float(np.min(values)), float(np.max(values))

    avg_total_time, min_total_time, max_total_time = _stats(total_time)
    avg_turns, min_turns, max_turns = _stats(turns)

    # avg, min, max selection time per turn index
    turn_headers = sorted(games.get("turn_headers", []), key=_natural_turn_sort_key)
    turn_cols = games.get("turn_time_s_columns", {}) or {}
    avg_turn_times = []
    min_turn_times = []
    max_turn_times = []
    for th in turn_headers:
        vals = [float(t) for t in turn_cols.get(th, [])[:n] if t is not None]
        avg, lo, hi = _stats(vals)
        avg_turn_times.append(avg)
        min_turn_times.append(lo)
        max_turn_times.append(hi)

    values, counts = np.unique(turns, return_counts=True)

    return {
        "n_games": int(n),
        "avg_total_time": avg_total_time,
        "min_total_time": min_total_time,
        "max_total_time": max_total_time,
        "avg_turn_times": avg_turn_times,
        "min_turn_times": min_turn_times,
        "max_turn_times": max_turn_times,
        "avg_turns": avg_turns,
        "min_turns": min_turns,
        "max_turns": max_turns,
        "turn_counts": turns,
        "turn_histogram": {int(v): int(c) for v, c in zip(values, counts)},
    }


def plot_results(runs: dict, outdir) -> list[Path]:
    """
    Render benchmark charts for one or more strategies.

    Args:
        runs: strategy name -> games dict from solver.benchmark.run_benchmark
        outdir: directory for the PNG files (created if missing)
    Returns:
        The paths written.
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # Plot configuration:
    plt.rcParams["lines.solid_capstyle"] = "round"
    plt.rcParams["lines.solid_joinstyle"] = "round"
    plt.rcParams["lines.linewidth"] = 1.0

    written = []
    for strategy, games in runs.items():
        stats = compute_run_stats(games)
        if stats["n_games"] == 0:
            print(f"[skip] No games for {strategy}.")
            continue

        # Plot 1: Distribution of turns per game
        plt.figure(figsize=(10, 6))
        xs = sorted(stats["turn_histogram"])
        ys = [stats["turn_histogram"][x] for x in xs]
        plt.bar(xs, ys, width=0.6)
        _annotate_points(plt.gca(), xs, ys, fmt="{:d}", dy=6)
        plt.title(
            f"Turns per Game ({strategy})\n"
            f"games: {stats['n_games']}, average: {stats['avg_turns']:.3f}, "
            f"max: {int(stats['max_turns'])}"
        )
        plt.xlabel("Turns")
        plt.ylabel("Games")
        plt.xticks(xs)
        plt.grid(True, axis="y")
        out1 = outdir / f"turns_per_game_{strategy}.png"
        plt.savefig(out1, dpi=200, bbox_inches="tight")
        plt.close()
        written.append(out1)

        # Plot 2: Average selection time vs turn number
        y_avg = stats["avg_turn_times"]
        if not y_avg:
            print(f"[info] No turn-time data to plot for {strategy}.")
            continue
        plt.figure(figsize=(12, 8))
        x = np.arange(1, len(y_avg) + 1)
        # Average line with min/max scatter and band
        plt.plot(x, y_avg, marker="o", label="Average Selection Time")
        plt.scatter(x, stats["max_turn_times"], marker="^", s=20, label="Max Selection Time")
        plt.scatter(x, stats["min_turn_times"], marker="v", s=20, label="Min Selection Time")
        plt.fill_between(
            x, stats["min_turn_times"], stats["max_turn_times"], alpha=0.2, label="Min-Max range"
        )
        _annotate_points(plt.gca(), x, y_avg, fmt="{:.3f}s", dy=8)
        plt.title(f"Guess Selection Time per Turn ({strategy})")
        plt.xlabel("Turn Number")
        plt.ylabel("Selection Time (s)")
        plt.xticks(x)
        plt.grid(True)
        plt.legend()
        out2 = outdir / f"selection_time_per_turn_{strategy}.png"
        plt.savefig(out2, dpi=200, bbox_inches="tight")
        plt.close()
        written.append(out2)

    return written
