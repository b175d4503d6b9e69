import matplotlib

matplotlib.use("Agg")

import numpy as np

from game.secret_code import Code
from plot.plot import compute_run_stats, plot_results
from solver.benchmark import run_benchmark, summarize
from solver.solver_manager import MinimaxConfig

SECRETS = [Code.parse(s) for s in ("RRGG", "RGBY", "wwww", "bYbY")]


def _games():
    return run_benchmark(SECRETS, MinimaxConfig(strategy="offload"))


def test_run_benchmark_columns():
    games = _games()
    assert games["strategy"] == "offload"
    assert games["secret"] == ["RRGG", "RGBY", "wwww", "bYbY"]
    assert games["turns"][0] == 1
    assert len(games["total_time_s"]) == 4
    assert games["turn_headers"][0] == "turn 1"
    assert len(games["turn_headers"]) == max(games["turns"])
    col = games["turn_time_s_columns"]["turn 2"]
    assert col[0] is None
    assert all(t is not None for t in col[1:])


def test_summarize():
    stats = summarize({"turns": [1, 4, 5, 4], "total_time_s": [0.5, 1.0, 1.5, 1.0]})
    assert stats["games"] == 4
    assert stats["avg_turns"] == 3.5
    assert stats["min_turns"] == 1 and stats["max_turns"] == 5
    assert stats["avg_time_s"] == 1.0
    assert stats["turn_distribution"] == {1: 1, 4: 2, 5: 1}


def test_compute_run_stats():
    games = {
        "turns": [1, 3, 3],
        "total_time_s": [0.1, 0.2, 0.3],
        "turn_headers": ["turn 2", "turn 1", "turn 3"],
        "turn_time_s_columns": {
            "turn 1": [0.0, 0.0, 0.0],
            "turn 2": [None, 1.0, 3.0],
            "turn 3": [None, 0.5, 0.5],
        },
    }
    stats = compute_run_stats(games)
    assert stats["n_games"] == 3
    assert stats["avg_turn_times"] == [0.0, 2.0, 0.5]
    assert stats["max_turn_times"][1] == 3.0
    assert stats["turn_histogram"] == {1: 1, 3: 2}
    assert np.isclose(stats["avg_total_time"], 0.2)


def test_compute_run_stats_empty():
    stats = compute_run_stats({})
    assert stats["n_games"] == 0
    assert np.isnan(stats["avg_turns"])


def test_plot_results_writes_pngs(tmp_path):
    paths = plot_results({"offload": _games()}, tmp_path / "charts")
    assert [p.name for p in paths] == [
        "turns_per_game_offload.png",
        "selection_time_per_turn_offload.png",
    ]
    assert all(p.stat().st_size > 0 for p in paths)
