import pytest

from ui.cli import USAGE_EXIT_CODE, build_parser, main


@pytest.mark.parametrize("argv,strategy", [
    ([], "sequential"),
    (["-st"], "sequential"),
    (["--single-thread"], "sequential"),
    (["-mt"], "multi_worker"),
    (["--multiple-threads"], "multi_worker"),
    (["-off"], "offload"),
    (["--offload"], "offload"),
])
def test_mode_flags(argv, strategy):
    assert build_parser().parse_args(argv).strategy == strategy


@pytest.mark.parametrize("argv", [
    ["-x"],
    ["--metal-compute-shader"],
    ["-st", "-mt"],
    ["--secret", "RGBX"],
    ["--plot-dir", "out"],
    ["--workers", "0"],
])
def test_usage_errors_exit_with_fixed_code(argv, capsys):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == USAGE_EXIT_CODE
    assert "usage:" in capsys.readouterr().err


def test_quiet_play_prints_answer(capsys):
    assert main(["-off", "--secret", "RGBY", "--quiet"]) == 0
    assert capsys.readouterr().out.strip() == "R-G-B-Y"


def test_verbose_play_logs_turns(capsys):
    assert main(["-off", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "guess: R-R-G-G" in out
    assert "turns: " in out


def test_benchmark_with_plots(tmp_path, capsys):
    import matplotlib

    matplotlib.use("Agg")
    assert main(["-off", "--benchmark", "3", "--seed", "5", "--quiet", "--plot-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Games: 3 (offload)" in out
    assert (tmp_path / "turns_per_game_offload.png").exists()
