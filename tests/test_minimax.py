import sys

import pytest

from game.score import Score, all_scores, filter_candidates
from game.secret_code import OPENING_GUESS, Code, all_codes
from solver.errors import InvariantViolation
from solver.minimax import best_in_chunk, partition_sizes, reduce_bests, worst_case
from solver.offload import choose_offload
from solver.solver_interface import get_backend
from solver.solver_manager import MinimaxConfig, MinimaxSolver


@pytest.mark.parametrize("guess", ["RRGG", "RGBY", "wwww", "bRbR"])
def test_partition_sizes_conserve_untried(guess):
    untried = all_codes()[::5]
    sizes = partition_sizes(Code.parse(guess), untried)
    assert set(sizes) == set(all_scores())
    assert sum(sizes.values()) == len(untried)
    assert sizes[Score(3, 1)] == 0


def test_worst_case_single_candidate():
    code = Code.parse("RGBY")
    assert worst_case(code, [code]) == 1
    assert worst_case(Code.parse("wwww"), [code]) == 1


def test_best_in_chunk_prefers_first_of_ties():
    untried = [Code.parse("RGBY"), Code.parse("YBGR")]
    chunk = all_codes()[:50]
    count, code = best_in_chunk(untried, chunk)
    first = next(c for c in chunk if worst_case(c, untried) == count)
    assert code == first


def test_best_in_chunk_empty_chunk_never_wins():
    best = best_in_chunk([Code.parse("RGBY")], [])
    assert best[0] == sys.maxsize
    assert reduce_bests([best, (3, Code.parse("RRRR"))]) == (3, Code.parse("RRRR"))


def test_reduce_bests_keeps_chunk_order_on_ties():
    a, b = Code.parse("RRRR"), Code.parse("wwww")
    assert reduce_bests([(5, a), (2, b), (2, a)]) == (2, b)


def test_opening_guess_is_the_minimax_choice_for_full_space():
    # Knuth's opening: worst case 256, first in enumeration order
    assert worst_case(OPENING_GUESS, all_codes()) == 256
    assert choose_offload(all_codes(), get_backend("numpy")) == (256, OPENING_GUESS)


def test_choose_guess_single_candidate_skips_search(monkeypatch):
    solver = MinimaxSolver()

    def fail(untried):
        raise AssertionError("search should not run")

    monkeypatch.setattr(solver, "choose_best", fail)
    only = Code.parse("bYwG")
    assert solver.choose_guess([only]) == only


def test_choose_guess_empty_raises():
    with pytest.raises(InvariantViolation):
        MinimaxSolver().choose_guess([])


def test_choose_guess_returns_minimax_code():
    untried = filter_candidates(all_codes(), OPENING_GUESS, Score(0, 0))
    guess = MinimaxSolver(MinimaxConfig(strategy="offload")).choose_guess(untried)
    count, _ = choose_offload(untried, get_backend("numpy"))
    assert worst_case(guess, untried) == count
    assert count < len(untried)


@pytest.mark.parametrize("kwargs", [
    {"strategy": "gpu"},
    {"num_workers": 0},
])
def test_config_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        MinimaxConfig(**kwargs)
