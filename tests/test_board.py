import random

import pytest

from game.board import Board
from game.guess import Turn
from game.score import Score
from game.secret_code import Code


def test_make_guess_scores_and_records():
    board = Board("RGBY")
    assert board.make_guess(Code.parse("RRGG")) == Score(1, 1)
    assert board.turns == [Turn(Code.parse("RRGG"), Score(1, 1))]
    assert board.get_feedback_history() == [("R-R-G-G", "BW")]
    assert not board.is_over

    assert board(Code.parse("RGBY")) == Score(4, 0)
    assert board.is_won and board.is_over
    assert board.current_attempt == 2


def test_no_guess_after_game_over():
    board = Board("RGBY")
    board.make_guess(Code.parse("RGBY"))
    with pytest.raises(RuntimeError):
        board.make_guess(Code.parse("RGBY"))


def test_runs_out_of_attempts():
    board = Board("RGBY", rules={"max_attempts": 2})
    board.make_guess(Code.parse("wwww"))
    board.make_guess(Code.parse("bbbb"))
    assert board.is_over and not board.is_won
    assert board.remaining_attempts() == 0


def test_needs_a_secret():
    with pytest.raises(RuntimeError):
        Board().make_guess(Code.parse("RGBY"))


def test_initialize_game_is_seeded():
    a, b = Board(), Board()
    a.initialize_game(random.Random(3))
    b.initialize_game(random.Random(3))
    assert a.secret_code == b.secret_code
    assert a.reveal_code() == str(a.secret_code)


def test_turn_str():
    assert str(Turn(Code.parse("RRGG"), Score(1, 2))) == "R-R-G-G BWW"
