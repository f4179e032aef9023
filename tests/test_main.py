# tests/test_main.py
from __future__ import annotations

import pytest

from main import parse_args, wanted_interval
from tetris_config import CONFIG
from tetris_game import Command, TetrisGame
from tetris_rng import SequenceRandom


def make_game(**kwargs) -> TetrisGame:
    return TetrisGame(rng=SequenceRandom(["O", "T", "I"]), **kwargs)


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.seed is None
    assert args.log_level == "info"
    assert args.cell_size == CONFIG["CELL_SIZE"]
    assert args.high_score_file == CONFIG["HIGH_SCORE_FILE"]


def test_parse_args_overrides() -> None:
    args = parse_args(["--seed", "3", "--log-level", "debug", "--cell-size", "20", "--high-score-file", "hs.txt"])
    assert args.seed == 3
    assert args.log_level == "debug"
    assert args.cell_size == 20
    assert args.high_score_file == "hs.txt"


def test_parse_args_rejects_unknown_level() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "loud"])


def test_timer_runs_only_while_playing() -> None:
    game = make_game()
    assert wanted_interval(game) == 800

    game.toggle_pause()
    assert wanted_interval(game) == 0
    game.toggle_pause()
    assert wanted_interval(game) == 800

    game.apply_score(4)
    game.apply_score(4)
    game.apply_score(2)
    assert game.level == 2
    assert wanted_interval(game) == 720

    game.handle(Command.QUIT)
    assert wanted_interval(game) == 0


def test_timer_stopped_on_title_screen_and_after_game_over() -> None:
    game = make_game(wait_for_start=True)
    assert wanted_interval(game) == 0
    game.start()
    assert wanted_interval(game) == 800

    game.board[0] = ["Z"] * game.cols
    game.spawn_piece()
    assert game.over
    assert wanted_interval(game) == 0
