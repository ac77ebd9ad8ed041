"""
Tests for the game session, move validation, board strings and stats.

Usage:
    pytest test_game_state.py
"""

import pytest

from engine.errors import (
    MalformedBoardError,
    PreconditionViolation,
    IdenticalMarksError,
)
from engine.game_state import (
    GameState,
    Mark,
    Move,
    new_board,
    empty_cells,
    parse_board,
    format_board,
    index_to_cell,
    cell_to_index,
)
from engine.move_validator import MoveValidator
from engine.stats import GameStats
from engine.win_checker import WinChecker


def test_mark_opposite():
    assert Mark.X.opposite() == Mark.O
    assert Mark.O.opposite() == Mark.X


def test_new_board_is_empty():
    board = new_board()
    assert board == [None] * 9
    assert empty_cells(board) == list(range(9))
    assert len(new_board(4)) == 16


def test_parse_and_format_board():
    board = parse_board("XX_OO____")
    assert board[:5] == [Mark.X, Mark.X, None, Mark.O, Mark.O]
    assert empty_cells(board) == [2, 5, 6, 7, 8]
    assert format_board(board) == "XX_OO____"

    # Separators, lowercase and other empty symbols
    assert parse_board("xx.|oo-|   ") == board


def test_parse_board_rejects_bad_input():
    with pytest.raises(MalformedBoardError):
        parse_board("XX_OO___")
    with pytest.raises(MalformedBoardError):
        parse_board("XX_OO_____")
    with pytest.raises(MalformedBoardError):
        parse_board("XX_OO___Z")


def test_index_conversion():
    assert index_to_cell(0) == (0, 0)
    assert index_to_cell(5) == (1, 2)
    assert index_to_cell(8) == (2, 2)
    assert all(cell_to_index(*index_to_cell(i)) == i for i in range(9))


def test_turns_alternate_x_first():
    game = GameState()
    assert game.current_player == Mark.X

    for index in range(9):
        assert game.make_move(index)

    assert format_board(game.board) == "XOXOXOXOX"
    assert game.current_player == Mark.O
    assert [move.index for move in game.moves] == list(range(9))
    assert game.moves[0] == Move(player=Mark.X, index=0, move_number=0)
    assert game.moves[8].move_number == 8


def test_occupied_cell_rejected(capsys):
    game = GameState()
    assert game.make_move(1)
    assert not game.make_move(1)
    assert "already occupied" in capsys.readouterr().out

    assert game.board[1] == Mark.X
    assert game.current_player == Mark.O
    assert len(game.moves) == 1


def test_off_board_move_rejected():
    game = GameState()
    assert not game.make_move(9)
    assert not game.make_move(-1)
    assert game.board == new_board()


def test_no_moves_after_game_over():
    game = GameState()
    checker = WinChecker()
    for index in (0, 3, 1, 4, 2):
        game.make_move(index)
        checker.update_game_state(game)

    assert game.is_game_over
    assert not game.make_move(8)
    assert game.board[8] is None


def test_reset():
    game = GameState()
    game.make_move(4)
    game.make_move(0)
    game.is_game_over = True

    game.reset()

    assert game.board == new_board()
    assert game.current_player == Mark.X
    assert game.moves == []
    assert not game.is_game_over
    assert game.winner is None


def test_copy_is_independent():
    game = GameState()
    game.make_move(4)

    clone = game.copy()
    clone.make_move(0)

    assert game.board[0] is None
    assert len(game.moves) == 1
    assert clone.board[0] == Mark.O


def test_print_board(capsys):
    game = GameState()
    game.make_move(4)
    game.print_board()

    out = capsys.readouterr().out
    assert " 1 | 2 | 3" in out
    assert " 4 | X | 6" in out
    assert "Current turn: O" in out


def test_validate_move():
    validator = MoveValidator()
    game = GameState()

    assert validator.validate_move(game, 4).is_valid

    game.make_move(4)
    result = validator.validate_move(game, 4)
    assert not result.is_valid
    assert "occupied by X" in result.error_message

    result = validator.validate_move(game, 9)
    assert not result.is_valid
    assert "Invalid position" in result.error_message

    game.is_game_over = True
    result = validator.validate_move(game, 0)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"


def test_get_valid_moves():
    validator = MoveValidator()
    game = GameState()
    game.make_move(0)
    game.make_move(8)

    assert validator.get_valid_moves(game) == [1, 2, 3, 4, 5, 6, 7]

    game.is_game_over = True
    assert validator.get_valid_moves(game) == []


def test_check_board():
    validator = MoveValidator()
    validator.check_board(new_board())
    validator.check_board(tuple(parse_board("XO_______")))

    with pytest.raises(MalformedBoardError):
        validator.check_board(new_board(4))
    with pytest.raises(MalformedBoardError):
        validator.check_board([None] * 8 + ["O"])
    with pytest.raises(MalformedBoardError):
        validator.check_board(42)

    MoveValidator(size=4).check_board(new_board(4))


def test_check_marks():
    validator = MoveValidator()
    validator.check_marks(Mark.X, Mark.O)

    with pytest.raises(IdenticalMarksError):
        validator.check_marks(Mark.O, Mark.O)
    with pytest.raises(PreconditionViolation):
        validator.check_marks("X", Mark.O)
    with pytest.raises(PreconditionViolation):
        validator.check_marks(Mark.X, None)


def test_stats_record():
    stats = GameStats(Mark.X)
    for winner in (Mark.X, Mark.O, None, Mark.X):
        stats.record(winner)

    assert stats.as_dict() == {"won": 2, "lost": 1, "draw": 1}
    assert stats.total == 4
    assert stats.summary() == "Won: 2  Lost: 1  Draw: 1"


def test_stats_record_game():
    stats = GameStats(Mark.O)
    game = GameState()

    assert not stats.record_game(game)

    for index in (0, 3, 1, 4, 2):
        game.make_move(index)
    WinChecker().update_game_state(game)

    assert stats.record_game(game)
    assert stats.lost == 1
    assert stats.total == 1
