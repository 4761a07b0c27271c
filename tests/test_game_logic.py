import dataclasses

import pytest

from minimax_tictactoe.board import Board, Cell
from minimax_tictactoe.game_logic import (
    GameSession, GameStatus, SessionSnapshot, evaluate_status,
)


@pytest.fixture
def session():
    return GameSession()


def assert_fresh(session):
    assert session.board == Board()
    assert session.turn is Cell.HUMAN
    assert session.status is GameStatus.IN_PROGRESS
    assert session.last_computer_move is None
    assert not session.is_over


def test_new_session(session):
    assert_fresh(session)


def test_center_opening_gets_corner_reply(session):
    status = session.handle_human_move(1, 1)
    assert status is GameStatus.IN_PROGRESS
    assert session.last_computer_move == (0, 0)
    assert session.board.get(0, 0) is Cell.COMPUTER
    assert session.board.count(Cell.COMPUTER) == 1
    assert session.turn is Cell.HUMAN


def test_human_win_stops_the_game():
    session = GameSession(Board.from_rows(["OO.", ".X.", "..."]))
    status = session.handle_human_move(0, 2)
    assert status is GameStatus.HUMAN_WON
    assert session.is_over
    # computer does not answer a winning move
    assert session.board.count(Cell.COMPUTER) == 1
    assert session.last_computer_move is None


def test_computer_completes_diagonal():
    session = GameSession(Board.from_rows(["XO.", "OX.", "..."]))
    status = session.handle_human_move(2, 0)
    assert status is GameStatus.COMPUTER_WON
    assert session.last_computer_move == (2, 2)
    assert session.board.check_win(Cell.COMPUTER)
    assert session.snapshot().winning_line == ((0, 0), (1, 1), (2, 2))


def test_full_board_is_a_draw():
    session = GameSession(Board.from_rows(["OXO", "OXX", "XOO"]))
    assert session.board.is_full()
    assert not session.board.check_win(Cell.HUMAN)
    assert not session.board.check_win(Cell.COMPUTER)
    assert session.status is GameStatus.DRAW


def test_human_fills_last_cell_for_draw():
    session = GameSession(Board.from_rows(["OXO", "OXX", "XO."]))
    assert session.handle_human_move(2, 2) is GameStatus.DRAW
    assert session.last_computer_move is None


def test_computer_fills_last_cell_for_draw():
    session = GameSession(Board.from_rows(["OXO", "OX.", "XO."]))
    assert session.handle_human_move(2, 2) is GameStatus.DRAW
    assert session.last_computer_move == (1, 2)
    assert session.board.is_full()


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 1), (1, -1)])
def test_out_of_range_move_is_ignored(session, row, col):
    assert session.handle_human_move(row, col) is None
    assert_fresh(session)


def test_occupied_cell_is_ignored(session):
    session.handle_human_move(1, 1)
    before = session.snapshot()
    assert session.handle_human_move(1, 1) is None
    assert session.handle_human_move(0, 0) is None  # computer's reply
    assert session.snapshot() == before


def test_terminal_state_is_absorbing():
    session = GameSession(Board.from_rows(["OO.", ".X.", "..."]))
    session.handle_human_move(0, 2)
    before = session.snapshot()
    for row, col in session.board.empty_cells():
        assert session.handle_human_move(row, col) is None
    assert session.snapshot() == before
    assert session.status is GameStatus.HUMAN_WON


@pytest.mark.parametrize("rows", [
    ["...", "...", "..."],
    ["OO.", ".X.", "..."],
    ["OXO", "OXX", "XOO"],
    ["XXX", "OO.", "..."],
])
def test_restart_from_any_state(rows):
    session = GameSession(Board.from_rows(rows))
    session.handle_human_move(0, 2)
    session.restart()
    assert_fresh(session)


def test_restart_mid_game(session):
    session.handle_human_move(0, 0)
    session.restart()
    assert_fresh(session)
    assert session.handle_human_move(1, 1) is GameStatus.IN_PROGRESS


def test_snapshot_is_read_only(session):
    session.handle_human_move(1, 1)
    snap = session.snapshot()
    assert isinstance(snap, SessionSnapshot)
    assert snap.cells[1][1] is Cell.HUMAN
    assert snap.cells[0][0] is Cell.COMPUTER
    assert snap.turn is Cell.HUMAN
    assert snap.status is GameStatus.IN_PROGRESS
    assert snap.last_computer_move == (0, 0)
    assert not snap.is_over
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.status = GameStatus.DRAW
    # later moves do not leak into an old snapshot
    session.handle_human_move(2, 2)
    assert snap.cells[2][2] is Cell.EMPTY


@pytest.mark.parametrize("rows, expected", [
    (["...", "...", "..."], GameStatus.IN_PROGRESS),
    (["O..", "O..", "O.."], GameStatus.HUMAN_WON),
    (["..X", ".X.", "X.."], GameStatus.COMPUTER_WON),
    (["OXO", "OXX", "XOO"], GameStatus.DRAW),
    (["XOX", "XOO", "OXX"], GameStatus.DRAW),
])
def test_evaluate_status(rows, expected):
    assert evaluate_status(Board.from_rows(rows)) is expected


def _play_every_line(board, outcomes):
    # try every human move from this position, then recurse into the reply
    for row, col in board.empty_cells():
        session = GameSession(board.copy())
        humans, computers = board.count(Cell.HUMAN), board.count(Cell.COMPUTER)
        status = session.handle_human_move(row, col)

        assert status is not GameStatus.HUMAN_WON, (row, col, board)
        assert session.board.count(Cell.HUMAN) == humans + 1
        # exactly one committed computer mark, unless the human filled the board
        expected = computers if session.last_computer_move is None else computers + 1
        assert session.board.count(Cell.COMPUTER) == expected

        outcomes[status] = outcomes.get(status, 0) + 1
        if status is GameStatus.IN_PROGRESS:
            assert session.turn is Cell.HUMAN
            _play_every_line(session.board, outcomes)


def test_human_can_never_win():
    outcomes = {}
    _play_every_line(Board(), outcomes)
    assert GameStatus.HUMAN_WON not in outcomes
    assert outcomes[GameStatus.COMPUTER_WON] > 0
    assert outcomes[GameStatus.DRAW] > 0
