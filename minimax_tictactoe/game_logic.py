import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Cell
from .engine import best_move

log = logging.getLogger(__name__)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    HUMAN_WON = "human_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"

    @property
    def is_terminal(self):
        return self is not GameStatus.IN_PROGRESS


def evaluate_status(board: Board) -> GameStatus:
    """
    derive the game status from board contents alone
    """
    if board.check_win(Cell.HUMAN):
        return GameStatus.HUMAN_WON
    if board.check_win(Cell.COMPUTER):
        return GameStatus.COMPUTER_WON
    if board.is_full():
        return GameStatus.DRAW
    return GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class SessionSnapshot:
    """
    read-only copy of the session for whoever draws it
    """
    cells: Tuple[Tuple[Cell, ...], ...]
    turn: Cell
    status: GameStatus
    winning_line: Optional[Tuple[Tuple[int, int], ...]] = None
    last_computer_move: Optional[Tuple[int, int]] = None

    @property
    def is_over(self):
        return self.status.is_terminal


class GameSession:
    """
    one game of human vs computer: board, whose turn, and status.
    the human always moves first; the computer answers inside
    handle_human_move
    """
    def __init__(self, board: Optional[Board] = None):
        """
        start on an empty board, or resume from the given position
        """
        self._board = board if board is not None else Board()
        self._turn = Cell.HUMAN
        self._status = evaluate_status(self._board)
        self._last_computer_move = None

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> Cell:
        return self._turn

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def last_computer_move(self):
        return self._last_computer_move

    def handle_human_move(self, row, col) -> Optional[GameStatus]:
        """
        play the human's move and, if the game goes on, the computer's reply.
        returns the new status, or None if the move was rejected
        """
        if self._status.is_terminal or self._turn is not Cell.HUMAN:
            log.debug("move (%s, %s) ignored: game is %s",
                      row, col, self._status.value)
            return None
        if not self._board.is_empty(row, col):
            log.debug("move (%s, %s) ignored: cell out of range or taken",
                      row, col)
            return None

        self._place(row, col, Cell.HUMAN)
        if self._status.is_terminal:
            return self._status   # computer never moves after the end

        move = best_move(self._board)
        if move is not None:
            self._place(move[0], move[1], Cell.COMPUTER)
            self._last_computer_move = move
        return self._status

    def _place(self, row, col, player):
        # apply one accepted move, then recompute status and turn
        self._board.mark(row, col, player)
        self._status = evaluate_status(self._board)
        log.debug("%s -> (%d, %d)\n%s", player.name.lower(), row, col, self._board)
        if self._status.is_terminal:
            log.info("game over: %s", self._status.value)
        else:
            self._turn = player.opponent

    def restart(self):
        """
        clear board and reset flags
        """
        self._board.reset()
        self._turn = Cell.HUMAN
        self._status = GameStatus.IN_PROGRESS
        self._last_computer_move = None
        log.info("new game")

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            cells=self._board.rows(),
            turn=self._turn,
            status=self._status,
            winning_line=self._board.winning_line(),
            last_computer_move=self._last_computer_move,
        )
