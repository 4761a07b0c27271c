"""
computer opponent: exhaustive minimax over the 3x3 board

The computer is always the maximizing side and the human the minimizing
side. A computer win scores +inf, a human win -inf and a draw 0. There is
no pruning, memoization or depth limit, and depth does not break ties:
equal scores keep the first move found in row-major order.
"""
import logging
import math

from .board import Board, Cell

log = logging.getLogger(__name__)

WIN_SCORE = math.inf
LOSS_SCORE = -math.inf
DRAW_SCORE = 0


def minimax(board: Board, maximizing: bool) -> float:
    """
    score a position assuming both sides play perfectly from here;
    the board is left exactly as it was found
    """
    # terminal checks, computer first
    if board.check_win(Cell.COMPUTER):
        return WIN_SCORE
    if board.check_win(Cell.HUMAN):
        return LOSS_SCORE
    if board.is_full():
        return DRAW_SCORE

    if maximizing:
        best_score = LOSS_SCORE
        for row, col in board.empty_cells():
            with board.speculate(row, col, Cell.COMPUTER):
                score = minimax(board, False)
            best_score = max(score, best_score)
        return best_score

    best_score = WIN_SCORE
    for row, col in board.empty_cells():
        with board.speculate(row, col, Cell.HUMAN):
            score = minimax(board, True)
        best_score = min(score, best_score)
    return best_score


def best_move(board: Board):
    """
    pick the computer's move: (row, col), or None on a full board
    """
    candidates = board.empty_cells()
    if not candidates:
        return None

    # a move is always returned, even when every line of play loses
    best = candidates[0]
    best_score = None
    for row, col in candidates:
        with board.speculate(row, col, Cell.COMPUTER):
            score = minimax(board, False)
        if best_score is None or score > best_score:
            best_score = score
            best = (row, col)

    log.debug("computer picks %s (score %s) out of %d moves",
              best, best_score, len(candidates))
    return best
