from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..board import Cell
from ..game_logic import GameStatus
from .geometry import BOARD_PIXELS, board_square, cell_at, cell_center

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

BACKGROUND_COLOR = QColor(0, 0, 0)
PLAYING_COLOR = QColor(255, 255, 255)
HUMAN_WON_COLOR = QColor(0, 255, 0)
COMPUTER_WON_COLOR = QColor(255, 0, 0)
DRAW_COLOR = QColor(180, 180, 180)
LAST_MOVE_COLOR = QColor("#8acaff")

STATUS_COLORS = {
    GameStatus.IN_PROGRESS: PLAYING_COLOR,
    GameStatus.HUMAN_WON: HUMAN_WON_COLOR,
    GameStatus.COMPUTER_WON: COMPUTER_WON_COLOR,
    GameStatus.DRAW: DRAW_COLOR,
}

GRID_WIDTH = 2
MARK_WIDTH = 4
WIN_LINE_WIDTH = 8
MARK_RADIUS = 1 / 3  # fraction of a cell


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session  # reference to game state, read via snapshot
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def sizeHint(self):
        return QSize(BOARD_PIXELS, BOARD_PIXELS)

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def paintEvent(self, event):
        """
        draw grid and marks, colored by game outcome
        """
        snap = self.session.snapshot()
        color = STATUS_COLORS[snap.status]
        size = len(snap.cells)
        w, h = self.width(), self.height()
        ox, oy, side = board_square(w, h)
        cell = side / size

        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            # grid lines
            painter.setPen(QPen(color, GRID_WIDTH))
            for i in range(1, size):
                x = ox + i * cell
                painter.drawLine(QPointF(x, oy), QPointF(x, oy + side))
                y = oy + i * cell
                painter.drawLine(QPointF(ox, y), QPointF(ox + side, y))
            # marks
            rad = cell * MARK_RADIUS
            for r, row in enumerate(snap.cells):
                for c, sym in enumerate(row):
                    if sym is Cell.EMPTY:
                        continue
                    mark_color = color
                    if not snap.is_over and snap.last_computer_move == (r, c):
                        mark_color = LAST_MOVE_COLOR
                    painter.setPen(QPen(mark_color, MARK_WIDTH))
                    cx, cy = cell_center(r, c, w, h, size)
                    if sym is Cell.COMPUTER:
                        # two crossing lines
                        painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                        painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                    else:
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # strike through the winning line
            if snap.winning_line:
                (r0, c0), (r1, c1) = snap.winning_line[0], snap.winning_line[-1]
                painter.setPen(QPen(color, WIN_LINE_WIDTH, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                painter.drawLine(QPointF(*cell_center(r0, c0, w, h, size)),
                                 QPointF(*cell_center(r1, c1, w, h, size)))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if event.button() != Qt.LeftButton:
            return
        if not self._accept_clicks or self.session.is_over:
            return
        pos = event.position()
        hit = cell_at(pos.x(), pos.y(), self.width(), self.height())
        if hit is None:
            return
        self.cell_clicked.emit(*hit)  # notify main window
