import logging

from ..game_logic import GameSession, GameStatus
from .board_widget import BoardWidget
from .geometry import BOARD_PIXELS

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont, QKeySequence
from PySide6.QtCore import Qt, Slot

log = logging.getLogger(__name__)

WINDOW_TITLE = "Tic Tac Toe with MiniMax"

GAME_OVER_MESSAGES = {
    GameStatus.HUMAN_WON: ("you win!", True),
    GameStatus.COMPUTER_WON: ("computer wins!", False),
    GameStatus.DRAW: ("it's a draw!", True),
}


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, session=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.session = session if session is not None else GameSession()
        self.board_widget = BoardWidget(self.session, parent=self)

        self._setup_ui()
        self._update_message("your (O) turn. press R to restart.", is_turn=True)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.set_accept_clicks(True)
        self.resize(BOARD_PIXELS + 40, BOARD_PIXELS + 100)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.setShortcut(QKeySequence("R"))
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence(QKeySequence.StandardKey.Quit))
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label)
        hl.addStretch(1)
        hl.addWidget(self.reset_button)
        self.bottom_layout = hl

    @Slot(str)
    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _handle_game_over(self, status):
        # end game UI updates
        msg, ok = GAME_OVER_MESSAGES[status]
        self._update_message(f"{msg} press R to play again.",
                             is_success=ok, is_error=not ok)
        self.board_widget.set_accept_clicks(False)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # ignore clicks after game over
        if self.session.is_over:
            return
        status = self.session.handle_human_move(r, c)
        if status is None:
            self._update_message("cell taken", is_error=True)
            return
        self.board_widget.update()
        if status.is_terminal:
            self._handle_game_over(status)
        else:
            row, col = self.session.last_computer_move
            self._update_message(f"computer played ({row}, {col}). your turn.",
                                 is_turn=True)

    @Slot()
    def reset_game(self):
        # restart is allowed at any point
        self.session.restart()
        self._update_message("new game, your (O) turn", is_turn=True)
        self.board_widget.set_accept_clicks(True); self.board_widget.update()

    def closeEvent(self, event):
        log.debug("window closed")
        event.accept()
