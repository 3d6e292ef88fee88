from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QEventLoop, Qt
from PySide6.QtGui import QCloseEvent, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_board.core.board import TileState
from trivia_board.core.game import GameController, QuestionCard, Screen
from trivia_board.ui.board_view import BoardView
from trivia_board.ui.colors import BoardColors
from trivia_board.ui.custom_overlay import ResetConfirmOverlay
from trivia_board.ui.question_view import QuestionView


class MainWindow(QMainWindow):
    """Hosts the board and question screens and acts as the controller's view and confirmer.

    The controller decides what is shown; this window only draws what it is
    told and forwards clicks back.
    """

    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self._controller = controller
        self._stack: Optional[QStackedWidget] = None
        self._board_view: Optional[BoardView] = None
        self._question_view: Optional[QuestionView] = None
        self._reset_overlay: Optional[ResetConfirmOverlay] = None

        self._build_ui()
        self._controller.attach(view=self, confirmer=self)

    def _build_ui(self) -> None:
        self.setWindowTitle("Trivia Board")
        self.setMinimumSize(960, 640)
        self.setStyleSheet(
            f"""
            QMainWindow {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {BoardColors.BG_TOP}, stop:1 {BoardColors.BG_BOTTOM});
            }}
            """
        )

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        header_row = QHBoxLayout()
        title = QLabel("Trivia Board")
        title.setStyleSheet(f"color: {BoardColors.PRIMARY}; font-size: 28px; font-weight: 900;")
        reset_btn = QPushButton("Reset game")
        reset_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        reset_btn.setStyleSheet(
            f"""
            QPushButton {{
                background: {BoardColors.HEADER_BG};
                color: {BoardColors.TEXT_SECONDARY};
                border: 1px solid {BoardColors.HEADER_BORDER};
                border-radius: 10px;
                padding: 8px 16px;
                font-weight: 700;
            }}
            QPushButton:hover {{ color: {BoardColors.PRIMARY}; border-color: {BoardColors.PRIMARY}; }}
            """
        )
        reset_btn.clicked.connect(self._controller.reset_all)
        header_row.addWidget(title, 1)
        header_row.addWidget(reset_btn, 0, Qt.AlignRight)
        layout.addLayout(header_row)

        self._stack = QStackedWidget()
        self._board_view = BoardView(on_tile_clicked=self._controller.select_tile)
        self._question_view = QuestionView(
            on_back=self._controller.show_board,
            on_reveal=self._controller.reveal_answer,
        )
        self._stack.addWidget(self._board_view)
        self._stack.addWidget(self._question_view)
        layout.addWidget(self._stack, 1)
        self.setCentralWidget(central)

        self._reset_overlay = ResetConfirmOverlay(central)
        self._reset_overlay.hide()

        back_shortcut = QShortcut(QKeySequence(Qt.Key.Key_Escape), self)
        back_shortcut.activated.connect(self._on_escape)

    def render_board(self, tiles: List[TileState], category_names: List[str]) -> None:
        self._board_view.render(tiles, category_names)

    def render_question(self, card: QuestionCard) -> None:
        self._question_view.show_card(card)

    def switch_to(self, screen: Screen) -> None:
        if screen is Screen.QUESTION:
            self._stack.setCurrentWidget(self._question_view)
        else:
            self._stack.setCurrentWidget(self._board_view)

    def confirm(self, message: str) -> bool:
        """Show the reset overlay and block in a nested event loop until it closes."""
        overlay = self._reset_overlay
        overlay.set_message(message)
        overlay.raise_()
        overlay.show()
        confirmed = [False]

        def on_closed(ok: bool) -> None:
            confirmed[0] = ok
            loop.quit()

        loop = QEventLoop()
        overlay.closed.connect(on_closed)
        loop.exec()
        overlay.closed.disconnect(on_closed)
        return confirmed[0]

    def _on_escape(self) -> None:
        if self._controller.screen is Screen.QUESTION:
            self._controller.show_board()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Write the board state once more on exit."""
        self._controller.store.save(self._controller.board.snapshot())
        super().closeEvent(event)
