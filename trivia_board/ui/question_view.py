"""Question screen: category, points, question text, optional image and answer reveal."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from trivia_board.core.game import QuestionCard
from trivia_board.ui.colors import BoardColors

logger = logging.getLogger(__name__)

_IMAGE_MAX_HEIGHT = 320


def _button_style(background: str, color: str) -> str:
    return f"""
        QPushButton {{
            background: {background};
            color: {color};
            padding: 10px 22px;
            border: none;
            border-radius: 12px;
            font-weight: 700;
            font-size: 15px;
        }}
        QPushButton:hover {{ border: 2px solid {BoardColors.PRIMARY}; }}
    """


class QuestionView(QWidget):
    """Displays a QuestionCard. Answer visibility follows the card's reveal flags."""

    def __init__(
        self,
        *,
        on_back: Callable[[], None],
        on_reveal: Callable[[], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)

        header = QFrame()
        header.setObjectName("questionHeader")
        header.setStyleSheet(
            f"""
            QFrame#questionHeader {{
                background: {BoardColors.HEADER_BG};
                border: 1px solid {BoardColors.HEADER_BORDER};
                border-radius: 14px;
            }}
            """
        )
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(18, 12, 18, 12)

        self._category_label = QLabel("")
        self._category_label.setStyleSheet(
            f"color: {BoardColors.TEXT_PRIMARY}; font-size: 22px; font-weight: 800; background: transparent;"
        )
        self._points_label = QLabel("")
        self._points_label.setAlignment(Qt.AlignCenter)
        self._points_label.setStyleSheet(
            f"""
            QLabel {{
                background: {BoardColors.PRIMARY};
                color: {BoardColors.BG_BOTTOM};
                border-radius: 14px;
                padding: 4px 16px;
                font-size: 20px;
                font-weight: 900;
            }}
            """
        )
        header_layout.addWidget(self._category_label, 1)
        header_layout.addWidget(self._points_label, 0, Qt.AlignRight)

        self._text_label = QLabel("")
        self._text_label.setAlignment(Qt.AlignCenter)
        self._text_label.setWordWrap(True)
        self._text_label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._text_label.setStyleSheet(
            f"color: {BoardColors.TEXT_PRIMARY}; font-size: 30px; font-weight: 700; background: transparent;"
        )

        self._image_label = QLabel()
        self._image_label.setAlignment(Qt.AlignCenter)
        self._image_label.setVisible(False)

        self._answer_label = QLabel("")
        self._answer_label.setAlignment(Qt.AlignCenter)
        self._answer_label.setWordWrap(True)
        self._answer_label.setStyleSheet(
            f"color: {BoardColors.ANSWER}; font-size: 26px; font-weight: 800; background: transparent;"
        )
        self._answer_label.setVisible(False)

        self._reveal_button = QPushButton("Reveal answer")
        self._reveal_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._reveal_button.setStyleSheet(_button_style(BoardColors.PRIMARY, BoardColors.BG_BOTTOM))
        self._reveal_button.clicked.connect(on_reveal)
        self._reveal_button.setVisible(False)

        back_button = QPushButton("Back to board")
        back_button.setCursor(Qt.CursorShape.PointingHandCursor)
        back_button.setStyleSheet(_button_style(BoardColors.TILE, BoardColors.TEXT_PRIMARY))
        back_button.clicked.connect(on_back)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self._reveal_button)
        buttons.addWidget(back_button)
        buttons.addStretch(1)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(18)
        layout.addWidget(header)
        layout.addWidget(self._text_label, 1)
        layout.addWidget(self._image_label)
        layout.addWidget(self._answer_label)
        layout.addLayout(buttons)

    def show_card(self, card: QuestionCard) -> None:
        self._category_label.setText(card.category_name)
        self._points_label.setText(str(card.points))
        self._text_label.setText(card.text)
        self._set_image(card)

        self._answer_label.setText(card.answer if card.can_reveal else "")
        self._answer_label.setVisible(card.answer_visible)
        self._reveal_button.setVisible(card.reveal_control_visible)

    def _set_image(self, card: QuestionCard) -> None:
        if card.image_path is None:
            self._image_label.clear()
            self._image_label.setVisible(False)
            return
        pixmap = QPixmap(str(card.image_path))
        if pixmap.isNull():
            logger.warning("Could not decode image: %s", card.image_path)
            self._image_label.clear()
            self._image_label.setVisible(False)
            return
        if pixmap.height() > _IMAGE_MAX_HEIGHT:
            pixmap = pixmap.scaledToHeight(_IMAGE_MAX_HEIGHT, Qt.SmoothTransformation)
        self._image_label.setPixmap(pixmap)
        self._image_label.setVisible(True)
