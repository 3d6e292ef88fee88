"""In-window confirmation overlay used for resetting the board."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from trivia_board.ui.colors import BoardColors


def _card_container(object_name: str = "overlayContainer") -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(400)
    container.setMaximumWidth(480)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: {BoardColors.BG_TOP};
            border: 2px solid {BoardColors.PRIMARY};
            border-radius: 18px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(24)
    shadow.setOffset(0, 8)
    shadow.setColor(QColor(0, 0, 0, 120))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.45);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


def _button(text: str, background: str, color: str) -> QPushButton:
    btn = QPushButton(text)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
    btn.setStyleSheet(
        f"""
        QPushButton {{
            background: {background};
            color: {color};
            padding: 10px 16px;
            border: none;
            border-radius: 12px;
            font-weight: 700;
            font-size: 14px;
        }}
        QPushButton:hover {{ border: 2px solid {BoardColors.TEXT_PRIMARY}; }}
        """
    )
    return btn


class ResetConfirmOverlay(QWidget):
    """Asks the player to confirm a board reset. Clicking outside the card cancels."""

    closed = Signal(bool)  # True if the player confirmed

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(_overlay_background(self, lambda: self._finish(False)), 0, 0)

        container = _card_container("resetContainer")
        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(18)

        title = QLabel("Reset game")
        title.setStyleSheet(f"color: {BoardColors.PRIMARY}; font-size: 20px; font-weight: 800;")
        content.addWidget(title)

        self._message = QLabel("")
        self._message.setStyleSheet(f"color: {BoardColors.TEXT_PRIMARY}; font-size: 14px;")
        self._message.setWordWrap(True)
        content.addWidget(self._message)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)
        cancel_btn = _button("Cancel", BoardColors.TILE_USED, BoardColors.TEXT_PRIMARY)
        cancel_btn.clicked.connect(lambda: self._finish(False))
        confirm_btn = _button("Reset", BoardColors.PRIMARY, BoardColors.BG_BOTTOM)
        confirm_btn.clicked.connect(lambda: self._finish(True))
        btn_row.addWidget(cancel_btn, 1)
        btn_row.addWidget(confirm_btn, 1)
        content.addLayout(btn_row)

        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)

    def set_message(self, message: str) -> None:
        self._message.setText(message)

    def _finish(self, confirmed: bool) -> None:
        self.hide()
        self.closed.emit(confirmed)

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
