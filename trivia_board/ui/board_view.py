"""Board screen: category header row and the grid of point tiles."""

from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QGraphicsDropShadowEffect,
    QGridLayout,
    QLabel,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from trivia_board.core.board import TileState
from trivia_board.ui.colors import BoardColors, blend_hex


class TileCard(QWidget):
    """One point tile. Only unused tiles react to clicks."""

    def __init__(
        self,
        state: TileState,
        *,
        on_click: Callable[[int, int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._state = state
        self._on_click = on_click

        self.setObjectName("tileCard")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_Hover, True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(120, 80)
        self.setProperty("tileId", state.tile_id)
        if state.clickable:
            self.setCursor(Qt.CursorShape.PointingHandCursor)

        self._value = QLabel(str(state.points))
        self._value.setObjectName("tileValue")
        self._value.setAlignment(Qt.AlignCenter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.addWidget(self._value, 1)

        if state.clickable:
            shadow = QGraphicsDropShadowEffect(self)
            shadow.setBlurRadius(18)
            shadow.setOffset(0, 6)
            shadow.setColor(QColor(0, 0, 0, 110))
            self.setGraphicsEffect(shadow)

        self._apply_styles()

    @property
    def state(self) -> TileState:
        return self._state

    def _apply_styles(self) -> None:
        base = BoardColors.TILE_USED if self._state.used else BoardColors.TILE
        top = blend_hex(base, "#FFFFFF", 0.12)
        bottom = blend_hex(base, "#000000", 0.15)
        value_color = BoardColors.VALUE_USED if self._state.used else BoardColors.VALUE
        hover = "" if self._state.used else (
            "QWidget#tileCard:hover { border: 2px solid rgba(255, 204, 51, 0.85); }"
        )
        self.setStyleSheet(
            f"""
            QWidget#tileCard {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {top},
                    stop:1 {bottom}
                );
                border-radius: 12px;
                border: 2px solid rgba(255, 255, 255, 0.18);
            }}
            {hover}
            QLabel#tileValue {{
                color: {value_color};
                background: transparent;
                font-weight: 900;
                font-size: 32px;
            }}
            """
        )

    def mousePressEvent(self, event) -> None:
        if self._state.clickable:
            self._on_click(self._state.column, self._state.row)
        super().mousePressEvent(event)


class BoardView(QWidget):
    """Grid of TileCards. Each render rebuilds the whole grid."""

    def __init__(
        self,
        *,
        on_tile_clicked: Callable[[int, int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._on_tile_clicked = on_tile_clicked
        self._tiles: List[TileCard] = []
        self._headers: List[QLabel] = []

        self._grid = QGridLayout(self)
        self._grid.setContentsMargins(16, 16, 16, 16)
        self._grid.setHorizontalSpacing(12)
        self._grid.setVerticalSpacing(12)

    @property
    def tiles(self) -> List[TileCard]:
        return list(self._tiles)

    def render(self, tiles: List[TileState], category_names: List[str]) -> None:
        self._clear()

        for column, name in enumerate(category_names):
            header = QLabel(name)
            header.setAlignment(Qt.AlignCenter)
            header.setWordWrap(True)
            header.setMinimumHeight(56)
            header.setStyleSheet(
                f"""
                QLabel {{
                    background: {BoardColors.HEADER_BG};
                    border: 1px solid {BoardColors.HEADER_BORDER};
                    border-radius: 10px;
                    color: {BoardColors.TEXT_PRIMARY};
                    font-size: 16px;
                    font-weight: 800;
                    padding: 6px;
                }}
                """
            )
            self._grid.addWidget(header, 0, column)
            self._headers.append(header)

        for state in tiles:
            card = TileCard(state, on_click=self._on_tile_clicked, parent=self)
            self._grid.addWidget(card, state.row + 1, state.column)
            self._tiles.append(card)

        for row in range(1, self._grid.rowCount()):
            self._grid.setRowStretch(row, 1)

    def _clear(self) -> None:
        while self._grid.count():
            item = self._grid.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()
        self._tiles = []
        self._headers = []
