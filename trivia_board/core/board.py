from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from trivia_board.core.questions import BOARD_COLUMNS, BOARD_ROWS, points_for_row
from trivia_board.core.store import PersistedState, StateStore


def tile_id(column: int, row: int) -> str:
    return f"{column}-{row}"


@dataclass(frozen=True)
class TileState:
    """What the board draws for one cell."""

    tile_id: str
    column: int
    row: int
    points: int
    used: bool

    @property
    def clickable(self) -> bool:
        return not self.used


class BoardState:
    """Tiles used in the current game. Every mutation is written through to the store."""

    def __init__(self, store: StateStore) -> None:
        self._store = store
        self._used: List[str] = []

    @property
    def used_tiles(self) -> Tuple[str, ...]:
        return tuple(self._used)

    def hydrate(self, persisted: PersistedState) -> None:
        self._used = list(dict.fromkeys(persisted.used_tiles))

    def is_used(self, tile: str) -> bool:
        return tile in self._used

    def mark_used(self, tile: str) -> bool:
        """Record *tile* as used. Returns False (and skips the write) if it already was."""
        if tile in self._used:
            return False
        self._used.append(tile)
        self._save()
        return True

    def reset(self) -> None:
        self._used = []
        self._save()

    def snapshot(self) -> PersistedState:
        return PersistedState(used_tiles=list(self._used))

    def _save(self) -> None:
        self._store.save(self.snapshot())


def build_tiles(
    board: BoardState,
    columns: int = BOARD_COLUMNS,
    rows: int = BOARD_ROWS,
) -> List[TileState]:
    """Row-major tile layout: all columns of row 0, then row 1, and so on."""
    tiles: List[TileState] = []
    for row in range(rows):
        for column in range(columns):
            key = tile_id(column, row)
            tiles.append(
                TileState(
                    tile_id=key,
                    column=column,
                    row=row,
                    points=points_for_row(row),
                    used=board.is_used(key),
                )
            )
    return tiles
