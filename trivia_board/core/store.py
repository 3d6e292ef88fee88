from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

logger = logging.getLogger(__name__)

_TILE_ID_RE = re.compile(r"^\d+-\d+$")


@dataclass
class PersistedState:
    used_tiles: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"usedTiles": list(self.used_tiles)}


def normalize_state(payload: Any) -> PersistedState:
    """Coerce an untrusted payload into a PersistedState, dropping anything malformed."""
    if not isinstance(payload, dict):
        return PersistedState()
    raw = payload.get("usedTiles")
    if not isinstance(raw, list):
        return PersistedState()
    tiles: List[str] = []
    for item in raw:
        if isinstance(item, str) and _TILE_ID_RE.match(item) and item not in tiles:
            tiles.append(item)
    return PersistedState(used_tiles=tiles)


class StateStore:
    """Stores the used-tile set. Persists to disk across app restarts.
    Default file: ~/.trivia_board/state.json. Cleared only when the board is reset."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> PersistedState:
        if not self._file_path.exists():
            return PersistedState()
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError, OSError) as e:
            logger.warning("Could not load board state from %s: %s", self._file_path, e)
            return PersistedState()
        return normalize_state(payload)

    def save(self, state: PersistedState) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(state.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save board state to %s: %s", self._file_path, e)
