"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_QUESTIONS_PATH = Path(__file__).resolve().parent / "data" / "questions.json"


def default_state_file() -> Path:
    return Path.home() / ".trivia_board" / "state.json"


@dataclass(frozen=True)
class Settings:
    questions_path: Path
    state_file: Path
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        questions = env.get("TRIVIA_BOARD_QUESTIONS")
        state_file = env.get("TRIVIA_BOARD_STATE_FILE")
        return cls(
            questions_path=Path(questions).expanduser() if questions else DEFAULT_QUESTIONS_PATH,
            state_file=Path(state_file).expanduser() if state_file else default_state_file(),
            log_level=_parse_log_level(env.get("TRIVIA_BOARD_LOG_LEVEL", "")),
        )


def _parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper()) if name else logging.INFO
    return level if isinstance(level, int) else logging.INFO
