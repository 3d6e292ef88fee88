from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

BOARD_COLUMNS = 5
BOARD_ROWS = 4


def points_for_row(row: int) -> int:
    """Point value shown for a board row (0-based). This is the authoritative value."""
    return (row + 1) * 10


@dataclass(frozen=True)
class Question:
    points: int
    text: str
    answer: str = ""
    image: Optional[str] = None


@dataclass(frozen=True)
class Category:
    name: str
    questions: Tuple[Question, ...] = ()
    is_activity: bool = False


@dataclass(frozen=True)
class Dataset:
    categories: Tuple[Category, ...] = ()
    base_dir: Optional[Path] = field(default=None, compare=False)

    @classmethod
    def empty(cls) -> "Dataset":
        return cls(categories=())

    def category(self, column: int) -> Optional[Category]:
        if 0 <= column < len(self.categories):
            return self.categories[column]
        return None

    def question(self, column: int, row: int) -> Optional[Question]:
        category = self.category(column)
        if category is None or not 0 <= row < len(category.questions):
            return None
        return category.questions[row]

    def resolve_image(self, question: Question) -> Optional[Path]:
        """Resolve a question's image reference against the question bank directory."""
        if not question.image:
            return None
        path = Path(question.image)
        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return path


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def has_revealable_answer(category: Category, question: Question) -> bool:
    return not category.is_activity and bool(question.answer.strip())


class QuestionRepository:
    """Loads the question bank once. Any failure yields an empty dataset."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._dataset = Dataset.empty()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    def load(self) -> Dataset:
        try:
            raw = self._read()
            dataset = self._parse(raw)
        except (OSError, ValueError, RecursionError, yaml.YAMLError) as e:
            logger.error("Error loading questions from %s: %s", self._path, e)
            dataset = Dataset.empty()
        self._dataset = dataset
        return dataset

    def _read(self) -> Any:
        text = self._path.read_text(encoding="utf-8")
        if self._path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(text)
        return json.loads(text)

    def _parse(self, raw: Any) -> Dataset:
        if not isinstance(raw, dict):
            raise ValueError("expected a mapping with 'categories'")
        entries = raw.get("categories")
        if not isinstance(entries, list):
            raise ValueError("'categories' must be a list")

        categories = []
        for column, entry in enumerate(entries):
            if not isinstance(entry, dict):
                logger.warning("%s: skipping category %d, not a mapping", self._path.name, column)
                continue
            categories.append(self._parse_category(column, entry))
        return Dataset(categories=tuple(categories), base_dir=self._path.parent)

    def _parse_category(self, column: int, entry: dict) -> Category:
        name = _as_text(entry.get("name")).strip()
        questions = []
        raw_questions = entry.get("questions")
        if not isinstance(raw_questions, list):
            raw_questions = []
        for row, item in enumerate(raw_questions):
            if not isinstance(item, dict):
                logger.warning("%s: skipping question %d in %r, not a mapping", self._path.name, row, name)
                continue
            questions.append(self._parse_question(name, len(questions), item))
        return Category(
            name=name,
            questions=tuple(questions),
            is_activity=bool(entry.get("isActivity", False)),
        )

    def _parse_question(self, category_name: str, row: int, item: dict) -> Question:
        expected = points_for_row(row)
        try:
            points = int(item.get("points", expected))
        except (TypeError, ValueError, OverflowError):
            points = expected
        if points != expected:
            # The board always shows the row value.
            logger.warning(
                "%s: %r row %d authored as %d points, shown as %d",
                self._path.name, category_name, row, points, expected,
            )
        image = item.get("image")
        return Question(
            points=points,
            text=_as_text(item.get("text")),
            answer=_as_text(item.get("answer")),
            image=str(image) if image else None,
        )
