from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Protocol

from trivia_board.core.board import BoardState, TileState, build_tiles, tile_id
from trivia_board.core.questions import (
    BOARD_COLUMNS,
    Dataset,
    QuestionRepository,
    has_revealable_answer,
    points_for_row,
)
from trivia_board.core.store import StateStore

logger = logging.getLogger(__name__)

RESET_PROMPT = "Are you sure you want to reset the game? All progress will be lost."


class Screen(enum.Enum):
    BOARD = "board"
    QUESTION = "question"


@dataclass(frozen=True)
class QuestionCard:
    """Everything the question screen needs for one selected tile."""

    column: int
    row: int
    category_name: str
    points: int
    text: str
    answer: str
    image_path: Optional[Path]
    can_reveal: bool
    answer_revealed: bool = False

    @property
    def answer_visible(self) -> bool:
        return self.can_reveal and self.answer_revealed

    @property
    def reveal_control_visible(self) -> bool:
        return self.can_reveal and not self.answer_revealed


class GameView(Protocol):
    def render_board(self, tiles: List[TileState], category_names: List[str]) -> None: ...

    def render_question(self, card: QuestionCard) -> None: ...

    def switch_to(self, screen: Screen) -> None: ...


class Confirmer(Protocol):
    def confirm(self, message: str) -> bool: ...


class GameController:
    """Owns the dataset and board state and drives the view through start, selection and reset."""

    def __init__(
        self,
        *,
        repository: QuestionRepository,
        store: StateStore,
        board: Optional[BoardState] = None,
    ) -> None:
        self._repository = repository
        self._store = store
        self._board = board if board is not None else BoardState(store)
        self._dataset = Dataset.empty()
        self._view: Optional[GameView] = None
        self._confirmer: Optional[Confirmer] = None
        self._screen = Screen.BOARD
        self._card: Optional[QuestionCard] = None

    @property
    def board(self) -> BoardState:
        return self._board

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def current_card(self) -> Optional[QuestionCard]:
        return self._card

    def attach(self, view: GameView, confirmer: Confirmer) -> None:
        self._view = view
        self._confirmer = confirmer

    def start(self) -> None:
        """Load questions, restore used tiles, then draw the board. Hydration must precede rendering."""
        self._dataset = self._repository.load()
        self._board.hydrate(self._store.load())
        logger.info(
            "Loaded %d categories, %d tiles already used",
            len(self._dataset.categories),
            len(self._board.used_tiles),
        )
        self._render_board()
        self._switch_to(Screen.BOARD)

    def select_tile(self, column: int, row: int) -> bool:
        self._board.mark_used(tile_id(column, row))
        if self.show_question(column, row):
            return True
        self._render_board()
        return False

    def show_question(self, column: int, row: int) -> bool:
        category = self._dataset.category(column)
        question = self._dataset.question(column, row)
        if category is None or question is None:
            logger.error("No question at category %d, level %d", column, row)
            return False

        image_path = self._dataset.resolve_image(question)
        if image_path is not None and not image_path.exists():
            logger.warning("Image for %r level %d not found: %s", category.name, row, image_path)
            image_path = None

        self._card = QuestionCard(
            column=column,
            row=row,
            category_name=category.name,
            points=points_for_row(row),
            text=question.text,
            answer=question.answer,
            image_path=image_path,
            can_reveal=has_revealable_answer(category, question),
        )
        if self._view is not None:
            self._view.render_question(self._card)
        self._switch_to(Screen.QUESTION)
        return True

    def reveal_answer(self) -> bool:
        card = self._card
        if self._screen is not Screen.QUESTION or card is None or not card.can_reveal:
            return False
        if card.answer_revealed:
            return True
        self._card = replace(card, answer_revealed=True)
        if self._view is not None:
            self._view.render_question(self._card)
        return True

    def show_board(self) -> None:
        self._card = None
        self._switch_to(Screen.BOARD)
        self._render_board()

    def reset_all(self) -> bool:
        if self._confirmer is None or not self._confirmer.confirm(RESET_PROMPT):
            return False
        self._board.reset()
        logger.info("Board reset")
        self._render_board()
        return True

    def category_names(self) -> List[str]:
        names = [c.name for c in self._dataset.categories[:BOARD_COLUMNS]]
        return names + [""] * (BOARD_COLUMNS - len(names))

    def tiles(self) -> List[TileState]:
        return build_tiles(self._board)

    def _render_board(self) -> None:
        if self._view is not None:
            self._view.render_board(self.tiles(), self.category_names())

    def _switch_to(self, screen: Screen) -> None:
        self._screen = screen
        if self._view is not None:
            self._view.switch_to(screen)
