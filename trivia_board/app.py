"""Application entry point and setup for the trivia board."""

import logging
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from trivia_board.config import Settings
from trivia_board.core.game import GameController
from trivia_board.core.questions import QuestionRepository
from trivia_board.core.store import StateStore
from trivia_board.ui.main_window import MainWindow


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings, build the controller and window, and start the event loop."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logging.info("Questions: %s, state: %s", settings.questions_path, settings.state_file)

    app = QApplication(sys.argv)
    app.setApplicationName("Trivia Board")
    app.setApplicationDisplayName("Trivia Board")

    controller = GameController(
        repository=QuestionRepository(settings.questions_path),
        store=StateStore(settings.state_file),
    )
    window = MainWindow(controller)
    controller.start()

    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        window.setGeometry(screen.availableGeometry())
    window.show()

    sys.exit(app.exec())
