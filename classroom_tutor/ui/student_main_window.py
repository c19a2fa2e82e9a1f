"""Qt main window hosting the quiz and tutor tabs."""

from __future__ import annotations

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QTabWidget

from classroom_tutor.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from classroom_tutor.constants.ui_constants import TAB_QUIZ, TAB_TUTOR, WINDOW_TITLE
from classroom_tutor.core.quiz_session import QuizSession
from classroom_tutor.core.tutor_session import TutorSession
from classroom_tutor.styling.styles import Styles
from classroom_tutor.ui.components.quiz_panel import QuizPanel
from classroom_tutor.ui.components.tutor_panel import TutorPanel
from classroom_tutor.ui.dialog_helpers import show_info


class StudentMainWindow(QMainWindow):
    """Main Qt window with one tab per session type."""

    def __init__(self, quiz_session: QuizSession, tutor_session: TutorSession) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1000, 720)

        self.quiz_session = quiz_session
        self.tutor_session = tutor_session

        self._build_ui()
        self._build_menu()
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self) -> None:
        self.tabs = QTabWidget(self)
        self.quiz_panel = QuizPanel(self.quiz_session, self)
        self.tutor_panel = TutorPanel(self.tutor_session, self)
        self.tabs.addTab(self.quiz_panel, TAB_QUIZ)
        self.tabs.addTab(self.tutor_panel, TAB_TUTOR)
        self.setCentralWidget(self.tabs)

    def _build_menu(self) -> None:
        help_menu = self.menuBar().addMenu("Help")

        help_action = QAction("How to use", self)
        help_action.triggered.connect(lambda: show_info(self, "Help", HELP_TEXT))
        help_menu.addAction(help_action)

        about_action = QAction(f"About {APP_NAME}", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _show_about(self) -> None:
        show_info(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} {APP_VERSION}\n\n{APP_ABOUT_TEXT}\n\n{APP_LICENSE}",
        )

    def closeEvent(self, event) -> None:
        self.quiz_panel.countdown_timer.stop()
        super().closeEvent(event)
