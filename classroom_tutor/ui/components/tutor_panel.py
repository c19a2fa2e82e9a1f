"""Component for guided tutoring sessions."""

from __future__ import annotations

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from classroom_tutor.constants.ui_constants import (
    ERROR_DIALOG_TITLE,
    TUTOR_COMPLETED_MESSAGE,
    TUTOR_END_BUTTON,
    TUTOR_GENERATE_BUTTON,
    TUTOR_IDLE_MESSAGE,
    TUTOR_NEXT_BUTTON,
    TUTOR_PAUSE_BUTTON,
    TUTOR_PREVIOUS_BUTTON,
    TUTOR_RESPONSE_PLACEHOLDER,
    TUTOR_RESUME_BUTTON,
    TUTOR_SEND_BUTTON,
    TUTOR_STEP_TEMPLATE,
)
from classroom_tutor.core.tutor_session import TutorSession, TutorSessionStatus
from classroom_tutor.styling.styles import Styles
from classroom_tutor.ui.components.background import BackgroundRunner
from classroom_tutor.ui.dialog_helpers import confirm_end_session, show_error, show_info
from classroom_tutor.ui.question_renderer import render_lesson_step


class TutorPanel(QWidget):
    """UI component that drives a TutorSession."""

    def __init__(self, session: TutorSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self._runner = BackgroundRunner(self)
        self._displayed_step: tuple[str, int] | None = None

        self._build_ui()
        self.refresh()
        self._runner.run(self.session.load_initial_data, self._after_network_call, "TutorInitialData")

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.greeting_label = QLabel("", self)
        self.greeting_label.setWordWrap(True)
        self.greeting_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.greeting_label, stretch=1)

        self.topic_edit = QLineEdit(self)
        self.topic_edit.setPlaceholderText("Topic (optional)")
        header_row.addWidget(self.topic_edit)

        self.generate_button = QPushButton(TUTOR_GENERATE_BUTTON, self)
        self.generate_button.clicked.connect(self._handle_generate)
        header_row.addWidget(self.generate_button)
        layout.addLayout(header_row)

        progress_row = QHBoxLayout()
        self.step_label = QLabel(TUTOR_IDLE_MESSAGE, self)
        progress_row.addWidget(self.step_label)
        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        progress_row.addWidget(self.progress_bar, stretch=1)
        layout.addLayout(progress_row)

        self.step_view = QWebEngineView(self)
        layout.addWidget(self.step_view, stretch=1)

        response_row = QHBoxLayout()
        self.response_edit = QLineEdit(self)
        self.response_edit.setPlaceholderText(TUTOR_RESPONSE_PLACEHOLDER)
        self.response_edit.returnPressed.connect(self._handle_send)
        response_row.addWidget(self.response_edit, stretch=1)
        self.send_button = QPushButton(TUTOR_SEND_BUTTON, self)
        self.send_button.clicked.connect(self._handle_send)
        response_row.addWidget(self.send_button)
        layout.addLayout(response_row)

        nav_row = QHBoxLayout()
        self.previous_button = QPushButton(TUTOR_PREVIOUS_BUTTON, self)
        self.previous_button.clicked.connect(self._handle_previous)
        nav_row.addWidget(self.previous_button)

        self.pause_button = QPushButton(TUTOR_PAUSE_BUTTON, self)
        self.pause_button.clicked.connect(self._handle_pause_toggle)
        nav_row.addWidget(self.pause_button)

        nav_row.addStretch()

        self.end_button = QPushButton(TUTOR_END_BUTTON, self)
        self.end_button.clicked.connect(self._handle_end)
        nav_row.addWidget(self.end_button)

        self.next_button = QPushButton(TUTOR_NEXT_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next)
        nav_row.addWidget(self.next_button)
        layout.addLayout(nav_row)

    # --- Actions ---

    def _handle_generate(self) -> None:
        request: dict[str, object] = {}
        topic = self.topic_edit.text().strip()
        if topic:
            request["topic"] = topic
        self.session.cancel_generation()
        self._runner.run(
            lambda: self.session.generate_lesson(auto_start=True, **request),
            self._after_network_call,
            "LessonGeneration",
        )
        self.refresh()

    def _handle_previous(self) -> None:
        self.session.previous_step()
        self.refresh()

    def _handle_next(self) -> None:
        self.session.next_step()
        self.refresh()

    def _handle_pause_toggle(self) -> None:
        if self.session.get_status() is TutorSessionStatus.PAUSED:
            self.session.resume_tutor_session()
        else:
            self.session.pause_tutor_session()
        self.refresh()

    def _handle_send(self) -> None:
        text = self.response_edit.text().strip()
        if not text:
            return
        if self.session.submit_response(text) is not None:
            self.response_edit.clear()
        self.refresh()

    def _handle_end(self) -> None:
        snapshot = self.session.snapshot()
        if snapshot.current_step < snapshot.total_steps - 1 and not confirm_end_session(self):
            return
        if self.session.end_tutor_session() is not None:
            show_info(self, TUTOR_END_BUTTON, TUTOR_COMPLETED_MESSAGE)
        self._runner.run(self.session.refresh_analytics, lambda _result: self.refresh(), "TutorAnalytics")
        self.refresh()

    def _after_network_call(self, _result: object) -> None:
        error = self.session.get_error()
        if error:
            show_error(self, ERROR_DIALOG_TITLE, error)
            self.session.clear_error()
        self.refresh()

    # --- View ---

    def refresh(self) -> None:
        snapshot = self.session.snapshot()
        status = snapshot.status
        running = status in (TutorSessionStatus.ACTIVE, TutorSessionStatus.PAUSED)
        active = status is TutorSessionStatus.ACTIVE

        if snapshot.personality is not None:
            self.greeting_label.setText(snapshot.personality.greeting)

        self.generate_button.setEnabled(not snapshot.is_loading)
        self.previous_button.setEnabled(active and snapshot.current_step > 0)
        self.next_button.setEnabled(active and snapshot.current_step < snapshot.total_steps - 1)
        self.send_button.setEnabled(active)
        self.response_edit.setEnabled(active)
        self.pause_button.setEnabled(running)
        self.pause_button.setText(TUTOR_RESUME_BUTTON if status is TutorSessionStatus.PAUSED else TUTOR_PAUSE_BUTTON)
        self.end_button.setEnabled(running)
        self.progress_bar.setValue(int(snapshot.progress))

        if status is TutorSessionStatus.COMPLETED:
            self.step_label.setText(TUTOR_COMPLETED_MESSAGE)
        elif snapshot.session is None:
            self.step_label.setText(TUTOR_IDLE_MESSAGE)
        else:
            self.step_label.setText(
                TUTOR_STEP_TEMPLATE.format(step=snapshot.current_step + 1, total=snapshot.total_steps)
            )

        item = snapshot.current_step_item
        key = None
        if snapshot.session is not None and item is not None:
            key = (snapshot.session.id, snapshot.current_step)
        if key == self._displayed_step:
            return
        self._displayed_step = key
        self.step_view.setHtml(render_lesson_step(item) if item is not None else "")
