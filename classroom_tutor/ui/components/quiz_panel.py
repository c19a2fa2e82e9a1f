"""Component for taking a personalized quiz."""

from __future__ import annotations

import time

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from classroom_tutor.constants.quiz_constants import (
    DEFAULT_QUESTION_COUNT,
    OPTIONS_PER_QUESTION,
    TIME_LIMIT_WARNING_WINDOW_SECONDS,
    TIMER_INTERVAL_SECONDS,
)
from classroom_tutor.constants.ui_constants import (
    ERROR_DIALOG_TITLE,
    QUIZ_ALL_ANSWERED_MESSAGE,
    QUIZ_GENERATE_BUTTON,
    QUIZ_GENERATING_MESSAGE,
    QUIZ_IDLE_MESSAGE,
    QUIZ_READY_TEMPLATE,
    QUIZ_RETRY_BUTTON,
    QUIZ_START_BUTTON,
    QUIZ_SUBJECT_PLACEHOLDER,
    QUIZ_SUBMIT_BUTTON,
)
from classroom_tutor.core.quiz_session import QuizSession, QuizSessionStatus, QuizSnapshot
from classroom_tutor.styling.styles import Styles
from classroom_tutor.ui.components.background import BackgroundRunner
from classroom_tutor.ui.dialog_helpers import show_error
from classroom_tutor.ui.question_renderer import render_question_with_options

_DIFFICULTY_CHOICES = ("adaptive", "easy", "medium", "hard")


class QuizPanel(QWidget):
    """UI component that drives a QuizSession."""

    def __init__(self, session: QuizSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self._runner = BackgroundRunner(self)
        self._displayed_question_id: str | None = None
        self._question_shown_at: float = time.monotonic()

        self._build_ui()
        self._configure_countdown_timer()
        self.refresh()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Generation controls
        control_row = QHBoxLayout()
        self.subject_edit = QLineEdit(self)
        self.subject_edit.setPlaceholderText(QUIZ_SUBJECT_PLACEHOLDER)
        control_row.addWidget(self.subject_edit, stretch=1)

        self.count_spin = QSpinBox(self)
        self.count_spin.setRange(1, 50)
        self.count_spin.setValue(DEFAULT_QUESTION_COUNT)
        self.count_spin.setSuffix(" questions")
        control_row.addWidget(self.count_spin)

        self.difficulty_combo = QComboBox(self)
        self.difficulty_combo.addItems(_DIFFICULTY_CHOICES)
        control_row.addWidget(self.difficulty_combo)

        self.generate_button = QPushButton(QUIZ_GENERATE_BUTTON, self)
        self.generate_button.clicked.connect(self._handle_generate)
        control_row.addWidget(self.generate_button)

        self.start_button = QPushButton(QUIZ_START_BUTTON, self)
        self.start_button.clicked.connect(self._handle_start)
        control_row.addWidget(self.start_button)
        layout.addLayout(control_row)

        self.status_label = QLabel("", self)
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        # Timer and progress
        timer_row = QHBoxLayout()
        self.timer_label = QLabel("", self)
        timer_row.addWidget(self.timer_label)
        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        timer_row.addWidget(self.progress_bar, stretch=1)
        layout.addLayout(timer_row)

        self.question_view = QWebEngineView(self)
        layout.addWidget(self.question_view, stretch=1)

        options_row = QHBoxLayout()
        self.option_buttons: list[QPushButton] = []
        for idx in range(OPTIONS_PER_QUESTION):
            button = QPushButton(chr(ord("A") + idx), self)
            button.setStyleSheet(Styles.get_option_button_style())
            button.clicked.connect(lambda _checked=False, index=idx: self._handle_answer(index))
            options_row.addWidget(button)
            self.option_buttons.append(button)
        layout.addLayout(options_row)

        result_row = QHBoxLayout()
        self.result_label = QLabel("", self)
        self.result_label.setAlignment(Qt.AlignLeft)
        self.result_label.setWordWrap(True)
        result_row.addWidget(self.result_label, stretch=1)

        self.submit_button = QPushButton(QUIZ_SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self._handle_submit)
        result_row.addWidget(self.submit_button)
        layout.addLayout(result_row)

    def _configure_countdown_timer(self) -> None:
        self.countdown_timer = QTimer(self)
        self.countdown_timer.setInterval(int(TIMER_INTERVAL_SECONDS * 1000))
        self.countdown_timer.timeout.connect(self._tick)

    # --- Actions ---

    def _handle_generate(self) -> None:
        request: dict[str, object] = {
            "question_count": self.count_spin.value(),
            "difficulty": self.difficulty_combo.currentText(),
        }
        subject = self.subject_edit.text().strip()
        if subject:
            request["subject"] = subject
        self.session.cancel_generation()
        self._runner.run(lambda: self.session.generate_quiz(**request), self._after_network_call, "QuizGeneration")
        self.refresh()

    def _handle_start(self) -> None:
        if self.session.start_quiz() is None:
            return
        self._displayed_question_id = None
        self.countdown_timer.start()
        self.refresh()

    def _handle_answer(self, index: int) -> None:
        question = self.session.get_current_question()
        if question is None:
            return
        elapsed = time.monotonic() - self._question_shown_at
        self.session.submit_answer(question.id, index, time_spent=round(elapsed, 1))
        self.refresh()

    def _handle_submit(self) -> None:
        self.countdown_timer.stop()
        self._runner.run(self.session.complete_quiz, self._after_network_call, "QuizSubmission")
        self.refresh()

    def _tick(self) -> None:
        if self.session.get_time_remaining() > 1:
            self.session.tick()
            self.refresh()
            return
        # The final tick submits the attempt, which blocks on the network.
        self.countdown_timer.stop()
        self._runner.run(self.session.tick, self._after_network_call, "QuizTimeout")

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
        in_progress = status is QuizSessionStatus.IN_PROGRESS

        self.generate_button.setEnabled(status is not QuizSessionStatus.GENERATING and not in_progress)
        self.start_button.setEnabled(
            snapshot.quiz is not None and status in (QuizSessionStatus.READY, QuizSessionStatus.COMPLETED)
        )
        self.start_button.setText(QUIZ_RETRY_BUTTON if status is QuizSessionStatus.COMPLETED else QUIZ_START_BUTTON)

        question = snapshot.current_question if in_progress else None
        for button in self.option_buttons:
            button.setEnabled(question is not None)

        self._update_status_label(snapshot)
        self._update_timer(snapshot)
        self._update_question_view(snapshot, question)
        self._update_results(snapshot)

    def _update_status_label(self, snapshot: QuizSnapshot) -> None:
        status = snapshot.status
        if status is QuizSessionStatus.GENERATING:
            self.status_label.setText(QUIZ_GENERATING_MESSAGE)
        elif snapshot.quiz is None:
            self.status_label.setText(QUIZ_IDLE_MESSAGE)
        elif status is QuizSessionStatus.IN_PROGRESS and snapshot.current_question is None:
            self.status_label.setText(QUIZ_ALL_ANSWERED_MESSAGE)
        else:
            self.status_label.setText(
                QUIZ_READY_TEMPLATE.format(
                    title=snapshot.quiz.title,
                    count=snapshot.quiz.total_questions,
                    minutes=max(1, snapshot.quiz.time_limit // 60),
                )
            )

    def _update_timer(self, snapshot: QuizSnapshot) -> None:
        self.progress_bar.setValue(int(snapshot.progress))
        if snapshot.status is not QuizSessionStatus.IN_PROGRESS:
            self.timer_label.setText("")
            self.timer_label.setStyleSheet(Styles.get_timer_style(False))
            return
        minutes, seconds = divmod(snapshot.time_remaining, 60)
        self.timer_label.setText(f"{minutes:02d}:{seconds:02d} remaining")
        warning = snapshot.time_remaining <= TIME_LIMIT_WARNING_WINDOW_SECONDS
        self.timer_label.setStyleSheet(Styles.get_timer_style(warning))

    def _update_question_view(self, snapshot: QuizSnapshot, question) -> None:
        question_id = question.id if question is not None else None
        if question_id == self._displayed_question_id:
            return
        self._displayed_question_id = question_id
        self._question_shown_at = time.monotonic()
        if question is None:
            self.question_view.setHtml("")
            return
        html = render_question_with_options(
            question,
            snapshot.current_question_index + 1,
            snapshot.quiz.total_questions,
        )
        self.question_view.setHtml(html)

    def _update_results(self, snapshot: QuizSnapshot) -> None:
        attempt = snapshot.attempt
        self.submit_button.setVisible(attempt is not None)
        if attempt is None:
            self.result_label.setText("")
            return
        awaiting_retry = snapshot.is_completed and snapshot.analytics is None and not snapshot.is_loading
        self.submit_button.setEnabled(
            snapshot.status is QuizSessionStatus.IN_PROGRESS or awaiting_retry
        )
        if not snapshot.is_completed:
            self.result_label.setText(f"Answered {len(attempt.answers)} of {snapshot.quiz.total_questions}")
            return
        self.result_label.setText(snapshot.result_text())
        self.result_label.setStyleSheet(Styles.get_feedback_style(attempt.percentage >= 50))
        if snapshot.status is QuizSessionStatus.COMPLETED:
            self.countdown_timer.stop()
