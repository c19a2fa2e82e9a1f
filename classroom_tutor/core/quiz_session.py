"""Lifecycle manager for a single personalized quiz attempt.

States: IDLE -> GENERATING -> READY -> IN_PROGRESS -> COMPLETED. Errors are
reported through ``get_error()`` and never discard the quiz or attempt already
held. All state changes happen under one lock; network calls run outside it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging
from threading import Lock
from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from classroom_tutor.constants.quiz_constants import (
    DEFAULT_DIFFICULTY,
    DEFAULT_LANGUAGE,
    DEFAULT_QUESTION_COUNT,
    DEFAULT_TIME_LIMIT_SECONDS,
    TIMER_INTERVAL_SECONDS,
)
from classroom_tutor.constants.ui_constants import QUIZ_RESULT_TEMPLATE
from classroom_tutor.core.errors import NetworkError, SessionValidationError
from classroom_tutor.core.models import (
    Answer,
    PersonalizedQuiz,
    Question,
    QuizAnalytics,
    QuizAttempt,
    QuizGenerationRequest,
    StudentProfile,
)
from classroom_tutor.core.services.countdown import CountdownTimer
from classroom_tutor.core.services.offline_content import Clock, OfflineQuizSource, utc_now
from classroom_tutor.core.services.quiz_api_client import QuizApiClient

logger = logging.getLogger(__name__)


class QuizSessionStatus(Enum):
    IDLE = auto()
    GENERATING = auto()
    READY = auto()
    IN_PROGRESS = auto()
    COMPLETED = auto()


@dataclass(slots=True, frozen=True)
class QuizSnapshot:
    """Immutable view of the session handed to the presentation layer."""

    status: QuizSessionStatus
    quiz: PersonalizedQuiz | None
    attempt: QuizAttempt | None
    analytics: QuizAnalytics | None
    student_profile: StudentProfile | None
    error: str | None
    is_loading: bool
    current_question_index: int
    current_question: Question | None
    progress: float
    time_remaining: int
    score: int
    is_completed: bool

    def result_text(self) -> str | None:
        """Summary line for a completed attempt, or None while it is still running."""
        if self.attempt is None or self.quiz is None or not self.is_completed:
            return None
        text = QUIZ_RESULT_TEMPLATE.format(
            score=self.attempt.score,
            total=self.quiz.total_questions,
            percentage=self.attempt.percentage,
        )
        if self.analytics is not None and self.analytics.recommendations.focus_areas:
            text += " Focus next on: " + ", ".join(self.analytics.recommendations.focus_areas)
        return text


class QuizSession:
    """Owns one student's quiz: generation, answering, countdown and submission."""

    def __init__(
        self,
        student_id: str,
        api_client: QuizApiClient,
        *,
        class_id: str | None = None,
        offline_source: OfflineQuizSource | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.student_id = student_id
        self.class_id = class_id
        self._api = api_client
        self._offline = offline_source
        self._clock = clock
        self._lock = Lock()

        self._status = QuizSessionStatus.IDLE
        self._status_before_generation = QuizSessionStatus.IDLE
        self._generation_token: int = 0
        self._quiz: PersonalizedQuiz | None = None
        self._attempt: QuizAttempt | None = None
        self._analytics: QuizAnalytics | None = None
        self._profile: StudentProfile | None = None
        self._error: str | None = None
        self._question_index: int = 0
        self._time_remaining: int = 0
        self._submitted: bool = False
        self._submission_in_flight: bool = False

    # --- Student profile ---

    def load_student_profile(self) -> StudentProfile | None:
        try:
            profile = self._api.get_student_profile(self.student_id)
        except NetworkError as exc:
            logger.warning("Failed to load profile for %s: %s", self.student_id, exc)
            with self._lock:
                self._error = "Failed to load student profile"
            return None
        with self._lock:
            self._profile = profile
        return profile

    # --- Generation ---

    def generate_quiz(self, **request: Any) -> PersonalizedQuiz | None:
        """Request a new quiz. Keyword arguments are QuizGenerationRequest fields."""
        with self._lock:
            try:
                quiz_request = self._build_request(request)
            except ValidationError as exc:
                self._error = f"Invalid quiz request: {exc.errors()[0]['msg']}"
                return None
            self._generation_token += 1
            token = self._generation_token
            if self._status is not QuizSessionStatus.GENERATING:
                self._status_before_generation = self._status
            self._status = QuizSessionStatus.GENERATING
            self._error = None

        try:
            response = self._api.generate_personalized_quiz(quiz_request)
        except NetworkError as exc:
            if self._offline is None:
                return self._fail_generation(token, str(exc))
            logger.warning("Quiz backend unavailable (%s); using offline question bank", exc)
            response = self._offline.generate_quiz(quiz_request)

        if not response.success or response.quiz is None:
            return self._fail_generation(token, response.message or "Failed to generate quiz")

        quiz = response.quiz
        with self._lock:
            if token != self._generation_token:
                logger.info("Discarding quiz %s from a cancelled generation", quiz.id)
                return None
            if self._attempt is not None and not self._attempt.completed:
                logger.info("Abandoning attempt %s for a newly generated quiz", self._attempt.id)
            self._quiz = quiz
            self._attempt = None
            self._analytics = None
            self._submitted = False
            self._question_index = 0
            self._time_remaining = quiz.time_limit
            self._status = QuizSessionStatus.READY
        logger.info("Quiz %s ready with %d questions", quiz.id, quiz.total_questions)
        return quiz

    def cancel_generation(self) -> bool:
        """Drop any in-flight generation; its result is ignored when it arrives."""
        with self._lock:
            if self._status is not QuizSessionStatus.GENERATING:
                return False
            self._generation_token += 1
            self._status = self._status_before_generation
            return True

    def _build_request(self, overrides: dict[str, Any]) -> QuizGenerationRequest:
        fields: dict[str, Any] = {
            "student_id": self.student_id,
            "class_id": self.class_id,
            "question_count": DEFAULT_QUESTION_COUNT,
            "time_limit": DEFAULT_TIME_LIMIT_SECONDS,
            "difficulty": DEFAULT_DIFFICULTY,
            "language": DEFAULT_LANGUAGE,
        }
        fields.update(overrides)
        if self._profile is not None:
            fields.update(
                interests=self._profile.interests,
                learning_style=self._profile.learning_style,
                weak_areas=self._profile.weak_areas,
                language=self._profile.language,
            )
        return QuizGenerationRequest.model_validate(fields)

    def _fail_generation(self, token: int, message: str) -> None:
        with self._lock:
            if token != self._generation_token:
                return None
            self._status = self._status_before_generation
            self._error = message
        logger.warning("Quiz generation failed: %s", message)
        return None

    # --- Attempt lifecycle ---

    def start_quiz(self) -> QuizAttempt | None:
        with self._lock:
            if self._quiz is None or self._status not in (
                QuizSessionStatus.READY,
                QuizSessionStatus.COMPLETED,
            ):
                logger.warning("start_quiz ignored in state %s", self._status.name)
                return None
            self._attempt = QuizAttempt(
                id=f"attempt_{uuid4().hex[:12]}",
                quiz_id=self._quiz.id,
                student_id=self.student_id,
                start_time=self._clock(),
            )
            self._analytics = None
            self._submitted = False
            self._question_index = 0
            self._time_remaining = self._quiz.time_limit
            self._status = QuizSessionStatus.IN_PROGRESS
            logger.info("Started attempt %s on quiz %s", self._attempt.id, self._quiz.id)
            return self._attempt.model_copy(deep=True)

    def submit_answer(self, question_id: str, selected_answer: int, time_spent: float = 0.0) -> Answer | None:
        """Record an answer and advance to the next unanswered question.

        Returns None without changing anything when there is no active attempt,
        the question is unknown or already answered, or the option is out of range.
        """
        with self._lock:
            attempt = self._active_attempt()
            if attempt is None:
                logger.warning("Answer to %s ignored: no active attempt", question_id)
                return None
            question = self._quiz.find_question(question_id)
            if question is None:
                logger.warning("Answer ignored: unknown question %s", question_id)
                return None
            if any(a.question_id == question_id for a in attempt.answers):
                logger.warning("Answer ignored: question %s already answered", question_id)
                return None
            if not 0 <= selected_answer < len(question.options):
                logger.warning("Answer ignored: option %s out of range", selected_answer)
                return None

            answer = Answer(
                question_id=question_id,
                selected_answer=selected_answer,
                is_correct=selected_answer == question.correct_answer,
                time_spent=max(0.0, float(time_spent)),
            )
            attempt.answers.append(answer)
            attempt.score = sum(1 for a in attempt.answers if a.is_correct)
            attempt.percentage = 100 * attempt.score / len(attempt.answers)
            attempt.time_spent += answer.time_spent
            self._question_index = self._first_unanswered_index()
            return answer

    def complete_quiz(self) -> QuizAnalytics | None:
        """Finish the attempt and submit it. Safe to call more than once.

        The first call completes the attempt and submits it; later calls return
        the stored analytics, or retry the submission if it previously failed.
        Returns None when the submission fails.
        """
        with self._lock:
            attempt = self._attempt
            quiz = self._quiz
            if attempt is None or quiz is None:
                raise SessionValidationError("No active quiz attempt")
            if attempt.completed and (self._submitted or self._submission_in_flight):
                return self._analytics
            if not attempt.completed:
                attempt.completed = True
                attempt.end_time = self._clock()
                attempt.time_spent = quiz.time_limit - self._time_remaining
                if self._status is QuizSessionStatus.GENERATING:
                    self._status_before_generation = QuizSessionStatus.COMPLETED
                else:
                    self._status = QuizSessionStatus.COMPLETED
                logger.info(
                    "Attempt %s completed: %d/%d correct",
                    attempt.id,
                    attempt.score,
                    quiz.total_questions,
                )
            self._submission_in_flight = True
            self._error = None
            submitted_copy = attempt.model_copy(deep=True)

        analytics: QuizAnalytics | None = None
        failure: str | None = None
        try:
            response = self._api.submit_quiz_attempt(submitted_copy)
        except NetworkError as exc:
            if self._offline is None:
                failure = str(exc)
            else:
                logger.warning("Attempt submission failed (%s); computing analytics offline", exc)
                analytics = self._offline.build_analytics(submitted_copy, quiz)
        else:
            if response.success and response.analytics is not None:
                analytics = response.analytics
            else:
                failure = "Failed to submit quiz attempt"

        with self._lock:
            self._submission_in_flight = False
            if failure is not None:
                if self._attempt is attempt:
                    self._error = failure
                logger.warning("Attempt %s not submitted: %s", attempt.id, failure)
                return None
            if self._attempt is attempt:
                self._submitted = True
                self._analytics = analytics
        return analytics

    def tick(self) -> int:
        """Advance the countdown by one second; submits the attempt when it hits zero."""
        with self._lock:
            if self._active_attempt() is None:
                return self._time_remaining
            if self._time_remaining > 0:
                self._time_remaining -= 1
            remaining = self._time_remaining
        if remaining == 0:
            logger.info("Time is up; submitting attempt automatically")
            self.complete_quiz()
        return remaining

    def start_countdown(self, interval: float = TIMER_INTERVAL_SECONDS) -> CountdownTimer:
        """Drive ``tick()`` from a background thread until the attempt ends.

        Headless driver for callers without a Qt event loop; the student window
        calls ``tick()`` from its own ``QTimer`` instead.
        """
        timer = CountdownTimer(self._countdown_step, interval=interval)
        timer.start()
        return timer

    def _countdown_step(self) -> bool:
        self.tick()
        return self.get_status() is QuizSessionStatus.IN_PROGRESS

    def _active_attempt(self) -> QuizAttempt | None:
        if self._status is not QuizSessionStatus.IN_PROGRESS:
            return None
        if self._attempt is None or self._attempt.completed:
            return None
        return self._attempt

    def _first_unanswered_index(self) -> int:
        answered = {a.question_id for a in self._attempt.answers}
        for index, question in enumerate(self._quiz.questions):
            if question.id not in answered:
                return index
        return len(self._quiz.questions)

    def clear_error(self) -> None:
        with self._lock:
            self._error = None

    # --- Read access ---

    def get_status(self) -> QuizSessionStatus:
        with self._lock:
            return self._status

    def get_error(self) -> str | None:
        with self._lock:
            return self._error

    def get_current_quiz(self) -> PersonalizedQuiz | None:
        with self._lock:
            return self._quiz

    def get_attempt(self) -> QuizAttempt | None:
        with self._lock:
            return self._attempt.model_copy(deep=True) if self._attempt is not None else None

    def get_analytics(self) -> QuizAnalytics | None:
        with self._lock:
            return self._analytics

    def get_student_profile(self) -> StudentProfile | None:
        with self._lock:
            return self._profile

    def get_time_remaining(self) -> int:
        with self._lock:
            return self._time_remaining

    def get_current_question(self) -> Question | None:
        with self._lock:
            return self._current_question()

    def get_progress(self) -> float:
        with self._lock:
            return self._progress()

    def get_score(self) -> int:
        with self._lock:
            return self._attempt.score if self._attempt is not None else 0

    def is_completed(self) -> bool:
        with self._lock:
            return self._attempt is not None and self._attempt.completed

    def snapshot(self) -> QuizSnapshot:
        with self._lock:
            attempt = self._attempt.model_copy(deep=True) if self._attempt is not None else None
            return QuizSnapshot(
                status=self._status,
                quiz=self._quiz,
                attempt=attempt,
                analytics=self._analytics,
                student_profile=self._profile,
                error=self._error,
                is_loading=self._status is QuizSessionStatus.GENERATING or self._submission_in_flight,
                current_question_index=self._question_index,
                current_question=self._current_question(),
                progress=self._progress(),
                time_remaining=self._time_remaining,
                score=attempt.score if attempt is not None else 0,
                is_completed=attempt is not None and attempt.completed,
            )

    def _current_question(self) -> Question | None:
        if self._quiz is None or self._attempt is None:
            return None
        if self._question_index >= len(self._quiz.questions):
            return None
        return self._quiz.questions[self._question_index]

    def _progress(self) -> float:
        if self._quiz is None or self._attempt is None or self._quiz.total_questions == 0:
            return 0.0
        return 100 * len(self._attempt.answers) / self._quiz.total_questions
