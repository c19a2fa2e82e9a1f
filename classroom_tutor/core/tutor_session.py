"""Lifecycle manager for AI tutoring: lessons, step navigation and responses."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
import logging
from threading import Lock
import time
from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from classroom_tutor.constants.tutor_constants import (
    DEFAULT_LEARNING_STYLE,
    DEFAULT_LESSON_DIFFICULTY,
    DEFAULT_LESSON_DURATION_MINUTES,
    DEFAULT_LESSON_SUBJECT,
)
from classroom_tutor.core.errors import NetworkError
from classroom_tutor.core.services.offline_content import Clock, OfflineTutorSource, utc_now
from classroom_tutor.core.services.tutor_api_client import TutorApiClient
from classroom_tutor.core.tutor_models import (
    AILesson,
    InteractiveElement,
    LearningPath,
    LessonContent,
    LessonGenerationRequest,
    StudentAssessment,
    StudentResponse,
    TutorAnalytics,
    TutorPersonality,
    TutorSessionRecord,
)

logger = logging.getLogger(__name__)


class TutorSessionStatus(Enum):
    IDLE = auto()
    GENERATING_LESSON = auto()
    LESSON_READY = auto()
    ACTIVE = auto()
    PAUSED = auto()
    COMPLETED = auto()


@dataclass(slots=True, frozen=True)
class TutorSnapshot:
    status: TutorSessionStatus
    lesson: AILesson | None
    session: TutorSessionRecord | None
    personality: TutorPersonality | None
    analytics: TutorAnalytics | None
    learning_path: LearningPath | None
    error: str | None
    is_loading: bool
    current_step: int
    total_steps: int
    progress: float
    current_step_item: LessonContent | InteractiveElement | None


def step_progress(step: int, total_steps: int) -> float:
    """Percentage for ``step`` where the first step is 0 and the last is 100."""
    if total_steps <= 1:
        return 100.0
    return 100 * step / (total_steps - 1)


class TutorSession:
    """Owns one student's tutoring state.

    There is no timer here: a tutoring session only ends when
    ``end_tutor_session()`` is called.
    """

    def __init__(
        self,
        student_id: str,
        api_client: TutorApiClient,
        *,
        offline_source: OfflineTutorSource | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.student_id = student_id
        self._api = api_client
        self._offline = offline_source
        self._clock = clock
        self._lock = Lock()

        self._status = TutorSessionStatus.IDLE
        self._status_before_generation = TutorSessionStatus.IDLE
        self._generation_token: int = 0
        self._lesson: AILesson | None = None
        self._record: TutorSessionRecord | None = None
        self._personality: TutorPersonality | None = None
        self._analytics: TutorAnalytics | None = None
        self._learning_path: LearningPath | None = None
        self._error: str | None = None
        self._busy: int = 0
        self._step_entered_at: float = time.monotonic()

    # --- Tutor data ---

    def load_initial_data(self) -> bool:
        """Fetch tutor personality and analytics. Returns False on failure."""
        with self._lock:
            self._busy += 1
        try:
            try:
                personality = self._api.get_tutor_personality(self.student_id)
                analytics = self._api.get_tutor_analytics(self.student_id)
            except NetworkError as exc:
                if self._offline is None:
                    logger.warning("Failed to load tutor data: %s", exc)
                    with self._lock:
                        self._error = "Failed to load tutor data"
                    return False
                logger.warning("Tutor backend unavailable (%s); using offline tutor data", exc)
                personality = self._offline.personality()
                analytics = self._offline.analytics(self.student_id)
            with self._lock:
                self._personality = personality
                self._analytics = analytics
            return True
        finally:
            with self._lock:
                self._busy -= 1

    def refresh_analytics(self) -> TutorAnalytics | None:
        try:
            analytics = self._api.get_tutor_analytics(self.student_id)
        except NetworkError as exc:
            logger.warning("Failed to refresh tutor analytics: %s", exc)
            return None
        with self._lock:
            self._analytics = analytics
        return analytics

    def generate_learning_path(self, assessments: Sequence[StudentAssessment]) -> LearningPath | None:
        with self._lock:
            self._busy += 1
            self._error = None
        try:
            try:
                path = self._api.generate_learning_path(self.student_id, list(assessments))
            except NetworkError as exc:
                if self._offline is None:
                    logger.warning("Failed to generate learning path: %s", exc)
                    with self._lock:
                        self._error = "Failed to generate learning path"
                    return None
                path = self._offline.learning_path(self.student_id, assessments)
            with self._lock:
                self._learning_path = path
            return path
        finally:
            with self._lock:
                self._busy -= 1

    # --- Lessons ---

    def generate_lesson(self, auto_start: bool = False, **request: Any) -> AILesson | None:
        """Generate a lesson. Keyword arguments are LessonGenerationRequest fields."""
        with self._lock:
            try:
                lesson_request = self._build_request(request)
            except ValidationError as exc:
                self._error = f"Invalid lesson request: {exc.errors()[0]['msg']}"
                return None
            self._generation_token += 1
            token = self._generation_token
            if self._status is not TutorSessionStatus.GENERATING_LESSON:
                self._status_before_generation = self._status
            self._status = TutorSessionStatus.GENERATING_LESSON
            self._error = None

        try:
            response = self._api.generate_lesson(lesson_request)
        except NetworkError as exc:
            if self._offline is None:
                return self._fail_generation(token, str(exc))
            logger.warning("Lesson backend unavailable (%s); using offline lesson templates", exc)
            response = self._offline.generate_lesson(lesson_request)

        if not response.success or response.lesson is None:
            return self._fail_generation(token, response.message or "Failed to generate lesson")

        lesson = response.lesson
        with self._lock:
            if token != self._generation_token:
                logger.info("Discarding lesson %s from a cancelled generation", lesson.id)
                return None
            self._lesson = lesson
            if self._status_before_generation in (TutorSessionStatus.ACTIVE, TutorSessionStatus.PAUSED):
                # A new lesson does not interrupt a running session.
                self._status = self._status_before_generation
            else:
                self._status = TutorSessionStatus.LESSON_READY
        logger.info("Lesson %s ready: %s", lesson.id, lesson.title)

        if auto_start:
            self.start_tutor_session(lesson.id)
        return lesson

    def cancel_generation(self) -> bool:
        with self._lock:
            if self._status is not TutorSessionStatus.GENERATING_LESSON:
                return False
            self._generation_token += 1
            self._status = self._status_before_generation
            return True

    def _build_request(self, overrides: dict[str, Any]) -> LessonGenerationRequest:
        fields: dict[str, Any] = {
            "student_id": self.student_id,
            "subject": DEFAULT_LESSON_SUBJECT,
            "difficulty": DEFAULT_LESSON_DIFFICULTY,
            "learning_style": DEFAULT_LEARNING_STYLE,
            "duration": DEFAULT_LESSON_DURATION_MINUTES,
        }
        fields.update(overrides)
        if self._analytics is not None:
            approach = self._analytics.recommendations.suggested_approach
            fields["learning_style"] = "visual" if "Visual" in approach else "text"
        return LessonGenerationRequest.model_validate(fields)

    def _fail_generation(self, token: int, message: str) -> None:
        with self._lock:
            if token != self._generation_token:
                return None
            self._status = self._status_before_generation
            self._error = message
        logger.warning("Lesson generation failed: %s", message)
        return None

    # --- Session lifecycle ---

    def start_tutor_session(self, lesson_id: str | None = None) -> TutorSessionRecord | None:
        with self._lock:
            lesson = self._lesson
            if lesson_id is None:
                if lesson is None:
                    logger.warning("start_tutor_session ignored: no lesson")
                    return None
                lesson_id = lesson.id
            self._busy += 1
            self._error = None

        try:
            try:
                record = self._api.start_tutor_session(lesson_id, self.student_id)
            except NetworkError as exc:
                if self._offline is None:
                    logger.warning("Failed to start tutor session: %s", exc)
                    with self._lock:
                        self._error = "Failed to start tutor session"
                    return None
                record = self._offline.create_session(lesson_id, self.student_id)
        finally:
            with self._lock:
                self._busy -= 1

        with self._lock:
            if lesson is not None and lesson.id == lesson_id and lesson.steps():
                record.total_steps = len(lesson.steps())
            record.current_step = 0
            record.progress = 0.0
            record.status = "active"
            self._record = record
            self._status = TutorSessionStatus.ACTIVE
            self._step_entered_at = time.monotonic()
            logger.info("Tutor session %s started with %d steps", record.id, record.total_steps)
            return record.model_copy(deep=True)

    def pause_tutor_session(self) -> bool:
        with self._lock:
            if self._record is None or self._status is not TutorSessionStatus.ACTIVE:
                return False
            self._record.status = "paused"
            self._status = TutorSessionStatus.PAUSED
            return True

    def resume_tutor_session(self) -> bool:
        with self._lock:
            if self._record is None or self._status is not TutorSessionStatus.PAUSED:
                return False
            self._record.status = "active"
            self._status = TutorSessionStatus.ACTIVE
            self._step_entered_at = time.monotonic()
            return True

    def next_step(self) -> bool:
        """Move forward one step. Returns False when already on the last step."""
        return self._move(1)

    def previous_step(self) -> bool:
        return self._move(-1)

    def _move(self, delta: int) -> bool:
        with self._lock:
            record = self._record
            if record is None or self._status is not TutorSessionStatus.ACTIVE:
                return False
            target = min(max(record.current_step + delta, 0), record.total_steps - 1)
            moved = target != record.current_step
            record.current_step = target
            record.progress = step_progress(target, record.total_steps)
            if moved:
                self._step_entered_at = time.monotonic()
            return moved

    def submit_response(
        self,
        response: str,
        is_correct: bool | None = None,
        time_spent: float | None = None,
    ) -> StudentResponse | None:
        with self._lock:
            record = self._record
            if record is None or self._status is not TutorSessionStatus.ACTIVE:
                logger.warning("Response ignored: no active tutor session")
                return None
            if time_spent is None:
                time_spent = time.monotonic() - self._step_entered_at
            entry = StudentResponse(
                id=f"response_{uuid4().hex[:12]}",
                interaction_id=f"interaction_{record.current_step}",
                response=response,
                timestamp=self._clock(),
                is_correct=is_correct,
                time_spent=max(0.0, time_spent),
            )
            record.student_responses.append(entry)
            return entry

    def end_tutor_session(self) -> TutorSessionRecord | None:
        """Finish the session. Calling it again returns the same record unchanged."""
        with self._lock:
            record = self._record
            if record is None:
                return None
            if record.status != "completed":
                record.end_time = self._clock()
                record.status = "completed"
                if record.current_step >= record.total_steps - 1:
                    record.progress = 100.0
                self._status = TutorSessionStatus.COMPLETED
                logger.info(
                    "Tutor session %s ended on step %d of %d",
                    record.id,
                    record.current_step + 1,
                    record.total_steps,
                )
            return record.model_copy(deep=True)

    def clear_error(self) -> None:
        with self._lock:
            self._error = None

    # --- Read access ---

    def get_status(self) -> TutorSessionStatus:
        with self._lock:
            return self._status

    def get_error(self) -> str | None:
        with self._lock:
            return self._error

    def get_current_lesson(self) -> AILesson | None:
        with self._lock:
            return self._lesson

    def get_session(self) -> TutorSessionRecord | None:
        with self._lock:
            return self._record.model_copy(deep=True) if self._record is not None else None

    def snapshot(self) -> TutorSnapshot:
        with self._lock:
            record = self._record.model_copy(deep=True) if self._record is not None else None
            return TutorSnapshot(
                status=self._status,
                lesson=self._lesson,
                session=record,
                personality=self._personality,
                analytics=self._analytics,
                learning_path=self._learning_path,
                error=self._error,
                is_loading=self._status is TutorSessionStatus.GENERATING_LESSON or self._busy > 0,
                current_step=record.current_step if record is not None else 0,
                total_steps=record.total_steps if record is not None else 0,
                progress=record.progress if record is not None else 0.0,
                current_step_item=self._current_step_item(record),
            )

    def _current_step_item(self, record: TutorSessionRecord | None) -> LessonContent | InteractiveElement | None:
        if record is None or self._lesson is None or self._lesson.id != record.lesson_id:
            return None
        steps = self._lesson.steps()
        if record.current_step >= len(steps):
            return None
        return steps[record.current_step]
