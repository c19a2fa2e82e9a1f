"""Client for the personalized quiz endpoints of the classroom backend."""

from __future__ import annotations

import logging
from typing import Any

from classroom_tutor.constants.api_constants import (
    CLASS_ANALYTICS_PATH,
    CLASS_PROFILE_PATH,
    CLASS_QUIZ_GENERATE_PATH,
    QUIZ_ATTEMPT_PATH,
    QUIZ_GENERATE_PATH,
    STUDENT_ANALYTICS_PATH,
    STUDENT_PROFILE_PATH,
)
from classroom_tutor.core.models import (
    AttemptSubmissionResponse,
    ClassProfile,
    ClassQuizAnalytics,
    QuizAnalytics,
    QuizAttempt,
    QuizGenerationRequest,
    QuizGenerationResponse,
    StudentProfile,
)
from classroom_tutor.core.services.api_client import BackendClient

logger = logging.getLogger(__name__)


class QuizApiClient(BackendClient):
    """Typed access to quiz generation, attempts, profiles and analytics.

    Every method raises NetworkError (or its ApiResponseError subclass) when the
    backend cannot be reached or answers with something unexpected.
    """

    def generate_personalized_quiz(self, request: QuizGenerationRequest) -> QuizGenerationResponse:
        logger.info(
            "Requesting quiz for %s (%d questions, subject=%s)",
            request.student_id,
            request.question_count,
            request.subject or "any",
        )
        return self._send("POST", QUIZ_GENERATE_PATH, request.to_payload(), QuizGenerationResponse)

    def generate_class_quiz(self, class_id: str, request: QuizGenerationRequest) -> QuizGenerationResponse:
        path = CLASS_QUIZ_GENERATE_PATH.format(class_id=class_id)
        return self._send("POST", path, request.to_payload(), QuizGenerationResponse)

    def submit_quiz_attempt(self, attempt: QuizAttempt) -> AttemptSubmissionResponse:
        logger.info("Submitting attempt %s for quiz %s", attempt.id, attempt.quiz_id)
        return self._send("POST", QUIZ_ATTEMPT_PATH, attempt.to_payload(), AttemptSubmissionResponse)

    def get_student_profile(self, student_id: str) -> StudentProfile:
        return self._get(STUDENT_PROFILE_PATH.format(student_id=student_id), StudentProfile)

    def update_student_profile(self, student_id: str, changes: dict[str, Any]) -> StudentProfile:
        """Apply a partial update; keys may be snake_case or camelCase."""
        path = STUDENT_PROFILE_PATH.format(student_id=student_id)
        return self._send("PUT", path, _camel_keys(changes), StudentProfile)

    def get_class_profile(self, class_id: str) -> ClassProfile:
        return self._get(CLASS_PROFILE_PATH.format(class_id=class_id), ClassProfile)

    def get_student_analytics(self, student_id: str) -> QuizAnalytics:
        return self._get(STUDENT_ANALYTICS_PATH.format(student_id=student_id), QuizAnalytics)

    def get_class_analytics(self, class_id: str) -> ClassQuizAnalytics:
        return self._get(CLASS_ANALYTICS_PATH.format(class_id=class_id), ClassQuizAnalytics)


def _camel_keys(changes: dict[str, Any]) -> dict[str, Any]:
    known = StudentProfile.model_fields
    result: dict[str, Any] = {}
    for key, value in changes.items():
        field = known.get(key)
        result[field.alias if field is not None and field.alias else key] = value
    return result
