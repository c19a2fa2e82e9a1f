"""Client for the AI tutor endpoints of the classroom backend."""

from __future__ import annotations

import logging

from classroom_tutor.constants.api_constants import (
    TUTOR_ANALYTICS_PATH,
    TUTOR_LEARNING_PATH_PATH,
    TUTOR_LESSON_PATH,
    TUTOR_PERSONALITY_PATH,
    TUTOR_SESSION_START_PATH,
)
from classroom_tutor.core.services.api_client import BackendClient
from classroom_tutor.core.tutor_models import (
    LearningPath,
    LearningPathRequest,
    LessonGenerationRequest,
    LessonGenerationResponse,
    SessionStartRequest,
    StudentAssessment,
    TutorAnalytics,
    TutorPersonality,
    TutorSessionRecord,
)

logger = logging.getLogger(__name__)


class TutorApiClient(BackendClient):
    """Typed access to lesson generation, tutoring sessions and tutor analytics."""

    def generate_lesson(self, request: LessonGenerationRequest) -> LessonGenerationResponse:
        logger.info("Requesting %s lesson for %s", request.subject, request.student_id)
        return self._send("POST", TUTOR_LESSON_PATH, request.to_payload(), LessonGenerationResponse)

    def start_tutor_session(self, lesson_id: str, student_id: str) -> TutorSessionRecord:
        payload = SessionStartRequest(lesson_id=lesson_id, student_id=student_id).to_payload()
        return self._send("POST", TUTOR_SESSION_START_PATH, payload, TutorSessionRecord)

    def get_tutor_personality(self, student_id: str) -> TutorPersonality:
        return self._get(TUTOR_PERSONALITY_PATH.format(student_id=student_id), TutorPersonality)

    def get_tutor_analytics(self, student_id: str) -> TutorAnalytics:
        return self._get(TUTOR_ANALYTICS_PATH.format(student_id=student_id), TutorAnalytics)

    def generate_learning_path(
        self, student_id: str, assessments: list[StudentAssessment]
    ) -> LearningPath:
        payload = LearningPathRequest(student_id=student_id, assessments=assessments).to_payload()
        return self._send("POST", TUTOR_LEARNING_PATH_PATH, payload, LearningPath)
