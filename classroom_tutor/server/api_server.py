"""FastAPI practice backend that serves the classroom API from offline content."""

from __future__ import annotations

from collections import defaultdict
import logging
from threading import Lock, Thread
from typing import Any

from fastapi import Body, Depends, FastAPI, Header, HTTPException
import uvicorn

from classroom_tutor.constants.about import APP_NAME, APP_VERSION
from classroom_tutor.constants.api_constants import LOCAL_BACKEND_HOST, LOCAL_BACKEND_PORT
from classroom_tutor.core.models import (
    AttemptSubmissionResponse,
    PersonalizedQuiz,
    QuizAnalytics,
    QuizAttempt,
    QuizGenerationRequest,
    StudentProfile,
)
from classroom_tutor.core.services.offline_content import OfflineQuizSource, OfflineTutorSource
from classroom_tutor.core.tutor_models import (
    LearningPathRequest,
    LessonGenerationRequest,
    SessionStartRequest,
)

logger = logging.getLogger(__name__)


class PracticeBackendState:
    """In-memory store behind the practice backend: profiles, quizzes and attempts."""

    def __init__(self, quiz_source: OfflineQuizSource, tutor_source: OfflineTutorSource) -> None:
        self.quiz_source = quiz_source
        self.tutor_source = tutor_source
        self._lock = Lock()
        self._profiles: dict[str, StudentProfile] = {}
        self._quizzes: dict[str, PersonalizedQuiz] = {}
        self._attempts: list[QuizAttempt] = []
        self._class_members: dict[str, set[str]] = defaultdict(set)

    def get_profile(self, student_id: str) -> StudentProfile:
        with self._lock:
            return self._profile_locked(student_id)

    def update_profile(self, student_id: str, changes: dict[str, Any]) -> StudentProfile:
        """Merge ``changes`` into the stored profile. Raises ValueError when invalid."""
        with self._lock:
            current = self._profile_locked(student_id)
            merged = current.model_dump(by_alias=True)
            merged.update(changes)
            merged["id"] = student_id
            profile = StudentProfile.model_validate(merged)
            self._profiles[student_id] = profile
            return profile

    def record_quiz(self, quiz: PersonalizedQuiz) -> None:
        with self._lock:
            self._quizzes[quiz.id] = quiz
            if quiz.class_id:
                self._class_members[quiz.class_id].add(quiz.student_id)

    def record_attempt(self, attempt: QuizAttempt) -> QuizAnalytics:
        with self._lock:
            previous = [a for a in self._attempts if a.student_id == attempt.student_id]
            self._attempts.append(attempt)
            analytics = self.quiz_source.build_analytics(
                attempt, self._quizzes.get(attempt.quiz_id), previous
            )
            profile = self._profile_locked(attempt.student_id)
            self._profiles[attempt.student_id] = profile.model_copy(
                update={
                    "total_quizzes_completed": analytics.total_quizzes,
                    "average_score": analytics.average_score,
                    "last_active": attempt.end_time or profile.last_active,
                }
            )
            return analytics

    def student_analytics(self, student_id: str) -> QuizAnalytics:
        with self._lock:
            attempts = [a for a in self._attempts if a.student_id == student_id]
            if not attempts:
                return QuizAnalytics(student_id=student_id)
            latest = attempts[-1]
            return self.quiz_source.build_analytics(latest, self._quizzes.get(latest.quiz_id), attempts[:-1])

    def class_profile(self, class_id: str):
        with self._lock:
            students = [self._profile_locked(s) for s in sorted(self._class_members[class_id])]
        return self.quiz_source.class_profile(class_id, students)

    def class_analytics(self, class_id: str):
        with self._lock:
            members = self._class_members[class_id]
            attempts = [a for a in self._attempts if a.student_id in members]
            quizzes = dict(self._quizzes)
            enrolled = len(members)
        return self.quiz_source.class_analytics(class_id, attempts, quizzes, enrolled)

    def _profile_locked(self, student_id: str) -> StudentProfile:
        profile = self._profiles.get(student_id)
        if profile is None:
            profile = self.quiz_source.student_profile(student_id)
            self._profiles[student_id] = profile
        return profile


def _get_state_dependency(state: PracticeBackendState):
    def dependency() -> PracticeBackendState:
        return state

    return dependency


def _bearer_token_dependency(expected_token: str | None):
    def dependency(authorization: str | None = Header(default=None)) -> str:
        scheme, _, token = (authorization or "").partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise HTTPException(status_code=401, detail="Missing bearer token")
        if expected_token is not None and token.strip() != expected_token:
            raise HTTPException(status_code=401, detail="Invalid bearer token")
        return token.strip()

    return dependency


def create_api_app(
    quiz_source: OfflineQuizSource | None = None,
    tutor_source: OfflineTutorSource | None = None,
    *,
    expected_token: str | None = None,
) -> FastAPI:
    """Create the practice backend.

    Any non-empty bearer token is accepted unless ``expected_token`` is given.
    """
    state = PracticeBackendState(quiz_source or OfflineQuizSource(), tutor_source or OfflineTutorSource())
    state_dep = _get_state_dependency(state)
    app = FastAPI(
        title=f"{APP_NAME} practice backend",
        version=APP_VERSION,
        dependencies=[Depends(_bearer_token_dependency(expected_token))],
    )
    app.state.backend = state

    @app.post("/api/quiz/generate")
    def generate_quiz(
        request: QuizGenerationRequest,
        backend: PracticeBackendState = Depends(state_dep),
    ) -> dict[str, Any]:
        response = backend.quiz_source.generate_quiz(request)
        if response.quiz is not None:
            backend.record_quiz(response.quiz)
        return response.to_payload()

    @app.post("/api/quiz/class/{class_id}/generate")
    def generate_class_quiz(
        class_id: str,
        request: QuizGenerationRequest,
        backend: PracticeBackendState = Depends(state_dep),
    ) -> dict[str, Any]:
        response = backend.quiz_source.generate_class_quiz(class_id, request)
        if response.quiz is not None:
            backend.record_quiz(response.quiz)
        return response.to_payload()

    @app.post("/api/quiz/attempt")
    def submit_attempt(
        attempt: QuizAttempt,
        backend: PracticeBackendState = Depends(state_dep),
    ) -> dict[str, Any]:
        if not attempt.completed:
            raise HTTPException(status_code=409, detail="Attempt is not completed")
        analytics = backend.record_attempt(attempt)
        logger.info("Recorded attempt %s for %s", attempt.id, attempt.student_id)
        return AttemptSubmissionResponse(success=True, analytics=analytics).to_payload()

    @app.get("/api/students/{student_id}")
    def get_student(student_id: str, backend: PracticeBackendState = Depends(state_dep)) -> dict[str, Any]:
        return backend.get_profile(student_id).to_payload()

    @app.put("/api/students/{student_id}")
    def update_student(
        student_id: str,
        changes: dict[str, Any] = Body(...),
        backend: PracticeBackendState = Depends(state_dep),
    ) -> dict[str, Any]:
        try:
            profile = backend.update_profile(student_id, changes)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return profile.to_payload()

    @app.get("/api/classes/{class_id}")
    def get_class(class_id: str, backend: PracticeBackendState = Depends(state_dep)) -> dict[str, Any]:
        return backend.class_profile(class_id).to_payload()

    @app.get("/api/analytics/student/{student_id}")
    def get_student_analytics(
        student_id: str, backend: PracticeBackendState = Depends(state_dep)
    ) -> dict[str, Any]:
        return backend.student_analytics(student_id).to_payload()

    @app.get("/api/analytics/class/{class_id}")
    def get_class_analytics(class_id: str, backend: PracticeBackendState = Depends(state_dep)) -> dict[str, Any]:
        return backend.class_analytics(class_id).to_payload()

    @app.post("/api/tutor/generate-lesson")
    def generate_lesson(
        request: LessonGenerationRequest,
        backend: PracticeBackendState = Depends(state_dep),
    ) -> dict[str, Any]:
        return backend.tutor_source.generate_lesson(request).to_payload()

    @app.post("/api/tutor/session/start")
    def start_session(
        request: SessionStartRequest,
        backend: PracticeBackendState = Depends(state_dep),
    ) -> dict[str, Any]:
        return backend.tutor_source.create_session(request.lesson_id, request.student_id).to_payload()

    @app.get("/api/tutor/personality/{student_id}")
    def get_personality(student_id: str, backend: PracticeBackendState = Depends(state_dep)) -> dict[str, Any]:
        return backend.tutor_source.personality().to_payload()

    @app.get("/api/tutor/analytics/{student_id}")
    def get_tutor_analytics(
        student_id: str, backend: PracticeBackendState = Depends(state_dep)
    ) -> dict[str, Any]:
        return backend.tutor_source.analytics(student_id).to_payload()

    @app.post("/api/tutor/learning-path")
    def learning_path(
        request: LearningPathRequest,
        backend: PracticeBackendState = Depends(state_dep),
    ) -> dict[str, Any]:
        return backend.tutor_source.learning_path(request.student_id, request.assessments).to_payload()

    return app


def start_api_server(
    host: str = LOCAL_BACKEND_HOST,
    port: int = LOCAL_BACKEND_PORT,
    *,
    expected_token: str | None = None,
) -> Thread:
    """Start the practice backend in a background daemon thread."""
    app = create_api_app(expected_token=expected_token)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="PracticeApiServer", daemon=True)
    thread.start()
    logger.info("Practice backend listening on http://%s:%d", host, port)
    return thread
