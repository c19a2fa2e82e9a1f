"""Application entry point for the Classroom Tutor student client."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from classroom_tutor.config import Settings, get_settings
from classroom_tutor.core.credentials import credentials_from_settings
from classroom_tutor.core.quiz_session import QuizSession
from classroom_tutor.core.services.offline_content import OfflineQuizSource, OfflineTutorSource
from classroom_tutor.core.services.quiz_api_client import QuizApiClient
from classroom_tutor.core.services.tutor_api_client import TutorApiClient
from classroom_tutor.core.tutor_session import TutorSession
from classroom_tutor.server.api_server import start_api_server
from classroom_tutor.ui.student_main_window import StudentMainWindow
from classroom_tutor.utils.logging_config import configure_logging


def build_sessions(settings: Settings) -> tuple[QuizSession, TutorSession]:
    """Wire clients and session managers from settings."""
    base_url = settings.local_backend_url if settings.start_local_backend else settings.api_url
    credentials = credentials_from_settings(settings.auth_token, settings.token_file)
    quiz_client = QuizApiClient(base_url, credentials, timeout=settings.request_timeout)
    tutor_client = TutorApiClient(base_url, credentials, timeout=settings.request_timeout)

    quiz_fallback = OfflineQuizSource() if settings.offline_fallback else None
    tutor_fallback = OfflineTutorSource() if settings.offline_fallback else None
    quiz_session = QuizSession(
        settings.student_id,
        quiz_client,
        class_id=settings.class_id,
        offline_source=quiz_fallback,
    )
    tutor_session = TutorSession(settings.student_id, tutor_client, offline_source=tutor_fallback)
    return quiz_session, tutor_session


def main() -> None:
    """Initialize logging, optionally start the practice backend, and launch the Qt UI."""
    settings = get_settings()
    logger = configure_logging(settings.log_level)
    logger.info("Starting Classroom Tutor for %s", settings.student_id)

    if settings.start_local_backend:
        start_api_server(host=settings.local_backend_host, port=settings.local_backend_port)
    if settings.offline_fallback:
        logger.info("Offline fallback enabled; failed requests use local content")

    quiz_session, tutor_session = build_sessions(settings)
    quiz_session.load_student_profile()

    app = QApplication(sys.argv)
    window = StudentMainWindow(quiz_session=quiz_session, tutor_session=tutor_session)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
