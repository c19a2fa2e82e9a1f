from datetime import datetime, timezone
import random

import httpx
from fastapi.testclient import TestClient
import pytest

from classroom_tutor.core.credentials import StaticCredentials
from classroom_tutor.core.errors import NetworkError
from classroom_tutor.core.models import AttemptSubmissionResponse
from classroom_tutor.core.services.offline_content import OfflineQuizSource, OfflineTutorSource
from classroom_tutor.core.services.quiz_api_client import QuizApiClient
from classroom_tutor.core.services.tutor_api_client import TutorApiClient
from classroom_tutor.server.api_server import create_api_app

FIXED_NOW = datetime(2024, 9, 2, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    """Clock frozen at a known instant"""
    return lambda: FIXED_NOW


@pytest.fixture
def quiz_source(clock):
    return OfflineQuizSource(rng=random.Random(7), clock=clock)


@pytest.fixture
def tutor_source(clock):
    return OfflineTutorSource(clock=clock)


@pytest.fixture
def backend_app(quiz_source, tutor_source):
    return create_api_app(quiz_source, tutor_source, expected_token="test-token")


@pytest.fixture
def test_client(backend_app):
    with TestClient(backend_app) as client:
        yield client


@pytest.fixture
def quiz_client(test_client):
    return QuizApiClient(credentials=StaticCredentials("test-token"), http_client=test_client)


@pytest.fixture
def tutor_client(test_client):
    return TutorApiClient(credentials=StaticCredentials("test-token"), http_client=test_client)


@pytest.fixture
def unreachable_http():
    """httpx client whose every request fails at the transport level"""

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with httpx.Client(transport=httpx.MockTransport(handler), base_url="http://backend.test") as client:
        yield client


class FakeQuizApi:
    """Quiz client double that records calls and can be told to fail."""

    def __init__(self, source):
        self.source = source
        self.generation_requests = []
        self.submissions = []
        self.fail_generation = False
        self.failing_submissions = 0
        self.profile = None
        self.before_return = None

    def generate_personalized_quiz(self, request):
        self.generation_requests.append(request)
        if self.fail_generation:
            raise NetworkError("Request to /api/quiz/generate failed: offline")
        response = self.source.generate_quiz(request)
        if self.before_return is not None:
            self.before_return()
        return response

    def submit_quiz_attempt(self, attempt):
        self.submissions.append(attempt)
        if self.failing_submissions > 0:
            self.failing_submissions -= 1
            raise NetworkError("HTTP error! status: 503", status_code=503)
        return AttemptSubmissionResponse(success=True, analytics=self.source.build_analytics(attempt))

    def get_student_profile(self, student_id):
        if self.profile is None:
            raise NetworkError("HTTP error! status: 404", status_code=404)
        return self.profile


class FakeTutorApi:
    """Tutor client double backed by the offline tutor source."""

    def __init__(self, source):
        self.source = source
        self.offline = False
        self.lesson_requests = []

    def _check(self):
        if self.offline:
            raise NetworkError("Request failed: offline")

    def generate_lesson(self, request):
        self.lesson_requests.append(request)
        self._check()
        return self.source.generate_lesson(request)

    def start_tutor_session(self, lesson_id, student_id):
        self._check()
        return self.source.create_session(lesson_id, student_id)

    def get_tutor_personality(self, student_id):
        self._check()
        return self.source.personality()

    def get_tutor_analytics(self, student_id):
        self._check()
        return self.source.analytics(student_id)

    def generate_learning_path(self, student_id, assessments):
        self._check()
        return self.source.learning_path(student_id, assessments)


@pytest.fixture
def fake_quiz_api(quiz_source):
    return FakeQuizApi(quiz_source)


@pytest.fixture
def fake_tutor_api(tutor_source):
    return FakeTutorApi(tutor_source)
