import httpx
import pytest

from classroom_tutor.core.credentials import StaticCredentials, TokenFileCredentials
from classroom_tutor.core.errors import ApiResponseError, NetworkError
from classroom_tutor.core.models import Answer, QuizAttempt, QuizGenerationRequest
from classroom_tutor.core.services.quiz_api_client import QuizApiClient
from classroom_tutor.core.services.tutor_api_client import TutorApiClient
from classroom_tutor.core.tutor_models import LessonGenerationRequest


def _mock_client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler), base_url="http://backend.test")


def _completed_attempt(quiz, clock, correct=True):
    answers = []
    for question in quiz.questions:
        selected = question.correct_answer if correct else (question.correct_answer + 1) % 4
        answers.append(
            Answer(question_id=question.id, selected_answer=selected, is_correct=correct, time_spent=5)
        )
    score = len(answers) if correct else 0
    return QuizAttempt(
        id="attempt_1",
        quiz_id=quiz.id,
        student_id=quiz.student_id,
        start_time=clock(),
        end_time=clock(),
        answers=answers,
        score=score,
        percentage=100.0 * score / len(answers),
        time_spent=5.0 * len(answers),
        completed=True,
    )


def test_generate_quiz_round_trip(quiz_client):
    request = QuizGenerationRequest(student_id="student_1", question_count=4, subject="Science", difficulty="easy")

    response = quiz_client.generate_personalized_quiz(request)

    assert response.success is True
    quiz = response.quiz
    assert quiz.total_questions == 4
    assert {q.subject for q in quiz.questions} == {"Science"}
    assert {q.difficulty for q in quiz.questions} == {"easy"}


def test_submit_attempt_returns_analytics(quiz_client, clock):
    request = QuizGenerationRequest(student_id="student_1", question_count=3, subject="Mathematics")
    quiz = quiz_client.generate_personalized_quiz(request).quiz

    result = quiz_client.submit_quiz_attempt(_completed_attempt(quiz, clock, correct=False))

    assert result.success is True
    analytics = result.analytics
    assert analytics.student_id == "student_1"
    assert analytics.total_quizzes == 1
    assert analytics.subject_breakdown[0].subject == "Mathematics"
    assert analytics.recommendations.focus_areas
    assert analytics.recommendations.suggested_difficulty == "easy"

    profile = quiz_client.get_student_profile("student_1")
    assert profile.total_quizzes_completed == 1
    assert quiz_client.get_student_analytics("student_1").total_quizzes == 1


def test_update_student_profile_accepts_snake_case(quiz_client):
    profile = quiz_client.update_student_profile(
        "student_9", {"learning_style": "kinesthetic", "weak_areas": ["Fractions"]}
    )

    assert profile.id == "student_9"
    assert profile.learning_style == "kinesthetic"
    assert profile.weak_areas == ["Fractions"]
    assert quiz_client.get_student_profile("student_9").learning_style == "kinesthetic"


def test_invalid_profile_update_is_rejected(quiz_client):
    with pytest.raises(NetworkError) as excinfo:
        quiz_client.update_student_profile("student_1", {"learning_style": "telepathic"})
    assert excinfo.value.status_code == 422


def test_class_quiz_feeds_class_profile_and_analytics(quiz_client, clock):
    request = QuizGenerationRequest(student_id="student_2", question_count=2)
    quiz = quiz_client.generate_class_quiz("class_7", request).quiz
    assert quiz.class_id == "class_7"

    quiz_client.submit_quiz_attempt(_completed_attempt(quiz, clock))

    profile = quiz_client.get_class_profile("class_7")
    assert [student.id for student in profile.students] == ["student_2"]
    analytics = quiz_client.get_class_analytics("class_7")
    assert analytics.total_students == 1
    assert analytics.average_score == 100.0
    assert analytics.completion_rate == 100.0


def test_tutor_client_round_trip(tutor_client):
    lesson = tutor_client.generate_lesson(
        LessonGenerationRequest(student_id="student_1", subject="Mathematics", learning_style="auditory")
    ).lesson
    record = tutor_client.start_tutor_session(lesson.id, "student_1")

    assert record.total_steps == len(lesson.steps())
    assert any(step.type == "discussion" for step in lesson.interactive_elements)
    assert tutor_client.get_tutor_personality("student_1").style == "encouraging"
    assert tutor_client.get_tutor_analytics("student_1").recommendations.next_topics
    path = tutor_client.generate_learning_path("student_1", [])
    assert len(path.lessons) == 3


def test_requests_carry_bearer_token():
    seen = []

    def handler(request):
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json={"id": "student_1"})

    client = QuizApiClient(credentials=StaticCredentials("secret"), http_client=_mock_client(handler))
    client.get_student_profile("student_1")

    assert seen == ["Bearer secret"]


def test_placeholder_token_when_none_stored(tmp_path):
    seen = []

    def handler(request):
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json={"id": "student_1"})

    token_file = tmp_path / "token"
    credentials = TokenFileCredentials(token_file)
    client = QuizApiClient(credentials=credentials, http_client=_mock_client(handler))

    client.get_student_profile("student_1")
    credentials.store_token("fresh-token")
    client.get_student_profile("student_1")

    assert seen == ["Bearer mock-token", "Bearer fresh-token"]


def test_http_error_status_raises_network_error():
    client = QuizApiClient(http_client=_mock_client(lambda request: httpx.Response(503)))

    with pytest.raises(NetworkError) as excinfo:
        client.get_student_profile("student_1")

    assert excinfo.value.status_code == 503
    assert "503" in str(excinfo.value)


def test_transport_failure_raises_network_error(unreachable_http):
    client = TutorApiClient(http_client=unreachable_http)

    with pytest.raises(NetworkError) as excinfo:
        client.get_tutor_personality("student_1")

    assert excinfo.value.status_code is None
    assert not isinstance(excinfo.value, ApiResponseError)


def test_non_json_body_raises_api_response_error():
    client = QuizApiClient(http_client=_mock_client(lambda request: httpx.Response(200, text="<html>")))

    with pytest.raises(ApiResponseError):
        client.get_class_profile("class_1")


def test_unexpected_shape_raises_api_response_error():
    client = QuizApiClient(http_client=_mock_client(lambda request: httpx.Response(200, json={"nope": 1})))

    with pytest.raises(ApiResponseError):
        client.get_class_profile("class_1")


def test_client_closes_only_its_own_http_client(unreachable_http):
    borrowed = QuizApiClient(http_client=unreachable_http)
    borrowed.close()
    assert not unreachable_http.is_closed

    with QuizApiClient("http://backend.test/") as owned:
        assert owned.base_url == "http://backend.test"
    assert owned._http.is_closed
