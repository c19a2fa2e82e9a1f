import pytest

from classroom_tutor.core.services.offline_content import OfflineTutorSource
from classroom_tutor.core.tutor_models import StudentAssessment
from classroom_tutor.core.tutor_session import TutorSession, TutorSessionStatus, step_progress


@pytest.fixture
def session(fake_tutor_api, clock):
    return TutorSession("student_1", fake_tutor_api, clock=clock)


@pytest.fixture
def active_session(session):
    session.generate_lesson(auto_start=True)
    return session


def test_step_progress_reaches_100_on_last_step():
    assert step_progress(0, 5) == 0.0
    assert step_progress(2, 5) == 50.0
    assert step_progress(4, 5) == 100.0
    assert step_progress(0, 1) == 100.0


def test_load_initial_data(session):
    assert session.load_initial_data() is True
    snapshot = session.snapshot()
    assert snapshot.personality.name == "Alex"
    assert snapshot.analytics.student_id == "student_1"
    assert snapshot.is_loading is False


def test_load_initial_data_failure_sets_error(session, fake_tutor_api):
    fake_tutor_api.offline = True

    assert session.load_initial_data() is False
    assert session.get_error() == "Failed to load tutor data"


def test_load_initial_data_uses_fallback_when_enabled(fake_tutor_api, clock):
    fake_tutor_api.offline = True
    session = TutorSession("student_1", fake_tutor_api, offline_source=OfflineTutorSource(clock), clock=clock)

    assert session.load_initial_data() is True
    assert session.get_error() is None
    assert session.snapshot().personality is not None


def test_generate_lesson_uses_defaults(session, fake_tutor_api):
    lesson = session.generate_lesson()

    request = fake_tutor_api.lesson_requests[-1]
    assert request.subject == "Mathematics"
    assert request.difficulty == "intermediate"
    assert request.learning_style == "visual"
    assert request.duration == 30
    assert lesson is not None
    assert session.get_status() is TutorSessionStatus.LESSON_READY
    assert session.get_session() is None


def test_analytics_hint_overrides_requested_style(session, fake_tutor_api):
    session.load_initial_data()

    session.generate_lesson(learning_style="kinesthetic", topic="Linear Equations")

    request = fake_tutor_api.lesson_requests[-1]
    assert request.learning_style == "visual"
    assert request.topic == "Linear Equations"


def test_generate_lesson_failure_restores_status(session, fake_tutor_api):
    fake_tutor_api.offline = True

    assert session.generate_lesson() is None
    assert session.get_status() is TutorSessionStatus.IDLE
    assert session.get_error() is not None
    assert session.get_current_lesson() is None


def test_auto_start_opens_session_sized_to_lesson(active_session):
    lesson = active_session.get_current_lesson()
    record = active_session.get_session()

    assert active_session.get_status() is TutorSessionStatus.ACTIVE
    assert record.lesson_id == lesson.id
    assert record.total_steps == len(lesson.steps())
    assert record.current_step == 0
    assert record.progress == 0.0
    assert record.status == "active"
    assert active_session.snapshot().current_step_item == lesson.steps()[0]


def test_start_session_without_lesson_is_noop(session):
    assert session.start_tutor_session() is None
    assert session.get_status() is TutorSessionStatus.IDLE


def test_next_step_clamps_at_last_step(active_session):
    total = active_session.get_session().total_steps
    for _ in range(total - 1):
        assert active_session.next_step() is True

    assert active_session.next_step() is False
    record = active_session.get_session()
    assert record.current_step == total - 1
    assert record.progress == 100.0


def test_previous_step_clamps_at_zero(active_session):
    assert active_session.previous_step() is False
    active_session.next_step()
    assert active_session.previous_step() is True
    assert active_session.get_session().current_step == 0
    assert active_session.get_session().progress == 0.0


def test_pause_blocks_navigation_and_responses(active_session):
    assert active_session.pause_tutor_session() is True
    assert active_session.get_session().status == "paused"
    assert active_session.pause_tutor_session() is False

    assert active_session.next_step() is False
    assert active_session.submit_response("42") is None

    assert active_session.resume_tutor_session() is True
    assert active_session.resume_tutor_session() is False
    assert active_session.next_step() is True


def test_submit_response_is_tagged_with_current_step(active_session, clock):
    active_session.next_step()
    response = active_session.submit_response("x = 4", is_correct=True, time_spent=12.5)

    assert response.interaction_id == "interaction_1"
    assert response.is_correct is True
    assert response.time_spent == 12.5
    assert response.timestamp == clock()
    record = active_session.get_session()
    assert record.student_responses == [response]
    assert record.progress == step_progress(1, record.total_steps)


def test_submit_response_measures_time_on_step(active_session):
    response = active_session.submit_response("not sure")
    assert response.time_spent >= 0.0
    assert response.is_correct is None


def test_end_session_is_idempotent(active_session, clock):
    first = active_session.end_tutor_session()
    second = active_session.end_tutor_session()

    assert first.status == "completed"
    assert first.end_time == clock()
    assert second == first
    assert active_session.get_status() is TutorSessionStatus.COMPLETED
    assert active_session.next_step() is False
    assert active_session.submit_response("late") is None


def test_end_session_on_last_step_reports_full_progress(active_session):
    while active_session.next_step():
        pass

    record = active_session.end_tutor_session()
    assert record.progress == 100.0


def test_end_session_early_keeps_progress(active_session):
    active_session.next_step()
    expected = active_session.get_session().progress

    assert active_session.end_tutor_session().progress == expected


def test_end_without_session_returns_none(session):
    assert session.end_tutor_session() is None


def test_generate_learning_path_from_assessment_weaknesses(session, clock):
    assessment = StudentAssessment(
        id="assessment_1",
        student_id="student_1",
        subject="Mathematics",
        topic="Algebra",
        completed_at=clock(),
        percentage=45,
        weaknesses=["Fractions", "Word Problems"],
    )

    path = session.generate_learning_path([assessment])

    assert [lesson.title for lesson in path.lessons] == ["Fractions", "Word Problems"]
    assert path.lessons[0].status == "available"
    assert path.lessons[1].prerequisites == ["lesson_1"]
    assert session.snapshot().learning_path is path


def test_learning_path_failure_sets_error(session, fake_tutor_api):
    fake_tutor_api.offline = True
    assert session.generate_learning_path([]) is None
    assert session.get_error() == "Failed to generate learning path"


def test_refresh_analytics_failure_is_silent(session, fake_tutor_api):
    fake_tutor_api.offline = True
    assert session.refresh_analytics() is None
    assert session.get_error() is None


def test_new_lesson_does_not_interrupt_active_session(active_session):
    record = active_session.get_session()

    lesson = active_session.generate_lesson()

    assert lesson.id != record.lesson_id
    assert active_session.get_status() is TutorSessionStatus.ACTIVE
    assert active_session.get_session().id == record.id
