import pytest

from classroom_tutor.core.models import Answer, QuizAttempt, QuizGenerationRequest
from classroom_tutor.core.tutor_models import LessonGenerationRequest


def _request(**overrides):
    fields = {"student_id": "student_1", "question_count": 6}
    fields.update(overrides)
    return QuizGenerationRequest(**fields)


def test_adaptive_quiz_ramps_difficulty(quiz_source):
    quiz = quiz_source.generate_quiz(_request(difficulty="adaptive")).quiz

    difficulties = [q.difficulty for q in quiz.questions]
    assert difficulties == ["easy", "easy", "medium", "medium", "hard", "hard"]


def test_fixed_difficulty_and_subject(quiz_source):
    quiz = quiz_source.generate_quiz(_request(difficulty="hard", subject="English")).quiz

    assert {q.difficulty for q in quiz.questions} == {"hard"}
    assert {q.subject for q in quiz.questions} == {"English"}
    assert quiz.title == "English Quiz"


def test_unknown_subject_draws_from_whole_bank(quiz_source):
    quiz = quiz_source.generate_quiz(_request(subject="Astrology", question_count=12)).quiz

    assert quiz.subject == "Astrology"
    assert {q.subject for q in quiz.questions} <= {"Mathematics", "Science", "English"}


def test_question_ids_are_unique_and_options_complete(quiz_source):
    quiz = quiz_source.generate_quiz(_request(question_count=8)).quiz

    assert len({q.id for q in quiz.questions}) == 8
    assert all(len(q.options) == 4 for q in quiz.questions)
    assert quiz.expires_at > quiz.created_at


def test_weak_areas_are_preferred(quiz_source):
    quiz = quiz_source.generate_quiz(
        _request(subject="Mathematics", difficulty="medium", weak_areas=["Statistics"])
    ).quiz

    assert {q.topic for q in quiz.questions} == {"Statistics"}


def test_excluded_topics_are_avoided(quiz_source):
    quiz = quiz_source.generate_quiz(
        _request(subject="Mathematics", difficulty="medium", exclude_topics=["Algebra"])
    ).quiz

    assert "Algebra" not in {q.topic for q in quiz.questions}


def test_analytics_reflect_the_attempt(quiz_source, clock):
    quiz = quiz_source.generate_quiz(_request(subject="Science", difficulty="easy", question_count=4)).quiz
    answers = [
        Answer(question_id=q.id, selected_answer=q.correct_answer, is_correct=True, time_spent=10)
        for q in quiz.questions[:3]
    ]
    missed = quiz.questions[3]
    answers.append(
        Answer(question_id=missed.id, selected_answer=(missed.correct_answer + 1) % 4, is_correct=False, time_spent=20)
    )
    attempt = QuizAttempt(
        id="attempt_1",
        quiz_id=quiz.id,
        student_id="student_1",
        start_time=clock(),
        answers=answers,
        score=3,
        percentage=75.0,
        time_spent=50,
        completed=True,
    )

    analytics = quiz_source.build_analytics(attempt, quiz)

    assert analytics.average_score == 75.0
    assert analytics.time_spent == 50
    assert analytics.subject_breakdown[0].score == 75.0
    assert analytics.subject_breakdown[0].questions_answered == 4
    assert analytics.difficulty_progress["easy"].count == 4
    assert analytics.recommendations.focus_areas == [missed.topic]
    assert analytics.recommendations.suggested_difficulty == "medium"


def test_improvement_rate_compares_with_history(quiz_source, clock):
    def attempt(percentage):
        return QuizAttempt(
            id=f"attempt_{percentage}",
            quiz_id="quiz_1",
            student_id="student_1",
            start_time=clock(),
            percentage=percentage,
            completed=True,
        )

    analytics = quiz_source.build_analytics(attempt(80.0), previous_attempts=[attempt(40.0), attempt(60.0)])

    assert analytics.total_quizzes == 3
    assert analytics.improvement_rate == pytest.approx(30.0)
    assert analytics.average_score == pytest.approx(60.0)


def test_visual_lesson_contains_concept_map(tutor_source):
    lesson = tutor_source.generate_lesson(
        LessonGenerationRequest(student_id="student_1", subject="Mathematics", learning_style="visual")
    ).lesson

    assert [c.id for c in lesson.content] == ["intro_1", "visual_1", "interactive_1", "example_1"]
    assert [e.type for e in lesson.interactive_elements] == ["quiz", "fill_blank"]
    assert lesson.steps()[0].id == "intro_1"
    assert lesson.steps()[-1].id == "exercise_1"


def test_session_for_unknown_lesson_uses_default_size(tutor_source):
    record = tutor_source.create_session("lesson_elsewhere", "student_1")
    assert record.total_steps == 5
    assert record.status == "active"
