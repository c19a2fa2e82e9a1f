import threading

import pytest
from pydantic import ValidationError

from classroom_tutor.core.markdown_renderer import renderer
from classroom_tutor.core.models import PersonalizedQuiz, Question, QuizGenerationRequest
from classroom_tutor.core.services.countdown import CountdownTimer
from classroom_tutor.core.tutor_models import AILesson


def _question(**overrides):
    fields = {
        "id": "q_1",
        "question": "What is $2 + 2$?",
        "options": ["3", "4", "5", "6"],
        "correctAnswer": 1,
        "explanation": "Two plus two is four.",
    }
    fields.update(overrides)
    return Question.model_validate(fields)


def test_question_accepts_camel_case_and_plain_explanation():
    question = _question()
    assert question.correct_answer == 1
    assert question.explanation.text == "Two plus two is four."
    assert question.to_payload()["correctAnswer"] == 1


def test_question_requires_four_options():
    with pytest.raises(ValidationError):
        _question(options=["1", "2", "3"])


def test_question_rejects_out_of_range_answer():
    with pytest.raises(ValidationError):
        _question(correctAnswer=4)


def test_question_is_frozen():
    question = _question()
    with pytest.raises(ValidationError):
        question.correct_answer = 2


def test_generation_request_requires_positive_count():
    with pytest.raises(ValidationError):
        QuizGenerationRequest(student_id="s", question_count=0)


def test_interactive_elements_are_parsed_by_type(clock):
    lesson = AILesson.model_validate(
        {
            "id": "lesson_1",
            "studentId": "student_1",
            "subject": "Mathematics",
            "topic": "Fractions",
            "title": "Fractions",
            "createdAt": clock().isoformat(),
            "content": [{"id": "c2", "type": "text", "title": "Second", "content": "b", "order": 2},
                        {"id": "c1", "type": "text", "title": "First", "content": "a", "order": 1}],
            "interactiveElements": [
                {
                    "id": "m1",
                    "type": "matching",
                    "title": "Match",
                    "content": "Match the fractions",
                    "order": 1,
                    "data": {"pairs": [{"left": "1/2", "right": "0.5"}]},
                }
            ],
        }
    )

    assert [step.id for step in lesson.steps()] == ["c1", "c2", "m1"]
    assert lesson.interactive_elements[0].data.pairs[0].right == "0.5"


def test_unknown_element_type_is_rejected(clock):
    with pytest.raises(ValidationError):
        AILesson.model_validate(
            {
                "id": "lesson_1",
                "studentId": "student_1",
                "subject": "Mathematics",
                "topic": "Fractions",
                "title": "Fractions",
                "createdAt": clock().isoformat(),
                "interactiveElements": [{"id": "x", "type": "hologram", "title": "", "content": "", "order": 1}],
            }
        )


def test_renderer_keeps_math_for_mathjax():
    html = renderer.render_full_document("**Solve** $x^2 = 4$", font_size=16)
    assert "<strong>Solve</strong>" in html
    assert "$x^2 = 4$" in html
    assert "font-size: 16pt" in html
    assert "mathjax" in html


def test_renderer_placeholder_for_empty_text():
    assert "No content provided" in renderer.render_fragment("   ")


def test_countdown_stops_when_callback_returns_false():
    calls = []
    done = threading.Event()

    def on_tick():
        calls.append(1)
        if len(calls) == 3:
            done.set()
            return False
        return True

    timer = CountdownTimer(on_tick, interval=0.01)
    timer.start()
    assert done.wait(2)
    timer.stop(timeout=1)

    assert len(calls) == 3
    assert not timer.is_running()


def test_countdown_stop_halts_ticks():
    calls = []
    timer = CountdownTimer(lambda: calls.append(1) or True, interval=0.01)
    timer.start()
    timer.stop(timeout=1)
    count = len(calls)

    assert not timer.is_running()
    assert len(calls) == count


def test_countdown_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        CountdownTimer(lambda: True, interval=0)


def _quiz_payload(quiz_source, question_count=3):
    request = QuizGenerationRequest(student_id="student_1", question_count=question_count)
    return quiz_source.generate_quiz(request).quiz.to_payload()


def test_quiz_rejects_question_count_mismatch(quiz_source):
    payload = _quiz_payload(quiz_source, question_count=4)
    payload["totalQuestions"] = 2

    with pytest.raises(ValidationError):
        PersonalizedQuiz.model_validate(payload)


def test_quiz_rejects_duplicate_question_ids(quiz_source):
    payload = _quiz_payload(quiz_source)
    payload["questions"][1]["id"] = payload["questions"][0]["id"]

    with pytest.raises(ValidationError):
        PersonalizedQuiz.model_validate(payload)
