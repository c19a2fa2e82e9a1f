"""Turns quiz questions and lesson steps into HTML for the web views."""

from __future__ import annotations

from classroom_tutor.core.markdown_renderer import renderer
from classroom_tutor.core.models import Question
from classroom_tutor.core.tutor_models import (
    DiscussionElement,
    DragDropElement,
    FillBlankElement,
    InteractiveElement,
    LessonContent,
    MatchingElement,
    QuizElement,
    SimulationElement,
)


def render_question_with_options(question: Question, number: int, total: int, font_size: int = 14) -> str:
    """Render a quiz question with its lettered options as a full HTML page.

    Args:
        question: The question to show (Markdown and LaTeX are supported)
        number: 1-based position of the question in the quiz
        total: Number of questions in the quiz
        font_size: Font size in points for the question text
    """
    markdown_lines = [
        f"*Question {number} of {total} · {question.topic} · {question.difficulty}*",
        question.question.strip() or "(No question text)",
    ]
    for idx, option in enumerate(question.options):
        letter = chr(ord("A") + idx)
        markdown_lines.append(f"**{letter}.** {option or '(empty)'}")
    return renderer.render_full_document("\n\n".join(markdown_lines), font_size=font_size)


def render_lesson_step(item: LessonContent | InteractiveElement, font_size: int = 14) -> str:
    """Render one lesson step, either a content block or an interactive element."""
    lines = [f"## {item.title}", item.content]
    if isinstance(item, QuizElement):
        for number, question in enumerate(item.data.questions, start=1):
            lines.append(f"**{number}. {question.question}**")
            lines.extend(f"- {chr(ord('A') + idx)}. {option}" for idx, option in enumerate(question.options))
    elif isinstance(item, FillBlankElement):
        lines.append(f"> {item.data.exercise}")
    elif isinstance(item, DragDropElement):
        lines.append("**Items:** " + ", ".join(item.data.items))
        lines.append("**Targets:** " + ", ".join(item.data.targets))
    elif isinstance(item, MatchingElement):
        lines.extend(f"- {pair.left} ↔ ?" for pair in item.data.pairs)
        lines.append("**Choices:** " + ", ".join(pair.right for pair in item.data.pairs))
    elif isinstance(item, SimulationElement):
        if item.data.simulation_url:
            lines.append(f"[Open the simulation]({item.data.simulation_url})")
    elif isinstance(item, DiscussionElement):
        lines.append(f"**{item.data.prompt}**")
        lines.extend(f"- {question}" for question in item.data.guiding_questions)
    return renderer.render_full_document("\n\n".join(lines), title=item.title, font_size=font_size)
