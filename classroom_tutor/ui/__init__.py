"""Qt UI components for the student application."""

from .dialog_helpers import confirm_end_session, show_error, show_info, show_warning
from .question_renderer import render_lesson_step, render_question_with_options
from .student_main_window import StudentMainWindow

__all__ = [
    "StudentMainWindow",
    "confirm_end_session",
    "render_lesson_step",
    "render_question_with_options",
    "show_error",
    "show_info",
    "show_warning",
]
