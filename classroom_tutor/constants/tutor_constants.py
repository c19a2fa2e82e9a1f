"""Defaults for lesson generation and tutoring sessions."""

DEFAULT_LESSON_SUBJECT: str = "Mathematics"
DEFAULT_LESSON_DIFFICULTY: str = "intermediate"
DEFAULT_LEARNING_STYLE: str = "visual"
DEFAULT_LESSON_DURATION_MINUTES: int = 30
DEFAULT_SESSION_STEPS: int = 5
