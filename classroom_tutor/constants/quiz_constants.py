"""Quiz-related constants shared across UI and core layers."""

DEFAULT_QUESTION_COUNT: int = 10
DEFAULT_TIME_LIMIT_SECONDS: int = 1800
DEFAULT_DIFFICULTY: str = "adaptive"
DEFAULT_LANGUAGE: str = "English"
OPTIONS_PER_QUESTION: int = 4
QUIZ_EXPIRY_DAYS: int = 7
TIMER_INTERVAL_SECONDS: float = 1.0
TIME_LIMIT_WARNING_WINDOW_SECONDS: int = 30
