"""Static metadata describing Classroom Tutor."""

APP_NAME = "Classroom Tutor"
APP_VERSION = "0.2"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Classroom Tutor is a student client for personalized quizzes and guided "
    "tutoring sessions. It talks to the classroom backend and can fall back to a "
    "local practice backend when you are offline."
)

HELP_TEXT = (
    "Quiz tab: generate a personalized quiz, press Start and answer each question. "
    "The quiz is submitted automatically when the timer runs out.\n\n"
    "Tutor tab: generate a lesson, then walk through it step by step. "
    "You can pause and resume the session at any time."
)
