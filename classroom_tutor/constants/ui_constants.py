"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Classroom Tutor"
TAB_QUIZ: str = "Quiz"
TAB_TUTOR: str = "AI Tutor"

QUIZ_GENERATE_BUTTON: str = "Generate Quiz"
QUIZ_START_BUTTON: str = "Start Quiz"
QUIZ_SUBMIT_BUTTON: str = "Submit Quiz"
QUIZ_RETRY_BUTTON: str = "Try Again"
QUIZ_SUBJECT_PLACEHOLDER: str = "Subject (optional)"
QUIZ_IDLE_MESSAGE: str = "Generate a personalized quiz to get started."
QUIZ_READY_TEMPLATE: str = "{title}: {count} question(s), {minutes} minute(s)."
QUIZ_GENERATING_MESSAGE: str = "Generating your quiz…"
QUIZ_ALL_ANSWERED_MESSAGE: str = "All questions answered. Submit when you are ready."
QUIZ_RESULT_TEMPLATE: str = "You scored {score}/{total} ({percentage:.0f}% of answered questions)."

TUTOR_GENERATE_BUTTON: str = "Generate Lesson"
TUTOR_PREVIOUS_BUTTON: str = "Previous Step"
TUTOR_NEXT_BUTTON: str = "Next Step"
TUTOR_PAUSE_BUTTON: str = "Pause"
TUTOR_RESUME_BUTTON: str = "Resume"
TUTOR_END_BUTTON: str = "End Session"
TUTOR_RESPONSE_PLACEHOLDER: str = "Type your answer or question for the tutor."
TUTOR_SEND_BUTTON: str = "Send"
TUTOR_IDLE_MESSAGE: str = "Generate a lesson to start a tutoring session."
TUTOR_STEP_TEMPLATE: str = "Step {step} of {total}"
TUTOR_COMPLETED_MESSAGE: str = "Session completed. Great work!"

ERROR_DIALOG_TITLE: str = "Something went wrong"
