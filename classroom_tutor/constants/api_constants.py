"""HTTP endpoint paths and network defaults for the classroom backend."""

DEFAULT_API_BASE_URL: str = "https://api.aiclassroomtutor.com"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 15.0
PLACEHOLDER_AUTH_TOKEN: str = "mock-token"

QUIZ_GENERATE_PATH: str = "/api/quiz/generate"
CLASS_QUIZ_GENERATE_PATH: str = "/api/quiz/class/{class_id}/generate"
QUIZ_ATTEMPT_PATH: str = "/api/quiz/attempt"
STUDENT_PROFILE_PATH: str = "/api/students/{student_id}"
CLASS_PROFILE_PATH: str = "/api/classes/{class_id}"
STUDENT_ANALYTICS_PATH: str = "/api/analytics/student/{student_id}"
CLASS_ANALYTICS_PATH: str = "/api/analytics/class/{class_id}"

TUTOR_LESSON_PATH: str = "/api/tutor/generate-lesson"
TUTOR_SESSION_START_PATH: str = "/api/tutor/session/start"
TUTOR_PERSONALITY_PATH: str = "/api/tutor/personality/{student_id}"
TUTOR_ANALYTICS_PATH: str = "/api/tutor/analytics/{student_id}"
TUTOR_LEARNING_PATH_PATH: str = "/api/tutor/learning-path"

LOCAL_BACKEND_HOST: str = "127.0.0.1"
LOCAL_BACKEND_PORT: int = 8765
