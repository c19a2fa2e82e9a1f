"""Domain models for personalized quizzes.

The models double as wire schemas: fields are snake_case in Python and camelCase
on the wire, and both spellings are accepted when parsing.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from classroom_tutor.constants.quiz_constants import OPTIONS_PER_QUESTION

LearningStyle = Literal["visual", "text", "kinesthetic", "auditory"]
QuestionDifficulty = Literal["easy", "medium", "hard"]
RequestedDifficulty = Literal["easy", "medium", "hard", "adaptive"]
QuizDifficulty = Literal["easy", "medium", "hard", "mixed", "adaptive"]
QuizStatus = Literal["pending", "in_progress", "completed", "expired"]
ProficiencyLevel = Literal["beginner", "intermediate", "advanced"]


class CamelModel(BaseModel):
    """Base model that speaks camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Explanation(CamelModel):
    text: str
    video: str | None = None
    image: str | None = None


class Question(CamelModel):
    """Multiple-choice question with exactly four options."""

    model_config = ConfigDict(frozen=True)

    id: str
    question: str
    options: list[str]
    correct_answer: int = Field(ge=0, lt=OPTIONS_PER_QUESTION)
    difficulty: QuestionDifficulty = "medium"
    topic: str = "General"
    explanation: Explanation
    subject: str = "General"
    tags: list[str] = Field(default_factory=list)
    learning_style: str | None = None
    estimated_time: int = 60
    language: str = "English"

    @field_validator("options")
    @classmethod
    def _four_options(cls, options: list[str]) -> list[str]:
        if len(options) != OPTIONS_PER_QUESTION:
            raise ValueError("Each question must have exactly four options.")
        return options

    @field_validator("explanation", mode="before")
    @classmethod
    def _plain_text_explanation(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"text": value}
        return value


class PersonalizedFor(CamelModel):
    interests: list[str] = Field(default_factory=list)
    learning_style: str = "visual"
    difficulty_level: str = "medium"
    weak_areas: list[str] = Field(default_factory=list)


class PersonalizedQuiz(CamelModel):
    """A generated quiz. Immutable once generated."""

    model_config = ConfigDict(frozen=True)

    id: str
    student_id: str
    class_id: str | None = None
    title: str = "Personalized Quiz"
    subject: str = "General"
    questions: list[Question]
    total_questions: int
    time_limit: int = Field(gt=0)
    difficulty: QuizDifficulty = "medium"
    personalized_for: PersonalizedFor = Field(default_factory=PersonalizedFor)
    created_at: datetime
    expires_at: datetime
    status: QuizStatus = "pending"

    @model_validator(mode="after")
    def _check_questions(self) -> PersonalizedQuiz:
        if self.total_questions != len(self.questions):
            raise ValueError(
                f"totalQuestions is {self.total_questions} but the quiz carries {len(self.questions)} questions"
            )
        ids = [question.id for question in self.questions]
        if len(set(ids)) != len(ids):
            raise ValueError("Question ids must be unique within a quiz")
        return self

    def find_question(self, question_id: str) -> Question | None:
        return next((q for q in self.questions if q.id == question_id), None)


class Answer(CamelModel):
    """A single recorded answer. Appended to an attempt, never mutated."""

    model_config = ConfigDict(frozen=True)

    question_id: str
    selected_answer: int
    is_correct: bool
    time_spent: float = 0.0


class AttemptFeedback(CamelModel):
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class QuizAttempt(CamelModel):
    """One student's run through a quiz."""

    id: str
    quiz_id: str
    student_id: str
    start_time: datetime
    end_time: datetime | None = None
    answers: list[Answer] = Field(default_factory=list)
    score: int = 0
    percentage: float = 0.0
    time_spent: float = 0.0
    completed: bool = False
    feedback: AttemptFeedback = Field(default_factory=AttemptFeedback)


class StudentProfile(CamelModel):
    id: str
    name: str = ""
    grade: str = ""
    interests: list[str] = Field(default_factory=list)
    learning_style: LearningStyle = "visual"
    difficulty_level: ProficiencyLevel = "intermediate"
    weak_areas: list[str] = Field(default_factory=list)
    strong_areas: list[str] = Field(default_factory=list)
    preferred_subjects: list[str] = Field(default_factory=list)
    language: str = "English"
    time_zone: str = "UTC"
    last_active: datetime | None = None
    total_quizzes_completed: int = 0
    average_score: float = 0.0


class ClassProfile(CamelModel):
    id: str
    name: str
    grade: str = ""
    subject: str = ""
    teacher_id: str = ""
    students: list[StudentProfile] = Field(default_factory=list)
    curriculum: list[str] = Field(default_factory=list)
    average_difficulty: ProficiencyLevel = "intermediate"
    last_quiz_date: datetime | None = None
    total_quizzes: int = 0


class QuizGenerationRequest(CamelModel):
    student_id: str
    class_id: str | None = None
    subject: str | None = None
    topic: str | None = None
    difficulty: RequestedDifficulty | None = None
    question_count: int = Field(ge=1)
    time_limit: int | None = Field(default=None, gt=0)
    interests: list[str] | None = None
    learning_style: str | None = None
    weak_areas: list[str] | None = None
    language: str | None = None
    exclude_topics: list[str] | None = None
    include_topics: list[str] | None = None


class GenerationMetadata(CamelModel):
    generation_time: float = 0.0
    algorithm: str = ""
    confidence: float = 0.0


class QuizGenerationResponse(CamelModel):
    success: bool
    quiz: PersonalizedQuiz | None = None
    message: str = ""
    metadata: GenerationMetadata = Field(default_factory=GenerationMetadata)


class SubjectBreakdown(CamelModel):
    subject: str
    score: float
    questions_answered: int
    time_spent: float


class DifficultyScore(CamelModel):
    score: float = 0.0
    count: int = 0


class AnalyticsRecommendations(CamelModel):
    focus_areas: list[str] = Field(default_factory=list)
    suggested_difficulty: str = "medium"
    learning_style_adjustments: list[str] = Field(default_factory=list)


class QuizAnalytics(CamelModel):
    """Server-computed performance summary for a student."""

    student_id: str
    total_quizzes: int = 0
    average_score: float = 0.0
    improvement_rate: float = 0.0
    time_spent: float = 0.0
    subject_breakdown: list[SubjectBreakdown] = Field(default_factory=list)
    difficulty_progress: dict[QuestionDifficulty, DifficultyScore] = Field(default_factory=dict)
    learning_style_effectiveness: dict[LearningStyle, float] = Field(default_factory=dict)
    recommendations: AnalyticsRecommendations = Field(default_factory=AnalyticsRecommendations)


class AttemptSubmissionResponse(CamelModel):
    success: bool
    analytics: QuizAnalytics | None = None


class StudentProgress(CamelModel):
    student_id: str
    name: str = ""
    score: float = 0.0
    completion_time: float = 0.0
    weak_areas: list[str] = Field(default_factory=list)


class TopicPerformance(CamelModel):
    topic: str
    average_score: float
    difficulty: str = "medium"
    student_count: int = 0


class ClassRecommendations(CamelModel):
    class_focus_areas: list[str] = Field(default_factory=list)
    individual_attention: list[str] = Field(default_factory=list)
    curriculum_adjustments: list[str] = Field(default_factory=list)


class ClassQuizAnalytics(CamelModel):
    class_id: str
    total_students: int = 0
    average_score: float = 0.0
    completion_rate: float = 0.0
    student_progress: list[StudentProgress] = Field(default_factory=list)
    topic_performance: list[TopicPerformance] = Field(default_factory=list)
    recommendations: ClassRecommendations = Field(default_factory=ClassRecommendations)
