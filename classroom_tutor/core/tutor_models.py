"""Domain models for AI tutoring: lessons, sessions, personalities and learning paths."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import Field

from classroom_tutor.core.models import CamelModel, LearningStyle, ProficiencyLevel, QuestionDifficulty

TutorStyle = Literal["encouraging", "analytical", "casual", "professional"]
SessionStatus = Literal["active", "paused", "completed", "abandoned"]
LessonStatus = Literal["pending", "in_progress", "completed", "paused"]


class AssessmentQuestion(CamelModel):
    id: str
    question: str
    options: list[str]
    correct_answer: int
    student_answer: int | None = None
    is_correct: bool | None = None
    time_spent: float = 0.0
    difficulty: QuestionDifficulty = "medium"
    topic: str = ""
    explanation: str = ""


class StudentAssessment(CamelModel):
    id: str
    student_id: str
    subject: str
    topic: str
    questions: list[AssessmentQuestion] = Field(default_factory=list)
    completed_at: datetime
    score: int = 0
    percentage: float = 0.0
    time_spent: float = 0.0
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    learning_style: LearningStyle = "visual"
    difficulty_level: ProficiencyLevel = "intermediate"
    recommendations: list[str] = Field(default_factory=list)


class ContentMetadata(CamelModel):
    video_url: str | None = None
    image_url: str | None = None
    interactive_type: str | None = None
    duration: int | None = None


class LessonContent(CamelModel):
    id: str
    type: Literal["text", "video", "image", "interactive", "example", "exercise"]
    title: str
    content: str
    order: int
    metadata: ContentMetadata | None = None


# Interactive element payloads, one per element type.


class ElementQuestion(CamelModel):
    question: str
    options: list[str]
    correct_answer: int


class QuizElementData(CamelModel):
    questions: list[ElementQuestion]


class DragDropElementData(CamelModel):
    items: list[str]
    targets: list[str]
    solution: dict[str, str] = Field(default_factory=dict)


class FillBlankElementData(CamelModel):
    exercise: str
    answer: str


class MatchingPair(CamelModel):
    left: str
    right: str


class MatchingElementData(CamelModel):
    pairs: list[MatchingPair]


class SimulationElementData(CamelModel):
    simulation_url: str | None = None
    parameters: dict[str, float] = Field(default_factory=dict)


class DiscussionElementData(CamelModel):
    prompt: str
    guiding_questions: list[str] = Field(default_factory=list)


class _ElementBase(CamelModel):
    id: str
    title: str
    content: str
    order: int
    feedback: str = ""


class QuizElement(_ElementBase):
    type: Literal["quiz"] = "quiz"
    data: QuizElementData


class DragDropElement(_ElementBase):
    type: Literal["drag_drop"] = "drag_drop"
    data: DragDropElementData


class FillBlankElement(_ElementBase):
    type: Literal["fill_blank"] = "fill_blank"
    data: FillBlankElementData


class MatchingElement(_ElementBase):
    type: Literal["matching"] = "matching"
    data: MatchingElementData


class SimulationElement(_ElementBase):
    type: Literal["simulation"] = "simulation"
    data: SimulationElementData


class DiscussionElement(_ElementBase):
    type: Literal["discussion"] = "discussion"
    data: DiscussionElementData


InteractiveElement = Annotated[
    Union[
        QuizElement,
        DragDropElement,
        FillBlankElement,
        MatchingElement,
        SimulationElement,
        DiscussionElement,
    ],
    Field(discriminator="type"),
]


class LessonQuestion(CamelModel):
    id: str
    question: str
    type: Literal["multiple_choice", "true_false", "fill_blank", "short_answer"]
    options: list[str] | None = None
    correct_answer: str | int
    explanation: str = ""
    difficulty: QuestionDifficulty = "medium"


class LessonAssessment(CamelModel):
    id: str
    questions: list[LessonQuestion] = Field(default_factory=list)
    passing_score: float = 70
    time_limit: int | None = None


class LessonPersonalization(CamelModel):
    learning_style: str = "visual"
    weaknesses: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)


class AILesson(CamelModel):
    id: str
    student_id: str
    subject: str
    topic: str
    title: str
    description: str = ""
    difficulty: ProficiencyLevel = "intermediate"
    estimated_duration: int = 30
    learning_objectives: list[str] = Field(default_factory=list)
    prerequisites: list[str] = Field(default_factory=list)
    content: list[LessonContent] = Field(default_factory=list)
    interactive_elements: list[InteractiveElement] = Field(default_factory=list)
    assessment: LessonAssessment | None = None
    personalized_for: LessonPersonalization = Field(default_factory=LessonPersonalization)
    created_at: datetime
    status: LessonStatus = "pending"

    def steps(self) -> list[LessonContent | InteractiveElement]:
        """Lesson content followed by interactive elements, each in their own order."""
        content = sorted(self.content, key=lambda c: c.order)
        elements = sorted(self.interactive_elements, key=lambda e: e.order)
        return [*content, *elements]


class LessonGenerationRequest(CamelModel):
    student_id: str
    subject: str
    topic: str | None = None
    difficulty: ProficiencyLevel | None = None
    learning_style: LearningStyle | None = None
    weaknesses: list[str] | None = None
    strengths: list[str] | None = None
    interests: list[str] | None = None
    duration: int | None = Field(default=None, gt=0)
    previous_assessments: list[StudentAssessment] | None = None
    tutor_personality: str | None = None


class LessonGenerationMetadata(CamelModel):
    generation_time: float = 0.0
    algorithm: str = ""
    confidence: float = 0.0
    personalization_score: float = 0.0


class LessonGenerationResponse(CamelModel):
    success: bool
    lesson: AILesson | None = None
    message: str = ""
    metadata: LessonGenerationMetadata = Field(default_factory=LessonGenerationMetadata)


class TutorInteraction(CamelModel):
    id: str
    timestamp: datetime
    type: Literal["question", "explanation", "encouragement", "hint", "correction", "praise"]
    content: str
    tutor_personality: TutorStyle = "encouraging"
    context: str = ""


class StudentResponse(CamelModel):
    id: str
    interaction_id: str
    response: str
    timestamp: datetime
    is_correct: bool | None = None
    confidence: Literal["low", "medium", "high"] | None = None
    time_spent: float = 0.0


class AdaptiveAdjustment(CamelModel):
    id: str
    timestamp: datetime
    type: Literal["difficulty", "pace", "style", "content", "approach"]
    reason: str
    old_value: Any = None
    new_value: Any = None
    effectiveness: float | None = None


class TutorSessionRecord(CamelModel):
    """Server-side record of a tutoring session."""

    id: str
    student_id: str
    lesson_id: str
    start_time: datetime
    end_time: datetime | None = None
    current_step: int = 0
    total_steps: int = Field(ge=1)
    progress: float = 0.0
    interactions: list[TutorInteraction] = Field(default_factory=list)
    student_responses: list[StudentResponse] = Field(default_factory=list)
    adaptive_adjustments: list[AdaptiveAdjustment] = Field(default_factory=list)
    status: SessionStatus = "active"


class SessionStartRequest(CamelModel):
    lesson_id: str
    student_id: str


class TutorPersonality(CamelModel):
    name: str
    style: TutorStyle = "encouraging"
    traits: list[str] = Field(default_factory=list)
    greeting: str = ""
    encouragement: list[str] = Field(default_factory=list)
    corrections: list[str] = Field(default_factory=list)
    praise: list[str] = Field(default_factory=list)
    hints: list[str] = Field(default_factory=list)


class LearningPathLesson(CamelModel):
    id: str
    lesson_id: str
    title: str
    order: int
    status: Literal["locked", "available", "in_progress", "completed"] = "locked"
    prerequisites: list[str] = Field(default_factory=list)
    estimated_duration: int = 30
    difficulty: QuestionDifficulty = "medium"


class Milestone(CamelModel):
    id: str
    title: str
    description: str = ""
    target_date: datetime
    achieved_date: datetime | None = None
    rewards: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)


class LearningPath(CamelModel):
    id: str
    student_id: str
    subject: str
    current_level: str
    target_level: str
    lessons: list[LearningPathLesson] = Field(default_factory=list)
    milestones: list[Milestone] = Field(default_factory=list)
    estimated_completion: datetime
    progress: float = 0.0
    created_at: datetime
    updated_at: datetime


class LearningPathRequest(CamelModel):
    student_id: str
    assessments: list[StudentAssessment] = Field(default_factory=list)


class TutorRecommendations(CamelModel):
    next_topics: list[str] = Field(default_factory=list)
    suggested_approach: str = ""
    optimal_session_length: int = 30
    best_time_of_day: str = ""


class TutorAnalytics(CamelModel):
    student_id: str
    total_sessions: int = 0
    total_time_spent: float = 0.0
    average_session_length: float = 0.0
    completion_rate: float = 0.0
    improvement_rate: float = 0.0
    favorite_topics: list[str] = Field(default_factory=list)
    challenging_topics: list[str] = Field(default_factory=list)
    learning_style_effectiveness: dict[LearningStyle, float] = Field(default_factory=dict)
    tutor_personality_preference: str = "encouraging"
    recommendations: TutorRecommendations = Field(default_factory=TutorRecommendations)
