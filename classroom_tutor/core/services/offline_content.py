"""Offline content sources used when the classroom backend cannot be reached.

Both sources build well-formed responses from small static banks. They back the
local practice server and, when the caller opts in, stand in for the remote
backend inside the session managers.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone
import random
from statistics import mean
from uuid import uuid4

from classroom_tutor.constants.quiz_constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_QUESTION_COUNT,
    DEFAULT_TIME_LIMIT_SECONDS,
    QUIZ_EXPIRY_DAYS,
)
from classroom_tutor.constants.tutor_constants import (
    DEFAULT_LEARNING_STYLE,
    DEFAULT_LESSON_DIFFICULTY,
    DEFAULT_LESSON_DURATION_MINUTES,
    DEFAULT_LESSON_SUBJECT,
    DEFAULT_SESSION_STEPS,
)
from classroom_tutor.core.models import (
    AnalyticsRecommendations,
    ClassProfile,
    ClassQuizAnalytics,
    ClassRecommendations,
    DifficultyScore,
    GenerationMetadata,
    PersonalizedFor,
    PersonalizedQuiz,
    Question,
    QuizAnalytics,
    QuizAttempt,
    QuizGenerationRequest,
    QuizGenerationResponse,
    StudentProfile,
    StudentProgress,
    SubjectBreakdown,
    TopicPerformance,
)
from classroom_tutor.core.tutor_models import (
    AILesson,
    ContentMetadata,
    DiscussionElement,
    DiscussionElementData,
    DragDropElement,
    DragDropElementData,
    ElementQuestion,
    FillBlankElement,
    FillBlankElementData,
    LearningPath,
    LearningPathLesson,
    LessonAssessment,
    LessonContent,
    LessonGenerationMetadata,
    LessonGenerationRequest,
    LessonGenerationResponse,
    LessonPersonalization,
    LessonQuestion,
    Milestone,
    QuizElement,
    QuizElementData,
    StudentAssessment,
    TutorAnalytics,
    TutorPersonality,
    TutorRecommendations,
    TutorSessionRecord,
)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


# (question, options, correct index, topic)
_QuestionTemplate = tuple[str, list[str], int, str]

_QUESTION_BANK: dict[str, dict[str, list[_QuestionTemplate]]] = {
    "Mathematics": {
        "easy": [
            ("What is 5 + 3?", ["6", "7", "8", "9"], 2, "Arithmetic"),
            ("What is the perimeter of a square with side 4?", ["8", "12", "16", "20"], 2, "Geometry"),
        ],
        "medium": [
            ("Solve for x: 2x + 5 = 13", ["x = 3", "x = 4", "x = 5", "x = 6"], 1, "Algebra"),
            ("What is the mean of 2, 4, 6 and 8?", ["4", "5", "6", "20"], 1, "Statistics"),
        ],
        "hard": [
            (
                "Find the derivative of f(x) = x³ + 2x² - 5x + 1",
                ["3x² + 4x - 5", "3x² + 4x + 5", "3x² - 4x - 5", "3x² - 4x + 5"],
                0,
                "Calculus",
            ),
            ("Solve the system x + y = 5, 2x - y = 1", ["x = 1, y = 4", "x = 2, y = 3", "x = 3, y = 2", "x = 4, y = 1"], 1, "Algebra"),
        ],
    },
    "Science": {
        "easy": [
            ("What is the chemical symbol for water?", ["H2O", "CO2", "O2", "H2"], 0, "Chemistry"),
            ("Which organ pumps blood through the body?", ["Lungs", "Liver", "Heart", "Kidney"], 2, "Biology"),
        ],
        "medium": [
            ("Which planet is closest to the Sun?", ["Venus", "Mercury", "Earth", "Mars"], 1, "Earth Science"),
            ("What is the SI unit of force?", ["Joule", "Watt", "Pascal", "Newton"], 3, "Physics"),
        ],
        "hard": [
            ("Which gas do plants release during photosynthesis?", ["Carbon dioxide", "Oxygen", "Nitrogen", "Hydrogen"], 1, "Biology"),
            ("What is the pH of a neutral solution at 25°C?", ["0", "1", "7", "14"], 2, "Chemistry"),
        ],
    },
    "English": {
        "easy": [
            ("What is the past tense of 'go'?", ["goed", "went", "gone", "going"], 1, "Grammar"),
            ("Which word is a noun?", ["quickly", "happy", "table", "run"], 2, "Grammar"),
        ],
        "medium": [
            ("In 'Time is a thief', what is time compared to?", ["A clock", "A thief", "A river", "A friend"], 1, "Literature"),
            ("Which sentence is written in the passive voice?", ["The cat chased the mouse.", "The mouse was chased by the cat.", "The cat is chasing.", "Chase the mouse!"], 1, "Writing"),
        ],
        "hard": [
            (
                "Which line opens Shakespeare's Sonnet 18?",
                [
                    "To be, or not to be",
                    "Shall I compare thee to a summer's day?",
                    "All the world's a stage",
                    "My mistress' eyes are nothing like the sun",
                ],
                1,
                "Literature",
            ),
            ("What literary device is 'the wind whispered through the trees'?", ["Simile", "Hyperbole", "Personification", "Alliteration"], 2, "Reading Comprehension"),
        ],
    },
}

_DEFAULT_SUBJECTS = tuple(_QUESTION_BANK)
_DEFAULT_SUBJECT_LABEL = "Mixed"
_ESTIMATED_TIME = {"easy": 60, "medium": 90, "hard": 120}

_STYLE_ADJUSTMENTS = {
    "visual": ["Use more visual aids", "Practice with diagrams and concept maps"],
    "text": ["Summarize each topic in your own words", "Read worked examples before practising"],
    "kinesthetic": ["Practice with interactive exercises", "Use physical models where possible"],
    "auditory": ["Explain solutions out loud", "Discuss problems with a study partner"],
}


class OfflineQuizSource:
    """Builds quizzes, profiles and analytics without a backend."""

    def __init__(self, rng: random.Random | None = None, clock: Clock = utc_now) -> None:
        self._rng = rng or random.Random()
        self._clock = clock

    def generate_quiz(self, request: QuizGenerationRequest) -> QuizGenerationResponse:
        questions = self._build_questions(request)
        now = self._clock()
        difficulty = request.difficulty or "medium"
        subject = request.subject or _DEFAULT_SUBJECT_LABEL
        quiz = PersonalizedQuiz(
            id=_new_id("quiz"),
            student_id=request.student_id,
            class_id=request.class_id,
            title=f"{request.subject or 'Personalized'} Quiz",
            subject=subject,
            questions=questions,
            total_questions=len(questions),
            time_limit=request.time_limit or DEFAULT_TIME_LIMIT_SECONDS,
            difficulty=difficulty,
            personalized_for=PersonalizedFor(
                interests=request.interests or [subject],
                learning_style=request.learning_style or DEFAULT_LEARNING_STYLE,
                difficulty_level=difficulty,
                weak_areas=request.weak_areas or [],
            ),
            created_at=now,
            expires_at=now + timedelta(days=QUIZ_EXPIRY_DAYS),
            status="pending",
        )
        return QuizGenerationResponse(
            success=True,
            quiz=quiz,
            message="Quiz generated from offline question bank",
            metadata=GenerationMetadata(generation_time=0.0, algorithm="offline-bank-v1", confidence=0.5),
        )

    def generate_class_quiz(self, class_id: str, request: QuizGenerationRequest) -> QuizGenerationResponse:
        class_request = request.model_copy(update={"class_id": class_id})
        return self.generate_quiz(class_request)

    def _build_questions(self, request: QuizGenerationRequest) -> list[Question]:
        subjects = [request.subject] if request.subject in _QUESTION_BANK else list(_DEFAULT_SUBJECTS)
        count = request.question_count or DEFAULT_QUESTION_COUNT
        questions: list[Question] = []
        for position in range(count):
            difficulty = _difficulty_for_position(request.difficulty, position, count)
            subject = self._rng.choice(subjects)
            template = self._pick_template(subject, difficulty, request)
            text, options, correct, topic = template
            questions.append(
                Question(
                    id=f"q_{position + 1}",
                    question=text,
                    options=list(options),
                    correct_answer=correct,
                    difficulty=difficulty,
                    topic=topic,
                    subject=subject,
                    explanation={
                        "text": f"The correct answer is '{options[correct]}'. Review {topic} in {subject} for details.",
                    },
                    tags=[subject.lower(), difficulty, (request.topic or "general").lower()],
                    learning_style=request.learning_style or DEFAULT_LEARNING_STYLE,
                    estimated_time=_ESTIMATED_TIME[difficulty],
                    language=request.language or DEFAULT_LANGUAGE,
                )
            )
        return questions

    def _pick_template(self, subject: str, difficulty: str, request: QuizGenerationRequest) -> _QuestionTemplate:
        candidates = _QUESTION_BANK[subject][difficulty]
        if request.exclude_topics:
            excluded = {topic.lower() for topic in request.exclude_topics}
            candidates = [c for c in candidates if c[3].lower() not in excluded] or candidates
        preferred = {topic.lower() for topic in (request.include_topics or []) + (request.weak_areas or [])}
        if preferred:
            focused = [c for c in candidates if c[3].lower() in preferred]
            if focused:
                candidates = focused
        return self._rng.choice(candidates)

    def student_profile(self, student_id: str) -> StudentProfile:
        return StudentProfile(
            id=student_id,
            name="Demo Student",
            grade="10th",
            interests=["Mathematics", "Science", "Technology"],
            learning_style="visual",
            difficulty_level="intermediate",
            weak_areas=["Algebra", "Chemistry"],
            strong_areas=["Geometry", "Physics"],
            preferred_subjects=["Mathematics", "Science"],
            language="English",
            time_zone="UTC",
            last_active=self._clock(),
        )

    def class_profile(self, class_id: str, students: Sequence[StudentProfile] = ()) -> ClassProfile:
        return ClassProfile(
            id=class_id,
            name="Grade 10 Mathematics",
            grade="10th",
            subject="Mathematics",
            teacher_id="teacher_1",
            students=list(students),
            curriculum=["Algebra", "Geometry", "Trigonometry"],
            average_difficulty="intermediate",
            last_quiz_date=self._clock(),
        )

    def build_analytics(
        self,
        attempt: QuizAttempt,
        quiz: PersonalizedQuiz | None = None,
        previous_attempts: Sequence[QuizAttempt] = (),
    ) -> QuizAnalytics:
        """Summarize an attempt, optionally against the student's earlier attempts."""
        questions = {q.id: q for q in quiz.questions} if quiz is not None else {}
        by_subject: dict[str, list] = defaultdict(list)
        by_difficulty: dict[str, list] = defaultdict(list)
        missed_topics: set[str] = set()
        for answer in attempt.answers:
            question = questions.get(answer.question_id)
            subject = question.subject if question else "General"
            by_subject[subject].append(answer)
            if question is not None:
                by_difficulty[question.difficulty].append(answer)
                if not answer.is_correct:
                    missed_topics.add(question.topic)

        history = [a.percentage for a in previous_attempts]
        average = mean(history + [attempt.percentage])
        improvement = attempt.percentage - mean(history) if history else 0.0
        style = quiz.personalized_for.learning_style if quiz is not None else DEFAULT_LEARNING_STYLE

        return QuizAnalytics(
            student_id=attempt.student_id,
            total_quizzes=len(history) + 1,
            average_score=round(average, 2),
            improvement_rate=round(improvement, 2),
            time_spent=attempt.time_spent,
            subject_breakdown=[
                SubjectBreakdown(
                    subject=subject,
                    score=_percent(answers),
                    questions_answered=len(answers),
                    time_spent=sum(a.time_spent for a in answers),
                )
                for subject, answers in sorted(by_subject.items())
            ],
            difficulty_progress={
                level: DifficultyScore(score=_percent(answers), count=len(answers))
                for level, answers in by_difficulty.items()
            },
            learning_style_effectiveness={style: attempt.percentage} if style in _STYLE_ADJUSTMENTS else {},
            recommendations=AnalyticsRecommendations(
                focus_areas=sorted(missed_topics),
                suggested_difficulty=_suggest_difficulty(attempt.percentage),
                learning_style_adjustments=list(_STYLE_ADJUSTMENTS.get(style, [])),
            ),
        )

    def class_analytics(
        self,
        class_id: str,
        attempts: Sequence[QuizAttempt],
        quizzes: dict[str, PersonalizedQuiz] | None = None,
        enrolled: int | None = None,
    ) -> ClassQuizAnalytics:
        quizzes = quizzes or {}
        latest: dict[str, QuizAttempt] = {}
        for attempt in attempts:
            latest[attempt.student_id] = attempt

        topic_answers: dict[str, list] = defaultdict(list)
        topic_students: dict[str, set[str]] = defaultdict(set)
        progress: list[StudentProgress] = []
        for student_id, attempt in sorted(latest.items()):
            quiz = quizzes.get(attempt.quiz_id)
            weak: set[str] = set()
            for answer in attempt.answers:
                question = quiz.find_question(answer.question_id) if quiz is not None else None
                if question is None:
                    continue
                topic_answers[question.topic].append(answer)
                topic_students[question.topic].add(student_id)
                if not answer.is_correct:
                    weak.add(question.topic)
            progress.append(
                StudentProgress(
                    student_id=student_id,
                    score=attempt.percentage,
                    completion_time=attempt.time_spent,
                    weak_areas=sorted(weak),
                )
            )

        topic_performance = [
            TopicPerformance(
                topic=topic,
                average_score=_percent(answers),
                student_count=len(topic_students[topic]),
            )
            for topic, answers in sorted(topic_answers.items())
        ]
        total_students = max(enrolled or 0, len(latest))
        weakest = [t.topic for t in sorted(topic_performance, key=lambda t: t.average_score) if t.average_score < 70]
        return ClassQuizAnalytics(
            class_id=class_id,
            total_students=total_students,
            average_score=round(mean(a.percentage for a in latest.values()), 2) if latest else 0.0,
            completion_rate=round(100 * len(latest) / total_students, 2) if total_students else 0.0,
            student_progress=progress,
            topic_performance=topic_performance,
            recommendations=ClassRecommendations(
                class_focus_areas=weakest,
                individual_attention=[p.student_id for p in progress if p.score < 50],
                curriculum_adjustments=[f"Add more practice problems for {topic}" for topic in weakest],
            ),
        )


def _difficulty_for_position(requested: str | None, position: int, count: int) -> str:
    """Adaptive quizzes ramp from easy to hard by position; other modes are fixed."""
    if requested in ("easy", "medium", "hard"):
        return requested
    if requested == "adaptive":
        levels = ("easy", "medium", "hard")
        return levels[min(2, position * 3 // max(count, 1))]
    return "medium"


def _percent(answers: Sequence) -> float:
    if not answers:
        return 0.0
    return round(100 * sum(1 for a in answers if a.is_correct) / len(answers), 2)


def _suggest_difficulty(percentage: float) -> str:
    if percentage >= 80:
        return "hard"
    if percentage >= 50:
        return "medium"
    return "easy"


_EXAMPLES = {
    "Algebra Basics": {
        "beginner": "If x = 3, what is 2x + 1? Answer: 2(3) + 1 = 6 + 1 = 7",
        "intermediate": "Solve for x: 2x + 5 = 13. Answer: 2x = 8, so x = 4",
        "advanced": "Solve the system: x + y = 5, 2x - y = 1. Answer: x = 2, y = 3",
    },
    "Geometry": {
        "beginner": "A rectangle has length 5 and width 3. What is its area? Answer: 5 × 3 = 15 square units",
        "intermediate": "Find the area of a triangle with base 6 and height 4. Answer: (1/2) × 6 × 4 = 12 square units",
        "advanced": "A circle has radius 5. Find its circumference and area. Answer: C = 10π, A = 25π",
    },
}

_OBJECTIVES = {
    "Algebra Basics": [
        "Understand basic algebraic concepts",
        "Solve simple linear equations",
        "Apply algebraic thinking to word problems",
    ],
    "Geometry": [
        "Identify geometric shapes and properties",
        "Calculate area and perimeter",
        "Understand angle relationships",
    ],
}

_PREREQUISITES = {
    "beginner": ["Basic arithmetic skills"],
    "intermediate": ["Basic arithmetic", "Elementary algebra"],
    "advanced": ["Advanced arithmetic", "Intermediate algebra", "Problem-solving skills"],
}


class OfflineTutorSource:
    """Builds lessons, sessions and tutor data without a backend."""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._lesson_steps: dict[str, int] = {}

    def generate_lesson(self, request: LessonGenerationRequest) -> LessonGenerationResponse:
        subject = request.subject or DEFAULT_LESSON_SUBJECT
        topic = request.topic or "Algebra Basics"
        difficulty = request.difficulty or DEFAULT_LESSON_DIFFICULTY
        style = request.learning_style or DEFAULT_LEARNING_STYLE
        lesson = AILesson(
            id=_new_id("lesson"),
            student_id=request.student_id,
            subject=subject,
            topic=topic,
            title=f"Personalized {topic} Lesson",
            description=f"A customized lesson on {topic} designed for your learning style and needs.",
            difficulty=difficulty,
            estimated_duration=request.duration or DEFAULT_LESSON_DURATION_MINUTES,
            learning_objectives=_OBJECTIVES.get(topic, [
                "Master the fundamental concepts",
                "Apply knowledge to solve problems",
                "Build confidence in the subject",
            ]),
            prerequisites=list(_PREREQUISITES[difficulty]),
            content=_lesson_content(topic, style, difficulty),
            interactive_elements=_interactive_elements(topic, style),
            assessment=LessonAssessment(
                id=_new_id("assessment"),
                questions=[
                    LessonQuestion(
                        id="q1",
                        question="What is the primary focus of this lesson?",
                        type="multiple_choice",
                        options=["Basic concepts", "Advanced techniques", "Problem solving", "All of the above"],
                        correct_answer=3,
                        explanation="This lesson covers all aspects to give you a complete understanding.",
                        difficulty="easy",
                    ),
                ],
                passing_score=70,
                time_limit=15,
            ),
            personalized_for=LessonPersonalization(
                learning_style=style,
                weaknesses=request.weaknesses or ["Problem Solving"],
                strengths=request.strengths or ["Basic Concepts"],
                interests=request.interests or [subject],
            ),
            created_at=self._clock(),
        )
        self._lesson_steps[lesson.id] = len(lesson.steps())
        return LessonGenerationResponse(
            success=True,
            lesson=lesson,
            message="Lesson generated offline from lesson templates",
            metadata=LessonGenerationMetadata(algorithm="offline-templates-v1", confidence=0.5),
        )

    def create_session(self, lesson_id: str, student_id: str) -> TutorSessionRecord:
        return TutorSessionRecord(
            id=_new_id("session"),
            student_id=student_id,
            lesson_id=lesson_id,
            start_time=self._clock(),
            current_step=0,
            total_steps=self._lesson_steps.get(lesson_id, DEFAULT_SESSION_STEPS),
            progress=0.0,
            status="active",
        )

    def personality(self) -> TutorPersonality:
        return TutorPersonality(
            name="Alex",
            style="encouraging",
            traits=["patient", "supportive", "clear", "motivating"],
            greeting="Hi there! I'm Alex, your AI tutor. I'm here to help you learn and grow!",
            encouragement=["You're doing great!", "Don't worry, we'll work through this together!"],
            corrections=["Not quite, but you're on the right track!", "Let's try a different approach."],
            praise=["Excellent work!", "Perfect! You understand this concept well."],
            hints=["Try breaking this down into smaller steps...", "What pattern do you notice here?"],
        )

    def analytics(self, student_id: str) -> TutorAnalytics:
        return TutorAnalytics(
            student_id=student_id,
            favorite_topics=["Algebra", "Geometry"],
            challenging_topics=["Calculus", "Statistics"],
            learning_style_effectiveness={"visual": 85, "text": 72, "kinesthetic": 68, "auditory": 75},
            tutor_personality_preference="encouraging",
            recommendations=TutorRecommendations(
                next_topics=["Advanced Algebra", "Trigonometry"],
                suggested_approach="Visual learning with interactive exercises",
                optimal_session_length=25,
                best_time_of_day="Afternoon",
            ),
        )

    def learning_path(self, student_id: str, assessments: Sequence[StudentAssessment]) -> LearningPath:
        """Turn assessment weaknesses into an ordered lesson sequence."""
        subject = assessments[0].subject if assessments else DEFAULT_LESSON_SUBJECT
        topics: list[str] = []
        for assessment in assessments:
            for weakness in assessment.weaknesses:
                if weakness not in topics:
                    topics.append(weakness)
        if not topics:
            topics = ["Algebra Fundamentals", "Linear Equations", "Quadratic Equations"]

        difficulties = ("easy", "medium", "hard")
        lessons = []
        for index, topic in enumerate(topics):
            lesson_id = f"lesson_{index + 1}"
            lessons.append(
                LearningPathLesson(
                    id=lesson_id,
                    lesson_id=lesson_id,
                    title=topic,
                    order=index + 1,
                    status="available" if index == 0 else "locked",
                    prerequisites=[f"lesson_{index}"] if index else [],
                    estimated_duration=30 + 15 * min(index, 2),
                    difficulty=difficulties[min(index, 2)],
                )
            )

        now = self._clock()
        scores = [a.percentage for a in assessments]
        current_level = "Intermediate" if scores and mean(scores) >= 60 else "Beginner"
        return LearningPath(
            id=_new_id("path"),
            student_id=student_id,
            subject=subject,
            current_level=current_level,
            target_level="Advanced",
            lessons=lessons,
            milestones=[
                Milestone(
                    id="milestone_1",
                    title=f"{subject} Milestone",
                    description=f"Complete all {len(lessons)} lessons",
                    target_date=now + timedelta(days=30),
                    rewards=["Certificate", "Badge"],
                    requirements=[lesson.id for lesson in lessons],
                )
            ],
            estimated_completion=now + timedelta(days=14 * len(lessons)),
            progress=0.0,
            created_at=now,
            updated_at=now,
        )


def _lesson_content(topic: str, style: str, difficulty: str) -> list[LessonContent]:
    content = [
        LessonContent(
            id="intro_1",
            type="text",
            title="Welcome to Your Personalized Lesson",
            content=(
                f"Today we'll explore {topic} in a way that matches your {style} learning style. "
                "Let's start with the basics and build up your understanding step by step."
            ),
            order=1,
        )
    ]
    if style == "visual":
        content.append(
            LessonContent(
                id="visual_1",
                type="image",
                title="Visual Concept Map",
                content="Here's a visual representation of the key concepts we'll cover today.",
                order=2,
                metadata=ContentMetadata(image_url="/images/concept-map.png"),
            )
        )
    content.append(
        LessonContent(
            id="interactive_1",
            type="interactive",
            title="Let's Practice Together",
            content="Now let's work through some examples together. I'll guide you step by step.",
            order=3,
            metadata=ContentMetadata(interactive_type="guided_practice", duration=10),
        )
    )
    content.append(
        LessonContent(
            id="example_1",
            type="example",
            title=f"{difficulty.capitalize()} Level Example",
            content=_EXAMPLES.get(topic, {}).get(difficulty, "Let's work through this step by step together."),
            order=4,
        )
    )
    return content


def _interactive_elements(topic: str, style: str) -> list:
    elements: list = [
        QuizElement(
            id="quiz_1",
            title="Quick Check",
            content="Let's see how well you understand the concept so far.",
            order=1,
            data=QuizElementData(
                questions=[
                    ElementQuestion(
                        question=f"Which statement best describes {topic}?",
                        options=["A set of rules", "A way of reasoning", "Both", "Neither"],
                        correct_answer=2,
                    )
                ]
            ),
            feedback="Great job! You're understanding the concept well.",
        ),
        FillBlankElement(
            id="exercise_1",
            title="Practice Exercise",
            content="Now let's practice what you've learned.",
            order=2,
            data=FillBlankElementData(exercise="If 2x + 5 = 13, then x = ___", answer="4"),
            feedback="Excellent! You're getting the hang of it.",
        ),
    ]
    if style == "kinesthetic":
        elements.append(
            DragDropElement(
                id="drag_1",
                title="Sort the Steps",
                content="Drag each step into the order you would solve the equation.",
                order=3,
                data=DragDropElementData(
                    items=["Subtract 5", "Divide by 2", "Check the answer"],
                    targets=["Step 1", "Step 2", "Step 3"],
                    solution={"Subtract 5": "Step 1", "Divide by 2": "Step 2", "Check the answer": "Step 3"},
                ),
                feedback="Nice ordering!",
            )
        )
    elif style == "auditory":
        elements.append(
            DiscussionElement(
                id="discussion_1",
                title="Talk It Through",
                content="Explain your reasoning out loud.",
                order=3,
                data=DiscussionElementData(
                    prompt=f"How would you explain {topic} to a friend?",
                    guiding_questions=["What is the first step?", "Why does it work?"],
                ),
                feedback="Explaining ideas is a great way to learn.",
            )
        )
    return elements
