"""Data classes for the quiz domain model."""
from dataclasses import dataclass, field, asdict
from typing import Any, Optional

QUESTION_TYPES = ("mcq", "truefalse", "fillblank", "shortanswer", "explain")

FOCUS_WEAKNESS = "weakness_remediation"
FOCUS_REVIEW = "review"
FOCUS_ADVANCEMENT = "advancement"

NO_ANSWER = "(No answer provided)"


@dataclass
class Concept:
    concept: str = ""
    definition: str = ""
    difficulty: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Concept":
        return cls(
            concept=data.get("concept") or "",
            definition=data.get("definition") or "",
            difficulty=data.get("difficulty"),
        )

    def is_valid(self) -> bool:
        return bool(self.concept) and bool(self.definition)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Topic:
    name: str
    concepts: list[Concept] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Topic":
        concepts = [
            c if isinstance(c, Concept) else Concept.from_dict(c)
            for c in data.get("concepts") or []
        ]
        return cls(name=data.get("name") or data.get("topic") or "", concepts=concepts)

    def to_dict(self) -> dict:
        return {"name": self.name, "concepts": [c.to_dict() for c in self.concepts]}


@dataclass
class HistoryEntry:
    topic: Optional[str]
    performance: Optional[float]
    timestamp: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        topic = data.get("topic")
        performance = data.get("performance")
        try:
            performance = float(performance) if performance is not None else None
        except (TypeError, ValueError):
            performance = None
        return cls(
            topic=str(topic) if topic is not None else None,
            performance=performance,
            timestamp=data.get("timestamp"),
        )


@dataclass
class UserModel:
    learning_history: list[HistoryEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "UserModel":
        if not data:
            return cls()
        history = data.get("learning_history") or data.get("learningHistory") or []
        return cls(learning_history=[
            h if isinstance(h, HistoryEntry) else HistoryEntry.from_dict(h) for h in history
        ])

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PerformanceRecord:
    """Per-concept accumulator, starting from the neutral prior."""
    attempts: int = 0
    correct: int = 0
    average_score: float = 0.5
    last_attempt: Optional[str] = None
    difficulty: int = 3


@dataclass
class ConceptStanding:
    concept: str
    performance: PerformanceRecord
    mastery_level: float


@dataclass
class PerformanceAnalysis:
    concept_performance: dict[str, PerformanceRecord]
    weaknesses: list[ConceptStanding]
    needs_review: list[ConceptStanding]
    strengths: list[ConceptStanding]
    overall_proficiency: float


@dataclass
class QuestionDistribution:
    weakness_questions: int = 0
    review_questions: int = 0
    advancement_questions: int = 0

    @property
    def total(self) -> int:
        return self.weakness_questions + self.review_questions + self.advancement_questions


@dataclass
class Question:
    type: str
    question: str
    answer: Any
    options: Optional[list[str]] = None
    guidance: Optional[str] = None
    id: str = ""
    difficulty: Optional[int] = None
    concept_tested: str = ""
    focus: Optional[str] = None
    # Adaptive metadata
    concept_difficulty: Optional[str] = None
    hints: list[str] = field(default_factory=list)
    challenge_level: Optional[str] = None
    adaptive: bool = False
    target_difficulty: Optional[int] = None
    estimated_time: Optional[int] = None
    remediation_level: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class GradingResult:
    question_id: str
    question: str
    user_answer: Any
    correct_answer: Any
    is_correct: bool
    concept_tested: str
    partial_score: int
    question_type: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Recommendation:
    type: str
    concept: str
    priority: str
    reason: str
    action: str


@dataclass
class QuizGrade:
    score: int
    correct: int
    total: int
    results: list[GradingResult]
    partial_credit: float
    adaptive_insights: Optional[dict] = None
    recommended_actions: list[Recommendation] = field(default_factory=list)
    skill_progress: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class QuizAttempt:
    topic: str
    score: int
    correct: int
    total: int
    results: list[dict] = field(default_factory=list)
    timestamp: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "QuizAttempt":
        return cls(
            topic=data["topic"],
            score=data["score"],
            correct=data["correct"],
            total=data["total"],
            results=data.get("results") or [],
            timestamp=data.get("timestamp"),
            id=data.get("id"),
        )

    def to_dict(self) -> dict:
        return asdict(self)
