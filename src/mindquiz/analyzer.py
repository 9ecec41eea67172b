"""Per-concept mastery analysis from a learner's history."""
import logging

from mindquiz.models import (
    Concept, ConceptStanding, PerformanceAnalysis, PerformanceRecord, UserModel,
)

logger = logging.getLogger(__name__)

NEUTRAL_MASTERY = 0.5
CORRECT_THRESHOLD = 0.7
WEAK_THRESHOLD = 0.4
STRUGGLING_THRESHOLD = 0.6
STRUGGLING_MIN_ATTEMPTS = 3
STRONG_THRESHOLD = 0.8
DEFAULT_DIFFICULTY = 3


def _topic_matches(history_topic: str, concept_name: str) -> bool:
    # Substring match either way, so "Cell" also counts toward "Cell Membrane".
    a, b = history_topic.lower(), concept_name.lower()
    return a in b or b in a


def mastery_level(record: PerformanceRecord) -> float:
    if record.attempts > 0:
        return record.correct / record.attempts
    return NEUTRAL_MASTERY


def classify_mastery(mastery: float, attempts: int) -> str:
    """Return "weak", "strong" or "review" for a concept's mastery."""
    if mastery < WEAK_THRESHOLD or (attempts > STRUGGLING_MIN_ATTEMPTS and mastery < STRUGGLING_THRESHOLD):
        return "weak"
    if mastery >= STRONG_THRESHOLD:
        return "strong"
    return "review"


def calculate_overall_proficiency(concept_performance: dict[str, PerformanceRecord]) -> float:
    if not concept_performance:
        return NEUTRAL_MASTERY
    return sum(mastery_level(r) for r in concept_performance.values()) / len(concept_performance)


def analyze_performance(user_model: UserModel, concepts: list[Concept]) -> PerformanceAnalysis:
    """Classify each concept as weak, needing review or strong.

    Every concept starts from a neutral prior, so a concept with no matching
    history lands in needs_review.
    """
    concept_performance: dict[str, PerformanceRecord] = {}
    for concept in concepts:
        concept_performance[concept.concept] = PerformanceRecord(
            difficulty=concept.difficulty or DEFAULT_DIFFICULTY,
        )

    history = user_model.learning_history if user_model else []
    matched = 0
    for entry in history:
        if not entry.topic or not isinstance(entry.topic, str) or entry.performance is None:
            continue
        for concept in concepts:
            if not concept.concept or not _topic_matches(entry.topic, concept.concept):
                continue
            record = concept_performance[concept.concept]
            record.attempts += 1
            if entry.performance >= CORRECT_THRESHOLD:
                record.correct += 1
            record.average_score = (record.average_score + entry.performance) / 2
            record.last_attempt = entry.timestamp
            matched += 1
    logger.debug("Matched %d history updates across %d concepts", matched, len(concepts))

    weaknesses, needs_review, strengths = [], [], []
    buckets = {"weak": weaknesses, "review": needs_review, "strong": strengths}
    for name, record in concept_performance.items():
        level = mastery_level(record)
        standing = ConceptStanding(concept=name, performance=record, mastery_level=level)
        buckets[classify_mastery(level, record.attempts)].append(standing)

    weaknesses.sort(key=lambda s: s.mastery_level)
    needs_review.sort(key=lambda s: s.mastery_level)
    strengths.sort(key=lambda s: s.mastery_level, reverse=True)

    return PerformanceAnalysis(
        concept_performance=concept_performance,
        weaknesses=weaknesses,
        needs_review=needs_review,
        strengths=strengths,
        overall_proficiency=calculate_overall_proficiency(concept_performance),
    )
