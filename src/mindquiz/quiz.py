"""Quiz assembly: flat round-robin quizzes and adaptive quizzes."""
import logging
import random
from typing import Optional

from mindquiz import config, templates
from mindquiz.analyzer import analyze_performance
from mindquiz.distributor import calculate_question_distribution
from mindquiz.generators import generate_question
from mindquiz.models import (
    QUESTION_TYPES, FOCUS_ADVANCEMENT, FOCUS_REVIEW, FOCUS_WEAKNESS,
    Concept, ConceptStanding, PerformanceAnalysis, Question, Topic, UserModel,
)

logger = logging.getLogger(__name__)

WEAKNESS_TYPES = ("mcq", "truefalse", "fillblank", "shortanswer")
REVIEW_TYPES = QUESTION_TYPES
ADVANCEMENT_TYPES = ("explain", "mcq", "shortanswer")

BASE_QUESTION_TIME = 30
QUESTION_TIME = {
    "mcq": BASE_QUESTION_TIME,
    "truefalse": BASE_QUESTION_TIME,
    "fillblank": 45,
    "shortanswer": 60,
    "explain": 90,
}

REMEDIATION_LEVEL = {
    FOCUS_WEAKNESS: "high",
    FOCUS_REVIEW: "medium",
    FOCUS_ADVANCEMENT: "low",
}

HINT_SEVERE_BELOW = 0.3
HINT_MODERATE_BELOW = 0.5
HINT_EXCERPT_LENGTH = 80


def _find_concept(concepts: list[Concept], name: str) -> Optional[Concept]:
    return next((c for c in concepts if c.concept == name), None)


def generate_quiz(topic: Optional[Topic], question_count: int = 10,
                  rng: Optional[random.Random] = None) -> list[Question]:
    """Round-robin over question types and concepts, ignoring learner history."""
    if not topic or not topic.concepts:
        return []
    rng = rng or config.default_rng
    concepts = topic.concepts

    questions = []
    for i in range(question_count):
        question_type = QUESTION_TYPES[i % len(QUESTION_TYPES)]
        concept = concepts[i % len(concepts)]
        question = generate_question(question_type, concept, concepts, topic.name, rng)
        if question is None:
            logger.debug("Skipped slot %d: malformed concept %r", i + 1, concept.concept)
            continue
        question.difficulty = concept.difficulty or 2
        question.concept_tested = concept.concept
        question.id = f"q_{len(questions) + 1}"
        questions.append(question)
    return questions


def generate_remediation_hints(concept: Concept, standing: ConceptStanding) -> list[str]:
    hints = []
    if standing.mastery_level < HINT_SEVERE_BELOW:
        excerpt = concept.definition[:HINT_EXCERPT_LENGTH]
        hints.extend(h.format(excerpt=excerpt) for h in templates.HINTS_SEVERE)
    elif standing.mastery_level < HINT_MODERATE_BELOW:
        hints.extend(templates.HINTS_MODERATE)
    hints.extend(templates.HINTS_GENERAL)
    return hints


def _generate_for_category(concepts: list[Concept], standings: list[ConceptStanding], count: int,
                           question_types: tuple, topic_name: str, rng: random.Random) -> list[tuple]:
    """Cycle through standings and question types, returning (question, concept, standing) tuples."""
    generated = []
    if not standings:
        return generated
    for i in range(count):
        standing = standings[i % len(standings)]
        concept = _find_concept(concepts, standing.concept)
        if concept is None:
            continue
        question_type = question_types[i % len(question_types)]
        question = generate_question(question_type, concept, concepts, topic_name, rng)
        if question is not None:
            question.concept_tested = concept.concept
            question.difficulty = concept.difficulty or 2
            generated.append((question, concept, standing))
    return generated


def calculate_target_difficulty(question: Question, analysis: PerformanceAnalysis) -> int:
    if question.focus == FOCUS_WEAKNESS:
        if analysis.weaknesses:
            return max(1, analysis.weaknesses[0].performance.difficulty - 1)
        return 2
    if question.focus == FOCUS_REVIEW:
        if analysis.needs_review:
            return analysis.needs_review[0].performance.difficulty
        return 3
    base = analysis.strengths[0].performance.difficulty if analysis.strengths else 3
    return min(5, base + 1)


def estimate_question_time(question: Question) -> int:
    """Expected answering time in seconds."""
    return QUESTION_TIME.get(question.type, BASE_QUESTION_TIME)


def determine_remediation_level(question: Question) -> str:
    return REMEDIATION_LEVEL.get(question.focus, "low")


def generate_adaptive_quiz(topic: Optional[Topic], user_model: Optional[UserModel],
                           question_count: int = 10,
                           rng: Optional[random.Random] = None) -> list[Question]:
    """Target questions at the learner's weak areas first.

    A category with no eligible concepts contributes nothing, so the quiz can
    come back shorter than question_count.
    """
    if not topic or not topic.concepts:
        return []
    rng = rng or config.default_rng
    concepts = topic.concepts

    analysis = analyze_performance(user_model or UserModel(), concepts)
    distribution = calculate_question_distribution(analysis, question_count)
    logger.debug(
        "Distribution for %r: weak=%d review=%d advancement=%d",
        topic.name, distribution.weakness_questions,
        distribution.review_questions, distribution.advancement_questions,
    )

    questions = []
    for question, concept, standing in _generate_for_category(
        concepts, analysis.weaknesses, distribution.weakness_questions,
        WEAKNESS_TYPES, topic.name, rng,
    ):
        question.focus = FOCUS_WEAKNESS
        question.concept_difficulty = "basic"
        question.hints = generate_remediation_hints(concept, standing)
        questions.append(question)

    for question, _, _ in _generate_for_category(
        concepts, analysis.needs_review, distribution.review_questions,
        REVIEW_TYPES, topic.name, rng,
    ):
        question.focus = FOCUS_REVIEW
        question.concept_difficulty = "intermediate"
        questions.append(question)

    for question, _, _ in _generate_for_category(
        concepts, analysis.strengths, distribution.advancement_questions,
        ADVANCEMENT_TYPES, topic.name, rng,
    ):
        question.focus = FOCUS_ADVANCEMENT
        question.concept_difficulty = "advanced"
        question.challenge_level = "high"
        questions.append(question)

    rng.shuffle(questions)

    for index, question in enumerate(questions, 1):
        question.id = f"q_{index}"
        question.adaptive = True
        question.target_difficulty = calculate_target_difficulty(question, analysis)
        question.estimated_time = estimate_question_time(question)
        question.remediation_level = determine_remediation_level(question)
    return questions
