"""Question generators, one per question type.

Each generator turns a single concept into a Question, or returns None when
the concept has no name or definition. All randomness comes from the rng
argument.
"""
import logging
import random
from typing import Optional

from mindquiz import templates
from mindquiz.models import Concept, Question

logger = logging.getLogger(__name__)

MCQ_ANSWER_LENGTH = 100
TRUE_FALSE_EXCERPT_LENGTH = 80
FILL_BLANK_EXCERPT_LENGTH = 60


def truncate(text: str, limit: int) -> str:
    """First `limit` characters, with an ellipsis when anything was cut."""
    return text[:limit] + ("..." if len(text) > limit else "")


def generate_mcq(concept: Concept, all_concepts: list[Concept], topic_name: str,
                 rng: random.Random) -> Optional[Question]:
    if not concept.is_valid():
        return None
    stem = rng.choice(templates.MCQ_STEMS).format(concept=concept.concept, topic=topic_name)
    correct_answer = truncate(concept.definition, MCQ_ANSWER_LENGTH)

    others = [c for c in all_concepts if c.concept != concept.concept and c.definition]
    if len(others) >= 3:
        distractors = [truncate(c.definition, MCQ_ANSWER_LENGTH) for c in others[:3]]
    else:
        distractors = [t.format(concept=concept.concept) for t in templates.MCQ_SYNTHETIC_DISTRACTORS]

    options = [correct_answer] + distractors
    rng.shuffle(options)
    return Question(type="mcq", question=stem, options=options, answer=correct_answer)


def generate_true_false(concept: Concept, topic_name: str, rng: random.Random) -> Optional[Question]:
    if not concept.is_valid():
        return None
    is_true = rng.random() > 0.5
    pool = templates.TRUE_STATEMENTS if is_true else templates.FALSE_STATEMENTS
    statement = rng.choice(pool).format(
        concept=concept.concept,
        topic=topic_name,
        excerpt=concept.definition[:TRUE_FALSE_EXCERPT_LENGTH],
    )
    return Question(type="truefalse", question=statement, answer=is_true)


def generate_fill_blank(concept: Concept, topic_name: str, rng: random.Random) -> Optional[Question]:
    if not concept.is_valid():
        return None
    sentence = rng.choice(templates.FILL_BLANK_TEMPLATES).format(
        topic=topic_name,
        excerpt=concept.definition[:FILL_BLANK_EXCERPT_LENGTH],
    )
    return Question(type="fillblank", question=sentence, answer=concept.concept)


def generate_short_answer(concept: Concept, topic_name: str, rng: random.Random) -> Optional[Question]:
    if not concept.is_valid():
        return None
    prompt = rng.choice(templates.SHORT_ANSWER_PROMPTS).format(concept=concept.concept, topic=topic_name)
    return Question(
        type="shortanswer",
        question=prompt,
        answer=concept.definition,
        guidance=templates.SHORT_ANSWER_GUIDANCE,
    )


def generate_explain(concept: Concept, topic_name: str, rng: random.Random) -> Optional[Question]:
    if not concept.is_valid():
        return None
    prompt = rng.choice(templates.EXPLAIN_PROMPTS).format(concept=concept.concept, topic=topic_name)
    return Question(
        type="explain",
        question=prompt,
        answer=concept.definition,
        guidance=templates.EXPLAIN_GUIDANCE,
    )


def generate_question(question_type: str, concept: Concept, all_concepts: list[Concept],
                      topic_name: str, rng: random.Random) -> Optional[Question]:
    """Dispatch to the generator for question_type."""
    if question_type == "mcq":
        return generate_mcq(concept, all_concepts, topic_name, rng)
    elif question_type == "truefalse":
        return generate_true_false(concept, topic_name, rng)
    elif question_type == "fillblank":
        return generate_fill_blank(concept, topic_name, rng)
    elif question_type == "shortanswer":
        return generate_short_answer(concept, topic_name, rng)
    elif question_type == "explain":
        return generate_explain(concept, topic_name, rng)
    logger.warning("Unknown question type %r", question_type)
    return None
