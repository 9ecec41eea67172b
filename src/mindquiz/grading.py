"""Grading with partial credit for free-text answers."""
import math
from typing import Any, Optional

from mindquiz.models import NO_ANSWER, GradingResult, Question, QuizGrade
from mindquiz.text import clean_blank_answer, string_similarity, token_overlap_ratio, tokenize

FILL_BLANK_CORRECT_ABOVE = 0.7
FILL_BLANK_PARTIAL_ABOVE = 0.4
FILL_BLANK_PARTIAL_CREDIT = 0.5

# (minimum match ratio, credit), checked in order
SHORT_ANSWER_BANDS = ((0.7, 1.0), (0.5, 0.7), (0.3, 0.4))

EXPLAIN_MIN_TOKENS = 5
EXPLAIN_CONTENT_WEIGHT = 0.7
EXPLAIN_LENGTH_WEIGHT = 0.3
EXPLAIN_CORRECT_AT = 0.6


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def is_answered(user_answer: Any) -> bool:
    if user_answer is None:
        return False
    if isinstance(user_answer, str):
        return user_answer.strip() != ""
    return True


def _grade_true_false(question: Question, user_answer: Any) -> tuple[bool, float]:
    if isinstance(user_answer, str):
        user_answer = user_answer.lower() == "true"
    is_correct = user_answer == question.answer
    return is_correct, 1.0 if is_correct else 0.0


def _grade_fill_blank(question: Question, user_answer: Any) -> tuple[bool, float]:
    given = clean_blank_answer(str(user_answer))
    expected = clean_blank_answer(str(question.answer))
    if given == expected:
        return True, 1.0
    if given in expected or expected in given:
        similarity = string_similarity(given, expected)
        if similarity > FILL_BLANK_CORRECT_ABOVE:
            return True, 1.0
        if similarity > FILL_BLANK_PARTIAL_ABOVE:
            return False, FILL_BLANK_PARTIAL_CREDIT
    return False, 0.0


def _grade_short_answer(question: Question, user_answer: Any) -> tuple[bool, float]:
    user_tokens = tokenize(str(user_answer))
    if not user_tokens:
        return False, 0.0
    ratio = token_overlap_ratio(user_tokens, tokenize(str(question.answer)))
    for minimum, credit in SHORT_ANSWER_BANDS:
        if ratio >= minimum:
            return credit == 1.0, credit
    return False, 0.0


def _grade_explain(question: Question, user_answer: Any) -> tuple[bool, float]:
    user_tokens = tokenize(str(user_answer))
    if len(user_tokens) < EXPLAIN_MIN_TOKENS:
        return False, 0.0
    reference_tokens = tokenize(str(question.answer))
    content_score = token_overlap_ratio(user_tokens, reference_tokens) * EXPLAIN_CONTENT_WEIGHT
    length_score = min(len(user_tokens) / max(len(reference_tokens), 1), 1) * EXPLAIN_LENGTH_WEIGHT
    credit = content_score + length_score
    return credit >= EXPLAIN_CORRECT_AT, credit


def _score_answer(question: Question, user_answer: Any) -> tuple[bool, float]:
    """Return (is_correct, credit in [0, 1]) for an answered question."""
    if question.type == "mcq":
        is_correct = user_answer == question.answer
        return is_correct, 1.0 if is_correct else 0.0
    elif question.type == "truefalse":
        return _grade_true_false(question, user_answer)
    elif question.type == "fillblank":
        return _grade_fill_blank(question, user_answer)
    elif question.type == "shortanswer":
        return _grade_short_answer(question, user_answer)
    elif question.type == "explain":
        return _grade_explain(question, user_answer)
    return False, 0.0


def grade_question(question: Question, user_answer: Any) -> tuple[GradingResult, float]:
    """Grade one answer. Returns the result and the unrounded credit in [0, 1]."""
    if not is_answered(user_answer):
        result = GradingResult(
            question_id=question.id,
            question=question.question,
            user_answer=NO_ANSWER,
            correct_answer=question.answer,
            is_correct=False,
            concept_tested=question.concept_tested,
            partial_score=0,
            question_type=question.type,
        )
        return result, 0.0

    is_correct, credit = _score_answer(question, user_answer)
    credit = min(max(credit, 0.0), 1.0)
    result = GradingResult(
        question_id=question.id,
        question=question.question,
        user_answer=user_answer,
        correct_answer=question.answer,
        is_correct=is_correct,
        concept_tested=question.concept_tested,
        partial_score=int(round_half_up(credit * 100)),
        question_type=question.type,
    )
    return result, credit


def grade_quiz(questions: list[Question], user_answers: list[Optional[Any]]) -> QuizGrade:
    """Grade a quiz against a parallel list of answers.

    The score is the mean partial credit, so it can sit above the share of
    fully correct answers.
    """
    results = []
    total_credit = 0.0
    for index, question in enumerate(questions):
        user_answer = user_answers[index] if index < len(user_answers) else None
        result, credit = grade_question(question, user_answer)
        results.append(result)
        total_credit += credit

    total = len(questions)
    score = int(round_half_up(total_credit / total * 100)) if total else 0
    return QuizGrade(
        score=score,
        correct=sum(1 for r in results if r.is_correct),
        total=total,
        results=results,
        partial_credit=round_half_up(total_credit, 1),
    )
