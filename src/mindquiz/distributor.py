"""Split a quiz's question budget across weak, review and strong concepts."""
import math

from mindquiz.models import PerformanceAnalysis, QuestionDistribution

WEAKNESS_SHARE = 0.5
QUESTIONS_PER_WEAKNESS = 2
REVIEW_SHARE = 0.6


def _clamp(count) -> int:
    if isinstance(count, bool) or not isinstance(count, (int, float)) or not math.isfinite(count):
        return 0
    return max(0, int(count))


def calculate_question_distribution(analysis: PerformanceAnalysis, total_questions: int) -> QuestionDistribution:
    """Allocate questions weakness first, then review, then advancement.

    The three counts always sum to total_questions (or to zero when the total
    is not a positive number). Advancement may exceed the number of strong
    concepts; the assembler cycles through them.
    """
    total = _clamp(total_questions)
    if total == 0:
        return QuestionDistribution()

    weakness_questions = 0
    if analysis.weaknesses:
        weakness_questions = min(
            math.ceil(total * WEAKNESS_SHARE),
            len(analysis.weaknesses) * QUESTIONS_PER_WEAKNESS,
        )
    weakness_questions = _clamp(min(weakness_questions, total))

    remaining = total - weakness_questions
    review_questions = 0
    if analysis.needs_review and remaining > 0:
        review_questions = min(math.ceil(remaining * REVIEW_SHARE), len(analysis.needs_review))
    review_questions = _clamp(min(review_questions, remaining))

    advancement_questions = _clamp(total - weakness_questions - review_questions)
    return QuestionDistribution(
        weakness_questions=weakness_questions,
        review_questions=review_questions,
        advancement_questions=advancement_questions,
    )
