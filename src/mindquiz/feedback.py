"""Adaptive feedback derived from a graded quiz."""
import random
from typing import Any, Optional

from mindquiz import config, templates
from mindquiz.grading import grade_quiz
from mindquiz.models import Question, QuizGrade, Recommendation, UserModel

# Independent of the analyzer's mastery thresholds.
IMPROVEMENT_BELOW = 0.7
STRENGTH_AT = 0.8


def get_performance_level(score: float) -> str:
    """Bucket a 0-100 quiz score."""
    if score >= 90:
        return "excellent"
    elif score >= 80:
        return "good"
    elif score >= 60:
        return "needs_improvement"
    return "poor"


def generate_overall_feedback(score: float, rng: Optional[random.Random] = None) -> dict:
    rng = rng or config.default_rng
    level = get_performance_level(score)
    return {
        "message": rng.choice(templates.OVERALL_FEEDBACK[level]),
        "score": score,
        "performance_level": level,
    }


def generate_next_steps(score: float) -> list[dict]:
    if score >= 80:
        step = templates.NEXT_STEP_ADVANCE
    elif score >= 60:
        step = templates.NEXT_STEP_PRACTICE
    else:
        step = templates.NEXT_STEP_REVIEW
    return [dict(step, urgency="high")]


def _accuracy(stats: dict) -> float:
    return stats["correct"] / stats["total"]


def analyze_adaptive_performance(questions: list[Question], grade: QuizGrade) -> dict:
    """Per-concept and per-type accuracy, plus improvement areas and strengths."""
    concept_performance: dict[str, dict] = {}
    type_performance: dict[str, dict] = {}

    for question, result in zip(questions, grade.results):
        concept_stats = concept_performance.setdefault(
            question.concept_tested, {"correct": 0, "total": 0, "focus": question.focus},
        )
        type_stats = type_performance.setdefault(question.type, {"correct": 0, "total": 0})
        concept_stats["total"] += 1
        type_stats["total"] += 1
        if result.is_correct:
            concept_stats["correct"] += 1
            type_stats["correct"] += 1

    improvement_areas = sorted(
        (
            {"concept": concept, "accuracy": _accuracy(stats), "focus": stats["focus"]}
            for concept, stats in concept_performance.items()
            if _accuracy(stats) < IMPROVEMENT_BELOW
        ),
        key=lambda a: a["accuracy"],
    )
    strengths = sorted(
        (
            {"concept": concept, "accuracy": _accuracy(stats), "focus": stats["focus"]}
            for concept, stats in concept_performance.items()
            if _accuracy(stats) >= STRENGTH_AT
        ),
        key=lambda a: a["accuracy"],
        reverse=True,
    )
    return {
        "concept_performance": concept_performance,
        "question_type_performance": type_performance,
        "improvement_areas": improvement_areas,
        "strengths": strengths,
    }


def generate_adaptive_recommendations(insights: dict) -> list[Recommendation]:
    recommendations = []
    for area in insights["improvement_areas"]:
        recommendations.append(Recommendation(
            type="remediation",
            concept=area["concept"],
            priority="high",
            reason=templates.RECOMMENDATION_REMEDIATION_REASON.format(concept=area["concept"]),
            action=templates.RECOMMENDATION_REMEDIATION_ACTION,
        ))
    for strength in insights["strengths"]:
        recommendations.append(Recommendation(
            type="advancement",
            concept=strength["concept"],
            priority="medium",
            reason=templates.RECOMMENDATION_ADVANCEMENT_REASON.format(concept=strength["concept"]),
            action=templates.RECOMMENDATION_ADVANCEMENT_ACTION,
        ))
    return recommendations


def calculate_skill_progress(questions: list[Question], grade: QuizGrade) -> dict[str, dict]:
    """Performance per skill (lowercased concept name) for progress tracking.

    Each performance is the graded credit (partial_score / 100), not a raw
    text similarity, so it lines up with what record_learning_activity stores.
    """
    progress: dict[str, dict] = {}
    for question, result in zip(questions, grade.results):
        if not question.concept_tested:
            continue
        skill = progress.setdefault(question.concept_tested.lower(), {"performances": []})
        skill["performances"].append(result.partial_score / 100)
    for skill in progress.values():
        skill["average_performance"] = sum(skill["performances"]) / len(skill["performances"])
    return progress


def grade_adaptive_quiz(questions: list[Question], user_answers: list[Optional[Any]],
                        user_model: Optional[UserModel] = None) -> QuizGrade:
    """grade_quiz plus adaptive insights, recommendations and skill progress.

    The user model is accepted for callers that hold one; the derived feedback
    depends only on this attempt.
    """
    grade = grade_quiz(questions, user_answers)
    insights = analyze_adaptive_performance(questions, grade)
    grade.adaptive_insights = insights
    grade.recommended_actions = generate_adaptive_recommendations(insights)
    grade.skill_progress = calculate_skill_progress(questions, grade)
    return grade
