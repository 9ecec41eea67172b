"""Progress dashboard scoring and statistics."""
from mindquiz.analyzer import analyze_performance
from mindquiz.models import PerformanceAnalysis
from mindquiz.storage import get_topic, load_quiz_history, load_user_model


def get_readiness_label(score: float) -> str:
    if score >= 80:
        return "MASTERED"
    elif score >= 65:
        return "PROFICIENT"
    elif score >= 50:
        return "NEEDS WORK"
    return "BEGINNER"


def get_readiness_color(score: float) -> str:
    if score >= 80:
        return "green"
    elif score >= 65:
        return "yellow"
    elif score >= 50:
        return "dark_orange"
    return "red"


def get_topic_stats(db_path: str, topic_name: str | None = None) -> dict:
    attempts = load_quiz_history(db_path, topic_name, limit=None)
    if not attempts:
        return {"attempts": 0, "average_score": 0.0, "best_score": 0, "latest_score": None}
    scores = [a.score for a in attempts]
    return {
        "attempts": len(attempts),
        "average_score": round(sum(scores) / len(scores), 1),
        "best_score": max(scores),
        "latest_score": scores[0],
    }


def get_concept_standings(db_path: str, user_id: str, topic_name: str) -> PerformanceAnalysis | None:
    """Analyzer output for a stored topic, or None if the topic is unknown."""
    topic = get_topic(db_path, topic_name)
    if topic is None:
        return None
    return analyze_performance(load_user_model(db_path, user_id), topic.concepts)
