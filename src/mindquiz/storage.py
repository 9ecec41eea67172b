"""Persistence of topics, quiz attempts and learner models."""
import logging
import uuid
from datetime import datetime
from typing import Optional

from mindquiz.db import kv_delete, kv_get, kv_list, kv_put
from mindquiz.models import HistoryEntry, QuizAttempt, QuizGrade, Topic, UserModel

logger = logging.getLogger(__name__)

TOPICS = "topics"
QUIZ_ATTEMPTS = "quiz_attempts"
USER_MODELS = "user_models"

MAX_HISTORY = 1000
TRIMMED_HISTORY = 500


def save_topic(db_path: str, topic: Topic) -> None:
    kv_put(db_path, TOPICS, topic.name, topic.to_dict())


def get_topic(db_path: str, name: str) -> Optional[Topic]:
    data = kv_get(db_path, TOPICS, name)
    return Topic.from_dict(data) if data else None


def delete_topic(db_path: str, name: str) -> bool:
    return kv_delete(db_path, TOPICS, name)


def list_topics(db_path: str) -> list[str]:
    return kv_list(db_path, TOPICS)


def save_quiz_attempt(db_path: str, attempt: QuizAttempt) -> str:
    """Store an attempt, filling in its id and timestamp when missing."""
    attempt.timestamp = attempt.timestamp or datetime.now().isoformat()
    attempt.id = attempt.id or uuid.uuid4().hex
    kv_put(db_path, QUIZ_ATTEMPTS, attempt.id, attempt.to_dict())
    return attempt.id


def load_quiz_history(db_path: str, topic_name: Optional[str] = None,
                      limit: Optional[int] = 50) -> list[QuizAttempt]:
    """Attempts newest first, optionally for one topic only."""
    attempts = []
    for name in kv_list(db_path, QUIZ_ATTEMPTS):
        data = kv_get(db_path, QUIZ_ATTEMPTS, name)
        if data is None:
            continue
        attempt = QuizAttempt.from_dict(data)
        if topic_name and attempt.topic != topic_name:
            continue
        attempts.append(attempt)
    attempts.sort(key=lambda a: a.timestamp or "", reverse=True)
    return attempts[:limit]


def clear_quiz_history_for_topic(db_path: str, topic_name: str) -> int:
    """Delete every attempt for a topic. Returns how many were removed."""
    removed = 0
    for attempt in load_quiz_history(db_path, topic_name, limit=None):
        if kv_delete(db_path, QUIZ_ATTEMPTS, attempt.id):
            removed += 1
    return removed


def load_user_model(db_path: str, user_id: str) -> UserModel:
    return UserModel.from_dict(kv_get(db_path, USER_MODELS, user_id))


def save_user_model(db_path: str, user_id: str, user_model: UserModel) -> None:
    kv_put(db_path, USER_MODELS, user_id, user_model.to_dict())


def record_learning_activity(db_path: str, user_id: str, grade: QuizGrade,
                             timestamp: Optional[str] = None) -> UserModel:
    """Append one history entry per graded question to the learner's model."""
    timestamp = timestamp or datetime.now().isoformat()
    model = load_user_model(db_path, user_id)
    for result in grade.results:
        if not result.concept_tested:
            continue
        model.learning_history.append(HistoryEntry(
            topic=result.concept_tested,
            performance=result.partial_score / 100,
            timestamp=timestamp,
        ))
    if len(model.learning_history) > MAX_HISTORY:
        logger.debug("Trimming learning history for %s", user_id)
        model.learning_history = model.learning_history[-TRIMMED_HISTORY:]
    save_user_model(db_path, user_id, model)
    return model


def record_quiz_result(db_path: str, user_id: str, topic_name: str, grade: QuizGrade) -> QuizAttempt:
    """Save the attempt and feed it back into the learner's history."""
    attempt = QuizAttempt(
        topic=topic_name,
        score=grade.score,
        correct=grade.correct,
        total=grade.total,
        results=[r.to_dict() for r in grade.results],
    )
    save_quiz_attempt(db_path, attempt)
    record_learning_activity(db_path, user_id, grade, timestamp=attempt.timestamp)
    return attempt
