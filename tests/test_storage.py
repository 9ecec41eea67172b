# tests/test_storage.py
from mindquiz.db import init_db
from mindquiz.grading import grade_quiz
from mindquiz.models import HistoryEntry, Question, QuizAttempt, Topic, UserModel
from mindquiz.storage import (
    MAX_HISTORY, TRIMMED_HISTORY, clear_quiz_history_for_topic, delete_topic, get_topic,
    list_topics, load_quiz_history, load_user_model, record_learning_activity,
    record_quiz_result, save_quiz_attempt, save_topic, save_user_model,
)


def _grade():
    questions = [
        Question(type="mcq", question="?", answer="A", id="q_1", concept_tested="Mitosis"),
        Question(type="fillblank", question="?", answer="Cell Membrane", id="q_2",
                 concept_tested="Cell Membrane"),
    ]
    return grade_quiz(questions, ["A", "membrane"])


def test_topic_crud(tmp_db, biology_topic):
    init_db(tmp_db)
    save_topic(tmp_db, biology_topic)
    save_topic(tmp_db, Topic("Algebra", []))
    assert list_topics(tmp_db) == ["Algebra", "Biology"]
    assert get_topic(tmp_db, "Biology") == biology_topic
    assert delete_topic(tmp_db, "Algebra") is True
    assert get_topic(tmp_db, "Algebra") is None
    assert list_topics(tmp_db) == ["Biology"]


def test_save_quiz_attempt_fills_id_and_timestamp(tmp_db):
    init_db(tmp_db)
    attempt = QuizAttempt(topic="Biology", score=80, correct=4, total=5)
    attempt_id = save_quiz_attempt(tmp_db, attempt)
    assert attempt_id == attempt.id
    assert attempt.timestamp
    assert load_quiz_history(tmp_db) == [attempt]


def test_quiz_history_order_filter_and_limit(tmp_db):
    init_db(tmp_db)
    for day, topic in ((3, "Biology"), (1, "Biology"), (2, "Algebra")):
        save_quiz_attempt(tmp_db, QuizAttempt(
            topic=topic, score=day * 10, correct=day, total=5, timestamp=f"2026-02-0{day}T09:00:00",
        ))
    assert [a.score for a in load_quiz_history(tmp_db)] == [30, 20, 10]
    assert [a.score for a in load_quiz_history(tmp_db, "Biology")] == [30, 10]
    assert [a.score for a in load_quiz_history(tmp_db, limit=1)] == [30]


def test_clear_quiz_history_for_topic(tmp_db):
    init_db(tmp_db)
    save_quiz_attempt(tmp_db, QuizAttempt(topic="Biology", score=1, correct=0, total=1))
    save_quiz_attempt(tmp_db, QuizAttempt(topic="Biology", score=2, correct=0, total=1))
    save_quiz_attempt(tmp_db, QuizAttempt(topic="Algebra", score=3, correct=0, total=1))
    assert clear_quiz_history_for_topic(tmp_db, "Biology") == 2
    assert [a.topic for a in load_quiz_history(tmp_db)] == ["Algebra"]


def test_unknown_user_has_empty_model(tmp_db):
    init_db(tmp_db)
    assert load_user_model(tmp_db, "nobody").learning_history == []


def test_user_model_round_trip(tmp_db):
    init_db(tmp_db)
    model = UserModel([HistoryEntry("Mitosis", 0.9, "2026-01-01T10:00:00")])
    save_user_model(tmp_db, "ada", model)
    assert load_user_model(tmp_db, "ada") == model


def test_record_learning_activity(tmp_db):
    init_db(tmp_db)
    model = record_learning_activity(tmp_db, "ada", _grade(), timestamp="2026-03-01T08:00:00")
    assert [(h.topic, h.performance) for h in model.learning_history] == [
        ("Mitosis", 1.0), ("Cell Membrane", 0.5),
    ]
    assert all(h.timestamp == "2026-03-01T08:00:00" for h in model.learning_history)
    assert load_user_model(tmp_db, "ada") == model


def test_learning_history_is_trimmed(tmp_db):
    init_db(tmp_db)
    history = [HistoryEntry(f"old{i}", 0.5, None) for i in range(MAX_HISTORY - 1)]
    save_user_model(tmp_db, "ada", UserModel(history))
    model = record_learning_activity(tmp_db, "ada", _grade())
    assert len(model.learning_history) == TRIMMED_HISTORY
    assert model.learning_history[-1].topic == "Cell Membrane"


def test_record_quiz_result(tmp_db):
    init_db(tmp_db)
    attempt = record_quiz_result(tmp_db, "ada", "Biology", _grade())
    assert attempt.score == 75
    assert attempt.results[1]["partial_score"] == 50
    stored = load_quiz_history(tmp_db, "Biology")
    assert [a.id for a in stored] == [attempt.id]
    history = load_user_model(tmp_db, "ada").learning_history
    assert len(history) == 2
    assert history[0].timestamp == attempt.timestamp
