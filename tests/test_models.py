# tests/test_models.py
from mindquiz.models import (
    Concept, HistoryEntry, QuestionDistribution, QuizAttempt, Topic, UserModel,
)


def test_concept_validity():
    assert Concept("Mitosis", "Cell division").is_valid()
    assert not Concept("Mitosis", "").is_valid()
    assert not Concept("", "Cell division").is_valid()


def test_concept_from_dict_tolerates_missing_fields():
    concept = Concept.from_dict({"concept": "Mitosis", "definition": None})
    assert concept.definition == ""
    assert concept.difficulty is None


def test_topic_from_dict_accepts_topic_key():
    topic = Topic.from_dict({"topic": "Biology", "concepts": [{"concept": "A", "definition": "B"}]})
    assert topic.name == "Biology"
    assert topic.concepts == [Concept("A", "B")]


def test_topic_to_dict():
    topic = Topic("Biology", [Concept("A", "B", 2)])
    assert topic.to_dict() == {
        "name": "Biology",
        "concepts": [{"concept": "A", "definition": "B", "difficulty": 2}],
    }


def test_user_model_from_dict():
    assert UserModel.from_dict(None).learning_history == []
    model = UserModel.from_dict({"learningHistory": [
        {"topic": "Mitosis", "performance": 0.4, "timestamp": "2026-01-01T00:00:00"},
    ]})
    assert model.learning_history == [HistoryEntry("Mitosis", 0.4, "2026-01-01T00:00:00")]


def test_distribution_total():
    assert QuestionDistribution(2, 3, 5).total == 10
    assert QuestionDistribution().total == 0


def test_quiz_attempt_from_dict():
    attempt = QuizAttempt.from_dict({"topic": "Biology", "score": 50, "correct": 1, "total": 2})
    assert attempt.results == []
    assert attempt.id is None


def test_history_entry_from_dict_coerces_loose_values():
    entry = HistoryEntry.from_dict({"topic": 42, "performance": "0.75"})
    assert entry.topic == "42"
    assert entry.performance == 0.75
    assert HistoryEntry.from_dict({"topic": "Mitosis", "performance": "high"}).performance is None
    assert HistoryEntry.from_dict({}).topic is None
