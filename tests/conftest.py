import random

import pytest

from mindquiz.models import Concept, HistoryEntry, Topic, UserModel

MITOSIS_DEFINITION = "Mitosis is cell division producing two identical daughter cells"


@pytest.fixture
def tmp_db(tmp_path):
    """Provide a temporary SQLite database path for tests."""
    db_path = str(tmp_path / "test_mindquiz.db")
    return db_path


@pytest.fixture
def rng():
    """A seeded random source so generation is repeatable."""
    return random.Random(1234)


@pytest.fixture
def mitosis():
    return Concept(concept="Mitosis", definition=MITOSIS_DEFINITION, difficulty=3)


@pytest.fixture
def biology_topic(mitosis):
    return Topic(name="Biology", concepts=[
        mitosis,
        Concept("Meiosis", "Meiosis is cell division that produces four genetically distinct gametes", 4),
        Concept("Osmosis", "Osmosis is the movement of water across a semipermeable membrane", 3),
        Concept("Ribosome", "A ribosome translates messenger RNA into protein", 2),
        Concept("Chlorophyll", "Chlorophyll is the green pigment that absorbs light in chloroplasts", 1),
    ])


def make_history(*entries) -> UserModel:
    """Build a user model from (topic, performance) pairs."""
    return UserModel(learning_history=[
        HistoryEntry(topic=t, performance=p, timestamp=f"2026-01-{i + 1:02d}T10:00:00")
        for i, (t, p) in enumerate(entries)
    ])
