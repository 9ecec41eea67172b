# tests/test_seed.py
from mindquiz.db import init_db
from mindquiz.seed import is_seeded, load_sample_topics, seed_topics
from mindquiz.storage import get_topic, list_topics, save_topic
from mindquiz.models import Topic


def test_sample_topics_are_valid():
    topics = load_sample_topics()
    assert [t.name for t in topics] == ["Cell Biology", "Photosynthesis"]
    for topic in topics:
        assert topic.concepts
        assert all(c.is_valid() for c in topic.concepts)
        assert all(1 <= c.difficulty <= 5 for c in topic.concepts)


def test_seed_topics(tmp_db):
    init_db(tmp_db)
    assert not is_seeded(tmp_db)
    seed_topics(tmp_db)
    assert is_seeded(tmp_db)
    assert list_topics(tmp_db) == ["Cell Biology", "Photosynthesis"]
    assert len(get_topic(tmp_db, "Cell Biology").concepts) == 6


def test_seed_is_idempotent(tmp_db):
    init_db(tmp_db)
    seed_topics(tmp_db)
    seed_topics(tmp_db)
    assert len(list_topics(tmp_db)) == 2


def test_seed_skips_when_user_has_topics(tmp_db):
    init_db(tmp_db)
    save_topic(tmp_db, Topic("Mine", []))
    seed_topics(tmp_db)
    assert list_topics(tmp_db) == ["Mine"]
