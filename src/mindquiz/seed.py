"""Seed the store with the bundled sample topics."""
import json
from pathlib import Path

from mindquiz.models import Topic
from mindquiz.storage import list_topics, save_topic

CONTENT_DIR = Path(__file__).parent / "content"


def is_seeded(db_path: str) -> bool:
    """Check whether any topic has been stored yet."""
    return len(list_topics(db_path)) > 0


def load_sample_topics() -> list[Topic]:
    data = json.loads((CONTENT_DIR / "topics.json").read_text())
    return [Topic.from_dict(t) for t in data["topics"]]


def seed_topics(db_path: str) -> None:
    """Insert the sample topics unless the store already has topics."""
    if is_seeded(db_path):
        return
    for topic in load_sample_topics():
        save_topic(db_path, topic)
