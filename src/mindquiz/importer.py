"""Import topics from JSON or YAML files."""
import json
import logging
from pathlib import Path

import yaml

from mindquiz.models import Topic
from mindquiz.storage import save_topic

logger = logging.getLogger(__name__)


class TopicImportError(ValueError):
    """Raised when a file can't be read as a topic."""


def read_topic_file(file_path: str) -> Topic:
    path = Path(file_path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        data = json.loads(path.read_text())
    elif suffix in (".yaml", ".yml"):
        data = yaml.safe_load(path.read_text())
    else:
        raise TopicImportError(f"Unsupported topic file type: {suffix or path.name}")

    if not isinstance(data, dict):
        raise TopicImportError(f"{path.name} does not contain a topic mapping")
    topic = Topic.from_dict(data)
    if not topic.name:
        topic.name = path.stem
    skipped = [c for c in topic.concepts if not c.is_valid()]
    if skipped:
        logger.warning("%s: %d concept(s) missing a name or definition", path.name, len(skipped))
    return topic


def import_topic(db_path: str, file_path: str) -> dict:
    """Read a topic file and store it. Returns a short summary."""
    topic = read_topic_file(file_path)
    save_topic(db_path, topic)
    return {"filename": Path(file_path).name, "topic": topic.name, "concepts": len(topic.concepts)}
