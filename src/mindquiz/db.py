"""SQLite-backed key-value store for topics, quiz attempts and user models."""
import json
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any

from mindquiz.config import DEFAULT_DB_PATH

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    namespace TEXT NOT NULL,
    name TEXT NOT NULL,
    value TEXT NOT NULL,
    updated_at TEXT,
    PRIMARY KEY (namespace, name)
);
"""


def get_connection(db_path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Return a SQLite connection with row factory enabled."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str = DEFAULT_DB_PATH) -> None:
    """Initialize the database, creating the store table if it doesn't exist."""
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(db_path)
    conn.executescript(SCHEMA)
    conn.commit()
    conn.close()


def kv_get(db_path: str, namespace: str, name: str) -> Any | None:
    conn = get_connection(db_path)
    row = conn.execute(
        "SELECT value FROM kv_store WHERE namespace = ? AND name = ?", (namespace, name)
    ).fetchone()
    conn.close()
    return json.loads(row["value"]) if row else None


def kv_put(db_path: str, namespace: str, name: str, value: Any) -> None:
    conn = get_connection(db_path)
    conn.execute(
        """INSERT INTO kv_store (namespace, name, value, updated_at) VALUES (?, ?, ?, ?)
        ON CONFLICT(namespace, name) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at""",
        (namespace, name, json.dumps(value), datetime.now().isoformat()),
    )
    conn.commit()
    conn.close()


def kv_delete(db_path: str, namespace: str, name: str) -> bool:
    """Delete a key. Returns False when it did not exist."""
    conn = get_connection(db_path)
    cursor = conn.execute(
        "DELETE FROM kv_store WHERE namespace = ? AND name = ?", (namespace, name)
    )
    conn.commit()
    conn.close()
    return cursor.rowcount > 0


def kv_list(db_path: str, namespace: str) -> list[str]:
    """Names stored under a namespace, in alphabetical order."""
    conn = get_connection(db_path)
    rows = conn.execute(
        "SELECT name FROM kv_store WHERE namespace = ? ORDER BY name", (namespace,)
    ).fetchall()
    conn.close()
    return [r["name"] for r in rows]
