"""Persistence of scored submissions.

A single SQLite file holds one row per submission.  JSON columns keep the
category scores, learning styles and raw answers exactly as the API returned
them, so a stored row can be replayed to the client without re-scoring.
"""

from __future__ import annotations

import json
import logging
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from quiz_core.audit_log import to_json
from quiz_core.config import DATA_DIR, DB_PATH
from quiz_core.types import Result


log = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS submissions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    timestamp TEXT NOT NULL,
    name TEXT NOT NULL,
    age INTEGER NOT NULL,
    scores_json TEXT NOT NULL,
    dominant_type TEXT NOT NULL,
    overall_score REAL NOT NULL,
    description TEXT NOT NULL,
    learning_styles TEXT NOT NULL,
    raw_answers_json TEXT NOT NULL
);
"""

_LOCK = threading.Lock()


def _connect() -> sqlite3.Connection:
    conn = sqlite3.connect(str(DB_PATH))
    conn.row_factory = sqlite3.Row
    return conn


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def init_db() -> None:
    """Create the data directory and the submissions table if missing."""

    DATA_DIR.mkdir(parents=True, exist_ok=True)
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    with _LOCK:
        conn = _connect()
        try:
            conn.execute("PRAGMA journal_mode = WAL")
            conn.executescript(SCHEMA)
            conn.commit()
        finally:
            conn.close()


def save_submission(
    timestamp: str,
    name: str,
    age: int,
    result: Result,
    raw_answers: List[Dict[str, Any]],
) -> int:
    """Insert one submission and return its row id."""

    row = (
        timestamp,
        name,
        int(age),
        to_json(result.category_scores),
        result.dominant_type,
        float(result.overall_score),
        result.personalized_description,
        to_json(result.recommended_learning_styles),
        to_json(raw_answers),
    )
    with _LOCK:
        conn = _connect()
        try:
            cur = conn.execute(
                """
                INSERT INTO submissions (
                    timestamp, name, age, scores_json, dominant_type, overall_score,
                    description, learning_styles, raw_answers_json
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                row,
            )
            conn.commit()
            sid = int(cur.lastrowid)
        finally:
            conn.close()
    log.info("saved submission %d (%s)", sid, result.dominant_type)
    return sid


def load_submission(submission_id: int) -> Optional[Dict[str, Any]]:
    conn = _connect()
    try:
        row = conn.execute("SELECT * FROM submissions WHERE id = ?", (int(submission_id),)).fetchone()
    finally:
        conn.close()
    if row is None:
        return None
    return {
        "id": row["id"],
        "timestamp": row["timestamp"],
        "name": row["name"],
        "age": row["age"],
        "categoryScores": json.loads(row["scores_json"]),
        "dominantType": row["dominant_type"],
        "overallScore": row["overall_score"],
        "personalizedDescription": row["description"],
        "recommendedLearningStyles": json.loads(row["learning_styles"]),
        "answers": json.loads(row["raw_answers_json"]),
    }
