"""Plain-text, append-only audit record of every scored submission."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List
import json

from .scoring import fmt_number
from .types import Result


def _plain_numbers(payload: Any) -> Any:
    # whole floats render as ints, e.g. 5.0 -> 5
    if isinstance(payload, float) and payload.is_integer():
        return int(payload)
    if isinstance(payload, dict):
        return {k: _plain_numbers(v) for k, v in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [_plain_numbers(v) for v in payload]
    return payload


def to_json(payload: Any) -> str:
    """Compact JSON text, as stored in the log and the database columns."""

    return json.dumps(_plain_numbers(payload), separators=(",", ":"), ensure_ascii=False)


def format_entry(
    timestamp: str,
    name: str,
    age: int,
    answers: List[Dict[str, Any]],
    result: Result,
) -> str:
    """Render one submission as the fixed block of lines kept in the log."""

    lines: List[str] = [
        "=== Submission ===",
        f"Timestamp: {timestamp}",
        f"Name: {name}",
        f"Age: {age}",
        f"Answers: {to_json(answers)}",
        f"Scores: {to_json(result.category_scores)}",
        f"Dominant Type: {result.dominant_type}",
        f"Overall Score: {fmt_number(result.overall_score)}",
        f"Learning Styles: {to_json(result.recommended_learning_styles)}",
        "Calculation Steps:",
        *result.calculation_steps,
        "Description:",
        result.personalized_description,
        "\n\n",
    ]
    return "\n".join(lines)


def append_entry(path: Path | str, entry: str) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("a", encoding="utf-8") as f:
        f.write(entry)


__all__ = ["format_entry", "append_entry", "to_json"]
