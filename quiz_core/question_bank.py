from __future__ import annotations
import json, random
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional
from .types import Question
CATEGORIES = ("Extraversion","Agreeableness","Conscientiousness","Neuroticism","Openness","Reflection")
BIG_FIVE = CATEGORIES[:5]
_QUESTIONS_PATH = Path(__file__).resolve().parent / "data" / "questions.json"

@lru_cache(maxsize=1)
def _load_cached() -> tuple[Question, ...]:
    raw = json.loads(_QUESTIONS_PATH.read_text(encoding="utf-8"))
    out = []
    for r in raw:
        opts = r.get("options")
        out.append(Question(id=int(r["id"]), text=r["text"], type=r.get("type", "choice"),
                            options=tuple(opts) if opts else None))
    return tuple(out)

def load_questions() -> List[Question]:
    return list(_load_cached())

def shuffled_questions(rng: Optional[random.Random] = None) -> List[Question]:
    """Fresh shuffled copy per call; the cached bank keeps its file order."""
    qs = load_questions()
    (rng or random).shuffle(qs)
    return qs

def question_to_dict(q: Question) -> Dict[str, object]:
    out: Dict[str, object] = {"id": q.id, "text": q.text, "type": q.type}
    if q.options is not None:
        out["options"] = list(q.options)
    return out
