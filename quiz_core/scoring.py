from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Tuple
from .types import Answer, Result
from .question_bank import CATEGORIES, BIG_FIVE
from .rubric import (
    OPTION_SCORES,
    NEUTRAL_SCORE,
    QUESTION_CATEGORIES,
    STYLE_THRESHOLD,
    STYLE_RULES,
    FALLBACK_STYLE,
    STRENGTHS,
    ACTIVITIES,
)

_CENT = Decimal("0.01")

def round2(x: float) -> float:
    # half away from zero on the exact binary value
    return float(Decimal(x).quantize(_CENT, rounding=ROUND_HALF_UP))

def fmt_number(x: float) -> str:
    """Shortest rendering of a 2-decimal score: 1 -> "1", 3.50 -> "3.5"."""
    return format(float(x), "g")

def option_score(label: str) -> int:
    return OPTION_SCORES.get(label, NEUTRAL_SCORE)

def question_categories(question_id: int) -> Tuple[str, ...]:
    return QUESTION_CATEGORIES.get(question_id, ())

def _dominant(scores: Dict[str, float]) -> str:
    dominant = "Balanced"
    best = float("-inf")
    for c in BIG_FIVE:
        if scores[c] > best:
            best = scores[c]
            dominant = c
    return dominant

def learning_styles(scores: Dict[str, float]) -> List[str]:
    styles: List[str] = []
    for cat, style in STYLE_RULES:
        if scores.get(cat, 0) >= STYLE_THRESHOLD and style not in styles:
            styles.append(style)
    if not styles:
        styles.append(FALLBACK_STYLE)
    return styles

def _describe(dominant: str, overall: float, scores: Dict[str, float], styles: List[str]) -> str:
    strengths = [label for cat, label in STRENGTHS if scores.get(cat, 0) >= STYLE_THRESHOLD]
    activities = [label for style, label in ACTIVITIES if style in styles]
    return " ".join([
        f"Dominant tendency: {dominant}.",
        f"Overall development score: {fmt_number(overall)}/5.",
        f"Strengths: {'; '.join(strengths)}." if strengths else "Balanced profile with potential across areas.",
        f"Recommended learning styles: {', '.join(styles)}.",
        f"Suggested activities: {'; '.join(activities)}." if activities else "Try a multimodal mix to explore preferences.",
    ])

def compute_result(answers: Iterable[Answer]) -> Result:
    """
    Score a list of answers against the fixed rubric.
    Unknown question ids touch no category; unknown option labels
    (free text, typos) score neutral 3. Every answer yields a trace line.
    """
    totals = {c: 0 for c in CATEGORIES}
    counts = {c: 0 for c in CATEGORIES}
    steps: List[str] = []

    for ans in answers:
        cats = question_categories(ans.question_id)
        score = option_score(ans.value)
        steps.append(f'Q{ans.question_id}: option "{ans.value}" → score {score} → categories {", ".join(cats)}')
        for c in cats:
            totals[c] += score
            counts[c] += 1

    scores = {c: round2(totals[c] / max(counts[c], 1)) for c in CATEGORIES}
    dominant = _dominant(scores)
    overall = round2(sum(scores[c] for c in BIG_FIVE) / len(BIG_FIVE))
    styles = learning_styles(scores)

    return Result(
        category_scores=scores,
        dominant_type=dominant,
        overall_score=overall,
        recommended_learning_styles=styles,
        personalized_description=_describe(dominant, overall, scores, styles),
        calculation_steps=steps,
    )
