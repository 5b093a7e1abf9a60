from __future__ import annotations
from collections import Counter
from quiz_core.question_bank import load_questions, CATEGORIES
from quiz_core.rubric import OPTION_SCORES, QUESTION_CATEGORIES

def check_bank() -> list[str]:
    """Cross-check the static questions against the scoring tables."""
    problems: list[str] = []
    items = load_questions()
    ids = Counter(q.id for q in items)
    for qid, n in ids.items():
        if n > 1: problems.append(f"Q{qid}: duplicated {n}x")
    for q in items:
        cats = QUESTION_CATEGORIES.get(q.id)
        if cats is None:
            problems.append(f"Q{q.id}: not mapped to any category")
        elif any(c not in CATEGORIES for c in cats):
            problems.append(f"Q{q.id}: unknown category in {cats}")
        if q.type == "choice":
            if not q.options:
                problems.append(f"Q{q.id}: choice question without options")
                continue
            for opt in q.options:
                if opt not in OPTION_SCORES:
                    problems.append(f"Q{q.id}: option {opt!r} scores neutral (not in lexicon)")
        elif q.options:
            problems.append(f"Q{q.id}: text question carries options")
    for qid in QUESTION_CATEGORIES:
        if qid not in ids: problems.append(f"Q{qid}: mapped but missing from questions.json")
    return problems

def main():
    items = load_questions()
    by_cat = Counter(c for q in items for c in QUESTION_CATEGORIES.get(q.id, ()))
    print(f"{len(items)} questions")
    for c in CATEGORIES:
        print(f"  {c:<18} {by_cat.get(c, 0)}")
    problems = check_bank()
    for p in problems: print(f"  → {p}")
    if not problems: print("  ✓ Bank consistent with rubric")
    return 1 if problems else 0

if __name__ == "__main__":
    raise SystemExit(main())
