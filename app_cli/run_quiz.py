from __future__ import annotations
import argparse, logging
from quiz_core.types import Answer, Question, Result
from quiz_core.scoring import compute_result, fmt_number
from quiz_core.question_bank import shuffled_questions
def ask(prompt: str, options=None) -> str:
    if options:
        print(prompt)
        for i,opt in enumerate(options): print(f"  [{i}] {opt}")
        while True:
            v = input("Your choice (index): ").strip()
            if v.isdigit() and int(v) < len(options): return options[int(v)]
            print(f"Enter a number between 0 and {len(options)-1}.")
    else:
        return input(prompt + " ").strip()
def ask_age() -> int:
    while True:
        v = input("Age: ").strip()
        if v.isdigit() and int(v) > 0: return int(v)
        print("Enter a positive whole number.")
def answer_question(q: Question) -> Answer:
    return Answer(question_id=q.id, value=ask(q.text, q.options))
def run(argv=None) -> Result:
    ap = argparse.ArgumentParser(description="Personality Development Test (console)")
    ap.add_argument("--save", action="store_true", help="store the submission and append the audit log")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    print("Personality Development Test")
    name = ""
    while not name: name = input("Name: ").strip()
    age = ask_age()
    answers = [answer_question(q) for q in shuffled_questions()]
    res = compute_result(answers)
    print()
    for cat, val in res.category_scores.items(): print(f"  {cat:<18} {val:.2f}")
    print(f"Overall: {fmt_number(res.overall_score)}/5  Dominant: {res.dominant_type}")
    print(res.personalized_description)
    if args.save:
        from api.storage import init_db, save_submission, utcnow_iso
        from quiz_core.audit_log import format_entry, append_entry
        from quiz_core.config import AUDIT_LOG_ENABLED, LOG_PATH
        raw = [{"q": a.question_id, "a": a.value} for a in answers]
        ts = utcnow_iso(); init_db()
        sid = save_submission(ts, name, age, res, raw)
        if AUDIT_LOG_ENABLED:
            append_entry(LOG_PATH, format_entry(ts, name, age, raw, res))
        print(f"Saved as submission #{sid}")
    return res
def main(argv=None) -> int:
    run(argv)
    return 0
if __name__ == "__main__": raise SystemExit(main())
