from __future__ import annotations
from fastapi import BackgroundTasks, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging, typing as t

# ---- Engine imports ----
from quiz_core.types import Answer
from quiz_core.scoring import compute_result
from quiz_core.question_bank import shuffled_questions, question_to_dict
from quiz_core.audit_log import format_entry, append_entry
from quiz_core.notify import email_enabled, send_summary
from quiz_core.config import ALLOWED_ORIGINS, AUDIT_LOG_ENABLED, LOG_PATH, email_settings
from .storage import init_db, load_submission, save_submission, utcnow_iso

log = logging.getLogger(__name__)

init_db()

app = FastAPI(title="Personality Quiz API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Error shape: {"error": "..."} for every failure ----
@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

@app.exception_handler(RequestValidationError)
async def _invalid_payload(request: Request, exc: RequestValidationError):
    log.info("rejected payload on %s: %d error(s)", request.url.path, len(exc.errors()))
    return JSONResponse(status_code=400, content={"error": "Invalid payload"})

# ---- Schemas ----
class AnswerIn(BaseModel):
    q: int
    a: str

class SubmitReq(BaseModel):
    name: str
    age: int = Field(gt=0)
    answers: t.List[AnswerIn]

    @field_validator("name")
    @classmethod
    def _name_present(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name is blank")
        return v

# ---- Health ----
@app.get("/api/health")
def health():
    return {"ok": True}

@app.get("/api/questions")
def questions():
    return {"questions": [question_to_dict(q) for q in shuffled_questions()]}

@app.post("/api/submit")
def submit(payload: SubmitReq, background: BackgroundTasks):
    raw_answers = [{"q": x.q, "a": x.a} for x in payload.answers]
    result = compute_result(Answer(question_id=x.q, value=x.a) for x in payload.answers)
    timestamp = utcnow_iso()
    entry = format_entry(timestamp, payload.name, payload.age, raw_answers, result)
    try:
        sid = save_submission(timestamp, payload.name, payload.age, result, raw_answers)
        if AUDIT_LOG_ENABLED:
            append_entry(LOG_PATH, entry)
    except Exception:
        log.exception("submission persistence failed")
        raise HTTPException(500, "Server error")

    settings = email_settings()
    if email_enabled(settings):
        background.add_task(send_summary, payload.name, payload.age, result, entry, settings)

    return {"success": True, "id": sid, "timestamp": timestamp, **result.to_dict()}

@app.get("/api/submissions/{submission_id}")
def get_submission(submission_id: int):
    stored = load_submission(submission_id)
    if not stored:
        raise HTTPException(404, "Submission not found")
    return stored
