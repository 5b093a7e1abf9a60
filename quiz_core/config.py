from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return [part.strip() for part in raw.split(",") if part.strip()]


PORT: int = _env_int("PORT", 4000)
DATA_DIR: Path = Path(os.getenv("DATA_DIR", "data")).resolve()
DB_PATH: Path = Path(os.getenv("DB_PATH") or DATA_DIR / "quiz.db")
LOG_PATH: Path = Path(os.getenv("LOG_PATH") or DATA_DIR / "submissions_log.txt")

AUDIT_LOG_ENABLED: bool = _env_bool("AUDIT_LOG_ENABLED", True)
ALLOWED_ORIGINS: list[str] = _env_list("ALLOWED_ORIGINS", ["*"])

EMAIL_SUBJECT_PREFIX: str = os.getenv("EMAIL_SUBJECT_PREFIX", "AgapePT Submission")
EMAIL_SIGNATURE: str = "AgapePT System"


@dataclass(frozen=True)
class EmailSettings:
    host: str
    port: int
    user: str
    password: str
    to: str
    subject_prefix: str = EMAIL_SUBJECT_PREFIX
    signature: str = EMAIL_SIGNATURE


def email_settings() -> EmailSettings:
    # read per call, not at import
    return EmailSettings(
        host=os.getenv("EMAIL_HOST", ""),
        port=_env_int("EMAIL_PORT", 587),
        user=os.getenv("EMAIL_USER", ""),
        password=os.getenv("EMAIL_PASS", ""),
        to=os.getenv("EMAIL_TO", ""),
    )
