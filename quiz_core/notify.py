# quiz_core/notify.py
from __future__ import annotations
import logging, smtplib
from email.message import EmailMessage

from .config import EmailSettings
from .scoring import fmt_number
from .types import Result

log = logging.getLogger(__name__)


def email_enabled(s: EmailSettings) -> bool:
    return bool(s.to and s.user and s.password)


def compose_message(name: str, age: int, result: Result, log_entry: str, s: EmailSettings) -> EmailMessage:
    overall = fmt_number(result.overall_score)
    msg = EmailMessage()
    msg["Subject"] = f"{s.subject_prefix} • {name} (Age {age}) • {result.dominant_type} • {overall}/5"
    msg["From"] = s.user
    msg["To"] = s.to
    msg.set_content("\n".join([
        "Hello,",
        "",
        "A new Personality Development Test submission has been received.",
        "",
        f"Student: {name}",
        f"Age: {age}",
        f"Dominant Type: {result.dominant_type}",
        f"Overall Score: {overall}/5",
        f"Recommended Learning Styles: {', '.join(result.recommended_learning_styles)}",
        "",
        "Summary:",
        result.personalized_description,
        "",
        "— Full submission details below —",
        log_entry,
        "Best regards,",
        s.signature,
    ]))
    return msg


def send_summary(name: str, age: int, result: Result, log_entry: str, s: EmailSettings) -> bool:
    """Deliver the submission summary. Never raises; failures are logged."""
    try:
        msg = compose_message(name, age, result, log_entry, s)
        with smtplib.SMTP(s.host, s.port, timeout=30) as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
            smtp.login(s.user, s.password)
            smtp.send_message(msg)
        return True
    except Exception as e:
        log.warning("email send error: %s", e)
        return False
