from __future__ import annotations

import importlib
import sys

import pytest

from quiz_core.types import Answer


_APP_MODULES = [
    "quiz_core.config",
    "api.storage",
    "api.app",
]

_ENV_KEYS = ("DB_PATH", "LOG_PATH", "EMAIL_TO", "EMAIL_USER", "EMAIL_PASS", "EMAIL_HOST", "AUDIT_LOG_ENABLED")


def reload_app(tmp_path, monkeypatch) -> tuple[object, object]:
    """Point DATA_DIR at tmp_path and re-import config, storage and app."""

    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    for name in _APP_MODULES:
        if name in sys.modules:
            importlib.reload(sys.modules[name])
        else:
            importlib.import_module(name)
    return sys.modules["api.storage"], sys.modules["api.app"]


def answers(*pairs: tuple[int, str]) -> list[Answer]:
    return [Answer(question_id=q, value=a) for q, a in pairs]


@pytest.fixture
def app_env(tmp_path, monkeypatch):
    return reload_app(tmp_path, monkeypatch)


@pytest.fixture
def full_answers() -> list[Answer]:
    return answers(
        (1, "Very familiar"),
        (2, "Frequently"),
        (3, "Very important"),
        (4, "Disagree"),
        (5, "Almost Always"),
        (6, "Agree"),
        (7, "Neutral"),
        (8, "Rarely"),
        (9, "Agree"),
        (10, "I realised I learn best by teaching others."),
    )
