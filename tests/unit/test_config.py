"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from domainkit.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FAIL_CLOSED_VALIDATION", "LOG_EVENT_PAYLOADS", "IDENTITY_SEQUENCE_START"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.FAIL_CLOSED_VALIDATION is True
    assert settings.LOG_EVENT_PAYLOADS is False
    assert settings.IDENTITY_SEQUENCE_START == 1


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FAIL_CLOSED_VALIDATION", "false")
    monkeypatch.setenv("IDENTITY_SEQUENCE_START", "100")

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.FAIL_CLOSED_VALIDATION is False
    assert settings.IDENTITY_SEQUENCE_START == 100


def test_sequence_start_must_be_positive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDENTITY_SEQUENCE_START", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # type: ignore[call-arg]
