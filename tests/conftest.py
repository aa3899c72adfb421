"""Shared fixtures for minutegen tests."""

from __future__ import annotations

import time

import pytest

from minutegen.models import CanonicalRecord


@pytest.fixture(autouse=True)
def utc_local_time(monkeypatch):
    """Pin the local timezone so meeting dates are deterministic."""
    monkeypatch.setenv("TZ", "UTC")
    if hasattr(time, "tzset"):
        time.tzset()
    yield
    monkeypatch.undo()
    if hasattr(time, "tzset"):
        time.tzset()


@pytest.fixture
def sample_raw() -> list[dict]:
    return [
        {
            "created_at": "2024-01-05T10:00:00Z",
            "transcript_content": [
                {"speaker": "Alice", "text": "Hi"},
                {"speaker": "Speaker C", "text": "System note"},
                {"speaker": "Bob", "text": "Hello"},
            ],
        }
    ]


@pytest.fixture
def sample_record() -> CanonicalRecord:
    return CanonicalRecord(
        dialogue="Alice: Hi\nSpeaker C: System note\nBob: Hello",
        date="1/5/2024",
        participants=("Alice", "Bob"),
    )


@pytest.fixture
def sample_response() -> str:
    return (
        "Here is the summary.\n"
        "\n"
        "1. Check-in:\n"
        "Everyone is well.\n"
        "\n"
        "2. Progress Updates:\n"
        "- Alice shipped the importer.\n"
        "- Bob fixed the login bug.\n"
        "\n"
        "3. Discussion Topics:\n"
        "Release timing.\n"
        "\n"
        "4. Action Items:\n"
        "Bob to send notes.\n"
        "\n"
        "5. Next Steps:\n"
        "Meet again Friday.\n"
        "\n"
        "6. Feedback:\n"
        "Demo went well.\n"
        "\n"
        "7. Additional Notes:\n"
        "None.\n"
    )


@pytest.fixture
def templates_dir(tmp_path):
    d = tmp_path / "templates"
    d.mkdir()
    (d / "one-on-one.md").write_text(
        "Date: {date}\nWith: {participant1} and {participant2}\n\n{action_items}\n",
        encoding="utf-8",
    )
    (d / "standup.md").write_text("# Standup {date}\n{progress_updates}\n", encoding="utf-8")
    (d / "README.txt").write_text("not a template", encoding="utf-8")
    return d
