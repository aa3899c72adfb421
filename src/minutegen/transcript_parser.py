"""Parse transcript JSON exports into a canonical record."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from .errors import UnrecognizedFormatError
from .models import SENTINEL_SPEAKER, CanonicalRecord, Utterance

log = logging.getLogger(__name__)


def read_transcript(path: Path) -> object:
    """Read and decode a transcript file. Shape checking is left to normalize()."""
    raw_text = Path(path).read_text(encoding="utf-8")
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise UnrecognizedFormatError(f"Transcript is not valid JSON: {path} ({e})") from e


def _parse_timestamp(value: str | int | float | None) -> datetime:
    """Parse a timestamp string or number into an aware datetime."""
    if value is None or isinstance(value, bool):
        raise UnrecognizedFormatError("Transcript has no creation timestamp")
    if isinstance(value, (int, float)):
        # Epoch millis or seconds
        if value > 1e12:
            value = value / 1000
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise UnrecognizedFormatError(f"Creation timestamp out of range: {value!r}") from e
    if isinstance(value, str):
        text = value.strip()
        # Number string first: fromisoformat would read bare digits as a basic-format date
        try:
            return _parse_timestamp(float(text))
        except ValueError:
            pass
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            parsed = None
        if parsed is not None:
            if parsed.tzinfo is None:
                # No offset: wall-clock time on this host
                parsed = parsed.astimezone()
            return parsed
    raise UnrecognizedFormatError(f"Unparseable creation timestamp: {value!r}")


def format_meeting_date(moment: datetime) -> str:
    """Render a timestamp as a local M/D/YYYY date."""
    local = moment.astimezone()
    return f"{local.month}/{local.day}/{local.year}"


def _parse_utterances(entries: list) -> list[Utterance]:
    utterances: list[Utterance] = []
    for entry in entries:
        if not isinstance(entry, dict):
            log.debug("Utterance is not an object, keeping it as unattributed text: %r", entry)
            utterances.append(Utterance(speaker="", text="" if entry is None else str(entry)))
            continue
        speaker = entry.get("speaker")
        text = entry.get("text")
        utterances.append(
            Utterance(
                speaker="" if speaker is None else str(speaker),
                text="" if text is None else str(text),
            )
        )
    return utterances


def collect_participants(
    utterances: list[Utterance], *, sentinel: str = SENTINEL_SPEAKER
) -> tuple[str, ...]:
    """Distinct speakers in first-seen order, without the sentinel voice."""
    seen: dict[str, None] = {}
    for utterance in utterances:
        if utterance.speaker and utterance.speaker != sentinel:
            seen.setdefault(utterance.speaker, None)
    return tuple(seen)


def normalize(raw: object, *, sentinel: str = SENTINEL_SPEAKER) -> CanonicalRecord:
    """Build a CanonicalRecord from the first meeting in a transcript payload."""
    if not isinstance(raw, list) or not raw:
        raise UnrecognizedFormatError("Unrecognized transcript format: expected a non-empty list")

    first = raw[0]
    if not isinstance(first, dict) or not isinstance(first.get("transcript_content"), list):
        raise UnrecognizedFormatError(
            "Unrecognized transcript format: first entry has no transcript_content"
        )

    utterances = _parse_utterances(first["transcript_content"])
    key = "created_at" if "created_at" in first else "createdAt"
    created_at = _parse_timestamp(first.get(key))

    record = CanonicalRecord(
        dialogue="\n".join(u.render() for u in utterances),
        date=format_meeting_date(created_at),
        participants=collect_participants(utterances, sentinel=sentinel),
    )
    log.debug(
        "Normalized transcript: %d utterances, %d participants",
        len(utterances), len(record.participants),
    )
    return record
