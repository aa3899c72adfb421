"""Split a free-text model response into the fixed summary sections."""

from __future__ import annotations

import logging

from .models import SECTIONS, empty_sections

log = logging.getLogger(__name__)


def match_heading(line: str) -> str | None:
    """Return the section key of the first marker found in the line, if any."""
    lowered = line.lower()
    for section in SECTIONS:
        if any(marker in lowered for marker in section.markers):
            return section.key
    return None


def segment(raw_text: str) -> dict[str, str]:
    """Group response lines under the most recent recognized heading.

    Heading lines themselves are dropped, as are blank lines and anything
    before the first heading. Never raises.
    """
    buffers: dict[str, list[str]] = {key: [] for key in empty_sections()}
    current: str | None = None
    dropped = 0

    for line in raw_text.split("\n"):
        line = line.removesuffix("\r")
        key = match_heading(line)
        if key is not None:
            current = key
            continue
        if not line.strip():
            continue
        if current is None:
            dropped += 1
            continue
        buffers[current].append(line + "\n")

    if dropped:
        log.debug("Dropped %d line(s) before the first section heading", dropped)

    return {key: "".join(lines).strip() for key, lines in buffers.items()}
