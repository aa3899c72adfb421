"""Data models for transcripts and summary sections."""

from __future__ import annotations

from dataclasses import dataclass, field

SENTINEL_SPEAKER = "Speaker C"


@dataclass(frozen=True)
class Utterance:
    speaker: str
    text: str

    def render(self) -> str:
        return f"{self.speaker}: {self.text}"


@dataclass(frozen=True)
class CanonicalRecord:
    """Normalized view of a transcript: who spoke, what was said, and when."""

    dialogue: str
    date: str
    participants: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Section:
    """One summary section: its template key, prompt heading and response markers."""

    key: str
    title: str
    description: str
    markers: tuple[str, ...]


# Shared by the prompt builder and the segmenter; order is matching priority.
SECTIONS: tuple[Section, ...] = (
    Section(
        key="check_in",
        title="Check-in",
        description=(
            "Brief summary of how participants were feeling or what they "
            "mentioned at the start of the meeting"
        ),
        markers=("check-in:",),
    ),
    Section(
        key="progress_updates",
        title="Progress Updates",
        description=(
            "Summary of any project updates or progress reports mentioned "
            "during the meeting"
        ),
        markers=("progress updates:",),
    ),
    Section(
        key="discussion_topics",
        title="Discussion Topics",
        description="Main points discussed during the meeting, organized by topic",
        markers=("discussion topics:",),
    ),
    Section(
        key="action_items",
        title="Action Items",
        description=(
            "Specific tasks that participants agreed to do, with assignees "
            "if mentioned"
        ),
        markers=("action items:",),
    ),
    Section(
        key="next_steps",
        title="Next Steps",
        description="What participants agreed would happen after the meeting",
        markers=("next steps:",),
    ),
    Section(
        key="feedback",
        title="Feedback",
        description="Any feedback that was exchanged during the meeting",
        markers=("feedback:",),
    ),
    Section(
        key="additional_notes",
        title="Additional Notes",
        description=(
            "Any other important information that doesn't fit into the "
            "above categories"
        ),
        markers=("additional notes:", "notes:"),
    ),
)

SECTION_KEYS: tuple[str, ...] = tuple(s.key for s in SECTIONS)


def empty_sections() -> dict[str, str]:
    return {key: "" for key in SECTION_KEYS}
