"""Render a canonical record into the instruction sent to the language model."""

from __future__ import annotations

from .models import SECTIONS, CanonicalRecord

SYSTEM_PROMPT = (
    "You are a helpful assistant that summarizes meeting transcripts "
    "in a concise and organized way."
)


def _section_list() -> str:
    return "\n".join(
        f"{i}. {section.title}: {section.description}"
        for i, section in enumerate(SECTIONS, start=1)
    )


def build_prompt(record: CanonicalRecord) -> str:
    """Build the user prompt. Headings come from SECTIONS so the segmenter can find them."""
    participants = " and ".join(record.participants)
    return (
        "\n"
        "You are an AI assistant that summarizes meeting transcripts. \n"
        f"Analyze the following meeting transcript between {participants} \n"
        "and generate the following sections:\n"
        "\n"
        f"{_section_list()}\n"
        "\n"
        "Meeting Transcript:\n"
        f"{record.dialogue}\n"
    )
