"""Orchestrator: read transcript -> normalize -> prompt -> complete -> segment -> render -> write."""

from __future__ import annotations

import logging
from pathlib import Path

from .completion import CompletionClient
from .config import Config
from .models import CanonicalRecord
from .prompt_builder import build_prompt
from .renderer import load_template, render, write_summary
from .segmenter import segment
from .transcript_parser import normalize, read_transcript

log = logging.getLogger(__name__)


def generate_summary(
    record: CanonicalRecord,
    template: str,
    client: CompletionClient,
    *,
    replace_all: bool = False,
) -> str:
    """Ask the model for a summary of the record and lay it out with the template."""
    prompt = build_prompt(record)
    response = client.complete(prompt)
    log.debug("Received %d chars from completion service", len(response))

    sections = segment(response)
    filled = [key for key, value in sections.items() if value]
    log.debug("Recognized sections: %s", ", ".join(filled) or "none")

    return render(template, record, sections, replace_all=replace_all)


def run_pipeline(
    config: Config,
    input_path: Path,
    output_path: Path,
    template_name: str,
    client: CompletionClient,
    *,
    dry_run: bool = False,
) -> Path:
    """Run a single summary pass. Returns the output path.

    Any failure propagates before the output file is touched.
    """
    raw = read_transcript(input_path)
    record = normalize(raw, sentinel=config.sentinel_speaker)
    log.info(
        "Summarizing meeting on %s with %s",
        record.date, ", ".join(record.participants) or "no named participants",
    )

    template = load_template(config.templates_dir, template_name)

    summary = generate_summary(
        record, template, client, replace_all=config.replace_all_placeholders,
    )
    return write_summary(output_path, summary, dry_run=dry_run)
