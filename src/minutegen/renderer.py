"""Fill summary templates and write the finished document."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import TemplateReadError
from .models import SECTION_KEYS, CanonicalRecord

log = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"
TEMPLATE_SUFFIX = ".md"


def list_templates(templates_dir: Path) -> list[str]:
    """Return the names (file stems) of the templates in a directory."""
    try:
        files = list(Path(templates_dir).iterdir())
    except OSError as e:
        raise TemplateReadError(f"Error reading templates directory {templates_dir}: {e}") from e
    return sorted(
        f.name[: -len(TEMPLATE_SUFFIX)]
        for f in files
        if f.name.endswith(TEMPLATE_SUFFIX) and f.is_file()
    )


def load_template(templates_dir: Path, name: str) -> str:
    path = Path(templates_dir) / f"{name}{TEMPLATE_SUFFIX}"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateReadError(f"Error reading template file {path}: {e}") from e


def _substitute(text: str, token: str, value: str, *, replace_all: bool) -> str:
    return text.replace(token, value, -1 if replace_all else 1)


def render(
    template: str,
    record: CanonicalRecord,
    sections: dict[str, str],
    *,
    replace_all: bool = False,
) -> str:
    """Substitute record fields and section text into a template.

    By default only the first occurrence of each placeholder is replaced.
    Participant placeholders stay literal when there are too few participants.
    """
    summary = _substitute(template, "{date}", record.date, replace_all=replace_all)

    for i, name in enumerate(record.participants[:2], start=1):
        summary = _substitute(summary, f"{{participant{i}}}", name, replace_all=replace_all)

    for key in SECTION_KEYS:
        value = sections.get(key, "").strip()
        summary = _substitute(summary, f"{{{key}}}", value, replace_all=replace_all)

    return summary


def write_summary(path: Path, content: str, *, dry_run: bool = False) -> Path:
    """Write the summary to disk. Returns the path written."""
    path = Path(path)

    if dry_run:
        log.info("[DRY RUN] Would write %s (%d chars)", path, len(content))
        return path

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    log.info("Wrote %s (%d chars)", path, len(content))
    return path
