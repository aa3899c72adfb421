"""Command-line interface for minutegen."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .completion import CompletionClient, OpenAICompletionClient, StaticCompletionClient
from .config import Config, load_config
from .errors import MinutegenError
from .pipeline import run_pipeline
from .renderer import list_templates
from .selection import select_template


def _build_client(config: Config, response_file: Path | None) -> CompletionClient:
    if response_file is not None:
        return StaticCompletionClient(response_file.read_text(encoding="utf-8"))
    return OpenAICompletionClient(
        config.api_key,
        model=config.model,
        system_prompt=config.system_prompt,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="minutegen",
        description="Generate a meeting summary from a transcript using a language model",
    )
    parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to the meeting transcript JSON file",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        required=True,
        help="Path to save the generated meeting summary",
    )
    parser.add_argument(
        "--template", "-t",
        default=None,
        help="Template name to use (skips the interactive prompt)",
    )
    parser.add_argument(
        "--templates-dir",
        type=Path,
        default=None,
        help="Directory of *.md templates (default: bundled templates)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to config YAML (default: ~/.config/minutegen/config.yaml)",
    )
    parser.add_argument(
        "--response-file",
        type=Path,
        default=None,
        help="Use a saved model response instead of calling the API",
    )
    parser.add_argument(
        "--replace-all",
        action="store_true",
        help="Replace every occurrence of each placeholder, not just the first",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be written without writing files",
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = load_config(args.config)
        if args.templates_dir is not None:
            config.templates_dir = args.templates_dir
        if args.replace_all:
            config.replace_all_placeholders = True

        template_name = args.template or select_template(list_templates(config.templates_dir))
        client = _build_client(config, args.response_file)
        written = run_pipeline(
            config,
            args.input,
            args.output,
            template_name,
            client,
            dry_run=args.dry_run,
        )
    except (MinutegenError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1) from None

    if args.dry_run:
        print(f"Dry run: summary not written to {written}")
    else:
        print(f"Meeting summary successfully saved to {written}")
