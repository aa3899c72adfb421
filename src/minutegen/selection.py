"""Interactive numbered-list prompt for picking a template."""

from __future__ import annotations

from collections.abc import Callable

from .errors import TemplateReadError

MAX_ATTEMPTS = 5


def select_template(
    options: list[str],
    message: str = "Please select a template to use:",
    *,
    input_fn: Callable[[str], str] | None = None,
    output_fn: Callable[[str], None] | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> str:
    """Ask until a valid 1-based number is entered or attempts run out."""
    if not options:
        raise TemplateReadError("No templates found in the templates directory")

    input_fn = input_fn or input
    output_fn = output_fn or print

    for _ in range(max_attempts):
        output_fn(message)
        for index, option in enumerate(options, start=1):
            output_fn(f"{index}. {option}")

        answer = input_fn("Enter your selection (number): ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        output_fn("Invalid selection. Please try again.")

    raise ValueError(f"No valid selection after {max_attempts} attempts")
