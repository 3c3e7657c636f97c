# ui69/installer/selector.py
# -*- coding: utf-8 -*-
"""
Interactive multi-select prompt for choosing components.

The user toggles entries by number and confirms with an empty line. The
prompt blocks until at least one entry is chosen or the user aborts.
"""

import logging
import re
from typing import Callable, List, Optional, Sequence, Set, Tuple

import click

from ui69.common.console import echo_status
from ui69.config_models import AppSettings, ComponentEntry
from ui69.exceptions import SelectorCancelledError

module_logger = logging.getLogger(__name__)

SELECT_TITLE = "Which components would you like to add?"
SELECT_MESSAGE = "Toggle components by number, then press Enter to confirm"
EMPTY_SELECTION_MESSAGE = "You must choose at least one component."


def parse_toggles(answer: str, count: int) -> List[int]:
    """
    Parses a line like "1 3,5" into zero-based indexes.

    Raises:
        ValueError: If a token is not a number between 1 and `count`.
    """
    indexes: List[int] = []
    for token in re.split(r"[\s,]+", answer.strip()):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise ValueError(f"'{token}' is not a number between 1 and {count}.")
        indexes.append(int(token) - 1)
    return indexes


def _render_choices(
    entries: Sequence[Tuple[str, ComponentEntry]], selected: Set[int]
) -> None:
    width = len(str(len(entries)))
    for index, (_, entry) in enumerate(entries):
        mark = click.style("[x]", fg="green") if index in selected else "[ ]"
        click.echo(f"  {str(index + 1).rjust(width)}. {mark} {entry.name}")


def select_components(
    entries: Sequence[Tuple[str, ComponentEntry]],
    app_settings: Optional[AppSettings] = None,
    prompt: Callable[..., str] = click.prompt,
    current_logger: Optional[logging.Logger] = None,
) -> List[str]:
    """
    Asks the user which components to install.

    Args:
        entries: (key, ComponentEntry) pairs in display order.
        app_settings: Supplies the console symbols.
        prompt: Line reader, click.prompt unless a test substitutes one.
        current_logger: Logger for diagnostics.

    Returns:
        The chosen keys, distinct and in display order. Never empty.

    Raises:
        SelectorCancelledError: The user interrupted the prompt, input
            ended before a confirmation, or there is nothing to choose from.
    """
    logger_to_use = current_logger if current_logger else module_logger
    if not entries:
        raise SelectorCancelledError("No components available to select.")

    selected: Set[int] = set()

    echo_status(SELECT_TITLE, "title", logger_to_use, app_settings)

    while True:
        _render_choices(entries, selected)
        try:
            answer = prompt(
                click.style(f"? {SELECT_MESSAGE}", fg="magenta"),
                default="",
                show_default=False,
            )
        except (click.Abort, KeyboardInterrupt, EOFError) as e:
            logger_to_use.debug("Selection aborted by user")
            raise SelectorCancelledError(original_error=e) from e

        if not answer.strip():
            if selected:
                break
            echo_status(EMPTY_SELECTION_MESSAGE, "warning", logger_to_use, app_settings)
            continue

        try:
            toggles = parse_toggles(answer, len(entries))
        except ValueError as e:
            echo_status(str(e), "warning", logger_to_use, app_settings)
            continue

        for index in toggles:
            selected ^= {index}

    chosen = [entries[index][0] for index in sorted(selected)]
    logger_to_use.debug(f"Selected components: {', '.join(chosen)}")
    return chosen
