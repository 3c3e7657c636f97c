# ui69/common/console.py
# -*- coding: utf-8 -*-
"""
User-facing console output.

Every line the user sees goes through `echo_status`, which styles it with
click and mirrors it to the caller's logger at DEBUG so --verbose runs show
the full sequence of events in one stream.
"""

import logging
from typing import Dict, Optional

import click

from ui69.config import SPLASH_LINES, SPLASH_WIDTH
from ui69.config_models import SYMBOLS_DEFAULT, AppSettings

module_logger = logging.getLogger(__name__)

# level -> (symbol key, click style kwargs)
STATUS_STYLES: Dict[str, tuple] = {
    "success": ("success", {"fg": "green"}),
    "error": ("error", {"fg": "red"}),
    "info": ("info", {"fg": "blue"}),
    "warning": ("warning", {"fg": "yellow"}),
    "prompt": ("prompt", {"fg": "magenta"}),
    "code": (None, {"fg": "cyan"}),
    "muted": (None, {"fg": "bright_black"}),
    "title": (None, {"bold": True}),
    "plain": (None, {}),
}

ERROR_LEVELS = {"error"}


def echo_status(
    message: str,
    level: str = "plain",
    current_logger: Optional[logging.Logger] = None,
    app_settings: Optional[AppSettings] = None,
) -> None:
    """
    Prints a styled status line and records it at DEBUG.

    Args:
        message (str): The text to show.
        level (str): One of the keys of STATUS_STYLES. Unknown levels print
            unstyled. "error" lines go to stderr, everything else to stdout.
        current_logger (Optional[logging.Logger]): Logger used for the DEBUG
            mirror. Defaults to this module's logger.
        app_settings (Optional[AppSettings]): Supplies the symbol table.
    """
    effective_logger = current_logger if current_logger else module_logger
    symbols = (
        app_settings.symbols
        if app_settings and app_settings.symbols
        else SYMBOLS_DEFAULT
    )
    symbol_key, style = STATUS_STYLES.get(level, STATUS_STYLES["plain"])

    text = message
    if symbol_key and symbols.get(symbol_key):
        text = f"{symbols[symbol_key]} {message}"
    if level == "title":
        text = f"\n{message}\n"

    click.secho(text, err=level in ERROR_LEVELS, **style)
    effective_logger.debug(f"[{level}] {message.strip()}")


def render_splash() -> str:
    """Returns the boxed banner shown before interactive output."""
    inner = SPLASH_WIDTH
    border = click.style("╭" + "─" * inner + "╮", fg="magenta", bold=True)
    bottom = click.style("╰" + "─" * inner + "╯", fg="magenta", bold=True)
    side = click.style("│", fg="magenta", bold=True)

    lines = [border, f"{side}{' ' * inner}{side}"]
    for text in SPLASH_LINES:
        padded = f"   {text}".ljust(inner)
        lines.append(f"{side}{click.style(padded, bold=True)}{side}")
    lines.append(bottom)
    return "\n" + "\n".join(lines) + "\n"


def show_splash() -> None:
    click.echo(render_splash())
