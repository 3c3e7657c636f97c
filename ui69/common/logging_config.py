# ui69/common/logging_config.py
# -*- coding: utf-8 -*-
"""
Logging setup for the ui69 CLI.

Diagnostics go to stderr through the root logger so that the user-facing
console output on stdout stays clean. The level is WARNING unless the user
passes --verbose.
"""

import logging
import sys
from typing import Dict, Optional, TextIO

from ui69.config_models import SYMBOLS_DEFAULT

module_logger = logging.getLogger(__name__)

SIMPLE_LOG_FORMAT = "%(levelname)s - %(symbol)s %(name)s - %(message)s"
DETAILED_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(symbol)s %(name)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"


class SymbolFormatter(logging.Formatter):
    """
    A custom formatter that adds symbols to log messages based on the log level.
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        symbols: Optional[Dict[str, str]] = None,
    ):
        super().__init__(fmt, datefmt)
        self.symbols = symbols or SYMBOLS_DEFAULT

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.CRITICAL:
            record.symbol = self.symbols.get("critical", "🔥")
        elif record.levelno >= logging.ERROR:
            record.symbol = self.symbols.get("error", "✖")
        elif record.levelno >= logging.WARNING:
            record.symbol = self.symbols.get("warning", "⚠")
        elif record.levelno >= logging.INFO:
            record.symbol = self.symbols.get("info", "ℹ")
        else:
            record.symbol = self.symbols.get("debug", "🐛")

        return super().format(record)


def setup_logging(
    verbose: bool = False,
    stream: Optional[TextIO] = None,
    symbols: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configures the root logger for one CLI invocation.

    Existing root handlers are replaced, so calling this more than once in a
    process (as the test suite does) never duplicates output.

    Parameters:
        verbose (bool): Log at DEBUG with a detailed format when True,
            otherwise only warnings and errors are shown.
        stream (Optional[TextIO]): Destination stream. Defaults to sys.stderr
            as it is at call time.
        symbols (Optional[Dict[str, str]]): Symbol table for the formatter.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    fmt = DETAILED_LOG_FORMAT if verbose else SIMPLE_LOG_FORMAT

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        SymbolFormatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S", symbols=symbols)
    )
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    root_logger.addHandler(handler)

    module_logger.debug(
        f"Logging configured. Level: {logging.getLevelName(log_level)}. Format: '{fmt}'"
    )
