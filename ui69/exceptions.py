# ui69/exceptions.py
# -*- coding: utf-8 -*-
"""
Errors raised by the registry, installer and selector.

Every error is fatal for the current invocation. Core modules raise them and
the CLI layer reports them and exits with status 1.
"""

from pathlib import Path
from typing import List, Optional, Sequence


class Ui69Error(Exception):
    """Base class for all ui69 failures."""

    def __init__(
        self,
        message: str,
        details: Optional[Sequence[str]] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.details: List[str] = list(details or [])
        self.original_error = original_error
        super().__init__(message)


class MissingRegistryDirectoryError(Ui69Error):
    """The bundled template directory is absent."""

    def __init__(self, template_root: Path):
        self.template_root = template_root
        super().__init__(
            f"Components directory not found: {template_root}",
            details=[
                "Make sure the package is installed correctly and the "
                "components directory exists."
            ],
        )


class RegistryFormatError(Ui69Error):
    """The bundled registry table could not be read or validated."""


class UnknownComponentError(Ui69Error):
    """A component key that the registry does not know."""

    def __init__(self, key: str, available: Sequence[str]):
        self.key = key
        self.available = list(available)
        super().__init__(
            f"Component '{key}' not found.",
            details=["Available components:"]
            + [f"  - {name}" for name in self.available],
        )


class MissingSourceFileError(Ui69Error):
    """A registry entry points at a template file that does not exist."""

    def __init__(self, src: Path):
        self.src = src
        super().__init__(
            f"Source file not found: {src}",
            details=[f"Expected at: {src}"],
        )


class DirectoryCreationError(Ui69Error):
    """The destination directory could not be created."""


class FileCopyError(Ui69Error):
    """Copying a template to its destination failed."""


class SelectorCancelledError(Ui69Error):
    """The user aborted the interactive selection."""

    def __init__(
        self,
        message: str = "Component selection cancelled.",
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, original_error=original_error)


class VersionMetadataError(Ui69Error):
    """The installed distribution's version could not be read."""
