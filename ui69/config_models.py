# ui69/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for the component registry and per-invocation settings.

This module defines the structured records that flow between the registry,
the installer and the CLI, including defaults, type annotations, and
descriptions. It utilizes Pydantic for data validation.
"""

from pathlib import Path, PurePosixPath
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ui69.config import REGISTRY_FILE, SYMBOLS, TEMPLATE_ROOT

SYMBOLS_DEFAULT: Dict[str, str] = dict(SYMBOLS)


class ComponentFile(BaseModel):
    """A single copy instruction: bundled source to project-relative destination."""

    model_config = ConfigDict(frozen=True)

    src: Path = Field(description="Absolute path of the bundled source file.")
    dest: str = Field(
        description="Destination path relative to the current working directory."
    )

    @field_validator("dest")
    @classmethod
    def _dest_must_be_relative(cls, value: str) -> str:
        dest_path = PurePosixPath(value)
        if not value or dest_path.is_absolute():
            raise ValueError(f"destination must be a relative path: {value!r}")
        if ".." in dest_path.parts:
            raise ValueError(
                f"destination must stay inside the working directory: {value!r}"
            )
        return value


class ComponentEntry(BaseModel):
    """Metadata for one installable component."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Unique registry key, e.g. 'button'.")
    name: str = Field(description="Display name.")
    description: str = Field(default="", description="One-line description.")
    dependencies: Tuple[str, ...] = Field(
        default=(),
        description="Package names the component needs; reported, never installed.",
    )
    files: Tuple[ComponentFile, ...] = Field(
        description="Ordered copy instructions."
    )

    @field_validator("files")
    @classmethod
    def _files_not_empty(
        cls, value: Tuple[ComponentFile, ...]
    ) -> Tuple[ComponentFile, ...]:
        if not value:
            raise ValueError("a component must list at least one file")
        return value


class CopyResult(BaseModel):
    """Outcome of copying one file. Only successful copies produce a result."""

    model_config = ConfigDict(frozen=True)

    src: Path
    dest: Path
    bytes_copied: int
    created_directory: bool = False


class AppSettings(BaseModel):
    """Settings for a single CLI invocation."""

    model_config = ConfigDict(extra="ignore")

    verbose: bool = Field(
        default=False, description="Emit DEBUG diagnostics on stderr."
    )
    template_root: Path = Field(
        default=TEMPLATE_ROOT,
        description="Directory holding the bundled component sources.",
    )
    registry_file: Path = Field(
        default=REGISTRY_FILE,
        description="YAML table describing the available components.",
    )
    symbols: Dict[str, str] = Field(
        default_factory=lambda: dict(SYMBOLS_DEFAULT)
    )
