# ui69/installer/registry.py
# -*- coding: utf-8 -*-
"""
Registry of installable components.

The registry is a fixed table shipped with the package (components.yaml).
It is read and validated on every query and never cached or mutated, so a
single process always sees exactly what is bundled on disk.
"""

import logging
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ui69.config import REGISTRY_FILE, TEMPLATE_ROOT
from ui69.config_models import ComponentEntry
from ui69.exceptions import (
    MissingRegistryDirectoryError,
    RegistryFormatError,
    UnknownComponentError,
)

module_logger = logging.getLogger(__name__)


class ComponentRegistry:
    """
    Read-only view over the bundled component table.

    Source paths in the table are relative to `template_root`; the registry
    resolves them to absolute paths when it builds each ComponentEntry.
    """

    def __init__(
        self,
        template_root: Path = TEMPLATE_ROOT,
        registry_file: Path = REGISTRY_FILE,
        logger: Optional[logging.Logger] = None,
    ):
        self.template_root = Path(template_root)
        self.registry_file = Path(registry_file)
        self.logger = logger or module_logger

    def _ensure_template_root(self) -> None:
        if not self.template_root.is_dir():
            self.logger.debug(
                f"Components directory not found: {self.template_root}"
            )
            raise MissingRegistryDirectoryError(self.template_root)

    def _read_table(self) -> List[Dict[str, Any]]:
        try:
            with open(self.registry_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise RegistryFormatError(
                f"Unable to read component registry {self.registry_file}",
                details=[str(e)],
                original_error=e,
            ) from e
        except yaml.YAMLError as e:
            raise RegistryFormatError(
                f"Error parsing component registry {self.registry_file}",
                details=[str(e)],
                original_error=e,
            ) from e

        components = data.get("components") if isinstance(data, dict) else None
        if not isinstance(components, list):
            raise RegistryFormatError(
                f"Component registry {self.registry_file} has no 'components' list"
            )
        return components

    def _resolve_source(self, src: str) -> Path:
        relative = PurePosixPath(src)
        if relative.is_absolute() or ".." in relative.parts:
            raise ValueError(
                f"Source path must stay inside the template root: {src}"
            )
        return self.template_root / relative

    def _build_entry(self, raw: Dict[str, Any]) -> ComponentEntry:
        files = [
            {"src": self._resolve_source(item["src"]), "dest": item["dest"]}
            for item in raw.get("files") or []
        ]
        return ComponentEntry(
            key=raw["key"],
            name=raw["name"],
            description=raw.get("description", ""),
            dependencies=tuple(raw.get("dependencies") or ()),
            files=tuple(files),
        )

    def get_all_components(self) -> List[Tuple[str, ComponentEntry]]:
        """
        Get every component in table definition order.

        Returns:
            A list of (key, ComponentEntry) pairs.

        Raises:
            MissingRegistryDirectoryError: If the template root is absent.
            RegistryFormatError: If the table is unreadable, malformed or
                defines a key twice.
        """
        self._ensure_template_root()

        entries: List[Tuple[str, ComponentEntry]] = []
        seen = set()
        for raw in self._read_table():
            try:
                entry = self._build_entry(raw)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise RegistryFormatError(
                    f"Invalid component definition in {self.registry_file}",
                    details=[str(e)],
                    original_error=e,
                ) from e
            if entry.key in seen:
                raise RegistryFormatError(
                    f"Component with name '{entry.key}' defined more than once"
                )
            seen.add(entry.key)
            entries.append((entry.key, entry))

        self.logger.debug(
            f"Loaded {len(entries)} components from {self.registry_file}"
        )
        return entries

    def keys(self) -> List[str]:
        """Component keys in definition order."""
        return [key for key, _ in self.get_all_components()]

    def get_component(self, key: str) -> ComponentEntry:
        """
        Get a component by key.

        Raises:
            UnknownComponentError: If no component has the given key. The
                error carries every valid key.
        """
        components = self.get_all_components()
        for entry_key, entry in components:
            if entry_key == key:
                return entry

        raise UnknownComponentError(key, [k for k, _ in components])
