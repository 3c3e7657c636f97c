# ui69/installer/component_installer.py
# -*- coding: utf-8 -*-
"""
Copies a component's template files into the current project.
"""

import logging
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Sequence

from ui69.common.console import echo_status
from ui69.common.file_utils import copy_file, ensure_directory
from ui69.config import (
    EXPO_INSTALL_COMMAND,
    EXPO_PACKAGE_PREFIX,
    NPM_INSTALL_COMMAND,
)
from ui69.config_models import AppSettings, ComponentEntry, CopyResult
from ui69.exceptions import MissingSourceFileError


def suggest_install_command(dependencies: Sequence[str]) -> str:
    """
    Builds the package-manager command the user should run.

    Expo packages have to be installed through the Expo CLI so it can pick
    versions matching the project's SDK.
    """
    uses_expo = any(dep.startswith(EXPO_PACKAGE_PREFIX) for dep in dependencies)
    command = EXPO_INSTALL_COMMAND if uses_expo else NPM_INSTALL_COMMAND
    return f"{command} {' '.join(dependencies)}"


class ComponentInstaller:
    """
    Installs registry entries into a working directory.

    Destinations are resolved against `cwd`, which defaults to the process's
    current working directory at install time. Existing files are replaced
    without prompting.
    """

    def __init__(
        self,
        app_settings: Optional[AppSettings] = None,
        cwd: Optional[Path] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.app_settings = app_settings or AppSettings()
        self.cwd = cwd
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def _echo(self, message: str, level: str = "plain") -> None:
        echo_status(message, level, self.logger, self.app_settings)

    def _target_root(self) -> Path:
        return Path(self.cwd) if self.cwd is not None else Path.cwd()

    def install(self, entry: ComponentEntry) -> List[CopyResult]:
        """
        Copy every file of `entry`, then report its dependencies.

        Returns:
            One CopyResult per file, in the entry's file order.

        Raises:
            MissingSourceFileError: A template file is absent. Files copied
                before it are left in place.
            DirectoryCreationError: A destination directory cannot be created.
            FileCopyError: A copy fails.
        """
        self._echo(f"Installing {entry.name} component", "title")
        target_root = self._target_root()
        results: List[CopyResult] = []

        for component_file in entry.files:
            src = component_file.src
            dest = target_root / component_file.dest
            dest_dir_label = str(PurePosixPath(component_file.dest).parent)

            if not src.is_file():
                self.logger.debug(f"Source file not found: {src}")
                raise MissingSourceFileError(src)

            created = ensure_directory(dest.parent, self.logger)
            self._echo(f"Created directory for {dest_dir_label}", "success")

            size = copy_file(src, dest, self.logger)
            self._echo(f"Created {component_file.dest}", "success")

            results.append(
                CopyResult(
                    src=src,
                    dest=dest,
                    bytes_copied=size,
                    created_directory=created,
                )
            )

        if entry.dependencies:
            self._report_dependencies(entry)

        self._echo(f"{entry.name} installed successfully!", "success")
        self.logger.info(
            f"Installed '{entry.key}' ({len(results)} file(s)) into {target_root}"
        )
        return results

    def _report_dependencies(self, entry: ComponentEntry) -> None:
        self._echo(
            f"{entry.name} requires the following dependencies:", "info"
        )
        for dependency in entry.dependencies:
            self._echo(f"  {dependency}", "code")

        self._echo("\nInstall them with:")
        self._echo(f"  {suggest_install_command(entry.dependencies)}", "code")

    def install_many(
        self, entries: Iterable[ComponentEntry]
    ) -> List[CopyResult]:
        """
        Install entries in order; the first failure stops the rest.

        `entries` may be a lazy iterable, so a lookup that fails part way
        through leaves the components before it installed.
        """
        results: List[CopyResult] = []
        for entry in entries:
            results.extend(self.install(entry))
        return results
