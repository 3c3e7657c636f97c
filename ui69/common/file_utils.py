# ui69/common/file_utils.py
# -*- coding: utf-8 -*-
"""
File system utility functions used when copying component templates.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from ui69.exceptions import DirectoryCreationError, FileCopyError

module_logger = logging.getLogger(__name__)


def ensure_directory(
    dir_path: Path,
    current_logger: Optional[logging.Logger] = None,
) -> bool:
    """
    Creates a directory and any missing parents.

    Parameters:
        dir_path (Path): Directory that must exist afterwards.
        current_logger (Optional[logging.Logger]): Logger instance to use. If
            not provided, a module-level logger will be used.

    Returns:
        bool: True if the directory had to be created, False if it already
            existed.

    Raises:
        DirectoryCreationError: If the path exists as a file or the directory
            cannot be created (permissions, read-only filesystem, ...).
    """
    logger_to_use = current_logger if current_logger else module_logger

    if dir_path.is_dir():
        logger_to_use.debug(f"Directory already exists: {dir_path}")
        return False

    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger_to_use.debug(f"Error creating directory {dir_path}: {e}")
        raise DirectoryCreationError(
            f"Failed to create directory {dir_path}",
            details=[str(e)],
            original_error=e,
        ) from e

    logger_to_use.debug(f"Created directory: {dir_path}")
    return True


def copy_file(
    src: Path,
    dest: Path,
    current_logger: Optional[logging.Logger] = None,
) -> int:
    """
    Copies the bytes of `src` to `dest`, replacing any existing file.

    No backup is made and the write is not atomic; an interrupted copy can
    leave a partial destination file.

    Parameters:
        src (Path): Existing source file.
        dest (Path): Destination file. Its parent directory must exist.
        current_logger (Optional[logging.Logger]): Logger instance to use.

    Returns:
        int: Number of bytes written to `dest`.

    Raises:
        FileCopyError: If reading the source or writing the destination fails.
    """
    logger_to_use = current_logger if current_logger else module_logger

    if dest.exists():
        logger_to_use.debug(f"Overwriting existing file: {dest}")

    try:
        shutil.copyfile(src, dest)
        size = dest.stat().st_size
    except OSError as e:
        logger_to_use.debug(f"Error copying {src} to {dest}: {e}")
        raise FileCopyError(
            f"Failed to copy file to {dest}",
            details=[str(e)],
            original_error=e,
        ) from e

    logger_to_use.debug(f"Copied {src} -> {dest} ({size} bytes)")
    return size
