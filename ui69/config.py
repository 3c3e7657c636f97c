# ui69/config.py
# -*- coding: utf-8 -*-
"""
Centralized static constants and definitions for the ui69 CLI.

This module defines truly static values for the tool, such as the location
of the bundled component templates, the registry table, logging symbols and
the splash banner shown by interactive commands.

Per-invocation settings (verbosity, overridden template roots in tests) are
handled by 'ui69/config_models.py'.
"""

from pathlib import Path

CLI_NAME: str = "ui69"
DISTRIBUTION_NAME: str = "ui69"

PACKAGE_ROOT: Path = Path(__file__).resolve().parent

# Bundled component sources. Registry entries reference files relative to it.
TEMPLATE_ROOT: Path = PACKAGE_ROOT / "templates"
REGISTRY_FILE: Path = PACKAGE_ROOT / "components.yaml"

SYMBOLS: dict[str, str] = {
    "success": "✓",
    "error": "✖",
    "warning": "⚠",
    "info": "ℹ",
    "prompt": "?",
    "critical": "🔥",
    "debug": "🐛",
}

# Dependencies with this prefix need the Expo installer to pick matching versions.
EXPO_PACKAGE_PREFIX: str = "expo-"
NPM_INSTALL_COMMAND: str = "npm install"
EXPO_INSTALL_COMMAND: str = "npx expo install"

SPLASH_WIDTH: int = 47
SPLASH_LINES: list[str] = [
    CLI_NAME,
    "UI components for React Native",
]

HELP_DESCRIPTION: str = (
    "A collection of unstyled, accessible UI components for React Native"
)

HELP_EXAMPLES: list[str] = [
    f"{CLI_NAME} add radio",
    f"{CLI_NAME} add switch",
    f"{CLI_NAME} add checkbox",
    f"{CLI_NAME} add     # Interactive component selection",
    f"{CLI_NAME} list",
]
