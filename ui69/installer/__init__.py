"""
Component installation framework.

This package provides the component registry, the file installer and the
interactive selector used by the ui69 CLI.
"""

from ui69.installer.component_installer import ComponentInstaller
from ui69.installer.registry import ComponentRegistry
from ui69.installer.selector import select_components

__all__ = ["ComponentInstaller", "ComponentRegistry", "select_components"]
