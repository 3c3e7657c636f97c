# tests/conftest.py
import logging
from pathlib import Path

import pytest

from ui69.common.logging_config import SymbolFormatter
from ui69.config_models import AppSettings, ComponentEntry, ComponentFile


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty consumer project used as the working directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A small template tree with two component sources."""
    root = tmp_path / "templates"
    (root / "ui").mkdir(parents=True)
    (root / "ui" / "alpha.tsx").write_text("export const Alpha = 1;\n", encoding="utf-8")
    (root / "ui" / "beta.tsx").write_text("export const Beta = 2;\n", encoding="utf-8")
    return root


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    path = tmp_path / "components.yaml"
    path.write_text(
        """\
components:
  - key: alpha
    name: Alpha
    description: First test component
    dependencies: []
    files:
      - src: ui/alpha.tsx
        dest: components/ui/alpha.tsx
  - key: beta
    name: Beta
    description: Second test component
    dependencies:
      - react-native-svg
      - react-native-reanimated
    files:
      - src: ui/beta.tsx
        dest: components/ui/beta.tsx
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def app_settings(template_root: Path, registry_file: Path) -> AppSettings:
    return AppSettings(template_root=template_root, registry_file=registry_file)


@pytest.fixture
def make_entry(template_root: Path):
    """Builds a ComponentEntry pointing at files under the test template root."""

    def _make(key="alpha", name="Alpha", dependencies=(), files=None):
        if files is None:
            files = [(f"ui/{key}.tsx", f"components/ui/{key}.tsx")]
        return ComponentEntry(
            key=key,
            name=name,
            description=f"{name} component",
            dependencies=tuple(dependencies),
            files=tuple(
                ComponentFile(src=template_root / src, dest=dest)
                for src, dest in files
            ),
        )

    return _make


@pytest.fixture(autouse=True)
def reset_root_logger():
    """The CLI installs its own root handler; drop it after each test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, SymbolFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
