# -*- coding: utf-8 -*-
import importlib.metadata

import pytest
from click.testing import CliRunner

from ui69.cli import cli
from ui69.config import HELP_DESCRIPTION, TEMPLATE_ROOT
from ui69.config_models import AppSettings
from ui69.installer.registry import ComponentRegistry


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, args, app_settings=None, **kwargs):
    obj = {"APP_SETTINGS": app_settings} if app_settings else None
    return runner.invoke(cli, args, obj=obj, **kwargs)


def test_cli_no_args(runner):
    """Test the CLI with no arguments."""
    result = invoke(runner, [])
    assert result.exit_code == 0
    assert "Usage: ui69" in result.output
    assert HELP_DESCRIPTION in result.output
    assert "add" in result.output
    assert "list" in result.output
    assert "ui69 add radio" in result.output


@pytest.mark.parametrize("args", [["--help"], ["-h"], ["frobnicate"], ["--bogus"]])
def test_help_and_unknown_input_show_usage(runner, args):
    result = invoke(runner, args)
    assert result.exit_code == 0
    assert "Usage: ui69" in result.output
    assert "Examples" in result.output


@pytest.mark.parametrize("flag", ["--version", "-v"])
def test_version(runner, mocker, flag):
    mocker.patch("ui69.cli.importlib.metadata.version", return_value="9.8.7")
    result = invoke(runner, [flag])
    assert result.exit_code == 0
    assert result.output.strip() == "9.8.7"


def test_version_unreadable(runner, mocker):
    mocker.patch(
        "ui69.cli.importlib.metadata.version",
        side_effect=importlib.metadata.PackageNotFoundError("ui69"),
    )
    result = invoke(runner, ["--version"])
    assert result.exit_code == 1
    assert "Unable to read package metadata" in result.output


def test_list_shows_every_key_once_in_order(runner):
    result = invoke(runner, ["list"])
    assert result.exit_code == 0

    expected = ComponentRegistry().keys()
    key_lines = [line for line in result.output.splitlines() if line in expected]
    assert key_lines == expected

    assert "Available Components" in result.output
    assert (
        "  Dependencies: react-native-reanimated, react-native-gesture-handler, "
        "react-native-safe-area-context" in result.output
    )
    assert "ui69 add <component>" in result.output


@pytest.mark.parametrize(
    "args", [["list", "extra"], ["list", "-v"], ["list", "--bogus", "more"]]
)
def test_list_ignores_extra_input(runner, args):
    result = invoke(runner, args)
    assert result.exit_code == 0, result.output
    assert "Available Components" in result.output


def test_list_ignores_missing_template_files(runner, app_settings, template_root):
    """Only the template root itself has to exist for `list` to succeed."""
    (template_root / "ui" / "beta.tsx").unlink()

    result = invoke(runner, ["list"], app_settings)

    assert result.exit_code == 0, result.output
    key_lines = [
        line for line in result.output.splitlines() if line in ("alpha", "beta")
    ]
    assert key_lines == ["alpha", "beta"]


def test_list_missing_template_root(runner, tmp_path):
    settings = AppSettings(template_root=tmp_path / "gone")
    result = invoke(runner, ["list"], settings)
    assert result.exit_code == 1
    assert "Components directory not found" in result.output


def test_add_badge_in_empty_directory(runner, project_dir):
    """`add badge` copies the bundled source and prints no dependency hint."""
    result = invoke(runner, ["add", "badge"])
    assert result.exit_code == 0, result.output

    dest = project_dir / "components" / "ui" / "badge.tsx"
    assert dest.read_bytes() == (TEMPLATE_ROOT / "ui" / "badge.tsx").read_bytes()
    assert "Created components/ui/badge.tsx" in result.output
    assert "Badge installed successfully!" in result.output
    assert "Install them with" not in result.output
    assert sorted(p.name for p in dest.parent.iterdir()) == ["badge.tsx"]


def test_add_toast_prints_dependencies(runner, project_dir):
    result = invoke(runner, ["add", "toast"])
    assert result.exit_code == 0, result.output

    deps = [
        "react-native-reanimated",
        "react-native-gesture-handler",
        "react-native-safe-area-context",
    ]
    for dep in deps:
        assert dep in result.output
    assert f"npm install {' '.join(deps)}" in result.output


def test_add_skeleton_suggests_expo_install(runner, project_dir):
    result = invoke(runner, ["add", "skeleton"])
    assert result.exit_code == 0, result.output
    assert (
        "npx expo install react-native-reanimated expo-linear-gradient"
        in result.output
    )


def test_add_unknown_component(runner, project_dir):
    result = invoke(runner, ["add", "nope"])
    assert result.exit_code == 1
    assert "Component 'nope' not found." in result.output
    assert "Available components:" in result.output
    for key in ComponentRegistry().keys():
        assert f"  - {key}\n" in result.output
    assert not (project_dir / "components").exists()


@pytest.mark.parametrize("option", ["--bogus", "-x"])
def test_add_unknown_option_is_treated_as_a_key(runner, project_dir, option):
    result = invoke(runner, ["add", option])
    assert result.exit_code == 1
    assert f"Component '{option}' not found." in result.output
    assert not (project_dir / "components").exists()


def test_add_several_components(runner, project_dir):
    result = invoke(runner, ["add", "card", "input"])
    assert result.exit_code == 0, result.output
    assert (project_dir / "components" / "ui" / "card.tsx").is_file()
    assert (project_dir / "components" / "ui" / "input.tsx").is_file()


def test_add_stops_at_unknown_key(runner, project_dir):
    result = invoke(runner, ["add", "card", "nope", "input"])
    assert result.exit_code == 1
    assert (project_dir / "components" / "ui" / "card.tsx").is_file()
    assert not (project_dir / "components" / "ui" / "input.tsx").exists()


def test_add_missing_source(runner, project_dir, app_settings, template_root):
    (template_root / "ui" / "beta.tsx").unlink()

    result = invoke(runner, ["add", "beta"], app_settings)

    assert result.exit_code == 1
    assert "Source file not found" in result.output
    assert "beta.tsx" in result.output


def test_interactive_add_matches_direct_add(runner, tmp_path, monkeypatch):
    """Selecting one key interactively leaves the same files as `add <key>`."""
    interactive_dir = tmp_path / "interactive"
    direct_dir = tmp_path / "direct"
    interactive_dir.mkdir()
    direct_dir.mkdir()
    badge_index = ComponentRegistry().keys().index("badge") + 1

    monkeypatch.chdir(interactive_dir)
    result = invoke(runner, ["add"], input=f"{badge_index}\n\n")
    assert result.exit_code == 0, result.output
    assert "Which components would you like to add?" in result.output

    monkeypatch.chdir(direct_dir)
    result = invoke(runner, ["add", "badge"])
    assert result.exit_code == 0, result.output

    def snapshot(root):
        return {
            p.relative_to(root).as_posix(): p.read_bytes()
            for p in root.rglob("*")
            if p.is_file()
        }

    assert snapshot(interactive_dir) == snapshot(direct_dir)
    assert list(snapshot(direct_dir)) == ["components/ui/badge.tsx"]


def test_interactive_add_requires_a_selection(runner, project_dir):
    result = invoke(runner, ["add"], input="\n1\n\n")
    assert result.exit_code == 0, result.output
    assert "You must choose at least one component." in result.output
    assert (project_dir / "components" / "ui" / "button.tsx").is_file()


def test_interactive_add_cancelled(runner, project_dir):
    # Input ends before any confirmation, as with Ctrl-D.
    result = invoke(runner, ["add"], input="")
    assert result.exit_code == 1
    assert "Component selection cancelled." in result.output
    assert not (project_dir / "components").exists()


def test_verbose_logs_to_stderr(runner, project_dir):
    result = invoke(runner, ["--verbose", "add", "badge"])
    assert result.exit_code == 0, result.output
    assert "Loaded 15 components" in result.output


def test_interactive_add_stops_at_missing_source(
    runner, project_dir, app_settings, template_root
):
    """Chosen components install in display order; a failure skips the rest."""
    (template_root / "ui" / "alpha.tsx").unlink()

    result = invoke(runner, ["add"], app_settings, input="2 1\n\n")

    assert result.exit_code == 1
    assert "Source file not found" in result.output
    assert not (project_dir / "components" / "ui" / "beta.tsx").exists()


def test_interactive_add_keeps_earlier_installs(
    runner, project_dir, app_settings, template_root
):
    (template_root / "ui" / "beta.tsx").unlink()

    result = invoke(runner, ["add"], app_settings, input="1 2\n\n")

    assert result.exit_code == 1
    assert "Alpha installed successfully!" in result.output
    assert (project_dir / "components" / "ui" / "alpha.tsx").is_file()
    assert not (project_dir / "components" / "ui" / "beta.tsx").exists()
