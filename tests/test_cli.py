"""Tests for the CLI entry point, command handler and editor hand-off."""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from project_starter import (
    CommandError,
    PreflightError,
    Settings,
    ValidationError,
    activation_env,
    open_project,
)
from project_starter.__main__ import main
from project_starter.cli import create_parser, handle_command
from project_starter.constants import (
    CLI_EXAMPLE_FILE,
    PROJECT_DIRS,
    REQUIREMENTS_FILE,
    VENV_LINK,
)


@pytest.fixture
def temp_dir(monkeypatch):
    """Temporary working directory, restored after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.chdir(tmpdir)
        yield Path(tmpdir)


@pytest.fixture
def settings(temp_dir):
    return Settings(
        python="python3",
        editor="code",
        profile=temp_dir / ".bashrc",
        tool_dir=temp_dir / "bin",
    )


def parse(*argv):
    return create_parser().parse_args(list(argv))


def snapshot(root):
    """Map of every path under root to its modification time."""
    return {
        str(p.relative_to(root)): p.lstat().st_mtime_ns for p in root.rglob("*")
    }


class TestParser:
    """Tests for create_parser function."""

    def test_positional_project(self):
        assert parse("demo").project == "demo"

    def test_project_required(self):
        with pytest.raises(SystemExit):
            parse()

    def test_rejects_unknown_flags(self):
        with pytest.raises(SystemExit):
            parse("demo", "--force")


class TestHandleCommand:
    """Tests for handle_command function."""

    def test_new_project_branch(self, temp_dir, settings):
        """Should build, then open, a project that does not exist."""
        with patch(
            "project_starter.cli.handlers.load_settings", return_value=settings
        ), patch("project_starter.cli.handlers.check_prerequisites"), patch(
            "project_starter.cli.handlers.create_project"
        ) as mock_create, patch(
            "project_starter.cli.handlers.validate_project"
        ) as mock_validate, patch(
            "project_starter.cli.handlers.open_project"
        ) as mock_open:
            assert handle_command(parse("demo")) == 0

        root = Path.cwd() / "demo"
        mock_create.assert_called_once_with(root, settings)
        mock_validate.assert_not_called()
        mock_open.assert_called_once_with(root, settings)

    def test_existing_project_branch(self, temp_dir, settings):
        """Should validate, then open, a project that exists."""
        (temp_dir / "demo").mkdir()

        with patch(
            "project_starter.cli.handlers.load_settings", return_value=settings
        ), patch("project_starter.cli.handlers.check_prerequisites"), patch(
            "project_starter.cli.handlers.create_project"
        ) as mock_create, patch(
            "project_starter.cli.handlers.validate_project"
        ) as mock_validate, patch(
            "project_starter.cli.handlers.open_project"
        ) as mock_open:
            assert handle_command(parse("demo")) == 0

        mock_validate.assert_called_once_with(Path.cwd() / "demo")
        mock_create.assert_not_called()
        mock_open.assert_called_once()

    def test_preflight_failure(self, temp_dir, settings, capsys):
        """Should exit 1 before touching the filesystem."""
        with patch(
            "project_starter.cli.handlers.load_settings", return_value=settings
        ), patch(
            "project_starter.cli.handlers.check_prerequisites",
            side_effect=PreflightError("Editor 'code' not found on PATH."),
        ), patch(
            "project_starter.cli.handlers.create_project"
        ) as mock_create:
            assert handle_command(parse("demo")) == 1

        mock_create.assert_not_called()
        assert "Error: Editor 'code' not found" in capsys.readouterr().err

    def test_validation_failure_skips_editor(self, temp_dir, settings, capsys):
        """Should exit 1 and not open the editor on a broken layout."""
        (temp_dir / "demo").mkdir()

        with patch(
            "project_starter.cli.handlers.load_settings", return_value=settings
        ), patch("project_starter.cli.handlers.check_prerequisites"), patch(
            "project_starter.cli.handlers.open_project"
        ) as mock_open:
            assert handle_command(parse("demo")) == 1

        mock_open.assert_not_called()
        assert "Missing directory 'demo-venv'" in capsys.readouterr().err

    def test_reopen_valid_project_twice(self, temp_dir, settings):
        """Should validate, open the editor and write nothing, twice."""
        root = temp_dir / "demo"
        root.mkdir()
        (root / "demo-venv").mkdir()
        for folder in PROJECT_DIRS:
            (root / folder).mkdir()
        (root / CLI_EXAMPLE_FILE).write_text("print('hi')\n")
        (root / REQUIREMENTS_FILE).write_text("flask==3.0.3\n")
        os.symlink("demo-venv", root / VENV_LINK)
        before = snapshot(root)

        with patch(
            "project_starter.cli.handlers.load_settings", return_value=settings
        ), patch("project_starter.cli.handlers.check_prerequisites"), patch(
            "project_starter.cli.handlers.create_project"
        ) as mock_create, patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0)
            # absolute path: open_project leaves the cwd inside the project
            assert handle_command(parse(str(root))) == 0
            assert handle_command(parse(str(root))) == 0

        mock_create.assert_not_called()
        assert mock_run.call_count == 2
        args, kwargs = mock_run.call_args
        assert args[0] == ["code", str(root)]
        assert kwargs["env"]["VIRTUAL_ENV"] == str(root / VENV_LINK)
        assert snapshot(root) == before

    def test_main_returns_exit_code(self, temp_dir, settings):
        """Should parse argv and return the handler's exit code."""
        with patch.object(sys, "argv", ["project-starter", "demo"]), patch(
            "project_starter.cli.handlers.load_settings", return_value=settings
        ), patch(
            "project_starter.cli.handlers.check_prerequisites",
            side_effect=ValidationError("nope"),
        ):
            assert main() == 1


class TestActivationEnv:
    """Tests for activation_env function."""

    def test_sets_virtual_env_and_path(self):
        root = Path("/work/demo")
        env = activation_env(root, {"PATH": "/usr/bin", "PYTHONHOME": "/x"})

        assert env["VIRTUAL_ENV"] == str(root / "venv")
        assert env["PATH"].startswith(str(root / "venv" / "bin") + os.pathsep)
        assert env["PATH"].endswith("/usr/bin")
        assert "PYTHONHOME" not in env

    def test_empty_path(self):
        env = activation_env(Path("/work/demo"), {})
        assert env["PATH"] == str(Path("/work/demo") / "venv" / "bin")

    def test_does_not_mutate_base(self):
        base = {"PATH": "/usr/bin"}
        activation_env(Path("/work/demo"), base)
        assert base == {"PATH": "/usr/bin"}


class TestOpenProject:
    """Tests for open_project function."""

    def test_launches_editor_in_project(self, temp_dir, settings):
        """Should chdir into the project and run the editor with the venv env."""
        root = temp_dir / "demo"
        root.mkdir()

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=0)
            open_project(root, settings)

        assert Path.cwd().resolve() == root.resolve()
        args, kwargs = mock_run.call_args
        assert args[0] == ["code", str(root)]
        assert kwargs["env"]["VIRTUAL_ENV"] == str(root / "venv")

    def test_editor_failure(self, temp_dir, settings):
        root = temp_dir / "demo"
        root.mkdir()

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = Mock(returncode=2)
            with pytest.raises(CommandError, match="exited with code 2"):
                open_project(root, settings)

    def test_editor_missing(self, temp_dir, settings):
        root = temp_dir / "demo"
        root.mkdir()

        with patch("subprocess.run", side_effect=FileNotFoundError("code")):
            with pytest.raises(CommandError, match="Failed to start editor"):
                open_project(root, settings)
