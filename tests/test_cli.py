"""
Tests for the wtask command line.
"""
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from wtask.cli import cli, main


CONFIG = """\
[hi]
name = "Say Hello"
description = "Print a greeting"
run = "echo hello"

[gg]
name = "Git Status"
run = "git status --short"
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    """A config file with two tasks."""
    path = tmp_path / "wtask.toml"
    path.write_text(CONFIG)
    return path


class TestHelp:
    """Tests for usage output."""

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, runner, flag):
        """Test both help flags print usage and exit 0."""
        result = runner.invoke(cli, [flag])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "--interactive" in result.output


class TestRunTask:
    """Tests for running a task by alias."""

    def test_runs_alias(self, runner, config_file):
        """Test the alias's command output reaches stdout."""
        result = runner.invoke(cli, ["--config", str(config_file), "--stream", "pipe", "hi"])
        assert result.exit_code == 0
        assert result.stdout == "hello\n"

    def test_child_exit_code_passes_through(self, runner, tmp_path):
        """Test the child's exit code becomes ours."""
        script = tmp_path / "fail.sh"
        script.write_text("exit 7\n")
        config = tmp_path / "wtask.toml"
        config.write_text(f'[bad]\nrun = "sh {script}"\n')

        result = runner.invoke(cli, ["-c", str(config), "bad"])

        assert result.exit_code == 7

    def test_unknown_alias(self, runner, config_file):
        """Test an unknown alias exits 1 with a diagnostic on stderr."""
        result = runner.invoke(cli, ["-c", str(config_file), "nope"])
        assert result.exit_code == 1
        assert "Task 'nope' not found" in result.stderr
        assert "nope" not in result.stdout


class TestConfigErrors:
    """Tests for config-related failures."""

    def test_explicit_config_missing(self, runner, tmp_path):
        """Test a missing --config file exits 1 naming the path."""
        missing = tmp_path / "missing.toml"
        result = runner.invoke(cli, ["-c", str(missing), "hi"])
        assert result.exit_code == 1
        assert str(missing) in result.stderr

    def test_no_config_lists_both_locations(self, runner, tmp_path):
        """Test neither default location existing is fatal and lists both."""
        candidates = [("local", tmp_path / "a.toml"), ("global", tmp_path / ".a.toml")]
        with patch("wtask.cli.context.get_config_candidates", return_value=candidates):
            result = runner.invoke(cli, ["hi"])

        assert result.exit_code == 1
        assert "No configuration file found." in result.stderr
        assert "Local: " in result.stderr
        assert str(tmp_path / "a.toml") in result.stderr
        assert str(tmp_path / ".a.toml") in result.stderr

    def test_empty_config(self, runner, tmp_path):
        """Test a config with no sections exits 1."""
        config = tmp_path / "wtask.toml"
        config.write_text("# no tasks yet\n")
        result = runner.invoke(cli, ["-c", str(config)])
        assert result.exit_code == 1
        assert "No tasks found in configuration" in result.stderr


class TestInteractive:
    """Tests for interactive selection."""

    def test_no_alias_opens_selector(self, runner, config_file):
        """Test running without an alias asks for one."""
        with patch("wtask.cli.select_alias", return_value="hi") as select:
            result = runner.invoke(cli, ["-c", str(config_file), "--stream", "pipe"])

        select.assert_called_once()
        assert list(select.call_args.args[0]) == ["hi", "gg"]
        assert result.exit_code == 0
        assert result.stdout == "hello\n"

    def test_interactive_flag_overrides_alias(self, runner, config_file):
        """Test -i selects interactively even when an alias is given."""
        with patch("wtask.cli.select_alias", return_value="hi") as select:
            result = runner.invoke(cli, ["-c", str(config_file), "-i", "--stream", "pipe", "gg"])

        select.assert_called_once()
        assert result.stdout == "hello\n"

    def test_cancel_exits_zero(self, runner, config_file):
        """Test cancelling the selector exits 0 without a traceback."""
        with patch("wtask.cli.select_alias", return_value=None):
            result = runner.invoke(cli, ["-c", str(config_file), "--interactive"])

        assert result.exit_code == 0
        assert "Traceback" not in result.output
        assert result.stderr == ""


class TestListAndInit:
    """Tests for --list and --init."""

    def test_list(self, runner, config_file):
        """Test --list prints aliases in file order with their names."""
        result = runner.invoke(cli, ["-c", str(config_file), "--list"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0].startswith("hi")
        assert "Say Hello" in lines[0]
        assert "Print a greeting" in lines[0]
        assert lines[1].startswith("gg")

    def test_init_creates_then_keeps(self, runner, tmp_path):
        """Test --init writes a starter file once and never overwrites it."""
        target = tmp_path / "conf" / "wtask.toml"

        first = runner.invoke(cli, ["--init", "-c", str(target)])
        assert first.exit_code == 0
        assert "Created config file" in first.stdout
        assert "[py]" in target.read_text()

        target.write_text('[mine]\nrun = "true"\n')
        second = runner.invoke(cli, ["--init", "-c", str(target)])
        assert "already exists" in second.stdout
        assert target.read_text() == '[mine]\nrun = "true"\n'

    def test_init_defaults_to_home(self, runner, tmp_path, monkeypatch):
        """Test --init without --config writes ~/.wtask.toml."""
        monkeypatch.setenv("HOME", str(tmp_path))
        result = runner.invoke(cli, ["--init"])
        assert result.exit_code == 0
        assert (tmp_path / ".wtask.toml").exists()


class TestMain:
    """Tests for the console script entry point."""

    def test_unexpected_error_exits_one(self, capsys):
        """Test an unexpected exception prints a message and exits 1."""
        with patch("wtask.cli.install_shutdown_hook"), \
                patch("wtask.cli.cli", side_effect=RuntimeError("boom")):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        assert "Error: boom" in capsys.readouterr().err
