"""
Tests for CLI commands.

These tests verify the command-line interface functionality including:
- flush with a valid config, a dry run, and failing backup or config writes
- check and list output
- shell-info for a detected shell
- history and config management
"""

import pytest

from click.testing import CliRunner

from pathmaster.cli import cli
from pathmaster.config import get_configured_shell
from tests.helpers.shell_helpers import write_config


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def stale_path(monkeypatch, existing_dir, missing_dir):
    """Set PATH to one valid and one missing directory."""
    monkeypatch.setenv("PATH", f"{existing_dir}:{missing_dir}")
    return existing_dir, missing_dir


class TestFlushCommand:
    """Test flush command with various scenarios."""

    def test_flush_updates_profile(self, cli_runner, stale_path, fake_home):
        """Test removing an invalid entry and rewriting ~/.profile."""
        existing_dir, missing_dir = stale_path
        write_config(
            fake_home / ".profile",
            f"# my profile\nPATH=/usr/bin:/old/path\nexport PATH={missing_dir}\n",
        )

        result = cli_runner.invoke(cli, ["flush", "--shell", "generic"])

        assert result.exit_code == 0
        assert f"Removing invalid path: {missing_dir}" in result.output
        assert "Successfully removed 1 invalid path(s)" in result.output

        profile = (fake_home / ".profile").read_text()
        assert profile.startswith("# my profile\n")
        assert "/old/path" not in profile
        assert profile.count("export PATH=") == 1
        assert f'export PATH="{existing_dir}"' in profile

    def test_flush_uses_shell_env(self, cli_runner, stale_path, fake_home, monkeypatch):
        """Test that the handler follows $SHELL when --shell is absent."""
        monkeypatch.setenv("SHELL", "/bin/ksh")
        write_config(fake_home / ".profile", "typeset -x PATH=/old\n")

        result = cli_runner.invoke(cli, ["flush"])

        assert result.exit_code == 0
        assert "/old" not in (fake_home / ".profile").read_text()
        assert not (fake_home / ".kshrc").exists()

    def test_flush_nothing_to_do(self, cli_runner, monkeypatch, existing_dir, fake_home):
        """Test flush when every entry is valid."""
        monkeypatch.setenv("PATH", str(existing_dir))

        result = cli_runner.invoke(cli, ["flush", "--shell", "generic"])

        assert result.exit_code == 0
        assert "No invalid paths found in PATH." in result.output
        assert not (fake_home / ".profile").exists()

    def test_flush_dry_run(self, cli_runner, stale_path, fake_home):
        """Test that --dry-run reports without writing anything."""
        _, missing_dir = stale_path

        result = cli_runner.invoke(cli, ["flush", "--shell", "generic", "--dry-run"])

        assert result.exit_code == 0
        assert f"Would remove invalid path: {missing_dir}" in result.output
        assert not (fake_home / ".profile").exists()
        assert not (fake_home / ".pathmaster" / "backups").exists()

    def test_flush_config_failure_is_session_only(self, cli_runner, stale_path):
        """Test the warning when the config file cannot be written."""
        result = cli_runner.invoke(cli, ["flush", "--shell", "fish"])

        assert result.exit_code == 0
        assert "Error updating shell configuration" in result.output
        assert "current session only" in result.output

    def test_flush_backup_failure_aborts(self, cli_runner, stale_path, fake_home):
        """Test that a failing backup exits non-zero and changes nothing."""
        (fake_home / ".profile").mkdir()

        result = cli_runner.invoke(cli, ["flush", "--shell", "generic"])

        assert result.exit_code == 1
        assert "Error creating backup" in result.output
        assert (fake_home / ".profile").is_dir()


class TestInspectionCommands:
    """Test check, list and shell-info."""

    def test_check_reports_invalid(self, cli_runner, stale_path):
        _, missing_dir = stale_path

        result = cli_runner.invoke(cli, ["check"])

        assert result.exit_code == 0
        assert "Found 1 invalid path(s)" in result.output
        assert str(missing_dir) in result.output

    def test_check_all_valid(self, cli_runner, monkeypatch, existing_dir):
        monkeypatch.setenv("PATH", str(existing_dir))

        result = cli_runner.invoke(cli, ["check"])

        assert result.exit_code == 0
        assert "All 1 PATH entries are valid" in result.output

    def test_list(self, cli_runner, stale_path):
        """Test that entries are listed in order with validity marks."""
        existing_dir, missing_dir = stale_path

        result = cli_runner.invoke(cli, ["list"])

        lines = result.output.splitlines()
        assert result.exit_code == 0
        assert lines[0].endswith(f"✓ {existing_dir}")
        assert lines[1].endswith(f"✗ {missing_dir}")

    def test_shell_info(self, cli_runner, monkeypatch, fake_home):
        """Test that shell-info shows the fallback file and its entries."""
        monkeypatch.setenv("SHELL", "/usr/bin/ksh")
        write_config(
            fake_home / ".profile",
            "typeset -x PATH=/usr/local/bin:/usr/bin\nexport PATH=$PATH:/home/user/bin\n",
        )

        result = cli_runner.invoke(cli, ["shell-info"])

        assert result.exit_code == 0
        assert "Detected shell: ksh" in result.output
        assert f"Config file:    {fake_home / '.profile'}" in result.output
        assert "PATH assignments: 2" in result.output
        assert "Entries (3):" in result.output

    def test_shell_info_missing_config(self, cli_runner):
        result = cli_runner.invoke(cli, ["shell-info", "--shell", "zsh"])

        assert result.exit_code == 0
        assert "Config file does not exist yet." in result.output

    def test_shell_info_undecodable_config(self, cli_runner, fake_home):
        """Test that a config file that is not UTF-8 is reported, not a traceback."""
        (fake_home / ".profile").write_bytes(b"# caf\xe9\nPATH=/old\n")

        result = cli_runner.invoke(cli, ["shell-info", "--shell", "generic"])

        assert result.exit_code == 1
        assert "Cannot read" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)


class TestHistoryAndConfig:
    """Test history and config commands."""

    def test_history_empty(self, cli_runner):
        result = cli_runner.invoke(cli, ["history"])

        assert result.exit_code == 0
        assert "No backups found." in result.output

    def test_history_after_flush(self, cli_runner, stale_path, fake_home):
        """Test that a flush leaves a backup listed by history."""
        write_config(fake_home / ".profile", "PATH=/old\n")
        cli_runner.invoke(cli, ["flush", "--shell", "generic"])

        result = cli_runner.invoke(cli, ["history"])

        assert result.exit_code == 0
        assert "backup_" in result.output
        assert "config: " in result.output

    def test_set_and_unset_shell(self, cli_runner):
        """Test storing and removing the shell override."""
        result = cli_runner.invoke(cli, ["config", "set-shell", "ksh"])
        assert result.exit_code == 0
        assert get_configured_shell() == "ksh"

        result = cli_runner.invoke(cli, ["config", "show"])
        assert "Shell override: ksh" in result.output

        result = cli_runner.invoke(cli, ["config", "unset-shell"])
        assert result.exit_code == 0
        assert get_configured_shell() is None

    def test_set_shell_rejects_unknown(self, cli_runner):
        result = cli_runner.invoke(cli, ["config", "set-shell", "tcsh"])

        assert result.exit_code == 2
        assert get_configured_shell() is None

    def test_show_without_settings(self, cli_runner):
        result = cli_runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 0
        assert "(no settings)" in result.output
