"""Unit tests for shell execution utilities."""

from unittest.mock import MagicMock, patch

import pytest
from devcn_ui.utils.shell import CommandResult, run_command, run_interactive


class TestCommandResult:
    """Tests for CommandResult dataclass."""

    def test_success(self) -> None:
        """success is True only for exit code 0."""
        assert CommandResult(stdout="", stderr="", returncode=0).success
        assert not CommandResult(stdout="", stderr="", returncode=1).success

    def test_output_prefers_stderr(self) -> None:
        """output returns stderr when present, stdout otherwise."""
        assert CommandResult(stdout="out", stderr=" err\n", returncode=1).output == "err"
        assert CommandResult(stdout="out\n", stderr="", returncode=1).output == "out"


class TestRunCommand:
    """Tests for run_command function."""

    @patch("devcn_ui.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        """run_command captures text output."""
        mock_run.return_value = MagicMock(stdout="ok", stderr="", returncode=0)

        result = run_command(["npx", "shadcn@latest", "add", "button"], cwd="/tmp")

        assert result == CommandResult(stdout="ok", stderr="", returncode=0)
        kwargs = mock_run.call_args.kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["check"] is False
        assert kwargs["cwd"] == "/tmp"

    def test_raises_file_not_found(self) -> None:
        """run_command raises FileNotFoundError for a missing executable."""
        with pytest.raises(FileNotFoundError):
            run_command(["definitely-not-a-real-command-devcn"])


class TestRunInteractive:
    """Tests for run_interactive function."""

    @patch("devcn_ui.utils.shell.subprocess.run")
    def test_returns_exit_code(self, mock_run: MagicMock) -> None:
        """run_interactive returns the subprocess exit code."""
        mock_run.return_value = MagicMock(returncode=3)
        assert run_interactive(["npm", "install"]) == 3

    @patch("devcn_ui.utils.shell.subprocess.run")
    def test_does_not_capture_output(self, mock_run: MagicMock) -> None:
        """run_interactive inherits the terminal."""
        mock_run.return_value = MagicMock(returncode=0)

        run_interactive(["npm", "install"], cwd="/tmp")

        kwargs = mock_run.call_args.kwargs
        assert "capture_output" not in kwargs
        assert "stdout" not in kwargs
        assert kwargs["cwd"] == "/tmp"
