"""Unit tests for the add command."""

from unittest.mock import patch

import pytest
from devcn_ui.cli.main import app
from devcn_ui.core.config import CliConfig
from devcn_ui.core.pipeline import AddResult
from devcn_ui.models.action import Action, ActionKind, ActionResult
from typer.testing import CliRunner

runner = CliRunner()


class TestAddCommand:
    """Tests for devcn-ui add."""

    def test_add_help(self) -> None:
        """Add command shows help."""
        result = runner.invoke(app, ["add", "--help"])

        assert result.exit_code == 0
        assert "Add components" in result.stdout

    def test_no_components(self) -> None:
        """Without component names the usage line is printed."""
        with patch("devcn_ui.cli.commands.add.ComponentInstaller") as mock_installer:
            result = runner.invoke(app, ["add"])

        assert result.exit_code == 1
        assert "Usage: devcn-ui add [...components]" in result.stdout
        mock_installer.assert_not_called()

    def test_adds_in_order(self) -> None:
        """Every named component is handed to the installer in order."""
        with patch("devcn_ui.cli.commands.add.ComponentInstaller") as mock_installer:
            installer = mock_installer.return_value
            installer.add_all.return_value = [
                AddResult(name="ai-message"),
                AddResult(name="snippet"),
            ]

            result = runner.invoke(app, ["add", "ai-message", "snippet"])

        assert result.exit_code == 0
        installer.add_all.assert_called_once_with(["ai-message", "snippet"])
        assert isinstance(mock_installer.call_args[0][0], CliConfig)
        assert "ai-message added" in result.stdout
        assert "snippet added" in result.stdout

    def test_failure_exits_1(self) -> None:
        """A component that could not be added makes the run fail."""
        with patch("devcn_ui.cli.commands.add.ComponentInstaller") as mock_installer:
            mock_installer.return_value.add_all.return_value = [
                AddResult(name="missing", error="Failed to fetch registry: 404"),
                AddResult(name="snippet"),
            ]

            result = runner.invoke(app, ["add", "missing", "snippet"])

        assert result.exit_code == 1
        assert "missing was not added" in result.stderr
        assert "snippet added" in result.stdout

    def test_manual_steps_reported(self) -> None:
        """Install failures are listed but do not fail the run."""
        primitive = ActionResult(
            action=Action(kind=ActionKind.PRIMITIVE, target="button"),
            success=False,
            error="offline",
        )
        with patch("devcn_ui.cli.commands.add.ComponentInstaller") as mock_installer:
            mock_installer.return_value.add_all.return_value = [
                AddResult(name="ai-message", primitives=[primitive]),
            ]

            result = runner.invoke(app, ["add", "ai-message"])

        assert result.exit_code == 0
        assert "install manually: button" in " ".join(result.stderr.split())

    def test_registry_url_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """DEVCN_UI_REGISTRY_URL reaches the installer configuration."""
        monkeypatch.setenv("DEVCN_UI_REGISTRY_URL", "http://localhost:3000")

        with patch("devcn_ui.cli.commands.add.ComponentInstaller") as mock_installer:
            mock_installer.return_value.add_all.return_value = [AddResult(name="snippet")]
            result = runner.invoke(app, ["add", "snippet"])

        assert result.exit_code == 0
        assert mock_installer.call_args[0][0].registry_url == "http://localhost:3000"
