"""Unit tests for path management."""

from pathlib import Path

import pytest
from devcn_ui.core.paths import (
    display_path,
    get_config_dir,
    get_config_path,
    get_manifest_path,
    get_user_theme_path,
    resolve_project_path,
)


class TestUserPaths:
    """Tests for XDG configuration paths."""

    def test_respects_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """XDG_CONFIG_HOME relocates the config directory."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_dir() == tmp_path / "devcn-ui"
        assert get_config_path() == tmp_path / "devcn-ui" / "config.toml"
        assert get_user_theme_path() == tmp_path / "devcn-ui" / "theme.toml"

    def test_default_under_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without XDG_CONFIG_HOME the config lives under ~/.config."""
        monkeypatch.delenv("XDG_CONFIG_HOME")
        assert get_config_dir() == Path.home() / ".config" / "devcn-ui"


class TestProjectPaths:
    """Tests for consumer project paths."""

    def test_manifest_path(self, tmp_path: Path) -> None:
        """package.json sits at the project root."""
        assert get_manifest_path(tmp_path) == tmp_path / "package.json"

    def test_manifest_path_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The current directory is the default project root."""
        monkeypatch.chdir(tmp_path)
        assert get_manifest_path() == tmp_path / "package.json"

    def test_resolve_relative(self, tmp_path: Path) -> None:
        """Relative paths are joined to the project root."""
        assert resolve_project_path("components/ui", tmp_path) == tmp_path / "components" / "ui"

    def test_resolve_absolute(self, tmp_path: Path) -> None:
        """Absolute paths are returned unchanged."""
        target = tmp_path / "elsewhere"
        assert resolve_project_path(target, tmp_path / "project") == target

    def test_display_inside_project(self, tmp_path: Path) -> None:
        """Paths inside the project render as ./relative."""
        path = tmp_path / "components" / "ai" / "message.tsx"
        assert display_path(path, tmp_path) == "./components/ai/message.tsx"

    def test_display_outside_project(self, tmp_path: Path) -> None:
        """Paths outside the project render unchanged."""
        path = tmp_path / "other" / "file.tsx"
        assert display_path(path, tmp_path / "project") == str(path)
