"""Unit tests for CLI configuration loading."""

from pathlib import Path

import pytest
from devcn_ui.core.config import (
    DEFAULT_REGISTRY_URL,
    CliConfig,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ImportAliases,
    load_config,
)
from devcn_ui.core.paths import get_config_path


class TestCliConfig:
    """Tests for CliConfig model."""

    def test_defaults(self) -> None:
        """Defaults target the public registry and shadcn/ui layout."""
        config = CliConfig()

        assert config.registry_url == DEFAULT_REGISTRY_URL
        assert config.scaffold_command == ["npx", "shadcn@latest"]
        assert config.components_dir == "components"
        assert config.ui_dir == "components/ui"
        assert config.aliases == ImportAliases()

    def test_registry_url_trailing_slash(self) -> None:
        """Trailing slashes are removed from the registry URL."""
        assert CliConfig(registry_url="https://example.com/").registry_url == "https://example.com"

    def test_registry_url_requires_http(self) -> None:
        """Non-HTTP registry URLs are rejected."""
        with pytest.raises(ValueError, match="http"):
            CliConfig(registry_url="ftp://example.com")

    def test_empty_scaffold_command(self) -> None:
        """The scaffold command needs at least one element."""
        with pytest.raises(ValueError):
            CliConfig(scaffold_command=[])

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValueError):
            CliConfig(unknown="x")  # type: ignore[call-arg]

    def test_alias_trailing_slash(self) -> None:
        """Aliases lose trailing slashes."""
        assert ImportAliases(ui="@/ui/").ui == "@/ui"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_default_file_uses_defaults(self) -> None:
        """Without a config file the defaults apply."""
        assert not get_config_path().exists()
        assert load_config() == CliConfig()

    def test_reads_default_file(self) -> None:
        """The default config file is picked up when present."""
        path = get_config_path()
        path.parent.mkdir(parents=True)
        path.write_text('components_dir = "src/components"\n[aliases]\nui = "~/ui"\n')

        config = load_config()

        assert config.components_dir == "src/components"
        assert config.aliases.ui == "~/ui"
        assert config.aliases.utils == "@/lib/utils"

    def test_explicit_path_must_exist(self, tmp_path: Path) -> None:
        """A path passed explicitly has to exist."""
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Malformed TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("registry_url = [")

        with pytest.raises(ConfigParseError):
            load_config(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('registry_url = "not-a-url"\n')

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_env_overrides_registry_url(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """DEVCN_UI_REGISTRY_URL wins over the file."""
        path = tmp_path / "config.toml"
        path.write_text('registry_url = "https://file.example.com"\n')
        monkeypatch.setenv("DEVCN_UI_REGISTRY_URL", "http://localhost:3000/")

        assert load_config(path).registry_url == "http://localhost:3000"
