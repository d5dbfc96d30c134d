"""CLI configuration and settings.

Configuration is optional. Defaults point at the public Devcn UI registry and
the standard shadcn/ui project layout; a TOML file at
``~/.config/devcn-ui/config.toml`` may override any of them, and the
``DEVCN_UI_REGISTRY_URL`` environment variable overrides the registry base.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from devcn_ui.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_URL = "https://devcn-ui.dedevs.com"

# Environment variable overriding the registry base URL
REGISTRY_URL_ENV = "DEVCN_UI_REGISTRY_URL"


class ImportAliases(BaseModel):
    """Local module specifiers that internal registry imports are rewritten to."""

    model_config = ConfigDict(extra="forbid")

    ui: str = "@/components/ui"
    utils: str = "@/lib/utils"
    code_block: str = "@/components/ui/code-block"

    @field_validator("ui", "utils", "code_block")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Aliases are joined with "/" so a trailing slash would double up."""
        v = v.strip().rstrip("/")
        if not v:
            msg = "alias cannot be empty"
            raise ValueError(msg)
        return v


class CliConfig(BaseModel):
    """Configuration for the devcn-ui CLI.

    Attributes:
        registry_url: Base URL of the component registry.
        scaffold_command: Command prefix used to invoke the scaffolding tool.
        components_dir: Project-relative directory scanned for import rewriting.
        ui_dir: Project-relative directory holding shadcn/ui primitives.
        aliases: Local import aliases used by the import rewriter.
    """

    model_config = ConfigDict(extra="forbid")

    registry_url: Annotated[
        str,
        Field(min_length=1, description="Base URL of the component registry"),
    ] = DEFAULT_REGISTRY_URL
    scaffold_command: Annotated[
        list[str],
        Field(min_length=1, description="Scaffolding tool command prefix"),
    ] = ["npx", "shadcn@latest"]
    components_dir: str = "components"
    ui_dir: str = "components/ui"
    aliases: ImportAliases = Field(default_factory=ImportAliases)

    @field_validator("registry_url")
    @classmethod
    def validate_registry_url(cls, v: str) -> str:
        """Require an http(s) URL and drop trailing slashes."""
        url = v.strip()
        if not url.startswith(("http://", "https://")):
            msg = f"registry_url must be an http(s) URL, got '{v}'"
            raise ValueError(msg)
        return url.rstrip("/")


class ConfigError(Exception):
    """Base exception for CLI configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> CliConfig:
    """Load CLI configuration.

    The default config file is optional: when it does not exist the built-in
    defaults are used. A path passed explicitly must exist.

    Args:
        path: Path to a config file. If None, uses the default config path.

    Returns:
        Validated CliConfig with environment overrides applied.

    Raises:
        ConfigNotFoundError: If an explicit path doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()
    data: dict[str, object] = {}

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config {config_path}: {e}") from e
        logger.debug("Loaded configuration from %s", config_path)
    elif path is not None:
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    env_url = os.environ.get(REGISTRY_URL_ENV)
    if env_url:
        logger.debug("Registry URL overridden by %s", REGISTRY_URL_ENV)
        data["registry_url"] = env_url

    try:
        return CliConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
