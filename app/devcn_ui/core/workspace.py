"""Registry monorepo conventions.

Registry components are authored inside a monorepo and import workspace
packages (``@repo/...``) that never exist in a consumer project. This module
loads the table describing those conventions from the bundled
``data/workspace.toml``.
"""

import logging
import tomllib
from functools import lru_cache
from importlib import resources

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class WorkspaceMap(BaseModel):
    """Conventions of the registry's source monorepo.

    Attributes:
        framework_packages: Packages provided by the consumer's framework.
        internal_prefix: Namespace prefix of workspace-private packages.
        local_prefixes: Specifier prefixes that point into the project itself.
        builtin_prefixes: Specifier prefixes of runtime built-in modules.
        translations: Internal package -> public package. An empty string
            marks an internal package that needs no npm dependency.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    framework_packages: frozenset[str] = frozenset({"react", "react-dom", "next"})
    internal_prefix: str = Field(default="@repo/", min_length=1)
    local_prefixes: tuple[str, ...] = (".",)
    builtin_prefixes: tuple[str, ...] = ("node:",)
    translations: dict[str, str] = Field(default_factory=dict)

    def is_internal(self, package: str) -> bool:
        """Check if a package identifier belongs to the internal namespace."""
        return package.startswith(self.internal_prefix)

    def is_local(self, specifier: str) -> bool:
        """Check if an import specifier is relative, aliased or built-in."""
        return specifier.startswith(self.local_prefixes + self.builtin_prefixes)

    def translate(self, package: str) -> str | None:
        """Map an internal package to the public package it needs.

        Args:
            package: Internal package identifier, e.g. "@repo/code-block".

        Returns:
            Public package name, or None when no npm dependency is needed
            (including internal packages with no known mapping).
        """
        mapped = self.translations.get(package)
        return mapped or None


class WorkspaceMapError(Exception):
    """Raised when the bundled workspace table cannot be loaded."""


@lru_cache(maxsize=1)
def load_workspace_map() -> WorkspaceMap:
    """Load the bundled workspace conventions.

    The table is read once per process.

    Returns:
        Validated WorkspaceMap.

    Raises:
        WorkspaceMapError: If the bundled file is missing or invalid.
    """
    source = resources.files("devcn_ui.data").joinpath("workspace.toml")
    try:
        data = tomllib.loads(source.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise WorkspaceMapError(f"Failed to load workspace table: {e}") from e

    try:
        workspace = WorkspaceMap.model_validate(data)
    except ValidationError as e:
        raise WorkspaceMapError(f"Invalid workspace table: {e}") from e

    logger.debug(
        "Loaded workspace table with %d translation(s)",
        len(workspace.translations),
    )
    return workspace
