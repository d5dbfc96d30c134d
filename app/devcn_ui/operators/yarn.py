"""Yarn package manager implementation."""

from devcn_ui.operators.base import PackageManager


class YarnManager(PackageManager):
    """Package manager backed by Yarn (classic or berry)."""

    @property
    def name(self) -> str:
        """Return the yarn executable name."""
        return "yarn"

    @property
    def lockfile(self) -> str:
        """Return the yarn lockfile name."""
        return "yarn.lock"

    def install_args(self, packages: list[str]) -> list[str]:
        """Build ``yarn add <packages>``."""
        return ["yarn", "add", *packages]
