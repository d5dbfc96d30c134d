"""pnpm package manager implementation."""

from devcn_ui.operators.base import PackageManager


class PnpmManager(PackageManager):
    """Package manager backed by pnpm."""

    @property
    def name(self) -> str:
        """Return the pnpm executable name."""
        return "pnpm"

    @property
    def lockfile(self) -> str:
        """Return the pnpm lockfile name."""
        return "pnpm-lock.yaml"

    def install_args(self, packages: list[str]) -> list[str]:
        """Build ``pnpm add <packages>``."""
        return ["pnpm", "add", *packages]
