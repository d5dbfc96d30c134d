"""npm package manager implementation."""

from devcn_ui.operators.base import PackageManager


class NpmManager(PackageManager):
    """Package manager backed by npm.

    npm is also the fallback when a project has no recognised lockfile.
    """

    @property
    def name(self) -> str:
        """Return the npm executable name."""
        return "npm"

    @property
    def lockfile(self) -> str:
        """Return the npm lockfile name."""
        return "package-lock.json"

    def install_args(self, packages: list[str]) -> list[str]:
        """Build ``npm install <packages>``."""
        return ["npm", "install", *packages]
