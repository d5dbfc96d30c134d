"""Abstract base class for JavaScript package managers.

This module defines the PackageManager interface that every supported
package manager (npm, pnpm, yarn) implements.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from devcn_ui.models.action import Action, ActionKind, ActionResult
from devcn_ui.utils.shell import run_interactive

logger = logging.getLogger(__name__)


class PackageManager(ABC):
    """Abstract base class for package managers.

    A package manager installs npm packages into the consumer project,
    updating package.json and its lockfile as a side effect. Output is
    inherited so the user sees live progress.

    Example:
        >>> manager = PnpmManager()
        >>> results = manager.install(["clsx", "shiki"])
        >>> all(r.success for r in results)
    """

    def __init__(self, cwd: Path | None = None) -> None:
        """Initialize the package manager.

        Args:
            cwd: Project directory to run in. If None, uses the current directory.
        """
        self._cwd = cwd

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the executable name (e.g. "pnpm")."""

    @property
    @abstractmethod
    def lockfile(self) -> str:
        """Return the lockfile name that identifies this package manager."""

    @abstractmethod
    def install_args(self, packages: list[str]) -> list[str]:
        """Build the command line that adds packages to the project.

        Args:
            packages: Package names to add.

        Returns:
            Full argument list, executable first.
        """

    def manual_command(self, packages: list[str]) -> str:
        """Return the install command for the user to run by hand."""
        return " ".join(self.install_args(packages))

    def install(self, packages: list[str]) -> list[ActionResult]:
        """Install packages with a single package manager invocation.

        The invocation is atomic from our side: every package shares the
        outcome of the one command.

        Args:
            packages: Package names to install.

        Returns:
            List of ActionResult, one per package.
        """
        if not packages:
            return []

        args = self.install_args(packages)
        logger.info("Executing %s for packages: %s", self.name, ", ".join(packages))

        error: str | None = None
        try:
            returncode = run_interactive(args, cwd=str(self._cwd) if self._cwd else None)
        except OSError as e:
            # FileNotFoundError included: the package manager is not installed
            error = f"Could not run {self.name}: {e}"
        else:
            if returncode != 0:
                error = f"{self.name} exited with code {returncode}"

        if error:
            logger.info("Dependency install failed: %s", error)

        return [
            ActionResult(
                action=Action(kind=ActionKind.DEPENDENCY, target=package),
                success=error is None,
                message=None if error else f"Installed with {self.name}",
                error=error,
            )
            for package in packages
        ]
