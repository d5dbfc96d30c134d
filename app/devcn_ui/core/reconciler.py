"""Dependency reconciliation.

Compares the packages a component needs against the consumer's package.json
and installs the missing ones with the project's package manager.
Reconciliation is best-effort: a missing manifest or a failed install is
reported to the user and never aborts the component.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from devcn_ui.core.manifest import (
    ManifestError,
    ManifestNotFoundError,
    find_missing,
    load_project_manifest,
)
from devcn_ui.core.paths import get_manifest_path, get_project_dir
from devcn_ui.operators.npm import NpmManager
from devcn_ui.operators.pnpm import PnpmManager
from devcn_ui.operators.yarn import YarnManager
from devcn_ui.utils.formatting import print_info, print_success, print_warning

if TYPE_CHECKING:
    from devcn_ui.models.action import ActionResult
    from devcn_ui.operators.base import PackageManager

logger = logging.getLogger(__name__)

# Lockfile probing order; the first lockfile found wins.
PACKAGE_MANAGERS: tuple[type[PackageManager], ...] = (PnpmManager, YarnManager, NpmManager)


def detect_package_manager(project_dir: Path | None = None) -> PackageManager:
    """Detect the project's package manager from its lockfile.

    Probes for pnpm-lock.yaml, yarn.lock and package-lock.json in that
    order and defaults to npm when none exists.

    Args:
        project_dir: Project root. If None, uses the current directory.

    Returns:
        PackageManager bound to the project directory.
    """
    root = project_dir or get_project_dir()
    for manager_cls in PACKAGE_MANAGERS:
        manager = manager_cls(cwd=project_dir)
        if (root / manager.lockfile).exists():
            logger.debug("Found %s, using %s", manager.lockfile, manager.name)
            return manager

    logger.debug("No lockfile found, defaulting to npm")
    return NpmManager(cwd=project_dir)


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Outcome of reconciling a component's dependencies.

    Attributes:
        missing: Packages that were not declared in package.json.
        manager: Name of the package manager used, if an install ran.
        results: Per-package install results.
        skipped: Why reconciliation did nothing, if it was skipped.
    """

    missing: tuple[str, ...] = ()
    manager: str | None = None
    results: tuple[ActionResult, ...] = field(default=())
    skipped: str | None = None

    @property
    def failed(self) -> list[str]:
        """Return packages whose install failed."""
        return [r.action.target for r in self.results if r.failed]

    @property
    def installed(self) -> list[str]:
        """Return packages that were installed."""
        return [r.action.target for r in self.results if r.success]


def reconcile_dependencies(
    required: Iterable[str],
    project_dir: Path | None = None,
) -> ReconcileResult:
    """Install the required packages the project does not declare yet.

    Args:
        required: Package names the component needs.
        project_dir: Project root. If None, uses the current directory.

    Returns:
        ReconcileResult describing what was done.
    """
    required = set(required)
    if not required:
        return ReconcileResult(skipped="no dependencies")

    manifest_path = get_manifest_path(project_dir)
    try:
        manifest = load_project_manifest(manifest_path)
    except ManifestNotFoundError:
        print_warning("No package.json found. Skipping dependency check.")
        return ReconcileResult(skipped="no package.json")
    except ManifestError as e:
        print_warning(
            f"Could not read package.json ({escape(str(e))}). Skipping dependency check."
        )
        return ReconcileResult(skipped="unreadable package.json")

    missing = find_missing(required, manifest)
    if not missing:
        logger.debug("All dependencies already declared: %s", ", ".join(sorted(required)))
        return ReconcileResult(skipped="all declared")

    print_info(f"Installing missing dependencies: {', '.join(missing)}")
    manager = detect_package_manager(project_dir)
    results = manager.install(missing)
    outcome = ReconcileResult(
        missing=tuple(missing),
        manager=manager.name,
        results=tuple(results),
    )

    if outcome.failed:
        print_warning(
            f"Failed to install dependencies: {escape(results[0].error or '')}. "
            f"Please install them manually: {manager.manual_command(outcome.failed)}"
        )
    else:
        print_success("Dependencies installed successfully")

    return outcome
