"""Component installation pipeline.

Runs the steps that add one registry component to a project:

1. fetch the component descriptor from the registry
2. extract the npm packages its sources import
3. install the ones package.json does not declare
4. hand the component to the scaffolding tool
5. rewrite internal imports in the components directory
6. install missing shadcn/ui primitives

Registry and scaffolding failures abort the current component only. Install
failures of dependencies or primitives are reported and the pipeline goes on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from devcn_ui.core.extractor import extract_dependencies
from devcn_ui.core.paths import get_project_dir, resolve_project_path
from devcn_ui.core.primitives import install_missing_primitives
from devcn_ui.core.reconciler import ReconcileResult, reconcile_dependencies
from devcn_ui.core.rewriter import build_rules, rewrite_directory
from devcn_ui.core.workspace import load_workspace_map
from devcn_ui.operators.shadcn import ScaffoldInvocationFailure, ShadcnOperator
from devcn_ui.registry.client import RegistryClient, RegistryFetchError
from devcn_ui.utils.formatting import print_error, print_info

if TYPE_CHECKING:
    from devcn_ui.core.config import CliConfig
    from devcn_ui.models.action import ActionResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AddResult:
    """Outcome of adding one component.

    Attributes:
        name: Requested component name.
        dependencies: npm packages the component's sources import.
        reconcile: Dependency reconciliation outcome.
        rewritten: Files whose imports were rewritten.
        primitives: Install results for missing shadcn/ui primitives.
        error: Message of the error that aborted the component, if any.
    """

    name: str
    dependencies: set[str] = field(default_factory=set)
    reconcile: ReconcileResult | None = None
    rewritten: list[Path] = field(default_factory=list)
    primitives: list[ActionResult] = field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if the component was added (possibly with warnings)."""
        return self.error is None

    @property
    def warnings(self) -> list[str]:
        """Return the items that need a manual install."""
        items: list[str] = []
        if self.reconcile is not None:
            items.extend(self.reconcile.failed)
        items.extend(r.action.target for r in self.primitives if r.failed)
        return items


class ComponentInstaller:
    """Adds registry components to a project.

    Attributes:
        config: CLI configuration.
        project_dir: Consumer project root.
        client: Registry client.
        scaffold: Scaffolding tool operator.
    """

    def __init__(
        self,
        config: CliConfig,
        project_dir: Path | None = None,
        client: RegistryClient | None = None,
        scaffold: ShadcnOperator | None = None,
    ) -> None:
        self.config = config
        self.project_dir = project_dir or get_project_dir()
        self.client = client or RegistryClient(config.registry_url)
        self.scaffold = scaffold or ShadcnOperator(
            config.scaffold_command, cwd=self.project_dir
        )
        self._workspace = load_workspace_map()
        self._rules = build_rules(config.aliases, self._workspace.internal_prefix)

    @property
    def components_dir(self) -> Path:
        """Return the project's components directory."""
        return resolve_project_path(self.config.components_dir, self.project_dir)

    @property
    def ui_dir(self) -> Path:
        """Return the project's shadcn/ui primitives directory."""
        return resolve_project_path(self.config.ui_dir, self.project_dir)

    def add(self, name: str) -> AddResult:
        """Add a single component.

        Args:
            name: Registry component name.

        Returns:
            AddResult; ``error`` is set if the component could not be added.
        """
        result = AddResult(name=name)
        print_info(f"Adding {escape(name)} component...")

        try:
            descriptor = self.client.fetch_component(name)

            result.dependencies = extract_dependencies(descriptor, self._workspace)
            if result.dependencies:
                result.reconcile = reconcile_dependencies(result.dependencies, self.project_dir)

            self.scaffold.add_component(self.client.component_url(name))
        except (RegistryFetchError, ScaffoldInvocationFailure) as e:
            logger.debug("Adding %s failed", name, exc_info=True)
            result.error = str(e)
            print_error(f"Failed to add {escape(name)}: {escape(str(e))}")
            return result

        result.rewritten = rewrite_directory(
            self.components_dir, self._rules, project_dir=self.project_dir
        )
        result.primitives = install_missing_primitives(
            descriptor, self.ui_dir, self.scaffold, self._workspace.internal_prefix
        )

        logger.info(
            "Added %s (%d dependencies, %d file(s) rewritten, %d primitive(s))",
            name,
            len(result.dependencies),
            len(result.rewritten),
            len(result.primitives),
        )
        return result

    def add_all(self, names: list[str]) -> list[AddResult]:
        """Add components one after another.

        A failed component does not stop the ones after it; side effects of
        earlier components (installed packages, written files) persist.

        Args:
            names: Component names; blank names are skipped.

        Returns:
            One AddResult per non-blank name, in order.
        """
        results: list[AddResult] = []
        for name in names:
            name = name.strip()
            if not name:
                continue
            results.append(self.add(name))
        return results
