"""shadcn/ui primitive reconciliation.

Registry components build on shadcn/ui primitives (button, card, ...)
imported from ``@repo/shadcn-ui/components/ui/<name>``. Primitives that are
not yet present in the project's UI directory are installed one at a time
through the scaffolding tool; one failing install does not stop the others.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from devcn_ui.utils.formatting import console, print_info, print_warning

if TYPE_CHECKING:
    from collections.abc import Iterable

    from devcn_ui.models.action import ActionResult
    from devcn_ui.models.component import ComponentDescriptor
    from devcn_ui.operators.shadcn import ShadcnOperator

logger = logging.getLogger(__name__)

# A primitive counts as present if either file exists in the UI directory.
PRIMITIVE_SUFFIXES = (".tsx", ".ts")


def primitive_pattern(internal_prefix: str = "@repo/") -> re.Pattern[str]:
    """Build the pattern matching primitive import paths under a workspace prefix."""
    return re.compile(rf"""{re.escape(internal_prefix)}shadcn-ui/components/ui/([^'"]+)""")


def collect_primitives(
    descriptor: ComponentDescriptor,
    internal_prefix: str = "@repo/",
) -> set[str]:
    """Collect the shadcn/ui primitives a component references.

    Must run on the raw registry sources, before imports are rewritten.

    Args:
        descriptor: Component descriptor.
        internal_prefix: Workspace namespace prefix of the registry monorepo.

    Returns:
        Set of primitive names, e.g. {"button", "card"}.
    """
    pattern = primitive_pattern(internal_prefix)
    names: set[str] = set()
    for content in descriptor.contents:
        names.update(pattern.findall(content))
    return names


def primitive_exists(name: str, ui_dir: Path) -> bool:
    """Check if a primitive already has a file in the UI directory."""
    return any((ui_dir / f"{name}{suffix}").exists() for suffix in PRIMITIVE_SUFFIXES)


def find_missing_primitives(names: Iterable[str], ui_dir: Path) -> list[str]:
    """Return the primitives with no file in the UI directory.

    Args:
        names: Primitive names to check.
        ui_dir: The project's UI components directory.

    Returns:
        Sorted list of missing primitive names.
    """
    return sorted(name for name in set(names) if not primitive_exists(name, ui_dir))


def install_missing_primitives(
    descriptor: ComponentDescriptor,
    ui_dir: Path,
    scaffold: ShadcnOperator,
    internal_prefix: str = "@repo/",
) -> list[ActionResult]:
    """Install every referenced primitive missing from the project.

    Args:
        descriptor: Component descriptor (raw registry sources).
        ui_dir: The project's UI components directory.
        scaffold: Scaffolding tool operator.
        internal_prefix: Workspace namespace prefix of the registry monorepo.

    Returns:
        One ActionResult per attempted install.
    """
    missing = find_missing_primitives(collect_primitives(descriptor, internal_prefix), ui_dir)
    if not missing:
        return []

    print_info(f"Installing missing shadcn/ui components: {', '.join(missing)}")

    results: list[ActionResult] = []
    for name in missing:
        console.print(f"  Installing {name}...")
        result = scaffold.add_primitive(name)
        results.append(result)

        if result.success:
            console.print(f"  [success]{name} installed[/]")
        else:
            logger.info("Could not install primitive %s: %s", name, result.error)
            print_warning(
                f"Could not install {name}. "
                f"Please install it manually: {scaffold.manual_command(name)}"
            )

    return results
