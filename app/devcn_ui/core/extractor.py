"""Static dependency extraction for registry components.

Scans the source files of a component descriptor for ES-module import
statements and derives the npm packages the component needs. Detection is a
single regular expression rather than a parser; side-effect-only imports
(``import "pkg"``) are deliberately not matched.
"""

import logging
import re
from collections.abc import Iterable, Iterator

from devcn_ui.core.workspace import WorkspaceMap, load_workspace_map
from devcn_ui.models.component import ComponentDescriptor

logger = logging.getLogger(__name__)

# import <clause> from '<path>'
# The clause is a default binding, a {named} list, a "* as ns" binding, or a
# default binding followed by either of the latter two.
IMPORT_PATTERN = re.compile(
    r"""
    \bimport\s+
    (?:type\s+)?
    (?:[\w$]+\s*,\s*)?
    (?:\{[^}]*\}|\*\s+as\s+[\w$]+|[\w$]+)
    \s+from\s+
    ['"]([^'"]+)['"]
    """,
    re.VERBOSE,
)


def iter_import_paths(content: str) -> Iterator[str]:
    """Yield the module specifier of every matched import statement.

    Args:
        content: Source text of a single file.

    Yields:
        Import paths in source order, one per statement.
    """
    for match in IMPORT_PATTERN.finditer(content):
        yield match.group(1)


def package_identifier(import_path: str) -> str:
    """Derive the npm package name from an import path.

    Scoped paths keep their first two segments, unscoped paths the first.

    Examples:
        >>> package_identifier("@scope/pkg/sub")
        '@scope/pkg'
        >>> package_identifier("lodash/fp")
        'lodash'
    """
    segments = import_path.split("/")
    if import_path.startswith("@"):
        return "/".join(segments[:2])
    return segments[0]


def resolve_dependency(import_path: str, workspace: WorkspaceMap) -> str | None:
    """Resolve one import path to the npm package it requires.

    Args:
        import_path: Module specifier captured from an import statement.
        workspace: Monorepo conventions to filter and translate with.

    Returns:
        The package to install, or None when the import needs no package
        (relative, built-in, framework, or internal without a public mapping).
    """
    if workspace.is_local(import_path):
        return None

    package = package_identifier(import_path)
    if package in workspace.framework_packages:
        return None

    if workspace.is_internal(package):
        return workspace.translate(package)

    return package


def extract_dependencies(
    source: ComponentDescriptor | Iterable[str],
    workspace: WorkspaceMap | None = None,
) -> set[str]:
    """Collect the npm packages a component's sources import.

    Args:
        source: A component descriptor, or an iterable of file contents.
        workspace: Monorepo conventions. If None, uses the bundled table.

    Returns:
        Set of distinct package names.
    """
    workspace = workspace or load_workspace_map()
    contents = source.contents if isinstance(source, ComponentDescriptor) else source

    dependencies: set[str] = set()
    for content in contents:
        for import_path in iter_import_paths(content):
            package = resolve_dependency(import_path, workspace)
            if package is not None:
                dependencies.add(package)

    logger.debug("Extracted dependencies: %s", ", ".join(sorted(dependencies)) or "none")
    return dependencies
