"""Project manifest I/O.

This module reads the consumer's ``package.json`` and compares its declared
dependencies against the packages a component requires. The manifest is
never written here; installs go through the package manager, which updates
the file itself.
"""

import json
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from devcn_ui.core.paths import get_manifest_path
from devcn_ui.models.manifest import ProjectManifest


class ManifestError(Exception):
    """Base exception for manifest-related errors."""


class ManifestNotFoundError(ManifestError):
    """Raised when the project has no package.json."""


class ManifestParseError(ManifestError):
    """Raised when package.json cannot be parsed or has an invalid shape."""


def load_project_manifest(path: Path | None = None) -> ProjectManifest:
    """Load and validate a project's package.json.

    Args:
        path: Path to package.json. If None, uses ./package.json.

    Returns:
        Validated ProjectManifest.

    Raises:
        ManifestNotFoundError: If the file doesn't exist.
        ManifestParseError: If the JSON is invalid or not an object.
        ManifestError: If the file cannot be read.
    """
    manifest_path = path or get_manifest_path()

    if not manifest_path.exists():
        raise ManifestNotFoundError(f"No package.json found: {manifest_path}")

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Invalid JSON in {manifest_path}: {e}") from e
    except OSError as e:
        raise ManifestError(f"Failed to read {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestParseError(f"Invalid package.json: expected an object in {manifest_path}")

    try:
        return ProjectManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestParseError(f"Invalid package.json content: {e}") from e


def find_missing(required: Iterable[str], manifest: ProjectManifest) -> list[str]:
    """Return the required packages the manifest does not declare.

    A package counts as declared if it appears in dependencies,
    devDependencies or peerDependencies.

    Args:
        required: Package names a component needs.
        manifest: The project's manifest.

    Returns:
        Sorted list of undeclared packages.
    """
    declared = manifest.declared
    return sorted({pkg for pkg in required if pkg not in declared})
