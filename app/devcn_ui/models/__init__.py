"""Data models for devcn-ui.

This module exports the core data structures used throughout the application.
"""

from devcn_ui.models.action import Action, ActionKind, ActionResult
from devcn_ui.models.component import (
    ComponentDescriptor,
    FileEntry,
    RegistryIndex,
    RegistryItem,
)
from devcn_ui.models.manifest import ProjectManifest

__all__ = [
    "Action",
    "ActionKind",
    "ActionResult",
    "ComponentDescriptor",
    "FileEntry",
    "ProjectManifest",
    "RegistryIndex",
    "RegistryItem",
]
