"""Registry component models.

This module defines the data structures for registry responses: the
descriptor of a single installable component and the registry listing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Listing names carrying this prefix are grouped as AI components.
AI_PREFIX = "ai-"


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A single source file shipped with a component.

    Attributes:
        path: Path of the file inside the registry (e.g. 'ui/ai/message.tsx').
        content: Raw source text.
        type: Registry file type tag (informational only).
    """

    path: str
    content: str
    type: str = ""


@dataclass(frozen=True, slots=True)
class ComponentDescriptor:
    """A component definition fetched from the registry.

    Attributes:
        name: Component name the descriptor was requested under.
        files: Files required to materialize the component, in registry order.
    """

    name: str
    files: tuple[FileEntry, ...] = field(default=())

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> ComponentDescriptor:
        """Build a descriptor from a registry JSON payload.

        Entries that are not objects are skipped and missing fields default
        to empty strings; a missing or malformed ``files`` key yields a
        descriptor without files.

        Args:
            name: Component name.
            data: Parsed JSON body of ``/r/<name>.json``.

        Returns:
            ComponentDescriptor instance.
        """
        raw_files = data.get("files")
        if not isinstance(raw_files, list):
            return cls(name=name)

        files: list[FileEntry] = []
        for entry in raw_files:
            if not isinstance(entry, dict):
                continue
            files.append(
                FileEntry(
                    path=str(entry.get("path") or ""),
                    content=str(entry.get("content") or ""),
                    type=str(entry.get("type") or ""),
                )
            )
        return cls(name=name, files=tuple(files))

    @property
    def contents(self) -> list[str]:
        """Return the non-empty file contents, in order."""
        return [f.content for f in self.files if f.content]


@dataclass(frozen=True, slots=True)
class RegistryItem:
    """An entry of the registry listing."""

    name: str
    description: str = ""

    @property
    def is_ai(self) -> bool:
        """Check if this is an AI component."""
        return self.name.startswith(AI_PREFIX)


@dataclass(frozen=True, slots=True)
class RegistryIndex:
    """The registry listing.

    Attributes:
        items: Registry entries in listing order.
        is_fallback: True when the embedded snapshot was used instead of
            the remote listing.
    """

    items: tuple[RegistryItem, ...]
    is_fallback: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any], is_fallback: bool = False) -> RegistryIndex:
        """Build an index from a ``registry.json`` payload.

        Args:
            data: Parsed registry listing.
            is_fallback: Whether the payload is the embedded snapshot.

        Returns:
            RegistryIndex instance.

        Raises:
            ValueError: If ``items`` is missing or not a list.
        """
        raw_items = data.get("items")
        if not isinstance(raw_items, list):
            msg = "Invalid registry format: 'items' must be a list"
            raise ValueError(msg)

        items = tuple(
            RegistryItem(
                name=str(item["name"]),
                description=str(item.get("description") or ""),
            )
            for item in raw_items
            if isinstance(item, dict) and item.get("name")
        )
        return cls(items=items, is_fallback=is_fallback)

    @property
    def ai_items(self) -> list[RegistryItem]:
        """Return AI components in listing order."""
        return [item for item in self.items if item.is_ai]

    @property
    def utility_items(self) -> list[RegistryItem]:
        """Return all non-AI components in listing order."""
        return [item for item in self.items if not item.is_ai]

    def __len__(self) -> int:
        return len(self.items)
