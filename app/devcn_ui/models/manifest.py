"""Project manifest model.

This module defines the Pydantic model for the parts of a consumer's
``package.json`` that dependency reconciliation reads.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class ProjectManifest(BaseModel):
    """Dependency declarations of a consumer's ``package.json``.

    Only the three dependency categories are modelled; every other key of
    the file is ignored. The model is read-only: the manifest on disk is
    changed exclusively by the package manager's own install command.

    Attributes:
        dependencies: Runtime dependencies.
        dev_dependencies: Development dependencies.
        peer_dependencies: Peer dependencies.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    dependencies: Annotated[
        dict[str, str],
        Field(description="Runtime dependencies"),
    ] = {}
    dev_dependencies: Annotated[
        dict[str, str],
        Field(alias="devDependencies", description="Development dependencies"),
    ] = {}
    peer_dependencies: Annotated[
        dict[str, str],
        Field(alias="peerDependencies", description="Peer dependencies"),
    ] = {}

    @property
    def declared(self) -> set[str]:
        """Return every package declared in any dependency category."""
        return (
            set(self.dependencies)
            | set(self.dev_dependencies)
            | set(self.peer_dependencies)
        )
