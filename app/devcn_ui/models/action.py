"""Install action models.

This module defines data structures describing the install steps the CLI
performs on a consumer project and their outcomes.
"""

from dataclasses import dataclass
from enum import Enum


class ActionKind(Enum):
    """What an install action puts into the project.

    Attributes:
        DEPENDENCY: npm packages, installed through the package manager.
        COMPONENT: A registry component, installed through the scaffolding tool.
        PRIMITIVE: A shadcn/ui primitive, installed through the scaffolding tool.
    """

    DEPENDENCY = "dependency"
    COMPONENT = "component"
    PRIMITIVE = "primitive"


@dataclass(frozen=True, slots=True)
class Action:
    """A single install step.

    Attributes:
        kind: What is being installed.
        target: Package name, component URL or primitive name.
    """

    kind: ActionKind
    target: str

    def __post_init__(self) -> None:
        """Validate action data after initialization."""
        if not self.target:
            msg = "Action target cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Outcome of an install step.

    Attributes:
        action: The action that was executed.
        success: Whether the action completed successfully.
        message: Optional success message or additional information.
        error: Optional error message if the action failed.
    """

    action: Action
    success: bool
    message: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the action failed."""
        return not self.success
