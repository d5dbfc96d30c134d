"""Scaffolding tool operator.

The shadcn CLI materialises component files in the consumer project. We
treat it as an opaque external tool and only pass it a registry URL (for
registry components) or a bare name (for shadcn/ui primitives).
"""

import logging
from pathlib import Path

from devcn_ui.models.action import Action, ActionKind, ActionResult
from devcn_ui.utils.shell import run_command, run_interactive

logger = logging.getLogger(__name__)

DEFAULT_SCAFFOLD_COMMAND: tuple[str, ...] = ("npx", "shadcn@latest")


class ScaffoldInvocationFailure(Exception):
    """Raised when the scaffolding tool fails to add a registry component.

    Attributes:
        returncode: Exit code of the tool, or None if it could not be started.
    """

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class ShadcnOperator:
    """Operator for the shadcn scaffolding CLI.

    Attributes:
        command: Command prefix, e.g. ("npx", "shadcn@latest").
    """

    def __init__(
        self,
        command: tuple[str, ...] | list[str] = DEFAULT_SCAFFOLD_COMMAND,
        cwd: Path | None = None,
    ) -> None:
        """Initialize the operator.

        Args:
            command: Command prefix used to invoke the tool.
            cwd: Project directory to run in. If None, uses the current directory.
        """
        self.command = tuple(command)
        self._cwd = str(cwd) if cwd else None

    def add_args(self, target: str) -> list[str]:
        """Build ``<command> add <target>``."""
        return [*self.command, "add", target]

    def manual_command(self, target: str) -> str:
        """Return the add command for the user to run by hand."""
        return " ".join(self.add_args(target))

    def add_component(self, url: str) -> ActionResult:
        """Materialise a registry component, showing the tool's output.

        Args:
            url: Descriptor URL of the component.

        Returns:
            Successful ActionResult.

        Raises:
            ScaffoldInvocationFailure: If the tool cannot be started or exits
                with a non-zero code.
        """
        args = self.add_args(url)
        logger.info("Running scaffolding tool: %s", " ".join(args))

        try:
            returncode = run_interactive(args, cwd=self._cwd)
        except OSError as e:
            msg = f"Could not run {self.command[0]}: {e}"
            raise ScaffoldInvocationFailure(msg) from e

        if returncode != 0:
            msg = f"Command failed: {' '.join(args)} (exit code {returncode})"
            raise ScaffoldInvocationFailure(msg, returncode=returncode)

        return ActionResult(
            action=Action(kind=ActionKind.COMPONENT, target=url),
            success=True,
            message="Component added",
        )

    def add_primitive(self, name: str) -> ActionResult:
        """Install a shadcn/ui primitive with the tool's output suppressed.

        Failures are reported in the result rather than raised so that each
        primitive is installed independently.

        Args:
            name: Primitive name, e.g. "button".

        Returns:
            ActionResult describing the outcome.
        """
        action = Action(kind=ActionKind.PRIMITIVE, target=name)
        args = self.add_args(name)
        logger.info("Installing primitive: %s", " ".join(args))

        try:
            result = run_command(args, cwd=self._cwd)
        except OSError as e:
            return ActionResult(action=action, success=False, error=str(e))

        if not result.success:
            return ActionResult(
                action=action,
                success=False,
                error=result.output or f"exit code {result.returncode}",
            )
        return ActionResult(action=action, success=True, message=f"{name} installed")
