"""Path management for devcn-ui.

Two families of paths live here:

- XDG-compliant user paths for the CLI's own configuration
  (``~/.config/devcn-ui/``).
- Project-relative paths inside the consumer's front-end project
  (``package.json``, lockfiles, the components directory).
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "devcn-ui"

# Name of the consumer's dependency manifest
MANIFEST_FILENAME = "package.json"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/devcn-ui/ (or XDG_CONFIG_HOME/devcn-ui/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default CLI configuration file path.

    Returns:
        Path to ~/.config/devcn-ui/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/devcn-ui/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_project_dir() -> Path:
    """Get the consumer project directory (the current working directory)."""
    return Path.cwd()


def get_manifest_path(project_dir: Path | None = None) -> Path:
    """Get the consumer's package.json path.

    Args:
        project_dir: Project root. If None, uses the current directory.

    Returns:
        Path to <project>/package.json.
    """
    return (project_dir or get_project_dir()) / MANIFEST_FILENAME


def resolve_project_path(relative: str | Path, project_dir: Path | None = None) -> Path:
    """Resolve a configured project-relative path against the project root.

    Absolute paths are returned unchanged.

    Args:
        relative: Path from configuration, e.g. "components/ui".
        project_dir: Project root. If None, uses the current directory.

    Returns:
        Absolute path inside the project.
    """
    path = Path(relative)
    if path.is_absolute():
        return path
    return (project_dir or get_project_dir()) / path


def display_path(path: Path, project_dir: Path | None = None) -> str:
    """Render a path relative to the project root for user-facing output.

    Args:
        path: Path to render.
        project_dir: Project root. If None, uses the current directory.

    Returns:
        "./relative/path" when inside the project, otherwise the path as-is.
    """
    root = project_dir or get_project_dir()
    try:
        return f"./{path.relative_to(root).as_posix()}"
    except ValueError:
        return str(path)
