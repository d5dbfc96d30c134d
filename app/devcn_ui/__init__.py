"""devcn-ui - add components from the Devcn UI registry to your project."""

from importlib.metadata import PackageNotFoundError, version

# Fallback used when the distribution metadata is not installed.
FALLBACK_VERSION = "0.0.3"

try:
    __version__ = version("devcn-ui")
except PackageNotFoundError:
    __version__ = FALLBACK_VERSION

__all__ = ["FALLBACK_VERSION", "__version__"]
