"""Registry access for devcn-ui.

This module exports the registry client and its error type.
"""

from devcn_ui.registry.client import (
    RegistryClient,
    RegistryFetchError,
    load_index,
    load_snapshot,
)

__all__ = ["RegistryClient", "RegistryFetchError", "load_index", "load_snapshot"]
