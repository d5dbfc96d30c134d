"""Registry HTTP client.

Fetches component descriptors and the component listing from the Devcn UI
registry. Requests are plain GETs without retries; no timeout is applied, so
callers that need bounded latency must enforce it themselves.
"""

import json
import logging
import time
from importlib import resources
from typing import Any
from urllib.parse import quote

import httpx

from devcn_ui.core.config import DEFAULT_REGISTRY_URL
from devcn_ui.models.component import ComponentDescriptor, RegistryIndex

logger = logging.getLogger(__name__)


class RegistryFetchError(Exception):
    """Raised when a registry resource cannot be fetched or parsed.

    Attributes:
        status_code: HTTP status of the response, if one was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RegistryClient:
    """Client for the component registry.

    Attributes:
        base_url: Registry base URL without a trailing slash.

    Example:
        >>> client = RegistryClient("https://devcn-ui.dedevs.com")
        >>> descriptor = client.fetch_component("ai-message")
        >>> [f.path for f in descriptor.files]
    """

    def __init__(
        self,
        base_url: str = DEFAULT_REGISTRY_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Registry base URL.
            transport: Optional httpx transport (used to stub the network).
        """
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def component_url(self, name: str) -> str:
        """Return the descriptor URL for a component."""
        return f"{self.base_url}/r/{quote(name, safe='')}.json"

    def index_url(self) -> str:
        """Return the URL of the full registry listing."""
        return f"{self.base_url}/registry.json"

    def fetch_json(self, url: str) -> Any:
        """GET a URL and parse its body as JSON.

        Args:
            url: Absolute URL to fetch.

        Returns:
            Parsed JSON value.

        Raises:
            RegistryFetchError: On transport errors, non-200 responses or
                bodies that are not valid JSON.
        """
        start_time = time.monotonic()
        logger.debug("Starting GET request to %s", url)

        try:
            with httpx.Client(
                transport=self._transport,
                timeout=None,
                follow_redirects=True,
            ) as client:
                response = client.get(url)
        except httpx.RequestError as e:
            logger.debug("GET %s failed: %s", url, e)
            raise RegistryFetchError(f"Failed to fetch registry: {e}") from e

        logger.debug(
            "GET %s -> %d (%.2fs, %d bytes)",
            url,
            response.status_code,
            time.monotonic() - start_time,
            len(response.content),
        )

        if response.status_code != 200:
            raise RegistryFetchError(
                f"Failed to fetch registry: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise RegistryFetchError(f"Failed to parse JSON response: {e}") from e

    def fetch_component(self, name: str) -> ComponentDescriptor:
        """Fetch the descriptor of a single component.

        Args:
            name: Component name, e.g. "ai-message".

        Returns:
            ComponentDescriptor with the component's files.

        Raises:
            RegistryFetchError: If the descriptor cannot be fetched or parsed.
        """
        data = self.fetch_json(self.component_url(name))
        if not isinstance(data, dict):
            raise RegistryFetchError(
                f"Failed to parse JSON response: expected an object for '{name}'"
            )
        descriptor = ComponentDescriptor.from_dict(name, data)
        logger.info("Fetched %s (%d file(s))", name, len(descriptor.files))
        return descriptor

    def fetch_index(self) -> RegistryIndex:
        """Fetch the full registry listing.

        Returns:
            RegistryIndex built from the remote listing.

        Raises:
            RegistryFetchError: If the listing cannot be fetched, parsed or
                does not have the expected shape.
        """
        data = self.fetch_json(self.index_url())
        if not isinstance(data, dict):
            raise RegistryFetchError("Invalid registry format: expected an object")
        try:
            return RegistryIndex.from_dict(data)
        except ValueError as e:
            raise RegistryFetchError(str(e)) from e


def load_snapshot() -> RegistryIndex:
    """Load the registry listing snapshot bundled with the CLI.

    Returns:
        RegistryIndex marked as fallback.
    """
    source = resources.files("devcn_ui.data").joinpath("registry.json")
    data = json.loads(source.read_text(encoding="utf-8"))
    return RegistryIndex.from_dict(data, is_fallback=True)


def load_index(client: RegistryClient) -> RegistryIndex:
    """Fetch the registry listing, falling back to the bundled snapshot.

    Args:
        client: Registry client to fetch with.

    Returns:
        The remote listing, or the snapshot if it could not be retrieved.
    """
    try:
        return client.fetch_index()
    except RegistryFetchError as e:
        logger.info("Registry listing unavailable, using local snapshot: %s", e)
        return load_snapshot()
