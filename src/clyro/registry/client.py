"""HTTP client for the CDN-hosted component registry."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from clyro.config import Settings
from clyro.errors import RegistryError, RegistryUnavailableError
from clyro.registry.model import ComponentDescriptor, RegistryComponent

log = logging.getLogger(__name__)


class RegistryClient:
    """Thin wrapper around :mod:`httpx` that maps failures into clyro errors."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._client = httpx.Client(
            timeout=httpx.Timeout(self.settings.timeout),
            follow_redirects=True,
        )

    def __enter__(self) -> RegistryClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_json(self, url: str) -> Any:
        """GET *url* and decode the JSON body.

        Raises RegistryUnavailableError on transport failure or non-2xx status,
        RegistryError if the body is not JSON.
        """
        log.debug("GET %s", url)
        try:
            resp = self._client.get(url)
        except httpx.TimeoutException as exc:
            raise RegistryUnavailableError(
                f"Request timed out: {url}", url=url, cause=exc
            ) from exc
        except httpx.HTTPError as exc:
            raise RegistryUnavailableError(
                f"Network error: {exc}", url=url, cause=exc
            ) from exc

        if resp.status_code >= 300:
            raise RegistryUnavailableError(
                f"HTTP {resp.status_code} {resp.reason_phrase}".rstrip(),
                url=url,
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise RegistryError(f"Invalid JSON from {url}", url=url, cause=exc) from exc

    def fetch_registry(self) -> dict[str, RegistryComponent]:
        """Load the registry index, keyed by component name."""
        data = self._get_json(self.settings.registry_url)
        raw = data.get("components") if isinstance(data, dict) else None
        if not isinstance(raw, dict):
            return {}
        return {
            name: RegistryComponent.from_dict(name, entry)
            for name, entry in raw.items()
            if isinstance(entry, dict)
        }

    def component_url(self, name: str, tsx: bool = True) -> str:
        extension = "tsx" if tsx else "jsx"
        base = self.settings.component_base_url.rstrip("/")
        return f"{base}/{name}/{name}.{extension}.json"

    def fetch_component(self, name: str, tsx: bool = True) -> ComponentDescriptor:
        """Download the descriptor for *name* in its TSX or JSX flavour."""
        url = self.component_url(name, tsx=tsx)
        return ComponentDescriptor.from_dict(self._get_json(url), url=url)

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
