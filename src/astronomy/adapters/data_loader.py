"""Data loaders that fetch raw response bytes."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

_logger = logging.getLogger(__name__)


class DataLoaderError(Exception):
    """Raised when a data loader cannot produce bytes."""


class DataLoader(Protocol):
    """Interface for fetching raw bytes from a request or URL."""

    async def load_request(self, request: httpx.Request) -> bytes:
        """Send a prepared request and return the response body."""

    async def load_url(self, url: str) -> bytes:
        """GET a URL and return the response body."""


@dataclass
class HttpxDataLoader(DataLoader):
    """Data loader backed by httpx."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = 15.0

    @classmethod
    def create(cls, timeout_seconds: float = 15.0) -> "HttpxDataLoader":
        """Create a data loader with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(timeout=timeout_seconds),
            timeout_seconds=timeout_seconds,
        )

    async def load_request(self, request: httpx.Request) -> bytes:
        """Send a prepared request."""
        _logger.debug("Loading %s %s", request.method, request.url)
        request.extensions.setdefault(
            "timeout", httpx.Timeout(self.timeout_seconds).as_dict()
        )
        response = await self.http_client.send(request)
        return _checked_content(response)

    async def load_url(self, url: str) -> bytes:
        """GET a URL."""
        _logger.debug("Loading GET %s", url)
        response = await self.http_client.get(url, timeout=self.timeout_seconds)
        return _checked_content(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _checked_content(response: httpx.Response) -> bytes:
    """Return the body of a successful response."""
    if not response.is_success:
        _logger.warning(
            "Load failed: %s %s -> %s",
            response.request.method,
            response.request.url,
            response.status_code,
        )
    response.raise_for_status()
    return response.content


@dataclass
class ScriptedDataLoader(DataLoader):
    """Data loader that answers every call with fixed bytes or a fixed error."""

    data: bytes | None = None
    error: Exception | None = None
    delay_seconds: float = 0.0
    request: httpx.Request | None = None
    url: str | None = None

    async def load_request(self, request: httpx.Request) -> bytes:
        """Record the request and return the scripted outcome."""
        self.request = request
        return await self._respond()

    async def load_url(self, url: str) -> bytes:
        """Record the URL and return the scripted outcome."""
        self.url = url
        return await self._respond()

    async def _respond(self) -> bytes:
        await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        if self.data is None:
            raise DataLoaderError("no data")
        return self.data
