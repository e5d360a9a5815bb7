"""Mars rover client for manifests and photo listings."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from astronomy.adapters.data_loader import DataLoader
from astronomy.domain.rovers import (
    MarsPhotoReference,
    MarsRover,
    PhotoListingPayload,
    RoverManifestPayload,
)

NASA_BASE_URL = "https://api.nasa.gov/mars-photos/api/v1"

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Completion = Callable[[T | None, Exception | None], None]


class RoverFetchError(Exception):
    """Raised when a rover fetch fails in transport or while decoding."""


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a fetch: exactly one of value and error is set."""

    value: T | None = None
    error: RoverFetchError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the fetch produced a value."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the fetch error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


@dataclass
class MarsRoverClient:
    """Client for the Mars Rover Photos API."""

    data_loader: DataLoader
    api_key: str = "DEMO_KEY"
    base_url: str = NASA_BASE_URL

    def rover_url(self, name: str) -> str:
        """Build the manifest URL for a rover."""
        url = httpx.URL(
            f"{self.base_url}/manifests/{quote(name, safe='')}",
            params={"api_key": self.api_key},
        )
        return str(url)

    def photos_url(self, rover: MarsRover, sol: int) -> str:
        """Build the photo listing URL for a rover on a sol."""
        url = httpx.URL(
            f"{self.base_url}/rovers/{quote(rover.name, safe='')}/photos",
            params={"sol": sol, "api_key": self.api_key},
        )
        return str(url)

    async def fetch_mars_rover(
        self, name: str, completion: "Completion[MarsRover] | None" = None
    ) -> FetchResult[MarsRover]:
        """Fetch a rover's manifest by name."""
        result = await self._fetch(
            self.rover_url(name),
            lambda data: RoverManifestPayload.model_validate_json(data).photo_manifest,
            action=f"rover:{name}",
        )
        return _deliver(result, completion)

    async def fetch_photos(
        self,
        rover: MarsRover,
        sol: int,
        completion: "Completion[list[MarsPhotoReference]] | None" = None,
    ) -> FetchResult[list[MarsPhotoReference]]:
        """Fetch the photos a rover took on a sol, in API order."""
        result = await self._fetch(
            self.photos_url(rover, sol),
            lambda data: PhotoListingPayload.model_validate_json(data).photos,
            action=f"photos:{rover.name}:{sol}",
        )
        return _deliver(result, completion)

    async def _fetch(
        self, url: str, decode: Callable[[bytes], T], *, action: str
    ) -> FetchResult[T]:
        """Load a URL and decode its body, collapsing failures into one error."""
        try:
            data = await self.data_loader.load_url(url)
        except Exception as exc:
            _logger.warning("Rover fetch %s failed to load: %s", action, exc)
            return FetchResult(error=_fetch_error(action, exc))
        try:
            value = decode(data)
        except ValidationError as exc:
            _logger.warning("Rover fetch %s failed to decode: %s", action, exc)
            return FetchResult(error=_fetch_error(action, exc))
        return FetchResult(value=value)


def _fetch_error(action: str, cause: Exception) -> RoverFetchError:
    """Wrap a failure with its cause attached."""
    error = RoverFetchError(f"Rover fetch {action} failed")
    error.__cause__ = cause
    return error


def _deliver(
    result: FetchResult[T], completion: "Completion[T] | None"
) -> FetchResult[T]:
    """Hand a result to the optional completion, exactly once."""
    if completion is not None:
        completion(result.value, result.error)
    return result
