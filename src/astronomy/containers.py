"""Dependency container wiring for the client."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from astronomy.adapters.data_loader import DataLoader, HttpxDataLoader
from astronomy.config import Settings
from astronomy.services.rovers import MarsRoverClient


@dataclass
class AppContainer:
    """Holds client-wide dependencies."""

    settings: Settings
    data_loader: DataLoader
    rover_client: MarsRoverClient
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    data_loader = HttpxDataLoader.create(
        timeout_seconds=resolved_settings.request_timeout_seconds
    )
    rover_client = MarsRoverClient(
        data_loader=data_loader,
        api_key=resolved_settings.nasa_api_key,
        base_url=resolved_settings.nasa_base_url,
    )

    async def close_resources() -> None:
        await data_loader.close()

    return AppContainer(
        settings=resolved_settings,
        data_loader=data_loader,
        rover_client=rover_client,
        close_resources=close_resources,
    )
