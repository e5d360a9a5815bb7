"""Mars rover domain models decoded from the Mars Rover Photos API."""

import re
from datetime import UTC, date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

API_DATE_FORMAT = "%Y-%m-%d"
_API_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_api_date(value: object) -> date:
    """Parse a ``yyyy-MM-dd`` API date on the UTC calendar."""
    if isinstance(value, datetime):
        return value.astimezone(UTC).date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _API_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"expected a yyyy-MM-dd date, got {value!r}")
    return datetime.strptime(value, API_DATE_FORMAT).replace(tzinfo=UTC).date()


def format_api_date(value: date) -> str:
    """Render a date in the API's ``yyyy-MM-dd`` format."""
    return value.strftime(API_DATE_FORMAT)


class RoverStatus(Enum):
    """Mission status of a rover."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class _ApiModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SolDescription(_ApiModel):
    """Photo summary for a single sol."""

    sol: int
    earth_date: date
    total_photos: int = Field(ge=0)
    cameras: list[str] = Field(default_factory=list)

    @field_validator("earth_date", mode="before")
    @classmethod
    def _parse_date(cls, value: object) -> date:
        return parse_api_date(value)


class MarsRover(_ApiModel):
    """Rover mission metadata from its photo manifest."""

    name: str
    launch_date: date
    landing_date: date
    status: RoverStatus
    max_sol: int
    max_date: date
    number_of_photos: int = Field(alias="total_photos", ge=0)
    sol_descriptions: list[SolDescription] = Field(
        alias="photos", default_factory=list
    )

    @field_validator("launch_date", "landing_date", "max_date", mode="before")
    @classmethod
    def _parse_dates(cls, value: object) -> date:
        return parse_api_date(value)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: object) -> object:
        # Finished missions are reported as "complete".
        if value == "complete":
            return RoverStatus.INACTIVE
        return value


class Camera(_ApiModel):
    """Camera that took a photo."""

    id: int
    name: str
    rover_id: int | None = None
    full_name: str | None = None


class MarsPhotoReference(_ApiModel):
    """Reference to a single rover photo."""

    id: int
    sol: int
    camera: Camera
    earth_date: date | None = None
    image_url: str | None = Field(default=None, alias="img_src")

    @field_validator("earth_date", mode="before")
    @classmethod
    def _parse_date(cls, value: object) -> date | None:
        if value is None:
            return None
        return parse_api_date(value)


class RoverManifestPayload(_ApiModel):
    """Envelope of the manifests endpoint."""

    photo_manifest: MarsRover


class PhotoListingPayload(_ApiModel):
    """Envelope of the photos endpoint."""

    photos: list[MarsPhotoReference]
