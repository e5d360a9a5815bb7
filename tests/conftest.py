"""Shared test fixtures."""

import json
from datetime import date

import pytest

from astronomy.adapters.data_loader import ScriptedDataLoader
from astronomy.config import Settings
from astronomy.domain.rovers import MarsRover, RoverStatus

VALID_ROVER_JSON = json.dumps(
    {
        "photo_manifest": {
            "name": "Curiosity",
            "landing_date": "2012-08-06",
            "launch_date": "2011-11-26",
            "status": "active",
            "max_sol": 4,
            "max_date": "2012-08-10",
            "total_photos": 4156,
            "photos": [
                {
                    "sol": 0,
                    "earth_date": "2012-08-06",
                    "total_photos": 3702,
                    "cameras": ["CHEMCAM", "FHAZ", "MARDI", "RHAZ"],
                },
                {
                    "sol": 1,
                    "earth_date": "2012-08-07",
                    "total_photos": 16,
                    "cameras": ["MAHLI", "MAST", "NAVCAM"],
                },
                {
                    "sol": 2,
                    "earth_date": "2012-08-08",
                    "total_photos": 74,
                    "cameras": ["CHEMCAM", "FHAZ", "NAVCAM", "RHAZ"],
                },
                {
                    "sol": 3,
                    "earth_date": "2012-08-09",
                    "total_photos": 139,
                    "cameras": ["MAHLI", "MAST", "NAVCAM"],
                },
                {
                    "sol": 4,
                    "earth_date": "2012-08-10",
                    "total_photos": 225,
                    "cameras": ["FHAZ", "MAST", "NAVCAM", "RHAZ"],
                },
            ],
        }
    }
).encode()

VALID_SOL1_JSON = json.dumps(
    {
        "photos": [
            {
                "id": 4477,
                "sol": 1,
                "camera": {
                    "id": 22,
                    "name": "MAST",
                    "rover_id": 5,
                    "full_name": "Mast Camera",
                },
                "img_src": "http://mars.jpl.nasa.gov/msl-raw-images/msss/00001/mcam/0001ML0000001000I1_DXXX.jpg",
                "earth_date": "2012-08-07",
            },
            {
                "id": 4429,
                "sol": 1,
                "camera": {
                    "id": 24,
                    "name": "MAHLI",
                    "rover_id": 5,
                    "full_name": "Mars Hand Lens Imager",
                },
                "img_src": "http://mars.jpl.nasa.gov/msl-raw-images/msss/00001/mhli/0001MH0000001000I1_DXXX.jpg",
                "earth_date": "2012-08-07",
            },
        ]
    }
).encode()


class _TestError(Exception):
    """Error injected into scripted loaders."""


@pytest.fixture
def settings() -> Settings:
    return Settings(
        nasa_api_key="test-key",
        nasa_base_url="https://api.test/mars-photos/api/v1",
    )


@pytest.fixture
def rover() -> MarsRover:
    return MarsRover(
        name="Curiosity",
        launch_date=date(2011, 11, 26),
        landing_date=date(2012, 8, 6),
        status=RoverStatus.ACTIVE,
        max_sol=100,
        max_date=date(2012, 11, 14),
        number_of_photos=999999,
        sol_descriptions=[],
    )


@pytest.fixture
def rover_loader() -> ScriptedDataLoader:
    return ScriptedDataLoader(data=VALID_ROVER_JSON, delay_seconds=0.01)


@pytest.fixture
def photos_loader() -> ScriptedDataLoader:
    return ScriptedDataLoader(data=VALID_SOL1_JSON, delay_seconds=0.01)


@pytest.fixture
def failing_loader() -> ScriptedDataLoader:
    return ScriptedDataLoader(error=_TestError("boom"), delay_seconds=0.01)
