"""
src/data/weather.py
───────────────────
Current-conditions weather source (Open-Meteo forecast API).

Location comes from a locator callable returning (latitude, longitude) or
None when the location is unavailable. Any failure (no location, network
error, timeout, non-2xx, malformed body) yields FALLBACK_WEATHER and a
`disconnected` status.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

import requests

from config.settings import settings
from src.data.models import SourceStatus, WeatherSnapshot

logger = logging.getLogger(__name__)

Coordinates = tuple[float, float]

CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,weather_code,wind_speed_10m,uv_index"

FALLBACK_WEATHER = {
    "temperature": 22.5,
    "humidity": 65,
    "wind_speed": 3.2,
    "weather_code": 1,
    "uv_index": 3,
}


class LocationUnavailable(Exception):
    """Raised when no coordinates can be obtained."""


def configured_location() -> Coordinates | None:
    """Default locator: coordinates from LATITUDE / LONGITUDE settings."""
    if settings.LATITUDE is None or settings.LONGITUDE is None:
        return None
    return settings.LATITUDE, settings.LONGITUDE


def fallback_snapshot() -> WeatherSnapshot:
    return WeatherSnapshot(**FALLBACK_WEATHER)


def parse_current(payload: dict) -> WeatherSnapshot:
    """Map an Open-Meteo `current` block to a WeatherSnapshot."""
    current = payload["current"]
    return WeatherSnapshot(
        temperature=float(current["temperature_2m"]),
        humidity=int(round(current["relative_humidity_2m"])),
        wind_speed=float(current["wind_speed_10m"]),
        weather_code=int(current["weather_code"]),
        uv_index=int(round(current.get("uv_index") or 0)),
    )


def fetch_weather(
    latitude: float,
    longitude: float,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> WeatherSnapshot:
    """Fetch current conditions. Raises requests.RequestException / ValueError / KeyError."""
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current": CURRENT_FIELDS,
        "timezone": "auto",
    }
    http = session or requests
    response = http.get(
        settings.WEATHER_API_URL,
        params=params,
        timeout=timeout if timeout is not None else settings.WEATHER_TIMEOUT_S,
    )
    response.raise_for_status()
    return parse_current(response.json())


class WeatherSource:
    def __init__(
        self,
        locator: Callable[[], Coordinates | None] = configured_location,
        session: requests.Session | None = None,
    ):
        self._locator = locator
        self._session = session
        self.status = SourceStatus.DISCONNECTED
        self.snapshot: WeatherSnapshot | None = None
        self.coordinates: Coordinates | None = None
        self.last_error: str | None = None

    def _locate(self) -> Coordinates:
        coords = self._locator()
        if coords is None:
            raise LocationUnavailable("location unavailable")
        self.coordinates = coords
        return coords

    def _load(self, coords: Coordinates | None) -> WeatherSnapshot:
        self.status = SourceStatus.RETRYING
        try:
            latitude, longitude = coords if coords is not None else self._locate()
            self.snapshot = fetch_weather(latitude, longitude, session=self._session)
        except (LocationUnavailable, requests.RequestException, ValueError, KeyError, TypeError) as exc:
            logger.warning("Weather unavailable, using fallback data: %s", exc)
            self.last_error = str(exc)
            self.status = SourceStatus.DISCONNECTED
            self.snapshot = fallback_snapshot()
            return self.snapshot

        self.last_error = None
        self.status = SourceStatus.CONNECTED
        return self.snapshot

    def read(self) -> WeatherSnapshot:
        """Scheduled refresh: re-requests location every time."""
        return self._load(None)

    def retry(self) -> WeatherSnapshot:
        """User retry: re-use the last known coordinates if there are any."""
        logger.info("Retrying weather source")
        return self._load(self.coordinates)
