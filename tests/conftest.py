"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the ThermoSense test suite.
"""
import os
from collections import namedtuple
from datetime import datetime, timezone

import numpy as np
import pytest

# Keep tests offline and deterministic
os.environ.setdefault("SIMULATION_SEED", "42")
os.environ.setdefault("WEATHER_API_URL", "http://weather.test/v1/forecast")
os.environ.setdefault("ADVICE_API_URL", "http://advice.test/api/advice")

# Same shape as psutil's sbattery
FakeBattery = namedtuple("FakeBattery", ["percent", "secsleft", "power_plugged"])


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def charging_low_battery():
    from src.data.models import BatterySnapshot
    return BatterySnapshot(level=15, charging=True)


@pytest.fixture
def healthy_battery():
    from src.data.models import BatterySnapshot
    return BatterySnapshot(level=80, charging=False, discharging_time=7200.0)


@pytest.fixture
def hot_weather():
    from src.data.models import WeatherSnapshot
    return WeatherSnapshot(temperature=32.0, humidity=40, wind_speed=5.0, weather_code=0, uv_index=8)


@pytest.fixture
def mild_weather():
    from src.data.models import WeatherSnapshot
    return WeatherSnapshot(temperature=20.0, humidity=55, wind_speed=3.0, weather_code=2, uv_index=3)


@pytest.fixture
def busy_performance():
    from src.data.models import PerformanceSnapshot
    return PerformanceSnapshot(cpu_load=85, cores=8)


@pytest.fixture
def open_meteo_payload() -> dict:
    return {
        "latitude": 52.52,
        "longitude": 13.41,
        "current": {
            "time": "2024-06-01T12:00",
            "temperature_2m": 18.4,
            "relative_humidity_2m": 71,
            "weather_code": 3,
            "wind_speed_10m": 12.6,
            "uv_index": 4.35,
        },
    }


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        import requests
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fresh_store():
    """Store with a fake battery, a fixed-location weather source and a seeded RNG."""
    from src.data import store
    from src.data.battery import BatterySource
    from src.data.weather import WeatherSource

    store.reset(
        battery_source=BatterySource(reader=lambda: FakeBattery(percent=64.0, secsleft=5400, power_plugged=False)),
        weather_source=WeatherSource(locator=lambda: None),
        rng=np.random.default_rng(7),
    )
    yield store
    store.reset()
