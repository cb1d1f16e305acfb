"""
tests/test_sources.py
──────────────────────
Tests for the battery, weather and performance sources.
External calls (psutil, requests) are replaced with fakes.
"""
import numpy as np
import psutil
import requests

from conftest import FakeBattery
from src.data import performance as performance_mod
from src.data import weather as weather_mod
from src.data.battery import ERROR_LEVEL, UNSUPPORTED_LEVEL, BatterySource
from src.data.models import SourceStatus, WeatherSnapshot
from src.data.weather import FALLBACK_WEATHER, WeatherSource, parse_current


class TestBatterySource:
    def test_reads_discharging_battery(self):
        source = BatterySource(reader=lambda: FakeBattery(percent=63.6, secsleft=3600, power_plugged=False))
        snap = source.read()
        assert source.status == SourceStatus.CONNECTED
        assert snap.level == 64
        assert snap.charging is False
        assert snap.discharging_time == 3600.0
        assert snap.charging_time is None

    def test_plugged_in_has_unbounded_discharge(self):
        source = BatterySource(reader=lambda: FakeBattery(percent=90.0, secsleft=psutil.POWER_TIME_UNLIMITED, power_plugged=True))
        snap = source.read()
        assert snap.charging is True
        assert snap.discharging_time is None

    def test_unsupported_uses_simulated_data(self):
        source = BatterySource(reader=lambda: None)
        snap = source.read()
        assert source.status == SourceStatus.DISCONNECTED
        assert snap.level == UNSUPPORTED_LEVEL

    def test_error_uses_simulated_data(self):
        def broken():
            raise OSError("sensor read failed")

        source = BatterySource(reader=broken)
        snap = source.read()
        assert source.status == SourceStatus.DISCONNECTED
        assert snap.level == ERROR_LEVEL
        assert source.last_error == "sensor read failed"

    def test_retry_recovers(self):
        readings = iter([None, FakeBattery(percent=50.0, secsleft=100, power_plugged=False)])
        source = BatterySource(reader=lambda: next(readings))
        source.read()
        assert source.status == SourceStatus.DISCONNECTED
        snap = source.retry()
        assert source.status == SourceStatus.CONNECTED
        assert snap.level == 50


class TestParseCurrent:
    def test_maps_fields(self, open_meteo_payload):
        snap = parse_current(open_meteo_payload)
        assert isinstance(snap, WeatherSnapshot)
        assert snap.temperature == 18.4
        assert snap.humidity == 71
        assert snap.wind_speed == 12.6
        assert snap.weather_code == 3
        assert snap.uv_index == 4


class TestWeatherSource:
    def test_successful_fetch(self, monkeypatch, open_meteo_payload, fake_response):
        calls = []

        def fake_get(url, params=None, timeout=None):
            calls.append({"url": url, "params": params, "timeout": timeout})
            return fake_response(open_meteo_payload)

        monkeypatch.setattr(weather_mod.requests, "get", fake_get)
        source = WeatherSource(locator=lambda: (52.52, 13.41))
        snap = source.read()

        assert source.status == SourceStatus.CONNECTED
        assert snap.temperature == 18.4
        assert calls[0]["params"]["latitude"] == 52.52
        assert calls[0]["params"]["current"] == weather_mod.CURRENT_FIELDS
        assert calls[0]["params"]["timezone"] == "auto"
        assert calls[0]["timeout"] == 10

    def test_location_denied_uses_fallback(self):
        source = WeatherSource(locator=lambda: None)
        snap = source.read()
        assert source.status == SourceStatus.DISCONNECTED
        assert snap.temperature == FALLBACK_WEATHER["temperature"]
        assert snap.humidity == FALLBACK_WEATHER["humidity"]

    def test_timeout_uses_fallback(self, monkeypatch):
        def fake_get(*args, **kwargs):
            raise requests.Timeout("timed out")

        monkeypatch.setattr(weather_mod.requests, "get", fake_get)
        source = WeatherSource(locator=lambda: (1.0, 2.0))
        snap = source.read()
        assert source.status == SourceStatus.DISCONNECTED
        assert snap.weather_code == FALLBACK_WEATHER["weather_code"]

    def test_http_error_uses_fallback(self, monkeypatch, fake_response):
        monkeypatch.setattr(weather_mod.requests, "get", lambda *a, **k: fake_response({}, status_code=503))
        source = WeatherSource(locator=lambda: (1.0, 2.0))
        snap = source.read()
        assert source.status == SourceStatus.DISCONNECTED
        assert snap.uv_index == FALLBACK_WEATHER["uv_index"]

    def test_malformed_body_uses_fallback(self, monkeypatch, fake_response):
        monkeypatch.setattr(weather_mod.requests, "get", lambda *a, **k: fake_response({"hourly": {}}))
        source = WeatherSource(locator=lambda: (1.0, 2.0))
        source.read()
        assert source.status == SourceStatus.DISCONNECTED

    def test_retry_reuses_last_coordinates(self, monkeypatch, open_meteo_payload, fake_response):
        located = []

        def locator():
            located.append(True)
            return (10.0, 20.0)

        monkeypatch.setattr(weather_mod.requests, "get", lambda *a, **k: fake_response(open_meteo_payload))
        source = WeatherSource(locator=locator)
        source.read()
        source.retry()
        assert len(located) == 1
        assert source.coordinates == (10.0, 20.0)

    def test_retry_without_coordinates_requests_location(self):
        located = []

        def locator():
            located.append(True)
            return None

        source = WeatherSource(locator=locator)
        source.retry()
        assert len(located) == 1
        assert source.status == SourceStatus.DISCONNECTED


class TestPerformance:
    def test_cpu_load_in_band(self, rng):
        for _ in range(50):
            snap = performance_mod.sample_performance(rng)
            assert 15 <= snap.cpu_load < 55

    def test_reports_memory_and_cores(self, rng):
        snap = performance_mod.sample_performance(rng)
        assert snap.memory is not None
        assert snap.memory.used > 0
        assert snap.network_type in ("online", "offline", None)

    def test_memory_simulated_when_unavailable(self, monkeypatch):
        def denied():
            raise psutil.AccessDenied()

        monkeypatch.setattr(performance_mod.psutil, "Process", denied)
        snap = performance_mod.sample_performance(np.random.default_rng(1))
        low, high = performance_mod.SIMULATED_MEMORY_USED_MB
        assert low <= snap.memory.used <= high
        assert snap.memory.total == performance_mod.SIMULATED_MEMORY_TOTAL_MB
