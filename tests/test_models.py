"""
tests/test_models.py
─────────────────────
Tests for Pydantic v2 data models.
"""
import pytest
from pydantic import ValidationError

from config.alerts import AlertLevel
from src.data.models import (
    AdviceRequest,
    AdviceResponse,
    BatterySnapshot,
    HealthAssessment,
    MemoryUsage,
    PerformanceSnapshot,
    WeatherSnapshot,
)


class TestBatterySnapshot:
    def test_valid(self, healthy_battery):
        assert healthy_battery.level == 80
        assert healthy_battery.charging_time is None
        assert healthy_battery.timestamp.tzinfo is not None

    @pytest.mark.parametrize("level", [-1, 101])
    def test_level_bounds(self, level):
        with pytest.raises(ValidationError):
            BatterySnapshot(level=level, charging=False)

    def test_negative_time_rejected(self):
        with pytest.raises(ValidationError):
            BatterySnapshot(level=50, charging=False, discharging_time=-1.0)

    def test_frozen(self, healthy_battery):
        with pytest.raises(ValidationError):
            healthy_battery.level = 10


class TestWeatherSnapshot:
    def test_humidity_bounds(self):
        with pytest.raises(ValidationError):
            WeatherSnapshot(temperature=20.0, humidity=120, wind_speed=1.0, weather_code=0, uv_index=1)

    def test_negative_temperature_allowed(self):
        snap = WeatherSnapshot(temperature=-12.5, humidity=80, wind_speed=0.0, weather_code=71, uv_index=0)
        assert snap.temperature == -12.5


class TestPerformanceSnapshot:
    def test_all_fields_optional(self):
        snap = PerformanceSnapshot()
        assert snap.cpu_load is None
        assert snap.memory is None

    def test_cpu_bounds(self):
        with pytest.raises(ValidationError):
            PerformanceSnapshot(cpu_load=150)

    def test_memory(self):
        snap = PerformanceSnapshot(memory=MemoryUsage(used=80.0, total=256.0))
        assert snap.memory.total == 256.0


class TestHealthAssessment:
    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            HealthAssessment(health_score=101)

    def test_level_coerced(self):
        assessment = HealthAssessment(health_score=70, alert_level="warning")
        assert assessment.alert_level == AlertLevel.WARNING


class TestAdvice:
    def test_request_state_lowercase_only(self):
        with pytest.raises(ValidationError):
            AdviceRequest(battery_temp=30.0, ambient_temp=20.0, device_state="flying")

    def test_request_dump(self):
        req = AdviceRequest(battery_temp=30.0, ambient_temp=20.0, device_state="charging")
        assert req.model_dump(mode="json") == {"battery_temp": 30.0, "ambient_temp": 20.0, "device_state": "charging"}

    def test_response_optional_fields(self):
        resp = AdviceResponse.model_validate({"alert_level": "safe", "natural_language_tip": "Fine."})
        assert resp.predicted_health_impact is None
        assert resp.optional_action is None

    def test_response_requires_tip(self):
        with pytest.raises(ValidationError):
            AdviceResponse.model_validate({"alert_level": "safe"})
