"""
tests/test_thresholds.py
─────────────────────────
Tests for display threshold bands.
"""
import pytest

from config.thresholds import DEFAULT_THRESHOLDS
from src.analytics.thresholds import (
    STATUS_COLORS,
    ThresholdBand,
    evaluate_current_value,
    get_threshold_band,
    get_value_color,
)


class TestGetThresholdBand:
    def test_device_temperature(self):
        band = get_threshold_band("device_temp")
        assert band.warning == 35.0
        assert band.critical == 40.0
        assert band.lower_bound is None

    def test_ambient_has_lower_bound(self):
        band = get_threshold_band("ambient_temp")
        assert band.warning == DEFAULT_THRESHOLDS.ambient_hot_c
        assert band.lower_bound == DEFAULT_THRESHOLDS.ambient_cold_c

    def test_battery_level(self):
        band = get_threshold_band("battery_level")
        assert band.lower_bound == 20

    def test_unknown_variable(self):
        band = get_threshold_band("humidity")
        assert band.warning is None
        assert band.critical is None


class TestEvaluateCurrentValue:
    @pytest.fixture
    def band(self):
        return ThresholdBand("device_temp", warning=35.0, critical=40.0)

    @pytest.mark.parametrize(
        "value,expected",
        [(25.0, "ok"), (35.0, "ok"), (35.1, "warning"), (40.0, "warning"), (40.1, "critical")],
    )
    def test_exclusive_edges(self, band, value, expected):
        assert evaluate_current_value(value, band) == expected

    def test_none_is_unknown(self, band):
        assert evaluate_current_value(None, band) == "unknown"

    def test_below_lower_bound(self):
        band = get_threshold_band("battery_level")
        assert evaluate_current_value(15, band) == "warning"
        assert evaluate_current_value(20, band) == "ok"

    def test_color(self, band):
        assert get_value_color(45.0, band) == STATUS_COLORS["critical"]
