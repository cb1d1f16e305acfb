"""
tests/test_simulator.py
────────────────────────
Tests for the device temperature simulator.
"""
import numpy as np

from src.data.models import BatterySnapshot, PerformanceSnapshot, WeatherSnapshot
from src.data.simulator import MAX_TEMP_C, MIN_TEMP_C, simulate_device_temperature


def _weather(temp: float) -> WeatherSnapshot:
    return WeatherSnapshot(temperature=temp, humidity=50, wind_speed=1.0, weather_code=0, uv_index=1)


class TestSimulateDeviceTemperature:
    def test_baseline_within_jitter(self, rng):
        for _ in range(100):
            temp = simulate_device_temperature(rng)
            assert 24.0 <= temp <= 26.0

    def test_all_factors(self, rng):
        # 25 + (30-20)*0.3 + 3 + 50/100*8 = 35 ± 1
        for _ in range(100):
            temp = simulate_device_temperature(
                rng,
                weather=_weather(30.0),
                battery=BatterySnapshot(level=50, charging=True),
                performance=PerformanceSnapshot(cpu_load=50),
            )
            assert 34.0 <= temp <= 36.0

    def test_not_charging_adds_nothing(self):
        a = simulate_device_temperature(np.random.default_rng(3), battery=BatterySnapshot(level=50, charging=False))
        b = simulate_device_temperature(np.random.default_rng(3))
        assert a == b

    def test_clamped_high(self, rng):
        temp = simulate_device_temperature(
            rng,
            weather=_weather(120.0),
            battery=BatterySnapshot(level=50, charging=True),
            performance=PerformanceSnapshot(cpu_load=100),
        )
        assert temp == MAX_TEMP_C

    def test_clamped_low(self, rng):
        temp = simulate_device_temperature(rng, weather=_weather(-40.0))
        assert temp == MIN_TEMP_C

    def test_reproducible_with_seed(self):
        a = [simulate_device_temperature(np.random.default_rng(99)) for _ in range(3)]
        b = [simulate_device_temperature(np.random.default_rng(99)) for _ in range(3)]
        assert a == b

    def test_empty_performance_ignored(self):
        a = simulate_device_temperature(np.random.default_rng(5), performance=PerformanceSnapshot())
        b = simulate_device_temperature(np.random.default_rng(5))
        assert a == b
