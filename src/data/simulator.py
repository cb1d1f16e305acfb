"""
src/data/simulator.py
─────────────────────
Device temperature simulator.

  T = 25
    + 0.3 × (ambient − 20)           if weather is known
    + 3                              if the battery is charging
    + 8 × cpu_load / 100             if CPU load is known
    + U(−1, 1)                       jitter
  clamped to [20, 50] °C

Reproducible with SIMULATION_SEED for consistent demos.
"""
from __future__ import annotations

import numpy as np

from config.settings import settings
from src.data.models import BatterySnapshot, PerformanceSnapshot, WeatherSnapshot

BASELINE_C = 25.0
AMBIENT_REFERENCE_C = 20.0
AMBIENT_FACTOR = 0.3
CHARGING_OFFSET_C = 3.0
CPU_MAX_OFFSET_C = 8.0
JITTER_C = 1.0
MIN_TEMP_C = 20.0
MAX_TEMP_C = 50.0


def make_rng(seed: int | None = settings.SIMULATION_SEED) -> np.random.Generator:
    return np.random.default_rng(seed)


def simulate_device_temperature(
    rng: np.random.Generator,
    weather: WeatherSnapshot | None = None,
    battery: BatterySnapshot | None = None,
    performance: PerformanceSnapshot | None = None,
) -> float:
    """Return one simulated device temperature reading in °C."""
    temp = BASELINE_C

    if weather is not None:
        temp += (weather.temperature - AMBIENT_REFERENCE_C) * AMBIENT_FACTOR
    if battery is not None and battery.charging:
        temp += CHARGING_OFFSET_C
    if performance is not None and performance.cpu_load is not None:
        temp += performance.cpu_load / 100.0 * CPU_MAX_OFFSET_C

    temp += rng.uniform(-JITTER_C, JITTER_C)
    return round(float(np.clip(temp, MIN_TEMP_C, MAX_TEMP_C)), 1)
