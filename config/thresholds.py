"""
config/thresholds.py
────────────────────
Health advisory thresholds and score penalties.

Device temperature tiers (°C):
  ≤ warning   → optimal
  > warning   → warning  (−15)
  > critical  → danger   (−25)

Rules are evaluated in a fixed order (device temperature, battery,
weather, performance) and severities combine with max(), so editing any
value below cannot change which rule wins a severity tie.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class TemperatureTiers:
    """Device temperature tier boundaries in °C."""
    warning: float   # > warning → warning
    critical: float  # > critical → danger


@dataclass(frozen=True)
class HealthThresholds:
    device_temp: TemperatureTiers
    charging_hot_c: float          # charging while device_temp > this
    low_battery_pct: float         # level < this
    ambient_hot_c: float           # weather temperature > this
    ambient_cold_c: float          # weather temperature < this
    cpu_high_pct: float            # cpu_load > this
    gaming_warm_c: float           # scenario analyzer extra advice above this
    penalties: dict[str, int]


DEFAULT_THRESHOLDS = HealthThresholds(
    device_temp=TemperatureTiers(warning=35.0, critical=40.0),
    charging_hot_c=35.0,
    low_battery_pct=20.0,
    ambient_hot_c=30.0,
    ambient_cold_c=10.0,
    cpu_high_pct=80.0,
    gaming_warm_c=30.0,
    penalties={
        "device_temp_critical": 25,
        "device_temp_warning": 15,
        "charging_hot": 10,
        "low_battery": 5,
        "ambient_hot": 8,
        "ambient_cold": 3,
        "cpu_high": 10,
    },
)

MAX_HEALTH_SCORE = 100
MIN_HEALTH_SCORE = 0
