"""
src/analytics/thresholds.py
────────────────────────────
Threshold lookup for dashboard display.

Provides:
  - Threshold bands per displayed variable, derived from HealthThresholds
  - Classification of a current value into ok / warning / critical
  - Band colors for KPI cards and chart overlays
"""
from __future__ import annotations

from dataclasses import dataclass

from config.thresholds import DEFAULT_THRESHOLDS, HealthThresholds


@dataclass(frozen=True)
class ThresholdBand:
    variable: str
    warning: float | None
    critical: float | None
    lower_bound: float | None = None   # e.g. low battery, cold ambient


def get_threshold_band(variable: str, thresholds: HealthThresholds = DEFAULT_THRESHOLDS) -> ThresholdBand:
    """Return the display threshold band for a dashboard variable."""
    if variable == "device_temp":
        return ThresholdBand(
            variable=variable,
            warning=thresholds.device_temp.warning,
            critical=thresholds.device_temp.critical,
        )
    if variable == "ambient_temp":
        return ThresholdBand(
            variable=variable,
            warning=thresholds.ambient_hot_c,
            critical=None,
            lower_bound=thresholds.ambient_cold_c,
        )
    if variable == "battery_level":
        return ThresholdBand(
            variable=variable,
            warning=None,
            critical=None,
            lower_bound=thresholds.low_battery_pct,
        )
    if variable == "cpu_load":
        return ThresholdBand(
            variable=variable,
            warning=thresholds.cpu_high_pct,
            critical=None,
        )
    # Fallback: no thresholds defined
    return ThresholdBand(variable=variable, warning=None, critical=None)


def evaluate_current_value(value: float | None, band: ThresholdBand) -> str:
    """
    Classify a current value against a ThresholdBand.

    Band edges are exclusive, matching the advisory rules (a device at
    exactly 35 °C is still optimal).

    Returns: "unknown" | "ok" | "warning" | "critical"
    """
    if value is None:
        return "unknown"
    if band.lower_bound is not None and value < band.lower_bound:
        return "warning"
    if band.critical is not None and value > band.critical:
        return "critical"
    if band.warning is not None and value > band.warning:
        return "warning"
    return "ok"


# ── Chart helpers ─────────────────────────────────────────────────────────────

STATUS_COLORS = {
    "unknown": "#8b949e",
    "ok": "#2ea44f",
    "warning": "#e8a020",
    "critical": "#da3633",
}


def get_value_color(value: float | None, band: ThresholdBand) -> str:
    return STATUS_COLORS[evaluate_current_value(value, band)]
