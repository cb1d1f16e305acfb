"""
src/analytics/advisor.py
────────────────────────
Health advisory engine.

Score starts at 100 and each triggered rule subtracts a fixed penalty.
Rules, in evaluation order:
  1. device temperature   — critical / warning / optimal
  2. battery              — charging while hot, charging OK, low level
  3. ambient weather      — hot / cold
  4. performance          — high CPU load

The alert level only escalates (safe → warning → danger); see
config.alerts.escalate. The final score is clamped to [0, 100].
"""

from __future__ import annotations

import numpy as np

from config.alerts import AlertLevel, escalate
from config.thresholds import (
    DEFAULT_THRESHOLDS,
    MAX_HEALTH_SCORE,
    MIN_HEALTH_SCORE,
    HealthThresholds,
)
from src.data.models import (
    BatterySnapshot,
    HealthAssessment,
    PerformanceSnapshot,
    RiskLevel,
    ScenarioAnalysis,
    UsageScenario,
    WeatherSnapshot,
)

# ── Recommendation messages ───────────────────────────────────────────────────

MSG_TEMP_CRITICAL = "🔥 Critical: device temperature is too high! Stop intensive tasks and let it cool down."
MSG_TEMP_WARNING = "⚠️ Device temperature is elevated. Reduce usage and avoid direct heat."
MSG_TEMP_OPTIMAL = "✅ Temperature levels are optimal."
MSG_CHARGING_HOT = "🔌 Unplug the charger: charging while hot accelerates battery wear."
MSG_CHARGING_OK = "🔋 Charging conditions are good."
MSG_LOW_BATTERY = "🪫 Battery is low. Charge soon to avoid deep discharge."
MSG_AMBIENT_HOT = "☀️ High ambient temperature. Keep the device out of direct sunlight."
MSG_AMBIENT_COLD = "❄️ Low ambient temperature. Battery efficiency may be reduced."
MSG_CPU_HIGH = "💻 High CPU load. Close unused applications to reduce heat."


# ── Main API ──────────────────────────────────────────────────────────────────

def assess(
    battery: BatterySnapshot | None = None,
    weather: WeatherSnapshot | None = None,
    *,
    device_temp: float,
    performance: PerformanceSnapshot | None = None,
    thresholds: HealthThresholds = DEFAULT_THRESHOLDS,
) -> HealthAssessment:
    """
    Compute a HealthAssessment from the latest snapshots.

    Absent snapshots skip their rule group. Never raises for in-domain
    inputs; holds no state between calls.
    """
    penalties = thresholds.penalties
    score = MAX_HEALTH_SCORE
    level = AlertLevel.SAFE
    recommendations: list[str] = []

    # 1. Device temperature
    if device_temp > thresholds.device_temp.critical:
        recommendations.append(MSG_TEMP_CRITICAL)
        score -= penalties["device_temp_critical"]
        level = escalate(level, AlertLevel.DANGER)
    elif device_temp > thresholds.device_temp.warning:
        recommendations.append(MSG_TEMP_WARNING)
        score -= penalties["device_temp_warning"]
        level = escalate(level, AlertLevel.WARNING)
    else:
        recommendations.append(MSG_TEMP_OPTIMAL)

    # 2. Battery (charging and level checks are independent)
    if battery is not None:
        if battery.charging and device_temp > thresholds.charging_hot_c:
            recommendations.append(MSG_CHARGING_HOT)
            score -= penalties["charging_hot"]
            level = escalate(level, AlertLevel.WARNING)
        elif battery.charging:
            recommendations.append(MSG_CHARGING_OK)

        if battery.level < thresholds.low_battery_pct:
            recommendations.append(MSG_LOW_BATTERY)
            score -= penalties["low_battery"]
            level = escalate(level, AlertLevel.WARNING)

    # 3. Ambient weather
    if weather is not None:
        if weather.temperature > thresholds.ambient_hot_c:
            recommendations.append(MSG_AMBIENT_HOT)
            score -= penalties["ambient_hot"]
            level = escalate(level, AlertLevel.WARNING)
        elif weather.temperature < thresholds.ambient_cold_c:
            recommendations.append(MSG_AMBIENT_COLD)
            score -= penalties["ambient_cold"]

    # 4. Performance
    if performance is not None and performance.cpu_load is not None:
        if performance.cpu_load > thresholds.cpu_high_pct:
            recommendations.append(MSG_CPU_HIGH)
            score -= penalties["cpu_high"]
            level = escalate(level, AlertLevel.WARNING)

    return HealthAssessment(
        health_score=int(np.clip(score, MIN_HEALTH_SCORE, MAX_HEALTH_SCORE)),
        alert_level=level,
        recommendations=recommendations,
    )


# ── Scenario analyzer ─────────────────────────────────────────────────────────

_SCENARIO_TIERS: dict[RiskLevel, dict] = {
    RiskLevel.HIGH: {
        "recommendation": "Device is overheating. Stop current activity and let it cool down immediately.",
        "action_items": [
            "Close all intensive applications",
            "Unplug the charger",
            "Move the device to a cooler place",
        ],
        "impact": "High risk of accelerated battery degradation and thermal throttling.",
    },
    RiskLevel.MEDIUM: {
        "recommendation": "Device is running warm. Reduce the workload to protect battery health.",
        "action_items": [
            "Lower screen brightness",
            "Close background applications",
        ],
        "impact": "Moderate battery wear if these conditions persist.",
    },
    RiskLevel.LOW: {
        "recommendation": "Conditions are safe for continued use.",
        "action_items": [
            "Keep monitoring device temperature",
        ],
        "impact": "Minimal impact on battery health.",
    },
}

_GAMING_RECOMMENDATION = "Gaming generates sustained heat: take regular breaks."
_GAMING_ACTION = "Enable a battery saver or performance-limit mode while gaming"


def _risk_tier(device_temp: float, thresholds: HealthThresholds) -> RiskLevel:
    if device_temp > thresholds.device_temp.critical:
        return RiskLevel.HIGH
    if device_temp > thresholds.device_temp.warning:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def analyze_scenario(
    device_temp: float,
    ambient_temp: float,
    battery_level: float,
    scenario: UsageScenario | str,
    thresholds: HealthThresholds = DEFAULT_THRESHOLDS,
) -> ScenarioAnalysis:
    """
    "What-if" analysis for hand-entered conditions.

    Risk follows the device temperature tiers. A gaming scenario above
    `thresholds.gaming_warm_c` adds one recommendation sentence and one
    action item without changing the risk level.
    """
    scenario = UsageScenario(scenario)
    risk = _risk_tier(device_temp, thresholds)
    tier = _SCENARIO_TIERS[risk]

    recommendation = tier["recommendation"]
    action_items = list(tier["action_items"])

    if scenario == UsageScenario.GAMING and device_temp > thresholds.gaming_warm_c:
        recommendation = f"{recommendation} {_GAMING_RECOMMENDATION}"
        action_items.append(_GAMING_ACTION)

    return ScenarioAnalysis(
        risk_level=risk,
        recommendation=recommendation,
        action_items=action_items,
        impact=f"{tier['impact']} Conditions: ambient {ambient_temp:.1f} °C, battery {battery_level:.0f}%.",
    )
