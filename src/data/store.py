"""
src/data/store.py
─────────────────
In-process read model shared by the dashboard callbacks.

Provides:
  - refresh_battery() / refresh_weather() / refresh_performance()
    / refresh_device_temperature() : run one source, replace its cell
  - recompute()            : re-run the advisory engine on the current cells
  - get_state()            : current snapshots, statuses and assessment
  - history_frame()        : chart ring buffer (last HISTORY_SIZE samples)
  - add_notification() / get_notifications() / clear_notifications()
  - snapshot()             : everything, for data export

Each cell is replaced whole (last write wins). Nothing is persisted.

Thread safety: Dash may run callbacks concurrently; a module-level lock
guards every cell.
"""
from __future__ import annotations

import threading
import uuid
from collections import deque
from datetime import UTC, datetime

import numpy as np
import pandas as pd

from config.alerts import LEVEL_TO_SEVERITY, AlertLevel, NotificationSeverity
from config.settings import settings
from src.analytics.advisor import assess
from src.data.battery import BatterySource
from src.data.models import (
    BatterySnapshot,
    ChartSample,
    HealthAssessment,
    Notification,
    PerformanceSnapshot,
    SourceStatus,
    WeatherSnapshot,
)
from src.data.performance import sample_performance
from src.data.simulator import BASELINE_C, make_rng, simulate_device_temperature
from src.data.weather import WeatherSource

_lock = threading.RLock()

TEST_ALERT_MESSAGE = "Test Critical Battery Alert triggered!"
BACK_TO_SAFE_MESSAGE = "Device conditions are back to safe."


class _State:
    def __init__(
        self,
        battery_source: BatterySource | None = None,
        weather_source: WeatherSource | None = None,
        rng: np.random.Generator | None = None,
    ):
        self.battery_source = battery_source or BatterySource()
        self.weather_source = weather_source or WeatherSource()
        self.rng = rng if rng is not None else make_rng()

        self.battery: BatterySnapshot | None = None
        self.weather: WeatherSnapshot | None = None
        self.performance: PerformanceSnapshot = PerformanceSnapshot()
        self.device_temp: float = BASELINE_C
        self.assessment: HealthAssessment = assess(device_temp=BASELINE_C)

        self.history: deque[ChartSample] = deque(maxlen=settings.HISTORY_SIZE)
        self.notifications: deque[Notification] = deque(maxlen=settings.MAX_NOTIFICATIONS)


_STATE = _State()


def reset(
    battery_source: BatterySource | None = None,
    weather_source: WeatherSource | None = None,
    rng: np.random.Generator | None = None,
) -> None:
    """Drop all state and optionally inject sources (used by tests)."""
    global _STATE
    with _lock:
        _STATE = _State(battery_source, weather_source, rng)


# ── Notifications ─────────────────────────────────────────────────────────────

def add_notification(message: str, severity: str, source: str = "system") -> Notification:
    note = Notification(
        id=str(uuid.uuid4()),
        timestamp=datetime.now(tz=UTC),
        message=message,
        severity=NotificationSeverity(severity).value,
        source=source,
    )
    with _lock:
        _STATE.notifications.append(note)
    return note


def get_notifications(severity: str = "all") -> list[Notification]:
    """Newest first, optionally filtered by severity."""
    with _lock:
        notes = list(_STATE.notifications)
    if severity != "all":
        notes = [n for n in notes if n.severity == severity]
    return list(reversed(notes))


def clear_notifications() -> None:
    with _lock:
        _STATE.notifications.clear()


def trigger_test_notification() -> Notification:
    return add_notification(TEST_ALERT_MESSAGE, NotificationSeverity.CRITICAL, source="test")


def _notify_status_change(name: str, before: SourceStatus, after: SourceStatus) -> None:
    if before == after:
        return
    if after == SourceStatus.CONNECTED:
        add_notification(f"{name} source connected.", NotificationSeverity.INFO, source=name.lower())
    elif after == SourceStatus.DISCONNECTED:
        add_notification(
            f"{name} source unavailable, showing simulated data.",
            NotificationSeverity.WARNING,
            source=name.lower(),
        )


# ── Assessment ────────────────────────────────────────────────────────────────

def recompute() -> HealthAssessment:
    """Re-run the advisory engine on the current cells."""
    with _lock:
        previous = _STATE.assessment
        assessment = assess(
            battery=_STATE.battery,
            weather=_STATE.weather,
            device_temp=_STATE.device_temp,
            performance=_STATE.performance,
        )
        _STATE.assessment = assessment

        # Decided under the lock so concurrent ticks notify once per transition
        if assessment.alert_level.rank > previous.alert_level.rank:
            severity = LEVEL_TO_SEVERITY[assessment.alert_level.value]
            add_notification(
                f"Alert: {assessment.alert_level.value.upper()} - {assessment.recommendations[0]}",
                severity,
                source="advisor",
            )
        elif assessment.alert_level == AlertLevel.SAFE and previous.alert_level != AlertLevel.SAFE:
            add_notification(BACK_TO_SAFE_MESSAGE, NotificationSeverity.INFO, source="advisor")
    return assessment


# ── Source refresh ────────────────────────────────────────────────────────────

def refresh_battery(retry: bool = False) -> BatterySnapshot:
    with _lock:
        source = _STATE.battery_source
        before = source.status
        snapshot = source.retry() if retry else source.read()
        _STATE.battery = snapshot
    _notify_status_change("Battery", before, source.status)
    recompute()
    return snapshot


def refresh_weather(retry: bool = False) -> WeatherSnapshot:
    # Network I/O happens outside the lock; only the cell swap is guarded.
    source = _STATE.weather_source
    before = source.status
    snapshot = source.retry() if retry else source.read()
    with _lock:
        _STATE.weather = snapshot
    _notify_status_change("Weather", before, source.status)
    recompute()
    return snapshot


def refresh_performance() -> PerformanceSnapshot:
    with _lock:
        snapshot = sample_performance(_STATE.rng)
        _STATE.performance = snapshot
    recompute()
    return snapshot


def refresh_device_temperature() -> float:
    """Resample device temperature and append a chart sample."""
    with _lock:
        temp = simulate_device_temperature(
            _STATE.rng,
            weather=_STATE.weather,
            battery=_STATE.battery,
            performance=_STATE.performance,
        )
        _STATE.device_temp = temp
    assessment = recompute()
    with _lock:
        _STATE.history.append(ChartSample(
            timestamp=datetime.now(tz=UTC),
            device_temp=temp,
            battery_level=_STATE.battery.level if _STATE.battery else None,
            ambient_temp=_STATE.weather.temperature if _STATE.weather else None,
            health_score=assessment.health_score,
        ))
    return temp


# ── Read API ──────────────────────────────────────────────────────────────────

def get_state() -> dict:
    with _lock:
        return {
            "battery": _STATE.battery,
            "weather": _STATE.weather,
            "performance": _STATE.performance,
            "device_temp": _STATE.device_temp,
            "assessment": _STATE.assessment,
            "battery_status": _STATE.battery_source.status,
            "weather_status": _STATE.weather_source.status,
        }


def history_frame() -> pd.DataFrame:
    """Chart history as a DataFrame (oldest first)."""
    with _lock:
        samples = list(_STATE.history)
    if not samples:
        return pd.DataFrame(columns=list(ChartSample.model_fields))
    return pd.DataFrame([s.model_dump() for s in samples])


def snapshot() -> dict:
    """JSON-ready dump of every cell, the chart history and notifications."""
    state = get_state()
    with _lock:
        history = [s.model_dump(mode="json") for s in _STATE.history]
        notifications = [n.model_dump(mode="json") for n in _STATE.notifications]
    return {
        "battery": state["battery"].model_dump(mode="json") if state["battery"] else None,
        "weather": state["weather"].model_dump(mode="json") if state["weather"] else None,
        "performance": state["performance"].model_dump(mode="json"),
        "device_temperature": state["device_temp"],
        "assessment": state["assessment"].model_dump(mode="json"),
        "status": {
            "battery": state["battery_status"].value,
            "weather": state["weather_status"].value,
        },
        "history": history,
        "notifications": notifications,
    }
