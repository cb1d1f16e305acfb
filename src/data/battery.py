"""
src/data/battery.py
───────────────────
Battery source backed by psutil.sensors_battery().

Status transitions on every read:
  disconnected → retrying → connected | disconnected

Hosts without a battery (desktops, containers) get a fixed simulated
snapshot at 85%; a failing sensor read gets one at 75%.
"""
from __future__ import annotations

import logging

import psutil

from src.data.models import BatterySnapshot, SourceStatus

logger = logging.getLogger(__name__)

UNSUPPORTED_LEVEL = 85
ERROR_LEVEL = 75


def _seconds(value: float | int | None) -> float | None:
    """psutil uses negative sentinels for unknown / unlimited time; map them to None."""
    if value is None or value < 0:
        return None
    return float(value)


def fallback_snapshot(level: int = UNSUPPORTED_LEVEL) -> BatterySnapshot:
    return BatterySnapshot(level=level, charging=False, charging_time=None, discharging_time=None)


class BatterySource:
    def __init__(self, reader=psutil.sensors_battery):
        self._reader = reader
        self.status = SourceStatus.DISCONNECTED
        self.snapshot: BatterySnapshot | None = None
        self.last_error: str | None = None

    def read(self) -> BatterySnapshot:
        self.status = SourceStatus.RETRYING
        try:
            raw = self._reader()
        except (psutil.Error, OSError, NotImplementedError) as exc:
            logger.warning("Battery read failed, using simulated data: %s", exc)
            self.last_error = str(exc)
            self.status = SourceStatus.DISCONNECTED
            self.snapshot = fallback_snapshot(ERROR_LEVEL)
            return self.snapshot

        if raw is None:
            logger.warning("Battery not supported on this host, using simulated data")
            self.last_error = "unsupported"
            self.status = SourceStatus.DISCONNECTED
            self.snapshot = fallback_snapshot(UNSUPPORTED_LEVEL)
            return self.snapshot

        charging = bool(raw.power_plugged)
        self.snapshot = BatterySnapshot(
            level=int(round(min(max(raw.percent, 0.0), 100.0))),
            charging=charging,
            # psutil only estimates time to empty; time to full is unknown
            charging_time=None,
            discharging_time=None if charging else _seconds(raw.secsleft),
        )
        self.last_error = None
        self.status = SourceStatus.CONNECTED
        return self.snapshot

    def retry(self) -> BatterySnapshot:
        logger.info("Retrying battery source")
        return self.read()
