"""
config/alerts.py
────────────────
Alert levels, notification severities, and display configuration.

Two scales live here:
  AlertLevel            — health assessment severity, safe < warning < danger
  NotificationSeverity  — notification center filter, info < warning < critical
"""

from enum import Enum


class AlertLevel(str, Enum):
    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"

    @property
    def rank(self) -> int:
        return ALERT_LEVEL_ORDER[self]


class NotificationSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


# Severity ordering (higher = more severe)
ALERT_LEVEL_ORDER: dict[str, int] = {
    AlertLevel.SAFE: 0,
    AlertLevel.WARNING: 1,
    AlertLevel.DANGER: 2,
}

SEVERITY_ORDER: dict[str, int] = {
    NotificationSeverity.CRITICAL: 3,
    NotificationSeverity.WARNING: 2,
    NotificationSeverity.INFO: 1,
}


def escalate(current: AlertLevel, candidate: AlertLevel) -> AlertLevel:
    """Combine two alert levels, keeping the more severe one."""
    return max(current, candidate, key=lambda level: level.rank)


# Assessment / advice level → notification severity
LEVEL_TO_SEVERITY: dict[str, NotificationSeverity] = {
    "danger": NotificationSeverity.CRITICAL,
    "warning": NotificationSeverity.WARNING,
    "safe": NotificationSeverity.INFO,
}

LEVEL_COLORS: dict[str, str] = {
    AlertLevel.SAFE: "#2ea44f",
    AlertLevel.WARNING: "#e8a020",
    AlertLevel.DANGER: "#da3633",
    "error": "#8b949e",
}

LEVEL_LABELS: dict[str, str] = {
    AlertLevel.SAFE: "Safe",
    AlertLevel.WARNING: "Warning",
    AlertLevel.DANGER: "Danger",
    "error": "Error",
}

SEVERITY_COLORS: dict[str, str] = {
    NotificationSeverity.INFO: "#58a6ff",
    NotificationSeverity.WARNING: "#e8a020",
    NotificationSeverity.CRITICAL: "#da3633",
}

SEVERITY_LABELS: dict[str, str] = {
    NotificationSeverity.INFO: "Info",
    NotificationSeverity.WARNING: "Warning",
    NotificationSeverity.CRITICAL: "Critical",
}

RISK_COLORS: dict[str, str] = {
    "low": "#2ea44f",
    "medium": "#e8a020",
    "high": "#da3633",
}

STATUS_DOT_COLORS: dict[str, str] = {
    "connected": "#2ea44f",
    "retrying": "#e8a020",
    "disconnected": "#da3633",
}
