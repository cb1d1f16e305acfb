"""
src/data/models.py
──────────────────
Pydantic v2 data models for source snapshots, assessments, advice and
notifications.

Snapshots are immutable (frozen): a new reading replaces the old one whole.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from config.alerts import AlertLevel


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class SourceStatus(str, Enum):
    CONNECTED = "connected"
    RETRYING = "retrying"
    DISCONNECTED = "disconnected"


class DeviceState(str, Enum):
    CHARGING = "charging"
    DISCHARGING = "discharging"
    IDLE = "idle"


class UsageScenario(str, Enum):
    IDLE = "idle"
    BROWSING = "browsing"
    STREAMING = "streaming"
    GAMING = "gaming"   # most demanding


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=_utcnow)


class BatterySnapshot(Snapshot):
    level: int = Field(ge=0, le=100)
    charging: bool
    charging_time: float | None = Field(default=None, ge=0.0)      # seconds, None = unbounded
    discharging_time: float | None = Field(default=None, ge=0.0)   # seconds, None = unbounded


class WeatherSnapshot(Snapshot):
    temperature: float                  # °C
    humidity: int = Field(ge=0, le=100)
    wind_speed: float = Field(ge=0.0)   # km/h
    weather_code: int
    uv_index: int = Field(ge=0)


class MemoryUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    used: float = Field(ge=0.0)    # MB
    total: float = Field(ge=0.0)   # MB


class PerformanceSnapshot(Snapshot):
    cpu_load: int | None = Field(default=None, ge=0, le=100)
    memory: MemoryUsage | None = None
    cores: int | None = Field(default=None, ge=1)
    network_type: str | None = None


class HealthAssessment(BaseModel):
    health_score: int = Field(ge=0, le=100)
    alert_level: AlertLevel = AlertLevel.SAFE
    recommendations: list[str] = Field(default_factory=list)
    last_updated: datetime = Field(default_factory=_utcnow)


class ScenarioAnalysis(BaseModel):
    risk_level: RiskLevel
    recommendation: str
    action_items: list[str]
    impact: str


class AdviceRequest(BaseModel):
    battery_temp: float
    ambient_temp: float
    device_state: DeviceState


class AdviceResponse(BaseModel):
    alert_level: str
    predicted_health_impact: float | None = None
    natural_language_tip: str
    optional_action: str | None = None


class Notification(BaseModel):
    id: str
    timestamp: datetime
    message: str
    severity: str
    source: str = "system"


class ChartSample(BaseModel):
    timestamp: datetime
    device_temp: float
    battery_level: int | None = None
    ambient_temp: float | None = None
    health_score: int | None = None
