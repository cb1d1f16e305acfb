"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Weather provider (Open-Meteo forecast API)
    WEATHER_API_URL: str = os.getenv("WEATHER_API_URL", "https://api.open-meteo.com/v1/forecast")
    WEATHER_TIMEOUT_S: float = float(os.getenv("WEATHER_TIMEOUT_S", "10"))

    # Location used in place of browser geolocation; unset means "denied"
    LATITUDE: float | None = _optional_float("LATITUDE")
    LONGITUDE: float | None = _optional_float("LONGITUDE")

    # Remote advice endpoint
    ADVICE_API_URL: str = os.getenv("ADVICE_API_URL", "https://thermosense-api.onrender.com/api/advice")
    ADVICE_TIMEOUT_S: float = float(os.getenv("ADVICE_TIMEOUT_S", "15"))

    # Polling intervals in milliseconds (one timer per source)
    BATTERY_INTERVAL_MS: int = int(os.getenv("BATTERY_INTERVAL_MS", "30000"))
    WEATHER_INTERVAL_MS: int = int(os.getenv("WEATHER_INTERVAL_MS", "600000"))
    PERFORMANCE_INTERVAL_MS: int = int(os.getenv("PERFORMANCE_INTERVAL_MS", "5000"))
    DEVICE_TEMP_INTERVAL_MS: int = int(os.getenv("DEVICE_TEMP_INTERVAL_MS", "3000"))
    RENDER_INTERVAL_MS: int = int(os.getenv("RENDER_INTERVAL_MS", "3000"))

    # Chart history ring buffer
    HISTORY_SIZE: int = int(os.getenv("HISTORY_SIZE", "50"))

    # Notification center
    MAX_NOTIFICATIONS: int = int(os.getenv("MAX_NOTIFICATIONS", "100"))

    # Simulation (None → fresh entropy on every start)
    SIMULATION_SEED: int | None = int(os.environ["SIMULATION_SEED"]) if os.getenv("SIMULATION_SEED") else None


settings = Settings()
