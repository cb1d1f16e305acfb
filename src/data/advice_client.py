"""
src/data/advice_client.py
─────────────────────────
Client for the remote ThermoSense advice endpoint.

POST {battery_temp, ambient_temp, device_state}
  → {alert_level, predicted_health_impact, natural_language_tip, optional_action}

send_sensor_data() never raises: any failure returns FALLBACK_ADVICE.
"""
from __future__ import annotations

import logging

import requests

from config.settings import settings
from src.data.models import AdviceRequest, AdviceResponse, DeviceState

logger = logging.getLogger(__name__)

FALLBACK_TIP = "⚠️ Unable to fetch advice. Please try again later."

FALLBACK_ADVICE = AdviceResponse(
    alert_level="error",
    predicted_health_impact=None,
    natural_language_tip=FALLBACK_TIP,
    optional_action=None,
)


def send_sensor_data(
    battery_temp: float,
    ambient_temp: float,
    device_state: DeviceState | str,
    session: requests.Session | None = None,
) -> AdviceResponse:
    """Request advice for one set of readings; fall back on any failure."""
    http = session or requests
    try:
        state = device_state.value if isinstance(device_state, DeviceState) else str(device_state).lower()
        payload = AdviceRequest(
            battery_temp=battery_temp,
            ambient_temp=ambient_temp,
            device_state=state,
        )
        response = http.post(
            settings.ADVICE_API_URL,
            json=payload.model_dump(mode="json"),
            headers={"Content-Type": "application/json"},
            timeout=settings.ADVICE_TIMEOUT_S,
        )
        response.raise_for_status()
        return AdviceResponse.model_validate(response.json())
    except (requests.RequestException, ValueError) as exc:
        logger.error("Error from ThermoSense API: %s", exc)
        return FALLBACK_ADVICE.model_copy()
