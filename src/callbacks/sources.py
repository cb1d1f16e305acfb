"""
src/callbacks/sources.py
─────────────────────────
Source polling callbacks.

One dcc.Interval per source drives an independent refresh; retry buttons
trigger the same refresh on demand. Each callback writes a timestamp to its
own tick store so the dashboard re-renders after every new snapshot.
"""
from __future__ import annotations

import logging
from datetime import UTC, datetime

from dash import Input, Output

from src.data import store

logger = logging.getLogger(__name__)


def _tick() -> str:
    return datetime.now(tz=UTC).isoformat()


def register(app) -> None:

    @app.callback(Output("tick-battery", "data"), Input("interval-battery", "n_intervals"))
    def poll_battery(n_intervals: int) -> str:
        store.refresh_battery()
        return _tick()

    @app.callback(Output("tick-weather", "data"), Input("interval-weather", "n_intervals"))
    def poll_weather(n_intervals: int) -> str:
        store.refresh_weather()
        return _tick()

    @app.callback(Output("tick-performance", "data"), Input("interval-performance", "n_intervals"))
    def poll_performance(n_intervals: int) -> str:
        store.refresh_performance()
        return _tick()

    @app.callback(Output("tick-device-temp", "data"), Input("interval-device-temp", "n_intervals"))
    def poll_device_temperature(n_intervals: int) -> str:
        store.refresh_device_temperature()
        return _tick()

    # ── User-triggered retries ────────────────────────────────────────────────
    @app.callback(
        Output("tick-battery", "data", allow_duplicate=True),
        Input("retry-battery-btn", "n_clicks"),
        prevent_initial_call=True,
    )
    def retry_battery(n_clicks: int) -> str:
        logger.info("Battery retry requested")
        store.refresh_battery(retry=True)
        return _tick()

    @app.callback(
        Output("tick-weather", "data", allow_duplicate=True),
        Input("retry-weather-btn", "n_clicks"),
        prevent_initial_call=True,
    )
    def retry_weather(n_clicks: int) -> str:
        logger.info("Weather retry requested")
        store.refresh_weather(retry=True)
        return _tick()
