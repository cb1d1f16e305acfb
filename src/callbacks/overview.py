"""
src/callbacks/overview.py
──────────────────────────
Dashboard callbacks: sensor widgets, health gauge, recommendations and
the live chart. Re-rendered whenever any source tick changes.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
import pandas as pd
import plotly.graph_objects as go
from dash import Input, Output, html

from config.alerts import LEVEL_COLORS
from config.theme import THEME_STORAGE_KEY, THEMES, normalize_theme
from src.analytics.thresholds import get_threshold_band, get_value_color
from src.data import store
from src.data.models import BatterySnapshot, PerformanceSnapshot, WeatherSnapshot
from src.layout.components.alert_badge import alert_badge, status_dot
from src.layout.components.health_gauge import health_gauge_figure
from src.layout.components.kpi_card import kpi_card

MUTED = "#8b949e"

# WMO weather interpretation codes (subset shown in the widget)
WEATHER_CODES = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Rime fog",
    51: "Light drizzle",
    61: "Light rain",
    63: "Rain",
    65: "Heavy rain",
    71: "Light snow",
    73: "Snow",
    75: "Heavy snow",
    80: "Rain showers",
    95: "Thunderstorm",
}

_SERIES = [
    ("device_temp", "Device °C", "#f0883e", "y"),
    ("ambient_temp", "Ambient °C", "#58a6ff", "y"),
    ("battery_level", "Battery %", "#2ea44f", "y2"),
    ("health_score", "Health score", "#a371f7", "y2"),
]


def _format_seconds(seconds: float | None) -> str:
    if seconds is None:
        return "∞"
    hours, rem = divmod(int(seconds), 3600)
    return f"{hours}h {rem // 60:02d}m"


def _battery_card(battery: BatterySnapshot | None, status: str):
    footer = status_dot(status, "Battery")
    if battery is None:
        return kpi_card("Battery", "—", MUTED, icon="🔋", footer=footer)
    color = get_value_color(battery.level, get_threshold_band("battery_level"))
    details = [
        "Charging" if battery.charging else "On battery",
        f"Time left: {_format_seconds(battery.discharging_time)}" if not battery.charging
        else f"Time to full: {_format_seconds(battery.charging_time)}",
    ]
    return kpi_card("Battery", f"{battery.level}%", color, icon="🔋", details=details, footer=footer)


def _weather_card(weather: WeatherSnapshot | None, status: str):
    footer = status_dot(status, "Weather")
    if weather is None:
        return kpi_card("Ambient", "—", MUTED, icon="🌤", footer=footer)
    color = get_value_color(weather.temperature, get_threshold_band("ambient_temp"))
    details = [
        WEATHER_CODES.get(weather.weather_code, f"Code {weather.weather_code}"),
        f"Humidity {weather.humidity}% · Wind {weather.wind_speed:.1f} km/h · UV {weather.uv_index}",
    ]
    return kpi_card("Ambient", f"{weather.temperature:.1f} °C", color, icon="🌤", details=details, footer=footer)


def _device_card(device_temp: float):
    color = get_value_color(device_temp, get_threshold_band("device_temp"))
    return kpi_card("Device Temperature", f"{device_temp:.1f} °C", color, icon="🌡", details=["Simulated"])


def _performance_card(performance: PerformanceSnapshot):
    if performance.cpu_load is None:
        return kpi_card("Performance", "—", MUTED, icon="💻")
    color = get_value_color(performance.cpu_load, get_threshold_band("cpu_load"))
    details = []
    if performance.memory is not None:
        details.append(f"Memory {performance.memory.used:.0f} / {performance.memory.total:.0f} MB")
    if performance.cores is not None:
        details.append(f"{performance.cores} cores · {performance.network_type or 'unknown'}")
    return kpi_card("CPU Load", f"{performance.cpu_load}%", color, icon="💻", details=details)


def _live_chart(df: pd.DataFrame, theme: str | None = None) -> go.Figure:
    palette = THEMES[normalize_theme(theme)]
    fig = go.Figure()
    if not df.empty:
        for col, name, color, axis in _SERIES:
            fig.add_scatter(
                x=df["timestamp"], y=df[col],
                mode="lines",
                name=name,
                yaxis=axis,
                line={"color": color, "width": 1.6},
                hovertemplate="%{x|%H:%M:%S}<br>%{y}<extra></extra>",
            )

    band = get_threshold_band("device_temp")
    fig.add_hline(y=band.warning, line_dash="dot", line_color="#e8a020", line_width=1,
                  annotation_text="Warn", annotation_font_color="#e8a020", annotation_font_size=9)
    fig.add_hline(y=band.critical, line_dash="solid", line_color="#da3633", line_width=1,
                  annotation_text="Crit", annotation_font_color="#da3633", annotation_font_size=9)

    fig.update_layout(
        template=palette["plotly_template"],
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
        font={"color": palette["text"], "size": 11},
        xaxis={"gridcolor": palette["border"]},
        yaxis={"gridcolor": palette["border"], "title": "°C", "range": [0, 55]},
        yaxis2={"overlaying": "y", "side": "right", "range": [0, 105], "showgrid": False, "title": "%"},
        legend={"bgcolor": "rgba(0,0,0,0)", "font": {"size": 10}, "orientation": "h", "y": -0.15},
        height=300,
    )
    return fig


def register(app) -> None:

    @app.callback(
        [
            Output("overview-widgets", "children"),
            Output("overview-gauge", "figure"),
            Output("overview-alert-level", "children"),
            Output("overview-recommendations", "children"),
            Output("overview-last-updated", "children"),
            Output("overview-live-chart", "figure"),
        ],
        [
            Input("tick-battery", "data"),
            Input("tick-weather", "data"),
            Input("tick-performance", "data"),
            Input("tick-device-temp", "data"),
            Input(THEME_STORAGE_KEY, "data"),
        ],
    )
    def update_overview(_battery_tick, _weather_tick, _performance_tick, _device_tick, theme):
        state = store.get_state()
        assessment = state["assessment"]

        widgets = dbc.Row(
            [
                dbc.Col(_device_card(state["device_temp"]), xs=12, md=3),
                dbc.Col(_battery_card(state["battery"], state["battery_status"].value), xs=12, md=3),
                dbc.Col(_weather_card(state["weather"], state["weather_status"].value), xs=12, md=3),
                dbc.Col(_performance_card(state["performance"]), xs=12, md=3),
            ],
            className="g-3",
        )

        level = assessment.alert_level.value
        recommendations = html.Ul(
            [
                html.Li(text, style={"marginBottom": "4px"})
                for text in assessment.recommendations
            ],
            style={
                "fontSize": ".85rem",
                "paddingLeft": "1.1rem",
                "borderLeft": f"3px solid {LEVEL_COLORS.get(level, MUTED)}",
            },
        )

        return (
            widgets,
            health_gauge_figure(assessment.health_score, height=200, theme=theme),
            alert_badge(level),
            recommendations,
            f"Last updated {assessment.last_updated.strftime('%H:%M:%S')} UTC",
            _live_chart(store.history_frame(), theme),
        )
