"""
src/pages/settings.py
──────────────────────
Settings page: theme, data export and a read-only view of the advisory
thresholds and polling intervals.
"""
import dash_bootstrap_components as dbc
from dash import html

from config.settings import settings
from config.thresholds import DEFAULT_THRESHOLDS

MUTED = "#8b949e"


def _row(label: str, value: str) -> html.Tr:
    return html.Tr(
        [
            html.Td(label, style={"color": MUTED, "fontSize": ".78rem", "padding": "4px 12px 4px 0"}),
            html.Td(value, style={"fontSize": ".82rem", "fontWeight": "600"}),
        ]
    )


def _thresholds_table() -> html.Table:
    thr = DEFAULT_THRESHOLDS
    return html.Table(
        html.Tbody(
            [
                _row("Device temperature — warning", f"> {thr.device_temp.warning:.0f} °C"),
                _row("Device temperature — danger", f"> {thr.device_temp.critical:.0f} °C"),
                _row("Charging while hot", f"> {thr.charging_hot_c:.0f} °C"),
                _row("Low battery", f"< {thr.low_battery_pct:.0f} %"),
                _row("Hot ambient", f"> {thr.ambient_hot_c:.0f} °C"),
                _row("Cold ambient", f"< {thr.ambient_cold_c:.0f} °C"),
                _row("High CPU load", f"> {thr.cpu_high_pct:.0f} %"),
            ]
        )
    )


def _intervals_table() -> html.Table:
    return html.Table(
        html.Tbody(
            [
                _row("Battery", f"{settings.BATTERY_INTERVAL_MS / 1000:.0f} s"),
                _row("Weather", f"{settings.WEATHER_INTERVAL_MS / 1000:.0f} s"),
                _row("Performance", f"{settings.PERFORMANCE_INTERVAL_MS / 1000:.0f} s"),
                _row("Device temperature", f"{settings.DEVICE_TEMP_INTERVAL_MS / 1000:.0f} s"),
                _row("Chart history", f"{settings.HISTORY_SIZE} samples"),
            ]
        )
    )


def layout() -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.H2("Settings", className="page-title"),
                    html.P("Appearance, data export and advisory thresholds", className="page-subtitle"),
                ],
                className="page-header",
            ),
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("Appearance", className="chart-title"),
                                html.Div(id="settings-theme-label", style={"fontSize": ".82rem", "marginBottom": "8px"}),
                                dbc.Button("Toggle theme", id="settings-theme-btn", n_clicks=0, color="secondary", outline=True, size="sm"),
                                html.Div("Data Export", className="chart-title", style={"marginTop": "20px"}),
                                html.P(
                                    "Download the current readings, assessment, chart history and notifications as JSON.",
                                    style={"fontSize": ".78rem", "color": MUTED},
                                ),
                                dbc.Button("Export data", id="settings-export-btn", n_clicks=0, color="primary", size="sm"),
                            ],
                            className="chart-card",
                        ),
                        md=4,
                    ),
                    dbc.Col(
                        html.Div([html.Div("Advisory Thresholds", className="chart-title"), _thresholds_table()], className="chart-card"),
                        md=4,
                    ),
                    dbc.Col(
                        html.Div([html.Div("Polling Intervals", className="chart-title"), _intervals_table()], className="chart-card"),
                        md=4,
                    ),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.5rem"},
    )
