"""
src/pages/overview.py
──────────────────────
Live dashboard page.

Static structure; readings, assessment and chart injected via callbacks.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html


def layout() -> html.Div:
    return html.Div(
        [
            # ── Page header ───────────────────────────────────────────────────
            html.Div(
                [
                    html.H2("Device Health Dashboard", className="page-title"),
                    html.P(
                        "Battery, weather and performance readings with a live health score",
                        className="page-subtitle",
                    ),
                ],
                className="page-header",
            ),
            # ── Sensor widgets (dynamic) ──────────────────────────────────────
            html.Div(id="overview-widgets", className="mb-3"),
            # ── Source controls ───────────────────────────────────────────────
            html.Div(
                [
                    html.Button("↻ Retry battery", id="retry-battery-btn", n_clicks=0, className="retry-btn"),
                    html.Button("↻ Retry weather", id="retry-weather-btn", n_clicks=0, className="retry-btn"),
                ],
                style={"display": "flex", "gap": "8px"},
                className="mb-3",
            ),
            # ── Health score + recommendations ────────────────────────────────
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("Health Score", className="chart-title"),
                                dcc.Graph(id="overview-gauge", config={"displayModeBar": False}),
                                html.Div(id="overview-alert-level", style={"textAlign": "center"}),
                            ],
                            className="chart-card",
                        ),
                        md=4,
                    ),
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("Recommendations", className="chart-title"),
                                html.Div(id="overview-recommendations"),
                                html.Div(id="overview-last-updated", style={"fontSize": ".68rem", "color": "#8b949e", "marginTop": "8px"}),
                            ],
                            className="chart-card",
                        ),
                        md=8,
                    ),
                ],
                className="g-3 mb-3",
            ),
            # ── Live chart ────────────────────────────────────────────────────
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("Live Readings — last 50 samples", className="chart-title"),
                                dcc.Graph(id="overview-live-chart", config={"displayModeBar": False}),
                            ],
                            className="chart-card",
                        ),
                        md=12,
                    ),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.5rem"},
    )
