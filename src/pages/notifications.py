"""
src/pages/notifications.py
───────────────────────────
Alert & notification center with severity filter.
"""

import dash_bootstrap_components as dbc
from dash import html

MUTED = "#8b949e"

_SEVERITY_OPTIONS = [
    {"label": "All", "value": "all"},
    {"label": "Critical", "value": "critical"},
    {"label": "Warning", "value": "warning"},
    {"label": "Info", "value": "info"},
]


def layout() -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.H2("Alert & Notification Center", className="page-title"),
                    html.P("Health alerts, source status changes and advice results", className="page-subtitle"),
                ],
                className="page-header",
            ),
            # ── Summary badges ─────────────────────────────────────────────────
            html.Div(id="notifications-summary", className="mb-3"),
            # ── Controls ───────────────────────────────────────────────────────
            dbc.Row(
                [
                    dbc.Col(
                        dbc.RadioItems(
                            id="notifications-filter",
                            options=_SEVERITY_OPTIONS,
                            value="all",
                            inline=True,
                            inputStyle={"marginRight": "4px"},
                            style={"fontSize": ".82rem"},
                        ),
                        md=8,
                    ),
                    dbc.Col(
                        html.Div(
                            [
                                dbc.Button("Test Alert", id="notifications-test-btn", n_clicks=0, color="warning", outline=True, size="sm"),
                                dbc.Button("Clear All", id="notifications-clear-btn", n_clicks=0, color="secondary", outline=True, size="sm"),
                            ],
                            style={"display": "flex", "gap": "8px", "justifyContent": "flex-end"},
                        ),
                        md=4,
                    ),
                ],
                className="g-3 mb-3",
            ),
            html.Div(html.Div(id="notifications-list"), className="chart-card"),
        ],
        style={"padding": "1.5rem"},
    )
