"""
src/callbacks/notifications.py
───────────────────────────────
Notification center callbacks.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import Input, Output, ctx, html

from config.alerts import SEVERITY_COLORS, SEVERITY_LABELS, SEVERITY_ORDER
from src.data import store
from src.data.models import Notification
from src.layout.components.alert_badge import severity_badge

MUTED = "#8b949e"
BORDER = "#30363d"


def _build_list(notes: list[Notification]) -> html.Div:
    if not notes:
        return html.Div(
            "No notifications for the selected filter.",
            style={"color": MUTED, "padding": "20px", "textAlign": "center"},
        )

    rows = [
        html.Tr(
            [
                html.Td(note.timestamp.strftime("%d/%m %H:%M:%S"), style={"color": MUTED, "fontSize": ".78rem", "whiteSpace": "nowrap"}),
                html.Td(severity_badge(note.severity)),
                html.Td(note.source, style={"fontSize": ".75rem", "color": "#58a6ff"}),
                html.Td(note.message, style={"fontSize": ".82rem"}),
            ],
            style={"borderBottom": f"1px solid {BORDER}"},
        )
        for note in notes
    ]
    return html.Table(
        [
            html.Thead(
                html.Tr(
                    [html.Th(h) for h in ["Time", "Severity", "Source", "Message"]],
                    style={"color": MUTED, "fontSize": ".68rem", "textTransform": "uppercase"},
                )
            ),
            html.Tbody(rows),
        ],
        style={"width": "100%", "borderCollapse": "collapse"},
    )


def _summary(notes: list[Notification]) -> dbc.Row:
    counts = {sev: 0 for sev in SEVERITY_ORDER}
    for note in notes:
        counts[note.severity] = counts.get(note.severity, 0) + 1
    ordered = sorted(SEVERITY_ORDER, key=SEVERITY_ORDER.get, reverse=True)
    return dbc.Row(
        [
            dbc.Col(
                html.Div(
                    [
                        html.Div(str(counts[sev]), style={"fontSize": "1.4rem", "fontWeight": "700", "color": SEVERITY_COLORS[sev]}),
                        html.Div(SEVERITY_LABELS[sev], style={"fontSize": ".65rem", "color": MUTED, "textTransform": "uppercase"}),
                    ],
                    className="chart-card",
                    style={"padding": "10px 16px"},
                ),
                xs=4, md=2,
            )
            for sev in ordered
        ],
        className="g-2",
    )


def register(app) -> None:

    @app.callback(
        [
            Output("notifications-list", "children"),
            Output("notifications-summary", "children"),
        ],
        [
            Input("notifications-filter", "value"),
            Input("notifications-clear-btn", "n_clicks"),
            Input("notifications-test-btn", "n_clicks"),
            Input("interval-live", "n_intervals"),
        ],
    )
    def update_notifications(severity: str, n_clear: int, n_test: int, n_intervals: int):
        if ctx.triggered_id == "notifications-clear-btn":
            store.clear_notifications()
        elif ctx.triggered_id == "notifications-test-btn":
            store.trigger_test_notification()

        return _build_list(store.get_notifications(severity or "all")), _summary(store.get_notifications())

    @app.callback(
        Output("nav-notification-count", "children"),
        Input("interval-live", "n_intervals"),
    )
    def update_notification_count(n_intervals: int) -> str:
        critical = len(store.get_notifications("critical"))
        return f"● {critical}" if critical else ""
