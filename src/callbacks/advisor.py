"""
src/callbacks/advisor.py
─────────────────────────
Advisor page callbacks: scenario analyzer and remote advice form.
"""
from __future__ import annotations

import math

import dash_bootstrap_components as dbc
from dash import Input, Output, State, html

from config.alerts import LEVEL_COLORS, LEVEL_TO_SEVERITY, RISK_COLORS
from src.analytics.advisor import analyze_scenario
from src.data import store
from src.data.advice_client import send_sensor_data
from src.data.models import AdviceResponse, ScenarioAnalysis

MUTED = "#8b949e"
INVALID_FORM_MESSAGE = "Please fill in all fields correctly."


def _is_number(value) -> bool:
    if value is None:
        return False
    try:
        return not math.isnan(float(value))
    except (TypeError, ValueError):
        return False


def _invalid_form() -> dbc.Alert:
    return dbc.Alert(INVALID_FORM_MESSAGE, color="warning", style={"fontSize": ".82rem"})


def _scenario_view(result: ScenarioAnalysis) -> html.Div:
    color = RISK_COLORS[result.risk_level.value]
    return html.Div(
        [
            html.Div(
                [
                    html.Span("Risk: ", style={"color": MUTED}),
                    html.Span(result.risk_level.value.upper(), style={"color": color, "fontWeight": "700"}),
                ],
                style={"marginBottom": "6px"},
            ),
            html.P(result.recommendation, style={"fontSize": ".85rem"}),
            html.Ul([html.Li(item) for item in result.action_items], style={"fontSize": ".82rem"}),
            html.Div(result.impact, style={"fontSize": ".75rem", "color": MUTED}),
        ],
        style={"borderLeft": f"3px solid {color}", "paddingLeft": "10px"},
    )


def _advice_view(advice: AdviceResponse) -> html.Div:
    color = LEVEL_COLORS.get(advice.alert_level, MUTED)
    impact = "—" if advice.predicted_health_impact is None else f"{advice.predicted_health_impact}"
    children = [
        html.Div(f"⚠️ Alert Level: {advice.alert_level}", id="alert", style={"color": color, "fontWeight": "700"}),
        html.Div(f"📊 Battery Health Impact: {impact}", style={"fontSize": ".82rem"}),
        html.Div(f"🧠 Tip: {advice.natural_language_tip}", id="advice", style={"fontSize": ".85rem", "marginTop": "4px"}),
    ]
    if advice.optional_action:
        children.append(html.Div(f"🔧 Action: {advice.optional_action}", id="action", style={"fontSize": ".82rem"}))
    return html.Div(children, style={"borderLeft": f"3px solid {color}", "paddingLeft": "10px"})


def submit_scenario(device_temp, ambient_temp, battery_level, scenario):
    """Validate the scenario form and render the analysis."""
    if not all(_is_number(v) for v in (device_temp, ambient_temp, battery_level)) or not scenario:
        return _invalid_form()
    result = analyze_scenario(float(device_temp), float(ambient_temp), float(battery_level), scenario)
    return _scenario_view(result)


def submit_advice(battery_temp, ambient_temp, device_state):
    """
    Validate the advice form, query the advice service and render the reply.

    Danger and warning replies are also posted to the notification center.
    """
    if not _is_number(battery_temp) or not _is_number(ambient_temp) or not device_state:
        return _invalid_form()

    advice = send_sensor_data(float(battery_temp), float(ambient_temp), device_state)

    if advice.alert_level in ("danger", "warning"):
        store.add_notification(
            f"Alert: {advice.alert_level.upper()} - {advice.natural_language_tip}",
            LEVEL_TO_SEVERITY[advice.alert_level],
            source="advice",
        )
    return _advice_view(advice)


def register(app) -> None:

    @app.callback(
        Output("scenario-result", "children"),
        Input("scenario-submit-btn", "n_clicks"),
        State("scenario-device-temp", "value"),
        State("scenario-ambient-temp", "value"),
        State("scenario-battery-level", "value"),
        State("scenario-usage", "value"),
        prevent_initial_call=True,
    )
    def run_scenario(n_clicks: int, device_temp, ambient_temp, battery_level, scenario):
        return submit_scenario(device_temp, ambient_temp, battery_level, scenario)

    @app.callback(
        Output("advice-result", "children"),
        Input("advice-submit-btn", "n_clicks"),
        State("advice-battery-temp", "value"),
        State("advice-ambient-temp", "value"),
        State("advice-device-state", "value"),
        prevent_initial_call=True,
    )
    def request_advice(n_clicks: int, battery_temp, ambient_temp, device_state):
        return submit_advice(battery_temp, ambient_temp, device_state)
