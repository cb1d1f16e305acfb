"""
src/pages/advisor.py
─────────────────────
Advisory page: local "what-if" scenario analyzer and remote advice form.
"""
import dash_bootstrap_components as dbc
from dash import dcc, html

from src.data.models import DeviceState, UsageScenario

MUTED = "#8b949e"

_LABEL_STYLE = {"fontSize": ".72rem", "color": MUTED, "textTransform": "uppercase"}

_SCENARIO_OPTIONS = [{"label": s.value.capitalize(), "value": s.value} for s in UsageScenario]
_STATE_OPTIONS = [{"label": s.value.capitalize(), "value": s.value} for s in DeviceState]


def _field(label: str, component) -> html.Div:
    return html.Div([html.Label(label, style=_LABEL_STYLE), component], className="mb-2")


def layout() -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.H2("Battery Advisor", className="page-title"),
                    html.P("Try a scenario locally or ask the ThermoSense advice service", className="page-subtitle"),
                ],
                className="page-header",
            ),
            dbc.Row(
                [
                    # ── Scenario analyzer ──────────────────────────────────────
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("Scenario Analyzer", className="chart-title"),
                                _field("Device Temperature (°C)", dbc.Input(id="scenario-device-temp", type="number", value=32, step=0.1)),
                                _field("Ambient Temperature (°C)", dbc.Input(id="scenario-ambient-temp", type="number", value=25, step=0.1)),
                                _field("Battery Level (%)", dbc.Input(id="scenario-battery-level", type="number", value=60, min=0, max=100, step=1)),
                                _field(
                                    "Usage Scenario",
                                    dcc.Dropdown(
                                        id="scenario-usage",
                                        options=_SCENARIO_OPTIONS,
                                        value=UsageScenario.BROWSING.value,
                                        clearable=False,
                                        className="dark-dropdown",
                                    ),
                                ),
                                dbc.Button("Analyze", id="scenario-submit-btn", n_clicks=0, color="primary", size="sm"),
                                html.Div(id="scenario-result", className="mt-3"),
                            ],
                            className="chart-card",
                        ),
                        md=6,
                    ),
                    # ── Remote advice ──────────────────────────────────────────
                    dbc.Col(
                        html.Div(
                            [
                                html.Div("ThermoSense Advice Service", className="chart-title"),
                                _field("Battery Temperature (°C)", dbc.Input(id="advice-battery-temp", type="number", value=30, step=0.1)),
                                _field("Ambient Temperature (°C)", dbc.Input(id="advice-ambient-temp", type="number", value=25, step=0.1)),
                                _field(
                                    "Device State",
                                    dcc.Dropdown(
                                        id="advice-device-state",
                                        options=_STATE_OPTIONS,
                                        value=DeviceState.IDLE.value,
                                        className="dark-dropdown",
                                    ),
                                ),
                                dbc.Button("Submit", id="advice-submit-btn", n_clicks=0, color="primary", size="sm"),
                                dcc.Loading(html.Div(id="advice-result", className="mt-3"), type="dot"),
                            ],
                            className="chart-card",
                        ),
                        md=6,
                    ),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.5rem"},
    )
