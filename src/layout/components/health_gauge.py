"""
src/layout/components/health_gauge.py
──────────────────────────────────────
Health score gauge using Plotly indicator chart.
"""
from __future__ import annotations

import plotly.graph_objects as go

from config.theme import THEMES, normalize_theme


def _gauge_color(score: float) -> str:
    if score >= 80:
        return "#2ea44f"
    if score >= 60:
        return "#58a6ff"
    if score >= 40:
        return "#e8a020"
    return "#da3633"


def health_gauge_figure(
    health_score: float,
    title: str = "Health Score",
    height: int = 200,
    theme: str | None = None,
) -> go.Figure:
    """Plotly gauge indicator for a 0–100 health score, styled for the active theme."""
    palette = THEMES[normalize_theme(theme)]
    color = _gauge_color(health_score)

    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=health_score,
        number={"font": {"color": color, "size": 28}},
        title={"text": title, "font": {"color": palette["muted"], "size": 12}},
        gauge={
            "axis": {
                "range": [0, 100],
                "tickwidth": 1,
                "tickcolor": palette["border"],
                "tickfont": {"color": palette["muted"], "size": 9},
            },
            "bar": {"color": color, "thickness": 0.25},
            "bgcolor": "rgba(0,0,0,0)",
            "borderwidth": 0,
            "steps": [
                {"range": [0, 40],  "color": "rgba(218,54,51,0.15)"},
                {"range": [40, 60], "color": "rgba(232,160,32,0.10)"},
                {"range": [60, 80], "color": "rgba(88,166,255,0.10)"},
                {"range": [80, 100],"color": "rgba(46,164,79,0.10)"},
            ],
        },
    ))

    fig.update_layout(
        template=palette["plotly_template"],
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=20, r=20, t=40, b=20),
        height=height,
        font=dict(color=palette["text"]),
    )
    return fig
