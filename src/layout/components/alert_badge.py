"""
src/layout/components/alert_badge.py
──────────────────────────────────────
Alert level / severity badges and source status dot.
"""

from dash import html

from config.alerts import (
    LEVEL_COLORS,
    LEVEL_LABELS,
    SEVERITY_COLORS,
    SEVERITY_LABELS,
    STATUS_DOT_COLORS,
)

MUTED = "#8b949e"


def _badge(label: str, color: str, size: str = ".65rem") -> html.Span:
    return html.Span(
        label,
        style={
            "fontSize": size,
            "fontWeight": "700",
            "color": color,
            "border": f"1px solid {color}",
            "borderRadius": "4px",
            "padding": "1px 7px",
            "whiteSpace": "nowrap",
        },
    )


def alert_badge(level: str, size: str = ".72rem") -> html.Span:
    """Alert level badge (safe / warning / danger / error)."""
    return _badge(LEVEL_LABELS.get(level, level.capitalize()), LEVEL_COLORS.get(level, MUTED), size)


def severity_badge(severity: str) -> html.Span:
    """Notification severity badge (critical / warning / info)."""
    return _badge(SEVERITY_LABELS.get(severity, severity.capitalize()), SEVERITY_COLORS.get(severity, MUTED))


def status_dot(status: str, label: str) -> html.Span:
    """Colored dot + source name, e.g. ● Weather."""
    color = STATUS_DOT_COLORS.get(status, MUTED)
    return html.Span(
        [
            html.Span("●", style={"color": color, "marginRight": "4px"}),
            html.Span(label, style={"color": MUTED}),
        ],
        title=status,
        style={"fontSize": ".72rem", "whiteSpace": "nowrap"},
    )
