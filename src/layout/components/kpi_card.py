"""
src/layout/components/kpi_card.py
──────────────────────────────────
Sensor widget cards for the overview page.
"""
from dash import html

MUTED = "#8b949e"


def kpi_card(
    label: str,
    value: str,
    color: str = "#c9d1d9",
    icon: str = "",
    details: list[str] | None = None,
    footer=None,
) -> html.Div:
    """
    Sensor reading card.

    Args:
        label: Reading name (shown above value)
        value: Formatted main value
        color: Value text color (reflects threshold status)
        icon: Optional emoji icon
        details: Secondary lines shown under the value
        footer: Optional component (status dot, retry button) at the bottom
    """
    header = [html.Span(label, className="kpi-label")]
    if icon:
        header.insert(0, html.Span(icon, style={"marginRight": "6px"}))

    children = [
        html.Div(header, style={"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".06em"}),
        html.Div(value, style={"fontSize": "1.5rem", "fontWeight": "700", "color": color, "lineHeight": "1.2", "marginTop": "4px"}),
    ]
    for line in details or []:
        children.append(html.Div(line, style={"fontSize": ".72rem", "color": MUTED, "marginTop": "2px"}))
    if footer is not None:
        children.append(html.Div(footer, style={"marginTop": "8px", "display": "flex", "gap": "8px", "alignItems": "center"}))

    return html.Div(children, className="chart-card", style={"padding": "14px 16px", "height": "100%"})
