"""
src/layout/navbar.py
─────────────────────
Navigation bar with page links and theme toggle.
"""

import dash_bootstrap_components as dbc
from dash import html

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#58a6ff"

_PAGES = [
    ("Dashboard", "/", "nav-overview"),
    ("Advisor", "/advisor", "nav-advisor"),
    ("Notifications", "/notifications", "nav-notifications"),
    ("Settings", "/settings", "nav-settings"),
]


def create_navbar() -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            [
                # Brand
                dbc.NavbarBrand(
                    [
                        html.Span("🌡", style={"marginRight": "8px", "fontSize": "1.1rem"}),
                        html.Span(
                            "ThermoSense", style={"fontWeight": "700", "letterSpacing": ".04em"}
                        ),
                    ],
                    href="/",
                    style={"color": ACCENT, "textDecoration": "none"},
                ),
                dbc.NavbarToggler(id="navbar-toggler", n_clicks=0),
                dbc.Collapse(
                    dbc.Nav(
                        [
                            *[
                                dbc.NavItem(dbc.NavLink(label, href=href, id=nav_id, active="exact"))
                                for label, href, nav_id in _PAGES
                            ],
                            dbc.NavItem(
                                html.Span(
                                    id="nav-notification-count",
                                    style={"fontSize": ".72rem", "color": "#da3633", "fontWeight": "700"},
                                ),
                                style={"display": "flex", "alignItems": "center"},
                            ),
                            # Theme toggle
                            dbc.NavItem(
                                html.Button(
                                    "◐",
                                    id="theme-toggle-btn",
                                    n_clicks=0,
                                    title="Toggle light / dark theme",
                                    style={
                                        "background": "transparent",
                                        "border": f"1px solid {BORDER}",
                                        "color": ACCENT,
                                        "borderRadius": "4px",
                                        "fontSize": ".8rem",
                                        "padding": "2px 10px",
                                        "marginLeft": "12px",
                                        "cursor": "pointer",
                                    },
                                ),
                                style={"display": "flex", "alignItems": "center"},
                            ),
                        ],
                        className="ms-auto",
                        navbar=True,
                    ),
                    id="navbar-collapse",
                    navbar=True,
                    is_open=False,
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )
