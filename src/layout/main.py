"""
src/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Location for routing
  - dcc.Store for the persisted theme preference (browser local storage)
  - one dcc.Interval per data source, plus a render tick
  - Navbar + page content container
"""
from dash import dcc, html

from config.settings import settings
from config.theme import THEME_STORAGE_KEY, theme_style
from src.layout.navbar import create_navbar


def create_layout() -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Client-side state stores ──────────────────────────────────────
            dcc.Store(id=THEME_STORAGE_KEY, storage_type="local", data="dark"),
            dcc.Download(id="download-export"),

            # Refresh ticks: each source callback writes its own store
            dcc.Store(id="tick-battery"),
            dcc.Store(id="tick-weather"),
            dcc.Store(id="tick-performance"),
            dcc.Store(id="tick-device-temp"),

            # ── Routing ───────────────────────────────────────────────────────
            dcc.Location(id="url", refresh=False),

            # ── Source timers ─────────────────────────────────────────────────
            dcc.Interval(id="interval-battery", interval=settings.BATTERY_INTERVAL_MS, n_intervals=0),
            dcc.Interval(id="interval-weather", interval=settings.WEATHER_INTERVAL_MS, n_intervals=0),
            dcc.Interval(id="interval-performance", interval=settings.PERFORMANCE_INTERVAL_MS, n_intervals=0),
            dcc.Interval(id="interval-device-temp", interval=settings.DEVICE_TEMP_INTERVAL_MS, n_intervals=0),
            dcc.Interval(id="interval-live", interval=settings.RENDER_INTERVAL_MS, n_intervals=0),

            # ── Navigation bar ────────────────────────────────────────────────
            create_navbar(),

            # ── Page content ──────────────────────────────────────────────────
            html.Div(
                id="page-content",
                style={"minHeight": "calc(100vh - 60px)"},
            ),

            # ── Footer ────────────────────────────────────────────────────────
            html.Footer(
                [
                    html.Span("ThermoSense"),
                    html.Span(" · "),
                    html.Span("Battery & thermal health advisor"),
                    html.Span(" · "),
                    html.Span("Simulated device temperature"),
                ],
                style={
                    "textAlign": "center",
                    "padding": ".7rem",
                    "fontSize": ".72rem",
                    "color": "#8b949e",
                    "borderTop": "1px solid #30363d",
                    "marginTop": "2rem",
                },
            ),
        ],
        id="app-root",
        className="theme-dark",
        style=theme_style("dark"),
    )
