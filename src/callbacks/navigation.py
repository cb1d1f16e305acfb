"""
src/callbacks/navigation.py — routing, navbar, theme and data export callbacks.
"""
from __future__ import annotations

from dash import Input, Output, State, dcc

from config.theme import THEME_STORAGE_KEY, normalize_theme, theme_style, toggle_theme
from src.data import store
from src.data.export import build_export


def register(app) -> None:
    """Register navigation, theme and export callbacks."""

    # ── Page routing ──────────────────────────────────────────────────────────
    from src.pages import advisor, notifications, overview, settings

    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
    )
    def display_page(pathname: str):
        routes = {
            "/": overview.layout,
            "/advisor": advisor.layout,
            "/notifications": notifications.layout,
            "/settings": settings.layout,
        }
        return routes.get(pathname, overview.layout)()

    # ── Navbar collapse ───────────────────────────────────────────────────────
    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar(n_clicks: int, is_open: bool) -> bool:
        return not is_open

    # ── Theme (persisted in browser local storage) ────────────────────────────
    @app.callback(
        Output(THEME_STORAGE_KEY, "data"),
        Input("theme-toggle-btn", "n_clicks"),
        State(THEME_STORAGE_KEY, "data"),
        prevent_initial_call=True,
    )
    def toggle_theme_navbar(n_clicks: int, theme: str) -> str:
        return toggle_theme(theme)

    @app.callback(
        Output(THEME_STORAGE_KEY, "data", allow_duplicate=True),
        Input("settings-theme-btn", "n_clicks"),
        State(THEME_STORAGE_KEY, "data"),
        prevent_initial_call=True,
    )
    def toggle_theme_settings(n_clicks: int, theme: str) -> str:
        return toggle_theme(theme)

    @app.callback(
        [
            Output("app-root", "style"),
            Output("app-root", "className"),
        ],
        Input(THEME_STORAGE_KEY, "data"),
    )
    def apply_theme(theme: str):
        theme = normalize_theme(theme)
        return theme_style(theme), f"theme-{theme}"

    @app.callback(
        Output("settings-theme-label", "children"),
        Input(THEME_STORAGE_KEY, "data"),
    )
    def show_theme(theme: str) -> str:
        return f"Current theme: {normalize_theme(theme)}"

    # ── Data export ───────────────────────────────────────────────────────────
    @app.callback(
        Output("download-export", "data"),
        Input("settings-export-btn", "n_clicks"),
        prevent_initial_call=True,
    )
    def export_data(n_clicks: int):
        content, filename = build_export(store.snapshot())
        return dcc.send_string(content, filename, type="application/json")
