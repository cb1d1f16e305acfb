"""
config/theme.py
───────────────
Light / dark palettes. The chosen theme is persisted in browser local
storage under THEME_STORAGE_KEY.
"""

THEME_STORAGE_KEY = "thermosense-theme"
DEFAULT_THEME = "dark"

THEMES: dict[str, dict[str, str]] = {
    "dark": {
        "background": "#0d1117",
        "card": "#161b22",
        "border": "#30363d",
        "text": "#c9d1d9",
        "muted": "#8b949e",
        "plotly_template": "plotly_dark",
    },
    "light": {
        "background": "#f6f8fa",
        "card": "#ffffff",
        "border": "#d0d7de",
        "text": "#24292f",
        "muted": "#57606a",
        "plotly_template": "plotly_white",
    },
}


def normalize_theme(theme: str | None) -> str:
    return theme if theme in THEMES else DEFAULT_THEME


def toggle_theme(theme: str | None) -> str:
    return "light" if normalize_theme(theme) == "dark" else "dark"


def theme_style(theme: str | None) -> dict:
    palette = THEMES[normalize_theme(theme)]
    return {
        "backgroundColor": palette["background"],
        "minHeight": "100vh",
        "color": palette["text"],
    }
