"""
app.py
──────
ThermoSense — Application Entry Point.

Startup sequence:
  1. Configure logging
  2. Take a first reading from every source
  3. Create Dash app with DARKLY bootstrap theme
  4. Register all callbacks
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from src.data import store
from src.layout.main import create_layout

# ── 1. Logging ────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ── 2. Initial readings ───────────────────────────────────────────────────────
print("Reading initial battery, weather and performance data...")
store.refresh_battery()
store.refresh_weather()
store.refresh_performance()
store.refresh_device_temperature()
print("Sources ready.")

# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="ThermoSense",
)

server = app.server  # gunicorn entry point
app.layout = create_layout()

# ── 4. Register callbacks ─────────────────────────────────────────────────────
from src.callbacks import advisor, navigation, notifications, overview, sources

navigation.register(app)
sources.register(app)
overview.register(app)
advisor.register(app)
notifications.register(app)

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
