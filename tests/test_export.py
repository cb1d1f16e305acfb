"""
tests/test_export.py
─────────────────────
Tests for data export and theme helpers.
"""
import json

from config.theme import DEFAULT_THEME, normalize_theme, toggle_theme
from src.data.export import build_export, export_filename


class TestExport:
    def test_filename(self, now):
        assert export_filename(now) == "thermosense-data-2024-06-01.json"

    def test_document_has_timestamp(self, now):
        text, filename = build_export({"battery": {"level": 64}}, now=now)
        document = json.loads(text)
        assert document["battery"] == {"level": 64}
        assert document["timestamp"] == now.isoformat()
        assert filename.endswith("2024-06-01.json")

    def test_store_snapshot_serializes(self, fresh_store, now):
        fresh_store.refresh_battery()
        fresh_store.refresh_device_temperature()
        text, _ = build_export(fresh_store.snapshot(), now=now)
        document = json.loads(text)
        assert document["battery"]["level"] == 64
        assert len(document["history"]) == 1


class TestTheme:
    def test_toggle(self):
        assert toggle_theme("dark") == "light"
        assert toggle_theme("light") == "dark"

    def test_unknown_theme_normalized(self):
        assert normalize_theme("sepia") == DEFAULT_THEME
        assert normalize_theme(None) == DEFAULT_THEME
