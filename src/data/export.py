"""
src/data/export.py
──────────────────
Data export: bundle the current read model into a downloadable JSON file.
"""
from __future__ import annotations

import json
from datetime import UTC, datetime

EXPORT_PREFIX = "thermosense-data"


def export_filename(now: datetime) -> str:
    """thermosense-data-<YYYY-MM-DD>.json"""
    return f"{EXPORT_PREFIX}-{now.date().isoformat()}.json"


def build_export(data: dict, now: datetime | None = None) -> tuple[str, str]:
    """
    Serialize a store snapshot for download.

    Returns:
        (json_text, filename)
    """
    now = now or datetime.now(tz=UTC)
    document = {**data, "timestamp": now.isoformat()}
    return json.dumps(document, indent=2, ensure_ascii=False), export_filename(now)
