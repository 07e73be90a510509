"""JSON output helpers for forge-deployments."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .constants import JSON_INDENT


def save_json(data: Any, output_path: Path) -> None:
    """
    Write data as pretty-printed JSON, replacing any existing file.

    Args:
        data: JSON-serializable value
        output_path: Destination file (parent directory must exist)
    """
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=JSON_INDENT, ensure_ascii=False)


def format_timestamp(moment: datetime) -> str:
    """
    Format a datetime as ISO-8601 UTC with millisecond precision.

    Naive datetimes are taken to be UTC.

    Returns:
        String like "2025-01-31T12:00:00.000Z"
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
