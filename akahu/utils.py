from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Mapping
from urllib.parse import urlencode


def format_rfc3339(value: datetime) -> str:
    """Render ``value`` the way Akahu expects date range bounds.

    Second precision; naive datetimes are taken as UTC and UTC is written
    with a ``Z`` suffix.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    rendered = value.isoformat(timespec="seconds")
    return rendered.replace("+00:00", "Z")


def params_with_date_range(start: datetime, end: datetime) -> Dict[str, str]:
    return {"start": format_rfc3339(start), "end": format_rfc3339(end)}


def path_with_params(path: str, params: Mapping[str, str]) -> str:
    """Append ``params`` to ``path`` as an encoded, key-sorted query string."""
    if not params:
        return path
    return f"{path}?{urlencode(sorted(params.items()))}"
