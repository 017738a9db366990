from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """Serialize as ISO-8601 UTC with millisecond precision, e.g. 2026-10-17T08:15:00.123Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    parsed = datetime.fromisoformat(v)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_id_locale(value: datetime, tz: Optional[tzinfo] = None) -> str:
    """Render a timestamp the way the id-ID locale does: 17/10/2026, 15.05.09."""
    local = value.astimezone(tz)
    return local.strftime("%d/%m/%Y, %H.%M.%S")
