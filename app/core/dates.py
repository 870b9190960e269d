from datetime import datetime, timezone
from typing import Any, Optional


def parse_iso_datetime(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 date or datetime string into an aware ``datetime``.

    Date-only strings (``2024-08-20``) and naive datetimes are taken as
    UTC so that every parsed value can be ordered against every other.
    Returns ``None`` for anything that is not a parseable string.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # fromisoformat only accepts a trailing "Z" from Python 3.11 on
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
