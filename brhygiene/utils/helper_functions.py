from datetime import datetime, timezone
from typing import Any
import json


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_datetime(dt_str: Any) -> datetime | Any:
    """Parse a datetime string, handling timezone information.

    Naive values are assumed to be UTC.

    Args:
        dt_str: Datetime string (or datetime) to parse

    Returns:
        Parsed, timezone-aware datetime object
    """
    if not dt_str:
        return utc_now()

    if isinstance(dt_str, datetime):
        parsed = dt_str
    else:
        if "Z" in dt_str:
            dt_str = dt_str.replace("Z", "+00:00")
        try:
            parsed = datetime.fromisoformat(dt_str)
        except ValueError:
            return utc_now()

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_json_list(value: Any) -> list | Any:
    """Decode a list that storage may hand back as a JSON-encoded string."""
    if value is None:
        return []
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            return [item.strip() for item in value.split(",") if item.strip()]
        return decoded if isinstance(decoded, list) else [decoded]
    return value
