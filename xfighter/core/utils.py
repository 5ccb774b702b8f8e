# xfighter/core/utils.py
import re
from datetime import datetime
from urllib.parse import quote

# The service emits up to nanosecond precision; datetime keeps microseconds.
_FRACTION = re.compile(r"\.(\d{1,6})\d*")


def api_path(*segments):
    """Joins URL path segments, escaping each one."""
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)


def parse_timestamp(value):
    """Parses a service timestamp into an aware datetime, or None if absent."""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0"), text, count=1)
    return datetime.fromisoformat(text)


def format_price(cents):
    """Formats a price in cents as a dollar string."""
    if cents is None:
        return "-"
    return f"${cents / 100:.2f}"
