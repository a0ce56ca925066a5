from datetime import datetime, timezone
from typing import Any, Optional
import uuid

from fastapi import Request


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_datetime(dt_str: Any) -> datetime | Any:
    """Parse a datetime string, handling timezone information.

    Args:
        dt_str: Datetime string to parse

    Returns:
        Parsed datetime object, or the value unchanged if it is not a string
    """
    if dt_str is None or isinstance(dt_str, datetime):
        return dt_str

    if isinstance(dt_str, str) and "Z" in dt_str:
        dt_str = dt_str.replace("Z", "+00:00")

    try:
        return datetime.fromisoformat(dt_str)
    except (TypeError, ValueError):
        return dt_str


def is_valid_uuid(value: str) -> bool:
    """Accept only the canonical 8-4-4-4-12 hex form the store understands."""
    try:
        return str(uuid.UUID(value)) == value.lower()
    except (TypeError, ValueError, AttributeError):
        return False


def get_client_ip(request: Request) -> Optional[str]:
    """Return the originating client address for a request.

    The first hop of ``X-Forwarded-For`` wins when the API sits behind a
    proxy; otherwise the socket peer is used.
    """
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.client.host if request.client else None
