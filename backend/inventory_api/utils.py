# inventory_api/utils.py
from datetime import datetime, timezone
from typing import Any, Optional

from .errors import NotFoundError
from .schemas import Envelope


def is_empty(value: Any) -> bool:
    """None and blank strings count as empty; 0 and False do not."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_int(value: Any) -> Optional[int]:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def parse_id(value: str, not_found_message: str) -> int:
    # a non-integer id can never match a surrogate key
    parsed = parse_int(value)
    if parsed is None:
        raise NotFoundError(not_found_message)
    return parsed


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _compact(envelope: Envelope) -> dict:
    # only top-level keys are dropped; None inside row data is meaningful
    return {k: v for k, v in envelope.model_dump().items() if v is not None}


def ok(data: Any = None, message: Optional[str] = None, collection: bool = False, **extra) -> dict:
    payload = {"success": True, "data": data, "message": message}
    if collection:
        payload["count"] = len(data)
    return _compact(Envelope(**payload, **extra))


def fail(message: str, error: Optional[str] = None) -> dict:
    return _compact(Envelope(success=False, message=message, error=error))
