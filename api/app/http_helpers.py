from typing import Any

from fastapi import HTTPException
from pydantic import ValidationError

_VALUE_ERROR_PREFIX = "Value error, "


def _error_line(err: dict[str, Any]) -> str:
    loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    msg = str(err.get("msg") or "Invalid value")
    if msg.startswith(_VALUE_ERROR_PREFIX):
        msg = msg[len(_VALUE_ERROR_PREFIX):]
    return f"{loc}: {msg}" if loc else msg


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    return "; ".join(_error_line(e) for e in errors) or "Invalid request"


def validation_http_error(exc: ValidationError) -> HTTPException:
    return HTTPException(status_code=400, detail=format_validation_errors(exc.errors()))


def require_text_field(payload: Any, field: str) -> str:
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise HTTPException(status_code=400, detail=f"{field} is required")
    return value.strip()
