from __future__ import annotations

import re
import uuid
from typing import Optional

from fastapi import Request

from backend.companion.config import get_settings

# Incoming ids are echoed into logs and response headers: hex/uuid-ish, max 64 chars.
SAFE_REQUEST_ID_PATTERN = re.compile(r"^[a-fA-F0-9\-]{1,64}$")


def new_request_id() -> str:
    return str(uuid.uuid4())


def accept_request_id(value: Optional[str]) -> Optional[str]:
    """Return the client-supplied id when it is safe to propagate, else None."""
    if not value:
        return None
    candidate = value.strip()
    if SAFE_REQUEST_ID_PATTERN.match(candidate):
        return candidate
    return None


def get_request_id(request: Optional[Request], header_name: Optional[str] = None) -> str:
    """Id assigned by RequestIdMiddleware, falling back to the configured header."""
    if request is None:
        return new_request_id()
    state_rid = request.scope.get("state", {}).get("request_id")
    if isinstance(state_rid, str) and state_rid.strip():
        return state_rid
    header = header_name or get_settings().request_id_header
    return accept_request_id(request.headers.get(header)) or new_request_id()


__all__ = ["SAFE_REQUEST_ID_PATTERN", "accept_request_id", "get_request_id", "new_request_id"]
