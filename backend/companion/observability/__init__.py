from __future__ import annotations

from .request_id import accept_request_id, get_request_id, new_request_id
from .logging import structured_log, safe_redact

__all__ = [
    "accept_request_id",
    "get_request_id",
    "new_request_id",
    "structured_log",
    "safe_redact",
]
