from __future__ import annotations

import json
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)

_REDACTED_KEYS = ("message", "user_text", "text", "inputs", "body", "payload")


def safe_redact(event: Dict[str, Any]) -> Dict[str, Any]:
    # Shallow redact keys that may carry user text
    redacted = dict(event) if isinstance(event, dict) else {}
    for key in _REDACTED_KEYS:
        if key in redacted:
            redacted.pop(key)
    return redacted


def structured_log(event: Dict[str, Any]) -> None:
    try:
        safe_event = safe_redact(event)
        logger.info(json.dumps(safe_event, separators=(",", ":"), default=str))
    except (TypeError, ValueError):
        # logging must never break the request path
        return


__all__ = ["structured_log", "safe_redact"]
