from __future__ import annotations

import re

_HF_TOKEN_PATTERN = re.compile(r"(hf_[A-Za-z0-9]{8,})")


def redact_secrets(s: str) -> str:
    if not s:
        return s
    redacted = _HF_TOKEN_PATTERN.sub("[redacted]", s)
    # Strip simple Authorization: Bearer ... patterns
    redacted = re.sub(r"(Authorization:\s*Bearer\s+)[^\s]+", r"\1[redacted]", redacted, flags=re.IGNORECASE)
    return redacted


def safe_error_detail(exc: Exception) -> str:
    text = redact_secrets(str(exc))
    return text[:200]


__all__ = ["redact_secrets", "safe_error_detail"]
