"""Sentiment provider factory driven by application settings."""

from __future__ import annotations

from typing import Optional

from backend.companion.config import Settings, get_settings

from .base import SentimentProvider
from .huggingface_provider import HuggingFaceProvider


def create_provider_from_settings(settings: Optional[Settings] = None) -> Optional[SentimentProvider]:
    """
    Create the sentiment provider named by SENTIMENT_PROVIDER.

    Returns:
        A configured provider, or None when remote classification is disabled
        ("none"), in which case callers use the rule-based classifier only.

    Raises:
        ValueError: If the provider name is unknown
    """
    s = settings or get_settings()
    if not s.remote_sentiment_enabled:
        return None

    if s.sentiment_provider == "huggingface":
        return HuggingFaceProvider(
            api_url=s.huggingface_api_url,
            api_key=s.huggingface_api_key,
            timeout_seconds=s.sentiment_timeout_seconds,
            connect_timeout_seconds=s.sentiment_connect_timeout_seconds,
        )

    raise ValueError(f"Unknown SENTIMENT_PROVIDER: {s.sentiment_provider}. Must be 'huggingface' or 'none'")


__all__ = ["create_provider_from_settings"]
