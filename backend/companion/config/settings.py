from __future__ import annotations

import functools
import json
from typing import Annotated, Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_HUGGINGFACE_API_URL = (
    "https://api-inference.huggingface.co/models/j-hartmann/emotion-english-distilroberta-base"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App / env
    app_env: str = Field("dev", alias="APP_ENV")
    debug_errors: int = Field(0, alias="DEBUG_ERRORS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    request_id_header: str = Field("x-request-id", alias="REQUEST_ID_HEADER")
    cors_origins: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")

    # Sentiment provider
    sentiment_provider: str = Field("huggingface", alias="SENTIMENT_PROVIDER")
    huggingface_api_url: str = Field(DEFAULT_HUGGINGFACE_API_URL, alias="HUGGINGFACE_API_URL")
    huggingface_api_key: Optional[str] = Field(None, alias="HUGGINGFACE_API_KEY")
    sentiment_timeout_seconds: float = Field(10.0, alias="SENTIMENT_TIMEOUT_SECONDS")
    sentiment_connect_timeout_seconds: float = Field(5.0, alias="SENTIMENT_CONNECT_TIMEOUT_SECONDS")

    # Request limits
    max_message_chars: int = Field(2000, alias="MAX_MESSAGE_CHARS")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors(cls, v: Any) -> List[str]:
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item).strip() for item in v if str(item).strip()]
        if isinstance(v, str):
            text = v.strip()
            if not text:
                return []
            if text == "*":
                return ["*"]
            try:
                parsed = json.loads(text)
                if isinstance(parsed, list):
                    return [str(item).strip() for item in parsed if str(item).strip()]
            except ValueError:
                pass
            return [item.strip() for item in text.split(",") if item.strip()]
        return []

    @field_validator("debug_errors", "max_message_chars")
    @classmethod
    def clamp_non_negative(cls, v: int) -> int:
        return max(0, v)

    @field_validator("sentiment_timeout_seconds", "sentiment_connect_timeout_seconds")
    @classmethod
    def clamp_timeout(cls, v: float) -> float:
        return max(0.1, float(v))

    @field_validator("request_id_header")
    @classmethod
    def normalize_header_name(cls, v: str) -> str:
        return (v or "").strip().lower() or "x-request-id"

    @field_validator("app_env", "sentiment_provider")
    @classmethod
    def normalize_lower(cls, v: str) -> str:
        return (v or "").strip().lower()

    @property
    def remote_sentiment_enabled(self) -> bool:
        return self.sentiment_provider not in ("", "none")

    def required_env_vars(self) -> list[str]:
        if self.sentiment_provider == "huggingface":
            return ["HUGGINGFACE_API_KEY"]
        return []


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def validate_for_env(settings: Settings) -> Dict[str, Any]:
    issues: list[str] = []
    if settings.app_env == "prod":
        if settings.debug_errors != 0:
            issues.append("DEBUG_ERRORS must be 0 in prod")
        if settings.sentiment_provider == "huggingface" and not settings.huggingface_api_key:
            issues.append("HUGGINGFACE_API_KEY required in prod when the huggingface provider is enabled")
        if "*" in settings.cors_origins:
            issues.append("CORS_ORIGINS should not be '*' in prod")
    summary = settings_public_summary(settings)
    summary["issues"] = issues
    return summary


def settings_public_summary(settings: Optional[Settings] = None) -> Dict[str, Any]:
    s = settings or get_settings()
    return {
        "env": s.app_env,
        "request_id_header": s.request_id_header,
        "sentiment_provider": s.sentiment_provider,
        "remote_sentiment_enabled": s.remote_sentiment_enabled,
        "sentiment_api_key_present": bool(s.huggingface_api_key),
        "sentiment_timeout_seconds": s.sentiment_timeout_seconds,
        "sentiment_connect_timeout_seconds": s.sentiment_connect_timeout_seconds,
        "max_message_chars": s.max_message_chars,
    }


__all__ = ["Settings", "get_settings", "settings_public_summary", "validate_for_env", "DEFAULT_HUGGINGFACE_API_URL"]
