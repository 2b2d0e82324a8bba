from __future__ import annotations

import logging
import time
from logging.config import dictConfig
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.companion.config import get_settings, safe_error_detail, settings_public_summary, validate_for_env
from backend.companion.middleware.request_id import RequestIdMiddleware
from backend.companion.observability import get_request_id
from backend.companion.routers.wellness import router as wellness_router

_settings = get_settings()

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        }
    },
    "root": {
        "level": _settings.log_level.upper(),
        "handlers": ["console"],
    },
}


dictConfig(LOGGING_CONFIG)
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"
_start_time = time.monotonic()

app = FastAPI(title="Wellness Companion API", version=APP_VERSION)
_settings_summary = validate_for_env(_settings)
logger.info(
    "[CFG] loaded",
    extra={
        "env": _settings_summary.get("env"),
        "provider": _settings_summary.get("sentiment_provider"),
        "remote_enabled": _settings_summary.get("remote_sentiment_enabled"),
        "timeouts": {
            "request": _settings_summary.get("sentiment_timeout_seconds"),
            "connect": _settings_summary.get("sentiment_connect_timeout_seconds"),
        },
        "issues": _settings_summary.get("issues"),
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_credentials="*" not in _settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[_settings.request_id_header],
)
app.add_middleware(RequestIdMiddleware, header_name=_settings.request_id_header)

app.include_router(wellness_router)


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "version": APP_VERSION,
        "uptime_seconds": int(time.monotonic() - _start_time),
    }


def _env_missing(required: list[str]) -> list[str]:
    return [var for var in required if not getattr(_settings, var.lower(), None)]


@app.get("/ready")
async def ready() -> JSONResponse:
    summary = settings_public_summary(_settings)
    if _settings.app_env == "prod":
        missing = _env_missing(_settings.required_env_vars())
        if missing:
            return JSONResponse(
                status_code=503,
                content={"status": "not_ready", "missing_env": missing, "sentiment": summary},
            )
    return JSONResponse(status_code=200, content={"status": "ok", "env": _settings.app_env, "sentiment": summary})


@app.exception_handler(Exception)
async def handle_unhandled_exception(request: Request, exc: Exception) -> JSONResponse:  # noqa: BLE001
    logger.exception("Unhandled error in request", extra={"request_id": get_request_id(request)})
    content = {"ok": False, "error_code": "internal_error", "message": "Internal server error"}
    if _settings.debug_errors == 1:
        content["detail"] = safe_error_detail(exc)
    return JSONResponse(status_code=500, content=content)
