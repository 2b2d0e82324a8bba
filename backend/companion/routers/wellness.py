"""Wellness companion endpoints: message analysis and the activity library."""
from __future__ import annotations

import functools
import json
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from backend.companion.activities import (
    CATEGORIES,
    get_activities_by_category,
    get_activities_by_difficulty,
    get_activity_by_id,
    get_all_activities,
    get_quick_activities,
)
from backend.companion.config import get_settings
from backend.companion.observability import get_request_id
from backend.companion.providers import create_provider_from_settings
from backend.companion.service import WellnessCompanionService

router = APIRouter(prefix="/api/wellness", tags=["wellness"])
logger = logging.getLogger(__name__)

MESSAGE_REQUIRED_ERROR = "Message is required and must be a string"


@functools.lru_cache(maxsize=1)
def get_companion_service() -> WellnessCompanionService:
    return WellnessCompanionService(provider=create_provider_from_settings(get_settings()))


def _error(status_code: int, error: str, request_id: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "request_id": request_id})


async def _read_message(request: Request) -> Optional[str]:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("message")
    if not isinstance(message, str) or not message:
        return None
    return message


@router.post("/analyze", response_model=None)
async def analyze(
    request: Request,
    service: WellnessCompanionService = Depends(get_companion_service),
) -> Dict[str, Any] | JSONResponse:
    rid = get_request_id(request)
    try:
        message = await _read_message(request)
        if message is None:
            return _error(400, MESSAGE_REQUIRED_ERROR, rid)

        max_chars = get_settings().max_message_chars
        if max_chars and len(message) > max_chars:
            return _error(400, f"Message must be at most {max_chars} characters", rid)

        logger.info(
            "[API] analyze start",
            extra={"route": "/api/wellness/analyze", "request_id": rid, "message_len": len(message)},
        )
        result = await service.analyze_message(message, request_id=rid)
        return result.model_dump(mode="json")
    except Exception:  # noqa: BLE001
        logger.exception("[API] analyze failed", extra={"request_id": rid})
        return _error(500, "Failed to analyze message", rid)


@router.get("/activities")
async def list_activities(
    difficulty: Optional[str] = Query(None, description="Only activities of this difficulty"),
    quick: bool = Query(False, description="Only activities of five minutes or less"),
) -> Dict[str, Any]:
    activities = get_activities_by_difficulty(difficulty) if difficulty else get_all_activities()
    if quick:
        quick_ids = {a.id for a in get_quick_activities()}
        activities = [a for a in activities if a.id in quick_ids]
    return {
        "success": True,
        "count": len(activities),
        "activities": [a.model_dump() for a in activities],
    }


@router.get("/activities/{activity_id}", response_model=None)
async def get_activity(activity_id: str, request: Request) -> Dict[str, Any] | JSONResponse:
    activity = get_activity_by_id(activity_id)
    if activity is None:
        return _error(404, "Activity not found", get_request_id(request))
    return {"success": True, "activity": activity.model_dump()}


@router.get("/categories")
async def list_categories() -> Dict[str, Any]:
    return {
        "success": True,
        "categories": {key: info.model_dump() for key, info in CATEGORIES.items()},
    }


@router.get("/categories/{category}")
async def list_category_activities(category: str) -> Dict[str, Any]:
    activities = get_activities_by_category(category)
    return {
        "success": True,
        "category": category,
        "count": len(activities),
        "activities": [a.model_dump() for a in activities],
    }


__all__ = ["router", "get_companion_service"]
