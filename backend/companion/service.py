from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Optional

from .emotion import analyze_emotion, detect_intents, generate_response, get_wellness_activities
from .observability import structured_log
from .providers import SentimentProvider
from .schemas import AnalysisResult

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "I'm here to support you. Could you tell me more about how you're feeling?"


class WellnessCompanionService:
    def __init__(self, provider: Optional[SentimentProvider] = None, rng: Optional[random.Random] = None) -> None:
        self.provider = provider
        self.rng = rng

    async def analyze_message(self, text: str, request_id: Optional[str] = None) -> AnalysisResult:
        try:
            # 1) Emotion (remote model, keyword fallback)
            emotion_result = await analyze_emotion(text, provider=self.provider)

            # 2) Intents
            intents = detect_intents(text)

            # 3) Activities for the emotion, adjusted by intents
            activities = get_wellness_activities(emotion_result.primary, intents)

            # 4) Reply
            reply = generate_response(emotion_result, activities, rng=self.rng)
        except Exception:  # noqa: BLE001
            logger.exception("[Companion] analysis failed", extra={"request_id": request_id})
            return AnalysisResult(
                success=False,
                message=FALLBACK_MESSAGE,
                emotion="neutral",
                method="fallback",
                timestamp=datetime.now(timezone.utc),
            )

        structured_log(
            {
                "event": "companion_analysis",
                "request_id": request_id,
                "emotion": reply.emotion,
                "confidence": round(reply.confidence, 3),
                "method": emotion_result.method,
                "intents": intents,
                "activity_ids": [a.id for a in activities],
                "message_len": len(text),
            }
        )
        return AnalysisResult(
            success=True,
            message=reply.message,
            emotion=reply.emotion,
            confidence=reply.confidence,
            activities=reply.activities,
            intents=intents,
            method=emotion_result.method,
            timestamp=reply.timestamp,
        )


__all__ = ["WellnessCompanionService", "FALLBACK_MESSAGE"]
