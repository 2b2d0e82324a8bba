from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from backend.companion.schemas import ActivityRecommendation, CompanionReply, EmotionResult

DEFAULT_POOL = "neutral"

RESPONSE_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    "stress": (
        "I can tell you're feeling overwhelmed right now. Let's take a moment to reset.",
        "Work stress is tough - you're not alone in this. Let's find some calm together.",
        "That sounds really stressful. Taking care of your mental health is just as important as physical health.",
    ),
    "anxiety": (
        "Anxiety can be really challenging. Let's ground ourselves and find some peace.",
        "I hear you. Anxiety is real, but we have tools to help you feel more centered.",
        "Take a deep breath - you're safe, and we'll work through this together.",
    ),
    "fatigue": (
        "Being tired is completely valid. Rest is a crucial part of health.",
        "Exhaustion is your body's way of asking for care. Let's listen to it.",
        "You don't have to power through everything. Let's focus on recovery.",
    ),
    "unmotivated": (
        "It's totally normal to feel this way sometimes. Small steps still count!",
        "Motivation comes and goes - that's human. Let's make today manageable.",
        "You don't need to be perfect. Showing up, even a little, is progress.",
    ),
    "sadness": (
        "I'm here with you. It's okay to not feel okay sometimes.",
        "Sadness is part of being human. Let's be gentle with ourselves today.",
        "Your feelings are valid. Let's find something that might help lift your spirits a bit.",
    ),
    "joy": (
        "That's wonderful! Let's capture this positive energy!",
        "I love hearing this! Keep riding this wave of positivity.",
        "Amazing! This is what it's all about - celebrate yourself!",
    ),
    "neutral": (
        "Thanks for checking in. How can I support your wellness today?",
        "I'm here to help you feel your best. What do you need right now?",
        "Let's see what we can do to support your health journey today.",
    ),
}


def templates_for(emotion: str) -> Tuple[str, ...]:
    return RESPONSE_TEMPLATES.get(emotion, RESPONSE_TEMPLATES[DEFAULT_POOL])


def generate_response(
    emotion_result: EmotionResult,
    activities: List[ActivityRecommendation],
    rng: Optional[random.Random] = None,
) -> CompanionReply:
    chooser = rng or random
    message = chooser.choice(templates_for(emotion_result.primary))
    return CompanionReply(
        message=message,
        emotion=emotion_result.primary,
        confidence=emotion_result.confidence,
        activities=list(activities),
        timestamp=datetime.now(timezone.utc),
    )


__all__ = ["RESPONSE_TEMPLATES", "DEFAULT_POOL", "generate_response", "templates_for"]
