from .classifier import EMOTION_LABELS, analyze_emotion, analyze_emotion_rule_based
from .intents import detect_intents
from .mapper import get_wellness_activities
from .responses import generate_response

__all__ = [
    "EMOTION_LABELS",
    "analyze_emotion",
    "analyze_emotion_rule_based",
    "detect_intents",
    "get_wellness_activities",
    "generate_response",
]
