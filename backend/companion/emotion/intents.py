from __future__ import annotations

import re
from typing import Dict, List, Pattern

SKIP_WORKOUT = "skipWorkout"
SEEK_MOTIVATION = "seekMotivation"
ASK_ADVICE = "askAdvice"
REPORT_SUCCESS = "reportSuccess"
EXPRESS_GRATITUDE = "expressGratitude"
SLEEP_ISSUES = "sleepIssues"
STRESS_RELIEF = "stressRelief"

INTENT_PATTERNS: Dict[str, Pattern[str]] = {
    SKIP_WORKOUT: re.compile(r"skip|don't feel like|too tired|not today|maybe tomorrow|give up", re.IGNORECASE),
    SEEK_MOTIVATION: re.compile(r"motivate|inspire|encourage|need help|struggling|can't do", re.IGNORECASE),
    ASK_ADVICE: re.compile(r"should i|what do|how do|advice|recommend|suggest", re.IGNORECASE),
    REPORT_SUCCESS: re.compile(r"did it|completed|finished|crushed|nailed|accomplished", re.IGNORECASE),
    EXPRESS_GRATITUDE: re.compile(r"thank|thanks|appreciate|grateful", re.IGNORECASE),
    SLEEP_ISSUES: re.compile(r"can't sleep|insomnia|tired|exhausted|sleep|rest", re.IGNORECASE),
    STRESS_RELIEF: re.compile(r"stress|overwhelm|calm|relax|breathe", re.IGNORECASE),
}


def detect_intents(text: str) -> List[str]:
    """Every intent whose pattern matches, in declaration order."""
    return [intent for intent, pattern in INTENT_PATTERNS.items() if pattern.search(text)]


__all__ = [
    "INTENT_PATTERNS",
    "SKIP_WORKOUT",
    "SEEK_MOTIVATION",
    "ASK_ADVICE",
    "REPORT_SUCCESS",
    "EXPRESS_GRATITUDE",
    "SLEEP_ISSUES",
    "STRESS_RELIEF",
    "detect_intents",
]
