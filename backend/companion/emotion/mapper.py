from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from backend.companion.schemas import ActivityRecommendation

from .intents import SKIP_WORKOUT, SLEEP_ISSUES

MAX_ACTIVITIES = 4
DEFAULT_EMOTION = "stress"
SLEEP_ACTIVITY_ID = "sleep-routine"
MICRO_WORKOUT_ACTIVITY_ID = "micro-workout"

# Ranked by priority; rank 1 is the best match for the emotion.
ACTIVITY_MAP: Dict[str, Tuple[str, ...]] = {
    "stress": ("box-breathing", "body-scan-meditation", "stress-journal", "gentle-yoga", "nature-walk"),
    "anxiety": ("5-4-3-2-1-grounding", "alternate-nostril-breathing", "anxiety-reframe", "calming-meditation"),
    "sadness": ("gratitude-journal", "mood-boost-movement", "self-compassion-meditation", "music-therapy"),
    "fatigue": ("power-nap-guide", "energy-breathing", "sleep-hygiene-check", "caffeine-timing"),
    "unmotivated": ("micro-goal-setting", "victory-log", "motivation-meditation", "5-min-movement"),
    "anger": ("anger-release-breathing", "physical-release", "perspective-shift"),
    "joy": ("celebrate-wins", "gratitude-practice", "energy-channel"),
}


def get_wellness_activities(emotion: str, intents: Iterable[str] = ()) -> List[ActivityRecommendation]:
    ranked = ACTIVITY_MAP.get(emotion, ACTIVITY_MAP[DEFAULT_EMOTION])
    activities = [ActivityRecommendation(id=activity_id, priority=rank) for rank, activity_id in enumerate(ranked, start=1)]

    intent_set = set(intents)
    if SLEEP_ISSUES in intent_set:
        activities.insert(0, ActivityRecommendation(id=SLEEP_ACTIVITY_ID, priority=0))
    if SKIP_WORKOUT in intent_set:
        activities.insert(0, ActivityRecommendation(id=MICRO_WORKOUT_ACTIVITY_ID, priority=0))

    return activities[:MAX_ACTIVITIES]


__all__ = [
    "ACTIVITY_MAP",
    "DEFAULT_EMOTION",
    "MAX_ACTIVITIES",
    "MICRO_WORKOUT_ACTIVITY_ID",
    "SLEEP_ACTIVITY_ID",
    "get_wellness_activities",
]
