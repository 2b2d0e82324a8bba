from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Literal, Mapping, Optional, Tuple, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .catalog import ACTIVITY_RECORDS, CATEGORY_RECORDS

Category = Literal[
    "breathing",
    "meditation",
    "grounding",
    "movement",
    "journaling",
    "mindset",
    "sleep",
    "quick-reset",
]
Difficulty = Literal["beginner", "intermediate"]

QUICK_ACTIVITY_MAX_SECONDS = 300


class CategoryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    icon: str
    description: str
    color: str


class Activity(BaseModel):
    """A guided wellness exercise.

    Guidance payloads differ per activity (instructions, script, prompts,
    checklist, ...) and are kept as extra fields.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    name: str
    category: Category
    duration: int = Field(ge=0)
    difficulty: Difficulty
    emoji: str = ""
    description: str
    benefits: Tuple[str, ...] = ()
    effectiveness: Dict[str, float] = Field(default_factory=dict)

    @field_validator("effectiveness")
    @classmethod
    def scores_in_unit_range(cls, v: Dict[str, float]) -> Dict[str, float]:
        for metric, score in v.items():
            if not 0.0 <= score <= 1.0:
                raise ValueError(f"effectiveness score for {metric!r} must be within [0, 1]")
        return v


def _build_categories() -> Dict[str, CategoryInfo]:
    missing = set(get_args(Category)) - set(CATEGORY_RECORDS)
    if missing:
        raise ValueError(f"category metadata missing for: {sorted(missing)}")
    return {key: CategoryInfo(**record) for key, record in CATEGORY_RECORDS.items()}


def _build_activities() -> Dict[str, Activity]:
    activities: Dict[str, Activity] = {}
    for record in ACTIVITY_RECORDS:
        activity = Activity(**record)
        if activity.id in activities:
            raise ValueError(f"duplicate activity id: {activity.id}")
        activities[activity.id] = activity
    return activities


CATEGORIES: Mapping[str, CategoryInfo] = MappingProxyType(_build_categories())
ACTIVITIES: Mapping[str, Activity] = MappingProxyType(_build_activities())


def _detached(activities) -> List[Activity]:
    return [a.model_copy(deep=True) for a in activities]


def get_activity_by_id(activity_id: str) -> Optional[Activity]:
    """Look up one activity; callers get their own copy of the record."""
    activity = ACTIVITIES.get(activity_id)
    return activity.model_copy(deep=True) if activity is not None else None


def get_all_activities() -> List[Activity]:
    return _detached(ACTIVITIES.values())


def get_activities_by_category(category: str) -> List[Activity]:
    return _detached(a for a in ACTIVITIES.values() if a.category == category)


def get_activities_by_difficulty(difficulty: str) -> List[Activity]:
    return _detached(a for a in ACTIVITIES.values() if a.difficulty == difficulty)


def get_quick_activities(max_seconds: int = QUICK_ACTIVITY_MAX_SECONDS) -> List[Activity]:
    """Activities that fit in a short break (five minutes by default)."""
    return _detached(a for a in ACTIVITIES.values() if a.duration <= max_seconds)


__all__ = [
    "Activity",
    "CategoryInfo",
    "Category",
    "Difficulty",
    "ACTIVITIES",
    "CATEGORIES",
    "QUICK_ACTIVITY_MAX_SECONDS",
    "get_activity_by_id",
    "get_all_activities",
    "get_activities_by_category",
    "get_activities_by_difficulty",
    "get_quick_activities",
]
