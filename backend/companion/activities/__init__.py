from .library import (
    ACTIVITIES,
    CATEGORIES,
    Activity,
    CategoryInfo,
    get_activities_by_category,
    get_activities_by_difficulty,
    get_activity_by_id,
    get_all_activities,
    get_quick_activities,
)

__all__ = [
    "ACTIVITIES",
    "CATEGORIES",
    "Activity",
    "CategoryInfo",
    "get_activities_by_category",
    "get_activities_by_difficulty",
    "get_activity_by_id",
    "get_all_activities",
    "get_quick_activities",
]
