"""Domain models for family activities."""

from dataclasses import dataclass
from datetime import datetime

from family_planner.domain.models import UserRecord


@dataclass(frozen=True)
class Activity:
    """A scheduled family activity."""

    id: int
    title: str
    start_time: datetime
    activity_type: str
    created_by: int
    description: str | None = None
    end_time: datetime | None = None
    location: str | None = None
    assigned_to: int | None = None
    recurring: bool = False
    completed: bool = False


@dataclass(frozen=True)
class ActivityDetail:
    """Activity with the users it references."""

    id: int
    title: str
    start_time: datetime
    activity_type: str
    created_by: int
    description: str | None
    end_time: datetime | None
    location: str | None
    assigned_to: int | None
    recurring: bool
    completed: bool
    assigned_user: UserRecord | None
    created_by_user: UserRecord | None
