"""Family activity scheduling service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from family_planner.domain.activities import Activity, ActivityDetail
from family_planner.domain.models import UserRecord
from family_planner.services.users import UserRepository


class ActivityRepository(Protocol):
    """Persistence interface for activities."""

    def get_activity(self, activity_id: int) -> Activity | None:
        """Return an activity by id, if present."""

    def list_activities(self) -> list[Activity]:
        """Return all activities."""

    def list_activities_by_user(self, user_id: int) -> list[Activity]:
        """Return activities assigned to a user."""

    def list_activities_by_date(self, day: date) -> list[Activity]:
        """Return activities starting on a calendar day."""

    def create_activity(
        self, payload: dict[str, object], created_by: int
    ) -> Activity:
        """Create an activity and return it."""

    def update_activity(
        self, activity_id: int, updates: dict[str, object]
    ) -> Activity | None:
        """Apply a partial update and return the activity."""

    def delete_activity(self, activity_id: int) -> bool:
        """Delete an activity, returning False when it did not exist."""


@dataclass
class ActivityService:
    """Application service for the family calendar."""

    repository: ActivityRepository
    user_repository: UserRepository

    def list_activities(
        self, user_id: int | None = None, day: date | None = None
    ) -> list[ActivityDetail]:
        """List activities by assignee, by day, or all of them."""
        if user_id is not None:
            activities = self.repository.list_activities_by_user(user_id)
        elif day is not None:
            activities = self.repository.list_activities_by_date(day)
        else:
            activities = self.repository.list_activities()
        users: dict[int, UserRecord | None] = {}
        return [self._with_users(activity, users) for activity in activities]

    def create(self, payload: dict[str, object], created_by: int) -> Activity:
        """Schedule a new activity."""
        return self.repository.create_activity(payload, created_by)

    def update(
        self, activity_id: int, updates: dict[str, object]
    ) -> Activity | None:
        """Edit or complete an activity."""
        return self.repository.update_activity(activity_id, updates)

    def delete(self, activity_id: int) -> bool:
        """Remove an activity."""
        return self.repository.delete_activity(activity_id)

    def _with_users(
        self, activity: Activity, users: dict[int, UserRecord | None]
    ) -> ActivityDetail:
        return ActivityDetail(
            id=activity.id,
            title=activity.title,
            start_time=activity.start_time,
            activity_type=activity.activity_type,
            created_by=activity.created_by,
            description=activity.description,
            end_time=activity.end_time,
            location=activity.location,
            assigned_to=activity.assigned_to,
            recurring=activity.recurring,
            completed=activity.completed,
            assigned_user=self._lookup(activity.assigned_to, users),
            created_by_user=self._lookup(activity.created_by, users),
        )

    def _lookup(
        self, user_id: int | None, users: dict[int, UserRecord | None]
    ) -> UserRecord | None:
        if user_id is None:
            return None
        if user_id not in users:
            users[user_id] = self.user_repository.get_user(user_id)
        return users[user_id]
