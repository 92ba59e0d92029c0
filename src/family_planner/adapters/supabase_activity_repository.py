"""Supabase repository for family activities."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from supabase import Client

from family_planner.adapters.supabase_rows import optional_int, parse_datetime, to_row
from family_planner.domain.activities import Activity
from family_planner.services.activities import ActivityRepository


@dataclass
class SupabaseActivityRepository(ActivityRepository):
    """Supabase implementation for activities."""

    client: Client

    def get_activity(self, activity_id: int) -> Activity | None:
        """Return an activity by id, if present."""
        response = (
            self.client.table("activities")
            .select("*")
            .eq("id", activity_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_activity(response.data[0])

    def list_activities(self) -> list[Activity]:
        """Return all activities ordered by start time."""
        response = (
            self.client.table("activities")
            .select("*")
            .order("start_time", desc=False)
            .execute()
        )
        return [_parse_activity(row) for row in response.data or []]

    def list_activities_by_user(self, user_id: int) -> list[Activity]:
        """Return activities assigned to a user."""
        response = (
            self.client.table("activities")
            .select("*")
            .eq("assigned_to", user_id)
            .order("start_time", desc=False)
            .execute()
        )
        return [_parse_activity(row) for row in response.data or []]

    def list_activities_by_date(self, day: date) -> list[Activity]:
        """Return activities that start on the given day."""
        start = datetime.combine(day, time.min)
        end = start + timedelta(days=1)
        response = (
            self.client.table("activities")
            .select("*")
            .gte("start_time", start.isoformat())
            .lt("start_time", end.isoformat())
            .order("start_time", desc=False)
            .execute()
        )
        return [_parse_activity(row) for row in response.data or []]

    def create_activity(
        self, payload: dict[str, object], created_by: int
    ) -> Activity:
        """Create an activity row and return it."""
        response = (
            self.client.table("activities")
            .insert({**to_row(payload), "created_by": created_by})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create activity")
        return _parse_activity(response.data[0])

    def update_activity(
        self, activity_id: int, updates: dict[str, object]
    ) -> Activity | None:
        """Update an activity row and return it."""
        response = (
            self.client.table("activities")
            .update(to_row(updates))
            .eq("id", activity_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_activity(response.data[0])

    def delete_activity(self, activity_id: int) -> bool:
        """Delete an activity row."""
        response = (
            self.client.table("activities").delete().eq("id", activity_id).execute()
        )
        return bool(response.data)


def _parse_activity(row: dict[str, object]) -> Activity:
    start_time = parse_datetime(row.get("start_time"))
    return Activity(
        id=int(row["id"]),
        title=str(row.get("title", "")),
        start_time=start_time or datetime.min,
        activity_type=str(row.get("activity_type", "")),
        created_by=int(row["created_by"]),
        description=row.get("description"),
        end_time=parse_datetime(row.get("end_time")),
        location=row.get("location"),
        assigned_to=optional_int(row.get("assigned_to")),
        recurring=bool(row.get("recurring", False)),
        completed=bool(row.get("completed", False)),
    )
