"""Supabase repository for meal plan entries."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from family_planner.adapters.supabase_rows import optional_int, parse_date, to_row
from family_planner.domain.models import MealPlanEntry
from family_planner.services.meal_plans import MealPlanRepository


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase implementation for meal plans."""

    client: Client

    def get_meal_plan(self, plan_id: int) -> MealPlanEntry | None:
        """Return an entry by id, if present."""
        response = (
            self.client.table("meal_plans")
            .select("*")
            .eq("id", plan_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def list_meal_plans_by_user(self, user_id: int) -> list[MealPlanEntry]:
        """Return entries assigned to a user."""
        response = (
            self.client.table("meal_plans")
            .select("*")
            .eq("user_id", user_id)
            .order("planned_date", desc=False)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def list_meal_plans_by_date(self, planned_date: date) -> list[MealPlanEntry]:
        """Return entries whose planned date equals the given day."""
        response = (
            self.client.table("meal_plans")
            .select("*")
            .eq("planned_date", planned_date.isoformat())
            .order("id", desc=False)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def create_meal_plan(self, payload: dict[str, object]) -> MealPlanEntry:
        """Create an entry row and return it."""
        response = self.client.table("meal_plans").insert(to_row(payload)).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal plan")
        return _parse_plan(response.data[0])

    def update_meal_plan(
        self, plan_id: int, updates: dict[str, object]
    ) -> MealPlanEntry | None:
        """Update an entry row and return it."""
        response = (
            self.client.table("meal_plans")
            .update(to_row(updates))
            .eq("id", plan_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def delete_meal_plan(self, plan_id: int) -> bool:
        """Delete an entry row."""
        response = self.client.table("meal_plans").delete().eq("id", plan_id).execute()
        return bool(response.data)


def _parse_plan(row: dict[str, object]) -> MealPlanEntry:
    return MealPlanEntry(
        id=int(row["id"]),
        meal_id=int(row["meal_id"]),
        planned_date=parse_date(row["planned_date"]),
        meal_type=str(row.get("meal_type", "")),
        user_id=optional_int(row.get("user_id")),
        completed=bool(row.get("completed", False)),
    )
