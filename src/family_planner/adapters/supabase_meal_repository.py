"""Supabase repository for meals."""

from dataclasses import dataclass

from supabase import Client

from family_planner.adapters.supabase_rows import optional_int
from family_planner.domain.models import Meal
from family_planner.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for the meal catalogue."""

    client: Client

    def get_meal(self, meal_id: int) -> Meal | None:
        """Return a meal by id, if present."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("id", meal_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def list_meals(self) -> list[Meal]:
        """Return all meals."""
        response = self.client.table("meals").select("*").order("id").execute()
        return [_parse_meal(row) for row in response.data or []]

    def list_meals_by_creator(self, user_id: int) -> list[Meal]:
        """Return meals created by a user."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("created_by", user_id)
            .order("id")
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def create_meal(self, payload: dict[str, object], created_by: int) -> Meal:
        """Create a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert({**payload, "created_by": created_by})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])


def _parse_meal(row: dict[str, object]) -> Meal:
    return Meal(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        meal_type=str(row.get("meal_type", "")),
        created_by=int(row["created_by"]),
        ingredients=[str(item) for item in row.get("ingredients") or []],
        description=row.get("description"),
        cuisine=row.get("cuisine"),
        instructions=row.get("instructions"),
        servings=int(row.get("servings") or 4),
        prep_time_minutes=optional_int(row.get("prep_time_minutes")),
    )
