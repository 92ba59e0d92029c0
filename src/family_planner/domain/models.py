"""Domain models for the family planner."""

from dataclasses import dataclass, field
from datetime import date

USER_ROLES = frozenset({"parent", "cook", "driver", "admin"})
MEAL_TYPES = frozenset({"breakfast", "lunch", "dinner", "snack"})
ACTIVITY_TYPES = frozenset({"sports", "music", "appointment", "transport"})


@dataclass(frozen=True)
class UserRecord:
    """Represents a family member."""

    id: int
    username: str
    role: str
    name: str
    avatar: str | None = None
    preferences: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class Meal:
    """A meal with its raw ingredient labels."""

    id: int
    name: str
    meal_type: str
    created_by: int
    ingredients: list[str] = field(default_factory=list)
    description: str | None = None
    cuisine: str | None = None
    instructions: str | None = None
    servings: int = 4
    prep_time_minutes: int | None = None


@dataclass(frozen=True)
class MealPlanEntry:
    """A meal scheduled for a date and meal-type slot."""

    id: int
    meal_id: int
    planned_date: date
    meal_type: str
    user_id: int | None = None
    completed: bool = False


@dataclass(frozen=True)
class MealPlanDetail:
    """Meal plan entry with its resolved meal."""

    id: int
    meal_id: int
    planned_date: date
    meal_type: str
    user_id: int | None
    completed: bool
    meal: Meal | None
