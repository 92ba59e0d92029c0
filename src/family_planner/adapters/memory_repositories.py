"""In-memory repositories for local runs and tests.

Each repository guards its storage with a lock, since shopping list generation
runs in a worker thread while request handlers read from the event loop.
"""

import threading
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from datetime import date
from itertools import count

from family_planner.domain.activities import Activity
from family_planner.domain.models import Meal, MealPlanEntry, UserRecord
from family_planner.domain.shopping import ShoppingItem, ShoppingList
from family_planner.services.activities import ActivityRepository
from family_planner.services.meal_plans import MealPlanRepository
from family_planner.services.meals import MealRepository
from family_planner.services.shopping import ShoppingRepository
from family_planner.services.users import UserRepository


def _ids() -> Iterator[int]:
    return count(1)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository."""

    users: dict[int, UserRecord] = field(default_factory=dict)
    ids: Iterator[int] = field(default_factory=_ids)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_user(self, user_id: int) -> UserRecord | None:
        with self.lock:
            return self.users.get(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        with self.lock:
            for user in self.users.values():
                if user.username == username:
                    return user
        return None

    def list_users(self) -> list[UserRecord]:
        with self.lock:
            return list(self.users.values())

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        with self.lock:
            user = UserRecord(id=next(self.ids), **payload)
            self.users[user.id] = user
        return user

    def update_preferences(
        self, user_id: int, preferences: dict[str, list[str]]
    ) -> UserRecord | None:
        with self.lock:
            current = self.users.get(user_id)
            if current is None:
                return None
            updated = replace(current, preferences=preferences)
            self.users[user_id] = updated
        return updated


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository."""

    meals: dict[int, Meal] = field(default_factory=dict)
    ids: Iterator[int] = field(default_factory=_ids)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_meal(self, meal_id: int) -> Meal | None:
        with self.lock:
            return self.meals.get(meal_id)

    def list_meals(self) -> list[Meal]:
        with self.lock:
            return list(self.meals.values())

    def list_meals_by_creator(self, user_id: int) -> list[Meal]:
        with self.lock:
            return [
                meal for meal in self.meals.values() if meal.created_by == user_id
            ]

    def create_meal(self, payload: dict[str, object], created_by: int) -> Meal:
        with self.lock:
            meal = Meal(id=next(self.ids), created_by=created_by, **payload)
            self.meals[meal.id] = meal
        return meal


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal plan repository."""

    plans: dict[int, MealPlanEntry] = field(default_factory=dict)
    ids: Iterator[int] = field(default_factory=_ids)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_meal_plan(self, plan_id: int) -> MealPlanEntry | None:
        with self.lock:
            return self.plans.get(plan_id)

    def list_meal_plans_by_user(self, user_id: int) -> list[MealPlanEntry]:
        with self.lock:
            return [plan for plan in self.plans.values() if plan.user_id == user_id]

    def list_meal_plans_by_date(self, planned_date: date) -> list[MealPlanEntry]:
        with self.lock:
            return [
                plan
                for plan in self.plans.values()
                if plan.planned_date == planned_date
            ]

    def create_meal_plan(self, payload: dict[str, object]) -> MealPlanEntry:
        with self.lock:
            plan = MealPlanEntry(id=next(self.ids), **payload)
            self.plans[plan.id] = plan
        return plan

    def update_meal_plan(
        self, plan_id: int, updates: dict[str, object]
    ) -> MealPlanEntry | None:
        with self.lock:
            current = self.plans.get(plan_id)
            if current is None:
                return None
            updated = replace(current, **updates)
            self.plans[plan_id] = updated
        return updated

    def delete_meal_plan(self, plan_id: int) -> bool:
        with self.lock:
            return self.plans.pop(plan_id, None) is not None


@dataclass
class InMemoryActivityRepository(ActivityRepository):
    """In-memory activity repository."""

    activities: dict[int, Activity] = field(default_factory=dict)
    ids: Iterator[int] = field(default_factory=_ids)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_activity(self, activity_id: int) -> Activity | None:
        with self.lock:
            return self.activities.get(activity_id)

    def list_activities(self) -> list[Activity]:
        with self.lock:
            return list(self.activities.values())

    def list_activities_by_user(self, user_id: int) -> list[Activity]:
        with self.lock:
            return [
                activity
                for activity in self.activities.values()
                if activity.assigned_to == user_id
            ]

    def list_activities_by_date(self, day: date) -> list[Activity]:
        with self.lock:
            return [
                activity
                for activity in self.activities.values()
                if activity.start_time.date() == day
            ]

    def create_activity(
        self, payload: dict[str, object], created_by: int
    ) -> Activity:
        with self.lock:
            activity = Activity(id=next(self.ids), created_by=created_by, **payload)
            self.activities[activity.id] = activity
        return activity

    def update_activity(
        self, activity_id: int, updates: dict[str, object]
    ) -> Activity | None:
        with self.lock:
            current = self.activities.get(activity_id)
            if current is None:
                return None
            updated = replace(current, **updates)
            self.activities[activity_id] = updated
        return updated

    def delete_activity(self, activity_id: int) -> bool:
        with self.lock:
            return self.activities.pop(activity_id, None) is not None


@dataclass
class InMemoryShoppingRepository(ShoppingRepository):
    """In-memory shopping list repository."""

    lists: dict[int, ShoppingList] = field(default_factory=dict)
    items: dict[int, ShoppingItem] = field(default_factory=dict)
    list_ids: Iterator[int] = field(default_factory=_ids)
    item_ids: Iterator[int] = field(default_factory=_ids)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_shopping_list(self, list_id: int) -> ShoppingList | None:
        with self.lock:
            return self.lists.get(list_id)

    def list_shopping_lists(self) -> list[ShoppingList]:
        with self.lock:
            return list(self.lists.values())

    def list_shopping_lists_by_user(self, user_id: int) -> list[ShoppingList]:
        with self.lock:
            return [
                shopping_list
                for shopping_list in self.lists.values()
                if shopping_list.created_by == user_id
            ]

    def create_shopping_list(self, name: str, created_by: int) -> ShoppingList:
        with self.lock:
            shopping_list = ShoppingList(
                id=next(self.list_ids), name=name, created_by=created_by
            )
            self.lists[shopping_list.id] = shopping_list
        return shopping_list

    def update_shopping_list(
        self, list_id: int, updates: dict[str, object]
    ) -> ShoppingList | None:
        with self.lock:
            current = self.lists.get(list_id)
            if current is None:
                return None
            updated = replace(current, **updates)
            self.lists[list_id] = updated
        return updated

    def delete_shopping_list(self, list_id: int) -> bool:
        with self.lock:
            return self.lists.pop(list_id, None) is not None

    def get_shopping_item(self, item_id: int) -> ShoppingItem | None:
        with self.lock:
            return self.items.get(item_id)

    def list_shopping_items(self, list_id: int) -> list[ShoppingItem]:
        with self.lock:
            return [item for item in self.items.values() if item.list_id == list_id]

    def create_shopping_item(  # noqa: PLR0913
        self,
        list_id: int,
        name: str,
        added_by: int,
        *,
        quantity: str | None = None,
        category: str | None = None,
        completed: bool = False,
        related_meal: str | None = None,
    ) -> ShoppingItem:
        with self.lock:
            item = ShoppingItem(
                id=next(self.item_ids),
                list_id=list_id,
                name=name,
                added_by=added_by,
                quantity=quantity,
                category=category,
                completed=completed,
                related_meal=related_meal,
            )
            self.items[item.id] = item
        return item

    def update_shopping_item(
        self, item_id: int, updates: dict[str, object]
    ) -> ShoppingItem | None:
        with self.lock:
            current = self.items.get(item_id)
            if current is None:
                return None
            updated = replace(current, **updates)
            self.items[item_id] = updated
        return updated

    def delete_shopping_item(self, item_id: int) -> bool:
        with self.lock:
            return self.items.pop(item_id, None) is not None


def seed_sample_family(repository: UserRepository) -> list[UserRecord]:
    """Create the demo household used by local runs."""
    return [
        repository.create_user(
            {
                "username": "sarah_johnson",
                "role": "parent",
                "name": "Sarah Johnson",
                "avatar": None,
                "preferences": {
                    "cuisines": ["Italian", "Mediterranean"],
                    "dietary": ["Vegetarian"],
                },
            }
        ),
        repository.create_user(
            {
                "username": "mike_johnson",
                "role": "cook",
                "name": "Mike Johnson",
                "avatar": None,
                "preferences": {"cuisines": ["Asian", "Mexican"], "dietary": []},
            }
        ),
        repository.create_user(
            {
                "username": "emma_johnson",
                "role": "parent",
                "name": "Emma Johnson",
                "avatar": None,
                "preferences": {"cuisines": ["Italian"], "dietary": []},
            }
        ),
    ]
