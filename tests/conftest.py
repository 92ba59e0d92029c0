"""Shared test fixtures."""

import threading
import time
from dataclasses import dataclass, field
from datetime import date

import pytest

from family_planner.adapters.memory_repositories import (
    InMemoryActivityRepository,
    InMemoryMealPlanRepository,
    InMemoryMealRepository,
    InMemoryShoppingRepository,
    InMemoryUserRepository,
    seed_sample_family,
)
from family_planner.config import Settings
from family_planner.containers import AppContainer
from family_planner.domain.models import Meal, MealPlanEntry
from family_planner.domain.shopping import ShoppingItem, ShoppingListWithItems
from family_planner.services.activities import ActivityService
from family_planner.services.meal_plans import MealPlanService
from family_planner.services.meals import MealService
from family_planner.services.shopping import ShoppingService
from family_planner.services.shopping_generator import ShoppingListGenerator
from family_planner.services.suggestions import SuggestionClient, SuggestionService
from family_planner.services.users import UserService


@dataclass
class FakeSuggestionClient(SuggestionClient):
    """Fake suggestion client returning a fixed payload."""

    payload: object = field(
        default_factory=lambda: {
            "meals": [
                {
                    "name": "Margherita Pizza",
                    "description": "Classic tomato and mozzarella",
                    "cuisine": "Italian",
                    "ingredients": ["pizza dough", "tomato sauce", "mozzarella"],
                    "instructions": "Top the dough and bake at 250C.",
                    "prepTimeMinutes": 30,
                    "servings": 4,
                }
            ]
        }
    )
    prompts: list[str] = field(default_factory=list)

    async def suggest(self, *, model: str, system_prompt: str, prompt: str) -> object:
        self.prompts.append(prompt)
        return self.payload


@dataclass
class FailingMealPlanRepository(InMemoryMealPlanRepository):
    """Meal plan repository that fails when reading one day."""

    failing_date: date | None = None

    def list_meal_plans_by_date(self, planned_date: date) -> list[MealPlanEntry]:
        if planned_date == self.failing_date:
            raise ConnectionError("storage unavailable")
        return super().list_meal_plans_by_date(planned_date)


@dataclass
class SlowMealPlanRepository(InMemoryMealPlanRepository):
    """Meal plan repository that takes a while to read each day."""

    delay_seconds: float = 0.3

    def list_meal_plans_by_date(self, planned_date: date) -> list[MealPlanEntry]:
        time.sleep(self.delay_seconds)
        return super().list_meal_plans_by_date(planned_date)


@dataclass
class CountingMealRepository(InMemoryMealRepository):
    """Meal repository that records lookups and can fail on demand."""

    lookups: list[int] = field(default_factory=list)
    fail_lookups: bool = False

    def get_meal(self, meal_id: int) -> Meal | None:
        self.lookups.append(meal_id)
        if self.fail_lookups:
            raise ConnectionError("storage unavailable")
        return super().get_meal(meal_id)


@dataclass
class FlakyShoppingRepository(InMemoryShoppingRepository):
    """Shopping repository whose item writes fail after a number of successes."""

    item_writes_before_failure: int = 1
    item_writes: int = 0

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
        if self.item_writes >= self.item_writes_before_failure:
            raise ConnectionError("write rejected")
        self.item_writes += 1
        return super().create_shopping_item(
            list_id,
            name,
            added_by,
            quantity=quantity,
            category=category,
            completed=completed,
            related_meal=related_meal,
        )


@dataclass
class CancellingShoppingRepository(InMemoryShoppingRepository):
    """Shopping repository that trips a cancellation flag after one item write."""

    cancelled: threading.Event = field(default_factory=threading.Event)

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
        item = super().create_shopping_item(
            list_id,
            name,
            added_by,
            quantity=quantity,
            category=category,
            completed=completed,
            related_meal=related_meal,
        )
        self.cancelled.set()
        return item


@dataclass
class TrackedShoppingListGenerator(ShoppingListGenerator):
    """Generator that signals when a run has finished, however it ended."""

    finished: threading.Event = field(default_factory=threading.Event)

    def generate(
        self,
        start_date: date,
        end_date: date,
        user_id: int,
        cancelled: threading.Event | None = None,
    ) -> ShoppingListWithItems:
        try:
            return super().generate(start_date, end_date, user_id, cancelled)
        finally:
            self.finished.set()

def add_meal(
    repository: InMemoryMealRepository,
    name: str,
    ingredients: list[str],
    created_by: int = 1,
) -> Meal:
    return repository.create_meal(
        {"name": name, "meal_type": "dinner", "ingredients": ingredients},
        created_by=created_by,
    )


def plan_meal(
    repository: InMemoryMealPlanRepository,
    meal: Meal,
    planned_date: date,
    user_id: int | None = 1,
) -> MealPlanEntry:
    return repository.create_meal_plan(
        {
            "meal_id": meal.id,
            "planned_date": planned_date,
            "meal_type": meal.meal_type,
            "user_id": user_id,
        }
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        storage_backend="memory",
        openai_api_key="openai-key",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    repository = InMemoryUserRepository()
    seed_sample_family(repository)
    return repository


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def meal_plan_repository() -> InMemoryMealPlanRepository:
    return InMemoryMealPlanRepository()


@pytest.fixture
def shopping_repository() -> InMemoryShoppingRepository:
    return InMemoryShoppingRepository()


@pytest.fixture
def activity_repository() -> InMemoryActivityRepository:
    return InMemoryActivityRepository()


@pytest.fixture
def suggestion_client() -> FakeSuggestionClient:
    return FakeSuggestionClient()


@pytest.fixture
def generator(
    meal_plan_repository: InMemoryMealPlanRepository,
    meal_repository: InMemoryMealRepository,
    shopping_repository: InMemoryShoppingRepository,
) -> ShoppingListGenerator:
    return ShoppingListGenerator(
        meal_plan_repository=meal_plan_repository,
        meal_repository=meal_repository,
        shopping_repository=shopping_repository,
    )


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_repository: InMemoryUserRepository,
    meal_repository: InMemoryMealRepository,
    meal_plan_repository: InMemoryMealPlanRepository,
    activity_repository: InMemoryActivityRepository,
    shopping_repository: InMemoryShoppingRepository,
    suggestion_client: FakeSuggestionClient,
    generator: ShoppingListGenerator,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        meal_service=MealService(meal_repository),
        meal_plan_service=MealPlanService(
            repository=meal_plan_repository,
            meal_repository=meal_repository,
        ),
        activity_service=ActivityService(
            repository=activity_repository,
            user_repository=user_repository,
        ),
        shopping_service=ShoppingService(shopping_repository),
        shopping_list_generator=generator,
        suggestion_service=SuggestionService(
            client=suggestion_client,
            model=settings.openai_model,
        ),
        close_resources=close_resources,
    )
