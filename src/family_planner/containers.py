"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from family_planner.adapters.memory_repositories import (
    InMemoryActivityRepository,
    InMemoryMealPlanRepository,
    InMemoryMealRepository,
    InMemoryShoppingRepository,
    InMemoryUserRepository,
    seed_sample_family,
)
from family_planner.adapters.openai_suggestion_client import OpenAISuggestionClient
from family_planner.adapters.supabase_activity_repository import (
    SupabaseActivityRepository,
)
from family_planner.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from family_planner.adapters.supabase_meal_repository import SupabaseMealRepository
from family_planner.adapters.supabase_shopping_repository import (
    SupabaseShoppingRepository,
)
from family_planner.adapters.supabase_user_repository import SupabaseUserRepository
from family_planner.config import Settings
from family_planner.services.activities import ActivityRepository, ActivityService
from family_planner.services.meal_plans import MealPlanRepository, MealPlanService
from family_planner.services.meals import MealRepository, MealService
from family_planner.services.shopping import ShoppingRepository, ShoppingService
from family_planner.services.shopping_generator import ShoppingListGenerator
from family_planner.services.suggestions import SuggestionService
from family_planner.services.users import UserRepository, UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    meal_service: MealService
    meal_plan_service: MealPlanService
    activity_service: ActivityService
    shopping_service: ShoppingService
    shopping_list_generator: ShoppingListGenerator
    suggestion_service: SuggestionService
    close_resources: Callable[[], Awaitable[None]]


@dataclass
class _Repositories:
    users: UserRepository
    meals: MealRepository
    meal_plans: MealPlanRepository
    activities: ActivityRepository
    shopping: ShoppingRepository


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repositories = _build_repositories(resolved_settings)
    suggestion_client = OpenAISuggestionClient.create(
        resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )

    async def close_resources() -> None:
        await suggestion_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(repositories.users),
        meal_service=MealService(repositories.meals),
        meal_plan_service=MealPlanService(
            repository=repositories.meal_plans,
            meal_repository=repositories.meals,
        ),
        activity_service=ActivityService(
            repository=repositories.activities,
            user_repository=repositories.users,
        ),
        shopping_service=ShoppingService(repositories.shopping),
        shopping_list_generator=ShoppingListGenerator(
            meal_plan_repository=repositories.meal_plans,
            meal_repository=repositories.meals,
            shopping_repository=repositories.shopping,
        ),
        suggestion_service=SuggestionService(
            client=suggestion_client,
            model=resolved_settings.openai_model,
        ),
        close_resources=close_resources,
    )


def _build_repositories(settings: Settings) -> _Repositories:
    if settings.storage_backend == "memory":
        users = InMemoryUserRepository()
        if settings.seed_sample_data:
            seed_sample_family(users)
        return _Repositories(
            users=users,
            meals=InMemoryMealRepository(),
            meal_plans=InMemoryMealPlanRepository(),
            activities=InMemoryActivityRepository(),
            shopping=InMemoryShoppingRepository(),
        )
    if settings.storage_backend != "supabase":
        raise ValueError(f"Unknown storage backend: {settings.storage_backend}")
    if not settings.supabase_url or not settings.supabase_service_key:
        raise ValueError(
            "SUPABASE_URL and SUPABASE_SERVICE_KEY are required for Supabase storage"
        )
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return _Repositories(
        users=SupabaseUserRepository(client),
        meals=SupabaseMealRepository(client),
        meal_plans=SupabaseMealPlanRepository(client),
        activities=SupabaseActivityRepository(client),
        shopping=SupabaseShoppingRepository(client),
    )
