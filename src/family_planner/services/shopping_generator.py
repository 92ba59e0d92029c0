"""Shopping list generation from planned meals."""

import logging
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date

from family_planner.domain.errors import GenerationCancelledError, RetrievalError
from family_planner.domain.models import Meal, MealPlanEntry
from family_planner.domain.shopping import (
    INGREDIENT_CATEGORY,
    ShoppingItem,
    ShoppingList,
    ShoppingListWithItems,
)
from family_planner.services.meal_plans import (
    MealPlanRepository,
    collect_plans_in_range,
)
from family_planner.services.meals import MealRepository
from family_planner.services.shopping import ShoppingRepository, attach_items

logger = logging.getLogger(__name__)


def aggregate_ingredients(
    repository: MealRepository, entries: Iterable[MealPlanEntry]
) -> set[str]:
    """Return the distinct ingredient strings of the meals behind the entries.

    Ingredients are compared verbatim, so "Tomato" and "tomato" stay separate.
    Entries whose meal no longer exists contribute nothing.
    """
    meals: dict[int, Meal | None] = {}
    ingredients: set[str] = set()
    for entry in entries:
        if entry.meal_id not in meals:
            try:
                meals[entry.meal_id] = repository.get_meal(entry.meal_id)
            except Exception as exc:
                raise RetrievalError(f"Failed to read meal {entry.meal_id}") from exc
        meal = meals[entry.meal_id]
        if meal is None:
            logger.warning(
                "Skipping meal plan with missing meal",
                extra={"plan_id": entry.id, "meal_id": entry.meal_id},
            )
            continue
        ingredients.update(meal.ingredients or [])
    return ingredients


def shopping_list_name(start_date: date, end_date: date) -> str:
    """Return the generated list name for a date range."""
    return f"Shopping List {start_date.isoformat()} to {end_date.isoformat()}"


@dataclass
class _WriteBatch:
    shopping_list: ShoppingList | None = None
    items: list[ShoppingItem] = field(default_factory=list)


@dataclass
class ShoppingListGenerator:
    """Builds a new shopping list from the meals planned in a date range."""

    meal_plan_repository: MealPlanRepository
    meal_repository: MealRepository
    shopping_repository: ShoppingRepository

    def generate(
        self,
        start_date: date,
        end_date: date,
        user_id: int,
        cancelled: threading.Event | None = None,
    ) -> ShoppingListWithItems:
        """Create a list with one item per distinct ingredient.

        Every call creates a new list, even for a range generated before.
        Reads happen before any write, so a read failure leaves nothing behind.
        Once `cancelled` is set, no further write is made and any list already
        written is rolled back.
        """
        entries = collect_plans_in_range(
            self.meal_plan_repository, start_date, end_date
        )
        ingredients = aggregate_ingredients(self.meal_repository, entries)

        _check_cancelled(cancelled)
        with self._write_batch() as batch:
            batch.shopping_list = self.shopping_repository.create_shopping_list(
                shopping_list_name(start_date, end_date), created_by=user_id
            )
            for ingredient in sorted(ingredients):
                _check_cancelled(cancelled)
                batch.items.append(
                    self.shopping_repository.create_shopping_item(
                        batch.shopping_list.id,
                        ingredient,
                        user_id,
                        category=INGREDIENT_CATEGORY,
                        completed=False,
                    )
                )
            _check_cancelled(cancelled)

        logger.info(
            "Generated shopping list",
            extra={
                "list_id": batch.shopping_list.id,
                "plan_count": len(entries),
                "item_count": len(batch.items),
            },
        )
        return attach_items(batch.shopping_list, batch.items)

    @contextmanager
    def _write_batch(self) -> Iterator[_WriteBatch]:
        """Undo the writes recorded in the batch if the block raises."""
        batch = _WriteBatch()
        try:
            yield batch
        except Exception:
            self._rollback(batch)
            raise

    def _rollback(self, batch: _WriteBatch) -> None:
        if batch.shopping_list is None:
            return
        list_id = batch.shopping_list.id
        logger.warning(
            "Rolling back partially generated shopping list",
            extra={"list_id": list_id, "item_count": len(batch.items)},
        )
        try:
            for item in batch.items:
                self.shopping_repository.delete_shopping_item(item.id)
            self.shopping_repository.delete_shopping_list(list_id)
        except Exception:
            logger.exception(
                "Failed to roll back shopping list", extra={"list_id": list_id}
            )


def _check_cancelled(cancelled: threading.Event | None) -> None:
    if cancelled is not None and cancelled.is_set():
        raise GenerationCancelledError("Shopping list generation was cancelled")
