"""Shopping list service and list enrichment."""

import logging
from dataclasses import dataclass
from typing import Protocol

from family_planner.domain.shopping import (
    ShoppingItem,
    ShoppingList,
    ShoppingListWithItems,
)

logger = logging.getLogger(__name__)


class ShoppingRepository(Protocol):
    """Persistence interface for shopping lists and their items."""

    def get_shopping_list(self, list_id: int) -> ShoppingList | None:
        """Return a shopping list by id, if present."""

    def list_shopping_lists(self) -> list[ShoppingList]:
        """Return all shopping lists."""

    def list_shopping_lists_by_user(self, user_id: int) -> list[ShoppingList]:
        """Return lists created by a user."""

    def create_shopping_list(self, name: str, created_by: int) -> ShoppingList:
        """Create an open shopping list and return it."""

    def update_shopping_list(
        self, list_id: int, updates: dict[str, object]
    ) -> ShoppingList | None:
        """Apply a partial update and return the list."""

    def delete_shopping_list(self, list_id: int) -> bool:
        """Delete a list header, returning False when it did not exist."""

    def get_shopping_item(self, item_id: int) -> ShoppingItem | None:
        """Return a shopping item by id, if present."""

    def list_shopping_items(self, list_id: int) -> list[ShoppingItem]:
        """Return the items that belong to a list."""

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
        """Create a shopping item and return it."""

    def update_shopping_item(
        self, item_id: int, updates: dict[str, object]
    ) -> ShoppingItem | None:
        """Apply a partial update and return the item."""

    def delete_shopping_item(self, item_id: int) -> bool:
        """Delete an item, returning False when it did not exist."""


@dataclass
class ShoppingService:
    """Application service for shopping lists."""

    repository: ShoppingRepository

    def with_items(self, shopping_list: ShoppingList) -> ShoppingListWithItems:
        """Attach the list's items to it."""
        items = self.repository.list_shopping_items(shopping_list.id)
        return attach_items(shopping_list, items)

    def with_items_all(
        self, lists: list[ShoppingList]
    ) -> list[ShoppingListWithItems]:
        """Attach items to every list."""
        return [self.with_items(shopping_list) for shopping_list in lists]

    def list_lists(self, user_id: int | None = None) -> list[ShoppingListWithItems]:
        """Return lists with items, optionally only those a user created."""
        if user_id is not None:
            lists = self.repository.list_shopping_lists_by_user(user_id)
        else:
            lists = self.repository.list_shopping_lists()
        return self.with_items_all(lists)

    def get_list(self, list_id: int) -> ShoppingListWithItems | None:
        """Return a list with items."""
        shopping_list = self.repository.get_shopping_list(list_id)
        if shopping_list is None:
            return None
        return self.with_items(shopping_list)

    def create_list(self, name: str, created_by: int) -> ShoppingListWithItems:
        """Create an empty list."""
        shopping_list = self.repository.create_shopping_list(name, created_by)
        return attach_items(shopping_list, [])

    def update_list(
        self, list_id: int, updates: dict[str, object]
    ) -> ShoppingListWithItems | None:
        """Rename a list or toggle its completion."""
        shopping_list = self.repository.update_shopping_list(list_id, updates)
        if shopping_list is None:
            return None
        return self.with_items(shopping_list)

    def delete_list(self, list_id: int) -> bool:
        """Delete a list together with its items."""
        if self.repository.get_shopping_list(list_id) is None:
            return False
        items = self.repository.list_shopping_items(list_id)
        for item in items:
            self.repository.delete_shopping_item(item.id)
        logger.info(
            "Deleting shopping list",
            extra={"list_id": list_id, "item_count": len(items)},
        )
        return self.repository.delete_shopping_list(list_id)

    def add_item(  # noqa: PLR0913
        self,
        list_id: int,
        name: str,
        added_by: int,
        *,
        quantity: str | None = None,
        category: str | None = None,
        completed: bool = False,
        related_meal: str | None = None,
    ) -> ShoppingItem | None:
        """Add an item to an existing list."""
        if self.repository.get_shopping_list(list_id) is None:
            return None
        return self.repository.create_shopping_item(
            list_id,
            name,
            added_by,
            quantity=quantity,
            category=category,
            completed=completed,
            related_meal=related_meal,
        )

    def update_item(
        self, item_id: int, updates: dict[str, object]
    ) -> ShoppingItem | None:
        """Toggle completion or edit an item."""
        return self.repository.update_shopping_item(item_id, updates)

    def delete_item(self, item_id: int) -> bool:
        """Remove a single item."""
        return self.repository.delete_shopping_item(item_id)


def attach_items(
    shopping_list: ShoppingList, items: list[ShoppingItem]
) -> ShoppingListWithItems:
    """Combine a list header with its items."""
    return ShoppingListWithItems(
        id=shopping_list.id,
        name=shopping_list.name,
        created_by=shopping_list.created_by,
        completed=shopping_list.completed,
        items=items,
    )
