"""Supabase repository for shopping lists and items."""

from dataclasses import dataclass

from supabase import Client

from family_planner.domain.shopping import ShoppingItem, ShoppingList
from family_planner.services.shopping import ShoppingRepository


@dataclass
class SupabaseShoppingRepository(ShoppingRepository):
    """Supabase implementation for shopping lists."""

    client: Client

    def get_shopping_list(self, list_id: int) -> ShoppingList | None:
        """Return a list by id, if present."""
        response = (
            self.client.table("shopping_lists")
            .select("*")
            .eq("id", list_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_list(response.data[0])

    def list_shopping_lists(self) -> list[ShoppingList]:
        """Return all lists."""
        response = (
            self.client.table("shopping_lists").select("*").order("id").execute()
        )
        return [_parse_list(row) for row in response.data or []]

    def list_shopping_lists_by_user(self, user_id: int) -> list[ShoppingList]:
        """Return lists created by a user."""
        response = (
            self.client.table("shopping_lists")
            .select("*")
            .eq("created_by", user_id)
            .order("id")
            .execute()
        )
        return [_parse_list(row) for row in response.data or []]

    def create_shopping_list(self, name: str, created_by: int) -> ShoppingList:
        """Create a list row and return it."""
        response = (
            self.client.table("shopping_lists")
            .insert({"name": name, "created_by": created_by, "completed": False})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create shopping list")
        return _parse_list(response.data[0])

    def update_shopping_list(
        self, list_id: int, updates: dict[str, object]
    ) -> ShoppingList | None:
        """Update a list row and return it."""
        response = (
            self.client.table("shopping_lists")
            .update(updates)
            .eq("id", list_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_list(response.data[0])

    def delete_shopping_list(self, list_id: int) -> bool:
        """Delete a list row."""
        response = (
            self.client.table("shopping_lists").delete().eq("id", list_id).execute()
        )
        return bool(response.data)

    def get_shopping_item(self, item_id: int) -> ShoppingItem | None:
        """Return an item by id, if present."""
        response = (
            self.client.table("shopping_items")
            .select("*")
            .eq("id", item_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def list_shopping_items(self, list_id: int) -> list[ShoppingItem]:
        """Return items for a list."""
        response = (
            self.client.table("shopping_items")
            .select("*")
            .eq("list_id", list_id)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

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
        """Create an item row and return it."""
        response = (
            self.client.table("shopping_items")
            .insert(
                {
                    "list_id": list_id,
                    "name": name,
                    "added_by": added_by,
                    "quantity": quantity,
                    "category": category,
                    "completed": completed,
                    "related_meal": related_meal,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create shopping item")
        return _parse_item(response.data[0])

    def update_shopping_item(
        self, item_id: int, updates: dict[str, object]
    ) -> ShoppingItem | None:
        """Update an item row and return it."""
        response = (
            self.client.table("shopping_items")
            .update(updates)
            .eq("id", item_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def delete_shopping_item(self, item_id: int) -> bool:
        """Delete an item row."""
        response = (
            self.client.table("shopping_items").delete().eq("id", item_id).execute()
        )
        return bool(response.data)


def _parse_list(row: dict[str, object]) -> ShoppingList:
    return ShoppingList(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        created_by=int(row["created_by"]),
        completed=bool(row.get("completed", False)),
    )


def _parse_item(row: dict[str, object]) -> ShoppingItem:
    return ShoppingItem(
        id=int(row["id"]),
        list_id=int(row["list_id"]),
        name=str(row.get("name", "")),
        added_by=int(row["added_by"]),
        quantity=row.get("quantity"),
        category=row.get("category"),
        completed=bool(row.get("completed", False)),
        related_meal=row.get("related_meal"),
    )
