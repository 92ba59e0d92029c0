"""Domain models for shopping lists."""

from dataclasses import dataclass, field

INGREDIENT_CATEGORY = "ingredient"


@dataclass(frozen=True)
class ShoppingList:
    """A shopping list header."""

    id: int
    name: str
    created_by: int
    completed: bool = False


@dataclass(frozen=True)
class ShoppingItem:
    """A single line on a shopping list."""

    id: int
    list_id: int
    name: str
    added_by: int
    quantity: str | None = None
    category: str | None = None
    completed: bool = False
    related_meal: str | None = None


@dataclass(frozen=True)
class ShoppingListWithItems:
    """Shopping list with its items attached."""

    id: int
    name: str
    created_by: int
    completed: bool
    items: list[ShoppingItem] = field(default_factory=list)
