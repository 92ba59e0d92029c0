"""Shopping list and item endpoints."""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from family_planner.api.schemas import (
    GenerateShoppingListRequest,
    ShoppingItemCreate,
    ShoppingItemOut,
    ShoppingItemUpdate,
    ShoppingListCreate,
    ShoppingListOut,
    ShoppingListUpdate,
)
from family_planner.domain.errors import InvalidRangeError
from family_planner.domain.shopping import ShoppingItem, ShoppingListWithItems

if TYPE_CHECKING:
    from family_planner.containers import AppContainer

logger = logging.getLogger(__name__)

lists_router = APIRouter(prefix="/api/shopping-lists", tags=["shopping"])
items_router = APIRouter(prefix="/api/shopping-items", tags=["shopping"])

_LIST_NOT_FOUND = "Shopping list not found"
_ITEM_NOT_FOUND = "Shopping item not found"


@lists_router.get("", response_model=list[ShoppingListOut])
async def list_shopping_lists(
    request: Request, user_id: int | None = Query(default=None, alias="userId")
) -> list[ShoppingListWithItems]:
    """Return lists with their items."""
    container: AppContainer = request.app.state.container
    return container.shopping_service.list_lists(user_id)


@lists_router.post(
    "", response_model=ShoppingListOut, status_code=status.HTTP_201_CREATED
)
async def create_shopping_list(
    payload: ShoppingListCreate, request: Request
) -> ShoppingListWithItems:
    """Create an empty list."""
    container: AppContainer = request.app.state.container
    return container.shopping_service.create_list(payload.name, payload.created_by)


@lists_router.post(
    "/generate", response_model=ShoppingListOut, status_code=status.HTTP_201_CREATED
)
async def generate_shopping_list(
    payload: GenerateShoppingListRequest, request: Request
) -> ShoppingListWithItems:
    """Build a new list from the meals planned in a date range."""
    container: AppContainer = request.app.state.container
    cancelled = threading.Event()
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(
                container.shopping_list_generator.generate,
                payload.start_date,
                payload.end_date,
                payload.user_id,
                cancelled,
            ),
            timeout=container.settings.generation_timeout_seconds,
        )
    except InvalidRangeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except TimeoutError as exc:
        cancelled.set()
        logger.warning(
            "Shopping list generation timed out",
            extra={"user_id": payload.user_id},
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate shopping list",
        ) from exc
    except Exception as exc:
        logger.exception(
            "Shopping list generation failed", extra={"user_id": payload.user_id}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate shopping list",
        ) from exc


@lists_router.get("/{list_id}", response_model=ShoppingListOut)
async def get_shopping_list(list_id: int, request: Request) -> ShoppingListWithItems:
    """Return one list with its items."""
    container: AppContainer = request.app.state.container
    shopping_list = container.shopping_service.get_list(list_id)
    if shopping_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=_LIST_NOT_FOUND
        )
    return shopping_list


@lists_router.put("/{list_id}", response_model=ShoppingListOut)
async def update_shopping_list(
    list_id: int, payload: ShoppingListUpdate, request: Request
) -> ShoppingListWithItems:
    """Rename a list or mark it done."""
    container: AppContainer = request.app.state.container
    shopping_list = container.shopping_service.update_list(
        list_id, payload.model_dump(exclude_unset=True)
    )
    if shopping_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=_LIST_NOT_FOUND
        )
    return shopping_list


@lists_router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shopping_list(list_id: int, request: Request) -> Response:
    """Delete a list and its items."""
    container: AppContainer = request.app.state.container
    if not container.shopping_service.delete_list(list_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=_LIST_NOT_FOUND
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@items_router.post(
    "", response_model=ShoppingItemOut, status_code=status.HTTP_201_CREATED
)
async def create_shopping_item(
    payload: ShoppingItemCreate, request: Request
) -> ShoppingItem:
    """Add an item to a list."""
    container: AppContainer = request.app.state.container
    item = container.shopping_service.add_item(
        payload.list_id,
        payload.name,
        payload.added_by,
        quantity=payload.quantity,
        category=payload.category,
        completed=payload.completed,
        related_meal=payload.related_meal,
    )
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=_LIST_NOT_FOUND
        )
    return item


@items_router.put("/{item_id}", response_model=ShoppingItemOut)
async def update_shopping_item(
    item_id: int, payload: ShoppingItemUpdate, request: Request
) -> ShoppingItem:
    """Tick off or edit an item."""
    container: AppContainer = request.app.state.container
    item = container.shopping_service.update_item(
        item_id, payload.model_dump(exclude_unset=True)
    )
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=_ITEM_NOT_FOUND
        )
    return item


@items_router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shopping_item(item_id: int, request: Request) -> Response:
    """Remove a single item."""
    container: AppContainer = request.app.state.container
    if not container.shopping_service.delete_item(item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=_ITEM_NOT_FOUND
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
