"""Tests for shopping list endpoints."""

import logging
from dataclasses import replace
from datetime import date

from fastapi.testclient import TestClient

from family_planner.api.app import create_app
from family_planner.services.shopping_generator import ShoppingListGenerator
from tests.conftest import (
    FailingMealPlanRepository,
    SlowMealPlanRepository,
    TrackedShoppingListGenerator,
    add_meal,
    plan_meal,
)


def test_generate_shopping_list(
    container, meal_repository, meal_plan_repository
) -> None:
    tacos = add_meal(meal_repository, "Tacos", ["tortilla", "beef", "salsa"])
    salad = add_meal(meal_repository, "Salad", ["lettuce", "salsa"])
    plan_meal(meal_plan_repository, tacos, date(2024, 3, 1))
    plan_meal(meal_plan_repository, salad, date(2024, 3, 3))
    client = TestClient(create_app(container))

    response = client.post(
        "/api/shopping-lists/generate",
        json={"startDate": "2024-03-01", "endDate": "2024-03-03", "userId": 2},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Shopping List 2024-03-01 to 2024-03-03"
    assert data["createdBy"] == 2
    assert data["completed"] is False
    assert [item["name"] for item in data["items"]] == [
        "beef",
        "lettuce",
        "salsa",
        "tortilla",
    ]
    assert {item["category"] for item in data["items"]} == {"ingredient"}
    assert {item["listId"] for item in data["items"]} == {data["id"]}
    assert {item["addedBy"] for item in data["items"]} == {2}


def test_generate_shopping_list_rejects_inverted_range(
    container, shopping_repository
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/shopping-lists/generate",
        json={"startDate": "2024-03-05", "endDate": "2024-03-01", "userId": 1},
    )

    assert response.status_code == 400
    assert shopping_repository.lists == {}


def test_generate_shopping_list_requires_user(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/shopping-lists/generate",
        json={"startDate": "2024-03-01", "endDate": "2024-03-02"},
    )

    assert response.status_code == 422


def test_generate_shopping_list_read_failure(
    container, meal_repository, shopping_repository
) -> None:
    failing_plans = FailingMealPlanRepository(failing_date=date(2024, 3, 2))
    container = replace(
        container,
        shopping_list_generator=ShoppingListGenerator(
            meal_plan_repository=failing_plans,
            meal_repository=meal_repository,
            shopping_repository=shopping_repository,
        ),
    )
    client = TestClient(create_app(container))

    response = client.post(
        "/api/shopping-lists/generate",
        json={"startDate": "2024-03-01", "endDate": "2024-03-03", "userId": 1},
    )

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to generate shopping list"
    assert shopping_repository.lists == {}


def test_shopping_list_crud(container, shopping_repository) -> None:
    client = TestClient(create_app(container))

    created = client.post(
        "/api/shopping-lists", json={"name": "Party", "createdBy": 3}
    )
    list_id = created.json()["id"]
    item = client.post(
        "/api/shopping-items",
        json={
            "listId": list_id,
            "name": "balloons",
            "quantity": "12",
            "category": "manual",
            "addedBy": 3,
        },
    )
    renamed = client.put(f"/api/shopping-lists/{list_id}", json={"name": "Bday"})
    fetched = client.get(f"/api/shopping-lists/{list_id}")
    by_user = client.get("/api/shopping-lists", params={"userId": 3})

    assert created.status_code == 201
    assert created.json()["items"] == []
    assert item.status_code == 201
    assert item.json()["quantity"] == "12"
    assert renamed.json()["name"] == "Bday"
    assert [entry["name"] for entry in fetched.json()["items"]] == ["balloons"]
    assert [entry["id"] for entry in by_user.json()] == [list_id]
    assert client.get("/api/shopping-lists/999").status_code == 404

    assert client.delete(f"/api/shopping-lists/{list_id}").status_code == 204
    assert shopping_repository.items == {}
    assert client.delete(f"/api/shopping-lists/{list_id}").status_code == 404


def test_shopping_item_endpoints(container) -> None:
    client = TestClient(create_app(container))
    list_id = client.post(
        "/api/shopping-lists", json={"name": "Weekly", "createdBy": 1}
    ).json()["id"]
    item_id = client.post(
        "/api/shopping-items",
        json={"listId": list_id, "name": "milk", "addedBy": 1},
    ).json()["id"]

    ticked = client.put(f"/api/shopping-items/{item_id}", json={"completed": True})
    orphan = client.post(
        "/api/shopping-items", json={"listId": 999, "name": "x", "addedBy": 1}
    )

    assert ticked.status_code == 200
    assert ticked.json()["completed"] is True
    assert orphan.status_code == 404
    assert client.put("/api/shopping-items/999", json={}).status_code == 404
    assert client.delete(f"/api/shopping-items/{item_id}").status_code == 204
    assert client.delete(f"/api/shopping-items/{item_id}").status_code == 404


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def test_generate_shopping_list_timeout_cancels_writes(
    container, settings, meal_repository, shopping_repository
) -> None:
    slow_plans = SlowMealPlanRepository(delay_seconds=0.3)
    chili = add_meal(meal_repository, "Chili", ["beans"])
    plan_meal(slow_plans, chili, date(2024, 3, 1))
    generator = TrackedShoppingListGenerator(
        meal_plan_repository=slow_plans,
        meal_repository=meal_repository,
        shopping_repository=shopping_repository,
    )
    container = replace(
        container,
        settings=settings.model_copy(update={"generation_timeout_seconds": 0.05}),
        shopping_list_generator=generator,
    )
    client = TestClient(create_app(container))
    handler = _RecordingHandler()
    logger = logging.getLogger("family_planner.api.shopping")
    logger.addHandler(handler)

    try:
        response = client.post(
            "/api/shopping-lists/generate",
            json={"startDate": "2024-03-01", "endDate": "2024-03-01", "userId": 1},
        )
    finally:
        logger.removeHandler(handler)

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to generate shopping list"}
    assert [record.getMessage() for record in handler.records] == [
        "Shopping list generation timed out"
    ]
    assert handler.records[0].levelno == logging.WARNING
    assert generator.finished.wait(timeout=5)
    assert shopping_repository.lists == {}
    assert shopping_repository.items == {}


def test_update_shopping_list_rejects_null_required_fields(
    container, shopping_repository
) -> None:
    client = TestClient(create_app(container))
    list_id = client.post(
        "/api/shopping-lists", json={"name": "Weekly", "createdBy": 1}
    ).json()["id"]

    null_name = client.put(f"/api/shopping-lists/{list_id}", json={"name": None})
    null_completed = client.put(
        f"/api/shopping-lists/{list_id}", json={"completed": None}
    )
    listed = client.get("/api/shopping-lists")

    assert null_name.status_code == 422
    assert null_completed.status_code == 422
    assert listed.status_code == 200
    assert [entry["name"] for entry in listed.json()] == ["Weekly"]
    assert shopping_repository.get_shopping_list(list_id).name == "Weekly"


def test_update_shopping_item_null_handling(container) -> None:
    client = TestClient(create_app(container))
    list_id = client.post(
        "/api/shopping-lists", json={"name": "Weekly", "createdBy": 1}
    ).json()["id"]
    item_id = client.post(
        "/api/shopping-items",
        json={"listId": list_id, "name": "milk", "quantity": "2", "addedBy": 1},
    ).json()["id"]

    null_name = client.put(f"/api/shopping-items/{item_id}", json={"name": None})
    cleared = client.put(f"/api/shopping-items/{item_id}", json={"quantity": None})
    fetched = client.get(f"/api/shopping-lists/{list_id}")

    assert null_name.status_code == 422
    assert cleared.status_code == 200
    assert cleared.json()["quantity"] is None
    assert fetched.status_code == 200
    assert fetched.json()["items"][0]["name"] == "milk"
