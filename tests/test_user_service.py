"""Tests for user service."""

import pytest

from family_planner.adapters.memory_repositories import InMemoryUserRepository
from family_planner.domain.errors import InvalidRoleError
from family_planner.services.users import UserService


def test_register_creates_user() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    user = service.register(
        {"username": "grandma", "role": "driver", "name": "Grandma", "avatar": None}
    )

    assert user.id == 1
    assert service.get_user(1) == user


def test_register_rejects_unknown_role() -> None:
    service = UserService(InMemoryUserRepository())

    with pytest.raises(InvalidRoleError):
        service.register({"username": "kid", "role": "child", "name": "Kid"})


def test_register_rejects_taken_username(
    user_repository: InMemoryUserRepository,
) -> None:
    service = UserService(user_repository)

    with pytest.raises(ValueError, match="already taken"):
        service.register({"username": "sarah_johnson", "name": "Sarah"})


def test_update_preferences_replaces_preferences(
    user_repository: InMemoryUserRepository,
) -> None:
    service = UserService(user_repository)

    updated = service.update_preferences(
        2, {"cuisines": ["Thai"], "dietary": ["Gluten-free"]}
    )

    assert updated is not None
    assert updated.preferences == {"cuisines": ["Thai"], "dietary": ["Gluten-free"]}
    assert service.update_preferences(99, {"cuisines": []}) is None


def test_sample_family_is_seeded(user_repository: InMemoryUserRepository) -> None:
    service = UserService(user_repository)

    users = service.list_users()

    assert [user.username for user in users] == [
        "sarah_johnson",
        "mike_johnson",
        "emma_johnson",
    ]
    assert users[1].role == "cook"
