"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from family_planner.domain.errors import InvalidRoleError
from family_planner.domain.models import USER_ROLES, UserRecord


class UserRepository(Protocol):
    """Persistence interface for family members."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return a user by unique handle, if present."""

    def list_users(self) -> list[UserRecord]:
        """Return all users."""

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create and return a new user record."""

    def update_preferences(
        self, user_id: int, preferences: dict[str, list[str]]
    ) -> UserRecord | None:
        """Replace a user's preferences and return the updated record."""


@dataclass
class UserService:
    """Application service for family members."""

    repository: UserRepository

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id."""
        return self.repository.get_user(user_id)

    def list_users(self) -> list[UserRecord]:
        """Return every family member."""
        return self.repository.list_users()

    def register(self, payload: dict[str, object]) -> UserRecord:
        """Create a user, rejecting unknown roles and taken usernames."""
        role = str(payload.get("role") or "parent")
        if role not in USER_ROLES:
            raise InvalidRoleError(f"Unknown role: {role}")
        username = str(payload.get("username", ""))
        if self.repository.get_by_username(username):
            raise ValueError(f"Username already taken: {username}")
        return self.repository.create_user({**payload, "role": role})

    def update_preferences(
        self, user_id: int, preferences: dict[str, list[str]]
    ) -> UserRecord | None:
        """Replace the cuisine and dietary preferences of a user."""
        return self.repository.update_preferences(user_id, preferences)
