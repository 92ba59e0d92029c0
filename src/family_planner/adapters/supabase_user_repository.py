"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from family_planner.domain.models import UserRecord
from family_planner.services.users import UserRepository

_COLUMNS = "id, username, role, name, avatar, preferences"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return a user by username, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users."""
        response = (
            self.client.table("users").select(_COLUMNS).order("id").execute()
        )
        return [_parse_user(row) for row in response.data or []]

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create a new user row and return it."""
        response = self.client.table("users").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_preferences(
        self, user_id: int, preferences: dict[str, list[str]]
    ) -> UserRecord | None:
        """Replace the preferences JSON for a user."""
        response = (
            self.client.table("users")
            .update({"preferences": preferences})
            .eq("id", user_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    preferences = row.get("preferences")
    return UserRecord(
        id=int(row["id"]),
        username=str(row.get("username", "")),
        role=str(row.get("role") or "parent"),
        name=str(row.get("name", "")),
        avatar=row.get("avatar") or None,
        preferences=preferences if isinstance(preferences, dict) else {},
    )
