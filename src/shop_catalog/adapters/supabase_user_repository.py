"""Supabase-backed editor credential repository."""

from dataclasses import dataclass
from datetime import datetime

from postgrest.exceptions import APIError
from supabase import Client

from shop_catalog.domain.users import LoginEvent, UserRecord
from shop_catalog.services.auth import DuplicateUserError, UserRepository

_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for editor credentials."""

    client: Client

    def get_user(self, user_name: str) -> UserRecord | None:
        """Return the user with this user name, if present."""
        response = (
            self.client.table("users")
            .select("user_name, email, password_hash, login_history")
            .eq("user_name", user_name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserRecord(
            user_name=str(row["user_name"]),
            email=str(row.get("email") or ""),
            password_hash=str(row["password_hash"]),
            login_history=[
                _parse_login_event(event) for event in row.get("login_history") or []
            ],
        )

    def create_user(self, user: UserRecord) -> None:
        """Insert a new user row."""
        try:
            self.client.table("users").insert(
                {
                    "user_name": user.user_name,
                    "email": user.email,
                    "password_hash": user.password_hash,
                    "login_history": [],
                }
            ).execute()
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DuplicateUserError(user.user_name) from exc
            raise

    def set_login_history(self, user_name: str, history: list[LoginEvent]) -> None:
        """Replace the stored login history for a user."""
        self.client.table("users").update(
            {
                "login_history": [
                    {
                        "dateTime": event.date_time.isoformat(),
                        "userAgent": event.user_agent,
                    }
                    for event in history
                ]
            }
        ).eq("user_name", user_name).execute()


def _parse_login_event(raw: dict[str, object]) -> LoginEvent:
    return LoginEvent(
        date_time=datetime.fromisoformat(str(raw["dateTime"])),
        user_agent=str(raw.get("userAgent") or ""),
    )
