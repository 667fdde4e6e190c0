"""Supabase-backed user repository."""

import logging
from dataclasses import dataclass
from uuid import UUID, uuid4

import httpx
from supabase import Client, PostgrestAPIError

from aqua_tracker.domain.errors import DuplicateUsernameError, StoreFailureError
from aqua_tracker.domain.models import UserRecord
from aqua_tracker.services.users import UserRepository

UNIQUE_VIOLATION = "23505"

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""
        try:
            response = (
                self.client.table("users")
                .select("id, username, password_hash")
                .eq("username", username)
                .limit(1)
                .execute()
            )
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            _logger.exception("User lookup failed")
            raise StoreFailureError from exc
        if response.data:
            return _parse_row(response.data[0])
        return None

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Create a new user row and return it."""
        try:
            response = (
                self.client.table("users")
                .insert(
                    {
                        "id": str(uuid4()),
                        "username": username,
                        "password_hash": password_hash,
                    }
                )
                .execute()
            )
        except PostgrestAPIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise DuplicateUsernameError(username) from exc
            _logger.exception("User insert failed")
            raise StoreFailureError from exc
        except httpx.HTTPError as exc:
            _logger.exception("User insert failed")
            raise StoreFailureError from exc
        if not response.data:
            _logger.error("User insert returned no row")
            raise StoreFailureError
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        username=str(row["username"]),
        password_hash=str(row["password_hash"]),
    )
