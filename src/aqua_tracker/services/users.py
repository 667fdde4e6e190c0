"""User signup, login and session resolution."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from aqua_tracker.domain.errors import InvalidCredentialsError, InvalidInputError
from aqua_tracker.domain.models import UserRecord
from aqua_tracker.services.passwords import PasswordHasher
from aqua_tracker.services.tokens import SessionTokenCodec

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user credentials."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with this username, if present."""

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Create a user, raising DuplicateUsernameError if the name is taken."""


@dataclass
class AuthService:
    """Application service for account creation and sessions."""

    repository: UserRepository
    hasher: PasswordHasher
    tokens: SessionTokenCodec

    def signup(self, username: str, password: str) -> str:
        """Create an account and return a session token for it."""
        cleaned = _clean_username(username)
        if not password:
            raise InvalidInputError("Username and password are required")
        user = self.repository.create_user(cleaned, self.hasher.hash(password))
        _logger.info("Created user: user_id=%s", user.id)
        return self.tokens.issue(user.id)

    def login(self, username: str, password: str) -> str:
        """Check credentials and return a session token."""
        user = self.repository.get_by_username((username or "").strip())
        if user is None or not self.hasher.verify(password, user.password_hash):
            _logger.info("Failed login: username=%s", username)
            raise InvalidCredentialsError
        return self.tokens.issue(user.id)

    def authenticate(self, token: str | None) -> UUID | None:
        """Return the user id carried by a session token, if valid."""
        return self.tokens.validate(token)


def _clean_username(username: str) -> str:
    cleaned = (username or "").strip()
    if not cleaned:
        raise InvalidInputError("Username and password are required")
    return cleaned
