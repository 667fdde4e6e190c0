"""Signed session tokens."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SessionTokenCodec:
    """Issue and validate JWTs whose subject is a user id.

    The token is the whole session: nothing is stored server-side, so a
    token stays valid until its ``exp`` claim passes.
    """

    secret_key: str
    ttl: timedelta = timedelta(days=7)
    algorithm: str = "HS256"
    clock: Callable[[], datetime] = field(default=_utcnow, repr=False)

    def __post_init__(self) -> None:
        if not self.secret_key:
            raise ValueError("Session signing key must not be empty")

    def issue(self, user_id: UUID) -> str:
        """Return a signed token expiring ``ttl`` from now."""
        expires_at = self.clock() + self.ttl
        claims = {"sub": str(user_id), "exp": expires_at}
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def validate(self, token: str | None) -> UUID | None:
        """Return the user id for a valid token, else None."""
        if not token:
            return None
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True},
            )
        except JWTError as exc:
            _logger.debug("Rejected session token: %s", exc)
            return None
        try:
            return UUID(str(claims.get("sub")))
        except ValueError:
            return None
