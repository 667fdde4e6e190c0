"""Password hashing with argon2."""

from dataclasses import dataclass, field

import argon2
from argon2.exceptions import InvalidHashError, VerificationError


@dataclass
class PasswordHasher:
    """Salted adaptive one-way hashing for user credentials."""

    time_cost: int = argon2.DEFAULT_TIME_COST
    memory_cost: int = argon2.DEFAULT_MEMORY_COST
    parallelism: int = argon2.DEFAULT_PARALLELISM
    _hasher: argon2.PasswordHasher = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._hasher = argon2.PasswordHasher(
            time_cost=self.time_cost,
            memory_cost=self.memory_cost,
            parallelism=self.parallelism,
        )

    def hash(self, plaintext: str) -> str:
        """Return an encoded hash; the salt is random per call."""
        if not plaintext:
            raise ValueError("Password must not be empty")
        return self._hasher.hash(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True only when the plaintext matches the hash."""
        if not plaintext or not hashed:
            return False
        try:
            return self._hasher.verify(hashed, plaintext)
        except (VerificationError, InvalidHashError):
            return False
