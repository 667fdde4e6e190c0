"""Application configuration."""

import os
import secrets

from pydantic_settings import BaseSettings, SettingsConfigDict

from aqua_tracker.domain.errors import ConfigurationError

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"
    session_ttl_days: int = 7
    insecure_dev_mode: bool = False
    cookie_secure: bool = True
    app_timezone: str = "UTC"
    password_time_cost: int = 3
    password_memory_cost: int = 65536
    password_parallelism: int = 4
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_signing_key(settings: Settings) -> tuple[str, bool]:
    """Return the token signing key and whether it was generated.

    An unset key is only tolerated in insecure dev mode, where a random
    per-process key is used instead.
    """
    secret = (settings.jwt_secret or "").strip()
    if secret:
        return secret, False
    if not settings.insecure_dev_mode:
        raise ConfigurationError(
            "JWT_SECRET is not set; set it or enable INSECURE_DEV_MODE"
        )
    return secrets.token_urlsafe(32), True
