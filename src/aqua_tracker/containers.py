"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from aqua_tracker.adapters.supabase_intake_repository import SupabaseIntakeRepository
from aqua_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from aqua_tracker.config import Settings, resolve_signing_key
from aqua_tracker.services.intake import IntakeService
from aqua_tracker.services.passwords import PasswordHasher
from aqua_tracker.services.tokens import SessionTokenCodec
from aqua_tracker.services.users import AuthService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    intake_service: IntakeService


def build_token_codec(settings: Settings) -> SessionTokenCodec:
    """Create the session codec, failing when no signing key is configured."""
    secret, generated = resolve_signing_key(settings)
    if generated:
        _logger.warning(
            "JWT_SECRET is unset; using a random key because INSECURE_DEV_MODE "
            "is enabled. Sessions will not survive a restart."
        )
    return SessionTokenCodec(
        secret_key=secret,
        ttl=timedelta(days=settings.session_ttl_days),
        algorithm=settings.jwt_algorithm,
    )


def build_password_hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher(
        time_cost=settings.password_time_cost,
        memory_cost=settings.password_memory_cost,
        parallelism=settings.password_parallelism,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    token_codec = build_token_codec(resolved_settings)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    auth_service = AuthService(
        repository=SupabaseUserRepository(supabase_client),
        hasher=build_password_hasher(resolved_settings),
        tokens=token_codec,
    )
    intake_service = IntakeService(
        repository=SupabaseIntakeRepository(supabase_client),
        timezone_name=resolved_settings.app_timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        intake_service=intake_service,
    )
