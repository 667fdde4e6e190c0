"""Tests for container wiring."""

import logging
from uuid import uuid4

import pytest

from aqua_tracker.adapters.supabase_intake_repository import SupabaseIntakeRepository
from aqua_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from aqua_tracker.containers import build_container
from aqua_tracker.domain.errors import ConfigurationError


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.auth_service.repository, SupabaseUserRepository)
    assert isinstance(container.intake_service.repository, SupabaseIntakeRepository)
    assert container.intake_service.timezone_name == settings.app_timezone
    assert container.auth_service.tokens.ttl.days == settings.session_ttl_days


def test_build_container_requires_signing_key(settings) -> None:
    settings = settings.model_copy(update={"jwt_secret": None})

    with pytest.raises(ConfigurationError):
        build_container(settings)


def test_build_container_dev_mode_warns(settings, caplog, monkeypatch) -> None:
    settings = settings.model_copy(
        update={"jwt_secret": None, "insecure_dev_mode": True}
    )
    monkeypatch.setattr(logging.getLogger("aqua_tracker"), "propagate", True)

    with caplog.at_level(logging.WARNING, logger="aqua_tracker.containers"):
        container = build_container(settings)

    token = container.auth_service.tokens.issue(uuid4())
    assert container.auth_service.authenticate(token) is not None
    assert "INSECURE_DEV_MODE" in caplog.text
