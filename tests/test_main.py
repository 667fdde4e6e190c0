"""Tests for the command-line entrypoint."""

from aqua_tracker import main as main_module
from tests.conftest import FAKE_SUPABASE_KEY


def test_main_serves_on_configured_port(monkeypatch, capsys) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", FAKE_SUPABASE_KEY)
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setattr(
        main_module.uvicorn,
        "run",
        lambda app, host, port: calls.append({"app": app, "host": host, "port": port}),
    )

    main_module.main()

    assert calls[0]["port"] == 9090
    assert "Aqua Tracker" in capsys.readouterr().out
