"""Tests for the API server launcher."""

from __future__ import annotations

from interfaces.api import main


class TestRun:
    def test_run_serves_on_configured_address(self, monkeypatch) -> None:
        calls: list[tuple[object, dict]] = []
        monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        monkeypatch.setattr(main.settings, "api_host", "0.0.0.0")  # noqa: S104
        monkeypatch.setattr(main.settings, "api_port", 8123)

        main.run()

        assert calls == [(main.app, {"host": "0.0.0.0", "port": 8123, "log_config": None})]  # noqa: S104
