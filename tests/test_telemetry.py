from __future__ import annotations

import pytest

from mode_keeper.events import TabUpdate
from mode_keeper.host import RecordingHost
from mode_keeper.manifest import TabInfo
from mode_keeper.plugin import EventDispatcher
from mode_keeper.runtime import telemetry


def test_unknown_preset_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_config_and_preset_are_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_loggers_are_cached_per_name() -> None:
    assert telemetry.get_logger("mode_keeper.tests") is telemetry.get_logger(
        "mode_keeper.tests"
    )


def test_request_logs_then_issues_host_call(monkeypatch: pytest.MonkeyPatch) -> None:
    host = RecordingHost()
    logged: list[tuple[str, int]] = []
    monkeypatch.setattr(
        telemetry,
        "record_event",
        lambda name, **kwargs: logged.append((name, len(host.calls))),
    )

    telemetry.request(host.go_to_tab, 3, tab=3)

    assert logged == [("host.go_to_tab", 0)]
    assert host.named("go_to_tab")[0].args == (3,)


def test_dispatcher_requests_go_through_request(monkeypatch: pytest.MonkeyPatch) -> None:
    recorded: list[tuple[str, dict]] = []
    monkeypatch.setattr(
        telemetry,
        "record_event",
        lambda name, **kwargs: recorded.append((name, kwargs.get("data") or {})),
    )
    dispatcher = EventDispatcher(RecordingHost())

    dispatcher.load({})
    dispatcher.update(TabUpdate((TabInfo(0, True),)))

    names = [name for name, _ in recorded]
    assert "host.request_permission" in names
    assert "host.subscribe" in names
    assert ("host.switch_to_input_mode", {"mode": "normal", "tab": 0}) in recorded


def test_env_overrides_layer_over_presets(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODE_KEEPER_LOG_LEVEL", "warning")
    monkeypatch.setenv("MODE_KEEPER_DISABLE_CONSOLE", "yes")

    settings = telemetry._env_settings()

    assert settings == {"level": "WARNING", "console": False}
    assert set(telemetry.PRESETS) == {"development", "production", "performance"}
