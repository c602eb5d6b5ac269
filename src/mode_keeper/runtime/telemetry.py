"""Plugin logging on top of telelog.

Everything below is keyed to the plugin's own vocabulary:

``configure(preset=...)`` -- pick one of ``PRESETS`` or the env-driven default
``record_event(name, ...)`` -- structured ``event::<name>`` line
``request(host_call, ...)`` -- log an outbound host request, then issue it
``span(name, ...)`` -- profile one handler invocation
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MODE_KEEPER_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "mode_keeper")

# The host draws the plugin from stdout, so only the development preset
# writes to the console.
PRESET_SETTINGS: Dict[str, Dict[str, Any]] = {
    "development": {"level": "DEBUG", "console": True, "color": True},
    "production": {
        "level": "INFO",
        "console": False,
        "file": "mode_keeper.log",
        "buffered": True,
    },
    "performance": {
        "level": "DEBUG",
        "console": False,
        "file": "mode_keeper-performance.log",
        "buffered": True,
        "json": True,
        "profiling": True,
    },
}
PRESETS = tuple(PRESET_SETTINGS)

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> Optional[bool]:
    raw = _env(name)
    if raw is None:
        return None
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_settings() -> Dict[str, Any]:
    """Settings taken from ``MODE_KEEPER_*`` variables that are actually set."""

    settings: Dict[str, Any] = {}
    if _env("LOG_LEVEL"):
        settings["level"] = str(_env("LOG_LEVEL")).upper()
    if _env("LOG_FILE"):
        settings["file"] = _env("LOG_FILE")
    disabled = _env_flag("DISABLE_CONSOLE")
    if disabled is not None:
        settings["console"] = not disabled
    no_color = _env_flag("NO_COLOR")
    if no_color is not None:
        settings["color"] = not no_color
    for key, env_name in (("json", "LOG_JSON"), ("buffered", "LOG_BUFFERED")):
        flag = _env_flag(env_name)
        if flag is not None:
            settings[key] = flag
    if _env("LOG_BUFFER_SIZE"):
        settings["buffer_size"] = int(str(_env("LOG_BUFFER_SIZE")))
    return settings


def build_config(settings: Dict[str, Any]) -> Any:
    config = tl.Config()
    config.with_min_level(settings.get("level", "INFO"))
    console = settings.get("console", True)
    config.with_console_output(console)
    if console:
        config.with_colored_output(settings.get("color", True))
    if settings.get("json"):
        config.with_json_format(True)
    if settings.get("file"):
        config.with_file_output(settings["file"])
    if settings.get("buffered"):
        config.with_buffering(True)
        if "buffer_size" in settings:
            config.with_buffer_size(settings["buffer_size"])
    if settings.get("profiling"):
        config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active configuration and drop cached loggers.

    Environment variables override preset values; an explicit ``config`` is
    adopted as is.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if config is None:
        settings: Dict[str, Any] = {}
        if preset:
            if preset.lower() not in PRESET_SETTINGS:
                raise ValueError(f"Unknown preset '{preset}'.")
            settings.update(PRESET_SETTINGS[preset.lower()])
        settings.update(_env_settings())
        config = build_config(settings)

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = build_config(_env_settings())
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), value if isinstance(value, str) else repr(value)) for key, value in data.items()]


def _emit(log: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    name = level.lower()
    with_data = getattr(log, f"{name}_with", None)
    if with_data is not None:
        with_data(message, _pairs(data))
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


def request(
    host_call: Callable[..., None],
    *args: Any,
    logger_name: Optional[str] = "mode_keeper.host",
    **data: Any,
) -> None:
    """Record ``host.<call name>`` with ``data``, then issue the call.

    Host calls are fire-and-forget, so nothing is returned.
    """

    call_name = getattr(host_call, "__name__", type(host_call).__name__)
    record_event(f"host.{call_name}", data=data, logger_name=logger_name)
    host_call(*args)


@dataclass
class SpanHandle:
    logger: Any
    span_name: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = value if isinstance(value, str) else repr(value)

    def fail(self, reason: str) -> None:
        _emit(
            self.logger,
            "error",
            "span::fail",
            {"span": self.span_name, "reason": reason, **self.metadata},
        )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``component`` with ``metadata`` as logger context."""

    log = get_logger(logger_name)
    handle = SpanHandle(logger=log, span_name=name)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)

    with ExitStack() as stack:
        for key, value in handle.metadata.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "PRESETS",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "request",
    "span",
]
