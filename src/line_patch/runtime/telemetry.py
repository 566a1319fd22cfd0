"""Logging and profiling for line_patch, built on logfire.

Public surface:

``configure(...)`` -- apply a named preset or explicit ``logfire.configure`` options
``get_logger(name)`` -- cached logfire instance tagged with ``name``
``record_event(name, ...)`` -- structured event at a chosen level
``span(name, ...)`` -- timed span, optionally tagged as a component

With no explicit call to ``configure`` the setup comes from ``LINE_PATCH_*``
environment variables. Span metadata lives on the span itself, so concurrent
spans in different threads never see each other's attributes.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional

import logfire

ENV_PREFIX = "LINE_PATCH_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "line_patch")
SERVICE_NAME = "line_patch"
PRESETS = ("development", "production")

_LEVELS = {
    "trace": "trace",
    "debug": "debug",
    "info": "info",
    "notice": "notice",
    "warn": "warn",
    "warning": "warn",
    "error": "error",
    "fatal": "fatal",
}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_CONFIGURED = False


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _level_name(level: str) -> str:
    try:
        return _LEVELS[str(level).lower()]
    except KeyError:
        raise ValueError(f"Unsupported log level '{level}'.") from None


def _preset_options(preset: str) -> Dict[str, Any]:
    key = preset.lower()
    if key == "development":
        return {
            "send_to_logfire": False,
            "console": logfire.ConsoleOptions(min_log_level="debug"),
        }
    if key == "production":
        return {"send_to_logfire": "if-token-present", "console": False}
    raise ValueError(f"Unknown preset '{preset}'.")


def _default_options() -> Dict[str, Any]:
    if _env_flag("DISABLE_CONSOLE", False):
        console: Any = False
    else:
        # warn unless LINE_PATCH_LOG_LEVEL says otherwise.
        console = logfire.ConsoleOptions(
            colors="never" if _env_flag("NO_COLOR", False) else "auto",
            min_log_level=_level_name(_env("LOG_LEVEL") or "warn"),
        )
    return {
        "send_to_logfire": "if-token-present"
        if _env_flag("SEND_TO_LOGFIRE", False)
        else False,
        "console": console,
    }


def configure(*, preset: Optional[str] = None, **options: Any) -> None:
    """Configure logfire for the engine.

    Parameters
    ----------
    preset:
        One of ``PRESETS``. Mutually exclusive with ``options``.
    options:
        Keyword arguments forwarded to ``logfire.configure``.
    """

    global _CONFIGURED
    if preset and options:
        raise ValueError("Provide either a preset or explicit options, not both.")

    if preset:
        options = _preset_options(preset)
    elif not options:
        options = _default_options()

    options.setdefault("service_name", SERVICE_NAME)
    logfire.configure(**options)
    _CONFIGURED = True
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if not _CONFIGURED:
            configure()
        _LOGGER_CACHE[logger_name] = logfire.with_settings(tags=[logger_name])
    return _LOGGER_CACHE[logger_name]


def _emit(logger: Any, level: str, message: str, attributes: Dict[str, Any]) -> None:
    getattr(logger, _level_name(level))(message, **attributes)


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(
        get_logger(logger_name),
        level,
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@dataclass
class SpanHandle:
    logger: Any
    span: Any
    span_name: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = value
        self.span.set_attribute(key, value)

    def fail(self, reason: str) -> None:
        _emit(
            self.logger,
            "error",
            "span::fail",
            {"span": self.span_name, **self.metadata, "reason": reason},
        )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a block as a logfire span.

    ``component=True`` reuses ``name`` as the component attribute; a string
    is used as-is. Exceptions escaping the block are reported through
    ``SpanHandle.fail`` and re-raised; callers that treat an error as an
    ordinary outcome should return it out of the block instead.
    """

    log = get_logger(logger_name)
    attributes = dict(metadata or {})
    component_name = name if component is True else component or None
    if component_name:
        attributes["component"] = component_name

    with log.span(name, **attributes) as active:
        handle = SpanHandle(
            logger=log, span=active, span_name=name, metadata=attributes
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
