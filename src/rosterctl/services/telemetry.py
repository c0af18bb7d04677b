"""Operation timing — the ``@traced`` decorator.

Near-zero overhead when disabled (one ContextVar lookup per call). When
enabled via ``--verbose``, each traced operation is timed, logged through
structlog, and its duration is merged into ``ServiceResult.meta``.

Worker threads start with an empty context, so callers that hand work to a
pool must run it inside ``contextvars.copy_context()`` to keep the flag.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from typing import ParamSpec, TypeVar

import structlog

from rosterctl.services.result import ServiceResult

_verbose_enabled: ContextVar[bool] = ContextVar("_verbose_enabled", default=False)

_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Decorator: time a service method and record the duration in ``meta``."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _verbose_enabled.get():
            return func(*args, **kwargs)

        log = structlog.get_logger("rosterctl.telemetry")
        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            log.debug("op.complete", op=func.__qualname__, ok=False, duration_ms=_since(start))
            raise

        duration_ms = _since(start)
        if isinstance(result, ServiceResult):
            log.debug("op.complete", op=result.op, ok=result.ok, duration_ms=duration_ms)
            meta = {**(result.meta or {}), "duration_ms": duration_ms}
            result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]
        return result

    return wrapper


def _since(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 3)


def enable_telemetry() -> None:
    """Enable verbose timing (called by AppContext at startup)."""
    _verbose_enabled.set(True)


def disable_telemetry() -> None:
    _verbose_enabled.set(False)


def telemetry_enabled() -> bool:
    return _verbose_enabled.get()
