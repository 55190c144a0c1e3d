"""Per-call stage timings, collected only under ``--verbose``.

A ``@traced`` service method opens a flat list of stages; each
``stage()`` block inside it appends one timed entry. The result carries
them as ``meta["timing"]``::

    {"call": "ExportService.export_records", "ms": 0.31,
     "stages": [{"stage": "export.dispatch", "ms": 0.12, "notes": {"elements": 3}}]}
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from patternctl.services.result import ServiceResult

log = structlog.get_logger(__name__)

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_stages: ContextVar[list[Stage] | None] = ContextVar("_stages", default=None)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


@dataclass
class Stage:
    """One timed step of a traced call."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    ms: float = 0.0
    notes: dict[str, Any] = field(default_factory=dict)

    def annotate(self, key: str, value: Any) -> None:
        self.notes[key] = value

    def to_dict(self) -> dict[str, Any]:
        entry: dict[str, Any] = {"stage": self.name, "ms": self.ms}
        if self.notes:
            entry["notes"] = self.notes
        return entry


@contextmanager
def stage(name: str) -> Iterator[Stage | None]:
    """Time the block as a stage of the enclosing ``@traced`` call.

    Yields None outside a traced call or when telemetry is off.
    """
    stages = _stages.get()
    if stages is None:
        yield None
        return

    current = Stage(name)
    try:
        yield current
    finally:
        current.ms = _elapsed_ms(current.started)
        stages.append(current)


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Attach ``meta["timing"]`` to the ServiceResult of *func* when enabled."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        started = time.perf_counter()
        stages: list[Stage] = []
        token = _stages.set(stages)
        try:
            result = func(*args, **kwargs)
        finally:
            _stages.reset(token)

        timing = {
            "call": func.__qualname__,
            "ms": _elapsed_ms(started),
            "stages": [s.to_dict() for s in stages],
        }
        log.debug("timing", **timing)
        if isinstance(result, ServiceResult):
            result = result.with_meta(timing=timing)  # type: ignore[assignment]
        return result

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
