"""
Logging effects
===============

Ready-made structlog callbacks for the effect combinators.
Configured with LogPolicy; the combinators themselves never log.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass, field

import structlog
from kungfu import Error, Ok

from ._errors import EffectConfigError
from ._helpers import identity
from ._types import Action, Outcome, Wrapper
from .effect.build import build_outcome_effect

_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


@dataclass(frozen=True, slots=True)
class LogPolicy[T]:
    """
    How effect callbacks report to structlog.

    project shapes the success value before it is logged as `value`.
    """

    success_event: str = "call.ok"
    error_event: str = "call.failed"
    success_level: str = "info"
    error_level: str = "error"
    project: Callable[[T], typing.Any] = field(default=identity)

    def __post_init__(self) -> None:
        if self.success_level not in _LEVELS:
            raise EffectConfigError("success_level", f"unknown level {self.success_level!r}")
        if self.error_level not in _LEVELS:
            raise EffectConfigError("error_level", f"unknown level {self.error_level!r}")
        if not self.success_event or not self.error_event:
            raise EffectConfigError("event", "event names must not be empty")

    @classmethod
    def quiet(cls, project: Callable[[T], typing.Any] = identity) -> LogPolicy[T]:
        """Successes at debug, failures at warning."""
        return cls(success_level="debug", error_level="warning", project=project)

    @classmethod
    def named(cls, name: str, project: Callable[[T], typing.Any] = identity) -> LogPolicy[T]:
        """Events prefixed with name: `<name>.ok` / `<name>.failed`."""
        return cls(success_event=f"{name}.ok", error_event=f"{name}.failed", project=project)


def _emit(logger: typing.Any, level: str, event: str, **kw: typing.Any) -> None:
    getattr(logger, level)(event, **kw)


def log_success[T](logger: typing.Any, policy: LogPolicy[T] | None = None) -> Action[T]:
    """Callback logging the projected success value."""
    p: LogPolicy[T] = policy if policy is not None else LogPolicy()

    def action(value: T) -> None:
        _emit(logger, p.success_level, p.success_event, value=p.project(value))

    return action


def log_error[T](logger: typing.Any, policy: LogPolicy[T] | None = None) -> Action[Exception]:
    """Callback logging the exception type and message."""
    p: LogPolicy[T] = policy if policy is not None else LogPolicy()

    def action(exc: Exception) -> None:
        _emit(
            logger,
            p.error_level,
            p.error_event,
            error_type=type(exc).__name__,
            error=str(exc),
        )

    return action


def log_outcome[T](logger: typing.Any, policy: LogPolicy[T] | None = None) -> Action[Outcome[T]]:
    """Callback dispatching Ok to log_success and Error to log_error."""
    on_ok = log_success(logger, policy)
    on_err = log_error(logger, policy)

    def action(outcome: Outcome[T]) -> None:
        match outcome:
            case Ok(value):
                on_ok(value)
            case Error(exc):
                on_err(exc)

    return action


def logged[T](
    logger: typing.Any | None = None,
    policy: LogPolicy[T] | None = None,
) -> Wrapper[T]:
    """
    Builder that logs the outcome of every wrapped thunk.

    Example:
        fetch = logged(structlog.get_logger("db"), LogPolicy.named("db.fetch", project=len))
        rows = fetch(lambda: db.fetch_rows(query))
    """
    log = logger if logger is not None else structlog.get_logger("taps")
    return build_outcome_effect(log_outcome(log, policy))


__all__ = (
    "LogPolicy",
    "log_error",
    "log_outcome",
    "log_success",
    "logged",
)
