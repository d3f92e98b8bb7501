"""Effect combinators

Run a thunk and hand its success value, its error or its whole
outcome to a side-effect callback. The callback observes only:
the value is returned and the error is re-raised unchanged.

Callbacks here are sync. Coroutine callbacks belong to taps.effect.aio."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok

from .._helpers import capture, notify, release
from .._types import Action, Outcome, Thunk


def run_with_success_effect[T](action: Action[T], compute: Thunk[T]) -> T:
    """
    Run compute, pass its value to action, return the value.

    If compute raises, the exception propagates and action is never called.

    action must be a plain function; for `async def` callbacks use
    run_with_success_effect_async (an awaitable return raises AsyncCallbackError).

    Example:
        log: list[int] = []
        run_with_success_effect(log.append, lambda: 1 + 2)  # 3, log == [3]
    """
    outcome = capture(compute)
    match outcome:
        case Ok(value):
            notify(action, value)
        case Error(_):
            pass
    return release(outcome)


def run_with_success_effect_mapped[T, R](
    transform: Callable[[T], R],
    action: Action[R],
    compute: Thunk[T],
) -> T:
    """
    Like run_with_success_effect, but action sees transform(value).

    The original value is returned, not the projection.

    Example:
        run_with_success_effect_mapped(len, sizes.append, fetch_rows)
    """
    outcome = capture(compute)
    match outcome:
        case Ok(value):
            notify(action, transform(value))
        case Error(_):
            pass
    return release(outcome)


def run_with_error_effect[T](action: Action[Exception], compute: Thunk[T]) -> T:
    """
    Run compute, on failure pass the exception to action and re-raise it.

    On success action is never called and the value is returned.
    """
    outcome = capture(compute)
    match outcome:
        case Error(exc):
            notify(action, exc, cause=exc)
        case Ok(_):
            pass
    return release(outcome)


def run_with_outcome_effect[T](action: Action[Outcome[T]], compute: Thunk[T]) -> T:
    """
    Run compute, pass the captured Ok / Error to action exactly once,
    then return the value or re-raise the error.
    """
    outcome = capture(compute)
    match outcome:
        case Ok(_):
            notify(action, outcome)
        case Error(exc):
            notify(action, outcome, cause=exc)
    return release(outcome)


__all__ = (
    "run_with_error_effect",
    "run_with_outcome_effect",
    "run_with_success_effect",
    "run_with_success_effect_mapped",
)
