"""Async effect combinators

Same contracts as the sync combinators, for coroutine thunks.
Callbacks may be plain functions or return an awaitable,
which is awaited before the outcome is released."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Error, Ok

from .._helpers import capture_async, notify_async, release
from .._types import AsyncAction, AsyncThunk, AsyncWrapper, Outcome


async def run_with_success_effect_async[T](
    action: AsyncAction[T],
    compute: AsyncThunk[T],
) -> T:
    """Await compute, pass its value to action, return the value."""
    outcome = await capture_async(compute)
    match outcome:
        case Ok(value):
            await notify_async(action, value)
        case Error(_):
            pass
    return release(outcome)


async def run_with_success_effect_mapped_async[T, R](
    transform: Callable[[T], R],
    action: AsyncAction[R],
    compute: AsyncThunk[T],
) -> T:
    """Await compute, pass transform(value) to action, return the original value."""
    outcome = await capture_async(compute)
    match outcome:
        case Ok(value):
            await notify_async(action, transform(value))
        case Error(_):
            pass
    return release(outcome)


async def run_with_error_effect_async[T](
    action: AsyncAction[Exception],
    compute: AsyncThunk[T],
) -> T:
    """Await compute, on failure pass the exception to action and re-raise it."""
    outcome = await capture_async(compute)
    match outcome:
        case Error(exc):
            await notify_async(action, exc, cause=exc)
        case Ok(_):
            pass
    return release(outcome)


async def run_with_outcome_effect_async[T](
    action: AsyncAction[Outcome[T]],
    compute: AsyncThunk[T],
) -> T:
    """Await compute, pass the Ok / Error outcome to action, then release it."""
    outcome = await capture_async(compute)
    match outcome:
        case Ok(_):
            await notify_async(action, outcome)
        case Error(exc):
            await notify_async(action, outcome, cause=exc)
    return release(outcome)


# Builders
def build_success_effect_async[T](action: AsyncAction[T]) -> AsyncWrapper[T]:
    """Bind action into a reusable async success-effect wrapper."""

    def wrapper(compute: AsyncThunk[T]) -> Awaitable[T]:
        return run_with_success_effect_async(action, compute)

    return wrapper


def build_success_effect_mapped_async[T, R](
    transform: Callable[[T], R],
    action: AsyncAction[R],
) -> AsyncWrapper[T]:
    """Bind transform and action into a reusable async mapped wrapper."""

    def wrapper(compute: AsyncThunk[T]) -> Awaitable[T]:
        return run_with_success_effect_mapped_async(transform, action, compute)

    return wrapper


def build_error_effect_async[T](action: AsyncAction[Exception]) -> AsyncWrapper[T]:
    """Bind action into a reusable async error-effect wrapper."""

    def wrapper(compute: AsyncThunk[T]) -> Awaitable[T]:
        return run_with_error_effect_async(action, compute)

    return wrapper


def build_outcome_effect_async[T](action: AsyncAction[Outcome[T]]) -> AsyncWrapper[T]:
    """Bind action into a reusable async outcome-effect wrapper."""

    def wrapper(compute: AsyncThunk[T]) -> Awaitable[T]:
        return run_with_outcome_effect_async(action, compute)

    return wrapper


__all__ = (
    "build_error_effect_async",
    "build_outcome_effect_async",
    "build_success_effect_async",
    "build_success_effect_mapped_async",
    "run_with_error_effect_async",
    "run_with_outcome_effect_async",
    "run_with_success_effect_async",
    "run_with_success_effect_mapped_async",
)
