"""Builders

Pre-bind the callback of an effect combinator, producing a reusable
wrapper that can be applied to many thunks later."""

from __future__ import annotations

from collections.abc import Callable

from .._types import Action, Outcome, Thunk, Wrapper
from .run import (
    run_with_error_effect,
    run_with_outcome_effect,
    run_with_success_effect,
    run_with_success_effect_mapped,
)


def build_success_effect[T](action: Action[T]) -> Wrapper[T]:
    """
    Bind action into a reusable success-effect wrapper.

    Example:
        log_value = build_success_effect(print)
        log_value(lambda: 1 + 2)  # prints 3, returns 3
    """

    def wrapper(compute: Thunk[T]) -> T:
        return run_with_success_effect(action, compute)

    return wrapper


def build_success_effect_mapped[T, R](
    transform: Callable[[T], R],
    action: Action[R],
) -> Wrapper[T]:
    """Bind transform and action into a reusable mapped success-effect wrapper."""

    def wrapper(compute: Thunk[T]) -> T:
        return run_with_success_effect_mapped(transform, action, compute)

    return wrapper


def build_error_effect[T](action: Action[Exception]) -> Wrapper[T]:
    """Bind action into a reusable error-effect wrapper."""

    def wrapper(compute: Thunk[T]) -> T:
        return run_with_error_effect(action, compute)

    return wrapper


def build_outcome_effect[T](action: Action[Outcome[T]]) -> Wrapper[T]:
    """Bind action into a reusable outcome-effect wrapper."""

    def wrapper(compute: Thunk[T]) -> T:
        return run_with_outcome_effect(action, compute)

    return wrapper


__all__ = (
    "build_error_effect",
    "build_outcome_effect",
    "build_success_effect",
    "build_success_effect_mapped",
)
