"""
Core type definitions for taps.

Aliases shared by every combinator module.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Thunk = deferred zero-argument computation
type Thunk[T] = Callable[[], T]

# AsyncThunk = deferred zero-argument coroutine factory
type AsyncThunk[T] = Callable[[], Awaitable[T]]

# Action = side-effect callback, result is ignored
type Action[A] = Callable[[A], None]

# AsyncAction = callback that may return an awaitable to be awaited
type AsyncAction[A] = Callable[[A], Awaitable[None] | None]

# Outcome = captured result of a thunk: Ok(value) or Error(exception)
type Outcome[T] = Result[T, Exception]

# Wrapper = what every builder produces
type Wrapper[T] = Callable[[Thunk[T]], T]

# AsyncWrapper = what every async builder produces
type AsyncWrapper[T] = Callable[[AsyncThunk[T]], Awaitable[T]]

__all__ = (
    "Action",
    "AsyncAction",
    "AsyncThunk",
    "AsyncWrapper",
    "Outcome",
    "Thunk",
    "Wrapper",
)
