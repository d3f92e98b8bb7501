"""
Lift a wrapper into a decorator.

Builders produce wrappers over zero-argument thunks. effectful() turns
such a wrapper into a decorator, so functions with arguments get the
same effect at every call.

Example:
    from taps import build_error_effect, effectful

    @effectful(build_error_effect(report))
    def parse(raw: str) -> dict:
        return json.loads(raw)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps

from ._types import AsyncWrapper, Wrapper


def effectful[T, **P](
    wrapper: Wrapper[T],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator factory: every call of the decorated function runs through wrapper.

    NOTE: Arguments are captured in a thunk, so the wrapped function
          still runs exactly once per call.
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def inner(*args: P.args, **kwargs: P.kwargs) -> T:
            return wrapper(lambda: func(*args, **kwargs))

        return inner

    return decorator


def effectful_async[T, **P](
    wrapper: AsyncWrapper[T],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """Async version of effectful() for coroutine functions."""

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @wraps(func)
        async def inner(*args: P.args, **kwargs: P.kwargs) -> T:
            return await wrapper(lambda: func(*args, **kwargs))

        return inner

    return decorator


__all__ = (
    "effectful",
    "effectful_async",
)
