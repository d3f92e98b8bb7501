"""Internal helpers for taps.

Capture a thunk into an Outcome and release it back into
plain return / raise. Not part of the public API."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable

from kungfu import Error, Ok

from ._errors import AsyncCallbackError
from ._types import AsyncAction, AsyncThunk, Outcome, Thunk


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def capture[T](compute: Thunk[T]) -> Outcome[T]:
    """
    Run thunk once and capture its result as Ok / Error.

    Only Exception subclasses are captured. KeyboardInterrupt,
    SystemExit and friends escape immediately.
    """
    try:
        return Ok(compute())
    except Exception as exc:
        return Error(exc)


async def capture_async[T](compute: AsyncThunk[T]) -> Outcome[T]:
    """Async version of capture()."""
    try:
        return Ok(await compute())
    except Exception as exc:
        return Error(exc)


def release[T](outcome: Outcome[T]) -> T:
    """
    Turn Outcome back into a return value or a raise.

    The captured exception object is re-raised as is.
    """
    match outcome:
        case Ok(value):
            return value
        case Error(exc):
            raise exc
        case _ as unreachable:
            typing.assert_never(unreachable)


def _chains(exc: Exception, cause: Exception | None) -> bool:
    """Whether cause may be attached to a callback error."""
    return (
        cause is not None
        and exc is not cause
        and exc.__cause__ is None
        and not exc.__suppress_context__
    )


def notify[A](
    action: Callable[[A], typing.Any],
    arg: A,
    *,
    cause: Exception | None = None,
) -> None:
    """
    Invoke callback with arg.

    A failing callback propagates. When the computation already failed,
    that failure becomes the callback error's __cause__, unless the
    callback set its own cause or raised `from None`.

    A callback returning an awaitable raises AsyncCallbackError:
    nothing would ever await it here.
    """
    try:
        ret = action(arg)
        if inspect.isawaitable(ret):
            close = getattr(ret, "close", None)
            if close is not None:
                close()
            raise AsyncCallbackError(action)
    except Exception as exc:
        if _chains(exc, cause):
            raise exc from cause
        raise


async def notify_async[A](
    action: AsyncAction[A],
    arg: A,
    *,
    cause: Exception | None = None,
) -> None:
    """Async version of notify(). Awaits the callback result if awaitable."""
    try:
        ret = action(arg)
        if inspect.isawaitable(ret):
            await ret
    except Exception as exc:
        if _chains(exc, cause):
            raise exc from cause
        raise


__all__ = (
    "capture",
    "capture_async",
    "identity",
    "notify",
    "notify_async",
    "release",
)
