from __future__ import annotations

import typing


class TapsError(Exception):
    """Base class for errors raised by taps itself."""


class EffectConfigError(TapsError, ValueError):
    """Policy was built with an invalid value."""

    field: str

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        super().__init__(f"Invalid {field}: {reason}")


class AsyncCallbackError(TapsError, TypeError):
    """Sync combinator got a callback returning an awaitable."""

    action: typing.Any

    def __init__(self, action: typing.Any) -> None:
        self.action = action
        name = getattr(action, "__qualname__", repr(action))
        super().__init__(f"Callback {name} returned an awaitable, use the *_async combinators")


__all__ = ("AsyncCallbackError", "EffectConfigError", "TapsError")
