"""Test doubles shared by the effect tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class IllegalStateError(Exception):
    """Stand-in failure raised by test thunks."""


@dataclass
class Recorder:
    """Callback test double: records every value it is called with."""

    calls: list[Any] = field(default_factory=list)

    def __call__(self, value: Any) -> None:
        self.calls.append(value)


def boom() -> int:
    raise IllegalStateError("boom")


def interrupt() -> int:
    raise KeyboardInterrupt
