from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


@dataclass(slots=True)
class FakeBackend:
    name: str
    failures_before_ok: int = 0

    def fetch_user(self, user_id: int) -> User:
        if self.failures_before_ok > 0:
            self.failures_before_ok -= 1
            raise Failure(f"{self.name}: unavailable")
        return User(id=user_id, name=f"user:{user_id}@{self.name}")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
