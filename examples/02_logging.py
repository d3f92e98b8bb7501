from __future__ import annotations

import structlog
from _infra import FakeBackend, User, banner, run

from taps import LogPolicy, effectful, logged


api = FakeBackend(name="api")

policy: LogPolicy[User] = LogPolicy.named("users.fetch", project=lambda user: user.id)


@effectful(logged(structlog.get_logger("examples"), policy))
def fetch_user(user_id: int) -> User:
    return api.fetch_user(user_id)


async def main() -> None:
    banner("02_logging: structlog effects via decorator")

    user = fetch_user(42)
    print(f"returned: {user.name}")


if __name__ == "__main__":
    run(main)
