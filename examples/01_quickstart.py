from __future__ import annotations

from _infra import Failure, FakeBackend, User, banner, run

from taps import build_error_effect, run_with_outcome_effect, run_with_success_effect
from kungfu import Error, Ok


def greet(user: User) -> None:
    print(f"hello, {user.name}")


def report(error: Exception) -> None:
    print(f"error: {error!r}")


async def main() -> None:
    banner("01_quickstart: success, error and outcome effects")

    api = FakeBackend(name="api", failures_before_ok=1)
    on_error = build_error_effect(report)

    try:
        on_error(lambda: api.fetch_user(42))
    except Failure:
        print("first call failed, error was reported and re-raised")

    user = run_with_success_effect(greet, lambda: api.fetch_user(42))
    print(f"returned: {user!r}")

    def describe(outcome: object) -> None:
        match outcome:
            case Ok(value):
                print(f"outcome ok: {value.name}")
            case Error(err):
                print(f"outcome error: {err}")

    run_with_outcome_effect(describe, lambda: api.fetch_user(7))


if __name__ == "__main__":
    run(main)
