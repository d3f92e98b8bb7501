from __future__ import annotations

import pytest

from taps import build_error_effect, build_success_effect, build_success_effect_async, effectful, effectful_async

from tests.helpers import IllegalStateError, Recorder

pytestmark = pytest.mark.unit


def test_effectful_passes_arguments_and_logs(recorder: Recorder) -> None:
    @effectful(build_success_effect(recorder))
    def add(x: int, y: int = 0) -> int:
        """Add two numbers."""
        return x + y

    assert add(1, y=2) == 3
    assert add(5) == 5
    assert recorder.calls == [3, 5]
    assert add.__name__ == "add"
    assert add.__doc__ == "Add two numbers."


def test_effectful_error_propagates(recorder: Recorder) -> None:
    @effectful(build_error_effect(recorder))
    def parse(raw: str) -> int:
        if not raw.isdigit():
            raise IllegalStateError(f"not a number: {raw}")
        return int(raw)

    assert parse("12") == 12
    with pytest.raises(IllegalStateError, match="not a number: x"):
        parse("x")

    assert [str(e) for e in recorder.calls] == ["not a number: x"]


@pytest.mark.asyncio
async def test_effectful_async(recorder: Recorder) -> None:
    @effectful_async(build_success_effect_async(recorder))
    async def double(x: int) -> int:
        return x * 2

    assert await double(21) == 42
    assert recorder.calls == [42]
    assert double.__name__ == "double"
