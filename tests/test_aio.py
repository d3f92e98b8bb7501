from __future__ import annotations

import asyncio

import pytest
from kungfu import Error, Ok

from taps import (
    build_error_effect_async,
    build_outcome_effect_async,
    build_success_effect_async,
    build_success_effect_mapped_async,
    run_with_error_effect_async,
    run_with_outcome_effect_async,
    run_with_success_effect_async,
    run_with_success_effect_mapped_async,
)

from tests.helpers import IllegalStateError, Recorder

pytestmark = pytest.mark.unit


async def three() -> int:
    return 1 + 2


async def aboom() -> int:
    raise IllegalStateError("boom")


@pytest.mark.asyncio
async def test_success_effect_async_with_sync_action(recorder: Recorder) -> None:
    assert await run_with_success_effect_async(recorder, three) == 3
    assert recorder.calls == [3]


@pytest.mark.asyncio
async def test_success_effect_async_awaits_async_action() -> None:
    seen: list[int] = []

    async def action(value: int) -> None:
        seen.append(value)

    assert await run_with_success_effect_async(action, three) == 3
    assert seen == [3]


@pytest.mark.asyncio
async def test_success_effect_async_failure_skips_action(recorder: Recorder) -> None:
    with pytest.raises(IllegalStateError, match="boom"):
        await run_with_success_effect_async(recorder, aboom)

    assert recorder.calls == []


@pytest.mark.asyncio
async def test_mapped_effect_async(recorder: Recorder) -> None:
    assert await run_with_success_effect_mapped_async(lambda v: v * 10, recorder, three) == 3
    assert recorder.calls == [30]


@pytest.mark.asyncio
async def test_error_effect_async(recorder: Recorder) -> None:
    with pytest.raises(IllegalStateError) as info:
        await run_with_error_effect_async(recorder, aboom)

    assert recorder.calls == [info.value]
    assert await run_with_error_effect_async(recorder, three) == 3
    assert len(recorder.calls) == 1


@pytest.mark.asyncio
async def test_outcome_effect_async(recorder: Recorder) -> None:
    assert await run_with_outcome_effect_async(recorder, three) == 3
    with pytest.raises(IllegalStateError):
        await run_with_outcome_effect_async(recorder, aboom)

    assert isinstance(recorder.calls[0], Ok)
    assert isinstance(recorder.calls[1], Error)


@pytest.mark.asyncio
async def test_failing_async_action_chains_original_failure() -> None:
    async def action(_: Exception) -> None:
        raise RuntimeError("observer broke")

    with pytest.raises(RuntimeError) as info:
        await run_with_error_effect_async(action, aboom)

    assert isinstance(info.value.__cause__, IllegalStateError)


@pytest.mark.asyncio
async def test_async_builders(recorder: Recorder) -> None:
    on_ok = build_success_effect_async(recorder)
    on_ok_mapped = build_success_effect_mapped_async(str, recorder)
    on_err = build_error_effect_async(lambda e: recorder(str(e)))
    on_any = build_outcome_effect_async(lambda o: recorder("ok" if isinstance(o, Ok) else "err"))

    assert await on_ok(three) == 3
    assert await on_ok_mapped(three) == 3
    with pytest.raises(IllegalStateError):
        await on_err(aboom)
    assert await on_any(three) == 3

    assert recorder.calls == [3, "3", "boom", "ok"]


async def sleeper() -> int:
    await asyncio.sleep(10)
    return 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "combinator",
    [run_with_success_effect_async, run_with_error_effect_async, run_with_outcome_effect_async],
)
async def test_cancellation_skips_every_action(combinator, recorder: Recorder) -> None:
    task = asyncio.create_task(combinator(recorder, sleeper))
    await asyncio.sleep(0)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    assert task.cancelled()
    assert recorder.calls == []


@pytest.mark.asyncio
async def test_failing_async_action_raising_from_none_keeps_suppression() -> None:
    async def action(_: object) -> None:
        raise RuntimeError("observer broke") from None

    with pytest.raises(RuntimeError) as info:
        await run_with_outcome_effect_async(action, aboom)

    assert info.value.__cause__ is None
