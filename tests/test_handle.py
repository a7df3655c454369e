from __future__ import annotations

import asyncio

import pytest
from kungfu import Error, Ok

from awaitall import ContractViolation, State, TaskHandle
from awaitall import lift as L

from helpers import Boom, ticks


def test_new_handle_is_pending() -> None:
    handle: TaskHandle[int] = TaskHandle(name="h")
    assert handle.poll() is State.PENDING
    assert not handle.done()
    assert "pending" in repr(handle)


def test_outcome_while_pending_is_contract_violation() -> None:
    handle: TaskHandle[int] = TaskHandle()
    with pytest.raises(ContractViolation):
        handle.outcome()


def test_resolve_then_outcome() -> None:
    handle = L.up.succeeded(7)
    assert handle.poll() is State.SUCCEEDED
    assert handle.outcome() == 7


def test_reject_reraises_same_error() -> None:
    error = Boom("e")
    handle = L.up.failed(error)
    assert handle.poll() is State.FAILED
    with pytest.raises(Boom) as caught:
        handle.outcome()
    assert caught.value is error


def test_second_transition_is_contract_violation() -> None:
    handle = L.up.succeeded(1)
    with pytest.raises(ContractViolation):
        handle.resolve(2)
    with pytest.raises(ContractViolation):
        handle.reject(Boom("late"))
    assert handle.outcome() == 1


def test_reject_requires_exception() -> None:
    handle: TaskHandle[int] = TaskHandle()
    with pytest.raises(TypeError):
        handle.reject("not an exception")  # type: ignore[arg-type]
    assert handle.poll() is State.PENDING


def test_result_as_kungfu_result() -> None:
    match L.up.succeeded(3).result():
        case Ok(v):
            assert v == 3
        case Error(e):
            pytest.fail(f"unexpected error {e!r}")

    error = Boom("x")
    match L.up.failed(error).result():
        case Ok(v):
            pytest.fail(f"unexpected value {v!r}")
        case Error(e):
            assert e is error


@pytest.mark.asyncio
async def test_continuations_fire_in_subscription_order_via_scheduler() -> None:
    handle: TaskHandle[str] = TaskHandle()
    fired: list[tuple[str, str]] = []

    handle.subscribe(lambda h: fired.append(("first", h.outcome())))
    handle.subscribe(lambda h: fired.append(("second", h.outcome())))
    handle.subscribe(lambda h: fired.append(("third", h.outcome())))

    handle.resolve("v")
    # Never invoked synchronously by resolve()
    assert fired == []

    await ticks()
    assert fired == [("first", "v"), ("second", "v"), ("third", "v")]


@pytest.mark.asyncio
async def test_subscribe_to_terminal_handle_still_goes_through_scheduler() -> None:
    handle = L.up.succeeded(1)
    fired: list[int] = []

    handle.subscribe(lambda h: fired.append(h.outcome()))
    assert fired == []

    await ticks()
    assert fired == [1]


@pytest.mark.asyncio
async def test_each_continuation_fires_exactly_once() -> None:
    handle: TaskHandle[int] = TaskHandle()
    calls: list[int] = []
    handle.subscribe(lambda h: calls.append(1))

    handle.resolve(1)
    await ticks()
    with pytest.raises(ContractViolation):
        handle.resolve(2)
    await ticks()

    assert calls == [1]


@pytest.mark.asyncio
async def test_await_handle_suspends_until_terminal() -> None:
    handle: TaskHandle[int] = TaskHandle()
    loop = asyncio.get_running_loop()
    loop.call_later(0.01, handle.resolve, 99)

    assert await handle == 99


@pytest.mark.asyncio
async def test_await_failed_handle_raises() -> None:
    handle: TaskHandle[int] = TaskHandle()
    asyncio.get_running_loop().call_soon(handle.reject, Boom("late"))

    with pytest.raises(Boom):
        await handle


@pytest.mark.asyncio
async def test_spawn_runs_side_effect_once() -> None:
    runs: list[int] = []

    async def work(n: int) -> int:
        runs.append(n)
        await asyncio.sleep(0)
        return n * 2

    handle = L.up.spawn(work, 21)
    assert await handle == 42
    assert await handle == 42
    assert runs == [21]


@pytest.mark.asyncio
async def test_spawn_failure_is_memoized() -> None:
    async def explode() -> int:
        raise Boom("spawned")

    handle = L.up.spawn(explode)
    with pytest.raises(Boom) as first:
        await handle
    with pytest.raises(Boom) as second:
        await handle
    assert first.value is second.value
    assert handle.poll() is State.FAILED


@pytest.mark.asyncio
async def test_cancelled_task_settles_as_failed() -> None:
    task = asyncio.ensure_future(asyncio.sleep(10))
    handle = L.up.of(task)
    task.cancel()
    await ticks()

    assert handle.poll() is State.FAILED
    with pytest.raises(asyncio.CancelledError):
        handle.outcome()


@pytest.mark.asyncio
async def test_of_passes_handles_through() -> None:
    handle = L.up.succeeded(1)
    assert L.up.of(handle) is handle


def test_of_rejects_non_awaitables() -> None:
    with pytest.raises(TypeError):
        L.up.of(123)  # type: ignore[arg-type]
