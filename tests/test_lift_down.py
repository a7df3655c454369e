from __future__ import annotations

import asyncio

import pytest
from kungfu import Error, Ok

from awaitall import TaskHandle, join_map, join_sequence, join_tuple
from awaitall import lift as L

from helpers import Boom


@pytest.mark.asyncio
async def test_to_result_ok_and_error() -> None:
    match await L.down.to_result(join_sequence([L.up.succeeded(1)])):
        case Ok(value):
            assert value == [1]
        case Error(e):
            pytest.fail(f"unexpected error {e!r}")

    error = Boom("x")
    match await L.down.to_result(join_map({"k": L.up.failed(error)})):
        case Ok(value):
            pytest.fail(f"unexpected value {value!r}")
        case Error(e):
            assert e is error


@pytest.mark.asyncio
async def test_unsafe_raises() -> None:
    assert await L.down.unsafe(L.up.succeeded(3)) == 3
    with pytest.raises(Boom):
        await L.down.unsafe(L.up.failed(Boom("x")))


@pytest.mark.asyncio
async def test_or_else_default() -> None:
    assert await L.down.or_else(L.up.failed(Boom("x")), default=0) == 0
    assert await L.down.or_else(L.up.succeeded(5), default=0) == 5


def test_block_runs_join_from_sync_code() -> None:
    async def square(n: int) -> int:
        return n * n

    assert L.down.block(join_sequence, [square(2), L.up.succeeded(5)]) == [4, 5]


def test_block_propagates_failure() -> None:
    async def explode() -> int:
        raise Boom("sync")

    with pytest.raises(Boom):
        L.down.block(join_map, {"a": explode()})


def test_block_reuses_memoized_handle_across_loops() -> None:
    shared = L.up.succeeded(5)

    assert L.down.block(join_sequence, [shared]) == [5]
    assert L.down.block(join_sequence, [shared]) == [5]


def test_block_reuses_failed_handle_across_loops() -> None:
    error = Boom("memo")
    shared = L.up.failed(error)

    for _ in range(2):
        with pytest.raises(Boom) as caught:
            L.down.block(join_map, {"k": shared})
        assert caught.value is error


def test_spawned_handle_observed_from_later_loop() -> None:
    async def double(n: int) -> int:
        return n * 2

    async def settle() -> TaskHandle[int]:
        handle = L.up.spawn(double, 4)
        await handle
        return handle

    handle = asyncio.run(settle())
    assert asyncio.run(join_tuple(handle, L.up.succeeded("x"))) == (8, "x")
