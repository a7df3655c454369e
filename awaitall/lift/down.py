"""
Опускание pending вычисления в значение.

Functions for running a pending computation and getting the outcome as
Result, as a value, or from synchronous code.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine

from kungfu import Error, Ok, Result

from .._types import Pending
from .up import of


async def to_result[T](pending: Pending[T]) -> Result[T, Exception]:
    """
    Await and return Result instead of raising.

    Example:
        from awaitall import lift as L

        result = await L.down.to_result(join_sequence([h1, h2]))
        # Ok([...]) or Error(exc)
    """
    try:
        return Ok(await of(pending))
    except Exception as exc:
        return Error(exc)


async def unsafe[T](pending: Pending[T]) -> T:
    """
    Await and return value, raises on failure.

    NOTE: Равносильно простому await, нужен для симметрии с to_result.
    """
    return await of(pending)


async def or_else[T](pending: Pending[T], default: T) -> T:
    """Await and return value or default on failure."""
    result = await to_result(pending)
    match result:
        case Ok(v):
            return v
        case Error(_):
            return default


def block[T, **P](
    func: Callable[P, Coroutine[typing.Any, typing.Any, T]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> T:
    """
    Drive a pending computation to completion from synchronous code.

    Top-level join: starts a fresh event loop, runs func(*args, **kwargs),
    returns its value or raises its failure. Must not be called from inside
    a running loop.

    Example:
        from awaitall import lift as L

        values = L.down.block(join_sequence, [fetch(1), fetch(2)])
    """
    async def run() -> T:
        return await func(*args, **kwargs)

    return asyncio.run(run())


__all__ = (
    "to_result",
    "unsafe",
    "or_else",
    "block",
)
