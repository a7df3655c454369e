"""Timeout

Race a pending computation against a timer handle. Layered on top of the
join: the raced computation is never cancelled, it only stops being waited on."""

from __future__ import annotations

import asyncio
import logging
import typing
from dataclasses import dataclass

from .._errors import TimeoutError
from .._types import Pending
from ..handle import TaskHandle
from ..lift.up import of

logger = logging.getLogger(__name__)

@dataclass(frozen=True, slots=True)
class TimeoutPolicy:
    """Configuration for timeout: how long to wait."""

    seconds: float

    def __post_init__(self) -> None:
        if self.seconds <= 0:
            raise ValueError("TimeoutPolicy.seconds must be positive")

async def timeout_with[T](pending: Pending[T], policy: TimeoutPolicy) -> T:
    """
    Await pending, raise TimeoutError if the timer settles first.

    Both handles are subscribed to one waiter; whichever fires first wins.
    """
    handle = of(pending)
    if handle.done():
        return handle.outcome()

    loop = asyncio.get_running_loop()
    timer: TaskHandle[None] = TaskHandle(name="timer", loop=loop)
    timer_call = loop.call_later(policy.seconds, timer.resolve, None)
    winner: asyncio.Future[TaskHandle[typing.Any]] = loop.create_future()

    def first(h: TaskHandle[typing.Any]) -> None:
        if not winner.done():
            winner.set_result(h)

    handle.subscribe(first)
    timer.subscribe(first)
    try:
        won = await winner
    finally:
        timer_call.cancel()

    if won is timer:
        logger.debug("%r timed out after %ss", handle, policy.seconds)
        raise TimeoutError(policy.seconds)
    return handle.outcome()

async def timeout[T](pending: Pending[T], *, seconds: float) -> T:
    """
    Timeout for any pending computation.

    Fail with TimeoutError if it takes too long. Children keep running.

    Example:
        users = await timeout(join_sequence(handles), seconds=2.0)
    """
    return await timeout_with(pending, TimeoutPolicy(seconds))

__all__ = ("TimeoutPolicy", "timeout", "timeout_with")
