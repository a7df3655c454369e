"""Delay handles

Handles that settle after a timer. Удобно для сценариев, где важен
порядок завершения детей."""

from __future__ import annotations

import asyncio
import typing

from ..handle import TaskHandle

def delay[T](seconds: float, value: T, *, name: str | None = None) -> TaskHandle[T]:
    """Handle that succeeds with value after seconds."""
    loop = asyncio.get_running_loop()
    handle: TaskHandle[T] = TaskHandle(name=name, loop=loop)
    loop.call_later(seconds, handle.resolve, value)
    return handle

def delay_fail(
    seconds: float,
    error: BaseException,
    *,
    name: str | None = None,
) -> TaskHandle[typing.Never]:
    """Handle that fails with error after seconds."""
    loop = asyncio.get_running_loop()
    handle: TaskHandle[typing.Never] = TaskHandle(name=name, loop=loop)
    loop.call_later(seconds, handle.reject, error)
    return handle

__all__ = ("delay", "delay_fail")
