"""
Подъем значений и корутин в TaskHandle.

Constructors for handles: already-terminal ones for known values/errors,
and spawned ones backed by a single asyncio task.
"""

from __future__ import annotations

import asyncio
import inspect
import typing
from collections.abc import Awaitable, Callable, Coroutine

from ..handle import TaskHandle


def succeeded[T](value: T, *, name: str | None = None) -> TaskHandle[T]:
    """
    Already-succeeded handle.

    Example:
        h = L.up.succeeded(42)
        h.outcome()  # 42
    """
    handle: TaskHandle[T] = TaskHandle(name=name)
    handle.resolve(value)
    return handle


def failed(error: BaseException, *, name: str | None = None) -> TaskHandle[typing.Never]:
    """
    Already-failed handle. Dual of succeeded().

    NOTE: Never в типе значения - такой handle никогда не даст значение.
    """
    handle: TaskHandle[typing.Never] = TaskHandle(name=name)
    handle.reject(error)
    return handle


def _settle[T](handle: TaskHandle[T], task: asyncio.Future[T]) -> None:
    if task.cancelled():
        handle.reject(asyncio.CancelledError())
        return
    exc = task.exception()
    if exc is not None:
        handle.reject(exc)
    else:
        handle.resolve(task.result())


def _from_future[T](future: Awaitable[T], name: str | None) -> TaskHandle[T]:
    task = asyncio.ensure_future(future)
    handle: TaskHandle[T] = TaskHandle(name=name, loop=task.get_loop())
    task.add_done_callback(lambda t: _settle(handle, t))
    return handle


def spawn[T, **P](
    func: Callable[P, Coroutine[typing.Any, typing.Any, T]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> TaskHandle[T]:
    """
    Start func(*args, **kwargs) once as an asyncio task, observe it via a handle.

    The coroutine runs exactly once no matter how many joins subscribe:
    its outcome is memoized in the handle.

    Example:
        h = L.up.spawn(fetch_user, 42)
        users = await join_sequence([h, h])  # fetch_user ran once
    """
    return _from_future(func(*args, **kwargs), getattr(func, "__qualname__", None))


def is_pending(obj: object) -> bool:
    """Whether obj can be a join child: a TaskHandle or anything awaitable."""
    return isinstance(obj, TaskHandle) or inspect.isawaitable(obj)


def of[T](pending: TaskHandle[T] | Awaitable[T], *, name: str | None = None) -> TaskHandle[T]:
    """
    Normalize a join child into a TaskHandle.

    Handles pass through unchanged (sharing, not copying). Coroutines,
    futures and tasks are scheduled once.
    """
    if isinstance(pending, TaskHandle):
        return pending
    if not is_pending(pending):
        raise TypeError(f"Expected TaskHandle or awaitable, got {type(pending).__name__}")
    return _from_future(pending, name)


__all__ = (
    "succeeded",
    "failed",
    "spawn",
    "of",
    "is_pending",
)
