"""
Core type definitions for awaitall.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine

from kungfu import LazyCoroResult

if typing.TYPE_CHECKING:
    from .handle import TaskHandle

# ============================================================================
# Type aliases
# ============================================================================

# Continuation = callback fired by the scheduler once a handle is terminal
type Continuation[T] = Callable[[TaskHandle[T]], None]

# Thunk = zero-arg callable producing a coroutine (lazy computation)
type Thunk[T] = Callable[[], Coroutine[typing.Any, typing.Any, T]]

# Pending = anything a join accepts as a child: handle, coroutine, future, task
type Pending[T] = TaskHandle[T] | Awaitable[T]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
# NOTE: error channel of the result sugar is always Exception,
#       потому что дети падают обычными исключениями.
type LCR[T] = LazyCoroResult[T, Exception]

__all__ = (
    "Continuation",
    "Thunk",
    "Pending",
    "LCR",
)
