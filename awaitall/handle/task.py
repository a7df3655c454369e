"""
TaskHandle
==========

Single pending/terminal asynchronous computation.

Capability used by the join engine:
- poll()        - current state, never blocks
- subscribe(fn) - fn(handle) is scheduled on the loop once terminal
- outcome()     - value or re-raised error, only once terminal

Continuations are never run synchronously by resolve()/reject(): they are
handed to the event loop via call_soon, in subscription order.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Generator

from kungfu import Error, Ok, Result

from .._errors import ContractViolation
from .._types import Continuation
from .state import State

logger = logging.getLogger(__name__)


class TaskHandle[T]:
    """Memoized pending computation shared by any number of subscribers."""

    __slots__ = ("_state", "_value", "_error", "_subscribers", "_loop", "name")

    def __init__(
        self,
        *,
        name: str | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._state = State.PENDING
        self._value: T | None = None
        self._error: BaseException | None = None
        self._subscribers: list[Continuation[T]] = []
        self._loop = loop
        self.name = name

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name is not None else ""
        return f"<TaskHandle{label} {self._state.value}>"

    # Observation

    def poll(self) -> State:
        return self._state

    def done(self) -> bool:
        return self._state.is_terminal

    def subscribe(self, continuation: Continuation[T], /) -> None:
        """
        Register continuation to fire once this handle is terminal.

        Multiple subscribers are allowed. Subscribing to an already terminal
        handle still goes through the scheduler, never inline: the loop running
        now, so a memoized handle can be observed from any later loop.
        """
        if self._state.is_terminal:
            asyncio.get_running_loop().call_soon(continuation, self)
        else:
            self._subscribers.append(continuation)

    def outcome(self) -> T:
        """Return the success value or re-raise the stored failure."""
        match self._state:
            case State.SUCCEEDED:
                return typing.cast(T, self._value)
            case State.FAILED:
                assert self._error is not None
                raise self._error
            case State.PENDING:
                raise ContractViolation(f"outcome() called on pending {self!r}")

    def result(self) -> Result[T, BaseException]:
        """Terminal outcome as kungfu Result."""
        try:
            return Ok(self.outcome())
        except ContractViolation:
            raise
        except BaseException as exc:
            return Error(exc)

    # Transition

    def resolve(self, value: T, /) -> None:
        self._transition(State.SUCCEEDED)
        self._value = value
        self._notify()

    def reject(self, error: BaseException, /) -> None:
        if not isinstance(error, BaseException):
            raise TypeError(f"reject() expects an exception, got {type(error).__name__}")
        self._transition(State.FAILED)
        self._error = error
        logger.debug("%r failed with %r", self, error)
        self._notify()

    def _transition(self, target: State) -> None:
        if self._state.is_terminal:
            raise ContractViolation(
                f"{self!r} is already terminal, cannot move to {target.value}"
            )
        self._state = target

    def _notify(self) -> None:
        subscribers, self._subscribers = self._subscribers, []
        if not subscribers:
            return
        loop = self._scheduler()
        for continuation in subscribers:
            loop.call_soon(continuation, self)

    def _scheduler(self) -> asyncio.AbstractEventLoop:
        # Used only while pending; terminal handles schedule on the running loop.
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    # Suspension primitive

    def __await__(self) -> Generator[typing.Any, None, T]:
        if not self._state.is_terminal:
            waiter: asyncio.Future[None] = self._scheduler().create_future()

            def wake(_: TaskHandle[T]) -> None:
                if not waiter.done():
                    waiter.set_result(None)

            self.subscribe(wake)
            yield from waiter.__await__()
        return self.outcome()


__all__ = ("TaskHandle",)
