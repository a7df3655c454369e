"""
Join engine
===========

One parent handle that fires after every child is terminal.

Считаем завершение, а не успех: упавший ребёнок не отменяет соседей,
все дети доходят до конца.
"""

from __future__ import annotations

import logging
import typing

from .._helpers import settled_count
from ..handle import TaskHandle
from ..registry import Registry

logger = logging.getLogger(__name__)


class JoinNode:
    """Countdown over a registry. Lives until its single completion."""

    __slots__ = ("remaining", "registry", "parent")

    def __init__(self, registry: Registry, parent: TaskHandle[None]) -> None:
        self.remaining = len(registry)
        self.registry: Registry | None = registry
        self.parent = parent

    def start(self) -> None:
        if self.registry is None:
            raise RuntimeError("JoinNode.start() called twice")
        registry = self.registry
        if not registry:
            self._finish()
            return
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "join over %d children started, %d already terminal",
                self.remaining,
                settled_count(registry.handles),
            )
        for _, handle in registry:
            handle.subscribe(self._on_child_terminal)

    def _on_child_terminal(self, child: TaskHandle[typing.Any]) -> None:
        # Single-threaded loop: only one continuation runs at a time.
        self.remaining -= 1
        logger.debug("%r terminal, %d remaining", child, self.remaining)
        if self.remaining == 0:
            self._finish()

    def _finish(self) -> None:
        self.registry = None
        logger.debug("join complete")
        self.parent.resolve(None)


def await_all(registry: Registry) -> TaskHandle[None]:
    """
    Parent handle that succeeds once every child in registry is terminal.

    Never fails by itself. Empty registry gives an already-terminal parent.
    A child that never settles keeps the parent pending forever.
    """
    parent: TaskHandle[None] = TaskHandle(name="await_all")
    JoinNode(registry, parent).start()
    return parent


__all__ = ("JoinNode", "await_all")
