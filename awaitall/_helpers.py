"""Internal helpers for awaitall.

Common functions used across multiple modules.
These are not part of the public API but can be used for custom joinM wrappers."""

from __future__ import annotations

import typing

from .handle import TaskHandle

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def settled_count(handles: typing.Iterable[TaskHandle[typing.Any]]) -> int:
    """How many of the handles are already terminal."""
    return sum(1 for h in handles if h.done())

__all__ = (
    "identity",
    "settled_count",
)
