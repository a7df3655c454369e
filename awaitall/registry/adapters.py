"""
Structural adapters
===================

mapping / sequence / tuple -> Registry.

Children may be TaskHandles or raw awaitables; raw ones are spawned via
lift.up.of, handles are shared as-is. Every child is checked before the
first one is spawned, so a bad input leaves nothing running.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Mapping, Sequence

from .._types import Pending
from ..handle import TaskHandle
from ..lift.up import is_pending, of
from .slots import Index, Key, Position, Registry, Shape


def _spawn_all(children: Sequence[Pending[typing.Any]]) -> list[TaskHandle[typing.Any]]:
    for position, child in enumerate(children):
        if not is_pending(child):
            raise TypeError(
                f"Join child #{position} must be a TaskHandle or awaitable, "
                f"got {type(child).__name__}"
            )
    return [of(child) for child in children]


def from_mapping[K](children: Mapping[K, Pending[typing.Any]]) -> Registry:
    """Insertion order of the mapping becomes canonical order."""
    keys = list(children)
    handles = _spawn_all([children[key] for key in keys])
    return Registry(Shape.MAP, tuple((Key(key), h) for key, h in zip(keys, handles)))


def from_sequence(children: Iterable[Pending[typing.Any]]) -> Registry:
    """Index order becomes canonical order."""
    handles = _spawn_all(list(children))
    return Registry(Shape.SEQUENCE, tuple((Index(i), h) for i, h in enumerate(handles)))


def from_tuple(*children: Pending[typing.Any]) -> Registry:
    """Declaration order becomes canonical order."""
    handles = _spawn_all(children)
    return Registry(Shape.TUPLE, tuple((Position(p), h) for p, h in enumerate(handles)))


__all__ = ("from_mapping", "from_sequence", "from_tuple")
