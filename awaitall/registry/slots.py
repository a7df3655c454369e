"""
Registry
========

Ordered (slot, handle) pairs. Порядок фиксируется при построении и дальше
используется как канонический порядок извлечения результатов.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from ..handle import TaskHandle


@dataclass(frozen=True, slots=True)
class Key:
    """Mapping slot."""

    key: typing.Any


@dataclass(frozen=True, slots=True)
class Index:
    """Sequence slot, 0-based."""

    index: int


@dataclass(frozen=True, slots=True)
class Position:
    """Tuple slot, fixed arity."""

    position: int


type Slot = Key | Index | Position


class Shape(enum.Enum):
    """Output container the registry assembles into."""

    MAP = "map"
    SEQUENCE = "sequence"
    TUPLE = "tuple"


@dataclass(frozen=True, slots=True)
class Registry:
    """
    Tagged container of children.

    One engine serves every shape: only assemble() looks at the tag.
    """

    shape: Shape
    entries: tuple[tuple[Slot, TaskHandle[typing.Any]], ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __iter__(self) -> Iterator[tuple[Slot, TaskHandle[typing.Any]]]:
        return iter(self.entries)

    @property
    def handles(self) -> tuple[TaskHandle[typing.Any], ...]:
        return tuple(handle for _, handle in self.entries)

    def assemble(self, values: Sequence[typing.Any]) -> typing.Any:
        """Build the output container from values given in canonical order."""
        if len(values) != len(self.entries):
            raise ValueError(
                f"Registry has {len(self.entries)} slots, got {len(values)} values"
            )
        match self.shape:
            case Shape.MAP:
                return {
                    typing.cast(Key, slot).key: value
                    for (slot, _), value in zip(self.entries, values)
                }
            case Shape.SEQUENCE:
                return list(values)
            case Shape.TUPLE:
                return tuple(values)


__all__ = (
    "Key",
    "Index",
    "Position",
    "Slot",
    "Shape",
    "Registry",
)
