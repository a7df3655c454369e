"""
Result extraction
=================

Walk the registry in canonical order after the join completed.
"""

from __future__ import annotations

import typing

from .._errors import ContractViolation
from ..registry import Registry


def extract(registry: Registry) -> typing.Any:
    """
    Assemble the shaped container or raise the first failure.

    The failure raised is the first one in canonical order (insertion /
    index / position), NOT the first one to complete in wall-clock time.
    Ошибка пробрасывается как есть, без обёрток.
    """
    values: list[typing.Any] = []
    for slot, handle in registry:
        if not handle.done():
            raise ContractViolation(f"extract() before join completed: {slot} is pending")
        values.append(handle.outcome())
    return registry.assemble(values)


__all__ = ("extract",)
