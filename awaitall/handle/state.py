"""
Handle states
=============

Pending -> Succeeded | Failed. Переход ровно один, обратно нельзя.
"""

from __future__ import annotations

import enum


class State(enum.Enum):
    """Observable state of a TaskHandle."""

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not State.PENDING


__all__ = ("State",)
