"""
awaitall: await-all task combinators for asyncio.

Take a mapping, sequence or fixed-arity tuple of pending computations and
wait until every one of them is terminal, then either return a container of
the same shape or raise the first failure in input order.

Architecture:
- TaskHandle: memoized pending computation (poll / subscribe / outcome)
- Registry adapters: mapping / sequence / tuple -> ordered (slot, handle) pairs
- Join engine: one parent handle that fires once every child is terminal
- Extractor: canonical-order walk, first failure wins
- Generic joinM (extract + wrap), plain join_*, Result sugar (awaitall.result)
"""

# Core types
from ._types import LCR, Continuation, Pending, Thunk

# Internal helpers (for custom wrappers)
from . import _helpers

# Handles
from .handle import State, TaskHandle

# Registry
from .registry import (
    Index,
    Key,
    Position,
    Registry,
    Shape,
    Slot,
    from_mapping,
    from_sequence,
    from_tuple,
)

# Join
from .join import (
    JoinNode,
    await_all,
    extract,
    # Plain
    join_map,
    join_sequence,
    join_tuple,
    # Generic
    joinM,
)

# Lift helpers (reduce boilerplate)
from . import lift
from .lift import block, failed, of, spawn, succeeded, to_result

# Result sugar (namespace import: from awaitall import result as R)
from . import result

# Time
from .time import TimeoutPolicy, delay, delay_fail, timeout, timeout_with

# Errors
from ._errors import ContractViolation, TimeoutError

__all__ = (
    # Types
    "LCR",
    "Continuation",
    "Pending",
    "Thunk",
    # Internal helpers
    "_helpers",
    # Handles
    "State",
    "TaskHandle",
    # Registry
    "Key",
    "Index",
    "Position",
    "Slot",
    "Shape",
    "Registry",
    "from_mapping",
    "from_sequence",
    "from_tuple",
    # Join
    "JoinNode",
    "await_all",
    "extract",
    "join_map",
    "join_sequence",
    "join_tuple",
    "joinM",
    # Lift
    "lift",
    "succeeded",
    "failed",
    "spawn",
    "of",
    "to_result",
    "block",
    # Result sugar
    "result",
    # Time
    "TimeoutPolicy",
    "delay",
    "delay_fail",
    "timeout",
    "timeout_with",
    # Errors
    "ContractViolation",
    "TimeoutError",
)
