"""
Lift helpers with semantic namespaces.

    from awaitall import lift as L

Architecture:
- L.up.*    - подъем значений и корутин в TaskHandle
- L.down.*  - опускание pending вычисления в значение

Examples:
    from awaitall import lift as L

    h = L.up.succeeded(42)
    e = L.up.failed(ValueError("boom"))
    s = L.up.spawn(fetch_user, 42)

    result = await L.down.to_result(join_sequence([h, s]))
    values = L.down.block(join_sequence, [h, s])
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

from .up import failed, is_pending, of, spawn, succeeded
from .down import block, or_else, to_result, unsafe

# L.up.* / L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "succeeded",
    "failed",
    "spawn",
    "of",
    "is_pending",
    # Down
    "to_result",
    "unsafe",
    "or_else",
    "block",
)
