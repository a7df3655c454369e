from __future__ import annotations

import asyncio


class Boom(Exception):
    """Marker failure for child handles."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(label)


async def ticks(n: int = 5) -> None:
    """Let the loop run n rounds of scheduled callbacks."""
    for _ in range(n):
        await asyncio.sleep(0)
