from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(slots=True)
class FakeBackend:
    name: str
    delay_seconds: float = 0.0
    broken: bool = False
    calls: int = 0

    async def fetch_price(self, symbol: str) -> float:
        self.calls += 1
        await asyncio.sleep(self.delay_seconds)
        if self.broken:
            raise Failure(f"{self.name}: unavailable")
        return float(len(symbol) * 10)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
