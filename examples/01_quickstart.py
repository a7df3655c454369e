from __future__ import annotations

from _infra import Failure, FakeBackend, banner, run

from awaitall import join_map, join_sequence, join_tuple, timeout
from awaitall import lift as L
from awaitall import result as R


async def main() -> None:
    fast = FakeBackend("fast", delay_seconds=0.01)
    slow = FakeBackend("slow", delay_seconds=0.05)
    broken = FakeBackend("broken", broken=True)

    banner("join_sequence: order of input, not of completion")
    prices = await join_sequence([slow.fetch_price("AAPL"), fast.fetch_price("GOOG")])
    print(prices)

    banner("join_map: same keys back")
    by_symbol = await join_map({s: fast.fetch_price(s) for s in ("MSFT", "NVDA", "X")})
    print(by_symbol)

    banner("join_tuple: heterogeneous")
    price, echo = await join_tuple(fast.fetch_price("IBM"), L.up.succeeded("ok"))
    print(price, echo)

    banner("shared handle: one call, two joins")
    shared = L.up.spawn(slow.fetch_price, "TSLA")
    print(await join_sequence([shared]), await join_map({"t": shared}), "calls:", slow.calls)

    banner("failure: first in input order wins")
    try:
        await join_sequence([broken.fetch_price("A"), fast.fetch_price("B")])
    except Failure as exc:
        print("failed:", exc)

    banner("Result sugar")
    print(await R.join_map({"a": broken.fetch_price("A")})())

    banner("timeout layered on top")
    print(await timeout(join_sequence([fast.fetch_price("Q")]), seconds=1.0))


if __name__ == "__main__":
    run(main)
