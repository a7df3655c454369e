"""
Result sugar
============

join_* for kungfu LazyCoroResult: failure of a child becomes Error(exc)
instead of a raise. Ленивые: ничего не запускается до await.

    from awaitall import result as R

    match await R.join_map({"a": fetch("a"), "b": fetch("b")}):
        case Ok(users): ...
        case Error(exc): ...
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Mapping

from kungfu import Error, LazyCoroResult, Ok, Result

from ._helpers import identity
from ._types import LCR, Pending
from .join import joinM
from .registry import Registry, from_mapping, from_sequence, from_tuple


def _lazy_join[T](build: typing.Callable[[], Registry]) -> LCR[T]:
    def combine_ok(assembled: T) -> Result[T, Exception]:
        return Ok(assembled)

    def combine_err(exc: Exception) -> Result[T, Exception]:
        return Error(exc)

    built: list[Registry] = []

    async def run() -> Result[T, Exception]:
        # Registry is built once, on first await, so coroutines are spawned
        # inside the loop and later awaits observe the same memoized handles.
        if not built:
            built.append(build())
        thunk = joinM(
            built[0],
            combine_ok=combine_ok,
            combine_err=combine_err,
            wrap=identity,
        )
        return await thunk()

    return LazyCoroResult(run)


def join_map[K, V](children: Mapping[K, Pending[V]]) -> LCR[dict[K, V]]:
    """Await every value of the mapping; Ok(dict) or first Error in insertion order."""
    return _lazy_join(lambda: from_mapping(children))


def join_sequence[V](children: Iterable[Pending[V]]) -> LCR[list[V]]:
    """Await every element; Ok(list) or first Error in index order."""
    items = list(children)
    return _lazy_join(lambda: from_sequence(items))


def join_tuple(*children: Pending[typing.Any]) -> LCR[tuple[typing.Any, ...]]:
    """Await fixed-arity children; Ok(tuple) or first Error in position order."""
    return _lazy_join(lambda: from_tuple(*children))


__all__ = ("join_map", "join_sequence", "join_tuple")
