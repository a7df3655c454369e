"""
Join combinators
================

Комбинаторы await-all с extract + wrap паттерном.

Layers:
- joinM              - generic, works with any wrapper via combine_ok/combine_err + wrap
- join_map / join_sequence / join_tuple - plain awaitables, child failure is raised
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Mapping

from .._types import Pending, Thunk
from ..handle import TaskHandle
from ..registry import Registry, from_mapping, from_sequence, from_tuple
from .engine import await_all
from .extract import extract


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def joinM[M, RawOut](
    registry: Registry,
    *,
    combine_ok: Callable[[typing.Any], RawOut],
    combine_err: Callable[[Exception], RawOut],
    wrap: Callable[[Thunk[RawOut]], M],
) -> M:
    """
    Generic await-all combinator.

    Waits for every child in registry to be terminal, then extracts.

    Args:
        registry: Children in canonical order (built by an adapter)
        combine_ok: Turns the assembled container into RawOut
        combine_err: Turns the first failure (canonical order) into RawOut
        wrap: Constructor to wrap thunk back into M
    """

    async def run() -> RawOut:
        if registry:
            await await_all(registry)
        try:
            assembled = extract(registry)
        except Exception as exc:
            return combine_err(exc)
        return combine_ok(assembled)

    return wrap(run)


# ============================================================================
# Plain awaitables
# ============================================================================


async def _join(registry: Registry) -> typing.Any:
    # Zero children: no await at all, the coroutine finishes on first send().
    if registry:
        await await_all(registry)
    return extract(registry)


async def join_map[K, V](children: Mapping[K, Pending[V]]) -> dict[K, V]:
    """
    Await every value of the mapping, return dict with the same keys.

    Example:
        users = await join_map({"alice": fetch("alice"), "bob": fetch("bob")})
    """
    return await _join(from_mapping(children))


async def join_sequence[V](children: Iterable[Pending[V]]) -> list[V]:
    """
    Await every element, return list in input order.

    Example:
        await join_sequence([succeeded(10), succeeded(20)])  # [10, 20]
    """
    return await _join(from_sequence(children))


@typing.overload
async def join_tuple() -> tuple[()]: ...
@typing.overload
async def join_tuple[A](a: Pending[A], /) -> tuple[A]: ...
@typing.overload
async def join_tuple[A, B](a: Pending[A], b: Pending[B], /) -> tuple[A, B]: ...
@typing.overload
async def join_tuple[A, B, C](
    a: Pending[A], b: Pending[B], c: Pending[C], /
) -> tuple[A, B, C]: ...
@typing.overload
async def join_tuple[A, B, C, D](
    a: Pending[A], b: Pending[B], c: Pending[C], d: Pending[D], /
) -> tuple[A, B, C, D]: ...
@typing.overload
async def join_tuple[A, B, C, D, F](
    a: Pending[A], b: Pending[B], c: Pending[C], d: Pending[D], f: Pending[F], /
) -> tuple[A, B, C, D, F]: ...
async def join_tuple(*children: TaskHandle[typing.Any] | typing.Any) -> tuple[typing.Any, ...]:
    """
    Await fixed-arity heterogeneous children, return tuple of matching arity.

    Example:
        n, s = await join_tuple(succeeded(1), succeeded("x"))  # (1, "x")
    """
    return await _join(from_tuple(*children))


__all__ = ("joinM", "join_map", "join_sequence", "join_tuple")
