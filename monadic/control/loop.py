"""
Loop combinators
================

while/for/when over wrap + chain. Для отложенных видов (State, Reader,
Writer, Cont) следующий раунд строится во время run и стек Python не
растёт. Eager kinds (Option, Result, Validation, Distribution) call the
continuation inside chain(), so their rounds are unrolled in a loop.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from ..collection.fold import foldM
from ..core.apply import Chain, Wrap


def whenM(condition: bool, m: typing.Any, *, wrap: Wrap) -> typing.Any:
    """Run m only when condition holds, otherwise wrap(None)."""
    return m if condition else wrap(None)


def while_M(
    guard: Callable[[], bool],
    body: typing.Any,
    *,
    wrap: Wrap,
    chain: Chain,
) -> typing.Any:
    """Repeat body while guard() is true. guard is re-checked before each round.

    If chain() resumes synchronously (an eager kind), the resumption only
    marks that another round is due and the rounds are chained iteratively.
    A deferred kind resumes later, at run time, and builds the next round then.
    """
    if not guard():
        return wrap(None)

    building = True
    resumed = False

    def again(_: typing.Any) -> typing.Any:
        nonlocal resumed
        if building:
            resumed = True
            return wrap(None)
        return while_M(guard, body, wrap=wrap, chain=chain)

    def next_round(_: typing.Any) -> typing.Any:
        return chain(body, again)

    acc = chain(body, again)
    while resumed:
        resumed = False
        if not guard():
            break
        acc = chain(acc, next_round)
    building = False
    return acc


def for_eachM[A](
    items: Iterable[A],
    body: Callable[[A], typing.Any],
    *,
    wrap: Wrap,
    chain: Chain,
) -> typing.Any:
    """Run body for every item in order, discarding the values.

    Built on foldM, so the chain is left-nested and never recursive.
    """

    def visit(_: typing.Any, item: A) -> typing.Any:
        return body(item)

    def discard(_: typing.Any) -> typing.Any:
        return wrap(None)

    return chain(foldM(items, visit, initial=None, wrap=wrap, chain=chain), discard)


__all__ = ("for_eachM", "whenM", "while_M")
