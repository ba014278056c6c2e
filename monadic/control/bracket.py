"""
Bracket combinators
===================

Комбинаторы для resource management: acquire → use → release.
Release runs on every exit path of the deferred computation; a fault raised
by release itself is not hidden.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import close_resource
from ..core.apply import Chain

type TryFinally = Callable[[typing.Any, Callable[[], None]], typing.Any]
type Delay = Callable[[Callable[[], typing.Any]], typing.Any]


# ============================================================================
# Generic combinators (chain + try_finally pattern)
# ============================================================================


def bracketM[T](
    acquire: typing.Any,
    *,
    use: Callable[[T], typing.Any],
    release: Callable[[T], None],
    chain: Chain,
    delay: Delay,
    try_finally: TryFinally,
) -> typing.Any:
    """
    Generic bracket combinator.

    The resource produced by `acquire` is released after `use`, even if
    `use` fails or raises while building its computation.
    """

    def with_resource(resource: T) -> typing.Any:
        def finalizer() -> None:
            release(resource)

        return try_finally(delay(lambda: use(resource)), finalizer)

    return chain(acquire, with_resource)


def usingM[T](
    resource: T,
    body: Callable[[T], typing.Any],
    *,
    delay: Delay,
    try_finally: TryFinally,
) -> typing.Any:
    """Scoped use of an already-acquired resource; `close()` is called on exit."""

    def finalizer() -> None:
        close_resource(resource)

    return try_finally(delay(lambda: body(resource)), finalizer)


__all__ = ("bracketM", "usingM")
