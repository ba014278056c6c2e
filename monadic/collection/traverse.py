"""Traverse combinators

Applicative traverse/sequence with wrap + fmap + ap pattern.
Built on lift2, so a kind with an accumulating `ap` (Validation)
collects every failure instead of stopping at the first.
Values are pushed onto a persistent stack and unwound into a list once."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._helpers import push, unwind
from ..core.apply import Ap, Fmap, Wrap, lift2M


# Generic combinators (wrap + fmap + ap pattern)
def traverseM[A](
    items: Iterable[A],
    handler: Callable[[A], typing.Any],
    *,
    wrap: Wrap,
    fmap: Fmap,
    ap: Ap,
) -> typing.Any:
    """Apply handler to every item, collect the values in input order."""
    acc = wrap(None)
    for item in items:
        acc = lift2M(push, acc, handler(item), fmap=fmap, ap=ap)
    return fmap(acc, unwind)


def sequenceM(
    computations: Iterable[typing.Any],
    *,
    wrap: Wrap,
    fmap: Fmap,
    ap: Ap,
) -> typing.Any:
    """Turn a sequence of computations into a computation of a list."""
    acc = wrap(None)
    for m in computations:
        acc = lift2M(push, acc, m, fmap=fmap, ap=ap)
    return fmap(acc, unwind)


__all__ = ("sequenceM", "traverseM")
