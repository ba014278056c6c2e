"""
Applicative combinators
=======================

map, sequential application, lift2/lift3 and discard-left/right sequencing,
written once against wrap + chain.

Порядок вычисления всегда: сначала левый аргумент, потом правый.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import curry2, curry3, keep_left, keep_right

type Wrap = Callable[[typing.Any], typing.Any]
type Chain = Callable[[typing.Any, Callable[[typing.Any], typing.Any]], typing.Any]
type Fmap = Callable[[typing.Any, Callable[[typing.Any], typing.Any]], typing.Any]
type Ap = Callable[[typing.Any, typing.Any], typing.Any]


# ============================================================================
# Generic combinators (wrap + chain pattern)
# ============================================================================


def mapM[A, B](m: typing.Any, f: Callable[[A], B], *, wrap: Wrap, chain: Chain) -> typing.Any:
    """Functor map derived from the monad: chain(m, a -> wrap(f(a)))."""

    def lifted(a: A) -> typing.Any:
        return wrap(f(a))

    return chain(m, lifted)


def applyM(mf: typing.Any, ma: typing.Any, *, wrap: Wrap, chain: Chain) -> typing.Any:
    """
    Sequential application (<*>).

    Runs mf first, then ma, then applies the function to the value.
    """

    def with_function(f: Callable[[typing.Any], typing.Any]) -> typing.Any:
        def with_argument(a: typing.Any) -> typing.Any:
            return wrap(f(a))

        return chain(ma, with_argument)

    return chain(mf, with_function)


def lift2M[A, B, C](
    f: Callable[[A, B], C],
    ma: typing.Any,
    mb: typing.Any,
    *,
    fmap: Fmap,
    ap: Ap,
) -> typing.Any:
    """Lift a binary function: ap(fmap(ma, curry(f)), mb)."""
    return ap(fmap(ma, curry2(f)), mb)


def lift3M[A, B, C, D](
    f: Callable[[A, B, C], D],
    ma: typing.Any,
    mb: typing.Any,
    mc: typing.Any,
    *,
    fmap: Fmap,
    ap: Ap,
) -> typing.Any:
    """Ternary variant of lift2M."""
    return ap(ap(fmap(ma, curry3(f)), mb), mc)


def then_rightM(ma: typing.Any, mb: typing.Any, *, fmap: Fmap, ap: Ap) -> typing.Any:
    """Sequence actions, discarding the value of the first argument (*>)."""
    return lift2M(keep_right, ma, mb, fmap=fmap, ap=ap)


def then_leftM(ma: typing.Any, mb: typing.Any, *, fmap: Fmap, ap: Ap) -> typing.Any:
    """Sequence actions, discarding the value of the second argument (<*)."""
    return lift2M(keep_left, ma, mb, fmap=fmap, ap=ap)


__all__ = (
    "Ap",
    "Chain",
    "Fmap",
    "Wrap",
    "applyM",
    "lift2M",
    "lift3M",
    "mapM",
    "then_leftM",
    "then_rightM",
)
