"""Kleisli composition and chain-derived sequencing."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import identity
from .._types import Kleisli
from .apply import Chain


def kleisliM[A, B](
    f: Kleisli[A, typing.Any],
    g: Kleisli[B, typing.Any],
    *,
    chain: Chain,
) -> Kleisli[A, typing.Any]:
    """Left-to-right Kleisli composition (f >=> g)."""

    def composed(x: A) -> typing.Any:
        return chain(f(x), g)

    return composed


def kleisli_backM[A, B](
    g: Callable[[B], typing.Any],
    f: Callable[[A], typing.Any],
    *,
    chain: Chain,
) -> Callable[[A], typing.Any]:
    """Right-to-left Kleisli composition (g <=< f): f runs first."""
    return kleisliM(f, g, chain=chain)


def thenM(ma: typing.Any, mb: typing.Any, *, chain: Chain) -> typing.Any:
    """Sequence via chain, discarding the value of the first computation (>>.)."""

    def ignore(_: typing.Any) -> typing.Any:
        return mb

    return chain(ma, ignore)


def joinM(mm: typing.Any, *, chain: Chain) -> typing.Any:
    """Flatten one level of nesting: chain(mm, identity)."""
    return chain(mm, identity)


__all__ = ("joinM", "kleisliM", "kleisli_backM", "thenM")
