"""
Distribution
============

Discrete probability distribution with exact rational weights.

chain implements the joint-probability law P(A and B) = P(A) * P(B | A):
every antecedent outcome (v1, p1) is expanded into the outcomes (v2, p2)
of f(v1) and emitted as (v2, p1 * p2). Fractions keep the arithmetic exact,
so a distribution built from normalized pieces sums to exactly 1.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from fractions import Fraction

from .._errors import EmptyDistributionError
from .._types import Predicate
from ..core.kind import Monad


@dataclass(frozen=True)
class Outcome[A]:
    """One weighted value."""

    value: A
    probability: Fraction


class Distribution[A](tuple[Outcome[A], ...]):
    """Immutable sequence of outcomes. Order is not significant."""

    __slots__ = ()

    def __repr__(self) -> str:
        body = ", ".join(f"{o.value!r}: {o.probability}" for o in self)
        return f"Distribution({{{body}}})"


class DistributionMonad(Monad):
    """The probability monad."""

    __slots__ = ()

    def wrap(self, value: typing.Any, /) -> Distribution[typing.Any]:
        return Distribution((Outcome(value, Fraction(1)),))

    def chain(
        self,
        m: Distribution[typing.Any],
        f: Callable[[typing.Any], Distribution[typing.Any]],
        /,
    ) -> Distribution[typing.Any]:
        return Distribution(
            Outcome(inner.value, outer.probability * inner.probability)
            for outer in m
            for inner in f(outer.value)
        )


distribution = DistributionMonad()


def probability(d: Distribution[typing.Any]) -> Fraction:
    """Exact sum of all outcome weights."""
    return sum((o.probability for o in d), Fraction(0))


def uniform[A](values: Iterable[A]) -> Distribution[A]:
    """Equal weight for every value. Raises EmptyDistributionError on no values."""
    items = tuple(values)
    if not items:
        raise EmptyDistributionError()
    weight = Fraction(1, len(items))
    return Distribution(Outcome(v, weight) for v in items)


def certainly[A](value: A) -> Distribution[A]:
    return distribution.wrap(value)


def impossible() -> Distribution[typing.Never]:
    """The empty distribution: total probability 0."""
    return Distribution(())


def filter[A](predicate: Predicate[A], d: Distribution[A]) -> Distribution[A]:
    """Keep outcomes whose value matches. Weights are not renormalized."""
    return Distribution(o for o in d if predicate(o.value))


def map[A, B](f: Callable[[A], B], d: Distribution[A]) -> Distribution[B]:
    return Distribution(Outcome(f(o.value), o.probability) for o in d)


def fair_dice(sides: int) -> Distribution[int]:
    """Uniform over 1..sides."""
    return uniform(range(1, sides + 1))


class CoinSide(enum.Enum):
    HEADS = "heads"
    TAILS = "tails"


fair_coin: Distribution[CoinSide] = uniform((CoinSide.HEADS, CoinSide.TAILS))

__all__ = (
    "CoinSide",
    "Distribution",
    "DistributionMonad",
    "Outcome",
    "certainly",
    "distribution",
    "fair_coin",
    "fair_dice",
    "filter",
    "impossible",
    "map",
    "probability",
    "uniform",
)
