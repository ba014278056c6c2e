"""
Monoid
======

Identity element + associative combine. Parameterizes every accumulating
computation: the Writer log and the failure side of Validation.

Законы:
- Left identity:  combine(identity, x) == x
- Right identity: combine(x, identity) == x
- Associativity:  combine(combine(x, y), z) == combine(x, combine(y, z))
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Callable, Iterable

from ._helpers import identity as identity_fn


class Monoid[T](abc.ABC):
    """Associative binary operation with an identity element.

    Instances are stateless and freely shared.
    """

    __slots__ = ()

    @property
    @abc.abstractmethod
    def identity(self) -> T:
        """The neutral element."""

    @abc.abstractmethod
    def combine(self, a: T, b: T, /) -> T:
        """Associative operation."""

    def concat(self, items: Iterable[T], /) -> T:
        """Fold items with combine, starting from identity."""
        acc = self.identity
        for item in items:
            acc = self.combine(acc, item)
        return acc

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ListMonoid[A](Monoid[list[A]]):
    """Lists under concatenation. Never mutates its arguments."""

    __slots__ = ()

    @property
    def identity(self) -> list[A]:
        return []

    def combine(self, a: list[A], b: list[A], /) -> list[A]:
        return [*a, *b]

    def concat(self, items: Iterable[list[A]], /) -> list[A]:
        return [item for part in items for item in part]


class SumMonoid(Monoid[typing.Any]):
    """Numbers under addition (0, +)."""

    __slots__ = ()

    @property
    def identity(self) -> int:
        return 0

    def combine(self, a: typing.Any, b: typing.Any, /) -> typing.Any:
        return a + b


class ProductMonoid(Monoid[typing.Any]):
    """Numbers under multiplication (1, *)."""

    __slots__ = ()

    @property
    def identity(self) -> int:
        return 1

    def combine(self, a: typing.Any, b: typing.Any, /) -> typing.Any:
        return a * b


class AllMonoid(Monoid[bool]):
    """Booleans under conjunction."""

    __slots__ = ()

    @property
    def identity(self) -> bool:
        return True

    def combine(self, a: bool, b: bool, /) -> bool:
        return a and b


class AnyMonoid(Monoid[bool]):
    """Booleans under disjunction."""

    __slots__ = ()

    @property
    def identity(self) -> bool:
        return False

    def combine(self, a: bool, b: bool, /) -> bool:
        return a or b


class OptionMonoid[T](Monoid[typing.Any]):
    """Lifts a monoid over optional values.

    Nothing is skipped; two present values are combined with the inner monoid.
    """

    __slots__ = ("_inner",)

    def __init__(self, inner: Monoid[T]) -> None:
        self._inner = inner

    @property
    def inner(self) -> Monoid[T]:
        return self._inner

    @property
    def identity(self) -> typing.Any:
        from .kinds.option import Nothing

        return Nothing()

    def combine(self, a: typing.Any, b: typing.Any, /) -> typing.Any:
        from .kinds.option import Nothing, Some

        match a, b:
            case Some(x), Some(y):
                return Some(self._inner.combine(x, y))
            case Some(_), Nothing():
                return a
            case Nothing(), _:
                return b
            case _:
                raise TypeError(f"OptionMonoid expects Option values, got {a!r} and {b!r}")

    def __repr__(self) -> str:
        return f"OptionMonoid({self._inner!r})"


class DualMonoid[T](Monoid[T]):
    """The inner monoid with its arguments swapped."""

    __slots__ = ("_inner",)

    def __init__(self, inner: Monoid[T]) -> None:
        self._inner = inner

    @property
    def identity(self) -> T:
        return self._inner.identity

    def combine(self, a: T, b: T, /) -> T:
        return self._inner.combine(b, a)

    def __repr__(self) -> str:
        return f"DualMonoid({self._inner!r})"


class EndoMonoid(Monoid[Callable[[typing.Any], typing.Any]]):
    """Endofunctions under composition: combine(f, g) == f after g."""

    __slots__ = ()

    @property
    def identity(self) -> Callable[[typing.Any], typing.Any]:
        return identity_fn

    def combine(
        self,
        f: Callable[[typing.Any], typing.Any],
        g: Callable[[typing.Any], typing.Any],
        /,
    ) -> Callable[[typing.Any], typing.Any]:
        def composed(x: typing.Any) -> typing.Any:
            return f(g(x))

        return composed


LIST: ListMonoid[typing.Any] = ListMonoid()
SUM = SumMonoid()
PRODUCT = ProductMonoid()
ALL = AllMonoid()
ANY = AnyMonoid()
ENDO = EndoMonoid()

__all__ = (
    "ALL",
    "ANY",
    "ENDO",
    "LIST",
    "PRODUCT",
    "SUM",
    "AllMonoid",
    "AnyMonoid",
    "DualMonoid",
    "EndoMonoid",
    "ListMonoid",
    "Monoid",
    "OptionMonoid",
    "ProductMonoid",
    "SumMonoid",
)
