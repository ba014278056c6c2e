"""
Validation
==========

Валидация с накоплением ошибок.

Accumulating applicative over Result, parameterized by a Monoid on the
failure side. The monadic half (wrap, chain, fold, kleisli) is Result's
and stops at the first failure; the applicative half (apply, lift2, *>, <*,
traverse) combines every independent failure with the monoid:

    lift2(f, Error(["a"]), Error(["b"]))  ==  Error(["a", "b"])

The divergence is intentional. Dependent checks go through chain,
independent checks through lift2.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from ..monoid import LIST, Monoid
from .result import Error, Ok, Result, ResultMonad


class ValidationApplicative(ResultMonad):
    """Result monad whose apply accumulates failures with `monoid`."""

    __slots__ = ("_monoid",)

    def __init__(self, monoid: Monoid[typing.Any]) -> None:
        self._monoid = monoid

    @property
    def monoid(self) -> Monoid[typing.Any]:
        return self._monoid

    def apply(
        self,
        mf: Result[Callable[[typing.Any], typing.Any], typing.Any],
        ma: Result[typing.Any, typing.Any],
        /,
    ) -> Result[typing.Any, typing.Any]:
        """Sequential application, parameterized by the failure monoid."""
        match mf, ma:
            case Ok(f), Ok(a):
                return Ok(f(a))
            case Error(e1), Error(e2):
                return Error(self._monoid.combine(e1, e2))
            case Error(_), Ok(_):
                return mf
            case Ok(_), Error(_):
                return ma
            case _:
                raise TypeError(f"Expected Ok or Error, got {mf!r} and {ma!r}")

    def seq_validator[A](
        self,
        check: Callable[[A], Result[typing.Any, typing.Any]],
        items: Iterable[A],
        /,
    ) -> Result[list[typing.Any], typing.Any]:
        """Validate every item; all results in input order or all failures combined."""
        return self.traverse(items, check)

    def __repr__(self) -> str:
        return f"ValidationApplicative({self._monoid!r})"


validation = ValidationApplicative(LIST)

# Module-level shortcuts bound to the string-list validation.
apply = validation.apply
lift2 = validation.lift2
then_right = validation.then_right
then_left = validation.then_left
seq_validator = validation.seq_validator


def success[T](value: T) -> Result[T, typing.Never]:
    return Ok(value)


def failure(*messages: str) -> Result[typing.Never, list[str]]:
    """Failure carrying one or more messages for the list monoid."""
    return Error(list(messages))


__all__ = (
    "ValidationApplicative",
    "apply",
    "failure",
    "lift2",
    "seq_validator",
    "success",
    "then_left",
    "then_right",
    "validation",
)
