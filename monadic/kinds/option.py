"""
Option
======

Possibly-absent value. Absence is not an error: chain short-circuits on
Nothing and the rest of the pipeline is skipped.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import UnwrapError
from ..core.kind import Monad


@dataclass(frozen=True, slots=True)
class Some[T]:
    """Present value."""

    value: T

    def is_some(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[D](self, default: D) -> T | D:
        _ = default
        return self.value


@dataclass(frozen=True, slots=True)
class Nothing:
    """Absent value."""

    def is_some(self) -> bool:
        return False

    def unwrap(self) -> typing.NoReturn:
        raise UnwrapError(self)

    def unwrap_or[D](self, default: D) -> D:
        return default


type Option[T] = Some[T] | Nothing


class OptionMonad(Monad):
    """The maybe monad."""

    __slots__ = ()

    def wrap(self, value: typing.Any, /) -> Option[typing.Any]:
        return Some(value)

    def chain(
        self,
        m: Option[typing.Any],
        f: Callable[[typing.Any], Option[typing.Any]],
        /,
    ) -> Option[typing.Any]:
        match m:
            case Some(value):
                return f(value)
            case Nothing():
                return m
            case _:
                raise TypeError(f"Expected Some or Nothing, got {m!r}")


option = OptionMonad()


def from_optional[T](value: T | None) -> Option[T]:
    """None becomes Nothing, anything else Some."""
    return Nothing() if value is None else Some(value)


def to_optional[T](opt: Option[T]) -> T | None:
    match opt:
        case Some(value):
            return value
        case _:
            return None


__all__ = (
    "Nothing",
    "Option",
    "OptionMonad",
    "Some",
    "from_optional",
    "option",
    "to_optional",
)
