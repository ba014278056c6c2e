"""
Result
======

Two-armed value: Ok(value) or Error(error). chain stops at the first Error,
which is carried as data.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import UnwrapError
from .._types import NoError
from ..core.kind import Monad
from .option import Nothing, Option, Some


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success arm."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[D](self, default: D) -> T | D:
        _ = default
        return self.value


@dataclass(frozen=True, slots=True)
class Error[E]:
    """Failure arm."""

    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> typing.NoReturn:
        raise UnwrapError(self)

    def unwrap_or[D](self, default: D) -> D:
        return default


type Result[T, E] = Ok[T] | Error[E]


class ResultMonad(Monad):
    """The either monad: first failure wins."""

    __slots__ = ()

    def wrap(self, value: typing.Any, /) -> Result[typing.Any, NoError]:
        return Ok(value)

    def chain(
        self,
        m: Result[typing.Any, typing.Any],
        f: Callable[[typing.Any], Result[typing.Any, typing.Any]],
        /,
    ) -> Result[typing.Any, typing.Any]:
        match m:
            case Ok(value):
                return f(value)
            case Error(_):
                return m
            case _:
                raise TypeError(f"Expected Ok or Error, got {m!r}")


result = ResultMonad()


def protect[A, T](f: Callable[[A], T], x: A) -> Result[T, Exception]:
    """Call f(x); a raised exception becomes Error(exc)."""
    try:
        return Ok(f(x))
    except Exception as exc:
        return Error(exc)


def bimap[T, U, E, F](
    on_ok: Callable[[T], U],
    on_error: Callable[[E], F],
    r: Result[T, E],
) -> Result[U, F]:
    match r:
        case Ok(value):
            return Ok(on_ok(value))
        case Error(error):
            return Error(on_error(error))


def either[T, E, R](
    on_ok: Callable[[T], R],
    on_error: Callable[[E], R],
    r: Result[T, E],
) -> R:
    """Collapse both arms into one value."""
    match r:
        case Ok(value):
            return on_ok(value)
        case Error(error):
            return on_error(error)


def map_error[T, E, F](f: Callable[[E], F], r: Result[T, E]) -> Result[T, F]:
    match r:
        case Ok(_):
            return r
        case Error(error):
            return Error(f(error))


def from_option[T, E](error: E, opt: Option[T]) -> Result[T, E]:
    match opt:
        case Some(value):
            return Ok(value)
        case _:
            return Error(error)


def to_option[T, E](r: Result[T, E]) -> Option[T]:
    match r:
        case Ok(value):
            return Some(value)
        case _:
            return Nothing()


__all__ = (
    "Error",
    "Ok",
    "Result",
    "ResultMonad",
    "bimap",
    "either",
    "from_option",
    "map_error",
    "protect",
    "result",
    "to_option",
)
