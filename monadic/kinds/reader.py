"""
Reader
======

Computation reading a shared environment R -> A. Stack-safe the same way
as State: chain records a node, run() drives an explicit frame stack.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..core.kind import Guarded


class Reader[R, A]:
    """Reader monad value."""

    __slots__ = ("_read", "_source", "_next")

    def __init__(self, read: Callable[[R], A], /) -> None:
        self._read = read
        self._source: Reader[R, typing.Any] | None = None
        self._next: Callable[[typing.Any], Reader[R, A]] | None = None

    @classmethod
    def _bound(
        cls,
        source: Reader[R, typing.Any],
        next_: Callable[[typing.Any], Reader[R, A]],
    ) -> Reader[R, A]:
        node = cls.__new__(cls)
        node._read = None
        node._source = source
        node._next = next_
        return node

    def run(self, env: R, /) -> A:
        frames: list[Callable[[typing.Any], Reader[R, typing.Any]]] = []
        current: Reader[R, typing.Any] = self
        while True:
            if current._next is not None:
                frames.append(current._next)
                current = current._source  # type: ignore[assignment]
                continue
            value = current._read(env)  # type: ignore[misc]
            if not frames:
                return value
            current = frames.pop()(value)
            if not isinstance(current, Reader):
                raise TypeError(f"Reader continuation must return Reader, got {current!r}")

    def map[B](self, f: Callable[[A], B], /) -> Reader[R, B]:
        return Reader._bound(self, lambda a: Reader(lambda _: f(a)))

    def then[B](self, f: Callable[[A], Reader[R, B]], /) -> Reader[R, B]:
        """Monadic bind (>>=)."""
        return Reader._bound(self, f)

    def __repr__(self) -> str:
        kind = "bind" if self._next is not None else "read"
        return f"Reader(<{kind}>)"


def ask[R]() -> Reader[R, R]:
    """The environment itself."""
    return Reader(lambda env: env)


def asks[R, A](f: Callable[[R], A]) -> Reader[R, A]:
    """A projection of the environment."""
    return Reader(f)


def local[R1, R2, A](f: Callable[[R1], R2], m: Reader[R2, A]) -> Reader[R1, A]:
    """Run m in a modified environment."""
    return Reader(lambda env: m.run(f(env)))


# withReader is local under another name
with_reader = local


def map_reader[R, A, B](f: Callable[[A], B], m: Reader[R, A]) -> Reader[R, B]:
    return Reader(lambda env: f(m.run(env)))


def try_with[R, A](m: Reader[R, A], handler: Callable[[Exception], Reader[R, A]]) -> Reader[R, A]:
    def read(env: R) -> A:
        try:
            return m.run(env)
        except Exception as exc:
            return handler(exc).run(env)

    return Reader(read)


def try_finally[R, A](m: Reader[R, A], finalizer: Callable[[], None]) -> Reader[R, A]:
    def read(env: R) -> A:
        try:
            return m.run(env)
        finally:
            finalizer()

    return Reader(read)


class ReaderMonad(Guarded):
    """The reader monad."""

    __slots__ = ()

    def wrap(self, value: typing.Any, /) -> Reader[typing.Any, typing.Any]:
        return Reader(lambda _: value)

    def chain(
        self,
        m: Reader[typing.Any, typing.Any],
        f: Callable[[typing.Any], Reader[typing.Any, typing.Any]],
        /,
    ) -> Reader[typing.Any, typing.Any]:
        return m.then(f)

    def try_with(
        self,
        m: Reader[typing.Any, typing.Any],
        handler: Callable[[Exception], Reader[typing.Any, typing.Any]],
        /,
    ) -> Reader[typing.Any, typing.Any]:
        return try_with(m, handler)

    def try_finally(
        self,
        m: Reader[typing.Any, typing.Any],
        finalizer: Callable[[], None],
        /,
    ) -> Reader[typing.Any, typing.Any]:
        return try_finally(m, finalizer)


reader = ReaderMonad()

__all__ = (
    "Reader",
    "ReaderMonad",
    "ask",
    "asks",
    "local",
    "map_reader",
    "reader",
    "try_finally",
    "try_with",
    "with_reader",
)
