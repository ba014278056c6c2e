"""
Async
=====

Lazy asynchronous computation over asyncio.

An Async wraps a zero-argument factory returning an awaitable, so nothing
starts until the computation is awaited:

    fetch = Async(lambda: client.get(url))
    body = async_.map(fetch, lambda response: response.text)
    run_async(body)        # asyncio.run under the hood

chain records a bind node; awaiting drives the nodes with an explicit
frame stack inside a single coroutine, so long chains do not nest awaits.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Awaitable, Callable, Generator

from ..core.kind import Guarded


class Async[A]:
    """Lazy coroutine monad value.

    Monadic laws:
    - Left identity: async_.wrap(a).then(f) ≡ f(a)
    - Right identity: m.then(async_.wrap) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_factory", "_source", "_next")

    def __init__(self, factory: Callable[[], Awaitable[A]], /) -> None:
        """Create Async from a fn returning an awaitable."""
        self._factory = factory
        self._source: Async[typing.Any] | None = None
        self._next: Callable[[typing.Any], Async[A]] | None = None

    @classmethod
    def _bound(
        cls,
        source: Async[typing.Any],
        next_: Callable[[typing.Any], Async[A]],
    ) -> Async[A]:
        node = cls.__new__(cls)
        node._factory = None
        node._source = source
        node._next = next_
        return node

    async def __call__(self) -> A:
        """Run the computation on the current event loop."""
        frames: list[Callable[[typing.Any], Async[typing.Any]]] = []
        current: Async[typing.Any] = self
        while True:
            if current._next is not None:
                frames.append(current._next)
                current = current._source  # type: ignore[assignment]
                continue
            value = await current._factory()  # type: ignore[misc]
            if not frames:
                return value
            current = _expect_async(frames.pop()(value))

    def __await__(self) -> Generator[typing.Any, None, A]:
        return self().__await__()

    # Functor / monad operations

    def map[B](self, f: Callable[[A], B], /) -> Async[B]:
        return Async._bound(self, lambda a: _pure(f(a)))

    def then[B](self, f: Callable[[A], Async[B]], /) -> Async[B]:
        """Monadic bind (>>=)."""
        return Async._bound(self, f)

    def __repr__(self) -> str:
        kind = "bind" if self._next is not None else "factory"
        return f"Async(<{kind}>)"


def _expect_async(value: typing.Any) -> Async[typing.Any]:
    if not isinstance(value, Async):
        raise TypeError(f"Async continuation must return Async, got {value!r}")
    return value


def _pure[A](value: A) -> Async[A]:
    async def wrapper() -> A:
        return value

    return Async(wrapper)


# ============================================================================
# Primitive computations
# ============================================================================


def sleep(seconds: float) -> Async[None]:
    """Suspend for `seconds` without blocking the event loop."""
    return Async(lambda: asyncio.sleep(seconds))


def run_async[A](m: Async[A]) -> A:
    """Run m to completion in a fresh event loop (asyncio.run)."""
    return asyncio.run(m())


def try_with[A](m: Async[A], handler: Callable[[Exception], Async[A]]) -> Async[A]:
    """Recover from a fault raised while awaiting m."""

    async def wrapper() -> A:
        try:
            return await m()
        except Exception as exc:
            return await handler(exc)()

    return Async(wrapper)


def try_finally[A](m: Async[A], finalizer: Callable[[], None]) -> Async[A]:
    async def wrapper() -> A:
        try:
            return await m()
        finally:
            finalizer()

    return Async(wrapper)


class AsyncMonad(Guarded):
    """The async workflow monad."""

    __slots__ = ()

    def wrap(self, value: typing.Any, /) -> Async[typing.Any]:
        return _pure(value)

    def chain(
        self,
        m: Async[typing.Any],
        f: Callable[[typing.Any], Async[typing.Any]],
        /,
    ) -> Async[typing.Any]:
        return m.then(f)

    def try_with(
        self,
        m: Async[typing.Any],
        handler: Callable[[Exception], Async[typing.Any]],
        /,
    ) -> Async[typing.Any]:
        return try_with(m, handler)

    def try_finally(
        self,
        m: Async[typing.Any],
        finalizer: Callable[[], None],
        /,
    ) -> Async[typing.Any]:
        return try_finally(m, finalizer)


async_ = AsyncMonad()

__all__ = (
    "Async",
    "AsyncMonad",
    "async_",
    "run_async",
    "sleep",
    "try_finally",
    "try_with",
)
