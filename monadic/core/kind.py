"""
Capability contract
===================

A computation kind plugs into the shared combinator layer by implementing
two primitives:

- wrap(value)   -> M[value]      trivial computation
- chain(m, f)   -> M[result]     sequence m into f

Everything else (map, apply, lift2, *>, <*, >=>, <=<, fold, traverse,
loops) is inherited, so every kind gets the same surface and the same laws:

- Left identity:  chain(wrap(a), f) == f(a)
- Right identity: chain(m, wrap) == m
- Associativity:  chain(chain(m, f), g) == chain(m, x => chain(f(x), g))

Kinds are stateless objects; module-level singletons are shared freely.
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Callable, Iterable

from ..collection.fold import foldM
from ..collection.traverse import sequenceM, traverseM
from ..control.bracket import bracketM, usingM
from ..control.loop import for_eachM, whenM, while_M
from .apply import applyM, lift2M, lift3M, mapM, then_leftM, then_rightM
from .compose import joinM, kleisli_backM, kleisliM, thenM


class Monad(abc.ABC):
    """Base class for a computation kind. Subclasses supply wrap and chain."""

    __slots__ = ()

    # Contract

    @abc.abstractmethod
    def wrap(self, value: typing.Any, /) -> typing.Any:
        """Lift a plain value into the trivial computation."""

    @abc.abstractmethod
    def chain(self, m: typing.Any, f: Callable[[typing.Any], typing.Any], /) -> typing.Any:
        """Monadic bind (>>=)."""

    # Functor / applicative

    def map(self, m: typing.Any, f: Callable[[typing.Any], typing.Any], /) -> typing.Any:
        return mapM(m, f, wrap=self.wrap, chain=self.chain)

    def apply(self, mf: typing.Any, ma: typing.Any, /) -> typing.Any:
        """Sequential application (<*>). Kinds may override to change accumulation."""
        return applyM(mf, ma, wrap=self.wrap, chain=self.chain)

    def lift2(
        self,
        f: Callable[[typing.Any, typing.Any], typing.Any],
        ma: typing.Any,
        mb: typing.Any,
        /,
    ) -> typing.Any:
        return lift2M(f, ma, mb, fmap=self.map, ap=self.apply)

    def lift3(
        self,
        f: Callable[[typing.Any, typing.Any, typing.Any], typing.Any],
        ma: typing.Any,
        mb: typing.Any,
        mc: typing.Any,
        /,
    ) -> typing.Any:
        return lift3M(f, ma, mb, mc, fmap=self.map, ap=self.apply)

    def then_right(self, ma: typing.Any, mb: typing.Any, /) -> typing.Any:
        """*> : run both, keep the second value."""
        return then_rightM(ma, mb, fmap=self.map, ap=self.apply)

    def then_left(self, ma: typing.Any, mb: typing.Any, /) -> typing.Any:
        """<* : run both, keep the first value."""
        return then_leftM(ma, mb, fmap=self.map, ap=self.apply)

    # Monad

    def then(self, ma: typing.Any, mb: typing.Any, /) -> typing.Any:
        """>>. : chain into mb, discarding the value of ma."""
        return thenM(ma, mb, chain=self.chain)

    def join(self, mm: typing.Any, /) -> typing.Any:
        return joinM(mm, chain=self.chain)

    def kleisli(
        self,
        f: Callable[[typing.Any], typing.Any],
        g: Callable[[typing.Any], typing.Any],
        /,
    ) -> Callable[[typing.Any], typing.Any]:
        """>=> : x -> chain(f(x), g)."""
        return kleisliM(f, g, chain=self.chain)

    def kleisli_back(
        self,
        g: Callable[[typing.Any], typing.Any],
        f: Callable[[typing.Any], typing.Any],
        /,
    ) -> Callable[[typing.Any], typing.Any]:
        """<=< : mirror of kleisli, f runs first."""
        return kleisli_backM(g, f, chain=self.chain)

    def delay(self, thunk: Callable[[], typing.Any], /) -> typing.Any:
        """Build the computation only when the previous step has run."""
        return self.chain(self.wrap(None), lambda _: thunk())

    # Collections

    def fold(
        self,
        items: Iterable[typing.Any],
        step: Callable[[typing.Any, typing.Any], typing.Any],
        /,
        *,
        initial: typing.Any,
    ) -> typing.Any:
        """Effectful fold (foldM)."""
        return foldM(items, step, initial=initial, wrap=self.wrap, chain=self.chain)

    def traverse(
        self,
        items: Iterable[typing.Any],
        handler: Callable[[typing.Any], typing.Any],
        /,
    ) -> typing.Any:
        return traverseM(items, handler, wrap=self.wrap, fmap=self.map, ap=self.apply)

    def sequence(self, computations: Iterable[typing.Any], /) -> typing.Any:
        return sequenceM(computations, wrap=self.wrap, fmap=self.map, ap=self.apply)

    # Control flow

    def when(self, condition: bool, m: typing.Any, /) -> typing.Any:
        return whenM(condition, m, wrap=self.wrap)

    def while_(self, guard: Callable[[], bool], body: typing.Any, /) -> typing.Any:
        return while_M(guard, body, wrap=self.wrap, chain=self.chain)

    def for_each(
        self,
        items: Iterable[typing.Any],
        body: Callable[[typing.Any], typing.Any],
        /,
    ) -> typing.Any:
        return for_eachM(items, body, wrap=self.wrap, chain=self.chain)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Guarded(Monad):
    """A deferred kind that can run code on failure and on every exit path."""

    __slots__ = ()

    @abc.abstractmethod
    def try_with(
        self,
        m: typing.Any,
        handler: Callable[[Exception], typing.Any],
        /,
    ) -> typing.Any:
        """Recover from a fault raised while running m."""

    @abc.abstractmethod
    def try_finally(self, m: typing.Any, finalizer: Callable[[], None], /) -> typing.Any:
        """Run finalizer after m, whether m succeeds or fails."""

    def using(self, resource: typing.Any, body: Callable[[typing.Any], typing.Any], /) -> typing.Any:
        """Scoped acquisition: body(resource), then resource.close()."""
        return usingM(resource, body, delay=self.delay, try_finally=self.try_finally)

    def bracket(
        self,
        acquire: typing.Any,
        use: Callable[[typing.Any], typing.Any],
        release: Callable[[typing.Any], None],
        /,
    ) -> typing.Any:
        return bracketM(
            acquire,
            use=use,
            release=release,
            chain=self.chain,
            delay=self.delay,
            try_finally=self.try_finally,
        )


__all__ = ("Guarded", "Monad")
