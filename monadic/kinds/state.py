"""
State
=====

Deferred state transition S -> (A, S).

chain does not call anything: it records a bind node. run() walks the
nodes with an explicit frame stack, so a fold or loop of any length runs
in constant Python stack.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..core.kind import Guarded


class State[S, A]:
    """State monad value.

    Monadic laws:
    - Left identity: state.wrap(a).then(f) ≡ f(a)
    - Right identity: m.then(state.wrap) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_step", "_source", "_next")

    def __init__(self, step: Callable[[S], tuple[A, S]], /) -> None:
        """Create State from a transition function."""
        self._step = step
        self._source: State[S, typing.Any] | None = None
        self._next: Callable[[typing.Any], State[S, A]] | None = None

    @classmethod
    def _bound(
        cls,
        source: State[S, typing.Any],
        next_: Callable[[typing.Any], State[S, A]],
    ) -> State[S, A]:
        node = cls.__new__(cls)
        node._step = None
        node._source = source
        node._next = next_
        return node

    def run(self, initial: S, /) -> tuple[A, S]:
        """Run the transition from `initial`, returning (value, final state)."""
        frames: list[Callable[[typing.Any], State[S, typing.Any]]] = []
        current: State[S, typing.Any] = self
        current_state = initial
        while True:
            if current._next is not None:
                frames.append(current._next)
                current = current._source  # type: ignore[assignment]
                continue
            value, current_state = current._step(current_state)  # type: ignore[misc]
            if not frames:
                return value, current_state
            current = _expect_state(frames.pop()(value))

    def eval(self, initial: S, /) -> A:
        """Run and keep only the value."""
        return self.run(initial)[0]

    def exec(self, initial: S, /) -> S:
        """Run and keep only the final state."""
        return self.run(initial)[1]

    # Functor / monad operations

    def map[B](self, f: Callable[[A], B], /) -> State[S, B]:
        return State._bound(self, lambda a: _pure(f(a)))

    def then[B](self, f: Callable[[A], State[S, B]], /) -> State[S, B]:
        """Monadic bind (>>=)."""
        return State._bound(self, f)

    def __repr__(self) -> str:
        kind = "bind" if self._next is not None else "step"
        return f"State(<{kind}>)"


def _expect_state(value: typing.Any) -> State[typing.Any, typing.Any]:
    if not isinstance(value, State):
        raise TypeError(f"State continuation must return State, got {value!r}")
    return value


def _pure[S, A](value: A) -> State[S, A]:
    return State(lambda s: (value, s))


# ============================================================================
# Primitive computations
# ============================================================================


def get[S]() -> State[S, S]:
    """Read the current state."""
    return State(lambda s: (s, s))


def gets[S, A](f: Callable[[S], A]) -> State[S, A]:
    """Read a projection of the current state."""
    return State(lambda s: (f(s), s))


def put[S](new_state: S) -> State[S, None]:
    """Replace the state."""
    return State(lambda _: (None, new_state))


def modify[S](f: Callable[[S], S]) -> State[S, None]:
    """Replace the state with f(state)."""
    return State(lambda s: (None, f(s)))


def map_state[S, A, B](f: Callable[[tuple[A, S]], tuple[B, S]], m: State[S, A]) -> State[S, B]:
    """Transform the (value, state) pair produced by m."""
    return State(lambda s: f(m.run(s)))


def with_state[S, A](f: Callable[[S], S], m: State[S, A]) -> State[S, A]:
    """Run m on f(state)."""
    return State(lambda s: m.run(f(s)))


def try_with[S, A](m: State[S, A], handler: Callable[[Exception], State[S, A]]) -> State[S, A]:
    """Recover from a fault raised while running m; the handler sees the input state."""

    def step(s: S) -> tuple[A, S]:
        try:
            return m.run(s)
        except Exception as exc:
            return handler(exc).run(s)

    return State(step)


def try_finally[S, A](m: State[S, A], finalizer: Callable[[], None]) -> State[S, A]:
    def step(s: S) -> tuple[A, S]:
        try:
            return m.run(s)
        finally:
            finalizer()

    return State(step)


class StateMonad(Guarded):
    """The state monad."""

    __slots__ = ()

    def wrap(self, value: typing.Any, /) -> State[typing.Any, typing.Any]:
        return _pure(value)

    def chain(
        self,
        m: State[typing.Any, typing.Any],
        f: Callable[[typing.Any], State[typing.Any, typing.Any]],
        /,
    ) -> State[typing.Any, typing.Any]:
        return m.then(f)

    def try_with(
        self,
        m: State[typing.Any, typing.Any],
        handler: Callable[[Exception], State[typing.Any, typing.Any]],
        /,
    ) -> State[typing.Any, typing.Any]:
        return try_with(m, handler)

    def try_finally(
        self,
        m: State[typing.Any, typing.Any],
        finalizer: Callable[[], None],
        /,
    ) -> State[typing.Any, typing.Any]:
        return try_finally(m, finalizer)


state = StateMonad()

__all__ = (
    "State",
    "StateMonad",
    "get",
    "gets",
    "map_state",
    "modify",
    "put",
    "state",
    "try_finally",
    "try_with",
    "with_state",
)
