"""Writer Monad

Deferred computation producing a value together with an accumulated log.
The log type is any Monoid; by default it is Log (list concatenation).

Logs are combined in execution order, left to right, so by associativity
the result equals the nested combine of every bind."""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..core.kind import Guarded
from ..monoid import Monoid
from .log import LOG, Log
from .output import WriterOutput


class Writer[A, W]:
    """Writer monad value.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value", "_monoid", "_source", "_next")

    def __init__(
        self,
        value: Callable[[], WriterOutput[A, W]],
        /,
        monoid: Monoid[W] = LOG,  # type: ignore[assignment]
    ) -> None:
        """Create Writer from a fn returning WriterOutput."""
        self._value = value
        self._monoid = monoid
        self._source: Writer[typing.Any, W] | None = None
        self._next: Callable[[typing.Any], Writer[A, W]] | None = None

    @classmethod
    def _bound(
        cls,
        source: Writer[typing.Any, W],
        next_: Callable[[typing.Any], Writer[A, W]],
    ) -> Writer[A, W]:
        node = cls.__new__(cls)
        node._value = None
        node._monoid = source._monoid
        node._source = source
        node._next = next_
        return node

    @property
    def monoid(self) -> Monoid[W]:
        return self._monoid

    @staticmethod
    def pure[V](value: V, monoid: Monoid[typing.Any] = LOG) -> Writer[V, typing.Any]:
        """Lift a value into the monad with empty log."""
        return Writer(lambda: WriterOutput(value, monoid.identity), monoid)

    @staticmethod
    def tell[LogEntry](*entries: LogEntry) -> Writer[None, Log[LogEntry]]:
        """Write entries to the log without producing a value."""
        return Writer(lambda: WriterOutput(None, Log.of(*entries)), LOG)  # type: ignore[arg-type]

    def run(self) -> WriterOutput[A, W]:
        """Execute the deferred computation."""
        frames: list[Callable[[typing.Any], Writer[typing.Any, W]]] = []
        current: Writer[typing.Any, W] = self
        logs: list[W] = []
        while True:
            if current._next is not None:
                frames.append(current._next)
                current = current._source  # type: ignore[assignment]
                continue
            out = current._value()  # type: ignore[misc]
            logs.append(out.log)
            if not frames:
                return WriterOutput(out.value, self._monoid.concat(logs))
            current = frames.pop()(out.value)
            if not isinstance(current, Writer):
                raise TypeError(f"Writer continuation must return Writer, got {current!r}")

    # Functor operations

    def map[U](self, f: Callable[[A], U], /) -> Writer[U, W]:
        """Functor fmap - apply function to the value, preserve log."""
        monoid = self._monoid
        return Writer._bound(self, lambda a: Writer(lambda: WriterOutput(f(a), monoid.identity), monoid))

    def map_log[V](self, f: Callable[[W], V], /, monoid: Monoid[V]) -> Writer[A, V]:
        """Transform the log into another monoid."""

        def wrapper() -> WriterOutput[A, V]:
            out = self.run()
            return WriterOutput(out.value, f(out.log))

        return Writer(wrapper, monoid)

    # Monad operations

    def then[U](self, f: Callable[[A], Writer[U, W]], /) -> Writer[U, W]:
        """Monadic bind (>>=): runs f on the value, combines logs."""
        return Writer._bound(self, f)

    # Writer operations

    def with_log(self, *entries: typing.Any) -> Writer[A, W]:
        """Add entries to a Log-based writer without changing the value."""
        entry_log = Log.of(*entries)

        def add(a: A) -> Writer[A, W]:
            return Writer(lambda: WriterOutput(a, entry_log), self._monoid)  # type: ignore[arg-type]

        return self.then(add)

    def __repr__(self) -> str:
        kind = "bind" if self._next is not None else "leaf"
        return f"Writer(<{kind}>, monoid={self._monoid!r})"


# ============================================================================
# Writer primitives
# ============================================================================


def listen[A, W](m: Writer[A, W]) -> Writer[tuple[A, W], W]:
    """Get access to the log along with the value."""

    def wrapper() -> WriterOutput[tuple[A, W], W]:
        out = m.run()
        return WriterOutput((out.value, out.log), out.log)

    return Writer(wrapper, m.monoid)


def listens[A, W, B](f: Callable[[W], B], m: Writer[A, W]) -> Writer[tuple[A, B], W]:
    """Like listen, but project the log with f."""

    def wrapper() -> WriterOutput[tuple[A, B], W]:
        out = m.run()
        return WriterOutput((out.value, f(out.log)), out.log)

    return Writer(wrapper, m.monoid)


def pass_[A, W](m: Writer[tuple[A, Callable[[W], W]], W]) -> Writer[A, W]:
    """Run m, whose value carries a function applied to its own log."""

    def wrapper() -> WriterOutput[A, W]:
        out = m.run()
        value, f = out.value
        return WriterOutput(value, f(out.log))

    return Writer(wrapper, m.monoid)


def censor[A, W](f: Callable[[W], W], m: Writer[A, W]) -> Writer[A, W]:
    """Modify the log after computation."""

    def wrapper() -> WriterOutput[A, W]:
        out = m.run()
        return WriterOutput(out.value, f(out.log))

    return Writer(wrapper, m.monoid)


def exec_writer[A, W](m: Writer[A, W]) -> W:
    """Run and keep only the log."""
    return m.run().log


def try_with[A, W](m: Writer[A, W], handler: Callable[[Exception], Writer[A, W]]) -> Writer[A, W]:
    """Recover from a fault; the log written before the fault is discarded."""

    def wrapper() -> WriterOutput[A, W]:
        try:
            return m.run()
        except Exception as exc:
            return handler(exc).run()

    return Writer(wrapper, m.monoid)


def try_finally[A, W](m: Writer[A, W], finalizer: Callable[[], None]) -> Writer[A, W]:
    def wrapper() -> WriterOutput[A, W]:
        try:
            return m.run()
        finally:
            finalizer()

    return Writer(wrapper, m.monoid)


class WriterMonad(Guarded):
    """Writer kind parameterized by the log monoid."""

    __slots__ = ("_monoid",)

    def __init__(self, monoid: Monoid[typing.Any] = LOG) -> None:
        self._monoid = monoid

    @property
    def monoid(self) -> Monoid[typing.Any]:
        return self._monoid

    def wrap(self, value: typing.Any, /) -> Writer[typing.Any, typing.Any]:
        return Writer.pure(value, self._monoid)

    def chain(
        self,
        m: Writer[typing.Any, typing.Any],
        f: Callable[[typing.Any], Writer[typing.Any, typing.Any]],
        /,
    ) -> Writer[typing.Any, typing.Any]:
        return m.then(f)

    def tell(self, w: typing.Any, /) -> Writer[None, typing.Any]:
        """Write a monoid value without producing a value."""
        return Writer(lambda: WriterOutput(None, w), self._monoid)

    def try_with(
        self,
        m: Writer[typing.Any, typing.Any],
        handler: Callable[[Exception], Writer[typing.Any, typing.Any]],
        /,
    ) -> Writer[typing.Any, typing.Any]:
        return try_with(m, handler)

    def try_finally(
        self,
        m: Writer[typing.Any, typing.Any],
        finalizer: Callable[[], None],
        /,
    ) -> Writer[typing.Any, typing.Any]:
        return try_finally(m, finalizer)

    def __repr__(self) -> str:
        return f"WriterMonad({self._monoid!r})"


writer = WriterMonad(LOG)


def tell[LogEntry](*entries: LogEntry) -> Writer[None, Log[LogEntry]]:
    """Write entries to the default Log writer."""
    return Writer.tell(*entries)


__all__ = (
    "Writer",
    "WriterMonad",
    "censor",
    "exec_writer",
    "listen",
    "listens",
    "pass_",
    "tell",
    "try_finally",
    "try_with",
    "writer",
)
