"""
Continuation
============

Continuation-passing computation with exception propagation.

A Cont is run with a pair of callbacks (on_success, on_failure) and invokes
exactly one of them exactly once:

- wrap(a)      -> on_success(a)
- throw(e)     -> on_failure(e), on_success never runs
- chain(m, k)  -> run m; on success evaluate k(a) under a protected call
                  (a raised fault goes to on_failure) and run the result
                  with the same callbacks; on failure skip k
- callcc(f)    -> f receives an escape function; running escape(a) abandons
                  the rest of f and resumes at the continuation of callcc

Computations are data. run_cont() is a trampoline over an explicit,
persistent frame stack: chains of any length and nesting run in constant
Python stack, and an escape captures the stack in O(1).
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from .._errors import ContinuationError
from .._types import OnFailure, OnSuccess
from ..core.kind import Guarded
from .result import Error, Ok, Result

logger = logging.getLogger(__name__)

type Raw[A] = Callable[[OnSuccess[A], OnFailure], None]


class Cont[A]:
    """Continuation computation. Build with cont.wrap, throw, callcc, chain."""

    __slots__ = ()

    @staticmethod
    def from_callbacks[V](fn: Raw[V], /) -> Cont[V]:
        """
        Wrap a raw CPS function.

        fn must call exactly one of its two callbacks exactly once, now or
        later. A second call raises ContinuationError.
        """
        return _Raw(fn)

    def run(self, on_success: OnSuccess[A], on_failure: OnFailure) -> None:
        run_cont(self, on_success, on_failure)

    def map[B](self, f: Callable[[A], B], /) -> Cont[B]:
        return _Bind(self, lambda a: _Pure(f(a)))

    def then[B](self, f: Callable[[A], Cont[B]], /) -> Cont[B]:
        """Monadic bind (>>=)."""
        return _Bind(self, f)


class _Pure[A](Cont[A]):
    __slots__ = ("value",)

    def __init__(self, value: A) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Cont.pure({self.value!r})"


class _Throw(Cont[typing.Never]):
    __slots__ = ("error",)

    def __init__(self, error: Exception) -> None:
        self.error = error

    def __repr__(self) -> str:
        return f"Cont.throw({self.error!r})"


class _Bind[A](Cont[A]):
    __slots__ = ("source", "next")

    def __init__(self, source: Cont[typing.Any], next_: Callable[[typing.Any], Cont[A]]) -> None:
        self.source = source
        self.next = next_

    def __repr__(self) -> str:
        return f"Cont.bind({self.source!r}, ...)"


class _Catch[A](Cont[Result[A, Exception]]):
    __slots__ = ("source",)

    def __init__(self, source: Cont[A]) -> None:
        self.source = source


class _CallCC[A](Cont[A]):
    __slots__ = ("body",)

    def __init__(self, body: Callable[[Callable[[A], Cont[typing.Any]]], Cont[A]]) -> None:
        self.body = body


class _Jump(Cont[typing.Any]):
    """Produced by an escape: replace the frame stack, deliver value."""

    __slots__ = ("frames", "value")

    def __init__(self, frames: _Frame | None, value: typing.Any) -> None:
        self.frames = frames
        self.value = value


class _Raw[A](Cont[A]):
    __slots__ = ("fn",)

    def __init__(self, fn: Raw[A]) -> None:
        self.fn = fn


class _Frame:
    """One entry of the persistent frame stack (cons cell)."""

    __slots__ = ("next", "catching", "rest")

    def __init__(
        self,
        next_: Callable[[typing.Any], Cont[typing.Any]] | None,
        catching: bool,
        rest: _Frame | None,
    ) -> None:
        self.next = next_
        self.catching = catching
        self.rest = rest


class _Escape:
    """First-class escape continuation handed to the body of callcc."""

    __slots__ = ("_frames",)

    def __init__(self, frames: _Frame | None) -> None:
        self._frames = frames

    def __call__(self, value: typing.Any = None) -> Cont[typing.Any]:
        return _Jump(self._frames, value)


class _Resumption:
    """One-shot callback pair handed to a raw CPS function."""

    __slots__ = ("_frames", "_on_success", "_on_failure", "_resolved", "_driving", "_outcome")

    def __init__(self, frames: _Frame | None, on_success: OnSuccess[typing.Any], on_failure: OnFailure) -> None:
        self._frames = frames
        self._on_success = on_success
        self._on_failure = on_failure
        self._resolved = False
        self._driving = True
        self._outcome: Cont[typing.Any] | None = None

    def start(self, fn: Raw[typing.Any]) -> Cont[typing.Any] | None:
        """Call fn. Returns the outcome if it resolved synchronously, else None."""
        try:
            fn(self._succeed, self._fail)
        except ContinuationError:
            raise
        except Exception as exc:
            if self._resolved:
                logger.debug("Raw continuation raised %r after resolving, fault ignored", exc)
                self._driving = False
                return self._outcome
            self._resolved = True
            self._driving = False
            logger.debug("Raw continuation raised %r, routing to failure", exc)
            return _Throw(exc)
        self._driving = False
        return self._outcome

    def _succeed(self, value: typing.Any) -> None:
        self._resolve(_Pure(value), "on_success")

    def _fail(self, error: Exception) -> None:
        self._resolve(_Throw(error), "on_failure")

    def _resolve(self, outcome: Cont[typing.Any], callback: str) -> None:
        if self._resolved:
            raise ContinuationError(callback)
        self._resolved = True
        if self._driving:
            self._outcome = outcome
        else:
            _drive(outcome, self._frames, self._on_success, self._on_failure)


def _protected(f: Callable[[typing.Any], typing.Any], arg: typing.Any) -> Cont[typing.Any]:
    """Evaluate f(arg); a raised fault becomes a throw."""
    try:
        produced = f(arg)
    except Exception as exc:
        logger.debug("Fault captured at continuation boundary: %r", exc)
        return _Throw(exc)
    if not isinstance(produced, Cont):
        fault = TypeError(f"Continuation step must return Cont, got {produced!r}")
        logger.debug("Fault captured at continuation boundary: %r", fault)
        return _Throw(fault)
    return produced


def _drive(
    current: Cont[typing.Any],
    frames: _Frame | None,
    on_success: OnSuccess[typing.Any],
    on_failure: OnFailure,
) -> None:
    while True:
        if isinstance(current, _Bind):
            frames = _Frame(current.next, False, frames)
            current = current.source
        elif isinstance(current, _Pure):
            value = current.value
            while frames is not None and frames.catching:
                value = Ok(value)
                frames = frames.rest
            if frames is None:
                on_success(value)
                return
            next_ = frames.next
            frames = frames.rest
            current = _protected(next_, value)  # type: ignore[arg-type]
        elif isinstance(current, _Throw):
            while frames is not None and not frames.catching:
                frames = frames.rest
            if frames is None:
                on_failure(current.error)
                return
            frames = frames.rest
            current = _Pure(Error(current.error))
        elif isinstance(current, _Catch):
            frames = _Frame(None, True, frames)
            current = current.source
        elif isinstance(current, _CallCC):
            current = _protected(current.body, _Escape(frames))
        elif isinstance(current, _Jump):
            frames = current.frames
            current = _Pure(current.value)
        elif isinstance(current, _Raw):
            resumed = _Resumption(frames, on_success, on_failure).start(current.fn)
            if resumed is None:
                return
            current = resumed
        else:
            raise TypeError(f"Unknown continuation node {current!r}")


# ============================================================================
# Public API
# ============================================================================


def run_cont[A](m: Cont[A], on_success: OnSuccess[A], on_failure: OnFailure) -> None:
    """Run m, invoking exactly one of the callbacks exactly once.

    The callbacks run outside the protected region: a fault they raise
    propagates to the caller of run_cont.
    """
    _drive(m, None, on_success, on_failure)


def throw(error: Exception) -> Cont[typing.Never]:
    """Computation that fails with error."""
    return _Throw(error)


def callcc[A](body: Callable[[Callable[[A], Cont[typing.Any]]], Cont[A]]) -> Cont[A]:
    """Call with current continuation."""
    return _CallCC(body)


def catch[A](m: Cont[A]) -> Cont[Result[A, Exception]]:
    """Turn the failure path of m into a value: Ok(value) or Error(exc)."""
    return _Catch(m)


def try_with[A](m: Cont[A], handler: Callable[[Exception], Cont[A]]) -> Cont[A]:
    def recover(outcome: Result[A, Exception]) -> Cont[A]:
        match outcome:
            case Ok(value):
                return _Pure(value)
            case Error(error):
                return handler(error)
            case _:
                raise TypeError(f"Unexpected outcome {outcome!r}")

    return _Bind(_Catch(m), recover)


def try_finally[A](m: Cont[A], finalizer: Callable[[], None]) -> Cont[A]:
    """Run finalizer after m on both paths; a failure of m is re-thrown."""

    def finish(outcome: Result[A, Exception]) -> Cont[A]:
        finalizer()
        match outcome:
            case Ok(value):
                return _Pure(value)
            case Error(error):
                return _Throw(error)
            case _:
                raise TypeError(f"Unexpected outcome {outcome!r}")

    return _Bind(_Catch(m), finish)


class ContMonad(Guarded):
    """The continuation monad."""

    __slots__ = ()

    def wrap(self, value: typing.Any, /) -> Cont[typing.Any]:
        return _Pure(value)

    def chain(
        self,
        m: Cont[typing.Any],
        f: Callable[[typing.Any], Cont[typing.Any]],
        /,
    ) -> Cont[typing.Any]:
        return _Bind(m, f)

    def try_with(
        self,
        m: Cont[typing.Any],
        handler: Callable[[Exception], Cont[typing.Any]],
        /,
    ) -> Cont[typing.Any]:
        return try_with(m, handler)

    def try_finally(
        self,
        m: Cont[typing.Any],
        finalizer: Callable[[], None],
        /,
    ) -> Cont[typing.Any]:
        return try_finally(m, finalizer)


cont = ContMonad()

__all__ = (
    "Cont",
    "ContMonad",
    "callcc",
    "catch",
    "cont",
    "run_cont",
    "throw",
    "try_finally",
    "try_with",
)
