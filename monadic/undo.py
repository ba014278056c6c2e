"""
Undo / redo
===========

Linear edit history as State computations over a History value.

    h = new_history(0)
    program = push(1).then(lambda _: push(2)).then(lambda _: undo())
    ok, h = program.run(h)        # ok is True, h.current == 1, h.redos == (2,)

The bottom entry of `undos` is the initial value and is never popped, so
undo on a fresh history is refused (False, history unchanged).
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from .kinds.state import State, get, gets, put, state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class History[A]:
    """Current value plus undo and redo stacks, most recent first."""

    current: A
    undos: tuple[A, ...]
    redos: tuple[A, ...] = ()


def new_history[A](initial: A) -> History[A]:
    return History(initial, (initial,), ())


def get_history[A]() -> State[History[A], History[A]]:
    return get()


def get_current[A]() -> State[History[A], A]:
    return gets(lambda h: h.current)


def push[A](value: A) -> State[History[A], None]:
    """Make value current. The old current becomes undoable; redos are cleared."""
    return get().then(lambda h: put(History(value, (h.current, *h.undos), ())))


def combine_with_current[A, B](f: Callable[[A, B], A], value: B) -> State[History[A], None]:
    """Push f(current, value)."""
    return get_current().then(lambda current: push(f(current, value)))


def _undo_step[A](h: History[A]) -> State[History[A], bool]:
    if len(h.undos) <= 1:
        logger.debug("Undo refused: only the initial value is left")
        return state.wrap(False)
    previous, *rest = h.undos
    return put(History(previous, tuple(rest), (h.current, *h.redos))).map(lambda _: True)


def _redo_step[A](h: History[A]) -> State[History[A], bool]:
    if not h.redos:
        logger.debug("Redo refused: nothing to redo")
        return state.wrap(False)
    following, *rest = h.redos
    return put(History(following, (h.current, *h.undos), tuple(rest))).map(lambda _: True)


def undo[A]() -> State[History[A], bool]:
    """Step back. Returns whether anything was undone."""
    return get().then(_undo_step)


def redo[A]() -> State[History[A], bool]:
    """Step forward. Returns whether anything was redone."""
    return get().then(_redo_step)


def exec_history[A](m: State[History[A], typing.Any], history: History[A]) -> A:
    """Run m on history and return the final current value."""
    return m.exec(history).current


__all__ = (
    "History",
    "combine_with_current",
    "exec_history",
    "get_current",
    "get_history",
    "new_history",
    "push",
    "redo",
    "undo",
)
