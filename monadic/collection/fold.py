"""
Fold combinators
================

Effectful fold с wrap + chain паттерном.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._types import Step
from ..core.apply import Chain, Wrap

# ============================================================================
# Generic combinator (wrap + chain pattern)
# ============================================================================


def foldM[A, T](
    items: Iterable[A],
    step: Step[T, A, typing.Any],
    *,
    initial: T,
    wrap: Wrap,
    chain: Chain,
) -> typing.Any:
    """
    Thread `initial` through `items` left to right: acc' = chain(acc, a -> step(a, item)).

    Short-circuits exactly as `chain` does: Nothing/Error stop the fold,
    State/Writer visit every item.
    """

    def step_with(item: A) -> Callable[[T], typing.Any]:
        def run(acc: T) -> typing.Any:
            return step(acc, item)

        return run

    acc = wrap(initial)
    for item in items:
        acc = chain(acc, step_with(item))
    return acc


__all__ = ("foldM",)
