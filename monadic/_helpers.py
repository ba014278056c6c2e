"""Internal helpers for monadic.

Small function-level building blocks shared by the combinator modules.
These are not part of the public API but can be used for custom kinds."""

from __future__ import annotations

import typing
from collections.abc import Callable


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def keep_left[A, B](a: A, b: B) -> A:
    """Projection used by discard-right sequencing (<*)."""
    _ = b
    return a


def keep_right[A, B](a: A, b: B) -> B:
    """Projection used by discard-left sequencing (*>)."""
    _ = a
    return b


def curry2[A, B, C](f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """Turn a two-argument function into a chain of one-argument functions."""

    def outer(a: A) -> Callable[[B], C]:
        def inner(b: B) -> C:
            return f(a, b)

        return inner

    return outer


def curry3[A, B, C, D](
    f: Callable[[A, B, C], D],
) -> Callable[[A], Callable[[B], Callable[[C], D]]]:
    """Three-argument variant of curry2."""

    def outer(a: A) -> Callable[[B], Callable[[C], D]]:
        return curry2(lambda b, c: f(a, b, c))

    return outer


type Stack[T] = tuple[T, Stack[T]] | None


def push[T](stack: Stack[T], item: T) -> Stack[T]:
    """Persistent push: O(1), the old stack is shared, never mutated."""
    return (item, stack)


def unwind[T](stack: Stack[T]) -> list[T]:
    """Items of a pushed stack in push order."""
    items: list[T] = []
    while stack is not None:
        item, stack = stack
        items.append(item)
    items.reverse()
    return items


def close_resource(resource: typing.Any) -> None:
    """Release a resource acquired by `using`. None is accepted and ignored."""
    if resource is not None:
        resource.close()


__all__ = (
    "Stack",
    "close_resource",
    "curry2",
    "curry3",
    "identity",
    "keep_left",
    "keep_right",
    "push",
    "unwind",
)
