"""
Log - Моноидный аккумулятор для Writer
======================================
"""

from __future__ import annotations

from collections.abc import Iterable

from ..monoid import Monoid


class Log[A](list[A]):
    """
    Log accumulator for the Writer monad.

    Обёртка над list с моноидными операциями:
    - empty: пустой лог (просто Log())
    - combine: конкатенация логов
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: list[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append). Neither operand is mutated.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """Append single item, equivalent to self.combine(Log.of(item))."""
        result: Log[A] = Log(self)
        result.append(item)
        return result

    def __repr__(self) -> str:
        return f"Log({list(self)!r})"


class LogMonoid[A](Monoid[Log[A]]):
    """Monoid instance for Log, the default Writer accumulator."""

    __slots__ = ()

    @property
    def identity(self) -> Log[A]:
        return Log()

    def combine(self, a: Log[A], b: Log[A], /) -> Log[A]:
        return Log([*a, *b])

    def concat(self, items: Iterable[Log[A]], /) -> Log[A]:
        return Log(item for part in items for item in part)


LOG: LogMonoid[object] = LogMonoid()

__all__ = ("LOG", "Log", "LogMonoid")
