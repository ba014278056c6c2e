"""
WriterOutput - value with accumulated log
=========================================
"""

from __future__ import annotations

import typing


class WriterOutput[A, W]:
    """
    Value with accumulated writer log.

    This is the "unwrapped" form of Writer, produced by Writer.run().
    """

    __slots__ = ("_value", "_log")
    __match_args__ = ("value", "log")

    def __init__(self, value: A, log: W) -> None:
        self._value = value
        self._log = log

    @property
    def value(self) -> A:
        """The produced value."""
        return self._value

    @property
    def log(self) -> W:
        """The accumulated log."""
        return self._log

    def __iter__(self) -> typing.Iterator[typing.Any]:
        yield self._value
        yield self._log

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WriterOutput):
            return NotImplemented
        return self._value == other._value and self._log == other._log

    def __repr__(self) -> str:
        return f"WriterOutput({self._value!r}, log={self._log!r})"


__all__ = ("WriterOutput",)
