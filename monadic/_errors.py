from __future__ import annotations

import typing


class ContinuationError(RuntimeError):
    """A raw continuation invoked its callbacks more than once."""

    callback: str

    def __init__(self, callback: str) -> None:
        self.callback = callback
        super().__init__(f"Continuation resumed twice (second call to {callback})")


class SchedulerEmptyError(LookupError):
    """run() was called with no pending task."""

    def __init__(self) -> None:
        super().__init__("No pending task to run")


class UnwrapError(ValueError):
    """unwrap() on an absent or failed value."""

    payload: typing.Any

    def __init__(self, payload: typing.Any) -> None:
        self.payload = payload
        super().__init__(f"Called unwrap on {payload!r}")


class EmptyDistributionError(ValueError):
    """A uniform distribution needs at least one value."""

    def __init__(self) -> None:
        super().__init__("Cannot build a uniform distribution over zero values")


__all__ = (
    "ContinuationError",
    "EmptyDistributionError",
    "SchedulerEmptyError",
    "UnwrapError",
)
