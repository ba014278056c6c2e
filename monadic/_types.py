"""
Core type definitions for monadic.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Kleisli = function returning a computation instead of a plain value
type Kleisli[A, MB] = Callable[[A], MB]

# Step = one step of an effectful fold: (accumulator, item) -> computation
type Step[T, A, M] = Callable[[T, A], M]

# Callbacks handed to a continuation when it is run
type OnSuccess[A] = Callable[[A], None]
type OnFailure = Callable[[Exception], None]

# NoError = type representing "never fails" semantic
# NOTE: Never (bottom type) вместо None: значение не может быть создано.
type NoError = typing.Never

__all__ = (
    "Kleisli",
    "NoError",
    "OnFailure",
    "OnSuccess",
    "Predicate",
    "Step",
)
