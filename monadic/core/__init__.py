"""
Core
====

Capability contract (Monad) + generic combinators derived from wrap/chain.
"""

from .apply import applyM, lift2M, lift3M, mapM, then_leftM, then_rightM
from .compose import joinM, kleisli_backM, kleisliM, thenM
from .kind import Guarded, Monad

__all__ = (
    "Guarded",
    "Monad",
    "applyM",
    "joinM",
    "kleisliM",
    "kleisli_backM",
    "lift2M",
    "lift3M",
    "mapM",
    "thenM",
    "then_leftM",
    "then_rightM",
)
