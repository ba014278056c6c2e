"""
Computation kinds
=================

Every kind implements wrap + chain and inherits the combinator surface
from core.Monad. Each submodule carries its kind singleton and helpers:

    from monadic.kinds.state import get, put, state
    state.fold(items, step, initial=0)
"""

from .async_ import Async, AsyncMonad
from .continuation import Cont, ContMonad
from .distribution import CoinSide, Distribution, DistributionMonad, Outcome
from .option import Nothing, Option, OptionMonad, Some
from .reader import Reader, ReaderMonad
from .result import Error, Ok, Result, ResultMonad
from .state import State, StateMonad
from .validation import ValidationApplicative

__all__ = (
    "Async",
    "AsyncMonad",
    "CoinSide",
    "Cont",
    "ContMonad",
    "Distribution",
    "DistributionMonad",
    "Error",
    "Nothing",
    "Ok",
    "Option",
    "OptionMonad",
    "Outcome",
    "Reader",
    "ReaderMonad",
    "Result",
    "ResultMonad",
    "Some",
    "State",
    "StateMonad",
    "ValidationApplicative",
)
