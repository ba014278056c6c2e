"""
Composable effectful computations.

One combinator algebra (map, apply, lift2, *>, <*, >=>, <=<, fold, traverse,
loops, bracket) shared by many computation kinds: Option, Result,
Validation, State, Reader, Writer, Async, Cont and Distribution. On top of them:
undo/redo history (State) and a cooperative scheduler (Cont).

Architecture:
- Generic combinators (*M functions) take the primitives they need as
  keyword arguments (wrap=, chain=, ap=) and work with any kind
- core.Monad bundles them: a kind implements wrap + chain and inherits
  the whole surface as methods
- Each kind module exposes its singleton (option, result, state, ...)
"""

# Core types
from ._types import Kleisli, NoError, OnFailure, OnSuccess, Predicate, Step

# Internal helpers (for custom kinds)
from . import _helpers

# Monoids
from .monoid import (
    ALL,
    ANY,
    ENDO,
    LIST,
    PRODUCT,
    SUM,
    AllMonoid,
    AnyMonoid,
    DualMonoid,
    EndoMonoid,
    ListMonoid,
    Monoid,
    OptionMonoid,
    ProductMonoid,
    SumMonoid,
)

# Capability contract + generic combinators
from .core import (
    Guarded,
    Monad,
    applyM,
    joinM,
    kleisli_backM,
    kleisliM,
    lift2M,
    lift3M,
    mapM,
    then_leftM,
    then_rightM,
    thenM,
)
from .collection import foldM, sequenceM, traverseM
from .control import bracketM, for_eachM, usingM, whenM, while_M

# Kinds
from .kinds import (
    Async,
    AsyncMonad,
    CoinSide,
    Cont,
    ContMonad,
    Distribution,
    DistributionMonad,
    Error,
    Nothing,
    Ok,
    Option,
    OptionMonad,
    Outcome,
    Reader,
    ReaderMonad,
    Result,
    ResultMonad,
    Some,
    State,
    StateMonad,
    ValidationApplicative,
)
from .kinds.async_ import async_, run_async
from .kinds.continuation import callcc, catch, cont, run_cont, throw
from .kinds.distribution import distribution
from .kinds.option import option
from .kinds.reader import reader
from .kinds.result import result
from .kinds.state import state
from .kinds.validation import validation

# Writer monad
from .writer import LOG, Log, LogMonoid, Writer, WriterMonad, WriterOutput

# Undo / redo
from .undo import History, new_history

# Scheduler
from .coroutine import Coroutine, SchedulerPolicy

# Errors
from ._errors import ContinuationError, EmptyDistributionError, SchedulerEmptyError, UnwrapError

__all__ = (
    # Types
    "Kleisli",
    "NoError",
    "OnFailure",
    "OnSuccess",
    "Predicate",
    "Step",
    # Internal helpers (for custom kinds)
    "_helpers",
    # Monoids
    "ALL",
    "ANY",
    "ENDO",
    "LIST",
    "PRODUCT",
    "SUM",
    "AllMonoid",
    "AnyMonoid",
    "DualMonoid",
    "EndoMonoid",
    "ListMonoid",
    "Monoid",
    "OptionMonoid",
    "ProductMonoid",
    "SumMonoid",
    # Core
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
    # Collection / control - Generic
    "bracketM",
    "foldM",
    "for_eachM",
    "sequenceM",
    "traverseM",
    "usingM",
    "whenM",
    "while_M",
    # Kinds
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
    # Kind singletons
    "async_",
    "cont",
    "distribution",
    "option",
    "reader",
    "result",
    "state",
    "validation",
    # Async
    "run_async",
    # Continuation
    "callcc",
    "catch",
    "run_cont",
    "throw",
    # Writer
    "LOG",
    "Log",
    "LogMonoid",
    "Writer",
    "WriterMonad",
    "WriterOutput",
    # Undo / redo
    "History",
    "new_history",
    # Scheduler
    "Coroutine",
    "SchedulerPolicy",
    # Errors
    "ContinuationError",
    "EmptyDistributionError",
    "SchedulerEmptyError",
    "UnwrapError",
)
