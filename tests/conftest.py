"""
Pytest configuration for monadic tests.

Provides a parameterized law harness: every computation kind together with
sample computations, two Kleisli arrows, and a `run` function that turns a
computation into a plain comparable value. The same law tests run against
every kind.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from monadic import Monad
from monadic.kinds.async_ import Async, async_, run_async
from monadic.kinds.continuation import Cont, cont, run_cont, throw
from monadic.kinds.distribution import distribution, uniform
from monadic.kinds.option import Nothing, Some, option
from monadic.kinds.reader import Reader, asks, reader
from monadic.kinds.result import Error, Ok, result
from monadic.kinds.state import State, get, state
from monadic.kinds.validation import failure, validation
from monadic.writer import Log, Writer, tell, writer

BOOM = RuntimeError("boom")


@dataclass(frozen=True)
class KindCase:
    """Everything a law test needs to know about one kind."""

    name: str
    kind: Monad
    samples: list[Any]
    f: Callable[[Any], Any]
    g: Callable[[Any], Any]
    run: Callable[[Any], Any] = field(default=lambda m: m)


def run_continuation(m: Cont[Any]) -> tuple[str, Any]:
    """Run a Cont and report which callback fired, asserting exactly one call."""
    outcomes: list[tuple[str, Any]] = []
    run_cont(m, lambda v: outcomes.append(("ok", v)), lambda e: outcomes.append(("error", e)))
    assert len(outcomes) == 1
    return outcomes[0]


def _bump_state(x: int) -> State[int, int]:
    return State(lambda s: (x + s, s + 1))


def _writer_step(x: int) -> Writer[int, Log[str]]:
    return tell(f"saw {x}").then(lambda _: writer.wrap(x * 2))


def _even_only(x: int) -> Any:
    return Ok(x // 2) if x % 2 == 0 else Error("odd")


CASES = [
    KindCase(
        name="option",
        kind=option,
        samples=[Some(3), Some(4), Nothing()],
        f=lambda x: Some(x + 1),
        g=lambda x: Some(x * 10) if x % 2 == 0 else Nothing(),
    ),
    KindCase(
        name="result",
        kind=result,
        samples=[Ok(3), Ok(4), Error("bad")],
        f=lambda x: Ok(x + 1),
        g=_even_only,
    ),
    KindCase(
        name="validation",
        kind=validation,
        samples=[Ok(3), failure("bad")],
        f=lambda x: Ok(x + 1),
        g=lambda x: Ok(x) if x > 3 else failure("small"),
    ),
    KindCase(
        name="state",
        kind=state,
        samples=[state.wrap(3), get(), _bump_state(7)],
        f=_bump_state,
        g=lambda x: State(lambda s: (x * s, s * 2)),
        run=lambda m: m.run(5),
    ),
    KindCase(
        name="reader",
        kind=reader,
        samples=[reader.wrap(3), asks(lambda env: env["n"])],
        f=lambda x: asks(lambda env: x + env["n"]),
        g=lambda x: Reader(lambda env: (x, env["tag"])),
        run=lambda m: m.run({"n": 2, "tag": "t"}),
    ),
    KindCase(
        name="writer",
        kind=writer,
        samples=[writer.wrap(3), tell("start").then(lambda _: writer.wrap(1))],
        f=_writer_step,
        g=lambda x: tell(f"got {x}").then(lambda _: writer.wrap(x + 1)),
        run=lambda m: m.run(),
    ),
    KindCase(
        name="async",
        kind=async_,
        samples=[async_.wrap(3), Async(lambda: asyncio.sleep(0, result=4))],
        f=lambda x: async_.wrap(x + 1),
        g=lambda x: Async(lambda: asyncio.sleep(0, result=x * 2)),
        run=run_async,
    ),
    KindCase(
        name="cont",
        kind=cont,
        samples=[cont.wrap(3), throw(BOOM)],
        f=lambda x: cont.wrap(x + 1),
        g=lambda x: throw(BOOM) if x > 100 else cont.wrap(x * 3),
        run=run_continuation,
    ),
    KindCase(
        name="distribution",
        kind=distribution,
        samples=[distribution.wrap(1), uniform([1, 2, 3])],
        f=lambda x: uniform([x, x + 1]),
        g=lambda x: uniform([x * 10]) if x % 2 else uniform([0, x]),
        run=tuple,
    ),
]


@pytest.fixture(params=CASES, ids=[case.name for case in CASES])
def case(request: pytest.FixtureRequest) -> KindCase:
    """Parameterized fixture providing every computation kind."""
    return request.param


@pytest.fixture
def events() -> list[str]:
    """Shared side-effect log for ordering assertions."""
    return []


@pytest.fixture
def outcome_of() -> Callable[[Cont[Any]], tuple[str, Any]]:
    """Runner reporting ("ok", value) or ("error", exc) for a continuation."""
    return run_continuation
