"""Continuation kind and its exception protocol."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from monadic import ContinuationError
from monadic.kinds.continuation import Cont, callcc, catch, cont, run_cont, throw
from monadic.kinds.result import Error, Ok

DEPTH = 10_000


def test_wrap_calls_success(outcome_of):
    """wrap(a) delivers a to on_success."""
    assert outcome_of(cont.wrap(5)) == ("ok", 5)


def test_throw_calls_failure_only():
    """throw(e) invokes on_failure(e) exactly once and never on_success."""
    error = ValueError("nope")
    successes: list[Any] = []
    failures: list[Exception] = []
    run_cont(throw(error), successes.append, failures.append)
    assert successes == []
    assert failures == [error]


def test_raise_inside_continuation_routes_to_failure(events):
    """A fault raised by a chained function skips every downstream step."""

    def explode(_: int) -> Cont[int]:
        raise KeyError("missing")

    m = cont.wrap(1).then(explode).then(lambda v: cont.wrap(events.append("downstream")))
    successes: list[Any] = []
    failures: list[Exception] = []
    run_cont(m, successes.append, failures.append)
    assert successes == []
    assert events == []
    assert len(failures) == 1
    assert isinstance(failures[0], KeyError)


def test_non_cont_return_is_a_failure(outcome_of):
    """A step that returns a plain value fails with TypeError."""
    kind, error = outcome_of(cont.wrap(1).then(lambda v: v + 1))
    assert kind == "error"
    assert isinstance(error, TypeError)


def test_failure_skips_map(outcome_of):
    """map is not applied on the failure path."""
    error = RuntimeError("x")
    assert outcome_of(throw(error).map(lambda v: v + 1)) == ("error", error)


def test_callback_faults_propagate_to_caller():
    """on_success runs outside the protected region."""

    def bad_success(_: int) -> None:
        raise RuntimeError("callback broke")

    with pytest.raises(RuntimeError, match="callback broke"):
        run_cont(cont.wrap(1), bad_success, lambda e: None)


def test_callcc_escape_abandons_rest(events, outcome_of):
    """Running the escape skips the remainder of the callcc body."""

    def body(escape):
        return escape("early").then(lambda _: cont.wrap(events.append("unreachable")))

    m = callcc(body).map(lambda v: f"got {v}")
    assert outcome_of(m) == ("ok", "got early")
    assert events == []


def test_callcc_without_escape_returns_normally(outcome_of):
    """A body that never escapes behaves like the body itself."""
    assert outcome_of(callcc(lambda escape: cont.wrap(3)).map(lambda v: v * 2)) == ("ok", 6)


def test_callcc_escape_from_nested_chain(outcome_of):
    """The escape can be used deep inside the body."""

    def search(escape):
        def visit(x: int) -> Cont[None]:
            return escape(x) if x == 7 else cont.wrap(None)

        return cont.for_each(range(100), visit).then(lambda _: cont.wrap(-1))

    assert outcome_of(callcc(search)) == ("ok", 7)


def test_catch_reifies_both_paths(outcome_of):
    """catch turns success into Ok and failure into Error."""
    error = ValueError("bad")
    assert outcome_of(catch(cont.wrap(1))) == ("ok", Ok(1))
    assert outcome_of(catch(throw(error))) == ("ok", Error(error))


def test_nested_catch(outcome_of):
    """Each catch frame wraps once."""
    assert outcome_of(catch(catch(cont.wrap(1)))) == ("ok", Ok(Ok(1)))


def test_try_with_recovers(outcome_of):
    """The handler replaces the failed computation."""
    m = cont.try_with(throw(ValueError("bad")), lambda exc: cont.wrap(f"handled {exc}"))
    assert outcome_of(m) == ("ok", "handled bad")


def test_try_finally_runs_and_rethrows(events, outcome_of):
    """The finalizer runs on both paths; the failure is not hidden."""
    error = ValueError("bad")
    assert outcome_of(cont.try_finally(cont.wrap(1), lambda: events.append("ok"))) == ("ok", 1)
    assert outcome_of(cont.try_finally(throw(error), lambda: events.append("failed"))) == ("error", error)
    assert events == ["ok", "failed"]


def test_finalizer_fault_is_reported(outcome_of):
    """A fault raised by the finalizer reaches on_failure."""

    def broken() -> None:
        raise RuntimeError("cleanup failed")

    kind, error = outcome_of(cont.try_finally(cont.wrap(1), broken))
    assert kind == "error"
    assert str(error) == "cleanup failed"


def test_using_closes_resource(outcome_of):
    """using closes the resource after the body runs."""

    class Resource:
        closed = False

        def close(self) -> None:
            self.closed = True

    resource = Resource()
    assert outcome_of(cont.using(resource, lambda r: cont.wrap(r.closed))) == ("ok", False)
    assert resource.closed


def test_left_nested_chain_is_stack_safe(outcome_of):
    """A fold of many binds runs in constant Python stack."""
    m = cont.fold(range(DEPTH), lambda acc, x: cont.wrap(acc + x), initial=0)
    assert outcome_of(m) == ("ok", sum(range(DEPTH)))


def test_right_nested_loop_is_stack_safe(outcome_of):
    """A recursive loop through chain does not grow the stack."""

    def loop(n: int) -> Cont[int]:
        if n == 0:
            return cont.wrap("done")
        return cont.wrap(n - 1).then(loop)

    assert outcome_of(loop(DEPTH)) == ("ok", "done")


def test_many_catch_frames_are_stack_safe(outcome_of):
    """Nested try_with layers unwind iteratively."""
    m: Cont[int] = throw(ValueError("deep"))
    for _ in range(DEPTH):
        m = cont.try_with(m, throw)
    kind, error = outcome_of(m)
    assert kind == "error"
    assert str(error) == "deep"


def test_from_callbacks_synchronous(outcome_of):
    """A raw CPS function resolving immediately."""
    m = Cont.from_callbacks(lambda ok, fail: ok(10)).map(lambda v: v + 1)
    assert outcome_of(m) == ("ok", 11)


def test_from_callbacks_deferred():
    """A raw CPS function may resolve after run_cont returned."""
    pending: list[Any] = []
    m = Cont.from_callbacks(lambda ok, fail: pending.append(ok)).map(lambda v: v * 2)
    results: list[Any] = []
    run_cont(m, results.append, lambda e: results.append(("error", e)))
    assert results == []
    pending[0](21)
    assert results == [42]


def test_from_callbacks_resumed_twice():
    """A second callback is a ContinuationError."""

    def twice(ok, fail) -> None:
        ok(1)
        ok(2)

    with pytest.raises(ContinuationError) as info:
        run_cont(Cont.from_callbacks(twice), lambda v: None, lambda e: None)
    assert info.value.callback == "on_success"


def test_from_callbacks_raise_routes_to_failure(outcome_of):
    """A raw function raising before resolving fails the computation."""

    def broken(ok, fail) -> None:
        raise OSError("io")

    kind, error = outcome_of(Cont.from_callbacks(broken))
    assert kind == "error"
    assert isinstance(error, OSError)


def test_run_method_matches_run_cont():
    """Cont.run is run_cont."""
    seen: list[Any] = []
    cont.wrap("v").run(seen.append, seen.append)
    assert seen == ["v"]


def test_from_callbacks_raise_after_resolving(outcome_of):
    """A fault raised after ok() is ignored; the resolved value is delivered once."""

    def resolve_then_raise(ok, fail) -> None:
        ok(7)
        raise OSError("after the fact")

    assert outcome_of(Cont.from_callbacks(resolve_then_raise).map(lambda v: v + 1)) == ("ok", 8)


def test_from_callbacks_fail_then_raise(outcome_of):
    """The failure passed to fail() wins over a later raise."""
    error = ValueError("first")

    def fail_then_raise(ok, fail) -> None:
        fail(error)
        raise OSError("second")

    assert outcome_of(Cont.from_callbacks(fail_then_raise)) == ("error", error)


def test_non_cont_step_is_logged(outcome_of, caplog):
    """A step returning a plain value fails with TypeError and is logged at DEBUG."""
    with caplog.at_level(logging.DEBUG, logger="monadic.kinds.continuation"):
        kind, error = outcome_of(cont.wrap(1).then(lambda x: x + 1))
    assert kind == "error"
    assert isinstance(error, TypeError)
    assert any("continuation boundary" in record.getMessage() for record in caplog.records)
