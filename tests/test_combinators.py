"""Monad laws and the shared combinator surface, run against every kind."""

from __future__ import annotations

import pytest

from monadic import applyM, foldM, kleisliM, lift2M, mapM, then_leftM, then_rightM
from monadic.kinds.distribution import distribution
from monadic.kinds.option import Nothing, Some, option
from monadic.kinds.result import Error, Ok, result
from monadic.kinds.state import State, get, modify, put, state
from monadic.kinds.validation import validation


def test_left_identity(case):
    """chain(wrap(a), f) == f(a)."""
    for a in (1, 2, 3):
        assert case.run(case.kind.chain(case.kind.wrap(a), case.f)) == case.run(case.f(a))


def test_right_identity(case):
    """chain(m, wrap) == m."""
    for m in case.samples:
        assert case.run(case.kind.chain(m, case.kind.wrap)) == case.run(m)


def test_associativity(case):
    """chain(chain(m, f), g) == chain(m, x -> chain(f(x), g))."""
    kind = case.kind
    for m in case.samples:
        left = kind.chain(kind.chain(m, case.f), case.g)
        right = kind.chain(m, lambda x: kind.chain(case.f(x), case.g))
        assert case.run(left) == case.run(right)


def test_map_matches_chain_wrap(case):
    """map(m, f) == chain(m, a -> wrap(f(a)))."""
    kind = case.kind
    for m in case.samples:
        assert case.run(kind.map(m, str)) == case.run(kind.chain(m, lambda a: kind.wrap(str(a))))


def test_kleisli_both_directions(case):
    """>=> and <=< compose the same arrows in mirrored order."""
    kind = case.kind
    forward = kind.kleisli(case.f, case.g)
    backward = kind.kleisli_back(case.g, case.f)
    for a in (1, 2):
        expected = case.run(kind.chain(case.f(a), case.g))
        assert case.run(forward(a)) == expected
        assert case.run(backward(a)) == expected


def test_join_flattens(case):
    """join(wrap(m)) == m."""
    kind = case.kind
    for m in case.samples:
        assert case.run(kind.join(kind.wrap(m))) == case.run(m)


def test_lift2_on_option():
    """lift2 applies the function only when both sides are present."""
    assert option.lift2(lambda a, b: a + b, Some(1), Some(2)) == Some(3)
    assert option.lift2(lambda a, b: a + b, Some(1), Nothing()) == Nothing()
    assert option.lift3(lambda a, b, c: a + b + c, Some(1), Some(2), Some(3)) == Some(6)


def test_discard_sequencing_keeps_one_side():
    """*> keeps the right value, <* keeps the left."""
    assert result.then_right(Ok(1), Ok(2)) == Ok(2)
    assert result.then_left(Ok(1), Ok(2)) == Ok(1)
    assert result.then_right(Error("a"), Ok(2)) == Error("a")
    assert result.then_left(Ok(1), Error("b")) == Error("b")


def test_apply_order_is_left_then_right():
    """Effects of apply run antecedent first."""
    trace = put("f").then(lambda _: state.wrap(lambda a: a))
    arg = modify(lambda s: s + "a").then(lambda _: state.wrap(1))
    value, final = state.apply(trace, arg).run("")
    assert value == 1
    assert final == "fa"


def test_then_right_runs_both_effects_in_order():
    """*> runs both state transitions left to right."""
    first = modify(lambda s: [*s, "first"])
    second = modify(lambda s: [*s, "second"]).then(lambda _: state.wrap("done"))
    assert state.then_right(first, second).run([]) == ("done", ["first", "second"])


def test_then_discards_first_value():
    """>>. sequences through chain."""
    assert option.then(Some(1), Some(2)) == Some(2)
    assert option.then(Nothing(), Some(2)) == Nothing()


def test_fold_threads_accumulator_left_to_right():
    """fold visits items in order."""
    m = option.fold([1, 2, 3], lambda acc, x: Some(acc * 10 + x), initial=0)
    assert m == Some(123)


def test_fold_short_circuits_on_failure(events):
    """A failing step stops the fold for short-circuiting kinds."""

    def step(acc: int, x: int):
        events.append(x)
        return Error(f"stop at {x}") if x == 2 else Ok(acc + x)

    assert result.fold([1, 2, 3], step, initial=0) == Error("stop at 2")
    assert events == [1, 2]


def test_fold_empty_is_wrapped_seed():
    """Folding nothing returns wrap(initial)."""
    assert result.fold([], lambda acc, x: Ok(acc + x), initial=7) == Ok(7)


def test_fold_visits_every_item_for_state():
    """State folds never stop early."""
    m = state.fold(range(5), lambda acc, x: modify(lambda s: s + 1).then(lambda _: state.wrap(acc + x)), initial=0)
    assert m.run(0) == (10, 5)


@pytest.mark.parametrize(
    ("items", "expected"),
    [
        ([Some(1), Some(2)], Some([1, 2])),
        ([Some(1), Nothing()], Nothing()),
        ([], Some([])),
    ],
)
def test_sequence_option(items, expected):
    """sequence collects present values in order."""
    assert option.sequence(items) == expected


def test_traverse_result():
    """traverse stops at the first failure for the plain result kind."""
    parse = lambda s: Ok(int(s)) if s.isdigit() else Error(s)  # noqa: E731
    assert result.traverse(["1", "2"], parse) == Ok([1, 2])
    assert result.traverse(["1", "x", "y"], parse) == Error("x")


def test_when_runs_only_on_condition():
    """when(False, m) is wrap(None)."""
    assert option.when(True, Some(1)) == Some(1)
    assert option.when(False, Nothing()) == Some(None)


def test_while_loop_over_state():
    """while_ re-checks its guard before every round."""
    counter = {"n": 0}

    def guard() -> bool:
        return counter["n"] < 3

    def body_step(s: list[int]) -> tuple[None, list[int]]:
        counter["n"] += 1
        return None, [*s, counter["n"]]

    m = state.while_(guard, State(body_step))
    assert m.exec([]) == [1, 2, 3]


def test_for_each_runs_body_per_item():
    """for_each sequences the bodies and discards their values."""
    m = state.for_each("abc", lambda ch: modify(lambda s: s + ch.upper()))
    assert m.run("") == (None, "ABC")


def test_delay_builds_lazily(events):
    """delay only builds the computation when it runs."""

    def build() -> State[int, int]:
        events.append("built")
        return get()

    m = state.delay(build)
    assert events == []
    assert m.run(4) == (4, 4)
    assert events == ["built"]


def test_free_functions_take_primitives_by_keyword():
    """The *M functions work with any wrap/chain pair."""
    wrap = option.wrap
    chain = option.chain
    assert mapM(Some(2), lambda x: x + 1, wrap=wrap, chain=chain) == Some(3)
    assert applyM(Some(str), Some(5), wrap=wrap, chain=chain) == Some("5")
    fmap = option.map
    ap = option.apply
    assert lift2M(max, Some(1), Some(9), fmap=fmap, ap=ap) == Some(9)
    assert then_rightM(Some(1), Some(2), fmap=fmap, ap=ap) == Some(2)
    assert then_leftM(Some(1), Some(2), fmap=fmap, ap=ap) == Some(1)
    assert foldM([1, 2], lambda acc, x: Some(acc + x), initial=0, wrap=wrap, chain=chain) == Some(3)
    halve = kleisliM(lambda x: Some(x * 2), lambda y: Some(y - 1), chain=chain)
    assert halve(5) == Some(9)


LOOP_DEPTH = 10_000

EAGER_LOOPS = [
    pytest.param(option, Some, Some(None), id="option"),
    pytest.param(result, Ok, Ok(None), id="result"),
    pytest.param(distribution, distribution.wrap, distribution.wrap(None), id="distribution"),
    pytest.param(validation, Ok, Ok(None), id="validation"),
]


@pytest.mark.parametrize(("kind", "present", "done"), EAGER_LOOPS)
def test_for_each_over_eager_kinds_is_stack_safe(kind, present, done):
    """for_each over ten thousand items does not recurse."""
    visited: list[int] = []

    def body(x: int):
        visited.append(x)
        return present(x)

    assert kind.for_each(range(LOOP_DEPTH), body) == done
    assert len(visited) == LOOP_DEPTH


@pytest.mark.parametrize(("kind", "present", "done"), EAGER_LOOPS)
def test_while_over_eager_kinds_is_stack_safe(kind, present, done):
    """while_ unrolls ten thousand rounds without recursing."""
    checks = {"n": 0}

    def guard() -> bool:
        checks["n"] += 1
        return checks["n"] <= LOOP_DEPTH

    assert kind.while_(guard, present("tick")) == done
    assert checks["n"] == LOOP_DEPTH + 1


def test_for_each_stops_at_first_absent_value():
    """A Nothing body short-circuits the rest of the loop."""
    visited: list[int] = []

    def body(x: int):
        visited.append(x)
        return Nothing() if x == 5_000 else Some(x)

    assert option.for_each(range(LOOP_DEPTH), body) == Nothing()
    assert visited == list(range(5_001))


def test_while_stops_on_error_body():
    """An Error body ends while_ after the first guard check."""
    checks = {"n": 0}

    def guard() -> bool:
        checks["n"] += 1
        return True

    assert result.while_(guard, Error("stop")) == Error("stop")
    assert checks["n"] == 1


def test_state_loops_are_stack_safe():
    """Deferred kinds build the next round at run time."""
    m = state.for_each(range(LOOP_DEPTH), lambda _: modify(lambda s: s + 1))
    assert m.exec(0) == LOOP_DEPTH

    counter = {"n": 0}

    def body_step(s: int) -> tuple[None, int]:
        counter["n"] += 1
        return None, s + 1

    looped = state.while_(lambda: counter["n"] < LOOP_DEPTH, State(body_step))
    assert looped.exec(0) == LOOP_DEPTH
