"""
Cooperative coroutines
======================

Single-threaded round-robin scheduler built on the continuation kind.

A task is a function that receives a `yield_` primitive and returns a
Cont[None]. Running `yield_()` inside the task captures the rest of the
task with callcc, enqueues it behind every pending task, and hands control
to the task at the front of the queue:

    scheduler = Coroutine()

    def worker(name):
        def task(yield_):
            return (
                cont.delay(lambda: cont.wrap(log.append(name + "a")))
                .then(lambda _: yield_())
                .then(lambda _: cont.wrap(log.append(name + "b")))
            )
        return task

    for name in ("t1", "t2", "t3"):
        scheduler.submit(worker(name))
    scheduler.run_all()        # t1a t2a t3a t1b t2b t3b

A fault escaping a task is fatal to run() and propagates to its caller.
"""

from __future__ import annotations

import collections
import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._errors import SchedulerEmptyError
from .kinds.continuation import Cont, callcc, cont, run_cont

logger = logging.getLogger(__name__)

# yield_ primitive handed to every task
type Yield = Callable[[], Cont[None]]

type Task = Callable[[Yield], Cont[None]]


@dataclass(frozen=True, slots=True)
class SchedulerPolicy:
    """
    Scheduler configuration.

    max_steps bounds the number of run() calls made by run_all();
    None means run until the queue is empty.
    """

    max_steps: int | None = None

    def __post_init__(self) -> None:
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError("SchedulerPolicy.max_steps must be >= 1")


def _ignore(_: typing.Any) -> None:
    return None


def _reraise(error: Exception) -> typing.NoReturn:
    raise error


class Coroutine:
    """FIFO queue of suspended continuations."""

    __slots__ = ("_policy", "_tasks")

    def __init__(self, policy: SchedulerPolicy | None = None) -> None:
        self._policy = policy if policy is not None else SchedulerPolicy()
        self._tasks: collections.deque[Cont[None]] = collections.deque()

    @property
    def policy(self) -> SchedulerPolicy:
        return self._policy

    @property
    def pending(self) -> int:
        """Number of tasks waiting to be started or resumed."""
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __bool__(self) -> bool:
        return bool(self._tasks)

    def submit(self, task: Task) -> None:
        """Enqueue task. It does not start until run()."""
        tasks = self._tasks

        def body(exit_: Callable[[None], Cont[typing.Any]]) -> Cont[None]:
            def yield_() -> Cont[None]:
                def suspend(resume: Callable[[None], Cont[typing.Any]]) -> Cont[None]:
                    tasks.append(resume(None))
                    return exit_(None)

                return callcc(suspend)

            return task(yield_)

        def switch(_: None) -> Cont[None]:
            if tasks:
                return tasks.popleft()
            return cont.wrap(None)

        tasks.append(callcc(body).then(switch))
        logger.debug("Task submitted, %d pending", len(tasks))

    def run(self) -> None:
        """Run the front task until the queue drains or a fault escapes."""
        if not self._tasks:
            raise SchedulerEmptyError()
        logger.debug("Running task, %d pending", len(self._tasks) - 1)
        run_cont(self._tasks.popleft(), _ignore, _reraise)
        logger.debug("Run finished, %d pending", len(self._tasks))

    def run_all(self) -> int:
        """Call run() until quiescence or policy.max_steps; returns the number of calls."""
        steps = 0
        limit = self._policy.max_steps
        while self._tasks and (limit is None or steps < limit):
            self.run()
            steps += 1
        if self._tasks:
            logger.debug("Stopped after %d steps with %d tasks pending", steps, len(self._tasks))
        return steps

    def __repr__(self) -> str:
        return f"Coroutine(pending={len(self._tasks)}, policy={self._policy!r})"


__all__ = (
    "Coroutine",
    "SchedulerPolicy",
    "Task",
    "Yield",
)
