from __future__ import annotations

from _infra import banner, run

from monadic import Coroutine
from monadic.kinds.continuation import cont


def worker(name: str, rounds: int):
    def task(yield_):
        def step(index: int):
            if index == rounds:
                return cont.wrap(None)
            return (
                cont.delay(lambda: cont.wrap(print(f"{name}: step {index}")))
                .then(lambda _: yield_())
                .then(lambda _: step(index + 1))
            )

        return step(0)

    return task


def main() -> None:
    banner("03_coroutines: round-robin tasks over callcc")

    scheduler = Coroutine()
    scheduler.submit(worker("reader", 3))
    scheduler.submit(worker("parser", 2))
    scheduler.submit(worker("writer", 1))
    steps = scheduler.run_all()
    print(f"run() calls: {steps}")


if __name__ == "__main__":
    run(main)
