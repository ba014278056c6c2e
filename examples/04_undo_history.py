from __future__ import annotations

from _infra import banner, run

from monadic.undo import combine_with_current, new_history, push, redo, undo


def main() -> None:
    banner("04_undo_history: edits as State computations")

    session = (
        push("hello")
        .then(lambda _: combine_with_current(lambda text, suffix: text + suffix, ", world"))
        .then(lambda _: undo())
        .then(lambda _: undo())
        .then(lambda _: redo())
    )
    redone, history = session.run(new_history(""))
    print(f"redo ok: {redone}, current: {history.current!r}, redos: {history.redos!r}")


if __name__ == "__main__":
    run(main)
