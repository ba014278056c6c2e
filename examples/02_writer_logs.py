from __future__ import annotations

from _infra import FakeDirectory, User, banner, run

from monadic.kinds.result import Error
from monadic.writer import Log, Writer, listen, tell, writer


def lookup(directory: FakeDirectory, user_id: int) -> Writer[User | None, Log[str]]:
    """
    "Pure" Writer function: the value plus what happened, no side effects.
    """
    found = directory.find(user_id)
    if isinstance(found, Error):
        return tell(f"lookup failed: {found.error}").then(lambda _: writer.wrap(None))
    return tell(f"found {user_id}").then(lambda _: writer.wrap(found.value))


def main() -> None:
    banner("02_writer_logs: Writer monad (value + log)")

    directory = FakeDirectory({7: User(7, "grace", 45, "grace@example.com")})

    program = writer.fold(
        [7, 8],
        lambda names, user_id: lookup(directory, user_id).map(
            lambda user: [*names, user.name] if user is not None else names
        ),
        initial=[],
    ).with_log("done")

    out = listen(program).run()
    (names, seen), log = out
    print(f"names: {names!r}")
    print(f"log: {list(log)!r}")
    assert seen == log


if __name__ == "__main__":
    run(main)
