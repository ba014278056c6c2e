from __future__ import annotations

from _infra import FakeDirectory, User, banner, run

from monadic.kinds.result import Error, Ok, Result, result
from monadic.kinds.validation import failure, success, validation


def check_name(name: str) -> Result[str, list[str]]:
    return success(name) if name.strip() else failure("name is empty")


def check_age(age: int) -> Result[int, list[str]]:
    return success(age) if 0 <= age < 150 else failure(f"age {age} out of range")


def check_email(email: str) -> Result[str, list[str]]:
    return success(email) if "@" in email else failure(f"bad email {email!r}")


def main() -> None:
    banner("01_quickstart: chain stops at the first failure, lift3 collects all of them")

    directory = FakeDirectory({1: User(1, "ada", 36, "ada@example.com")})

    # Dependent steps: Result.chain
    greeting = result.map(directory.find(1), lambda user: f"hello, {user.name}")
    missing = result.chain(directory.find(2), lambda user: Ok(user.email))
    print(greeting, missing)

    # Independent checks: accumulate every failure
    candidate = validation.lift3(
        lambda name, age, email: User(2, name, age, email),
        check_name(""),
        check_age(200),
        check_email("nobody"),
    )
    match candidate:
        case Ok(user):
            print(f"ok: {user}")
        case Error(messages):
            for message in messages:
                print(f"invalid: {message}")


if __name__ == "__main__":
    run(main)
