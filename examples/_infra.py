from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from monadic.kinds.result import Error, Ok, Result  # noqa: E402


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    age: int
    email: str


def _empty_users() -> dict[int, User]:
    return {}


@dataclass(slots=True)
class FakeDirectory:
    users: dict[int, User] = field(default_factory=_empty_users)

    def find(self, user_id: int) -> Result[User, str]:
        user = self.users.get(user_id)
        if user is None:
            return Error(f"no user {user_id}")
        return Ok(user)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    main()
