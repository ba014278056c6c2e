"""
Writer Monad
============

Writer - отложенное вычисление со значением и накопленным логом:
- Lazy (отложенные вычисления)
- Writer[W] (аккумуляция лога через Monoid, по умолчанию Log)
"""

from .log import LOG, Log, LogMonoid
from .monad import (
    Writer,
    WriterMonad,
    censor,
    exec_writer,
    listen,
    listens,
    pass_,
    tell,
    try_finally,
    try_with,
    writer,
)
from .output import WriterOutput

__all__ = (
    "LOG",
    "Log",
    "LogMonoid",
    "Writer",
    "WriterMonad",
    "WriterOutput",
    "censor",
    "exec_writer",
    "listen",
    "listens",
    "pass_",
    "tell",
    "try_finally",
    "try_with",
    "writer",
)
