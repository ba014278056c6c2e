from .bracket import bracketM, usingM
from .loop import for_eachM, whenM, while_M

__all__ = (
    # Resource scoping
    "bracketM",
    "usingM",
    # Loops
    "for_eachM",
    "whenM",
    "while_M",
)
