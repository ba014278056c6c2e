from .fold import foldM
from .traverse import sequenceM, traverseM

__all__ = (
    # Generic
    "foldM",
    "sequenceM",
    "traverseM",
)
