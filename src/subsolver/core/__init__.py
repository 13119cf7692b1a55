from .patterns import encode, pattern_key
from .corpus import Corpus
from .results import SearchStep, Solution

__all__ = [
    "encode",
    "pattern_key",
    "Corpus",
    "SearchStep",
    "Solution",
]
