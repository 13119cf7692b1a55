from .config import VERSION
from .core import Corpus, SearchStep, Solution, encode, pattern_key
from .search import SubSolver

__version__ = VERSION

__all__ = [
    "Corpus",
    "SearchStep",
    "Solution",
    "SubSolver",
    "encode",
    "pattern_key",
]
