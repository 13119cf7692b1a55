from .backtracking import SearchLimitReached, SubSolver, budget_ceiling, extend_translation

__all__ = [
    "SearchLimitReached",
    "SubSolver",
    "budget_ceiling",
    "extend_translation",
]
