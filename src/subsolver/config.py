VERSION: str = "0.1.0"

# Bundled ranked word list, resolved against the subsolver package
DEFAULT_CORPUS_RESOURCE: str = "data/corpus.txt"

# Overrides the bundled corpus when -c is not given
CORPUS_ENV_VAR: str = "SUBSOLVER_CORPUS"

# Iterative deepening: budgets 0 .. max(MIN_BUDGET_CEILING, tokens // TOKENS_PER_BUDGET_STEP) - 1
MIN_BUDGET_CEILING: int = 3
TOKENS_PER_BUDGET_STEP: int = 10

# Search cutoffs; None means unlimited
DEFAULT_MAX_NODES: int | None = None
DEFAULT_MAX_SECONDS: float | None = None

# Report layout
SUBSTITUTIONS_PER_LINE: int = 5
