from __future__ import annotations

import logging
import sys
import time
from types import MappingProxyType
from typing import Callable, Optional

from subsolver.config import (
    DEFAULT_MAX_NODES,
    DEFAULT_MAX_SECONDS,
    MIN_BUDGET_CEILING,
    TOKENS_PER_BUDGET_STEP,
)
from subsolver.core.corpus import Corpus
from subsolver.core.results import SearchStep, Solution
from subsolver.core.utils import APOSTROPHE, apply_translation, order_tokens, tokenize

log = logging.getLogger(__name__)

StepObserver = Callable[[SearchStep], None]

# (translation, skipped tokens)
_Found = tuple[dict[str, str], tuple[str, ...]]


class SearchLimitReached(RuntimeError):
    """Raised inside the search when the node or time cutoff is exceeded."""


def budget_ceiling(token_count: int) -> int:
    """Number of unknown-word budgets tried: 0 .. ceiling - 1."""
    return max(MIN_BUDGET_CEILING, token_count // TOKENS_PER_BUDGET_STEP)


def extend_translation(
    translation: dict[str, str],
    cipher_word: str,
    candidate: str,
) -> Optional[dict[str, str]]:
    """
    Return a copy of translation that also maps cipher_word onto candidate,
    or None if that would break the one-to-one mapping.

    A cipher letter we have not seen yet may not take a plaintext letter that
    another cipher letter already owns; a letter we have seen must agree with
    the candidate.
    """
    new_trans = dict(translation)
    used = set(translation.values())
    for cipher_char, plain_char in zip(cipher_word, candidate):
        if cipher_char == APOSTROPHE:
            continue
        mapped = new_trans.get(cipher_char)
        if mapped is None:
            if plain_char in used:
                return None
            new_trans[cipher_char] = plain_char
            used.add(plain_char)
        elif mapped != plain_char:
            return None
    return new_trans


class SubSolver:
    """
    Solves monoalphabetic substitution ciphers by recursive search over a corpus.

    Words are fitted longest first. For each word every corpus candidate that
    agrees with the letters decided so far is tried in rank order; if none
    leads to a full solution the word is skipped, which costs one unit of the
    unknown-word budget. Budgets are tried from 0 upwards and the first
    success wins.
    """

    def __init__(
        self,
        corpus: Corpus,
        *,
        on_step: Optional[StepObserver] = None,
        keep_apostrophes: bool = False,
        max_nodes: int | None = DEFAULT_MAX_NODES,
        max_seconds: float | None = DEFAULT_MAX_SECONDS,
    ) -> None:
        if max_nodes is not None and max_nodes <= 0:
            raise ValueError("max_nodes must be a positive integer.")
        if max_seconds is not None and max_seconds <= 0:
            raise ValueError("max_seconds must be positive.")

        self.corpus = corpus
        self.on_step = on_step
        self.keep_apostrophes = keep_apostrophes
        self.max_nodes = max_nodes
        self.max_seconds = max_seconds

        # Per-solve state
        self._ciphertext = ""
        self._nodes = 0
        self._deadline: float | None = None

    def solve(self, ciphertext: str) -> Solution:
        self._ciphertext = ciphertext.upper()
        self._nodes = 0
        self._deadline = None
        if self.max_seconds is not None:
            self._deadline = time.perf_counter() + self.max_seconds

        words = order_tokens(tokenize(ciphertext, keep_apostrophes=self.keep_apostrophes))

        # One frame per token plus headroom for the caller
        old_limit = sys.getrecursionlimit()
        needed = len(words) + 200
        if needed > old_limit:
            sys.setrecursionlimit(needed)
        try:
            return self._deepen(words)
        finally:
            sys.setrecursionlimit(old_limit)

    def _deepen(self, words: list[str]) -> Solution:
        for budget in range(budget_ceiling(len(words))):
            log.debug("Trying unknown-word budget %d over %d tokens", budget, len(words))
            try:
                found = self._recursive_solve(words, 0, {}, (), budget)
            except SearchLimitReached as e:
                log.info("Search aborted at budget %d after %d nodes: %s", budget, self._nodes, e)
                return Solution(nodes=self._nodes, aborted=True)

            if found is not None:
                translation, skipped = found
                log.info(
                    "Solved at budget %d: letters=%d skipped=%d nodes=%d",
                    budget, len(translation), len(skipped), self._nodes,
                )
                return Solution(
                    translation=translation,
                    skipped=skipped,
                    budget=budget,
                    nodes=self._nodes,
                )

        log.info("No solution within %d budgets (nodes=%d)", budget_ceiling(len(words)), self._nodes)
        return Solution(nodes=self._nodes)

    def _check_limits(self) -> None:
        # A node is counted only once it is allowed to run
        if self.max_nodes is not None and self._nodes >= self.max_nodes:
            raise SearchLimitReached(f"node limit {self.max_nodes} exceeded")
        if self._deadline is not None and time.perf_counter() >= self._deadline:
            raise SearchLimitReached(f"time limit {self.max_seconds}s exceeded")
        self._nodes += 1

    def _recursive_solve(
        self,
        words: list[str],
        pos: int,
        translation: dict[str, str],
        skipped: tuple[str, ...],
        budget: int,
    ) -> Optional[_Found]:
        """
        Fit words[pos:] under translation.

        Each branch gets its own translation dict, so nothing needs undoing
        when a branch fails. Returns (translation, skipped) or None.
        """
        self._check_limits()

        if self.on_step is not None:
            self.on_step(
                SearchStep(
                    rendered=apply_translation(self._ciphertext, translation),
                    translation=MappingProxyType(translation),
                    remaining=len(words) - pos,
                    unknown_count=len(skipped),
                    budget=budget,
                )
            )

        if pos == len(words):
            return translation, skipped

        if len(skipped) > budget:
            return None

        cipher_word = words[pos]
        partial_word = apply_translation(cipher_word, translation)

        for candidate in self.corpus.find_candidates(partial_word):
            new_trans = extend_translation(translation, cipher_word, candidate)
            if new_trans is None:
                continue

            result = self._recursive_solve(words, pos + 1, new_trans, skipped, budget)
            if result is not None:
                return result

        # Skip the word; it may be a proper noun or missing from the corpus
        return self._recursive_solve(words, pos + 1, translation, skipped + (cipher_word,), budget)
