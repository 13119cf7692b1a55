from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from subsolver.config import DEFAULT_CORPUS_RESOURCE
from subsolver.core.patterns import encode
from subsolver.core.utils import APOSTROPHE, is_decided

log = logging.getLogger(__name__)


class Corpus:
    """
    Ranked word list indexed by pattern signature.

    Words keep their list order inside each bucket, so candidates come back
    most frequent first. The index is built once and never modified.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        buckets: dict[tuple[int, ...], list[str]] = {}
        total = 0
        for raw in words:
            word = raw.strip().lower()
            if not word:
                continue
            buckets.setdefault(encode(word), []).append(word)
            total += 1

        self._buckets: Mapping[tuple[int, ...], tuple[str, ...]] = MappingProxyType(
            {sig: tuple(ws) for sig, ws in buckets.items()}
        )
        self._words = frozenset(w for ws in buckets.values() for w in ws)
        self._size = total

    @classmethod
    def from_file(cls, path: str | Path) -> "Corpus":
        """Load one word per line; an unreadable file yields an empty corpus."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Could not read corpus %s: %s", path, e)
            return cls()

        corpus = cls(text.splitlines())
        log.info("Loaded corpus %s: words=%d buckets=%d", path, len(corpus), corpus.bucket_count)
        return corpus

    @classmethod
    def from_package_data(cls, resource: str = DEFAULT_CORPUS_RESOURCE) -> "Corpus":
        try:
            text = resources.files("subsolver").joinpath(resource).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Could not read bundled corpus %s: %s", resource, e)
            return cls()

        corpus = cls(text.splitlines())
        log.info("Loaded bundled corpus: words=%d buckets=%d", len(corpus), corpus.bucket_count)
        return corpus

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return word in self._words

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def bucket(self, signature: tuple[int, ...]) -> tuple[str, ...]:
        return self._buckets.get(tuple(signature), ())

    def find_candidates(self, partial_word: str) -> list[str]:
        """
        Find corpus words that could be the plaintext of a partially decoded word.

        Uppercase letters are still ciphertext; lowercase letters are already
        decided and must match exactly, as must apostrophes on either side.
        MXM matches "wow" but not "cat", and cIF matches "cat" but not "bat".
        """
        candidates: list[str] = []
        for word in self.bucket(encode(partial_word)):
            if len(word) != len(partial_word):
                continue
            for have, want in zip(partial_word, word):
                if (is_decided(have) or want == APOSTROPHE) and have != want:
                    break
            else:
                candidates.append(word)
        return candidates
