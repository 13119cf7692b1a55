from __future__ import annotations

import re
from typing import Iterable, Mapping

APOSTROPHE = "'"

# Everything that is neither a word character nor whitespace
_NOISE_RE = re.compile(r"[^\w\s]+")
# Same, but apostrophes survive
_NOISE_KEEP_APOS_RE = re.compile(r"[^\w\s']+")
# Apostrophes not sitting between two word characters
_LOOSE_APOS_RE = re.compile(r"(?<!\w)'|'(?!\w)")


def normalize_ciphertext(text: str, *, keep_apostrophes: bool = False) -> str:
    """Uppercase and strip punctuation, keeping word characters and whitespace."""
    if text is None:
        return ""
    s = f"{text}".upper()
    if not keep_apostrophes:
        return _NOISE_RE.sub("", s)
    s = _NOISE_KEEP_APOS_RE.sub("", s)
    return _LOOSE_APOS_RE.sub("", s)


def tokenize(text: str, *, keep_apostrophes: bool = False) -> list[str]:
    return normalize_ciphertext(text, keep_apostrophes=keep_apostrophes).split()


def order_tokens(tokens: list[str]) -> list[str]:
    """Longest first; sorted() is stable so ties keep their original order."""
    return sorted(tokens, key=lambda tok: -len(tok))


def apply_translation(text: str, translation: Mapping[str, str]) -> str:
    """Substitute mapped characters; everything else is left as is."""
    if not translation:
        return text
    return text.translate(str.maketrans(dict(translation)))


def is_decided(ch: str) -> bool:
    """True for characters the matcher compares literally (plaintext letters, apostrophes)."""
    return ch.islower() or ch == APOSTROPHE


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf
