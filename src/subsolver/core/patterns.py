from __future__ import annotations

from typing import Iterable


def encode(word: Iterable[str]) -> tuple[int, ...]:
    """
    Encode a word into its letter-repetition signature.

    MXM becomes (0, 1, 0), ASDF becomes (0, 1, 2, 3), AFAFA becomes (0, 1, 0, 1, 0).
    Every character is significant, so "cAt" and "CAT" have different signatures
    only where their characters differ.
    """
    seen: dict[str, int] = {}
    out: list[int] = []
    for ch in word:
        code = seen.get(ch)
        if code is None:
            code = len(seen)
            seen[ch] = code
        out.append(code)
    return tuple(out)


def pattern_key(word: Iterable[str]) -> str:
    """Dot-joined rendering of encode(); stays unambiguous past ten distinct letters."""
    return ".".join(str(code) for code in encode(word))
