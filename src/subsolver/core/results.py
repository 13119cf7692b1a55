from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Solution:
    # cipher letter -> plaintext letter
    translation: dict[str, str] = field(default_factory=dict)

    # Tokens the search left unmatched, in the order they were skipped
    skipped: tuple[str, ...] = ()

    # Unknown-word budget that produced this solution (None if none did)
    budget: Optional[int] = None

    nodes: int = 0
    aborted: bool = False

    @property
    def found(self) -> bool:
        # True whenever some budget succeeded, even with an empty translation
        return self.budget is not None

    @property
    def solved(self) -> bool:
        return self.found and bool(self.translation)

    @property
    def unknown_count(self) -> int:
        return len(self.skipped)

    def to_dict(self) -> dict[str, Any]:
        return {
            "translation": dict(self.translation),
            "skipped": list(self.skipped),
            "budget": self.budget,
            "nodes": self.nodes,
            "aborted": self.aborted,
        }


@dataclass(frozen=True)
class SearchStep:
    """Snapshot handed to the trace observer on every recursive entry."""

    rendered: str
    translation: Mapping[str, str]
    remaining: int
    unknown_count: int
    budget: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "rendered": self.rendered,
            "translation": dict(self.translation),
            "remaining": self.remaining,
            "unknown_count": self.unknown_count,
            "budget": self.budget,
        }
