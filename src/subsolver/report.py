from __future__ import annotations

from subsolver.config import SUBSTITUTIONS_PER_LINE
from subsolver.core.results import Solution
from subsolver.core.utils import apply_translation, chunked

FAILURE_LINE = "Failed to translate ciphertext."


def substitution_lines(translation: dict[str, str], per_line: int = SUBSTITUTIONS_PER_LINE) -> list[str]:
    """Render 'C -> p' pairs, sorted by their text, per_line to a line."""
    items = sorted(f"{cipher} -> {plain}" for cipher, plain in translation.items())
    return [" ".join(group) for group in chunked(items, per_line)]


def format_report(ciphertext: str, solution: Solution) -> str:
    if not solution.solved:
        lines = [FAILURE_LINE]
        if solution.aborted:
            lines.append(f"Search stopped early after {solution.nodes} nodes.")
        return "\n".join(lines)

    shown = ciphertext.upper()
    lines = [
        "Ciphertext:",
        shown,
        "",
        "Plaintext:",
        apply_translation(shown, solution.translation),
        "",
        "Substitutions:",
        *substitution_lines(solution.translation),
    ]
    if solution.skipped:
        lines.append("")
        lines.append("Unknown words: " + " ".join(solution.skipped))
    return "\n".join(lines)
