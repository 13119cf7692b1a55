from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import typer

from subsolver.config import CORPUS_ENV_VAR, VERSION
from subsolver.core.corpus import Corpus
from subsolver.core.patterns import pattern_key
from subsolver.report import format_report
from subsolver.search import SubSolver

app = typer.Typer(help="SubSolver: cryptogram solver driven by a ranked word corpus.")


@app.callback()
def _init(
    debug: bool = typer.Option(False, "--debug", help="Log search progress at DEBUG level."),
):
    # Configure logging exactly once per CLI run
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_corpus(corpus: Optional[Path]) -> Corpus:
    if corpus is not None:
        return Corpus.from_file(corpus)
    env_path = os.environ.get(CORPUS_ENV_VAR)
    if env_path:
        return Corpus.from_file(env_path)
    return Corpus.from_package_data()


@app.command()
def solve(
    ctx: typer.Context,
    input_file: Optional[Path] = typer.Argument(None, help="A file containing the ciphertext."),
    corpus: Optional[Path] = typer.Option(None, "--corpus", "-c", help="Filename of the word corpus."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print every intermediate state."),
    keep_apostrophes: bool = typer.Option(
        False, "--keep-apostrophes", help="Treat embedded apostrophes as fixed characters."
    ),
    max_nodes: Optional[int] = typer.Option(None, "--max-nodes", help="Give up after this many search nodes."),
    max_seconds: Optional[float] = typer.Option(None, "--max-seconds", help="Give up after this many seconds."),
):
    """Solve the substitution cipher stored in INPUT_FILE."""
    typer.echo(f"SubSolver v{VERSION}\n")

    if input_file is None:
        typer.echo(ctx.get_usage())
        raise typer.Exit(code=0)

    try:
        ciphertext = input_file.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    on_step = None
    if verbose:
        def on_step(step):
            typer.echo(step.rendered)

    try:
        solver = SubSolver(
            _load_corpus(corpus),
            on_step=on_step,
            keep_apostrophes=keep_apostrophes,
            max_nodes=max_nodes,
            max_seconds=max_seconds,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    solution = solver.solve(ciphertext)
    typer.echo(format_report(ciphertext, solution))


@app.command()
def pattern(words: List[str] = typer.Argument(..., help="Words to encode.")):
    """Show the letter-repetition pattern of each word."""
    for word in words:
        typer.echo(f"{word}  {pattern_key(word)}")


@app.command()
def candidates(
    partial: str = typer.Argument(..., help="Partially decoded word: UPPER = cipher, lower = decided."),
    corpus: Optional[Path] = typer.Option(None, "--corpus", "-c", help="Filename of the word corpus."),
    limit: int = typer.Option(20, "--limit", "-n", help="Show at most this many candidates."),
):
    """List corpus words that fit a partially decoded word, most common first."""
    found = _load_corpus(corpus).find_candidates(partial)
    if not found:
        typer.echo("No candidates.")
        raise typer.Exit(code=0)
    for word in found[:limit]:
        typer.echo(word)
    if len(found) > limit:
        typer.echo(f"... {len(found) - limit} more")


def main():
    app()


if __name__ == "__main__":
    main()
