#!/usr/bin/env python3
"""
Show ranked terms and the highlight set for a resume/job pair.

Prints each document's top terms with counts, the prioritized intersection
(or the resume fallback), and the job posting with highlight terms emphasized.

Usage:
    python scripts/match_terms.py resume.txt job.md
    python scripts/match_terms.py resume.pdf job.md --top 10 --no-show-job
    python scripts/match_terms.py resume.txt job.md --set targeting.stopword_pack=nltk-english
"""

from pathlib import Path
from typing import Annotated, List, Optional

import typer

from lettersmith.contexts.intake import normalize_source_text, read_source_file
from lettersmith.contexts.targeting import RelevanceMatcher, highlight_text
from lettersmith.contexts.targeting.logger import setup_targeting_logger
from lettersmith.utils.config import load_config
from lettersmith.utils.text_processing import truncate_display

app = typer.Typer(
    help="Rank resume/job terms and show the highlight set",
    add_completion=False,
)


def print_ranking(title: str, matcher: RelevanceMatcher, text: str, top: int):
    table = matcher.frequency_table(text)
    terms = matcher.rank(text, n=top)

    typer.secho(f"\n {title}", bold=True)
    typer.echo(" " + "─" * len(title))
    if not terms:
        typer.echo("  (no terms)")
    for rank, term in enumerate(terms, start=1):
        typer.echo(f"  {rank:>3}. {truncate_display(term, 30):<30} {table.count(term)}")


@app.command()
def main(
    resume: Annotated[Path, typer.Argument(help="Resume file", exists=True, dir_okay=False)],
    job: Annotated[Path, typer.Argument(help="Job posting file", exists=True, dir_okay=False)],
    top: Annotated[Optional[int], typer.Option("--top", "-n", help="Terms to show per document")] = None,
    show_job: Annotated[
        bool, typer.Option("--show-job/--no-show-job", help="Print the job text with highlights")
    ] = True,
    config: Annotated[
        Optional[Path], typer.Option("--config", help="User YAML config to merge over defaults")
    ] = None,
    overrides: Annotated[
        Optional[List[str]], typer.Option("--set", help="Config override, e.g. targeting.top_n=30")
    ] = None,
):
    """Print ranked terms, the highlight set, and the highlighted job text."""
    cfg = load_config(config, overrides)
    setup_targeting_logger(stopword_pack=cfg.targeting.stopword_pack)

    try:
        matcher = RelevanceMatcher.from_config(cfg.targeting)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    sources = [read_source_file(resume), read_source_file(job)]
    for source in sources:
        if not source.ok:
            typer.secho(source.error, fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
    resume_text, job_text = (normalize_source_text(source.text) for source in sources)

    top = top or cfg.targeting.top_n
    print_ranking("Resume terms", matcher, resume_text, top)
    print_ranking("Job terms", matcher, job_text, top)

    highlights = matcher.highlights(resume_text, job_text)
    origin = "intersection" if highlights.from_intersection else "resume fallback"
    typer.secho(f"\n Highlight set ({origin})", bold=True)
    typer.secho(f"  {highlights.phrase or '(empty)'}", fg=typer.colors.GREEN)

    if show_job and highlights:
        typer.secho("\n Job posting", bold=True)
        typer.echo(
            highlight_text(
                job_text,
                highlights.terms,
                lambda term: typer.style(term, fg=typer.colors.GREEN, bold=True),
            )
        )


if __name__ == "__main__":
    app()
