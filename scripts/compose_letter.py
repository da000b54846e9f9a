#!/usr/bin/env python3
"""
Compose a cover letter from a resume and a job posting.

The job posting can be a file or an http(s) URL. By default the letter comes
from the deterministic template composer; --llm asks an LLM provider instead
(falls back to the template letter if the provider fails).

Usage:
    python scripts/compose_letter.py resume.pdf job.md
    python scripts/compose_letter.py resume.txt https://example.com/jobs/123 -o letter.txt
    python scripts/compose_letter.py resume.txt job.md --llm --provider anthropic
    python scripts/compose_letter.py resume.txt job.md --set targeting.top_n=30
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from dotenv import load_dotenv

from lettersmith.contexts.intake import (
    SourceText,
    fetch_job_posting,
    normalize_source_text,
    read_source_file,
)
from lettersmith.contexts.templating import LetterComposer, compose_with_llm
from lettersmith.contexts.templating.logger import setup_templating_logger
from lettersmith.utils.config import load_config

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Compose a cover letter from a resume and a job posting",
    add_completion=False,
)


def load_job(job: str, cfg) -> SourceText:
    """Read the job posting from a URL or a file."""
    if job.startswith(("http://", "https://")):
        return fetch_job_posting(
            job,
            timeout=cfg.intake.fetch_timeout_s,
            max_paragraphs=cfg.intake.max_paragraphs,
        )
    return read_source_file(Path(job))


@app.command()
def main(
    resume: Annotated[
        Path,
        typer.Argument(help="Resume file (.txt, .md, .pdf)", exists=True, dir_okay=False),
    ],
    job: Annotated[str, typer.Argument(help="Job posting file or http(s) URL")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the letter here instead of stdout"),
    ] = None,
    llm: Annotated[
        bool, typer.Option("--llm", help="Generate the letter with an LLM provider")
    ] = False,
    provider: Annotated[
        Optional[str],
        typer.Option("--provider", help="LLM provider (openai or anthropic); default from config"),
    ] = None,
    config: Annotated[
        Optional[Path], typer.Option("--config", help="User YAML config to merge over defaults")
    ] = None,
    overrides: Annotated[
        Optional[List[str]], typer.Option("--set", help="Config override, e.g. targeting.top_n=30")
    ] = None,
):
    """Compose a cover letter and print or save it."""
    cfg = load_config(config, overrides)
    if provider:
        cfg.llm.provider = provider

    log_dir = LOGS_PATH / f"compose_letter_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    setup_templating_logger(log_dir=log_dir, composer="llm" if llm else "template")

    resume_source = read_source_file(resume)
    job_source = load_job(job, cfg)
    for source in (resume_source, job_source):
        if not source.ok:
            typer.secho(source.error, fg=typer.colors.YELLOW, err=True)

    resume_text = normalize_source_text(resume_source.text)
    job_text = normalize_source_text(job_source.text)

    letter_text = ""
    if llm:
        result = compose_with_llm(resume_text, job_text, cfg=cfg.llm)
        if result.ok:
            letter_text = result.text
        else:
            typer.secho(f"{result.error} (falling back to the template composer)", fg=typer.colors.YELLOW, err=True)

    if not letter_text:
        letter_text = LetterComposer.from_config(cfg).compose(resume_text, job_text).text

    if not letter_text:
        typer.secho("Nothing to compose: resume and job posting are both empty", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(letter_text + "\n", encoding="utf-8")
        typer.secho(f"✓ Letter written to {output}", fg=typer.colors.GREEN, bold=True)
    else:
        typer.echo(letter_text)


if __name__ == "__main__":
    app()
