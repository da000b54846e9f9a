#!/usr/bin/env python3
"""
Place field values into a letter and export the raw and clean versions.

Each --field is VALUE@LINE:COL (1-based logical line and column of the marked
text at the time of the drop) or just VALUE to append at the end. Drops run in
order through an editing session with a monospace layout, exactly as a pointer
drag would: the position is turned into surface coordinates and resolved back,
so a position inside an existing marker snaps to its nearer boundary.

Usage:
    python scripts/place_fields.py letter.txt -f "Acme Corp@3:40" -f "Jane Doe"
    python scripts/place_fields.py outs/with_markers.txt --reopen -f "Senior@1:1" -o outs/
    python scripts/place_fields.py outs/with_markers.txt --reopen --flatten -o outs/
    python scripts/place_fields.py letter.txt -f "Acme@1:1" --set markers.open="<<" --set markers.close=">>"
"""

import re
from pathlib import Path
from typing import Annotated, List, Optional, Tuple

import typer

from lettersmith.contexts.editing import (
    Document,
    EditingSession,
    FieldBoard,
    SentinelPair,
    find_sentinel_collisions,
    list_markers,
    strip_markers,
)
from lettersmith.contexts.editing.logger import setup_editing_logger
from lettersmith.contexts.intake import normalize_source_text, read_source_file
from lettersmith.contexts.rendering import CLEAN, RAW, MonospaceLayout, write_export
from lettersmith.contexts.rendering.exporter import filenames_from_config
from lettersmith.utils.config import load_config

FIELD_SPEC = re.compile(r"^(?P<value>.*?)(?:@(?P<line>\d+):(?P<col>\d+))?$", re.DOTALL)

app = typer.Typer(
    help="Place field values into a letter and export raw/clean files",
    add_completion=False,
)


def parse_field_spec(spec: str) -> Tuple[str, Optional[Tuple[int, int]]]:
    """
    Split VALUE@LINE:COL into value and position.

    Example:
        >>> parse_field_spec("Acme Corp@3:40")
        ('Acme Corp', (3, 40))
        >>> parse_field_spec("Jane Doe")
        ('Jane Doe', None)
    """
    match = FIELD_SPEC.match(spec)
    value = match.group("value")
    if match.group("line") is None:
        return value, None
    return value, (int(match.group("line")), int(match.group("col")))


@app.command()
def main(
    letter: Annotated[Path, typer.Argument(help="Letter text file", exists=True, dir_okay=False)],
    fields: Annotated[
        Optional[List[str]], typer.Option("--field", "-f", help="VALUE@LINE:COL or VALUE (append)")
    ] = None,
    out_dir: Annotated[Path, typer.Option("--out-dir", "-o", help="Export directory")] = Path("outs"),
    reopen: Annotated[
        bool, typer.Option("--reopen", help="Rebuild markers from sentinels already in the file")
    ] = False,
    flatten: Annotated[
        bool, typer.Option("--flatten", help="Turn existing markers into plain text before placing")
    ] = False,
    config: Annotated[
        Optional[Path], typer.Option("--config", help="User YAML config to merge over defaults")
    ] = None,
    overrides: Annotated[
        Optional[List[str]], typer.Option("--set", help="Config override, e.g. fields.max_length=30")
    ] = None,
):
    """Drop each field into the letter, then write raw and clean exports."""
    cfg = load_config(config, overrides)
    try:
        sentinels = SentinelPair.from_config(cfg.markers)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    setup_editing_logger(sentinels=str(sentinels))

    source = read_source_file(letter)
    if not source.ok:
        typer.secho(source.error, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    document = Document.load(normalize_source_text(source.text), sentinels, parse_markers=reopen)
    if flatten:
        document = strip_markers(document)
    session = EditingSession(document, MonospaceLayout.factory_from_config(cfg.layout), sentinels)
    board = FieldBoard.from_config(cfg.fields)

    specs = list(fields or [])
    if len(specs) > len(board):
        typer.secho(f"At most {len(board)} fields can be placed", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    parsed = [parse_field_spec(spec) for spec in specs]
    for value, _ in parsed:
        if find_sentinel_collisions(value, sentinels):
            typer.secho(
                f"Field value {value!r} contains a marker sentinel ({sentinels})",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1)

    for index, (value, position) in enumerate(parsed):
        board = board.with_value(index, value)

        point = None
        if position is not None:
            layout = MonospaceLayout.for_document(
                session.document,
                columns=cfg.layout.columns,
                char_width=cfg.layout.char_width,
                line_height=cfg.layout.line_height,
            )
            point = layout.point_for(layout.offset_at(*position))

        session.hover(point)
        session.drop(point, board.value(index))
        where = f"line {position[0]}, col {position[1]}" if position else "end"
        typer.echo(f"  ✓ {board.label(index)} → {where}")

    for placed in list_markers(session.document):
        typer.echo(f"  marker at {placed.offset}: {placed.value!r}")

    filenames = filenames_from_config(cfg.export)
    for kind in (RAW, CLEAN):
        path = write_export(
            session.document,
            kind,
            out_dir,
            filenames=filenames,
            sentinels=sentinels,
            max_blank_lines=cfg.export.max_blank_lines,
        )
        typer.secho(f"✓ {kind} export: {path}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
