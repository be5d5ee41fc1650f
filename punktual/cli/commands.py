"""Punktual CLI commands for generating calendar links and button code."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from punktual.logging_config import setup_logging
from punktual.modules.calendar.ics import build_ics
from punktual.modules.calendar.links import build_links
from punktual.modules.calendar.models import (
    ButtonStyleDescription,
    CodeFormat,
    CodeGenerationOptions,
    EventDescription,
)
from punktual.modules.calendar.platforms import display_name
from punktual.modules.embed.service import ButtonCodeGenerator

app = typer.Typer(help="Punktual add-to-calendar CLI", no_args_is_help=True)
console = Console()


@app.callback()
def main() -> None:
    """Punktual add-to-calendar CLI."""
    setup_logging()


def _load_json(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        console.print(f"[red]✗[/red] Could not read {path}: {exc}")
        raise typer.Exit(code=1)


def _load_event(path: Path) -> EventDescription:
    try:
        return EventDescription.model_validate(_load_json(path))
    except ValidationError as exc:
        console.print(f"[red]✗[/red] Invalid event in {path}:\n{exc}")
        raise typer.Exit(code=1)


def _load_style(path: Optional[Path]) -> ButtonStyleDescription:
    if path is None:
        return ButtonStyleDescription(selected_platforms={"google": True, "apple": True, "outlook": True})
    try:
        return ButtonStyleDescription.model_validate(_load_json(path))
    except ValidationError as exc:
        console.print(f"[red]✗[/red] Invalid button style in {path}:\n{exc}")
        raise typer.Exit(code=1)


@app.command()
def links(
    event_file: Path = typer.Argument(..., help="JSON file describing the event"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table"),
) -> None:
    """Print the add-to-calendar URL for every platform."""
    event = _load_event(event_file)
    link_map = build_links(event)

    if link_map.is_empty:
        console.print("[yellow]⚠[/yellow] Event needs a title and start date before links can be built")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(link_map.as_dict(), indent=2))
        return

    table = Table(title=event.title)
    table.add_column("Platform", style="cyan")
    table.add_column("URL", overflow="fold")
    for platform, url in link_map.items():
        table.add_row(display_name(platform), url)
    console.print(table)


@app.command()
def code(
    event_file: Path = typer.Argument(..., help="JSON file describing the event"),
    style_file: Optional[Path] = typer.Option(None, "--style", "-s", help="JSON file describing the button"),
    output_format: CodeFormat = typer.Option(CodeFormat.HTML, "--format", "-f", help="html, react, css or js"),
    output_type: str = typer.Option("button", "--type", "-t", help="button, links, email or embed"),
    minified: bool = typer.Option(False, "--minified", "-m", help="Minify the output"),
    share_id: Optional[str] = typer.Option(None, "--share-id", help="Route clicks through the tracked redirect"),
    powered_by: bool = typer.Option(False, "--powered-by", help="Append the attribution row"),
) -> None:
    """Generate embeddable button code."""
    event = _load_event(event_file)
    style = _load_style(style_file)
    options = CodeGenerationOptions(
        format=output_format,
        minified=minified,
        share_id=share_id,
        show_powered_by=powered_by,
    )
    typer.echo(ButtonCodeGenerator().generate_calendar_code(event, style, output_type, options))


@app.command()
def ics(
    event_file: Path = typer.Argument(..., help="JSON file describing the event"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to a .ics file"),
) -> None:
    """Print (or save) the ICS document used for Apple Calendar."""
    event = _load_event(event_file)
    if not event.is_complete:
        console.print("[yellow]⚠[/yellow] Event needs a title and start date")
        raise typer.Exit(code=1)

    body = build_ics(event)
    if output is None:
        typer.echo(body)
        return
    output.write_text(body, encoding="utf-8", newline="")
    console.print(f"[green]✓[/green] Wrote {output}")


@app.command()
def serve() -> None:
    """Start the HTTP API."""
    from punktual.main import run

    run()


if __name__ == "__main__":
    app()
