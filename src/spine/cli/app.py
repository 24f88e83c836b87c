import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from spine.archive.keyed import TYPE_KEY, read_envelope
from spine.config import load_settings
from spine.core.errors import SpineError

app = typer.Typer(
    name="spine",
    help="Spine CLI — inspect archived resources.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()

_ENVELOPE_KEYS = (TYPE_KEY, "id", "url", "isLoaded", "meta")


@app.callback()
def _configure() -> None:
    try:
        settings = load_settings()
    except SpineError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    logging.basicConfig(level=settings.log_level)


@app.command("inspect")
def inspect(
    path: Annotated[Path, typer.Argument(help="File holding an archived resource.", exists=True, dir_okay=False)],
) -> None:
    """Show the persisted values of an archived resource."""
    try:
        envelope = read_envelope(path.read_bytes())
    except SpineError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    table = Table(show_lines=False)
    table.add_column("key")
    table.add_column("value")
    for key in _ENVELOPE_KEYS:
        table.add_row(key, escape(repr(envelope.get(key))))
    for key in sorted(k for k in envelope if k not in _ENVELOPE_KEYS):
        table.add_row(key, escape(repr(envelope[key])))
    console.print(table)


@app.command("version")
def version() -> None:
    """Print the installed spine version."""
    from spine import __version__

    console.print(__version__)


def main() -> None:
    app()
