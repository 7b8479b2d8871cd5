"""Typer-based CLI for homelab-renovate."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from . import __version__, rules
from .catalog import ALL_REPOSITORIES
from .config import configure_logging, load_raw_environment, load_selection_context
from .exceptions import RenovateConfigError
from .renovate_config import build_config, dump_config
from .reporter import report
from .selector import select_repositories

app = typer.Typer(
    help="Repository selection and config generation for the homelab Renovate instance",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit.",
        callback=_show_version,
        is_eager=True,
    ),
) -> None:
    configure_logging(verbose)


@app.command(help="Show which repos will be processed by Renovate on this run")
def pick() -> None:
    selection = select_repositories(ALL_REPOSITORIES, load_selection_context())
    report(ALL_REPOSITORIES, selection, load_raw_environment())


@app.command(help="Write the Renovate config for this run as JSON")
def export(
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Destination file (defaults to stdout).",
        dir_okay=False,
    ),
) -> None:
    selection = select_repositories(ALL_REPOSITORIES, load_selection_context())
    try:
        dump_config(build_config(selection), output)
    except RenovateConfigError as err:
        _fail(str(err))


@app.command(help="Compile every custom manager pattern")
def check() -> None:
    try:
        count = rules.check_custom_managers(rules.CUSTOM_MANAGERS)
    except RenovateConfigError as err:
        _fail(str(err))
    console.print(f"[green]✓[/green] {count} patterns compiled")


def _fail(message: str, code: int = 1) -> NoReturn:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
