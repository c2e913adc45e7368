"""CLI entry point for uncpath."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import ENV_VAR, LIST_HEADER
from .convert import convert_to_posix
from .errors import UncPathError
from .mapping import MappingTable

app = typer.Typer(
    name="uncpath",
    help="Convert UNC paths to POSIX paths based on mapping configuration",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"uncpath version {__version__}")
        raise typer.Exit()


def print_plain(text: str):
    """Print machine-readable output exactly as given."""
    typer.echo(text)


def print_error(message: str):
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)


def build_table(
    mappings: list[str],
    file: Path | None = None,
    no_defaults: bool = False,
    verbose: bool = False,
) -> MappingTable:
    """
    Build the mapping table from all sources.

    Order: defaults, UNCPATH_MAPPINGS, --file, then each --mapping.
    Earlier sources win when two of them name the same host/share.
    """
    if no_defaults:
        table = MappingTable()
    else:
        table = MappingTable.with_defaults()
        if verbose:
            err_console.print(f"[dim]Loaded {len(table)} default mapping(s)[/dim]")

    added = table.load_from_env(ENV_VAR)
    if verbose and added:
        err_console.print(f"[dim]Loaded {added} mapping(s) from ${ENV_VAR}[/dim]")

    if file is not None:
        added = table.load_from_file(file)
        if verbose:
            err_console.print(f"[dim]Loaded {added} mapping(s) from {escape(str(file))}[/dim]")

    for text in mappings:
        table.add_from_text(text)
    if verbose and mappings:
        err_console.print(f"[dim]Loaded {len(mappings)} mapping(s) from --mapping[/dim]")

    return table


@app.command(no_args_is_help=True)
def main(
    path: str = typer.Argument(
        None, metavar="PATH",
        help="UNC path to convert (e.g., \\\\server\\share\\path, //server/share/path, smb://server/share/path)",
    ),
    mapping: list[str] = typer.Option(
        [], "--mapping", "-m", metavar="MAPPING",
        help="Add custom mapping in format host:share:mount_point",
    ),
    file: Path = typer.Option(
        None, "--file", "-f", metavar="FILE", help="Load mappings from JSON file"
    ),
    no_defaults: bool = typer.Option(False, "--no-defaults", help="Skip default mappings"),
    list_mappings: bool = typer.Option(
        False, "--list", "-l", help="List all configured mappings"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="With --list, print mappings as JSON"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Report loaded mapping sources"),
    version: bool = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    Convert UNC paths to POSIX paths based on mapping configuration.

    Mappings come from the built-in examples (unless --no-defaults), the
    UNCPATH_MAPPINGS environment variable (JSON), --file (JSON) and each
    --mapping, in that order. The first matching mapping wins.
    """
    try:
        table = build_table(mapping, file=file, no_defaults=no_defaults, verbose=verbose)
    except UncPathError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if list_mappings:
        if as_json:
            print_plain(table.to_json())
            return
        console.print(LIST_HEADER)
        for m in table:
            print_plain(f"  {m.unc} -> {m.mount_point}")
        return

    if path is None:
        print_error("Missing PATH to convert (or use --list)")
        raise typer.Exit(1)

    try:
        posix_path = convert_to_posix(path, table)
    except UncPathError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_plain(posix_path)


if __name__ == "__main__":
    app()
