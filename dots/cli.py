"""Command-line reads of dot-path values from a YAML file.

Typer command file providing: get-string, get-int, get-bool (fail fast,
exit code 1 on error) and get-strings, get-ints (best effort, one value per
line with zero values substituted for failing keys).
"""

from __future__ import annotations

import typer

from dots.document import DEFAULT_CONFIG_PATH, ConfigDocument, load
from dots.errors import LoadError, ResolutionError

app = typer.Typer()

_FILE_HELP = "YAML document to read."


def _open(file: str) -> ConfigDocument:
    """Load *file* or exit: without a document no key can be read."""
    try:
        return load(file)
    except LoadError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1)


def _format(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@app.command()
def get_string(key: str, file: str = typer.Option(str(DEFAULT_CONFIG_PATH), help=_FILE_HELP)) -> None:
    """Print the string value at KEY."""
    doc = _open(file)
    try:
        typer.echo(doc.get_string(key))
    except ResolutionError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1)


@app.command()
def get_int(key: str, file: str = typer.Option(str(DEFAULT_CONFIG_PATH), help=_FILE_HELP)) -> None:
    """Print the integer value at KEY."""
    doc = _open(file)
    try:
        typer.echo(doc.get_int(key))
    except ResolutionError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1)


@app.command()
def get_bool(key: str, file: str = typer.Option(str(DEFAULT_CONFIG_PATH), help=_FILE_HELP)) -> None:
    """Print the boolean value at KEY as true/false."""
    doc = _open(file)
    try:
        typer.echo(_format(doc.get_bool(key)))
    except ResolutionError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1)


@app.command()
def get_strings(keys: list[str], file: str = typer.Option(str(DEFAULT_CONFIG_PATH), help=_FILE_HELP)) -> None:
    """Print the string value of each KEY, an empty line where a key fails."""
    doc = _open(file)
    for value in doc.get_strings(keys):
        typer.echo(value)


@app.command()
def get_ints(keys: list[str], file: str = typer.Option(str(DEFAULT_CONFIG_PATH), help=_FILE_HELP)) -> None:
    """Print the integer value of each KEY, 0 where a key fails."""
    doc = _open(file)
    for value in doc.get_ints(keys):
        typer.echo(value)


if __name__ == "__main__":
    app()
