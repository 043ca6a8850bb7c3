"""Hydrator CLI entry point."""

from __future__ import annotations

import importlib.metadata
from typing import Annotated

import typer

from hydrator.cli.write import write_cmd


def _installed_version() -> str:
    try:
        return importlib.metadata.version("hydrator")
    except importlib.metadata.PackageNotFoundError:
        return "dev"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"hydrator {_installed_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="hydrator",
    help=(
        "Hydrator — write hydrated manifests into a directory tree.\n\n"
        "  hydrator write  Write manifest.yaml, hydrator.metadata and README.md per path."
    ),
    add_completion=False,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Hydrator — write hydrated manifests into a directory tree."""


app.command("write")(write_cmd)


@app.command("version")
def version_cmd() -> None:
    """Show the installed Hydrator version."""
    typer.echo(f"hydrator {_installed_version()}")


if __name__ == "__main__":
    app()
