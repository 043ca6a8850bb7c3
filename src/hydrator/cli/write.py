"""hydrator write — persist a hydration request to a directory tree.

Usage:
  hydrator write --request request.yaml
  hydrator write --request request.json --root out/ --log-level DEBUG

Flags:
  --request PATH    YAML/JSON request file (required)
  --root PATH       Hydration root; overrides rootPath in the file and the
                    output.root config value
  --log-level TEXT  DEBUG | INFO | WARNING | ERROR | CRITICAL

Root resolution (high → low): --root, rootPath in the request file,
HYDRATOR_ROOT, hydrator.yaml output.root, "hydrated".
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from hydrator.cli.errors import (
    err_config_invalid,
    err_hydration_failed,
    err_request_invalid,
    err_request_not_found,
)
from hydrator.config import ConfigError, load_config, validate_log_level
from hydrator.errors import DirectoryCreateError, HydrationError
from hydrator.request import RequestError, load_request
from hydrator.write.writer import write_request

console = Console()


def write_cmd(
    request: Annotated[
        Path,
        typer.Option("--request", "-r", help="YAML or JSON hydration request file."),
    ],
    root: Annotated[
        Path | None,
        typer.Option("--root", help="Hydration root directory (overrides config)."),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level (overrides HYDRATOR_LOG_LEVEL)."),
    ] = None,
) -> None:
    """Write manifests, hydrator.metadata and README.md for every request path."""
    if not request.exists():
        console.print(err_request_not_found(str(request)))
        raise typer.Exit(1)

    try:
        cfg = load_config()
        level = validate_log_level(log_level) if log_level else cfg.logging.level
    except ConfigError as exc:
        console.print(err_config_invalid(str(exc)))
        raise typer.Exit(1)

    _configure_logging(level)

    try:
        req = load_request(request, root_path=root, default_root=Path(cfg.output.root))
    except RequestError as exc:
        console.print(err_request_invalid(str(exc)))
        raise typer.Exit(1)

    console.print(f"\nHydrating [bold]{escape(req.repo_url)}[/] @ [bold]{escape(req.dry_sha)}[/]")
    console.print(f"  Root: {escape(str(req.root_path))}")

    try:
        req.root_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        console.print(err_hydration_failed(DirectoryCreateError(f"cannot create root: {exc}")))
        raise typer.Exit(1)

    try:
        write_request(req)
    except HydrationError as exc:
        console.print(err_hydration_failed(exc))
        raise typer.Exit(1)

    for bundle in req.paths:
        console.print(
            f"  [green]✓[/] {escape(bundle.path)}  "
            f"[dim]{len(bundle.manifests)} manifest(s), {len(bundle.commands)} command(s)[/]"
        )
    console.print(f"\n[green]✓[/] Wrote {len(req.paths)} path(s) + root metadata")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
