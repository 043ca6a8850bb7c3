"""Hydrator rich error messages — actionable feedback.

Every error shown to the user must contain:
  1. What went wrong (clear cause)
  2. The exact action the user should take to fix it

Usage:
    from hydrator.cli.errors import err_request_invalid
    console.print(err_request_invalid(str(exc)))
    raise typer.Exit(1)
"""

from __future__ import annotations

from rich.markup import escape

from hydrator.errors import HydrationError

_STAGE_HINTS: dict[str, str] = {
    "resolve": "Use a path relative to the hydration root without '..' segments or outside symlinks.",
    "mkdir": "Check that the hydration root is writable and no file blocks the directory path.",
    "parse": "Fix the manifest payload: each manifest must be a JSON object.",
    "encode": "Remove values from the manifest that cannot be represented in YAML.",
    "serialize": "Check the repo URL, dry SHA and commands for unsupported values.",
    "write": "Check permissions and free space under the hydration root, then re-run.",
    "template": "Re-install hydrator; the README template is built in and should not fail.",
}


def err_request_not_found(path: str) -> str:
    """--request file does not exist."""
    return (
        f"[red]Error:[/] Request file not found: '{escape(path)}'\n"
        "  Run:  hydrator write --request <file.yaml>"
    )


def err_request_invalid(detail: str) -> str:
    """Request file failed to parse or is missing fields."""
    return (
        f"[red]Error:[/] Invalid request: {escape(detail)}\n"
        "  Fix the request file: it needs repoURL, drySha and a list of paths."
    )


def err_config_invalid(detail: str) -> str:
    """hydrator.yaml or a HYDRATOR_* variable holds an invalid value."""
    return (
        f"[red]Error:[/] Invalid configuration: {escape(detail)}\n"
        "  Fix hydrator.yaml or unset the HYDRATOR_* environment variable."
    )


def err_hydration_failed(exc: HydrationError) -> str:
    """A write stage failed; earlier paths may already be on disk."""
    hint = _STAGE_HINTS.get(exc.stage, "Fix the cause above and re-run.")
    where = f" (path '{escape(exc.path)}')" if exc.path else ""
    return (
        f"[red]Error:[/] Hydration failed at stage '{exc.stage}'{where}: {escape(str(exc))}\n"
        f"  {hint}\n"
        "  [dim]Paths written before the failure remain on disk.[/]"
    )
