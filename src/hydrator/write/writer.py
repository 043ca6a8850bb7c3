"""Write hydrated artifacts for every path of a request.

Layout produced under *root_path*:

    hydrator.metadata            root record (repo URL + dry SHA only)
    <path>/manifest.yaml
    <path>/hydrator.metadata     root record + the path's commands
    <path>/README.md

Paths are processed one at a time in input order. The first failure aborts
the call; directories already written stay on disk (no rollback). Callers
that need all-or-nothing semantics must commit the tree only on success.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from hydrator.errors import DirectoryCreateError, HydrationError
from hydrator.models import HydrationRequest, HydratorMetadata, PathBundle
from hydrator.write.manifests import write_manifests
from hydrator.write.metadata import write_metadata
from hydrator.write.paths import secure_join
from hydrator.write.readme import write_readme

logger = logging.getLogger(__name__)


def write_for_paths(
    root_path: str | os.PathLike[str],
    repo_url: str,
    dry_sha: str,
    paths: Sequence[PathBundle],
) -> None:
    """Write manifests, metadata and README for each bundle under *root_path*.

    Args:
        root_path: Existing hydration root directory.
        repo_url: Identity of the dry source repository.
        dry_sha: Commit SHA of the dry source the manifests were rendered from.
        paths: Ordered bundles; each bundle's ``path`` is untrusted and is
            confined to *root_path*.

    Raises:
        HydrationError: The first failure, as the subclass matching the
            failing stage, with the bundle path attached.
    """
    root = Path(root_path)

    try:
        write_metadata(root, HydratorMetadata(repo_url=repo_url, dry_sha=dry_sha))
    except HydrationError as exc:
        raise exc.with_context("failed to write top-level hydrator metadata") from exc

    for bundle in paths:
        _write_bundle(root, repo_url, dry_sha, bundle)

    logger.info("hydrated %d path(s) under %s at %s", len(paths), root, dry_sha)


def write_request(request: HydrationRequest) -> None:
    """Run :func:`write_for_paths` for a fully-built request."""
    write_for_paths(request.root_path, request.repo_url, request.dry_sha, request.paths)


def _write_bundle(root: Path, repo_url: str, dry_sha: str, bundle: PathBundle) -> None:
    try:
        full_path = secure_join(root, bundle.relative_path)
    except HydrationError as exc:
        raise exc.with_context("failed to construct hydrate path", bundle.path) from exc

    try:
        full_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(
            f"failed to create path '{bundle.path}': {exc}", path=bundle.path
        ) from exc

    metadata = HydratorMetadata(repo_url=repo_url, dry_sha=dry_sha, commands=list(bundle.commands))

    steps = (
        ("failed to write manifests", lambda: write_manifests(full_path, bundle.manifests)),
        ("failed to write hydrator metadata", lambda: write_metadata(full_path, metadata)),
        ("failed to write readme", lambda: write_readme(full_path, metadata)),
    )
    for context, step in steps:
        try:
            step()
        except HydrationError as exc:
            raise exc.with_context(f"{context} for '{bundle.path}'", bundle.path) from exc

    logger.debug("wrote %d manifest(s) to %s", len(bundle.manifests), full_path)
