"""Domain models for a hydration write request."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

# Untyped manifest tree: mapping / sequence / scalar, nested arbitrarily.
Document = Union[dict[str, "Document"], list["Document"], str, int, float, bool, None]

ROOT_PATH_SENTINEL = "."


@dataclass
class ManifestRecord:
    """One rendered manifest as received from the renderer.

    ``manifest`` is either JSON text or an already-decoded mapping.
    """

    manifest: str | bytes | Mapping[str, Any]


@dataclass
class PathBundle:
    path: str
    manifests: list[ManifestRecord] = field(default_factory=list)
    commands: list[str] = field(default_factory=list)

    @property
    def relative_path(self) -> str:
        """The bundle path with the root sentinel normalised to ``""``."""
        if self.path == ROOT_PATH_SENTINEL:
            return ""
        return self.path


@dataclass
class HydrationRequest:
    root_path: Path
    repo_url: str
    dry_sha: str
    paths: list[PathBundle] = field(default_factory=list)


@dataclass
class HydratorMetadata:
    """Provenance record written as ``hydrator.metadata``."""

    repo_url: str
    dry_sha: str
    commands: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the on-disk field mapping; ``commands`` is omitted when empty."""
        data: dict[str, Any] = {"drySha": self.dry_sha, "repoURL": self.repo_url}
        if self.commands:
            data["commands"] = list(self.commands)
        return data
