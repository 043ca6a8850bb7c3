"""Load a hydration request description from a YAML or JSON file.

Expected shape (JSON is accepted too — it is a subset of YAML):

    rootPath: hydrated          # optional; the CLI --root flag wins
    repoURL: https://example/repo
    drySha: abc123
    paths:
      - path: app1
        commands: ["helm template ."]
        manifests:
          - {"kind": "ConfigMap", "metadata": {"name": "x"}}
          - '{"kind": "Service", "metadata": {"name": "y"}}'

Each manifest entry is either a mapping or a JSON string; both are handed to
the manifest writer unchanged, which does the actual parsing.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from hydrator.models import HydrationRequest, ManifestRecord, PathBundle


class RequestError(ValueError):
    """Raised when a request file is missing fields or has the wrong shape."""


def load_request(
    path: Path,
    root_path: Path | None = None,
    default_root: Path | None = None,
) -> HydrationRequest:
    """Read *path* and build a HydrationRequest.

    Args:
        path: YAML or JSON request file.
        root_path: Overrides ``rootPath`` from the file when given.
        default_root: Used when neither *root_path* nor ``rootPath`` is set.

    Raises:
        RequestError: If the file cannot be read or parsed, or a required
            field is missing or has the wrong type.
    """
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise RequestError(f"Cannot read request file '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise RequestError(f"Request file '{path}' is not valid YAML/JSON: {exc}") from exc

    return request_from_dict(raw, root_path=root_path, default_root=default_root, source=str(path))


def request_from_dict(
    data: Any,
    root_path: Path | None = None,
    default_root: Path | None = None,
    source: str = "<request>",
) -> HydrationRequest:
    if not isinstance(data, Mapping):
        raise RequestError(f"{source}: request must be a mapping at the top level.")

    repo_url = _require_str(data, "repoURL", source)
    dry_sha = _require_str(data, "drySha", source)

    if root_path is None:
        root = data.get("rootPath")
        if isinstance(root, str) and root:
            root_path = Path(root)
        elif default_root is not None:
            root_path = default_root
        else:
            raise RequestError(f"{source}: 'rootPath' is required when no root is given.")

    raw_paths = data.get("paths") or []
    if not isinstance(raw_paths, list):
        raise RequestError(f"{source}: 'paths' must be a list.")

    bundles = [_bundle_from_dict(p, f"{source}: paths[{i}]") for i, p in enumerate(raw_paths)]

    return HydrationRequest(
        root_path=root_path,
        repo_url=repo_url,
        dry_sha=dry_sha,
        paths=bundles,
    )


def _bundle_from_dict(data: Any, where: str) -> PathBundle:
    if not isinstance(data, Mapping):
        raise RequestError(f"{where} must be a mapping.")

    path = _require_str(data, "path", where)

    commands = data.get("commands") or []
    if not isinstance(commands, list) or not all(isinstance(c, str) for c in commands):
        raise RequestError(f"{where}.commands must be a list of strings.")

    manifests = data.get("manifests") or []
    if not isinstance(manifests, list):
        raise RequestError(f"{where}.manifests must be a list.")
    for j, m in enumerate(manifests):
        if not isinstance(m, (str, Mapping)):
            raise RequestError(f"{where}.manifests[{j}] must be a mapping or a JSON string.")

    return PathBundle(
        path=path,
        manifests=[ManifestRecord(manifest=m) for m in manifests],
        commands=list(commands),
    )


def _require_str(data: Mapping[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise RequestError(f"{where}: '{key}' is required and must be a non-empty string.")
    return value
