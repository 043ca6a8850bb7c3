"""Canonical re-serialisation of rendered manifests into ``manifest.yaml``.

Each payload is parsed into an untyped document tree and re-encoded as
YAML with sorted keys and 2-space indentation, so the same ordered input
always produces byte-identical output:

    <doc 1>
    ---
    <blank>
    <doc 2>
    ---
    <blank>

The file is truncated in place (never unlinked) before the documents are
appended in input order. Writing stops at the first bad manifest; whatever
was appended before it stays in the file.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from hydrator.errors import ArtifactWriteError, ManifestEncodeError, ManifestParseError
from hydrator.models import Document, ManifestRecord
from hydrator.write.files import close_logged

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "manifest.yaml"
DOCUMENT_SEPARATOR = "\n---\n\n"
YAML_INDENT = 2


def parse_manifest(raw: str | bytes | Mapping[str, Any]) -> dict[str, Document]:
    """Parse one raw manifest payload into an untyped document tree.

    Mappings are normalised through a JSON round trip so that only plain
    JSON types (dict / list / str / int / float / bool / None) reach the
    encoder.

    Raises:
        ManifestParseError: If the payload is not valid JSON, contains
            non-JSON values, or is not a JSON object at the top level.
    """
    if isinstance(raw, Mapping):
        try:
            raw = json.dumps(raw, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise ManifestParseError(f"failed to unmarshal manifest: {exc}") from exc

    try:
        doc = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as exc:
        raise ManifestParseError(f"failed to unmarshal manifest: {exc}") from exc

    if not isinstance(doc, dict):
        raise ManifestParseError(
            f"failed to unmarshal manifest: expected a JSON object, got {type(doc).__name__}"
        )
    return doc


class _IndentedSafeDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences under their parent key."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def encode_manifest(doc: Document) -> str:
    """Encode *doc* as a single YAML document (sorted keys, 2-space indent)."""
    try:
        return yaml.dump(
            doc,
            Dumper=_IndentedSafeDumper,
            indent=YAML_INDENT,
            sort_keys=True,
            default_flow_style=False,
            allow_unicode=True,
            width=float("inf"),
        )
    except yaml.YAMLError as exc:
        raise ManifestEncodeError(f"failed to encode manifest: {exc}") from exc


def write_manifests(dir_path: Path, manifests: Sequence[ManifestRecord]) -> None:
    """Replace ``manifest.yaml`` in *dir_path* with *manifests*, in order."""
    manifest_path = Path(dir_path) / MANIFEST_FILENAME

    if manifest_path.exists():
        try:
            os.truncate(manifest_path, 0)
        except OSError as exc:
            raise ArtifactWriteError(f"failed to empty manifest file: {exc}") from exc

    try:
        handle = manifest_path.open("a", encoding="utf-8")
    except OSError as exc:
        raise ArtifactWriteError(f"failed to open manifest file: {exc}") from exc

    try:
        for index, record in enumerate(manifests):
            try:
                doc = parse_manifest(record.manifest)
                text = encode_manifest(doc)
            except (ManifestParseError, ManifestEncodeError) as exc:
                raise exc.with_context(f"manifest #{index}") from exc

            try:
                handle.write(text + DOCUMENT_SEPARATOR)
                handle.flush()
            except OSError as exc:
                raise ArtifactWriteError(f"failed to write manifest #{index}: {exc}") from exc
    finally:
        close_logged(handle, manifest_path)

    logger.debug("wrote %d manifest(s) to %s", len(manifests), manifest_path)
