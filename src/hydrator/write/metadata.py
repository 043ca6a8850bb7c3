"""Write the ``hydrator.metadata`` provenance record."""

from __future__ import annotations

import json
from pathlib import Path

from hydrator.errors import MetadataSerializeError
from hydrator.models import HydratorMetadata
from hydrator.write.files import overwrite_text

METADATA_FILENAME = "hydrator.metadata"


def serialize_metadata(metadata: HydratorMetadata) -> str:
    """Return the record as 2-space indented JSON without a trailing newline.

    Field order is fixed (``drySha``, ``repoURL``, ``commands``) and empty
    fields are omitted, so the output is stable across runs.
    """
    try:
        return json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise MetadataSerializeError(f"failed to marshal hydrator metadata: {exc}") from exc


def write_metadata(dir_path: Path, metadata: HydratorMetadata) -> None:
    overwrite_text(Path(dir_path) / METADATA_FILENAME, serialize_metadata(metadata))
