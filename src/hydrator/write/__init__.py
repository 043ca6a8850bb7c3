"""Hydration artifact writers: manifests, metadata, README, and the path orchestrator."""

from hydrator.write.manifests import write_manifests
from hydrator.write.metadata import write_metadata
from hydrator.write.paths import secure_join
from hydrator.write.readme import write_readme
from hydrator.write.writer import write_for_paths, write_request

__all__ = [
    "secure_join",
    "write_for_paths",
    "write_manifests",
    "write_metadata",
    "write_readme",
    "write_request",
]
