"""Hydrator — write hydrated manifests and provenance metadata into a directory tree."""
