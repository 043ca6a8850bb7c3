"""Exceptions raised while writing hydrated artifacts.

Every failure in the write pipeline surfaces as a :class:`HydrationError`
subclass. ``stage`` names the step that failed; ``path`` is the bundle path
being processed when the orchestrator added it (``None`` for the root record
or when raised directly by a leaf writer).

The low-level cause (``OSError``, ``json.JSONDecodeError``, a Jinja2 error,
...) is always chained through ``__cause__``.
"""

from __future__ import annotations


class HydrationError(Exception):
    """Base class for all hydration write failures."""

    stage: str = "hydrate"

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path

    def with_context(self, context: str, path: str | None = None) -> HydrationError:
        """Return a copy of this error of the same class with *context* prefixed."""
        return type(self)(f"{context}: {self}", path=path if path is not None else self.path)


class PathTraversalError(HydrationError, ValueError):
    """A bundle path resolves outside the hydration root."""

    stage = "resolve"


class DirectoryCreateError(HydrationError):
    stage = "mkdir"


class ManifestParseError(HydrationError):
    """A manifest payload is not a structured (JSON object) document."""

    stage = "parse"


class ManifestEncodeError(HydrationError):
    stage = "encode"


class MetadataSerializeError(HydrationError):
    stage = "serialize"


class ArtifactWriteError(HydrationError):
    """Opening, truncating or writing an artifact file failed."""

    stage = "write"


class TemplateRenderError(HydrationError):
    """The README template failed to parse or render."""

    stage = "template"
