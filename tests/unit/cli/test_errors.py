"""Tests for hydrator rich error messages."""

from __future__ import annotations

import pytest

from hydrator.cli.errors import (
    err_config_invalid,
    err_hydration_failed,
    err_request_invalid,
    err_request_not_found,
)
from hydrator.errors import (
    ArtifactWriteError,
    DirectoryCreateError,
    HydrationError,
    ManifestEncodeError,
    ManifestParseError,
    MetadataSerializeError,
    PathTraversalError,
    TemplateRenderError,
)


def test_err_request_not_found_has_action():
    msg = err_request_not_found("req.yaml")
    assert "req.yaml" in msg
    assert "hydrator write" in msg


def test_err_request_invalid_includes_detail():
    msg = err_request_invalid("'drySha' is required")
    assert "drySha" in msg
    assert "Fix the request file" in msg


def test_err_config_invalid_includes_detail():
    msg = err_config_invalid("Unknown log level 'LOUD'")
    assert "LOUD" in msg
    assert "hydrator.yaml" in msg


def test_err_messages_escape_markup():
    msg = err_request_invalid("bad [red]value[/]")
    assert "\\[red]" in msg


@pytest.mark.parametrize(
    "cls",
    [
        PathTraversalError,
        DirectoryCreateError,
        ManifestParseError,
        ManifestEncodeError,
        MetadataSerializeError,
        ArtifactWriteError,
        TemplateRenderError,
    ],
)
def test_err_hydration_failed_every_stage_has_hint(cls):
    msg = err_hydration_failed(cls("boom", path="app1"))
    assert f"stage '{cls.stage}'" in msg
    assert "app1" in msg
    assert "remain on disk" in msg
    # A stage-specific hint, not the generic fallback.
    assert "Fix the cause above" not in msg


def test_err_hydration_failed_without_path():
    msg = err_hydration_failed(HydrationError("boom"))
    assert "(path" not in msg
    assert "Fix the cause above" in msg


def test_with_context_keeps_class_and_path():
    err = ManifestParseError("bad", path="a").with_context("outer")
    assert isinstance(err, ManifestParseError)
    assert str(err) == "outer: bad"
    assert err.path == "a"
    assert err.with_context("again", "b").path == "b"
