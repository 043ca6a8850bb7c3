"""Shared pytest fixtures."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture
def hydrate_root(tmp_path):
    """Existing, empty hydration root inside tmp_path."""
    root = tmp_path / "out"
    root.mkdir()
    return root


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
