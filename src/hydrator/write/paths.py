"""Traversal-safe path join for untrusted bundle paths.

Security model:
  - The base directory is resolved once (symlinks followed).
  - The untrusted path is joined onto it and resolved, so ``..`` segments and
    symlinks anywhere in the chain are collapsed to their real target.
  - An absolute untrusted path replaces the base during the join; it is only
    accepted if it still lands inside the base.
  - Anything that resolves outside the base is a hard fail.
"""

from __future__ import annotations

import os
from pathlib import Path

from hydrator.errors import PathTraversalError


def secure_join(base: str | os.PathLike[str], untrusted: str) -> Path:
    """Join *untrusted* onto *base* and confine the result to *base*.

    Args:
        base: Trusted root directory. It does not need to exist yet.
        untrusted: Relative (or absolute) path supplied by the caller.
            An empty string resolves to *base* itself.

    Returns:
        Resolved absolute Path inside *base*.

    Raises:
        PathTraversalError: If the resolved path is outside *base*, or the
            path contains a NUL byte.
    """
    if "\x00" in untrusted:
        raise PathTraversalError(f"Path {untrusted!r} contains a NUL byte.", path=untrusted)

    resolved_base = Path(base).resolve()
    resolved = (resolved_base / untrusted).resolve()

    try:
        resolved.relative_to(resolved_base)
    except ValueError:
        raise PathTraversalError(
            f"Path '{untrusted}' resolves outside the hydration root "
            f"('{resolved_base}'). Path traversal is not permitted.",
            path=untrusted,
        ) from None

    return resolved
