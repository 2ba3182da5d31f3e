"""Path helpers producing forward-slash paths for map fields and URLs."""

from __future__ import annotations

import os
import posixpath
from urllib.parse import urlsplit


def to_posix(path: str) -> str:
    """Convert host separators to forward slashes."""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return path.replace("\\", "/")


def relative(from_dir: str, to_path: str) -> str:
    """Return the shortest relative path from ``from_dir`` to ``to_path``.

    The result uses forward slashes, has no trailing slash and is ``''`` when
    both locations are the same directory.
    """
    result = to_posix(os.path.relpath(to_path, from_dir))
    if result == ".":
        return ""
    return result.rstrip("/")


def join(*segments: str) -> str:
    """Join and normalize path segments, treating empty strings as no-ops."""
    parts = [to_posix(segment) for segment in segments if segment]
    if not parts:
        return ""
    joined = posixpath.normpath(posixpath.join(*parts))
    if joined == ".":
        return ""
    return joined


def url_path(relative_url: str) -> str:
    """Anchor a relative URL at ``/`` so it can follow a host prefix."""
    return posixpath.normpath(posixpath.join("/", to_posix(relative_url)))


def is_absolute_root(root: str) -> bool:
    """True for roots that must not be rebased: rooted paths and URLs."""
    if not root:
        return False
    if root.startswith("/") or os.path.isabs(root):
        return True
    return bool(urlsplit(root).scheme)
