"""Canonical path helpers.

Every table key is a slash-rooted path with redundant separators and
relative segments resolved. Lookups canonicalize first so equivalent
spellings land on the same record.
"""

from __future__ import annotations

import posixpath

from core.constants import PATH_SEPARATOR, ROOT_PATH


def canonical_path(name: str) -> str:
    """Return the canonical form of a virtual path.

    Args:
        name: Raw path, rooted or relative, possibly with ``.``/``..``
            segments or doubled separators.

    Returns:
        Slash-rooted cleaned path. ``..`` never climbs above the root.
    """
    # normpath keeps a leading "//", so the path is re-rooted after stripping
    rooted = ROOT_PATH + name.lstrip(PATH_SEPARATOR)
    return posixpath.normpath(rooted)


def is_canonical(name: str) -> bool:
    """Return whether a path is already in canonical form."""
    return canonical_path(name) == name


def base_name(path: str) -> str:
    """Return the last element of a canonical path; ``/`` for the root."""
    if path == ROOT_PATH:
        return ROOT_PATH
    return posixpath.basename(path)


def parent_path(path: str) -> str:
    """Return the canonical parent directory of a canonical path."""
    return posixpath.dirname(path) or ROOT_PATH


def join_mount(mount_name: str, name: str) -> str:
    """Rewrite a caller path onto a mount prefix.

    Exactly one separator joins prefix and path before canonicalizing, so
    ``"schemas"`` and ``"/schemas/"`` mount the same subtree.

    Args:
        mount_name: Logical prefix exposed as the root.
        name: Path requested by the caller.

    Returns:
        Canonical path inside the full table.
    """
    if not mount_name:
        return canonical_path(name)
    joined = mount_name.rstrip(PATH_SEPARATOR) + PATH_SEPARATOR + name.lstrip(PATH_SEPARATOR)
    return canonical_path(joined)
