"""Shared path-string utilities for filelocator."""

from __future__ import annotations

import os

SEPARATORS: tuple[str, ...] = tuple(sep for sep in (os.sep, os.altsep) if sep)


def ends_with_separator(path: str) -> bool:
    return path.endswith(SEPARATORS)


def join_search_path(directory: str, name: str) -> str:
    """Join a search directory and a file name with exactly one separator.

    Args:
        directory: Directory string, with or without a trailing separator
        name: File name (or relative path) to append

    Returns:
        Candidate path string. An empty directory yields ``name`` unchanged.

    Examples:
        >>> join_search_path("/tmp/x/a", "target.txt")
        '/tmp/x/a/target.txt'
        >>> join_search_path("/tmp/x/b/", "target.txt")
        '/tmp/x/b/target.txt'
        >>> join_search_path("", "target.txt")
        'target.txt'
    """
    if not directory:
        return name
    if ends_with_separator(directory):
        return directory + name
    return directory + os.sep + name


def strip_trailing_separators(path: str) -> str:
    """Drop trailing separators, keeping a bare root such as ``/`` intact."""
    stripped = path.rstrip("".join(SEPARATORS))
    if not stripped and path:
        return path[0]
    return stripped
