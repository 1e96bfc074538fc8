"""Filesystem probes and directory helpers used during file discovery."""

from __future__ import annotations

import hashlib
import logging
import os
import shutil
from pathlib import Path

from utils import SEPARATORS, strip_trailing_separators

logger = logging.getLogger(__name__)

_HASH_DIGEST_CHARS = 16


def file_exists(path: str) -> bool:
    """Return True when anything (file, directory, device) exists at path.

    OS errors such as permission denial read as absence.
    """
    return os.path.exists(path)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)


def is_regular_file(path: str) -> bool:
    return os.path.isfile(path)


def file_size(path: str) -> int:
    """Size of the file at ``path`` in bytes.

    Raises:
        OSError: If the path cannot be stat'ed.
    """
    return os.path.getsize(path)


def read_file_content(path: str) -> bytes:
    """Read the whole file at ``path``.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    return Path(path).read_bytes()


def make_directory(path: str) -> bool:
    """Create ``path`` and any missing parents.

    Returns True if the directory was created or already existed as a
    directory; False if it could not be created (e.g. a regular file is in
    the way).
    """
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as exc:
        logger.warning("Failed to create directory %s: %s", path, exc)
        return False
    return is_directory(path)


def remove_directory_recursively(path: str) -> bool:
    """Remove ``path`` and everything below it.

    Removing a path that does not exist succeeds. A non-directory at
    ``path`` is removed as a single file.
    """
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        elif os.path.lexists(path):
            os.remove(path)
    except OSError as exc:
        logger.warning("Failed to remove %s: %s", path, exc)
        return False
    return True


def basename(path: str) -> str:
    """Final component of ``path``; empty when it ends in a separator."""
    return os.path.basename(path)


def get_path_name(path: str) -> str:
    """Directory part of ``path`` with a trailing preferred separator.

    Examples:
        >>> get_path_name("")
        ''
        >>> get_path_name("/r/dir/file.txt")  # doctest: +SKIP
        '/r/dir/'
    """
    if not path:
        return ""
    parent = os.path.dirname(path)
    if not parent:
        return ""
    if parent.endswith(SEPARATORS):
        return parent
    return parent + os.sep


def get_full_path(path: str) -> str:
    """Canonical absolute path when ``path`` exists, plain absolute otherwise."""
    if file_exists(path):
        try:
            return str(Path(path).resolve(strict=True))
        except OSError:
            logger.debug("Could not canonicalize %s", path)
    return os.path.abspath(path)


def get_preferred_path(path: str) -> str:
    """Convert forward slashes to the platform's preferred separator."""
    if os.sep == "/":
        return path
    return path.replace("/", os.sep)


def hash_path(path: str) -> str:
    """Derive a short stable directory name from ``path``.

    The result is the last component of ``path``, an underscore, a hex
    digest of the full path, and a trailing separator, e.g.
    ``"src_1a2b3c4d5e6f7a8b/"`` for ``"/work/proj/src/"``.
    """
    digest = hashlib.sha256(path.encode("utf-8")).hexdigest()[:_HASH_DIGEST_CHARS]
    last_dir = os.path.basename(strip_trailing_separators(path))
    return f"{last_dir}_{digest}{os.sep}"
