"""Filesystem helpers for file discovery."""

from fsys.files import (
    basename,
    file_exists,
    file_size,
    get_full_path,
    get_path_name,
    get_preferred_path,
    hash_path,
    is_directory,
    is_regular_file,
    make_directory,
    read_file_content,
    remove_directory_recursively,
)

__all__ = [
    "basename",
    "file_exists",
    "file_size",
    "get_full_path",
    "get_path_name",
    "get_preferred_path",
    "hash_path",
    "is_directory",
    "is_regular_file",
    "make_directory",
    "read_file_content",
    "remove_directory_recursively",
]
