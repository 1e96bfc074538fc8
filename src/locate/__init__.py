"""File location against ordered search directories."""

from locate.locator import FileLocator, find_file, locate_file
from locate.search_paths import SearchPaths

__all__ = [
    "FileLocator",
    "SearchPaths",
    "find_file",
    "locate_file",
]
