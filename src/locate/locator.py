"""Resolve file name symbols against ordered search directories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fsys.files import file_exists, is_regular_file
from locate.search_paths import SearchPaths
from symbols.table import SymbolTable
from utils import join_search_path

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from settings.config import LocatorConfig
    from symbols.table import SymbolId

logger = logging.getLogger(__name__)


def find_file(
    file_id: SymbolId,
    table: SymbolTable,
    search_paths: Iterable[SymbolId],
    *,
    exists: Callable[[str], bool] = file_exists,
) -> SymbolId | None:
    """Find the first existing location of a file name symbol.

    Args:
        file_id: Symbol id of the file name (or an already resolved path)
        table: Table that issued ``file_id`` and every search path id
        search_paths: Directory symbol ids, tried in order
        exists: Existence oracle queried for each candidate path

    Returns:
        ``file_id`` itself when its text already names an existing path,
        otherwise the id of the first ``<dir><sep><name>`` candidate that
        exists, or None when no candidate exists.

    Raises:
        InvalidSymbolIdError: If any id was not issued by ``table``.
    """
    name = table.get_symbol(file_id)
    if exists(name):
        return file_id

    tried: list[str] = []
    for dir_id in search_paths:
        candidate = join_search_path(table.get_symbol(dir_id), name)
        if exists(candidate):
            logger.debug("Located %s at %s", name, candidate)
            return table.register_symbol(candidate)
        tried.append(candidate)

    logger.debug("Could not locate %s; tried %s", name, tried)
    return None


def locate_file(
    file_id: SymbolId,
    table: SymbolTable,
    search_paths: Iterable[SymbolId],
    *,
    exists: Callable[[str], bool] = file_exists,
) -> SymbolId:
    """Like :func:`find_file`, but a miss returns ``SymbolTable.get_bad_id()``."""
    found = find_file(file_id, table, search_paths, exists=exists)
    if found is None:
        return SymbolTable.get_bad_id()
    return found


class FileLocator:
    """A symbol table, its search paths and an existence oracle bound together."""

    def __init__(
        self,
        search_paths: SearchPaths,
        *,
        exists: Callable[[str], bool] = file_exists,
    ) -> None:
        self.search_paths = search_paths
        self.exists = exists

    @classmethod
    def from_config(
        cls, config: LocatorConfig, table: SymbolTable, root: Path
    ) -> FileLocator:
        exists = is_regular_file if config.require_regular_file else file_exists
        return cls(SearchPaths.from_config(config, table, root), exists=exists)

    @property
    def table(self) -> SymbolTable:
        return self.search_paths.table

    def locate(self, name: str | SymbolId) -> SymbolId:
        """Resolve a file name (text or symbol id); Bad Id when not found."""
        file_id = self.table.register_symbol(name) if isinstance(name, str) else name
        return locate_file(file_id, self.table, self.search_paths, exists=self.exists)

    def resolve(self, name: str) -> str | None:
        """Resolve a file name to its path text, or None when not found."""
        file_id = self.table.register_symbol(name)
        found = find_file(file_id, self.table, self.search_paths, exists=self.exists)
        if found is None:
            return None
        return self.table.get_symbol(found)
