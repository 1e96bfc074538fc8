"""Ordered search directory lists bound to a symbol table."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from settings.config import LocatorConfig
    from symbols.table import SymbolId, SymbolTable


class SearchPaths:
    """Directory symbol ids in resolution order.

    Duplicates are kept and tried again in sequence.
    """

    def __init__(
        self, table: SymbolTable, directories: Iterable[str] = ()
    ) -> None:
        self._table = table
        self._ids: list[SymbolId] = []
        self.extend(directories)

    @classmethod
    def from_config(
        cls, config: LocatorConfig, table: SymbolTable, root: Path
    ) -> SearchPaths:
        return cls(table, config.resolved_search_paths(root))

    @property
    def table(self) -> SymbolTable:
        return self._table

    def add(self, directory: str) -> SymbolId:
        symbol_id = self._table.register_symbol(directory)
        self._ids.append(symbol_id)
        return symbol_id

    def extend(self, directories: Iterable[str]) -> None:
        for directory in directories:
            self.add(directory)

    def ids(self) -> list[SymbolId]:
        return list(self._ids)

    def directories(self) -> list[str]:
        return [self._table.get_symbol(symbol_id) for symbol_id in self._ids]

    def __iter__(self) -> Iterator[SymbolId]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"SearchPaths({self.directories()!r})"
