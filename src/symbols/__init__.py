"""Symbol interning utilities."""

from symbols.table import InvalidSymbolIdError, SymbolId, SymbolTable

__all__ = [
    "InvalidSymbolIdError",
    "SymbolId",
    "SymbolTable",
]
