"""String interning table mapping text to small stable identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING, NewType

if TYPE_CHECKING:
    from collections.abc import Iterator

SymbolId = NewType("SymbolId", int)

_BAD_ID = SymbolId(0)
_BAD_SYMBOL = "@@BAD_SYMBOL@@"


class InvalidSymbolIdError(LookupError):
    """Raised when an id that this table never issued is dereferenced."""


class SymbolTable:
    """Arena of interned strings indexed by integer handle.

    Slot 0 of the arena is reserved for the Bad Id and never holds text, so
    every id returned by ``register_symbol`` compares unequal to
    ``get_bad_id()``. Ids are assigned in insertion order and entries are
    never removed for the lifetime of the table.

    The table is not synchronized; callers sharing one instance across
    threads must serialize registrations themselves.
    """

    def __init__(self) -> None:
        self._arena: list[str | None] = [None]
        self._index: dict[str, SymbolId] = {}

    @staticmethod
    def get_bad_id() -> SymbolId:
        return _BAD_ID

    @staticmethod
    def get_bad_symbol() -> str:
        return _BAD_SYMBOL

    def register_symbol(self, text: str) -> SymbolId:
        """Intern ``text`` and return its id, reusing an existing entry."""
        if not isinstance(text, str):
            msg = f"symbol text must be str, got {type(text).__name__}"
            raise TypeError(msg)

        existing = self._index.get(text)
        if existing is not None:
            return existing

        symbol_id = SymbolId(len(self._arena))
        self._arena.append(text)
        self._index[text] = symbol_id
        return symbol_id

    def get_id(self, text: str) -> SymbolId:
        """Return the id of ``text`` without registering it (Bad Id if absent)."""
        return self._index.get(text, _BAD_ID)

    def get_symbol(self, symbol_id: SymbolId) -> str:
        """Dereference ``symbol_id``.

        Raises:
            InvalidSymbolIdError: If ``symbol_id`` is the Bad Id or was not
                issued by this table.
        """
        if (
            isinstance(symbol_id, bool)
            or not isinstance(symbol_id, int)
            or symbol_id <= _BAD_ID
            or symbol_id >= len(self._arena)
        ):
            msg = f"Symbol id {symbol_id!r} was not issued by this table"
            raise InvalidSymbolIdError(msg)

        text = self._arena[symbol_id]
        assert text is not None
        return text

    def symbols(self) -> tuple[str, ...]:
        """Registered texts in insertion order."""
        return tuple(self._index)

    def __len__(self) -> int:
        return len(self._arena) - 1

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and text in self._index

    def __iter__(self) -> Iterator[SymbolId]:
        return (SymbolId(i) for i in range(1, len(self._arena)))

    def __repr__(self) -> str:
        return f"SymbolTable(size={len(self)})"
