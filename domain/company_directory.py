"""
domain/company_directory.py

Name -> symbol mapping of tracked companies.

Thread Safety: Not thread-safe - mutate only on the Qt main thread.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class Listing(Protocol):
    """Anything carrying a display name and its ticker symbol."""

    company_name: str
    symbol: str


class CompanyDirectory:
    """
    Mapping from company display name to ticker symbol.

    Duplicate names are last-write-wins. Positions are only meaningful
    relative to one call of entries(); re-derive them after every merge.
    """

    def __init__(self) -> None:
        self._symbols_by_name: dict[str, str] = {}

    def merge(self, listings: Iterable[Listing]) -> None:
        for listing in listings:
            self._symbols_by_name[listing.company_name] = listing.symbol

    def entries(self) -> tuple[tuple[str, ...], tuple[str, ...]]:
        """
        Enumerate the mapping once.

        Returns:
            (names, symbols) where symbols[i] belongs to names[i]
        """
        pairs = list(self._symbols_by_name.items())
        names = tuple(name for name, _ in pairs)
        symbols = tuple(symbol for _, symbol in pairs)
        return names, symbols

    def symbol_for(self, name: str) -> str | None:
        return self._symbols_by_name.get(name)

    def __len__(self) -> int:
        return len(self._symbols_by_name)
