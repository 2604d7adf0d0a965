"""
Built-in snippet store.

The default snippets live in ``snippets.toml`` next to this module and are
shipped as package data. They are parsed once when the server starts and
never modified afterwards.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from importlib import resources
from types import MappingProxyType

from snippetsls.snippets.types import LanguageSnippetTable, coerce_table

BUNDLED_SNIPPETS = "snippets.toml"


class SnippetStoreError(Exception):
    """Raised when the bundled snippet definition cannot be loaded."""


class SnippetStore:
    """
    Immutable language -> trigger -> body mapping.

    Usage:
        store = SnippetStore.bundled()
        table = store.table()  # a private, mutable copy
    """

    def __init__(self, table: Mapping[str, Mapping[str, str]]) -> None:
        self._table: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {
                language: MappingProxyType(dict(snippets))
                for language, snippets in table.items()
            }
        )

    @classmethod
    def from_toml(cls, text: str) -> SnippetStore:
        """Parse a TOML document into a store."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise SnippetStoreError(f"Invalid snippet definition: {e}") from e

        try:
            return cls(coerce_table(data))
        except TypeError as e:
            raise SnippetStoreError(f"Invalid snippet definition: {e}") from e

    @classmethod
    def bundled(cls) -> SnippetStore:
        """Load the snippets shipped inside the package."""
        source = resources.files("snippetsls.snippets").joinpath(BUNDLED_SNIPPETS)
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as e:
            raise SnippetStoreError(f"Cannot read {BUNDLED_SNIPPETS}: {e}") from e

        return cls.from_toml(text)

    def table(self) -> LanguageSnippetTable:
        """Return a deep copy of the built-in table."""
        return {
            language: dict(snippets)
            for language, snippets in self._table.items()
        }

    def languages(self) -> list[str]:
        return list(self._table)

    def get(self, language: str) -> Mapping[str, str] | None:
        return self._table.get(language)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"SnippetStore(languages={sorted(self._table)!r})"
