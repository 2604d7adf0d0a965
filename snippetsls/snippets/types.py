"""Shared snippet data types."""

from __future__ import annotations

from typing import Any, TypeAlias

# trigger -> body
SnippetSet: TypeAlias = dict[str, str]

# language id -> snippets
LanguageSnippetTable: TypeAlias = dict[str, SnippetSet]


def coerce_table(data: Any) -> LanguageSnippetTable:
    """
    Validate a loosely typed value as a LanguageSnippetTable.

    The value must be a two-level mapping of strings
    (language -> trigger -> body). A fresh table is returned; ``data``
    is never kept.

    Raises:
        TypeError: if ``data`` does not have that shape.
    """
    if not isinstance(data, dict):
        raise TypeError(f"expected a table of languages, got {type(data).__name__}")

    table: LanguageSnippetTable = {}
    for language, snippets in data.items():
        if not isinstance(language, str):
            raise TypeError(f"language name must be a string, got {language!r}")
        if not isinstance(snippets, dict):
            raise TypeError(
                f"snippets for {language!r} must be a table, "
                f"got {type(snippets).__name__}"
            )

        snippet_set: SnippetSet = {}
        for trigger, body in snippets.items():
            if not isinstance(trigger, str) or not isinstance(body, str):
                raise TypeError(
                    f"snippet {language}.{trigger} must map a string to a string"
                )
            snippet_set[trigger] = body

        table[language] = snippet_set

    return table
