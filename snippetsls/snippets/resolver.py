"""
Snippet resolution.

The snippets offered for completion come from three sources, merged in
order of increasing precedence:

1. the built-in store shipped with the server
2. the user's snippets file (``snippetsFile``)
3. inline snippets from ``initializationOptions`` (``snippets``)

Sources are merged per (language, trigger): a later source replaces single
bodies, never whole languages. Problems with user-supplied sources are
logged and the source is treated as empty.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml

from snippetsls.snippets.config import InitializationOptions
from snippetsls.snippets.store import SnippetStore
from snippetsls.snippets.types import LanguageSnippetTable, coerce_table

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")


def merge(
    base: LanguageSnippetTable, overlay: LanguageSnippetTable
) -> LanguageSnippetTable:
    """
    Merge ``overlay`` over ``base`` and return a new table.

    Languages missing from ``base`` are added; for languages present in
    both, overlay triggers replace or extend the base snippets. Neither
    argument is modified.
    """
    merged = {language: dict(snippets) for language, snippets in base.items()}

    for language, snippets in overlay.items():
        merged.setdefault(language, {}).update(snippets)

    return merged


def load_snippets_file(path: Path) -> LanguageSnippetTable:
    """
    Load a snippets file.

    A missing or unreadable file is normal (most users have none) and
    yields an empty table silently. A file that does not parse, or does
    not hold a language -> trigger -> body table, is dropped as a whole.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return {}

    try:
        data = _parse(path, content)
        return coerce_table(data)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, TypeError) as e:
        logger.debug("Ignoring snippets file %s: %s", path, e)
        return {}


def _parse(path: Path, content: str) -> Any:
    if path.suffix.lower() in YAML_SUFFIXES:
        data = yaml.safe_load(content)
        # An empty YAML document is an empty table.
        return {} if data is None else data

    return tomllib.loads(content)


def resolve(
    store: SnippetStore, initialization_options: Any = None
) -> LanguageSnippetTable:
    """
    Build the snippet table used for the rest of the session.

    Args:
        store: built-in snippets
        initialization_options: raw ``initializationOptions`` from the
            editor, or an already validated ``InitializationOptions``

    Returns:
        The merged table. Without initialization options this is exactly
        the built-in table.
    """
    snippets = store.table()

    if initialization_options is None:
        return snippets

    if isinstance(initialization_options, InitializationOptions):
        options = initialization_options
    else:
        options = InitializationOptions.from_raw(initialization_options)

    if options.snippets_file is not None:
        snippets = merge(snippets, load_snippets_file(options.snippets_file))

    return merge(snippets, options.snippets)
