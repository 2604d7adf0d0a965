"""
Initialization options accepted by the server.

Editors send ``initializationOptions`` as free-form JSON. This module turns
that value into an ``InitializationOptions`` instance, logging and dropping
anything it cannot use instead of failing.

Recognized keys:
    snippetsFile: path to a TOML (or YAML) snippets file. ``~/`` expands to
        the home directory. Defaults to ``~/.config/snippets-ls/snippets.toml``.
    snippets: inline table of language -> trigger -> body.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from snippetsls.snippets.types import LanguageSnippetTable, coerce_table

logger = logging.getLogger(__name__)

SNIPPETS_FILE_KEYS = ("snippetsFile", "snippets_file")
SNIPPETS_KEY = "snippets"

DEFAULT_SNIPPETS_FILE = Path(".config") / "snippets-ls" / "snippets.toml"


def _home() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        return None


def expand_home(path: str) -> Path:
    """Expand a leading ``~/``; keep the literal path if there is no home."""
    if path.startswith("~/"):
        home = _home()
        if home is not None:
            return home / path[2:]

    return Path(path)


def default_snippets_file() -> Path | None:
    """Well-known location of the user's snippets file."""
    home = _home()
    if home is None:
        return None

    return home / DEFAULT_SNIPPETS_FILE


@dataclass(frozen=True)
class InitializationOptions:
    """
    Validated initialization options.

    Attributes:
        snippets_file: file to merge over the built-in snippets, or None
            when there is no usable file source.
        snippets: inline snippets merged last.
    """

    snippets_file: Path | None = None
    snippets: LanguageSnippetTable = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Any) -> InitializationOptions:
        """Coerce the editor-supplied value, degrading bad parts to empty."""
        if raw is None:
            return cls()

        if not isinstance(raw, dict):
            logger.warning(
                "initializationOptions must be an object, got %s",
                type(raw).__name__,
            )
            return cls()

        return cls(
            snippets_file=_snippets_file_option(raw),
            snippets=_snippets_option(raw),
        )


def _snippets_file_option(raw: dict[str, Any]) -> Path | None:
    for key in SNIPPETS_FILE_KEYS:
        if key in raw:
            value = raw[key]
            if not isinstance(value, str):
                logger.warning("%s is not a string, ignoring it", key)
                return None
            return expand_home(value)

    return default_snippets_file()


def _snippets_option(raw: dict[str, Any]) -> LanguageSnippetTable:
    if SNIPPETS_KEY not in raw:
        return {}

    try:
        return coerce_table(raw[SNIPPETS_KEY])
    except TypeError as e:
        logger.warning("snippets are invalid, ignoring them: %s", e)
        return {}
