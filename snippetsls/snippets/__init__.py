"""Snippet loading and resolution for snippets-ls."""
from .config import InitializationOptions
from .resolver import merge, resolve
from .store import SnippetStore, SnippetStoreError

__all__ = [
    'InitializationOptions',
    'SnippetStore',
    'SnippetStoreError',
    'merge',
    'resolve',
]
