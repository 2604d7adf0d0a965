"""Workspace state for snippets-ls."""
from .documents import DocumentRegistry

__all__ = ['DocumentRegistry']
