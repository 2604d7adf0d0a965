"""
Document Registry

Tracks the language of every document open in the editor and answers
"which snippets apply to this document?" for completion requests.

State lives in memory only. Entries are added by textDocument/didOpen and
removed by textDocument/didClose.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lsprotocol.types import DidCloseTextDocumentParams, DidOpenTextDocumentParams

from snippetsls.snippets.types import LanguageSnippetTable

if TYPE_CHECKING:
    from snippetsls.lsp.snippets_language_server import SnippetsLanguageServer


class DocumentRegistry:
    """
    Maps open documents to their language and resolved snippets.

    Usage:
        registry = DocumentRegistry(snippets, server=ls)
        registry.register_text_sync_hooks()

        registry.on_open("file:///a.rb", "ruby")
        registry.snippets_for("file:///a.rb")  # [("pry", "binding.pry"), ...]
    """

    def __init__(
        self,
        snippets: LanguageSnippetTable,
        server: SnippetsLanguageServer | None = None,
    ) -> None:
        self.snippets = snippets
        self.server = server

        # uri -> language id
        self._documents: dict[str, str] = {}

    def on_open(self, document_id: str, language_id: str) -> None:
        """Record (or replace) the language of a document."""
        self._documents[document_id] = language_id

    def on_close(self, document_id: str) -> None:
        """Forget a document. Unknown documents are ignored."""
        self._documents.pop(document_id, None)

    def language_of(self, document_id: str) -> str | None:
        return self._documents.get(document_id)

    def snippets_for(self, document_id: str) -> list[tuple[str, str]]:
        """
        Return the (trigger, body) pairs available in a document.

        Unknown documents and languages without snippets give an empty list.
        """
        language = self._documents.get(document_id)
        if language is None:
            return []

        snippets = self.snippets.get(language)
        if not snippets:
            return []

        return list(snippets.items())

    def __contains__(self, document_id: str) -> bool:
        return document_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    # ===== Text sync =====

    def register_text_sync_hooks(self) -> None:
        """Keep the registry in step with the editor's open documents."""
        if not self.server or not self.server.text_sync_manager:
            return

        text_sync = self.server.text_sync_manager
        text_sync.add_on_open_hook(self._on_document_opened)
        text_sync.add_on_close_hook(self._on_document_closed)

    async def _on_document_opened(self, params: DidOpenTextDocumentParams) -> None:
        self.on_open(params.text_document.uri, params.text_document.language_id)

    async def _on_document_closed(self, params: DidCloseTextDocumentParams) -> None:
        self.on_close(params.text_document.uri)
