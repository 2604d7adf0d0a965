from pygls.lsp.server import LanguageServer

from snippetsls.lsp.capabilities.capabilities import CapabilityManager
from snippetsls.lsp.text_sync_manager import TextSyncManager
from snippetsls.snippets.store import SnippetStore
from snippetsls.snippets.types import LanguageSnippetTable
from snippetsls.workspace.documents import DocumentRegistry


class SnippetsLanguageServer(LanguageServer):
    """
    Custom Language Server carrying the snippet state of the session.

    Attributes:
        snippet_store: Built-in snippets, loaded at startup
        snippets: Table resolved during initialize, read-only afterwards
        document_registry: Language of every open document
    """

    def __init__(self, name: str, version: str, snippet_store: SnippetStore):
        super().__init__(name, version)

        self.snippet_store = snippet_store
        self.snippets: LanguageSnippetTable | None = None
        self.document_registry: DocumentRegistry | None = None
        self.capability_manager: CapabilityManager | None = None
        self.text_sync_manager: TextSyncManager | None = None
