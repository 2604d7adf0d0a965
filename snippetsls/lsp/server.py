from lsprotocol.types import (
    INITIALIZE,
    TEXT_DOCUMENT_COMPLETION,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    InitializeParams,
    LogMessageParams,
    MessageType,
)

from snippetsls import __version__
from snippetsls.lsp.capabilities.capabilities import CapabilityManager
from snippetsls.lsp.snippets_language_server import SnippetsLanguageServer
from snippetsls.lsp.text_sync_manager import TextSyncManager
from snippetsls.snippets.resolver import resolve
from snippetsls.snippets.store import SnippetStore
from snippetsls.workspace.documents import DocumentRegistry


def create_server(store: SnippetStore | None = None) -> SnippetsLanguageServer:
    """
    Creates and returns a configured Language Server instance.

    The built-in snippets are loaded here, so a broken bundled definition
    stops the server before it starts listening. Everything that depends
    on the editor's initializationOptions is set up in ``initialize``.
    """
    if store is None:
        store = SnippetStore.bundled()

    server = SnippetsLanguageServer("snippets-ls", __version__, store)

    # Text sync handlers must exist before the client starts sending
    # didOpen; components add their hooks during initialize.
    server.text_sync_manager = TextSyncManager(server)
    server.text_sync_manager.register_handlers()

    @server.feature(INITIALIZE)
    def initialize(ls: SnippetsLanguageServer, params: InitializeParams):
        """
        Resolve the snippet table and set up per-session state.
        """
        setup_session(ls, params.initialization_options)

    @server.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions())
    async def completion(ls: SnippetsLanguageServer, params: CompletionParams):
        if ls.capability_manager:
            return await ls.capability_manager.handle_completion(params)
        return CompletionList(is_incomplete=False, items=[])

    return server


def setup_session(ls: SnippetsLanguageServer, initialization_options=None) -> None:
    """
    Resolve the snippet table once and wire up the components using it.

    Runs during the initialize request, before any document is opened.
    """
    ls.snippets = resolve(ls.snippet_store, initialization_options)

    ls.document_registry = DocumentRegistry(ls.snippets, server=ls)
    ls.document_registry.register_text_sync_hooks()

    ls.capability_manager = CapabilityManager(ls)
    ls.capability_manager.register_all()

    count = sum(len(snippets) for snippets in ls.snippets.values())
    message = LogMessageParams(
        MessageType.Info,
        f"Loaded {count} snippets for {len(ls.snippets)} languages",
    )
    ls.window_log_message(message)
