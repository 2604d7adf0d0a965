"""
Snippet completion.

Offers every snippet defined for the language of the document being edited.
The snippet bodies are passed to the editor untouched.
"""

from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    InsertTextFormat,
)

from snippetsls.lsp.capabilities.capabilities import CompletionCapability


class SnippetsCompletionCapability(CompletionCapability):
    """Provides completion for the snippets of the document's language."""

    @property
    def name(self) -> str:
        return "snippets_completion"

    @property
    def description(self) -> str:
        return "Complete snippet triggers for the language of the open document"

    async def can_handle(self, params: CompletionParams) -> bool:
        registry = self.server.document_registry
        if registry is None:
            return False

        return params.text_document.uri in registry

    async def complete(self, params: CompletionParams) -> CompletionList:
        registry = self.server.document_registry
        if registry is None:
            return CompletionList(is_incomplete=False, items=[])

        uri = params.text_document.uri
        language = registry.language_of(uri)

        items = [
            CompletionItem(
                label=trigger,
                kind=CompletionItemKind.Snippet,
                detail=language,
                insert_text=body,
                insert_text_format=InsertTextFormat.Snippet,
            )
            for trigger, body in registry.snippets_for(uri)
        ]

        return CompletionList(is_incomplete=False, items=items)
