"""
Text Synchronization Manager

Handles the LSP text sync notifications the server cares about (open and
close) and broadcasts them to hooks registered by other components.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable

from lsprotocol.types import (
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    LogMessageParams,
    MessageType,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
)

if TYPE_CHECKING:
    from snippetsls.lsp.snippets_language_server import SnippetsLanguageServer


# Type aliases for hook signatures
OnOpenHook = Callable[[DidOpenTextDocumentParams], Awaitable[None]]
OnCloseHook = Callable[[DidCloseTextDocumentParams], Awaitable[None]]


class TextSyncManager:
    """
    Manages text document synchronization and hook broadcasting.

    - Hooks run in registration order
    - A failing hook is logged and does not stop the others
    - Hooks return nothing (these are notifications, not requests)

    Usage:
        text_sync = TextSyncManager(server)
        text_sync.register_handlers()
        server.text_sync_manager = text_sync

        registry = DocumentRegistry(snippets, server=server)
        registry.register_text_sync_hooks()
    """

    def __init__(self, server: SnippetsLanguageServer) -> None:
        self.server = server

        self._on_open_hooks: list[OnOpenHook] = []
        self._on_close_hooks: list[OnCloseHook] = []
        self._registered = False

    def add_on_open_hook(self, hook: OnOpenHook) -> None:
        """
        Register a hook for document open events.

        Args:
            hook: Async function taking DidOpenTextDocumentParams
        """
        self._on_open_hooks.append(hook)

    def add_on_close_hook(self, hook: OnCloseHook) -> None:
        """
        Register a hook for document close events.

        Args:
            hook: Async function taking DidCloseTextDocumentParams
        """
        self._on_close_hooks.append(hook)

    async def _broadcast_on_open(self, params: DidOpenTextDocumentParams) -> None:
        for hook in self._on_open_hooks:
            try:
                await hook(params)
            except Exception as e:
                self._log_hook_error("on_open", hook, e)

    async def _broadcast_on_close(self, params: DidCloseTextDocumentParams) -> None:
        for hook in self._on_close_hooks:
            try:
                await hook(params)
            except Exception as e:
                self._log_hook_error("on_close", hook, e)

    def _log_hook_error(self, event: str, hook: Callable, error: Exception) -> None:
        self.server.window_log_message(
            LogMessageParams(
                type=MessageType.Error,
                message=f"Error in {event} hook {getattr(hook, '__name__', hook)}: "
                        f"{type(error).__name__}: {error}"
            )
        )

    def register_handlers(self) -> None:
        """
        Register textDocument/didOpen and textDocument/didClose with the server.

        Call once, before components add their hooks.
        """
        if self._registered:
            return

        @self.server.feature(TEXT_DOCUMENT_DID_OPEN)
        async def did_open(
            ls: SnippetsLanguageServer,
            params: DidOpenTextDocumentParams,
        ) -> None:
            """
            Handle document opened notification.

            params.text_document carries the uri and language_id the
            registry needs.
            """
            await self._broadcast_on_open(params)

        @self.server.feature(TEXT_DOCUMENT_DID_CLOSE)
        async def did_close(
            ls: SnippetsLanguageServer,
            params: DidCloseTextDocumentParams,
        ) -> None:
            """Handle document closed notification."""
            await self._broadcast_on_close(params)

        self._registered = True
