"""
Main entry point for the snippets language server.

The server communicates with editors via stdin/stdout using JSON-RPC, so
all diagnostics go to stderr.
"""
import logging
import os
import sys

from snippetsls.lsp.server import create_server

logger = logging.getLogger("snippetsls")


def main():
    """Start the language server on stdin/stdout."""
    debug = bool(os.getenv("DEBUG"))

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    # Check if we're in debug mode
    if debug:
        logger.info("snippets-ls starting in DEBUG mode")
        logger.info("Waiting for debugger to attach on port 5678...")
        try:
            import debugpy  # type: ignore
            debugpy.listen(("127.0.0.1", 5678))
            debugpy.wait_for_client()
            logger.info("Debugger attached! Continuing...")
        except ImportError:
            logger.warning("debugpy not available - install with: pip install snippets-ls[dev]")

    server = create_server()

    logger.info("starting snippets server")
    server.start_io()
    logger.info("shutting down server")


if __name__ == "__main__":
    main()
