"""snippets-ls: a language server offering per-language text snippets."""

__version__ = "0.1.0"
