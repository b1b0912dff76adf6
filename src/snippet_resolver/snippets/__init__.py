"""
Snippet definitions and registry.

This package provides the template and handler snippet variants, the lookup
protocol consumed by the resolver and a simple in-memory registry.
"""

from snippet_resolver.snippets.registry import SnippetRegistry, create_snippet
from snippet_resolver.snippets.snippet import (
    HandlerSnippet,
    Snippet,
    SnippetHandler,
    SnippetLookup,
    TemplateSnippet,
)

__all__ = [
    "Snippet",
    "TemplateSnippet",
    "HandlerSnippet",
    "SnippetHandler",
    "SnippetLookup",
    "SnippetRegistry",
    "create_snippet",
]
