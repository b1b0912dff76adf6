"""
Snippet resolver exception classes.

This package provides all exception types used throughout the snippet
resolver for consistent error handling and reporting.
"""

from snippet_resolver.exceptions.core import (
    SnippetParseError,
    SnippetResolverError,
    TreeStructureError,
    UnknownSnippetError,
)

__all__ = [
    "SnippetResolverError",
    "SnippetParseError",
    "TreeStructureError",
    "UnknownSnippetError",
]
