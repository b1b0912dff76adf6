"""
Exception classes for snippet resolution.

This module defines the exception types raised while expanding snippets and
while relinking nodes of an abbreviation tree.
"""


class SnippetResolverError(Exception):
    """Base exception for all snippet resolver errors."""

    pass


class SnippetParseError(SnippetResolverError):
    """Raised when a snippet template cannot be parsed into a tree."""

    def __init__(self, snippet_value: str, reason: str, node_name: str | None = None):
        """
        Initialize the exception.

        Params:
            snippet_value: Template source text of the failing snippet
            reason: Message of the underlying parser error
            node_name: Name of the node that matched the snippet
        """
        self.snippet_value = snippet_value
        self.reason = reason
        self.node_name = node_name
        target = f" for node '{node_name}'" if node_name else ""
        super().__init__(f'Unable to parse "{snippet_value}" snippet{target}: {reason}')


class TreeStructureError(SnippetResolverError):
    """Raised when a tree operation would break parent/child consistency."""

    def __init__(self, reason: str):
        """
        Initialize the exception.

        Params:
            reason: Description of the invalid operation
        """
        self.reason = reason
        super().__init__(f"Invalid tree operation: {reason}")


class UnknownSnippetError(SnippetResolverError):
    """Raised when an alias points to a snippet name that is not registered."""

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: The snippet name that was not found
        """
        self.name = name
        super().__init__(f"Snippet '{name}' is not registered")
