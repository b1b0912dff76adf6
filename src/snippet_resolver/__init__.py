"""
snippet-resolver - expand registry snippets inside parsed abbreviation trees

Nodes whose names match a registered snippet are replaced by the snippet's
own tree, keeping the attributes, classes, text and repeat state written in
the abbreviation.
"""

from importlib.metadata import version

from snippet_resolver.core import Attribute, Node, Repeat
from snippet_resolver.exceptions import (
    SnippetParseError,
    SnippetResolverError,
    TreeStructureError,
    UnknownSnippetError,
)
from snippet_resolver.resolver import SnippetResolver, resolve_snippets
from snippet_resolver.snippets import (
    HandlerSnippet,
    Snippet,
    SnippetRegistry,
    TemplateSnippet,
)

__version__ = version("snippet-resolver")

__all__ = [
    "__version__",
    "Node",
    "Attribute",
    "Repeat",
    "Snippet",
    "TemplateSnippet",
    "HandlerSnippet",
    "SnippetRegistry",
    "SnippetResolver",
    "resolve_snippets",
    "SnippetResolverError",
    "SnippetParseError",
    "TreeStructureError",
    "UnknownSnippetError",
]
