"""
Core tree components.

This package provides the abbreviation tree node, the attribute and repeat
models attached to nodes and the callable types exchanged with parsers.
"""

from snippet_resolver.core.models import Attribute, Repeat
from snippet_resolver.core.node import CLASS_ATTRIBUTE, Node
from snippet_resolver.core.types import ParseFunction, ResolveFunction

__all__ = [
    "Node",
    "Attribute",
    "Repeat",
    "CLASS_ATTRIBUTE",
    "ParseFunction",
    "ResolveFunction",
]
