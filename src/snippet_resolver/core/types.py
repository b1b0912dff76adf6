"""
Callable type aliases shared by the resolver and snippet handlers.
"""

from collections.abc import Callable

from snippet_resolver.core.node import Node

ParseFunction = Callable[[str], Node]

ResolveFunction = Callable[[Node], None]
