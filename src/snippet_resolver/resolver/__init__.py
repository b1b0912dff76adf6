"""
Snippet resolution components.

This package provides the tree walk driver, snippet expansion with cycle
detection, node merging and the deepest-node lookup used for splicing.
"""

from snippet_resolver.resolver.guard import ExpansionGuard
from snippet_resolver.resolver.merge import (
    merge_attributes,
    merge_class_names,
    merge_nodes,
)
from snippet_resolver.resolver.resolution import (
    SnippetResolver,
    find_deepest_node,
    resolve_snippets,
)

__all__ = [
    "SnippetResolver",
    "resolve_snippets",
    "find_deepest_node",
    "merge_nodes",
    "merge_attributes",
    "merge_class_names",
    "ExpansionGuard",
]
