"""
Snippet resolution for abbreviation trees.

Every node whose name matches a registered snippet is replaced by the tree
produced from that snippet. Template snippets are parsed, resolved
recursively and spliced into the position of the matched node; handler
snippets receive the node and rewrite it themselves.

A snippet that is already being expanded on the current call chain is left
alone. This terminates shape snippets that reuse their own name, such as
``img`` expanding to ``img[src alt]/``.
"""

import logging

from snippet_resolver.core.node import Node
from snippet_resolver.core.types import ParseFunction
from snippet_resolver.exceptions import SnippetParseError, TreeStructureError
from snippet_resolver.resolver.guard import ExpansionGuard
from snippet_resolver.resolver.merge import merge_nodes
from snippet_resolver.snippets.snippet import (
    HandlerSnippet,
    SnippetLookup,
    TemplateSnippet,
)

logger = logging.getLogger(__name__)


def find_deepest_node(node: Node) -> Node:
    """
    Follow the last child of each node down to a leaf.

    This is where the content of a node continues after it is replaced by a
    multi-level snippet: ``html>(head>title)+body`` continues at ``body``.

    Params:
        node: Root of the tree to descend

    Returns:
        The deepest, right-most node, or ``node`` itself if it has no children
    """
    while node.last_child is not None:
        node = node.last_child
    return node


class SnippetResolver:
    """
    Expands registry snippets found in abbreviation trees.

    Params:
        registry: Lookup mapping node names to snippets
        parse: Function turning a snippet template into a tree with a root container
    """

    def __init__(self, registry: SnippetLookup, parse: ParseFunction):
        self.registry = registry
        self.parse = parse

    def resolve_tree(self, tree: Node) -> Node:
        """
        Resolve every node of ``tree`` in place.

        Each visited node starts with a fresh cycle guard. Nodes spliced in by
        a resolution are already resolved and are skipped by the walk.

        Params:
            tree: Root container of a parsed abbreviation

        Returns:
            The same tree instance
        """
        tree.walk(self.resolve_node)
        return tree

    def resolve_node(self, node: Node) -> None:
        """
        Resolve a single attached node and everything a matched snippet brings in.

        Params:
            node: Node to resolve

        Raises:
            SnippetParseError: If a matched template cannot be parsed
            TreeStructureError: If a matched node has no parent to splice into
        """
        _expand(node, self.registry, self.parse, ExpansionGuard())


def resolve_snippets(tree: Node, registry: SnippetLookup, parse: ParseFunction) -> Node:
    """
    Resolve all snippets in ``tree`` against ``registry``.

    Params:
        tree: Root container of a parsed abbreviation
        registry: Lookup mapping node names to snippets
        parse: Function turning a snippet template into a tree

    Returns:
        The same tree instance, mutated in place
    """
    return SnippetResolver(registry, parse).resolve_tree(tree)


def _expand(
    node: Node, registry: SnippetLookup, parse: ParseFunction, guard: ExpansionGuard
) -> None:
    def resolve(target: Node) -> None:
        _expand(target, registry, parse, guard)

    if node.name is None:
        return

    snippet = registry.resolve(node.name)
    if snippet is None:
        return
    if snippet in guard:
        logger.debug("Snippet for %r is already being expanded, keeping node", node.name)
        return

    if isinstance(snippet, HandlerSnippet):
        logger.debug("Passing node %r to snippet handler", node.name)
        snippet.value(node, registry, parse, resolve)
        return

    if not isinstance(snippet, TemplateSnippet):
        raise TypeError(f"Unsupported snippet type: {type(snippet).__name__}")

    if node.parent is None:
        raise TreeStructureError(f"cannot replace detached node {node!r} with a snippet")

    logger.debug("Expanding node %r with snippet %r", node.name, snippet.value)
    try:
        tree = parse(snippet.value)
    except Exception as e:
        raise SnippetParseError(snippet.value, str(e), node_name=node.name) from e

    with guard.expanding(snippet):
        tree.walk(resolve)

    child_target = find_deepest_node(tree)
    node.walk(resolve)
    while node.first_child is not None:
        child_target.append_child(node.first_child)

    parent = node.parent
    while tree.first_child is not None:
        parent.insert_before(merge_nodes(tree.first_child, node), node)

    node.detach()
