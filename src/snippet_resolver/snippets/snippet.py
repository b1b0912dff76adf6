"""
Snippet definitions and the lookup protocol used by the resolver.

A snippet is either a template abbreviation that expands into a tree or a
handler callback that rewrites the matched node itself. Both variants
compare by identity: the resolver uses the snippet object as its cycle key,
so aliases registered for one snippet share that key while two separate
entries with the same template stay distinct.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from attrs import field, frozen

if TYPE_CHECKING:
    from snippet_resolver.core.node import Node
    from snippet_resolver.core.types import ParseFunction, ResolveFunction


class SnippetLookup(Protocol):
    """Anything that maps a node name to a snippet."""

    def resolve(self, name: str) -> "Snippet | None":
        """Return the snippet registered for ``name``, or None."""
        ...


SnippetHandler = Callable[
    ["Node", SnippetLookup, "ParseFunction", "ResolveFunction"], None
]


@frozen(eq=False)
class TemplateSnippet:
    """Snippet whose value is an abbreviation parsed into a replacement tree."""

    value: str
    name: str | None = field(default=None, kw_only=True)


@frozen(eq=False)
class HandlerSnippet:
    """
    Snippet whose value is a callback that mutates the matched node.

    Handlers are not tracked by the cycle guard: calling ``resolve(node)``
    without first renaming the node re-enters the same handler until
    ``RecursionError``.
    """

    value: SnippetHandler
    name: str | None = field(default=None, kw_only=True)


Snippet = TemplateSnippet | HandlerSnippet
