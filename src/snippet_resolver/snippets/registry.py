"""
In-memory snippet registry.

Maps snippet names to snippet objects. Keys of the form ``"a|b"`` register
one snippet under several names; such aliases share the snippet object and
therefore its cycle-detection identity.
"""

import logging
from collections.abc import Iterator, Mapping

from snippet_resolver.exceptions import UnknownSnippetError
from snippet_resolver.snippets.snippet import (
    HandlerSnippet,
    Snippet,
    SnippetHandler,
    TemplateSnippet,
)

logger = logging.getLogger(__name__)

ALIAS_SEPARATOR = "|"

SnippetSource = str | SnippetHandler | TemplateSnippet | HandlerSnippet


def create_snippet(value: SnippetSource, name: str | None = None) -> Snippet:
    """
    Wrap a raw registry value into a snippet.

    Params:
        value: Template string, handler callable or ready snippet
        name: Name recorded on the new snippet for messages

    Returns:
        The snippet; snippet instances are returned unchanged

    Raises:
        TypeError: If value is neither a string, a callable nor a snippet
    """
    if isinstance(value, TemplateSnippet | HandlerSnippet):
        return value
    if isinstance(value, str):
        return TemplateSnippet(value, name=name)
    if callable(value):
        return HandlerSnippet(value, name=name)
    raise TypeError(
        f"Snippet '{name}' must be a template string or a callable, got {type(value).__name__}"
    )


class SnippetRegistry:
    """Dictionary-backed implementation of the snippet lookup protocol."""

    def __init__(self, snippets: Mapping[str, SnippetSource] | None = None):
        """
        Create a registry, optionally pre-populated.

        Params:
            snippets: Mapping of name (or ``|``-separated aliases) to snippet source
        """
        self._snippets: dict[str, Snippet] = {}
        for key, value in (snippets or {}).items():
            self.add(key, value)

    def add(self, key: str, value: SnippetSource) -> Snippet:
        """
        Register a snippet under one or more names.

        Params:
            key: Snippet name, or several names separated by ``|``
            value: Template string, handler callable or ready snippet

        Returns:
            The stored snippet object shared by all names in ``key``

        Raises:
            ValueError: If ``key`` contains no snippet name
        """
        names = [name.strip() for name in key.split(ALIAS_SEPARATOR) if name.strip()]
        if not names:
            raise ValueError(f"Snippet key {key!r} contains no snippet name")
        snippet = create_snippet(value, name=names[0])
        for name in names:
            if name in self._snippets:
                logger.debug("Replacing snippet %r", name)
            self._snippets[name] = snippet
        return snippet

    def alias(self, name: str, target: str) -> Snippet:
        """
        Register ``name`` as another name of an existing snippet.

        Params:
            name: New snippet name
            target: Name of the registered snippet to share

        Returns:
            The shared snippet object

        Raises:
            UnknownSnippetError: If target is not registered
        """
        snippet = self._snippets.get(target)
        if snippet is None:
            raise UnknownSnippetError(target)
        self._snippets[name] = snippet
        return snippet

    def resolve(self, name: str | None) -> Snippet | None:
        """Return the snippet registered for ``name``, or None."""
        if name is None:
            return None
        return self._snippets.get(name)

    def names(self) -> list[str]:
        return list(self._snippets)

    def __contains__(self, name: object) -> bool:
        return name in self._snippets

    def __len__(self) -> int:
        return len(self._snippets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._snippets)
