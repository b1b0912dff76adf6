"""
Cycle guard for recursive snippet expansion.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from snippet_resolver.snippets.snippet import Snippet


class ExpansionGuard:
    """
    Snippets currently being expanded on one resolution call chain.

    A guard is created for each top-level resolve call and dropped
    afterwards. Entries are snippet objects, so aliases of one snippet hit
    the same entry.
    """

    def __init__(self):
        self._active: set[Snippet] = set()

    def __contains__(self, snippet: object) -> bool:
        return snippet in self._active

    def __len__(self) -> int:
        return len(self._active)

    @contextmanager
    def expanding(self, snippet: Snippet) -> Iterator[None]:
        """
        Mark a snippet as active for the duration of a ``with`` block.

        Params:
            snippet: Snippet whose template tree is being resolved
        """
        self._active.add(snippet)
        try:
            yield
        finally:
            self._active.discard(snippet)
