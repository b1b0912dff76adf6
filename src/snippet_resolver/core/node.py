"""
Abbreviation tree node.

Nodes keep explicit parent, first/last child and sibling links so a snippet
expansion can splice a sub-tree into a live tree by relinking neighbours.
A node leaves the tree only through ``detach``, which clears every link it
holds and every link pointing at it.
"""

from collections.abc import Callable, Iterable, Iterator

from snippet_resolver.core.models import Attribute, Repeat
from snippet_resolver.exceptions import TreeStructureError

CLASS_ATTRIBUTE = "class"


class Node:
    """
    Element of a parsed abbreviation tree.

    The parser's root container is a node with ``name=None``; it only groups
    the top-level elements and is never looked up in a snippet registry.
    """

    def __init__(
        self,
        name: str | None = None,
        attributes: Iterable[Attribute] | None = None,
        class_list: Iterable[str] | None = None,
        value: str | None = None,
        self_closing: bool = False,
        repeat: Repeat | None = None,
    ):
        """
        Create a detached node.

        Params:
            name: Element name, also the snippet lookup key
            attributes: Initial attributes; a ``class`` attribute is split into classes
            class_list: Initial class names, duplicates are dropped
            value: Text content
            self_closing: Whether the element renders as ``<name />``
            repeat: Repeat descriptor of the node
        """
        self.name = name
        self.value = value
        self.self_closing = self_closing
        self.repeat = repeat
        self.class_list: list[str] = []
        self._attributes: dict[str, Attribute] = {}

        self.parent: Node | None = None
        self.first_child: Node | None = None
        self.last_child: Node | None = None
        self.next_sibling: Node | None = None
        self.previous_sibling: Node | None = None

        for attr in attributes or ():
            self.set_attribute(attr)
        for class_name in class_list or ():
            self.add_class(class_name)

    def __repr__(self) -> str:
        return f"<Node {self.name!r}>"

    # Structure

    @property
    def children(self) -> list["Node"]:
        """Snapshot of the child nodes in document order."""
        return list(self.iter_children())

    def iter_children(self) -> Iterator["Node"]:
        child = self.first_child
        while child is not None:
            # Captured first so the current child may be detached by the caller
            following = child.next_sibling
            yield child
            child = following

    @property
    def is_attached(self) -> bool:
        return self.parent is not None

    def append_child(self, child: "Node") -> "Node":
        """
        Append a node as the last child, detaching it from its old parent.

        Params:
            child: Node to append

        Returns:
            The appended node

        Raises:
            TreeStructureError: If the child is this node or one of its ancestors
        """
        self._check_can_adopt(child)
        child.detach()

        child.parent = self
        child.previous_sibling = self.last_child
        if self.last_child is not None:
            self.last_child.next_sibling = child
        else:
            self.first_child = child
        self.last_child = child
        return child

    def insert_before(self, child: "Node", reference: "Node | None") -> "Node":
        """
        Insert a node before one of this node's children.

        Params:
            child: Node to insert, detached from its old position first
            reference: Existing child to insert before; None appends

        Returns:
            The inserted node

        Raises:
            TreeStructureError: If reference is not a child of this node or
                the insertion would create a cycle
        """
        if reference is None:
            return self.append_child(child)
        if reference.parent is not self:
            raise TreeStructureError(
                f"cannot insert {child!r} before {reference!r}, which is not a child of {self!r}"
            )
        if child is reference:
            return child

        self._check_can_adopt(child)
        child.detach()

        child.parent = self
        child.next_sibling = reference
        child.previous_sibling = reference.previous_sibling
        if reference.previous_sibling is not None:
            reference.previous_sibling.next_sibling = child
        else:
            self.first_child = child
        reference.previous_sibling = child
        return child

    def detach(self) -> "Node":
        """Remove this node from its parent; a no-op for detached nodes."""
        parent = self.parent
        if parent is None:
            return self

        if self.previous_sibling is not None:
            self.previous_sibling.next_sibling = self.next_sibling
        else:
            parent.first_child = self.next_sibling
        if self.next_sibling is not None:
            self.next_sibling.previous_sibling = self.previous_sibling
        else:
            parent.last_child = self.previous_sibling

        self.parent = None
        self.next_sibling = None
        self.previous_sibling = None
        return self

    def walk(self, visit: Callable[["Node"], None]) -> None:
        """
        Visit every descendant in pre-order.

        The next sibling is captured before ``visit`` runs, so a visitor may
        replace or detach the node it receives. Children are read after the
        visit, which makes a replaced node's (moved) children invisible to
        this walk.

        Params:
            visit: Callback receiving each descendant node
        """
        child = self.first_child
        while child is not None:
            following = child.next_sibling
            visit(child)
            child.walk(visit)
            child = following

    def _check_can_adopt(self, child: "Node") -> None:
        ancestor: Node | None = self
        while ancestor is not None:
            if ancestor is child:
                raise TreeStructureError(
                    f"adding {child!r} under {self!r} would create a cycle"
                )
            ancestor = ancestor.parent

    # Attributes

    @property
    def attributes(self) -> list[Attribute]:
        """Attributes in insertion order, without ``class``."""
        return list(self._attributes.values())

    @attributes.setter
    def attributes(self, attributes: Iterable[Attribute]) -> None:
        self._attributes = {}
        for attr in attributes:
            self.set_attribute(attr)

    def get_attribute(self, name: str) -> Attribute | None:
        return self._attributes.get(name)

    def set_attribute(self, attr: Attribute | str, value: str | None = None) -> None:
        """
        Add an attribute or replace the one with the same name in place.

        Params:
            attr: Attribute instance, or attribute name combined with ``value``
            value: Attribute value when ``attr`` is a name
        """
        if isinstance(attr, str):
            attr = Attribute(name=attr, value=value)

        if attr.name == CLASS_ATTRIBUTE:
            for class_name in (attr.value or "").split():
                self.add_class(class_name)
            return

        self._attributes[attr.name] = attr

    def remove_attribute(self, name: str) -> Attribute | None:
        if name == CLASS_ATTRIBUTE:
            self.class_list = []
            return None
        return self._attributes.pop(name, None)

    def has_class(self, class_name: str) -> bool:
        return class_name in self.class_list

    def add_class(self, class_name: str) -> None:
        if class_name and class_name not in self.class_list:
            self.class_list.append(class_name)

    def clone(self, deep: bool = True) -> "Node":
        """
        Copy this node as a detached node.

        Params:
            deep: Also copy all descendants

        Returns:
            New node with copied attributes, classes and repeat descriptor
        """
        copy = Node(
            name=self.name,
            attributes=[attr.model_copy() for attr in self.attributes],
            class_list=self.class_list,
            value=self.value,
            self_closing=self.self_closing,
            repeat=self.repeat.model_copy() if self.repeat else None,
        )
        if deep:
            for child in self.iter_children():
                copy.append_child(child.clone(deep=True))
        return copy
