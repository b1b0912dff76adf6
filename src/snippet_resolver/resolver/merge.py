"""
Merging of user-authored node data into expanded snippet nodes.

The expanded node keeps its name and template attribute order; values,
classes, text and repeat state written in the abbreviation are layered on
top of it.
"""

from snippet_resolver.core.models import Attribute
from snippet_resolver.core.node import Node


def merge_nodes(target: Node, source: Node) -> Node:
    """
    Merge the data of ``source`` into ``target``.

    Params:
        target: Top-level node of an expanded snippet; its name is kept
        source: Node from the abbreviation that matched the snippet

    Returns:
        The mutated target node
    """
    if source.self_closing:
        target.self_closing = True

    if source.value is not None:
        target.value = source.value

    if source.repeat is not None:
        target.repeat = source.repeat.model_copy()

    merge_class_names(target, source)
    merge_attributes(target, source)
    return target


def merge_class_names(target: Node, source: Node) -> Node:
    """Add classes of ``source`` missing from ``target``, keeping their order."""
    for class_name in source.class_list:
        target.add_class(class_name)
    return target


def merge_attributes(target: Node, source: Node) -> Node:
    """
    Merge attributes of ``source`` into ``target``.

    Template attributes keep their position. A source attribute with the same
    name overwrites the template value and turns an implied placeholder into
    a regular attribute. Source-only attributes are appended in source order.

    Params:
        target: Node receiving the attributes
        source: Node whose explicit attributes win

    Returns:
        The mutated target node
    """
    merged: dict[str, Attribute] = {
        attr.name: attr.model_copy() for attr in target.attributes
    }

    for attr in source.attributes:
        existing = merged.get(attr.name)
        if existing is not None:
            existing.value = attr.value
            existing.implied = False
        else:
            merged[attr.name] = attr.model_copy()

    target.attributes = merged.values()
    return target
