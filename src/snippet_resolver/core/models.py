"""
Value models attached to abbreviation tree nodes.

Attributes and repeat descriptors are small records copied between nodes
while snippets are expanded, so they are modelled as pydantic models and
cloned with ``model_copy``.
"""

from pydantic import BaseModel


class Attribute(BaseModel):
    """
    Single element attribute.

    Params:
        name: Attribute name, unique per node
        value: Explicit value, None when the abbreviation gave only the name
        implied: Placeholder attribute from a template (``[!src]``) that is
            only rendered once an abbreviation references it explicitly
    """

    name: str
    value: str | None = None
    implied: bool = False


class Repeat(BaseModel):
    """
    Position of a node inside a repeated group (``li*3``).

    Params:
        count: Total number of repetitions, None for implicit repeats
        index: Zero-based position of this node in the group
        value: One-based number used when numbering output, if known
    """

    count: int | None = None
    index: int | None = None
    value: int | None = None
