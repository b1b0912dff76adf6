"""
Tree building and rendering helpers shared by the test suite.

Abbreviation parsing is not part of this package, so snippet templates are
parsed by a lookup table of tree factories. Unknown templates raise
``ValueError`` the way a real parser reports a syntax error.
"""

from collections.abc import Callable, Iterable

from snippet_resolver.core import Attribute, Node, Repeat


def el(
    name: str | None,
    *children: Node,
    attrs: dict[str, str | None] | Iterable[Attribute] | None = None,
    classes: Iterable[str] | None = None,
    value: str | None = None,
    self_closing: bool = False,
    repeat: Repeat | None = None,
) -> Node:
    """Build an element with children."""
    if isinstance(attrs, dict):
        attrs = [Attribute(name=key, value=val) for key, val in attrs.items()]
    node = Node(
        name=name,
        attributes=attrs,
        class_list=classes,
        value=value,
        self_closing=self_closing,
        repeat=repeat,
    )
    for child in children:
        node.append_child(child)
    return node


def root(*children: Node) -> Node:
    """Build a root container like the abbreviation parser returns."""
    return el(None, *children)


TEMPLATES: dict[str, Callable[[], Node]] = {
    "a[href]": lambda: root(el("a", attrs={"href": None})),
    "img[src alt]/": lambda: root(
        el("img", attrs={"src": None, "alt": None}, self_closing=True)
    ),
    "link[rel=stylesheet href]/": lambda: root(
        el("link", attrs={"rel": "stylesheet", "href": None}, self_closing=True)
    ),
    'link[href="style2.css"]': lambda: root(el("link", attrs={"href": "style2.css"})),
    "blockquote": lambda: root(el("blockquote")),
    "address": lambda: root(el("address")),
    "strong": lambda: root(el("strong")),
    "meta/": lambda: root(el("meta", self_closing=True)),
    "html>(head>meta[charset=UTF-8]+title{Document})+body": lambda: root(
        el(
            "html",
            el(
                "head",
                el("meta", attrs={"charset": "UTF-8"}),
                el("title", value="Document"),
            ),
            el("body"),
        )
    ),
    "script[!src]": lambda: root(
        el("script", attrs=[Attribute(name="src", implied=True)])
    ),
    "input[type=text name value]/": lambda: root(
        el(
            "input",
            attrs={"type": "text", "name": None, "value": None},
            self_closing=True,
        )
    ),
    "ul.list>li": lambda: root(el("ul", el("li"), classes=["list"])),
    "dt+dd": lambda: root(el("dt"), el("dd")),
    "x": lambda: root(el("x")),
    "y": lambda: root(el("y")),
    "section>bad": lambda: root(el("section", el("bad"))),
    "": lambda: root(),
}


def parse(template: str) -> Node:
    """Parse a known template into a fresh detached tree."""
    try:
        factory = TEMPLATES[template]
    except KeyError:
        raise ValueError(f"Unexpected character at 1 in {template!r}") from None
    return factory()


def stringify(node: Node) -> str:
    """
    Render a tree as compact markup.

    Implied attributes are skipped, missing values render as empty strings
    and a repeat descriptor is shown as ``name*count@index``.
    """
    if node.name is None:
        return "".join(stringify(child) for child in node.children)

    name = node.name
    if node.repeat is not None:
        name += f"*{node.repeat.count}@{node.repeat.index}"

    parts = [name]
    for attr in node.attributes:
        if not attr.implied:
            parts.append(f'{attr.name}="{attr.value or ""}"')
    if node.class_list:
        parts.append(f'class="{" ".join(node.class_list)}"')

    if node.self_closing:
        return f"<{' '.join(parts)} />"

    inner = (node.value or "") + "".join(stringify(child) for child in node.children)
    return f"<{' '.join(parts)}>{inner}</{node.name}>"


def assert_tree_consistent(node: Node) -> None:
    """Check parent, child and sibling links of every node below ``node``."""
    previous = None
    child = node.first_child
    while child is not None:
        assert child.parent is node
        assert child.previous_sibling is previous
        if previous is not None:
            assert previous.next_sibling is child
        assert_tree_consistent(child)
        previous = child
        child = child.next_sibling
    assert node.last_child is previous
