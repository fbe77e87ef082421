"""Plain-text renderings of a DOM tree, for inspection and debugging.

These are not proper HTML or XML serializations.
"""

from __future__ import annotations

from typing import Iterator

from refdom.dom import (
    HTML_NAMESPACE,
    Comment,
    Doctype,
    Document,
    Element,
    Node,
    ProcessingInstruction,
    RcDom,
    Text,
)

_INDENT_STEP = "    "

_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
}


def _escape_default(text: str) -> str:
    """Escape quotes, backslashes, control and non-ASCII characters."""
    parts = []
    for ch in text:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            parts.append(escaped)
        elif 0x20 <= ord(ch) <= 0x7E:
            parts.append(ch)
        else:
            parts.append(f"\\u{{{ord(ch):x}}}")
    return "".join(parts)


def _describe(node: Node) -> str:
    data = node.data
    if isinstance(data, Document):
        return "#Document"
    if isinstance(data, Doctype):
        return f'<!DOCTYPE {data.name} "{data.public_id}" "{data.system_id}">'
    if isinstance(data, Text):
        return f"#text: {_escape_default(data.contents)}"
    if isinstance(data, Comment):
        return f"<!-- {_escape_default(data.contents)} -->"
    if isinstance(data, Element):
        if data.name.ns != HTML_NAMESPACE:
            raise ValueError(f"element {data.name.local!r} is not in the HTML namespace")
        pieces = [f"<{data.name.local}"]
        for attr in data.attrs:
            if attr.name.ns != "":
                raise ValueError(f"attribute {attr.name.local!r} has a namespace")
            pieces.append(f' {attr.name.local}="{attr.value}"')
        pieces.append(">")
        return "".join(pieces)
    if isinstance(data, ProcessingInstruction):
        raise ValueError("processing instructions cannot appear in an HTML tree")
    raise TypeError(f"unknown node data {data!r}")


def _walk_html(handle: Node, indent: int) -> Iterator[str]:
    stack = [(indent, handle)]
    while stack:
        depth, node = stack.pop()
        yield " " * depth + _describe(node) + "\n"
        stack.extend((depth + len(_INDENT_STEP), child) for child in reversed(node.children))


def render_node(handle: Node, indent: int = 0) -> str:
    """Render an HTML node and its descendants, one indented line per node."""
    return "".join(_walk_html(handle, indent))


def render_dom(dom: RcDom) -> str:
    """Render a whole HTML DOM, followed by its parse errors if there are any."""
    out = render_node(dom.document, 0)
    if dom.errors:
        out += "\nParse errors:\n"
        out += "".join(f"{_INDENT_STEP}{err}\n" for err in dom.errors)
    return out


def _walk_xml(handle: Node, prefix: str) -> Iterator[str]:
    stack = [(prefix, handle)]
    while stack:
        current, node = stack.pop()
        data = node.data
        if isinstance(data, Document):
            yield f"{current}#document\n"
        elif isinstance(data, Text):
            yield f"{current}#text {_escape_default(data.contents)}\n"
        elif isinstance(data, Element):
            yield f"{current}{data.name.local}\n"
        else:
            yield current
        child_prefix = current + _INDENT_STEP
        stack.extend(
            (child_prefix, child)
            for child in reversed(node.children)
            if isinstance(child.data, (Text, Element))
        )


def render_xml_tree(handle: Node, prefix: str = "") -> str:
    """Render the element and text structure of an XML tree, one line per node."""
    return "".join(_walk_xml(handle, prefix))