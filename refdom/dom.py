"""A simple reference-counted style DOM suitable as a static parse tree.

Nodes own their children and keep only weak references to their parents.
"""

from __future__ import annotations

import enum
import weakref
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional, Union

HTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
XMLNS_NAMESPACE = "http://www.w3.org/2000/xmlns/"


@dataclass(frozen=True, order=True)
class QualName:
    """A namespace-qualified name with an optional prefix."""

    prefix: Optional[str]
    ns: str
    local: str

    def expanded(self) -> tuple[str, str]:
        """Return the expanded name as a ``(namespace, local)`` pair."""
        return (self.ns, self.local)


@dataclass
class Attribute:
    """An element attribute."""

    name: QualName
    value: str


@dataclass(frozen=True)
class ElementFlags:
    """Extra information supplied when an element is created."""

    template: bool = False
    mathml_annotation_xml_integration_point: bool = False


class QuirksMode(enum.Enum):
    """The document's quirks mode."""

    QUIRKS = "quirks"
    LIMITED_QUIRKS = "limited-quirks"
    NO_QUIRKS = "no-quirks"


@dataclass(frozen=True)
class TraversalScope:
    """Which part of a tree to serialize: the node itself or only its children."""

    children_only: bool = False
    context: Optional[QualName] = None


@dataclass
class Document:
    """The document itself, the root of a tree."""


@dataclass
class Doctype:
    """A DOCTYPE with name, public id and system id."""

    name: str
    public_id: str
    system_id: str


@dataclass
class Text:
    """A text node; its contents may grow as adjacent text is appended."""

    contents: str


@dataclass
class Comment:
    """A comment."""

    contents: str


@dataclass
class Element:
    """An element with attributes."""

    name: QualName
    attrs: list[Attribute] = field(default_factory=list)
    template_contents: Optional["Node"] = None
    mathml_annotation_xml_integration_point: bool = False


@dataclass
class ProcessingInstruction:
    """A processing instruction."""

    target: str
    contents: str


NodeData = Union[Document, Doctype, Text, Comment, Element, ProcessingInstruction]


class Node:
    """A DOM node: its data, its children and a weak link to its parent."""

    __slots__ = ("data", "children", "_parent", "__weakref__")

    def __init__(self, data: NodeData) -> None:
        self.data = data
        self.children: list[Node] = []
        self._parent: Optional[weakref.ref[Node]] = None

    def parent(self) -> Optional["Node"]:
        """Return the parent node, or None if the node is detached."""
        if self._parent is None:
            return None
        parent = self._parent()
        if parent is None:
            raise RuntimeError("dangling weak pointer")
        return parent

    def __repr__(self) -> str:
        return f"Node(data={self.data!r}, children={self.children!r})"


def _append(new_parent: Node, child: Node) -> None:
    if child._parent is not None:
        raise ValueError("child already has a parent")
    child._parent = weakref.ref(new_parent)
    new_parent.children.append(child)


def _parent_and_index(target: Node) -> Optional[tuple[Node, int]]:
    parent = target.parent()
    if parent is None:
        return None
    for index, child in enumerate(parent.children):
        if child is target:
            return parent, index
    raise RuntimeError("have parent but couldn't find in parent's children!")


def _append_to_existing_text(prev: Node, text: str) -> bool:
    if isinstance(prev.data, Text):
        prev.data.contents += text
        return True
    return False


def _remove_from_parent(target: Node) -> None:
    found = _parent_and_index(target)
    if found is not None:
        parent, index = found
        del parent.children[index]
        target._parent = None


def _element_data(target: Node) -> Element:
    if not isinstance(target.data, Element):
        raise TypeError("not an element!")
    return target.data


class RcDom:
    """The DOM itself: a tree sink that a parser builds into."""

    def __init__(self) -> None:
        self.document = Node(Document())
        self.errors: list[str] = []
        self.quirks_mode = QuirksMode.NO_QUIRKS

    def finish(self) -> "RcDom":
        """Return the finished DOM."""
        return self

    def parse_error(self, msg: str) -> None:
        """Record a parse error."""
        self.errors.append(msg)

    def get_document(self) -> Node:
        """Return the document node."""
        return self.document

    def get_template_contents(self, target: Node) -> Node:
        """Return the template contents of a template element."""
        data = target.data
        if not isinstance(data, Element) or data.template_contents is None:
            raise TypeError("not a template element!")
        return data.template_contents

    def set_quirks_mode(self, mode: QuirksMode) -> None:
        """Set the document's quirks mode."""
        self.quirks_mode = mode

    def same_node(self, x: Node, y: Node) -> bool:
        """Tell whether two handles refer to the same node."""
        return x is y

    def elem_name(self, target: Node) -> tuple[str, str]:
        """Return the expanded name of an element."""
        return _element_data(target).name.expanded()

    def create_element(
        self,
        name: QualName,
        attrs: Iterable[Attribute],
        flags: ElementFlags = ElementFlags(),
    ) -> Node:
        """Create a detached element node."""
        return Node(
            Element(
                name=name,
                attrs=list(attrs),
                template_contents=Node(Document()) if flags.template else None,
                mathml_annotation_xml_integration_point=(
                    flags.mathml_annotation_xml_integration_point
                ),
            )
        )

    def create_comment(self, text: str) -> Node:
        """Create a detached comment node."""
        return Node(Comment(text))

    def create_pi(self, target: str, data: str) -> Node:
        """Create a detached processing-instruction node."""
        return Node(ProcessingInstruction(target, data))

    def append(self, parent: Node, child: Union[Node, str]) -> None:
        """Append a node or text to a parent, merging text with a trailing text node."""
        if isinstance(child, str):
            if parent.children and _append_to_existing_text(parent.children[-1], child):
                return
            child = Node(Text(child))
        _append(parent, child)

    def append_before_sibling(self, sibling: Node, child: Union[Node, str]) -> None:
        """Insert a node or text immediately before a sibling."""
        found = _parent_and_index(sibling)
        if found is None:
            raise ValueError("append_before_sibling called on node without parent")
        parent, index = found

        if isinstance(child, str):
            if index > 0 and _append_to_existing_text(parent.children[index - 1], child):
                return
            child = Node(Text(child))

        _remove_from_parent(child)
        child._parent = weakref.ref(parent)
        parent.children.insert(index, child)

    def append_based_on_parent_node(
        self, element: Node, prev_element: Node, child: Union[Node, str]
    ) -> None:
        """Insert before ``element`` if it has a parent, else append to ``prev_element``."""
        if element.parent() is not None:
            self.append_before_sibling(element, child)
        else:
            self.append(prev_element, child)

    def append_doctype_to_document(self, name: str, public_id: str, system_id: str) -> None:
        """Append a DOCTYPE node to the document."""
        _append(self.document, Node(Doctype(name, public_id, system_id)))

    def add_attrs_if_missing(self, target: Node, attrs: Iterable[Attribute]) -> None:
        """Add those attributes whose names the element does not have yet."""
        existing = _element_data(target).attrs
        existing_names = {attr.name for attr in existing}
        existing.extend(attr for attr in attrs if attr.name not in existing_names)

    def remove_from_parent(self, target: Node) -> None:
        """Detach a node from its parent, if it has one."""
        _remove_from_parent(target)

    def reparent_children(self, node: Node, new_parent: Node) -> None:
        """Move all children of ``node`` to the end of ``new_parent``'s children."""
        for child in node.children:
            if child.parent() is not node:
                raise RuntimeError("child's parent is not the node being reparented")
            child._parent = weakref.ref(new_parent)
        new_parent.children.extend(node.children)
        node.children = []

    def is_mathml_annotation_xml_integration_point(self, target: Node) -> bool:
        """Tell whether the element is a MathML annotation-xml integration point."""
        return _element_data(target).mathml_annotation_xml_integration_point


class SerializableHandle:
    """Wraps a node so that a serializer can walk it.

    The serializer must provide ``start_elem(name, attrs)``, ``end_elem(name)``,
    ``write_text(text)``, ``write_comment(text)``, ``write_doctype(name)`` and
    ``write_processing_instruction(target, data)``.
    """

    def __init__(self, handle: Node) -> None:
        self.handle = handle

    def serialize(self, serializer: Any, traversal_scope: TraversalScope = TraversalScope()) -> None:
        """Feed the node (or only its children) to ``serializer`` in document order."""
        ops: deque[tuple[bool, Any]] = deque()
        if traversal_scope.children_only:
            ops.extend((True, child) for child in self.handle.children)
        else:
            ops.append((True, self.handle))

        while ops:
            is_open, item = ops.popleft()
            if not is_open:
                serializer.end_elem(item)
                continue
            data = item.data
            if isinstance(data, Element):
                serializer.start_elem(data.name, _attr_pairs(data.attrs))
                ops.appendleft((False, data.name))
                ops.extendleft((True, child) for child in reversed(item.children))
            elif isinstance(data, Doctype):
                serializer.write_doctype(data.name)
            elif isinstance(data, Text):
                serializer.write_text(data.contents)
            elif isinstance(data, Comment):
                serializer.write_comment(data.contents)
            elif isinstance(data, ProcessingInstruction):
                serializer.write_processing_instruction(data.target, data.contents)
            else:
                raise TypeError("Can't serialize Document node itself")


def _attr_pairs(attrs: list[Attribute]) -> Iterator[tuple[QualName, str]]:
    return ((attr.name, attr.value) for attr in attrs)