# refdom

`refdom` is a small document tree for markup. It is meant to be the target of
an HTML or XML tree builder. The builder calls the tree-sink methods on an
`RcDom`. When parsing is done you have a plain, static tree of nodes that you
can walk, feed to a serializer or print.

It is a good fit for a parse tree. It is not meant to model a web browser.

## What it does not do

`refdom` has no tokenizer, no parser and no tree builder of its own. Something
else must call the `RcDom` methods to fill the tree.

It also does not turn a tree into HTML or XML text. `SerializableHandle`
walks a tree and passes each piece to a serializer object that you supply.

There is no command-line program.

## The tree (`refdom.dom`)

Every node is a `Node`. A node has:

- `data`: one of the node kinds listed below
- `children`: a list of child nodes
- `parent()`: the parent node, or `None` if the node is detached

A node holds its children. It refers to its parent only through a weak
reference.

The node kinds are:

- `Document`: the root of a document, and also the holder of a template's contents
- `Doctype(name, public_id, system_id)`
- `Text(contents)`: adjacent text that the builder appends is merged into one node
- `Comment(contents)`
- `Element(name, attrs, template_contents, mathml_annotation_xml_integration_point)`
- `ProcessingInstruction(target, contents)`

Names are `QualName(prefix, ns, local)` values. `QualName.expanded()` returns
the `(ns, local)` pair. Attributes are `Attribute(name, value)`.

The module defines the usual namespace URIs as constants: `HTML_NAMESPACE`,
`SVG_NAMESPACE`, `MATHML_NAMESPACE`, `XLINK_NAMESPACE`, `XML_NAMESPACE` and
`XMLNS_NAMESPACE`.

## Building a tree

An `RcDom` starts with an empty `document` node, an empty `errors` list and
`quirks_mode` set to `QuirksMode.NO_QUIRKS`. It provides these methods:

Creating nodes:

- `create_element(name, attrs, flags)`: creates a detached element. If
  `flags.template` is set, the element also gets an empty `Document` node for
  its template contents.
- `create_comment(text)`
- `create_pi(target, data)`

Inserting nodes. Wherever a child is accepted, it may be a `Node` or a
`str`. A string is merged into the text node just before the insertion point
if there is one; otherwise a new `Text` node is made for it.

- `append(parent, child)`: appends a node to `parent`. A node that already has
  a parent raises `ValueError`.
- `append_before_sibling(sibling, child)`: inserts before `sibling`, first
  detaching `child` from any parent it has. A `sibling` with no parent raises
  `ValueError`.
- `append_based_on_parent_node(element, prev_element, child)`: inserts before
  `element` if it has a parent, and otherwise appends to `prev_element`.
- `append_doctype_to_document(name, public_id, system_id)`

Changing the tree:

- `add_attrs_if_missing(target, attrs)`: adds only the attributes whose names
  the element does not already have.
- `remove_from_parent(target)`: detaches a node. It does nothing if the node
  has no parent.
- `reparent_children(node, new_parent)`: moves all children of `node` to the
  end of the children of `new_parent`.

Queries:

- `get_document()`
- `get_template_contents(target)`
- `elem_name(target)`: returns the expanded `(ns, local)` pair.
- `same_node(x, y)`: tests identity.
- `is_mathml_annotation_xml_integration_point(target)`

Asking for the element name, attributes or integration-point flag of a node
that is not an element raises `TypeError`. So does asking for the template
contents of a node that is not a template element.

Bookkeeping:

- `parse_error(msg)`: adds `msg` to `errors`.
- `set_quirks_mode(mode)`: records a `QuirksMode` (`QUIRKS`, `LIMITED_QUIRKS`
  or `NO_QUIRKS`).
- `finish()`: returns the `RcDom` itself.

## Serializing

Wrap a node in a `SerializableHandle` and call
`serialize(serializer, traversal_scope)`. The serializer object must have
these methods:

- `start_elem(name, attrs)`: `attrs` is an iterable of `(QualName, value)` pairs
- `end_elem(name)`
- `write_text(text)`
- `write_comment(text)`
- `write_doctype(name)`
- `write_processing_instruction(target, data)`

With the default `TraversalScope()`, the node itself is written. With
`TraversalScope(children_only=True)`, only its children are written.

The walk is iterative, so deeply nested trees do not exhaust the call stack.
A `Document` node cannot itself be serialized and raises `TypeError`. To
write a document, serialize its children only.

## Printing (`refdom.printing`)

These functions render a tree as indented text for inspection. The output is
not HTML or XML.

- `render_node(handle, indent=0)`: one line per node, with four more spaces
  at each level. Text and comments are shown escaped. Elements are shown with
  their attributes. The function expects an HTML tree, and raises
  `ValueError` for any of these:
  - an element outside the HTML namespace
  - a namespaced attribute
  - a processing instruction
- `render_dom(dom)`: renders the whole document. If there were parse errors,
  they are listed after a `Parse errors:` heading.
- `render_xml_tree(handle, prefix="")`: an outline of elements (by local name)
  and text only. Each level is indented by four more spaces. Children that
  are neither elements nor text are skipped.

```python
from refdom.dom import ElementFlags, HTML_NAMESPACE, QualName, RcDom
from refdom.printing import render_dom

dom = RcDom()
html = dom.create_element(QualName(None, HTML_NAMESPACE, "html"), [], ElementFlags())
dom.append(dom.get_document(), html)
dom.append(html, "Hello, ")
dom.append(html, "world")
print(render_dom(dom))
```

This prints:

```
#Document
    <html>
        #text: Hello, world
```