import pytest

from refdom.dom import (
    HTML_NAMESPACE,
    Attribute,
    QualName,
    RcDom,
)
from refdom.printing import render_dom, render_node, render_xml_tree


def html_name(local):
    return QualName(None, HTML_NAMESPACE, local)


def build_html():
    dom = RcDom()
    html = dom.create_element(html_name("html"), [])
    dom.append(dom.document, html)
    body = dom.create_element(
        html_name("body"), [Attribute(QualName(None, "", "class"), "main")]
    )
    dom.append(html, body)
    dom.append(body, "hello")
    dom.append(body, dom.create_comment("note"))
    return dom, html, body


def test_document_alone():
    dom = RcDom()
    assert render_node(dom.document) == "#Document\n"


def test_tree_lines_and_indentation():
    dom, _, _ = build_html()
    lines = render_node(dom.document).splitlines()
    assert lines[0] == "#Document"
    assert lines[1] == "    <html>"
    assert lines[2] == '        <body class="main">'
    assert lines[3] == "            #text: hello"
    assert lines[4] == "            <!-- note -->"
    assert len(lines) == 5


def test_indent_parameter_prefixes_every_line():
    dom, html, _ = build_html()
    base = render_node(html, 0).splitlines()
    shifted = render_node(html, 3).splitlines()
    assert shifted == ["   " + line for line in base]


def test_text_is_escaped():
    dom = RcDom()
    dom.append(dom.document, 'a\n"b"')
    assert render_node(dom.document).splitlines()[1] == '    #text: a\\n\\"b\\"'


def test_doctype_rendering():
    dom = RcDom()
    dom.append_doctype_to_document("html", "", "")
    assert '<!DOCTYPE html "" "">' in render_node(dom.document).splitlines()[1]


def test_non_html_element_raises():
    dom = RcDom()
    svg = dom.create_element(QualName(None, "http://www.w3.org/2000/svg", "svg"), [])
    dom.append(dom.document, svg)
    with pytest.raises(ValueError):
        render_node(dom.document)


def test_namespaced_attribute_raises():
    dom = RcDom()
    attr = Attribute(QualName("xlink", "http://www.w3.org/1999/xlink", "href"), "#x")
    elem = dom.create_element(html_name("a"), [attr])
    with pytest.raises(ValueError):
        render_node(elem)


def test_processing_instruction_raises():
    dom = RcDom()
    dom.append(dom.document, dom.create_pi("xml", "version"))
    with pytest.raises(ValueError):
        render_node(dom.document)


def test_render_dom_without_errors_matches_tree():
    dom, _, _ = build_html()
    assert render_dom(dom) == render_node(dom.document)


def test_render_dom_lists_errors():
    dom, _, _ = build_html()
    dom.parse_error("first")
    dom.parse_error("second")
    out = render_dom(dom)
    assert out.startswith(render_node(dom.document))
    assert out.endswith("\nParse errors:\n    first\n    second\n")


def test_xml_tree_filters_non_element_nodes():
    dom = RcDom()
    root = dom.create_element(QualName(None, "", "hello"), [])
    dom.append(dom.document, root)
    dom.append(root, "XML")
    dom.append(root, dom.create_comment("skip"))
    dom.append(root, dom.create_pi("t", "d"))
    out = render_xml_tree(dom.document)
    assert out.splitlines() == ["#document", "    hello", "        #text XML"]


def test_xml_tree_prefix_applies_to_all_lines():
    dom = RcDom()
    root = dom.create_element(QualName(None, "", "a"), [])
    dom.append(dom.document, root)
    dom.append(root, dom.create_element(QualName(None, "", "b"), []))
    plain = render_xml_tree(dom.document).splitlines()
    prefixed = render_xml_tree(dom.document, "> ").splitlines()
    assert prefixed == ["> " + line for line in plain]


def test_xml_tree_escapes_text():
    dom = RcDom()
    dom.append(dom.document, "tab\there")
    assert render_xml_tree(dom.document).splitlines()[1] == "    #text tab\\there"


def test_xml_tree_other_root_prints_prefix_only():
    dom = RcDom()
    comment = dom.create_comment("c")
    assert render_xml_tree(comment, "::") == "::"