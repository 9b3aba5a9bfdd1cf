from __future__ import annotations

import textwrap

import pytest

from xdiff2 import (
    Delete, DiffConfig, Insert, NodeId, ReplaceRoot, Update,
    diff, format_edit_script, format_node, format_tree, format_tree_diff, parse_xml,
)


def _dedent(s: str) -> str:
    return textwrap.dedent(s).strip("\n")


def test_edit_strings():
    assert str(Insert(NodeId(4), NodeId(0))) == "insert node 4 to node 0"
    assert str(Delete(NodeId(2, "k"))) == "delete node 2[k]"
    assert str(Update(NodeId(3), "a", 'b"c')) == 'update node 3: "a" -> "b\\"c"'
    assert str(ReplaceRoot()) == "replace root node"


def test_format_edit_script():
    edits = [Delete(NodeId(1)), Insert(NodeId(2), NodeId(0))]
    assert format_edit_script(edits) == "delete node 1\ninsert node 2 to node 0"


def test_format_tree():
    doc = parse_xml('<r k="v"><a>hello</a><b/></r>')
    assert format_tree(doc) == _dedent("""
        <r>
        ├─<a>
        │  └─"hello"
        ├─<b>
        └─k: v
    """)


def test_format_tree_with_ids_and_indent():
    config = DiffConfig()
    config.with_node_id = True
    config.indent = 2
    doc = parse_xml('<r k="v"><a>hello</a><b/></r>')
    assert format_tree(doc, config) == _dedent("""
        [0] <r>
        ├─[1] <a>
        │ └─[2] "hello"
        ├─[3] <b>
        └─[0[k]] k: v
    """)


def test_format_tree_rejects_zero_indent():
    config = DiffConfig()
    config.indent = 0
    with pytest.raises(ValueError):
        format_tree(parse_xml("<r/>"), config)


def test_format_node_namespaces_and_preview():
    doc = parse_xml('<r xmlns:p="urn:x"><p:a>%s</p:a></r>' % ("x" * 50))
    a = doc.root.children()[0]
    assert format_node(a) == "<a>"
    assert format_node(a, with_namespace=True) == "<{urn:x}a>"
    text = a.children()[0]
    assert format_node(text) == '"%s..."' % ("x" * 40)
    assert format_node(text, preview_length=None) == '"%s"' % ("x" * 50)


def test_tree_diff_same():
    doc = parse_xml("<r><a/></r>")
    assert format_tree_diff(doc, parse_xml("<r><a/></r>")) == "The trees are the same."


def test_tree_diff_replace_root():
    out = format_tree_diff(parse_xml("<a>x</a>"), parse_xml("<b/>"))
    assert out == _dedent("""
        -<a>
        -└─"x"
        +<b>
    """)


def test_tree_diff_delete_and_insert():
    old = parse_xml("<r><a>1</a><b/></r>")
    new = parse_xml("<r><b/><c>2</c></r>")
    assert format_tree_diff(old, new) == "\n".join([
        " <r>",
        "-├─<a>",
        "-│  └─\"1\"",
        " ├─<b>",
        "+└─<c>",
        "+   └─\"2\"",
    ])


def test_tree_diff_update_text():
    old = parse_xml("<r><city>Seattle</city></r>")
    new = parse_xml("<r><city>Paris</city></r>")
    assert format_tree_diff(old, new) == "\n".join([
        " <r>",
        " └─<city>",
        "-   └─\"Seattle\"",
        "+   └─\"Paris\"",
    ])


def test_tree_diff_accepts_precomputed_edits():
    old = parse_xml('<r k="1"/>')
    new = parse_xml('<r k="2"/>')
    edits = diff(old, new)
    assert format_tree_diff(old, new, edits) == "\n".join([
        " <r>",
        "-└─k: 1",
        "+└─k: 2",
    ])
