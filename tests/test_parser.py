from __future__ import annotations

import pytest
from genshi.input import XML

from xdiff2 import ParseError, XDiffError, diff, document_from_stream, parse_html, parse_xml
from xdiff2.utils import qname_localname


def test_malformed_xml_raises_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse_xml("<r>\n<a></b></r>", filename="broken.xml")
    err = excinfo.value
    assert isinstance(err, XDiffError)
    assert err.filename == "broken.xml"
    assert err.lineno == 2
    assert str(err).startswith("broken.xml:2")


def test_parse_error_message_without_location():
    err = ParseError("boom")
    assert str(err) == "boom"


def test_document_from_genshi_stream():
    doc = document_from_stream(XML('<r k="v"><a>1</a></r>'))
    assert [qname_localname(n.name) for n in doc.iter() if not n.is_text()] == ["r", "a", "k"]


def test_html_fragment_is_wrapped():
    doc = parse_html("<p>one</p><p>two</p>")
    assert qname_localname(doc.root.name) == "div"
    assert [qname_localname(c.name) for c in doc.root.children()] == ["p", "p"]


def test_html_wrapper_class():
    doc = parse_html("<p>x</p>", wrapper_element="section", wrapper_class="diff")
    assert qname_localname(doc.root.name) == "section"
    attrs = [c for c in doc.root.children() if c.is_attribute()]
    assert [(qname_localname(a.name), a.value) for a in attrs] == [("class", "diff")]


def test_html_comments_are_dropped():
    doc = parse_html("<p>a<!-- note -->b</p><!-- end -->")
    (p,) = doc.root.children()
    (text,) = p.children()
    assert text.value == "ab"


def test_html_elements_use_local_names():
    doc = parse_html('<p>Foo <b class="x">bar</b></p>')
    assert [qname_localname(n.name) for n in doc.iter("b")] == ["b"]


def test_declared_encoding_does_not_reinterpret_text():
    decl = '<?xml version="1.0" encoding="ISO-8859-1"?>'
    old = parse_xml(decl + "<r><c>Zürich</c></r>")
    new = parse_xml(decl + "<r><c>Genève</c></r>")
    (c,) = old.root.children()
    assert c.children()[0].value == "Zürich"
    (edit,) = diff(old, new)
    assert (edit.old_value, edit.new_value) == ("Zürich", "Genève")
