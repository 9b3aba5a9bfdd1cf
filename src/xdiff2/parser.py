# -*- coding: utf-8 -*-
"""
Funciones de parsing XML/HTML para xdiff2.

Parsing belongs to genshi (XML) and html5lib (HTML fragments); this module
only turns their event streams into :class:`~xdiff2.tree.Document` objects.
"""
from io import StringIO

from genshi.input import ET, XMLParser, ParseError as GenshiParseError
import html5lib

from .errors import ParseError
from .tree import Document


def document_from_stream(stream):
    """Build a document from any genshi event stream."""
    return Document(stream)


def parse_xml(text, filename=None):
    """Parse an XML document into a :class:`~xdiff2.tree.Document`."""
    try:
        # The text is already decoded; any declared encoding must not apply.
        events = list(XMLParser(StringIO(text), filename=filename, encoding='utf-8'))
    except GenshiParseError as exc:
        raise ParseError(exc.msg, filename=exc.filename, lineno=exc.lineno,
                         offset=exc.offset) from exc
    return document_from_stream(events)


def _drop_comments(tree):
    # html5lib's etree builder stores comments as elements whose tag is the
    # Comment factory function; genshi's ET() only understands string tags.
    for parent in list(tree.iter()):
        prev = None
        for child in list(parent):
            if isinstance(child.tag, str):
                prev = child
                continue
            if child.tail:
                if prev is not None:
                    prev.tail = (prev.tail or u'') + child.tail
                else:
                    parent.text = (parent.text or u'') + child.tail
            parent.remove(child)


def parse_html(html, wrapper_element='div', wrapper_class=None):
    """
    Parse an HTML fragment into a document rooted at a synthetic
    `wrapper_element`, so fragments with several top-level nodes still
    have a single root.
    """
    builder = html5lib.getTreeBuilder('etree')
    parser = html5lib.HTMLParser(tree=builder)
    tree = parser.parseFragment(html)
    tree.tag = wrapper_element
    if wrapper_class is not None:
        tree.set('class', wrapper_class)
    _drop_comments(tree)
    return document_from_stream(ET(tree))
