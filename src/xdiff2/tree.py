# -*- coding: utf-8 -*-
"""
Node model: a read-only view over element, attribute and text nodes.

A :class:`Document` is an arena of entries built once from a genshi event
stream.  Elements and text runs are stored by integer index in document
order (the root element is index 0).  Attributes own no storage of their
own: an attribute node is addressed by its owner's index plus the attribute
name, which is all the identity it needs since attributes have no
independent position in the tree.

:class:`Node` objects are cheap handles ``(document, index, attr)`` created
on demand; the document stays the only owner of the underlying data.
"""
import hashlib
from collections import namedtuple

from genshi.core import START, END, TEXT as TEXT_EVENT, COMMENT, PI, Attrs, QName

from .config import ELEMENT, ATTRIBUTE, TEXT, text_type
from .errors import TreeError
from .utils import qname_localname, qname_namespace, format_qname, is_blank


class NodeId(namedtuple('NodeId', 'index attr')):
    """
    Document scoped node identity.

    `attr` is None for elements and text, the attribute QName otherwise.
    """
    __slots__ = ()

    def __new__(cls, index, attr=None):
        if attr is not None:
            attr = QName(attr)
        return super().__new__(cls, index, attr)

    def __str__(self):
        if self.attr is None:
            return '%d' % self.index
        return '%d[%s]' % (self.index, format_qname(self.attr))


class _Entry(object):
    __slots__ = ('kind', 'name', 'value', 'attrs', 'parent', 'children', 'pos')

    def __init__(self, kind, name=None, value=None, attrs=(), parent=None, pos=None):
        self.kind = kind
        self.name = name
        self.value = value
        self.attrs = attrs
        self.parent = parent
        self.children = []
        self.pos = pos


class Node(object):
    """A handle on one element, attribute or text node of a document."""
    __slots__ = ('document', 'index', 'attr')

    def __init__(self, document, index, attr=None):
        self.document = document
        self.index = index
        self.attr = attr

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return (self.document is other.document and self.index == other.index
                and self.attr == other.attr)

    def __hash__(self):
        return hash((id(self.document), self.index, self.attr))

    def __repr__(self):
        return '<Node %s %s>' % (self.kind, self.id)

    @property
    def _entry(self):
        return self.document._entries[self.index]

    @property
    def id(self):
        return NodeId(self.index, self.attr)

    @property
    def kind(self):
        if self.attr is not None:
            return ATTRIBUTE
        return self._entry.kind

    def is_element(self):
        return self.kind == ELEMENT

    def is_attribute(self):
        return self.attr is not None

    def is_text(self):
        return self.kind == TEXT

    @property
    def name(self):
        """Tag QName for elements, attribute QName for attributes, None for text."""
        if self.attr is not None:
            return self.attr
        return self._entry.name

    @property
    def value(self):
        """Raw (untrimmed) value of attribute and text nodes; None for elements."""
        if self.attr is not None:
            return self._entry.attrs.get(self.attr)
        return self._entry.value

    @property
    def pos(self):
        """genshi position ``(filename, lineno, offset)``; attributes report their owner's."""
        return self._entry.pos

    @property
    def parent(self):
        if self.attr is not None:
            return Node(self.document, self.index)
        parent = self._entry.parent
        if parent is None:
            return None
        return Node(self.document, parent)

    def children(self):
        """
        Real children in document order (whitespace-only text skipped),
        followed by one node per attribute in document order.
        """
        if self.attr is not None:
            return []
        entry = self._entry
        if entry.kind != ELEMENT:
            return []
        entries = self.document._entries
        rv = [Node(self.document, idx) for idx in entry.children
              if not (entries[idx].kind == TEXT and is_blank(entries[idx].value))]
        rv.extend(Node(self.document, self.index, name) for name, _value in entry.attrs)
        return rv

    def signature(self):
        """
        Structural key; nodes with different signatures are never paired.
        The kind is part of the key so an attribute cannot collide with an
        element or a text node.
        """
        kind = self.kind
        if kind == TEXT:
            return (TEXT,)
        name = self.name
        return (kind, qname_namespace(name), qname_localname(name))

    def shallow_content(self):
        """The node's own content, ignoring descendants."""
        kind = self.kind
        if kind == ELEMENT:
            return u'%s:%s' % (qname_namespace(self.name), qname_localname(self.name))
        value = (self.value or u'').strip()
        if kind == ATTRIBUTE:
            return u'%s%s=%s' % (qname_namespace(self.name), qname_localname(self.name), value)
        return value

    def shallow_digest(self, algorithm='md5'):
        """Fixed width digest of the kind and :meth:`shallow_content`."""
        data = u'%s\x00%s' % (self.kind, self.shallow_content())
        return hashlib.new(algorithm, data.encode('utf-8')).digest()


class Document(object):
    """
    An element tree built from a genshi event stream.

    Only START, END and TEXT events contribute nodes.  Adjacent TEXT events
    are merged into one text node; comments and processing instructions
    end a text run but are otherwise skipped, as are doctype, namespace
    and CDATA markers.  Character data outside the root element is dropped.
    """

    def __init__(self, stream):
        self._entries = []
        self._build(stream)

    def _build(self, stream):
        entries = self._entries
        stack = []
        last_text = None
        for kind, data, pos in stream:
            if kind == START:
                if not stack and entries:
                    raise TreeError('more than one root element')
                tag, attrs = data
                parent = stack[-1] if stack else None
                entries.append(_Entry(ELEMENT, name=QName(tag), attrs=Attrs(attrs or ()),
                                      parent=parent, pos=pos))
                index = len(entries) - 1
                if parent is not None:
                    entries[parent].children.append(index)
                stack.append(index)
                last_text = None
            elif kind == END:
                if not stack:
                    raise TreeError('unbalanced end tag %r' % text_type(data))
                stack.pop()
                last_text = None
            elif kind == TEXT_EVENT:
                if not stack:
                    continue
                if last_text is not None:
                    entries[last_text].value += text_type(data)
                    continue
                parent = stack[-1]
                entries.append(_Entry(TEXT, value=text_type(data), parent=parent, pos=pos))
                last_text = len(entries) - 1
                entries[parent].children.append(last_text)
            elif kind in (COMMENT, PI):
                last_text = None
        if stack:
            raise TreeError('unclosed element %r' % text_type(entries[stack[-1]].name))
        if not entries:
            raise TreeError('no root element')

    def __len__(self):
        return len(self._entries)

    @property
    def root(self):
        return Node(self, 0)

    def get_node(self, node_id):
        """Resolve a :class:`NodeId`; None if it does not name a node here."""
        index, attr = node_id
        if not 0 <= index < len(self._entries):
            return None
        entry = self._entries[index]
        if attr is not None:
            if entry.kind != ELEMENT or entry.attrs.get(attr) is None:
                return None
            return Node(self, index, QName(attr))
        if entry.kind == TEXT and is_blank(entry.value):
            return None
        return Node(self, index)

    def iter(self, tag=None):
        """
        Pre-order iteration over materialized nodes.  With `tag`, only
        elements whose local name (or Clark name) equals `tag`.
        """
        stack = [self.root]
        while stack:
            node = stack.pop()
            if tag is None:
                yield node
            elif node.is_element() and tag in (qname_localname(node.name),
                                               format_qname(node.name)):
                yield node
            stack.extend(reversed(node.children()))
