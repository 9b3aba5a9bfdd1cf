# -*- coding: utf-8 -*-
"""
    xdiff2
    ~~~~~~

    Unordered diffs of XML documents, after the X-Diff algorithm: subtrees
    are matched by content fingerprints, so reordering siblings is not a
    change.  Examples:

    >>> from xdiff2 import parse_xml, diff, format_tree_diff

    >>> old = parse_xml('<a><b>1</b><c x="1"/></a>')
    >>> new = parse_xml('<a><c x="2"/><b>1</b><d/></a>')
    >>> for edit in diff(old, new):
    ...     print(edit)
    update node 3[x]: "1" -> "2"
    insert node 4 to node 0

    >>> print(format_tree_diff(old, new))
     <a>
     ├─<b>
     │  └─"1"
     ├─<c>
    -│  └─x: 1
    +│  └─x: 2
    +└─<d>

    >>> diff(parse_xml('<a><b/><c/></a>'), parse_xml('<a><c/><b/></a>'))
    []

    >>> diff(parse_xml('<a/>'), parse_xml('<b/>'))
    [ReplaceRoot()]
"""
from .config import DiffConfig
from .errors import XDiffError, ParseError, TreeError, InvariantError
from .tree import Document, Node, NodeId
from .parser import parse_xml, parse_html, document_from_stream
from .hashing import HashIndex
from .differ import TreeDiffer, diff, Insert, Delete, Update, ReplaceRoot
from .render import format_tree, format_tree_diff, format_edit_script, format_node

__version__ = '0.1.0'

__all__ = [
    'diff',
    'parse_xml',
    'parse_html',
    'document_from_stream',
    'format_tree',
    'format_tree_diff',
    'format_edit_script',
    'format_node',
    'DiffConfig',
    'TreeDiffer',
    'HashIndex',
    'Document',
    'Node',
    'NodeId',
    'Insert',
    'Delete',
    'Update',
    'ReplaceRoot',
    'XDiffError',
    'ParseError',
    'TreeError',
    'InvariantError',
]
