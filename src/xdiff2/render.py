# -*- coding: utf-8 -*-
"""
Plain-text rendering of documents and edit scripts.

Trees are drawn with box-drawing characters::

    <Profile>
    └─<Customer>
       ├─<Status>
       │  └─"Single"
       └─Type: VIP

Tree diffs prefix every line with a one character gutter: ``-`` for
deleted (or old) nodes, ``+`` for inserted (or new) ones, a blank for
everything else.
"""
from .config import DiffConfig
from .differ import Insert, Delete, Update, ReplaceRoot, diff
from .utils import format_qname, collapse_ws, shorten, quote

SAME_TREES_MESSAGE = 'The trees are the same.'

GUTTER_NONE = ''
GUTTER_BLANK = ' '
GUTTER_ADD = '+'
GUTTER_DELETE = '-'


def format_edit_script(edits):
    """Una línea por operación."""
    return u'\n'.join(str(edit) for edit in edits)


def format_node(node, with_id=False, with_namespace=False, preview_length=40, value=None):
    """
    Single line label for a node: ``<tag>``, ``name: value`` or a quoted,
    shortened text.  `value` replaces the node's own value (used to show
    both sides of an update).
    """
    prefix = u'[%s] ' % (node.id,) if with_id else u''
    if node.is_element():
        return u'%s<%s>' % (prefix, format_qname(node.name, with_namespace))
    if value is None:
        value = node.value or u''
    if node.is_attribute():
        return u'%s%s: %s' % (prefix, format_qname(node.name, with_namespace), value.strip())
    return prefix + quote(shorten(collapse_ws(value), preview_length))


class _TreeWriter(object):

    def __init__(self, config=None):
        self.config = config or DiffConfig()
        self.indent = getattr(self.config, 'indent', 3)
        if self.indent < 1:
            raise ValueError('indent must be at least 1')
        self.lines = []
        # One flag per ancestor level: True while that level has more
        # siblings to come, which keeps its vertical line drawn.
        self.vlines = []

    def label(self, node, value=None):
        return format_node(node,
                           with_id=getattr(self.config, 'with_node_id', False),
                           with_namespace=getattr(self.config, 'with_namespace', False),
                           preview_length=getattr(self.config, 'text_preview_length', 40),
                           value=value)

    def write_line(self, label, gutter):
        if self.vlines:
            prefix = u''.join((u'│' if flag else u' ') + u' ' * (self.indent - 1)
                              for flag in self.vlines[:-1])
            branch = u'├─' if self.vlines[-1] else u'└─'
            label = prefix + branch + label
        self.lines.append(gutter + label)

    def write_subtree(self, node, gutter):
        self.write_line(self.label(node), gutter)
        children = node.children()
        if not children:
            return
        self.vlines.append(True)
        last = len(children) - 1
        for idx, child in enumerate(children):
            self.vlines[-1] = idx < last
            self.write_subtree(child, gutter)
        self.vlines.pop()

    def getvalue(self):
        return u'\n'.join(self.lines)


class _TreeDiffWriter(_TreeWriter):

    def __init__(self, doc2, edits, config=None):
        super().__init__(config)
        self.doc2 = doc2
        # Inserts are shown under their parent, everything else in place.
        self.changes = {}
        for edit in edits:
            key = edit.parent if isinstance(edit, Insert) else edit.node
            self.changes.setdefault(key, []).append(edit)

    def write_diff(self, node):
        edits = self.changes.get(node.id, ())
        for edit in edits:
            if isinstance(edit, Delete):
                self.write_subtree(node, GUTTER_DELETE)
                return
            if isinstance(edit, Update):
                self.write_line(self.label(node, edit.old_value), GUTTER_DELETE)
                self.write_line(self.label(node, edit.new_value), GUTTER_ADD)
                return

        self.write_line(self.label(node), GUTTER_BLANK)
        items = [(child, None) for child in node.children()]
        items.extend((self.doc2.get_node(edit.child), GUTTER_ADD)
                     for edit in edits if isinstance(edit, Insert))
        if not items:
            return
        self.vlines.append(True)
        last = len(items) - 1
        for idx, (child, gutter) in enumerate(items):
            self.vlines[-1] = idx < last
            if gutter is None:
                self.write_diff(child)
            else:
                self.write_subtree(child, gutter)
        self.vlines.pop()


def format_tree(document, config=None):
    """Render a whole document as an indented tree."""
    writer = _TreeWriter(config)
    writer.write_subtree(document.root, GUTTER_NONE)
    return writer.getvalue()


def format_tree_diff(doc1, doc2, edits=None, config=None):
    """
    Render the first document annotated with the edits turning it into the
    second one.  `edits` defaults to ``diff(doc1, doc2, config)``.
    """
    if edits is None:
        edits = diff(doc1, doc2, config=config)
    if not edits:
        return SAME_TREES_MESSAGE
    if any(isinstance(edit, ReplaceRoot) for edit in edits):
        writer = _TreeWriter(config)
        writer.write_subtree(doc1.root, GUTTER_DELETE)
        writer.write_subtree(doc2.root, GUTTER_ADD)
        return writer.getvalue()
    writer = _TreeDiffWriter(doc2, edits, config)
    writer.write_diff(doc1.root)
    return writer.getvalue()
