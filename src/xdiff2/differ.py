# -*- coding: utf-8 -*-
"""
Unordered tree diff (X-Diff).

Two subtrees whose accumulated hashes agree are equal regardless of the
order of their children.  Where they disagree, children are paired by
content first (identical hashes), then greedily by the shortest recursive
edit script among children with the same signature; whatever is left over
is deleted or inserted.
"""
import logging
from collections import namedtuple, defaultdict

from .config import DiffConfig
from .hashing import HashIndex
from .utils import quote

log = logging.getLogger(__name__)


class Insert(namedtuple('Insert', 'child parent')):
    """`child` (second document) is added under `parent` (first document)."""
    __slots__ = ()

    def __str__(self):
        return 'insert node %s to node %s' % (self.child, self.parent)


class Delete(namedtuple('Delete', 'node')):
    __slots__ = ()

    def __str__(self):
        return 'delete node %s' % (self.node,)


class Update(namedtuple('Update', 'node old_value new_value')):
    """An attribute or text value changed; values are trimmed."""
    __slots__ = ()

    def __str__(self):
        return 'update node %s: %s -> %s' % (self.node, quote(self.old_value),
                                             quote(self.new_value))


class ReplaceRoot(namedtuple('ReplaceRoot', '')):
    """The roots are incompatible; no finer diff is computed."""
    __slots__ = ()

    def __str__(self):
        return 'replace root node'


def diff(doc1, doc2, config=None):
    """Edit script transforming `doc1` into `doc2`."""
    differ = TreeDiffer(doc1, doc2, config=config)
    return differ.get_edit_script()


class TreeDiffer(object):
    """
    Compares two documents.  Hash indices are built lazily by
    :meth:`get_edit_script` and only live as long as the differ.
    """

    def __init__(self, doc1, doc2, config=None):
        self.config = config or DiffConfig()
        self.doc1 = doc1
        self.doc2 = doc2
        self._index1 = None
        self._index2 = None

    def get_edit_script(self):
        root1 = self.doc1.root
        root2 = self.doc2.root
        if root1.signature() != root2.signature():
            log.debug('root signatures differ: %r != %r',
                      root1.signature(), root2.signature())
            return [ReplaceRoot()]
        self._index1 = HashIndex(self.doc1, self.config)
        self._index2 = HashIndex(self.doc2, self.config)
        log.debug('diffing documents with %d and %d nodes',
                  len(self._index1), len(self._index2))
        rv = self.match(root1, root2)
        log.debug('edit script has %d edits', len(rv))
        return rv

    def match(self, node1, node2):
        """Edit script turning the subtree at `node1` into the one at `node2`."""
        if self._index1[node1] == self._index2[node2]:
            return []

        # Leaves with different hashes only differ by value.
        if ((node1.is_attribute() and node2.is_attribute())
                or (node1.is_text() and node2.is_text())):
            return [Update(node1.id, (node1.value or u'').strip(),
                           (node2.value or u'').strip())]

        remaining1, remaining2 = self._unmatched_children(node1, node2)

        candidates = []
        for child1 in remaining1:
            signature = child1.signature()
            for child2 in remaining2:
                if child2.signature() == signature:
                    candidates.append((child1, child2, self.match(child1, child2)))
        # Stable: equal lengths keep document order (side 1 first, then side 2).
        candidates.sort(key=lambda item: len(item[2]))

        rv = []
        claimed1 = set()
        claimed2 = set()
        for child1, child2, script in candidates:
            if child1 in claimed1 or child2 in claimed2:
                continue
            claimed1.add(child1)
            claimed2.add(child2)
            rv.extend(script)
        for child1 in remaining1:
            if child1 not in claimed1:
                rv.append(Delete(child1.id))
        for child2 in remaining2:
            if child2 not in claimed2:
                rv.append(Insert(child2.id, node1.id))
        return rv

    def _unmatched_children(self, node1, node2):
        """
        Children of both nodes minus those whose subtree hash also occurs on
        the other side, in document order.
        """
        children1 = node1.children()
        children2 = node2.children()
        if getattr(self.config, 'pair_duplicate_children', False):
            return self._unpaired_children(children1, children2)
        hashes1 = set(self._index1[child] for child in children1)
        hashes2 = set(self._index2[child] for child in children2)
        common = hashes1 & hashes2
        return ([child for child in children1 if self._index1[child] not in common],
                [child for child in children2 if self._index2[child] not in common])

    def _unpaired_children(self, children1, children2):
        # One to one pairing of identical subtrees; surplus copies stay.
        pool = defaultdict(int)
        for child in children2:
            pool[self._index2[child]] += 1
        remaining1 = []
        for child in children1:
            digest = self._index1[child]
            if pool[digest]:
                pool[digest] -= 1
            else:
                remaining1.append(child)
        # Whatever is still counted in the pool is unmatched on side 2;
        # take the last copies so the earliest ones count as paired.
        remaining2 = []
        for child in reversed(children2):
            digest = self._index2[child]
            if pool[digest]:
                pool[digest] -= 1
                remaining2.append(child)
        remaining2.reverse()
        return remaining1, remaining2
