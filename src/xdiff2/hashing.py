# -*- coding: utf-8 -*-
"""
Order-independent subtree fingerprints.

The accumulated hash of a node is its shallow digest combined with the
accumulated hashes of its children.  The combiner is byte-wise addition
modulo 256, which is commutative and associative: permuting siblings never
changes a parent's hash.  It is an equality heuristic, not a cryptographic
guarantee; different subtrees may collide.
"""
import hashlib

from .config import DiffConfig
from .errors import InvariantError
from .tree import Node


def check_digest_algorithm(name):
    """Reject algorithms hashlib does not know or whose digest has no fixed size."""
    if hashlib.new(name).digest_size == 0:
        raise ValueError('digest algorithm %r has no fixed digest size' % (name,))
    return name


def combine_digests(a, b):
    """Add two digests byte by byte, wrapping at 256."""
    return bytes((x + y) & 0xFF for x, y in zip(a, b))


class HashIndex(object):
    """Maps every node identity of one document to its accumulated hash."""

    def __init__(self, document, config=None):
        self.document = document
        self.config = config or DiffConfig()
        self._digests = {}
        self._build()

    def _build(self):
        algorithm = check_digest_algorithm(getattr(self.config, 'digest_algorithm', 'md5'))
        digests = self._digests
        # Post-order without recursion: a node is finished the second time
        # it comes off the stack, once all of its children are.
        stack = [(self.document.root, None)]
        while stack:
            node, children = stack.pop()
            if children is None:
                children = node.children()
                stack.append((node, children))
                stack.extend((child, None) for child in children)
                continue
            digest = node.shallow_digest(algorithm)
            for child in children:
                digest = combine_digests(digest, digests[child.id])
            digests[node.id] = digest

    def __len__(self):
        return len(self._digests)

    def __contains__(self, node):
        if isinstance(node, Node):
            if node.document is not self.document:
                return False
            node = node.id
        return node in self._digests

    def __getitem__(self, node):
        """
        Accumulated hash of a :class:`Node` or :class:`NodeId`.  A miss
        means the tree and its index disagree and raises InvariantError.
        """
        if isinstance(node, Node):
            if node.document is not self.document:
                raise InvariantError('node %s belongs to another document' % (node.id,))
            node = node.id
        try:
            return self._digests[node]
        except KeyError:
            raise InvariantError('node %s is missing from the hash index' % (node,))

    def hexdigest(self, node):
        return self[node].hex()
