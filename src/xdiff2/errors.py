# -*- coding: utf-8 -*-
"""
Exception classes for xdiff2.
"""


class XDiffError(Exception):
    """Base exception for errors callers are expected to handle."""


class ParseError(XDiffError):
    """The markup could not be parsed into a document.

    Wraps the error reported by the underlying parser and keeps its
    location when one is known.
    """

    def __init__(self, message, filename=None, lineno=None, offset=None):
        self.message = message
        self.filename = filename
        self.lineno = lineno
        self.offset = offset

        location = ''
        if filename:
            location = '%s:' % filename
        if lineno is not None:
            location += '%d:' % lineno
            if offset is not None:
                location += '%d:' % offset
        if location:
            location = location.rstrip(':') + ' '

        super().__init__('%s%s' % (location, message))


class TreeError(XDiffError):
    """An event stream does not describe a single rooted element tree."""


class InvariantError(AssertionError):
    """
    Internal fault: a node is missing from its own document's hash index,
    or a node was looked up in the index of another document.

    This is a bug in xdiff2, not a condition callers should recover from,
    so it is not an XDiffError.
    """
