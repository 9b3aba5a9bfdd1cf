# -*- coding: utf-8 -*-
"""
Funciones utilitarias para xdiff2.
"""
import re

from genshi.core import QName

from .config import text_type


def qname_localname(qname):
    """
    QName in genshi renders like 'tag' or 'ns}tag'. Normalize to localname.
    Plain strings in ElementTree notation ('{ns}tag') are accepted too.
    """
    if isinstance(qname, QName):
        return text_type(qname.localname)
    s = text_type(qname)
    if '}' in s:
        return s.split('}', 1)[1]
    return s


def qname_namespace(qname):
    """Return the namespace URI of `qname`, or an empty string."""
    if isinstance(qname, QName):
        return text_type(qname.namespace or u'')
    s = text_type(qname)
    if '}' in s:
        return s.split('}', 1)[0].lstrip('{')
    return u''


def format_qname(qname, with_namespace=True):
    """Clark notation ('{ns}tag') when there is a namespace to show."""
    ns = qname_namespace(qname)
    local = qname_localname(qname)
    if ns and with_namespace:
        return u'{%s}%s' % (ns, local)
    return local


def is_blank(text):
    """Whitespace-only (or missing) character data."""
    return not text or not text.strip()


def collapse_ws(s):
    """Colapsa espacios en blanco múltiples en un solo espacio."""
    return re.sub(r'\s+', ' ', s, flags=re.U).strip()


def shorten(text, limit):
    """Corta el texto a `limit` caracteres, añadiendo '...' si se cortó."""
    if limit is None or len(text) <= limit:
        return text
    return text[:limit] + u'...'


def quote(value):
    """Double-quote a value for one-line display, escaping quotes and controls."""
    value = (value or u'').replace('\\', '\\\\').replace('"', '\\"')
    value = value.replace('\n', '\\n').replace('\r', '\\r').replace('\t', '\\t')
    return u'"%s"' % value
