# -*- coding: utf-8 -*-
"""
Configuración y constantes para xdiff2.
"""

# Python 3
text_type = str

# Node kinds
ELEMENT = 'element'
ATTRIBUTE = 'attribute'
TEXT = 'text'


class DiffConfig(object):
    """
    Runtime configuration for diffing and rendering.

    Class attributes are the defaults; override them on an instance::

        config = DiffConfig()
        config.pair_duplicate_children = True
    """

    # Fingerprints
    # A hashlib.new() name with a fixed digest size (md5, sha1, sha256,
    # blake2b, ...); the variable length shake_* algorithms are rejected.
    digest_algorithm = 'md5'

    # Matching
    # By default every child whose subtree hash also occurs on the other side
    # is dropped from matching, however many copies each side has.  When
    # enabled, identical children are paired one to one instead and surplus
    # copies are reported as inserts/deletes.
    pair_duplicate_children = False

    # Rendering
    indent = 3
    text_preview_length = 40
    with_node_id = False
    with_namespace = False
