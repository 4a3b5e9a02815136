# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ParamTree package - Hierarchical value store.

The package is organized into:
- core: Main ParamTree class with key traversal, read/write and enumeration
- node: ParamTreeNode, one leaf or branch entry of a tree
- loading: Absorbing dicts, lists and other trees into a tree
- accessors: Typed getters (int, boolean, string)

Example:
    >>> from genro_paramtree import ParamTree
    >>> tree = ParamTree()
    >>> tree.set('config.name', 'MyApp')
    >>> tree['config.name']
    'MyApp'
"""

from .core import ParamTree
from .node import ParamTreeNode

__all__ = ["ParamTree", "ParamTreeNode"]
