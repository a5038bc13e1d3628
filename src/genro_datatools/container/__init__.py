# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathContainer package - Nested data with a flat, path-keyed twin.

The package is organized into:
- core: PathContainer class with conversion and path access
- tree: plain functions on nested mappings (flatten, assign, lookup)

Example:
    >>> from genro_datatools import PathContainer
    >>> container = PathContainer()
    >>> container.set_by_path('config/name', 'MyApp')
    >>> container['config/name']
    'MyApp'
"""

from .core import ContainerStatus, PathContainer
from .tree import flatten_tree, force_sub_key

__all__ = ["ContainerStatus", "PathContainer", "flatten_tree", "force_sub_key"]
