# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-DataTools - Path-addressable nested data.

A lightweight, zero-dependency library that keeps nested data in either
expanded (nested) or flat (path-keyed) form, converts between the two and
reads and writes values by normalized slash-separated paths.
"""

__version__ = "0.1.0"

from .container import ContainerStatus, PathContainer, flatten_tree, force_sub_key
from .exceptions import (
    DataToolsError,
    InvalidTraversalError,
    PathNotFoundError,
)
from .path import DataPath, normalize_path, parse_query_string
from .version import VersionString, version_compare

__all__ = [
    # Core classes
    "PathContainer",
    "ContainerStatus",
    "DataPath",
    "VersionString",
    # Functions
    "flatten_tree",
    "force_sub_key",
    "normalize_path",
    "parse_query_string",
    "version_compare",
    # Exceptions
    "DataToolsError",
    "PathNotFoundError",
    "InvalidTraversalError",
]
