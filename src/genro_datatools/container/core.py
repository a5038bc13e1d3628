# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathContainer - Nested data addressable by slash-separated paths.

This module provides the PathContainer class, which holds a data tree in
one of two interchangeable representations and reads and writes values in
either one by path.

Representations:
    - **Expanded**: nested mappings, e.g. {'a': {'b': {'c': 5}}}
    - **Flat**: one level keyed by canonical paths, e.g. {'a/b/c': 5}

Paths go through DataPath normalization first, so 'a//b\\\\c/' addresses
the same value as 'a/b/c'.

Example:
    Basic usage::

        container = PathContainer()
        container.set_by_path('config/database/host', 'localhost')
        container.get_by_path('config/database/host')  # 'localhost'

        container.flatten()
        container.get_array()  # {'config/database/host': 'localhost'}

Writing below a leaf replaces the leaf with a node (see force_sub_key)::

        container = PathContainer({'a': 1})
        container.set_by_path('a/b', 2)
        container.get_array()  # {'a': {'b': 2}}
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import IntEnum
from typing import Any, Iterator

from ..config import PATH_CONFIG
from ..exceptions import PathNotFoundError
from ..logging import get_logger
from ..path import DataPath
from .tree import assign_segments, copy_tree, flatten_tree, lookup_segments

logger = get_logger(__name__)


class ContainerStatus(IntEnum):
    """Representation currently held by a PathContainer."""

    EXPANDED = 0
    FLAT = 1


class PathContainer:
    """A data tree held either expanded (nested) or flat (path-keyed).

    PathContainer provides:
    - expand() / flatten(): switch representation (the only transitions)
    - get_by_path(path) / container[path]: read a value
    - set_by_path(path, value) / container[path] = value: write a value,
      creating intermediate nodes in expanded form
    - strip_empty_string(): drop top-level empty strings

    Every other method works on whichever representation is current.
    set_array() replaces data and status together without checking that
    they agree.

    Example:
        >>> container = PathContainer({'a': {'b': 1}})
        >>> container['a/b']
        1
        >>> container.flatten().get_array()
        {'a/b': 1}
    """

    __slots__ = ('_data', '_status')

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        status: ContainerStatus = ContainerStatus.EXPANDED,
    ) -> None:
        """Initialize a PathContainer.

        Args:
            data: Initial tree (expanded) or path-keyed mapping (flat).
                The mapping is deep-copied.
            status: The representation data is in.
        """
        self._data: dict[str, Any] = {}
        self._status = ContainerStatus.EXPANDED
        self.set_array(data if data is not None else {}, status)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"PathContainer({self._status.name}, {list(self._data.keys())})"

    def __len__(self) -> int:
        """Return the number of top-level entries."""
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        """Iterate over top-level keys."""
        return iter(self._data)

    def __contains__(self, path: str) -> bool:
        try:
            self.get_by_path(path)
        except KeyError:
            return False
        return True

    def __getitem__(self, path: str) -> Any:
        return self.get_by_path(path)

    def __setitem__(self, path: str, value: Any) -> None:
        self.set_by_path(path, value)

    # ==================== Data and Status ====================

    @property
    def status(self) -> ContainerStatus:
        """The current representation."""
        return self._status

    def get_status(self) -> ContainerStatus:
        """Return the current representation tag."""
        return self._status

    def get_array(self) -> dict[str, Any]:
        """Return the stored data in its current representation."""
        return self._data

    def set_array(
        self,
        data: Mapping[str, Any],
        status: ContainerStatus = ContainerStatus.EXPANDED,
    ) -> PathContainer:
        """Replace data and status.

        No conversion takes place: the caller asserts that data is in the
        representation named by status.
        """
        self._data = copy_tree(dict(data))
        self._status = ContainerStatus(status)
        return self

    # ==================== Conversion ====================

    def expand_array(self) -> PathContainer:
        """Switch to the expanded representation.

        Flat entries are written in iteration order, so when keys collide
        ('a' and 'a/b') the later one decides the shape.
        """
        if self._status is ContainerStatus.EXPANDED:
            return self
        flat = self._data
        self._data = {}
        self._status = ContainerStatus.EXPANDED
        for key, value in flat.items():
            self.set_by_segments(DataPath(key).get_expanded(), value)
        logger.debug("Expanded %d flat entries into %d top-level keys",
                     len(flat), len(self._data))
        return self

    def flatten_array(self) -> PathContainer:
        """Switch to the flat representation.

        Empty nodes have no leaf and leave no entry behind.
        """
        if self._status is ContainerStatus.FLAT:
            return self
        self._data = flatten_tree(self._data)
        self._status = ContainerStatus.FLAT
        logger.debug("Flattened tree into %d entries", len(self._data))
        return self

    expand = expand_array
    flatten = flatten_array

    # ==================== Path Access ====================

    def get_by_path(self, path: str) -> Any:
        """Get the value at path.

        Args:
            path: Slash-separated path, normalized before use.

        Returns:
            The stored value (a node or a leaf when expanded).

        Raises:
            PathNotFoundError: If the path does not exist.
            InvalidTraversalError: If the path runs through a leaf.
        """
        data_path = DataPath(path)
        if self._status is ContainerStatus.FLAT:
            return self._get_flat(data_path.get_path())
        return lookup_segments(self._data, data_path.get_expanded())

    def set_by_path(self, path: str, value: Any) -> PathContainer:
        """Set the value at path.

        When expanded, missing intermediate nodes are created and leaves
        along the path are replaced by nodes.
        The container stores its own copy of value.
        """
        data_path = DataPath(path)
        if self._status is ContainerStatus.FLAT:
            self._data[data_path.get_path()] = copy_tree(value)
            return self
        return self.set_by_segments(data_path.get_expanded(), value)

    def get_by_segments(self, segments: Sequence[str]) -> Any:
        """Get the value at an already split path."""
        if self._status is ContainerStatus.FLAT:
            return self._get_flat(PATH_CONFIG.separator.join(segments))
        return lookup_segments(self._data, segments)

    def set_by_segments(self, segments: Sequence[str], value: Any) -> PathContainer:
        """Set the value at an already split path."""
        if not segments:
            raise ValueError("Empty path")
        if self._status is ContainerStatus.FLAT:
            self._data[PATH_CONFIG.separator.join(segments)] = copy_tree(value)
            return self
        self._data = assign_segments(self._data, list(segments), copy_tree(value))
        return self

    def _get_flat(self, key: str) -> Any:
        try:
            return self._data[key]
        except KeyError:
            raise PathNotFoundError(f"Path '{key}' not found") from None

    # ==================== Cleanup ====================

    def strip_empty_string(self) -> PathContainer:
        """Drop top-level entries whose value is the empty string.

        Nested nodes are left untouched; other falsy values are kept.
        """
        self._data = {
            key: value for key, value in self._data.items()
            if not (isinstance(value, str) and value == '')
        }
        return self
