# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Nested tree helpers for PathContainer.

Plain functions working on nested mappings: flattening a tree into
path-keyed entries, building a tree back from segment lists, and walking
segments to read a value. Only mappings are nodes; every other value
(lists included) is a leaf.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, Iterator

from ..config import PATH_CONFIG
from ..exceptions import InvalidTraversalError, PathNotFoundError
from ..logging import get_logger

logger = get_logger(__name__)


def is_node(value: Any) -> bool:
    """True if value is a tree node (a mapping)."""
    return isinstance(value, Mapping)


def _writable(node: Mapping[str, Any]) -> MutableMapping[str, Any]:
    if isinstance(node, MutableMapping):
        return node
    return dict(node)


def force_sub_key(current: Any, key: str) -> MutableMapping[str, Any]:
    """Make room for a missing child key, structure winning over scalars.

    If current is a node, an empty child node is added under key and the
    node is returned (read-only mappings are rebuilt as dicts first). Any
    other value is discarded and replaced by a new node holding an empty
    string under key.

    Args:
        current: The value found where the walk needs a node.
        key: The missing child key.

    Returns:
        The node to continue the walk from.

    Example:
        >>> force_sub_key({'x': 1}, 'y')
        {'x': 1, 'y': {}}
        >>> force_sub_key(5, 'y')
        {'y': ''}
    """
    if is_node(current):
        node = _writable(current)
        node[key] = {}
        return node
    if current is not None:
        logger.debug("Replacing leaf %r with a node for key %r", current, key)
    return {key: ''}


def _is_unset(node: Any, key: str) -> bool:
    return not is_node(node) or node.get(key) is None


def copy_tree(value: Any) -> Any:
    """Return a copy of value that shares no node with it.

    Nodes become plain dicts and are copied with an explicit stack, so
    depth is not limited by the interpreter's recursion limit. Leaves are
    deep-copied.
    """
    if not is_node(value):
        return copy.deepcopy(value)
    root: dict[str, Any] = {}
    stack = [(value, root)]
    while stack:
        source, target = stack.pop()
        for key, child in source.items():
            if is_node(child):
                target[key] = {}
                stack.append((child, target[key]))
            else:
                target[key] = copy.deepcopy(child)
    return root


def assign_segments(node: Any, segments: Sequence[str], value: Any) -> Any:
    """Assign value at segments below node, creating missing nodes.

    The walk keeps the parent and key of the current position. Whenever a
    position has to be replaced (a leaf turned into a node, a read-only
    mapping rebuilt) the new node is stored back into its parent.

    Args:
        node: The root of the tree.
        segments: Path segments.
        value: The value to store at the end of the path.

    Returns:
        The root to store in place of node.
    """
    if not segments:
        return value
    root = node
    parent: MutableMapping[str, Any] | None = None
    parent_key = ''
    current = node
    for key in segments:
        if _is_unset(current, key):
            replacement = force_sub_key(current, key)
        else:
            replacement = _writable(current)
        if replacement is not current:
            if parent is None:
                root = replacement
            else:
                parent[parent_key] = replacement
        parent, parent_key = replacement, key
        current = replacement[key]
    parent[parent_key] = value
    return root


def lookup_segments(node: Any, segments: Sequence[str]) -> Any:
    """Return the value at segments below node.

    Raises:
        PathNotFoundError: If a segment is not a key of its node.
        InvalidTraversalError: If a segment has to be looked up in a leaf.
    """
    sep = PATH_CONFIG.separator
    current = node
    for i, key in enumerate(segments):
        if not is_node(current):
            walked = sep.join(segments[:i])
            remaining = sep.join(segments[i:])
            raise InvalidTraversalError(
                f"'{walked}' is a leaf, cannot access '{remaining}'"
            )
        if key not in current:
            raise PathNotFoundError(
                f"Path segment '{key}' not found in '{sep.join(segments)}'"
            )
        current = current[key]
    return current


def iter_leaves(node: Mapping[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield (flat_key, value) for every leaf below node, depth first.

    Keys are joined with the separator. Empty nodes yield nothing. An
    explicit stack of item iterators replaces recursion.
    """
    sep = PATH_CONFIG.separator
    stack: list[tuple[str | None, Iterator[tuple[Any, Any]]]] = [
        (None, iter(node.items()))
    ]
    while stack:
        prefix, items = stack[-1]
        item = next(items, None)
        if item is None:
            stack.pop()
            continue
        key, value = item
        path = str(key) if prefix is None else f"{prefix}{sep}{key}"
        if is_node(value):
            stack.append((path, iter(value.items())))
        else:
            yield path, value


def flatten_tree(node: Mapping[str, Any]) -> dict[str, Any]:
    """Return the flat, path-keyed form of a nested tree.

    Example:
        >>> flatten_tree({'a': {'b': 1, 'c': {'d': 2}}, 'e': 3})
        {'a/b': 1, 'a/c/d': 2, 'e': 3}
    """
    return dict(iter_leaves(node))
