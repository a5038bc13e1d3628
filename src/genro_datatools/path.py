# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DataPath - Normalized slash-separated paths.

A DataPath turns a raw path string into a canonical form and the ordered
list of its segments. Both forms are what PathContainer uses to address
values in its nested and flat representations.

Normalization:
    - Anything after the first '?' is a query string (parsed on request,
      discarded otherwise)
    - Backslashes become slashes, runs of slashes collapse to one
    - Surrounding whitespace and slashes are trimmed
    - A single leading slash is preserved when present

Example:
    >>> path = DataPath('a//b\\\\c/')
    >>> path.get_path()
    'a/b/c'
    >>> path.get_expanded()
    ['a', 'b', 'c']

    >>> path = DataPath('a/b?x=1&y=2', parse_query=True)
    >>> path.get_parameters()
    {'x': '1', 'y': '2'}
"""

from __future__ import annotations

import copy
from urllib.parse import unquote_plus

from .config import PATH_CONFIG
from .logging import get_logger

logger = get_logger(__name__)


class DataPath:
    """A canonical path with one step of revertible history.

    Each set_path() keeps a snapshot of the state it replaces. The snapshot
    holds its own previous pointer, so repeated reverts walk back through
    every earlier set_path() one step at a time.

    Attributes:
        parse_query: Whether the text after '?' is parsed into parameters.
    """

    __slots__ = ('parse_query', '_path', '_segments', '_parameters', '_previous')

    def __init__(self, path: str, parse_query: bool = False) -> None:
        """Initialize a DataPath.

        Args:
            path: Raw path string.
            parse_query: If True, parse the query string into parameters.
        """
        self.parse_query = parse_query
        self._previous: DataPath | None = None
        self._apply(path)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"DataPath({self._path!r})"

    def __str__(self) -> str:
        return self._path

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DataPath):
            return self._path == other._path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)

    # ==================== Accessors ====================

    @property
    def path(self) -> str:
        """The canonical path string."""
        return self._path

    @property
    def segments(self) -> list[str]:
        """The path segments (a copy)."""
        return list(self._segments)

    def get_path(self) -> str:
        """Return the canonical path string."""
        return self._path

    def get_expanded(self) -> list[str]:
        """Return the path segments (a copy)."""
        return list(self._segments)

    def get_parameters(self) -> dict[str, str] | None:
        """Return the parsed query parameters.

        Returns:
            Dict of decoded parameters, or None if query parsing is off
            or the last path set carried no '?'.
        """
        return self._parameters

    # ==================== Mutation ====================

    def set_path(self, path: str) -> None:
        """Replace the path, keeping the current state as previous path.

        Args:
            path: Raw path string, normalized before being stored.
        """
        self._previous = copy.copy(self)
        self._apply(path)

    def merge_paths(self, *slugs: str) -> None:
        """Append segments to the current path.

        Each slug has its surrounding slashes trimmed before being joined.
        The result goes through set_path(), so it is normalized again and
        recorded in history.

        Example:
            >>> path = DataPath('/root')
            >>> path.merge_paths('/a/', 'b//c')
            >>> path.get_path()
            '/root/a/b/c'
        """
        sep = PATH_CONFIG.separator
        merged = self._path
        for slug in slugs:
            merged = f"{merged}{sep}{slug.strip(sep)}"
        self.set_path(merged)

    def get_previous_path(self) -> DataPath | None:
        """Return the state before the last set_path(), or None."""
        return self._previous

    def revert_to_previous_path(self) -> None:
        """Restore the previous path and adopt its own history.

        Does nothing when there is no previous path.
        """
        previous = self._previous
        if previous is None:
            return
        logger.debug("Reverting path %r to %r", self._path, previous._path)
        self._apply(previous._path)
        self._previous = previous._previous

    # ==================== Internals ====================

    def _apply(self, path: str) -> None:
        self._parameters = None
        self._path = self._normalize(path)
        self._segments = split_segments(self._path)

    def _normalize(self, path: str) -> str:
        cfg = PATH_CONFIG
        base, marker, query = path.partition(cfg.query_marker)
        if marker and self.parse_query:
            self._parameters = parse_query_string(query)
        return normalize_path(base)


def normalize_path(path: str) -> str:
    """Return the canonical form of a path without query string.

    Args:
        path: Path string, already stripped of any query part.

    Returns:
        Path with slashes unified and collapsed, surrounding whitespace and
        slashes trimmed, and a single leading slash kept if one was present.
    """
    cfg = PATH_CONFIG
    sep = cfg.separator
    path = path.replace(cfg.alt_separator, sep)
    double = sep * 2
    while double in path:
        path = path.replace(double, sep)
    path = path.strip(cfg.whitespace)
    prefix = sep if path.startswith(sep) else ''
    return prefix + path.strip(sep)


def split_segments(path: str) -> list[str]:
    """Split a canonical path into segments.

    A leading separator contributes no segment. The empty path yields [''].
    """
    sep = PATH_CONFIG.separator
    if path.startswith(sep):
        path = path[len(sep):]
    return path.split(sep)


def parse_query_string(query: str) -> dict[str, str]:
    """Parse a query string into decoded key/value pairs.

    Pieces that do not split into exactly one key and one value are
    dropped.

    Example:
        >>> parse_query_string('?x=1&bad&y=a+b')
        {'x': '1', 'y': 'a b'}
    """
    cfg = PATH_CONFIG
    params: dict[str, str] = {}
    for piece in query.strip(cfg.query_marker).split(cfg.param_separator):
        parts = piece.split(cfg.assignment)
        if len(parts) != 2:
            logger.debug("Dropping query piece %r", piece)
            continue
        key, value = parts
        params[unquote_plus(key)] = unquote_plus(value)
    return params
