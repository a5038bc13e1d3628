# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""VersionString - Dotted version strings with PHP-style ordering.

Versions are compared part by part after canonicalization: every
character that is not an ASCII letter or digit acts as '.', and a switch
between digits and letters starts a new part ('1.0rc1' is '1.0.rc.1').
Numeric parts compare as integers. Word parts rank as follows, a missing
part counting as '#' and a number ranking with '#' against words:

    any other word < dev < alpha = a < beta = b < RC = rc < # < pl = p
"""

from __future__ import annotations

import operator
import re
from typing import Callable

_SEPARATOR_RE = re.compile(r'[^0-9A-Za-z]+')
_PART_RE = re.compile(r'[0-9]+|[A-Za-z]+')

# Matched as prefixes, in this order
_SPECIAL_FORMS: tuple[tuple[str, int], ...] = (
    ('dev', 0),
    ('alpha', 1),
    ('a', 1),
    ('beta', 2),
    ('b', 2),
    ('RC', 3),
    ('rc', 3),
    ('#', 4),
    ('pl', 5),
    ('p', 5),
)

_OPERATORS: dict[str, Callable[[int, int], bool]] = {
    '<': operator.lt, 'lt': operator.lt,
    '<=': operator.le, 'le': operator.le,
    '>': operator.gt, 'gt': operator.gt,
    '>=': operator.ge, 'ge': operator.ge,
    '==': operator.eq, 'eq': operator.eq,
    '!=': operator.ne, '<>': operator.ne, 'ne': operator.ne,
}


def _is_number(part: str) -> bool:
    return bool(part) and part[0] in '0123456789'


def _special_rank(part: str) -> int:
    for form, rank in _SPECIAL_FORMS:
        if part.startswith(form):
            return rank
    return -1


def _cmp(a: int, b: int) -> int:
    return (a > b) - (a < b)


def _compare_parts(a: str, b: str) -> int:
    if _is_number(a) and _is_number(b):
        return _cmp(int(a), int(b))
    rank_a = _special_rank('#' if _is_number(a) else a)
    rank_b = _special_rank('#' if _is_number(b) else b)
    return _cmp(rank_a, rank_b)


def canonical_parts(version: str) -> list[str]:
    """Split a version into its comparable parts.

    Example:
        >>> canonical_parts('1.0-rc1')
        ['1', '0', 'rc', '1']
    """
    return _PART_RE.findall(_SEPARATOR_RE.sub('.', version))


def version_compare(version1: str, version2: str) -> int:
    """Compare two version strings.

    Returns:
        -1, 0 or 1 as version1 is lower than, equal to or higher than
        version2.
    """
    parts1 = canonical_parts(version1)
    parts2 = canonical_parts(version2)
    if not parts1 or not parts2:
        return _cmp(bool(parts1), bool(parts2))

    for a, b in zip(parts1, parts2):
        result = _compare_parts(a, b)
        if result:
            return result

    if len(parts1) > len(parts2):
        rest = parts1[len(parts2)]
        return 1 if _is_number(rest) else _compare_parts(rest, '#')
    if len(parts2) > len(parts1):
        rest = parts2[len(parts1)]
        return -1 if _is_number(rest) else _compare_parts('#', rest)
    return 0


class VersionString:
    """A version string with cached dotted parts.

    Example:
        >>> version = VersionString('2.10.1')
        >>> version.get_version_at(1)
        10
        >>> version.compare(VersionString('2.9'), '>')
        True
    """

    __slots__ = ('_version', '_expanded')

    def __init__(self, version: str) -> None:
        self._version = ''
        self._expanded: list[str] | None = None
        self.set_version(version)

    def __repr__(self) -> str:
        return f"VersionString({self._version!r})"

    def __str__(self) -> str:
        return self._version

    def set_version(self, version: str) -> None:
        """Replace the version and drop cached parts."""
        self._expanded = None
        self._version = version

    def get_version(self) -> str:
        """Return the version string as given."""
        return self._version

    def get_expanded_version(self) -> list[str]:
        """Return the version split on '.'."""
        if self._expanded is None:
            self._expanded = self._version.split('.')
        return list(self._expanded)

    def get_version_depth(self) -> int:
        """Return the number of dotted parts."""
        return len(self.get_expanded_version())

    def get_version_at(self, depth: int) -> int | None:
        """Return the integer part at depth.

        Returns:
            The part as int, or None if depth is out of range or the part
            is not a plain number.
        """
        parts = self.get_expanded_version()
        if depth < 0 or depth >= len(parts):
            return None
        part = parts[depth].strip()
        if not part.isascii() or not part.isdigit():
            return None
        return int(part)

    def compare(self, other: VersionString | str, op: str) -> bool:
        """Compare this version with another using an operator name.

        Args:
            other: Version to compare against.
            op: One of '<', 'lt', '<=', 'le', '>', 'gt', '>=', 'ge',
                '==', 'eq', '!=', '<>', 'ne'.

        Raises:
            ValueError: If op is not a known operator.
        """
        try:
            func = _OPERATORS[op]
        except KeyError:
            raise ValueError(f"Unknown comparison operator: {op!r}") from None
        return func(version_compare(self._version, str(other)), 0)
