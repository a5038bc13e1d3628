# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DataTools exceptions."""

from __future__ import annotations


class DataToolsError(Exception):
    """Base exception for DataTools errors."""

    pass


class PathNotFoundError(DataToolsError, KeyError):
    """Raised when a path references a key absent from the container."""

    pass


class InvalidTraversalError(DataToolsError, KeyError):
    """Raised when a path walks through a leaf value."""

    pass
