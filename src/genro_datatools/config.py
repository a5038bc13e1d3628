# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Configuration classes for DataTools components."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PathConfig:
    """Characters used when normalizing and parsing paths."""

    # Segment separator of canonical paths and flat keys
    separator: str = '/'

    # Rewritten to the separator before collapsing
    alt_separator: str = '\\'

    # Query string markers
    query_marker: str = '?'
    param_separator: str = '&'
    assignment: str = '='

    # Trimmed around the path after slash collapsing
    whitespace: str = ' \t\n\r\0\x0b'


# Global configuration instance
PATH_CONFIG = PathConfig()

# Environment variable holding the initial log level name (e.g. 'DEBUG')
LOG_LEVEL_ENV = 'GENRO_DATATOOLS_LOG_LEVEL'
