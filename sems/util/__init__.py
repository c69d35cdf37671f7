# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Utility package providing common helper functions for SEMS.

This package includes:
- Date utilities for directory date fields and audit timestamps
- Configuration utilities for environment lookup and JSON/YAML loading
"""

from .dates import (
    TIMESTAMP_FORMAT, parse_date, start_of_day, utcnow,
    format_timestamp, parse_timestamp
)
from .config import (
    ENV_PREFIX, load_config_from_env, get_config_value,
    merge_configs, load_config_file
)

__all__ = [
    # Date utilities
    'TIMESTAMP_FORMAT', 'parse_date', 'start_of_day', 'utcnow',
    'format_timestamp', 'parse_timestamp',

    # Configuration utilities
    'ENV_PREFIX', 'load_config_from_env', 'get_config_value',
    'merge_configs', 'load_config_file'
]
