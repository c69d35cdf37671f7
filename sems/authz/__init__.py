# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Package authz implements the SEMS access decision engine.

MAC, RuBAC, DAC, RBAC and ABAC are combined into a single ordered,
deterministic evaluation of (subject, document, time).
"""

from .types import (
    UserRole,
    ALL_ROLES,
    Department,
    Classification,
    EmploymentStatus,
    AccessModel,
    HourWindow,
    Subject,
    Resource,
    Verdict,
    parse_enum
)

from .engine import (
    AccessEngine,
    evaluate,
    accessible_resources,
    CONTRACT_EXPIRED_REASON,
    ADMIN_OVERRIDE_REASON
)

__all__ = [
    # Types
    'UserRole',
    'ALL_ROLES',
    'Department',
    'Classification',
    'EmploymentStatus',
    'AccessModel',
    'HourWindow',
    'Subject',
    'Resource',
    'Verdict',
    'parse_enum',

    # Engine
    'AccessEngine',
    'evaluate',
    'accessible_resources',
    'CONTRACT_EXPIRED_REASON',
    'ADMIN_OVERRIDE_REASON'
]
