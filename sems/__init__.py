"""
SEMS Python Package

Document access decisions for the Secure Employee Management System:
MAC, RuBAC, DAC, RBAC and ABAC composed into one verdict, with an
immutable audit record for every action.
"""

__version__ = "0.1.0"

from .authz import (
    UserRole,
    Department,
    Classification,
    EmploymentStatus,
    AccessModel,
    HourWindow,
    Subject,
    Resource,
    Verdict,
    AccessEngine,
    evaluate,
    accessible_resources,
)
from .audit import AuditRecord, AuditResult, record
from .catalog import Catalog
from .core import AccessService, Config

__all__ = [
    "UserRole",
    "Department",
    "Classification",
    "EmploymentStatus",
    "AccessModel",
    "HourWindow",
    "Subject",
    "Resource",
    "Verdict",
    "AccessEngine",
    "evaluate",
    "accessible_resources",
    "AuditRecord",
    "AuditResult",
    "record",
    "Catalog",
    "AccessService",
    "Config",
]
