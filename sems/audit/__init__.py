# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Audit module initialization
"""

from .types import AuditRecord, AuditResult
from .recorder import record, new_record_id, simulated_origin
from .logger import AuditLogger, MemoryAuditLogger, FileAuditLogger, create_audit_logger

__all__ = [
    "AuditRecord",
    "AuditResult",
    "record",
    "new_record_id",
    "simulated_origin",
    "AuditLogger",
    "MemoryAuditLogger",
    "FileAuditLogger",
    "create_audit_logger"
]
