# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Audit record types for SEMS.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional


class AuditResult(Enum):
    """Outcome tag carried by an audit record."""
    SUCCESS = "SUCCESS"
    DENIED = "DENIED"
    ALERT = "ALERT"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AuditRecord:
    """
    Immutable snapshot of one action's outcome.

    Subject and document fields are copied by value when the record is made,
    so later changes to the subject or document do not reach past records.
    """
    id: str
    subject_id: str
    subject_name: str
    subject_role: str
    action: str
    timestamp: str
    origin: str
    result: AuditResult
    target_id: Optional[str] = None
    target_title: Optional[str] = None
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = asdict(self)
        data['result'] = self.result.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuditRecord':
        """Create from dictionary representation."""
        return cls(
            id=data['id'],
            subject_id=data['subject_id'],
            subject_name=data['subject_name'],
            subject_role=data['subject_role'],
            action=data['action'],
            timestamp=data['timestamp'],
            origin=data['origin'],
            result=AuditResult(data['result']),
            target_id=data.get('target_id'),
            target_title=data.get('target_title'),
            reason=data.get('reason')
        )
