# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Audit record construction for SEMS.

``record`` builds a fully formed, immutable AuditRecord. It performs no
persistence; handing the record to an AuditLogger is the
caller's job.
"""

from datetime import datetime
from typing import Optional, Union
import secrets
import string

from ..authz.types import Resource, Subject
from ..util.dates import format_timestamp, utcnow
from .types import AuditRecord, AuditResult


RECORD_ID_PREFIX = "LOG-"
RECORD_ID_LENGTH = 9

_BASE36 = string.digits + string.ascii_lowercase


def new_record_id() -> str:
    """Generate a record id such as ``LOG-k3j9x0qzp``."""
    suffix = ''.join(secrets.choice(_BASE36) for _ in range(RECORD_ID_LENGTH))
    return f"{RECORD_ID_PREFIX}{suffix}"


def simulated_origin() -> str:
    """
    Placeholder request-origin address in 192.168.1.1-254.

    Only used when no request-context collaborator supplies a real origin.
    The value carries no security meaning.
    """
    return f"192.168.1.{secrets.randbelow(254) + 1}"


def record(
    subject: Subject,
    action: str,
    result: Union[AuditResult, str],
    resource: Optional[Resource] = None,
    reason: Optional[str] = None,
    *,
    timestamp: Optional[datetime] = None,
    origin: Optional[str] = None
) -> AuditRecord:
    """
    Build an audit record for an action taken by ``subject``.

    Args:
        subject: Acting subject; id, name and role are captured by value
        action: Free-text action label, e.g. ``VIEW_DOCUMENT: DOC-3320``
        result: SUCCESS, DENIED or ALERT
        resource: Target document, if any
        reason: Optional explanation, typically a denial reason
        timestamp: Time of the action (defaults to the current UTC time)
        origin: Request-origin address from the request context; a
            simulated placeholder is used when omitted

    Returns:
        AuditRecord

    Raises:
        ValueError: If ``result`` is a string that names no AuditResult
    """
    if not isinstance(result, AuditResult):
        result = AuditResult(result)

    return AuditRecord(
        id=new_record_id(),
        subject_id=subject.id,
        subject_name=subject.name,
        subject_role=subject.role.value,
        action=action,
        timestamp=format_timestamp(timestamp or utcnow()),
        origin=origin if origin is not None else simulated_origin(),
        result=result,
        target_id=resource.id if resource is not None else None,
        target_title=resource.title if resource is not None else None,
        reason=reason
    )
