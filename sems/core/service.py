"""
Access service for SEMS.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

The service is the call boundary in front of the pure decision engine and
audit recorder. It is the one place that reads a live clock, and it hands
every record it makes to the configured audit sink.
"""

from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple, Union
import logging

from ..audit.logger import AuditLogger, create_audit_logger
from ..audit.recorder import record
from ..audit.types import AuditRecord, AuditResult
from ..authz.engine import AccessEngine
from ..authz.types import Resource, Subject, Verdict
from .config import Config, UNKNOWN_ORIGIN


VIEW_ACTION = "VIEW_DOCUMENT"
DENIED_ACTION = "ACCESS_ATTEMPT"


def _local_now() -> datetime:
    return datetime.now().astimezone()


class AccessService:
    """
    Evaluates document access and keeps the audit trail.

    Subjects are always passed in explicitly; the service holds no notion
    of a "current user".
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        audit_logger: Optional[AuditLogger] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the access service.

        Args:
            config: Service configuration (defaults to Config())
            audit_logger: Audit sink (defaults to the one named by config)
            clock: Source of the evaluation time (defaults to the local wall clock,
                timezone-aware so record timestamps are rendered in UTC)
        """
        self.config = config or Config()
        self.config.validate()
        self.engine = AccessEngine(override_role=self.config.override_role)
        self.audit_logger = audit_logger or create_audit_logger(
            self.config.audit_logger_type,
            max_entries=self.config.audit_max_entries,
            file_path=self.config.audit_file_path,
        )
        self.clock = clock or _local_now
        self.logger = logging.getLogger(__name__)

    def _now(self, now: Optional[datetime]) -> datetime:
        return now if now is not None else self.clock()

    def _origin(self, origin: Optional[str]) -> Optional[str]:
        if origin is None and not self.config.simulate_origin:
            return UNKNOWN_ORIGIN
        return origin

    def check(self, subject: Subject, resource: Resource, now: Optional[datetime] = None) -> Verdict:
        """Evaluate access without recording anything."""
        return self.engine.evaluate(subject, resource, self._now(now))

    def accessible(
        self,
        subject: Subject,
        resources: Iterable[Resource],
        now: Optional[datetime] = None,
    ) -> List[Resource]:
        """Documents the subject may open, in input order."""
        return self.engine.accessible(subject, resources, self._now(now))

    async def open_document(
        self,
        subject: Subject,
        resource: Resource,
        now: Optional[datetime] = None,
        origin: Optional[str] = None,
    ) -> Tuple[Verdict, AuditRecord]:
        """
        Evaluate access to a document and record the attempt.

        Grants are recorded as ``VIEW_DOCUMENT: <id>`` / SUCCESS, denials as
        ``ACCESS_ATTEMPT: <id>`` / DENIED with the verdict reason.

        Returns:
            The verdict and the audit record that was logged

        Raises:
            SEMSError: If the audit sink fails to store the record
        """
        moment = self._now(now)
        verdict = self.engine.evaluate(subject, resource, moment)

        if verdict.allowed:
            rec = record(subject, f"{VIEW_ACTION}: {resource.id}", AuditResult.SUCCESS, resource,
                         timestamp=moment, origin=self._origin(origin))
        else:
            self.logger.info(
                "Access denied by %s: subject=%s resource=%s",
                verdict.model.value, subject.id, resource.id
            )
            rec = record(subject, f"{DENIED_ACTION}: {resource.id}", AuditResult.DENIED, resource,
                         verdict.reason, timestamp=moment, origin=self._origin(origin))

        await self.audit_logger.log(rec)
        return verdict, rec

    async def log_event(
        self,
        subject: Subject,
        action: str,
        result: Union[AuditResult, str] = AuditResult.SUCCESS,
        resource: Optional[Resource] = None,
        reason: Optional[str] = None,
        origin: Optional[str] = None,
    ) -> AuditRecord:
        """Record a session-level event such as a sign-in or sign-out."""
        rec = record(subject, action, result, resource, reason,
                     timestamp=self.clock(), origin=self._origin(origin))
        await self.audit_logger.log(rec)
        return rec

    async def activity(self, subject_id: str) -> List[AuditRecord]:
        """A subject's audit records, newest first."""
        records = await self.audit_logger.get_records(subject_id=subject_id)
        return list(reversed(records))

    async def close(self) -> None:
        """Close the audit sink."""
        await self.audit_logger.close()
