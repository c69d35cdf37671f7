"""
Audit record sinks for SEMS.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union
from datetime import datetime, timezone
import asyncio
import aiofiles
import json
import logging
from collections import deque

from ..errors import SEMSError, STORAGE_ERROR
from ..util.dates import parse_timestamp
from .types import AuditRecord, AuditResult


logger = logging.getLogger(__name__)


def _naive_utc(moment: datetime) -> datetime:
    # Record timestamps are naive UTC
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def _matches(
    rec: AuditRecord,
    subject_id: Optional[str],
    result: Optional[AuditResult],
    since: Optional[datetime],
    until: Optional[datetime],
) -> bool:
    if subject_id and rec.subject_id != subject_id:
        return False

    if result and rec.result is not result:
        return False

    if since or until:
        ts = parse_timestamp(rec.timestamp)
        if since and ts < _naive_utc(since):
            return False
        if until and ts > _naive_utc(until):
            return False

    return True


def _as_result(result: Union[AuditResult, str, None]) -> Optional[AuditResult]:
    if result is None or isinstance(result, AuditResult):
        return result
    return AuditResult(result)


class AuditLogger(ABC):
    """Abstract base class for audit record storage"""

    @abstractmethod
    async def log(self, rec: AuditRecord) -> None:
        """Store an audit record"""
        pass

    @abstractmethod
    async def get_records(
        self,
        subject_id: Optional[str] = None,
        result: Union[AuditResult, str, None] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> List[AuditRecord]:
        """Retrieve audit records in insertion order with optional filtering"""
        pass

    async def close(self) -> None:
        """Close the audit logger and release resources"""
        pass


class MemoryAuditLogger(AuditLogger):
    """In-memory audit logger; the oldest records are evicted past max_entries"""

    def __init__(self, max_entries: int = 1000):
        self.max_entries = max_entries
        self.records: deque = deque(maxlen=max_entries)
        self._lock = asyncio.Lock()

    async def log(self, rec: AuditRecord) -> None:
        """Append an audit record to memory"""
        async with self._lock:
            self.records.append(rec)

    async def get_records(
        self,
        subject_id: Optional[str] = None,
        result: Union[AuditResult, str, None] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> List[AuditRecord]:
        """Retrieve audit records with optional filtering"""
        wanted = _as_result(result)
        async with self._lock:
            return [
                rec for rec in self.records
                if _matches(rec, subject_id, wanted, since, until)
            ]


class FileAuditLogger(AuditLogger):
    """Append-only JSON-lines audit logger"""

    def __init__(self, file_path: str):
        self.file_path = file_path
        self._lock = asyncio.Lock()

    async def log(self, rec: AuditRecord) -> None:
        """Append an audit record to the file"""
        async with self._lock:
            try:
                async with aiofiles.open(self.file_path, "a", encoding="utf-8") as f:
                    await f.write(json.dumps(rec.to_dict()) + "\n")
            except OSError as e:
                logger.error("Failed to write audit record %s: %s", rec.id, e)
                raise SEMSError(
                    f"Failed to write audit record to {self.file_path}",
                    STORAGE_ERROR,
                    details={'record_id': rec.id},
                    cause=e
                ) from e

    async def get_records(
        self,
        subject_id: Optional[str] = None,
        result: Union[AuditResult, str, None] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> List[AuditRecord]:
        """Retrieve audit records from the file with optional filtering"""
        wanted = _as_result(result)
        records = []

        async with self._lock:
            try:
                async with aiofiles.open(self.file_path, "r", encoding="utf-8") as f:
                    lines = await f.readlines()
            except FileNotFoundError:
                # Nothing logged yet
                return records

        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                rec = AuditRecord.from_dict(json.loads(line))
            except (json.JSONDecodeError, KeyError, ValueError) as e:
                logger.warning(
                    "Skipping malformed audit line %d in %s: %s",
                    line_no, self.file_path, e
                )
                continue

            if _matches(rec, subject_id, wanted, since, until):
                records.append(rec)

        return records


# Factory function for creating audit loggers
def create_audit_logger(logger_type: str = "memory", **kwargs) -> AuditLogger:
    """
    Factory function to create audit loggers

    Args:
        logger_type: Type of logger ("memory" or "file")
        **kwargs: Additional arguments for the logger

    Returns:
        AuditLogger instance
    """
    if logger_type == "memory":
        max_entries = kwargs.get("max_entries", 1000)
        return MemoryAuditLogger(max_entries)
    elif logger_type == "file":
        file_path = kwargs.get("file_path", "audit.log")
        return FileAuditLogger(file_path)
    else:
        raise ValueError(f"Unknown logger type: {logger_type}")
