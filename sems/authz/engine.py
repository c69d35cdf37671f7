# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Access decision engine for SEMS.

Composes five access-control models into one verdict. Rules run in a fixed
order and the first one that fires decides:

1. MAC    - clearance must be at least the document classification
2. RuBAC  - the document's allowed hour window, if any
3. ABAC   - contract staff past their contract end date
4. DAC    - owner or explicitly shared with
5. RBAC   - role listed on the document
6. ABAC   - administrative override
7. RBAC   - default denial

The first three only deny, the next three only grant. Evaluation is pure:
the caller supplies ``now`` and nothing is read from a live clock.
"""

from datetime import datetime
from typing import Iterable, List, Optional
import logging

from ..util.dates import start_of_day
from .types import AccessModel, Resource, Subject, UserRole, Verdict


logger = logging.getLogger(__name__)

CONTRACT_EXPIRED_REASON = "Your contract has expired. Access is revoked."
ADMIN_OVERRIDE_REASON = "System Administrative Override"


def _check_mac(subject: Subject, resource: Resource) -> Optional[Verdict]:
    if subject.clearance < resource.classification:
        return Verdict(
            allowed=False,
            model=AccessModel.MAC,
            reason=(
                f"Classification level mismatch. Your clearance is {subject.clearance.value} "
                f"but document requires {resource.classification.value}."
            )
        )
    return None


def _check_time_window(resource: Resource, now: datetime) -> Optional[Verdict]:
    window = resource.allowed_time_range
    if window is not None and not window.contains(now.hour):
        return Verdict(
            allowed=False,
            model=AccessModel.RUBAC,
            reason=(
                f"Access to this document is only permitted between "
                f"{window.start}:00 and {window.end}:00."
            )
        )
    return None


def _check_contract(subject: Subject, now: datetime) -> Optional[Verdict]:
    if not subject.is_contractor or subject.contract_end_date is None:
        return None

    # Cut off at midnight starting the end date, not at the end of it.
    if now > start_of_day(subject.contract_end_date, like=now):
        return Verdict(allowed=False, model=AccessModel.ABAC, reason=CONTRACT_EXPIRED_REASON)
    return None


class AccessEngine:
    """
    Ordered multi-model access evaluation.

    The engine holds no mutable state; one instance may be shared across
    threads and tasks.
    """

    def __init__(self, override_role: UserRole = UserRole.SYSTEM_ADMIN):
        """
        Args:
            override_role: Role granted access by the administrative override
                once the MAC, time window and contract gates have passed
        """
        self.override_role = override_role

    def evaluate(self, subject: Subject, resource: Resource, now: datetime) -> Verdict:
        """
        Decide whether ``subject`` may access ``resource`` at ``now``.

        Args:
            subject: The authenticated principal
            resource: The requested document
            now: Evaluation time; its hour is used as the local wall-clock hour

        Returns:
            Verdict: Always populated; denials carry a reason
        """
        verdict = self._decide(subject, resource, now)
        logger.debug(
            "access %s: subject=%s resource=%s model=%s",
            "granted" if verdict.allowed else "denied",
            subject.id, resource.id, verdict.model.value
        )
        return verdict

    def _decide(self, subject: Subject, resource: Resource, now: datetime) -> Verdict:
        gate = (
            _check_mac(subject, resource)
            or _check_time_window(resource, now)
            or _check_contract(subject, now)
        )
        if gate is not None:
            return gate

        if subject.id == resource.owner_id or subject.id in resource.shared_with_ids:
            return Verdict(allowed=True, model=AccessModel.DAC)

        if subject.role in resource.allowed_roles:
            return Verdict(allowed=True, model=AccessModel.RBAC)

        if subject.role is self.override_role:
            return Verdict(allowed=True, model=AccessModel.ABAC, reason=ADMIN_OVERRIDE_REASON)

        return Verdict(
            allowed=False,
            model=AccessModel.RBAC,
            reason=f"Your role ({subject.role.value}) does not have permission to access this document."
        )

    def accessible(self, subject: Subject, resources: Iterable[Resource], now: datetime) -> List[Resource]:
        """Resources the subject may open at ``now``, in input order."""
        return [r for r in resources if self.evaluate(subject, r, now).allowed]


_default_engine = AccessEngine()


def evaluate(subject: Subject, resource: Resource, now: datetime) -> Verdict:
    """Evaluate access with the default engine (SYSTEM_ADMIN override)."""
    return _default_engine.evaluate(subject, resource, now)


def accessible_resources(subject: Subject, resources: Iterable[Resource], now: datetime) -> List[Resource]:
    """Filter ``resources`` down to those ``subject`` may open at ``now``."""
    return _default_engine.accessible(subject, resources, now)
