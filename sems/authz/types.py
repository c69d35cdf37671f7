# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Authorization types for SEMS.
Implements the shared vocabulary with the directory (roles, departments,
classification levels), subjects, resources, and access verdicts.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from functools import total_ordering
from typing import Any, Dict, List, Optional, Type, TypeVar

from ..errors import ValidationError
from ..util.dates import parse_date


E = TypeVar('E', bound=Enum)


class UserRole(Enum):
    """Closed set of organisational roles."""
    SYSTEM_ADMIN = "System Administrator"
    SECURITY_ADMIN = "Security Administrator"
    HR_DIRECTOR = "HR Director"
    HR_MANAGER = "HR Manager"
    DEPT_MANAGER = "Department Manager"
    PAYROLL_OFFICER = "Payroll Officer"
    IT_SUPPORT = "IT Support Officer"
    PROJECT_SUPERVISOR = "Project Supervisor"
    SENIOR_EMPLOYEE = "Senior Employee"
    JUNIOR_EMPLOYEE = "Junior Employee"
    CONTRACT_EMPLOYEE = "Contract Employee"


ALL_ROLES = tuple(UserRole)


class Department(Enum):
    """Closed set of departments."""
    HR = "Human Resources"
    FINANCE = "Finance"
    IT = "Information Technology"
    OPERATIONS = "Operations"
    RD = "Research & Development"
    MARKETING = "Marketing"
    MANAGEMENT = "Management"


_CLASSIFICATION_RANK = {
    "Public": 1,
    "Internal": 2,
    "Confidential": 3,
}


@total_ordering
class Classification(Enum):
    """
    Sensitivity level, used both as a subject's clearance and a document's
    classification. Members are totally ordered: PUBLIC < INTERNAL < CONFIDENTIAL.
    """
    PUBLIC = "Public"
    INTERNAL = "Internal"
    CONFIDENTIAL = "Confidential"

    @property
    def rank(self) -> int:
        return _CLASSIFICATION_RANK[self.value]

    def __lt__(self, other):
        if not isinstance(other, Classification):
            return NotImplemented
        return self.rank < other.rank


class EmploymentStatus(Enum):
    """Employment status of a subject."""
    PERMANENT = "Permanent"
    CONTRACT = "Contract"


class AccessModel(Enum):
    """Access-control model that decided a verdict."""
    MAC = "MAC"
    RUBAC = "RuBAC"
    DAC = "DAC"
    RBAC = "RBAC"
    ABAC = "ABAC"

    def __str__(self) -> str:
        return self.value


def parse_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    """
    Resolve a directory value to an enum member.

    Members may be given as themselves, by value ("Internal") or by name
    ("INTERNAL"). Anything else is a contract violation of the directory.
    """
    if isinstance(value, enum_cls):
        return value

    if isinstance(value, str):
        for member in enum_cls:
            if value == member.value or value == member.name:
                return member

    raise ValidationError(
        f"Unknown {enum_cls.__name__} value: {value!r}",
        field=field_name,
        value=value
    )


def _require(data: Dict[str, Any], key: str, kind: str) -> Any:
    if key not in data or data[key] is None:
        raise ValidationError(f"{kind} is missing required field '{key}'", field=key)
    return data[key]


def _list_field(data: Dict[str, Any], key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"{key} must be a list, got {value!r}", field=key, value=value)
    return list(value)


def _bool_field(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValidationError(f"{key} must be true or false, got {value!r}", field=key, value=value)
    return value


@dataclass(frozen=True)
class HourWindow:
    """
    Allowed time-of-day range for a document, in wall-clock hours 0-23.

    Both ends are inclusive: ``HourWindow(8, 17)`` admits 08:00 through 17:59.
    """
    start: int
    end: int

    def __post_init__(self):
        for name in ('start', 'end'):
            hour = getattr(self, name)
            if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
                raise ValueError(f"HourWindow.{name} must be an hour between 0 and 23, got {hour!r}")

    def contains(self, hour: int) -> bool:
        """Check if a wall-clock hour falls inside the window."""
        return not (hour < self.start or hour > self.end)

    def __str__(self) -> str:
        return f"{self.start}:00-{self.end}:00"

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary representation."""
        return {'start': self.start, 'end': self.end}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HourWindow':
        """Create from dictionary representation."""
        try:
            return cls(start=data['start'], end=data['end'])
        except KeyError as e:
            raise ValidationError(f"Time range is missing '{e.args[0]}'", field='allowed_time_range') from e
        except ValueError as e:
            raise ValidationError(str(e), field='allowed_time_range', value=data) from e


@dataclass
class Subject:
    """
    Authenticated principal requesting access to a document.

    ``contract_end_date`` is only meaningful for contract staff; when it is
    None there is no expiry constraint.
    """
    id: str
    name: str
    role: UserRole
    department: Department
    clearance: Classification
    employment_status: EmploymentStatus = EmploymentStatus.PERMANENT
    contract_end_date: Optional[date] = None
    mfa_enabled: bool = False

    @property
    def is_contractor(self) -> bool:
        return self.employment_status is EmploymentStatus.CONTRACT

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'id': self.id,
            'name': self.name,
            'role': self.role.value,
            'department': self.department.value,
            'clearance': self.clearance.value,
            'employment_status': self.employment_status.value,
            'contract_end_date': self.contract_end_date.isoformat() if self.contract_end_date else None,
            'mfa_enabled': self.mfa_enabled
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Subject':
        """Create from dictionary representation."""
        try:
            contract_end_date = parse_date(data.get('contract_end_date'))
        except ValueError as e:
            raise ValidationError(str(e), field='contract_end_date', value=data.get('contract_end_date')) from e

        return cls(
            id=str(_require(data, 'id', 'Subject')),
            name=str(_require(data, 'name', 'Subject')),
            role=parse_enum(UserRole, _require(data, 'role', 'Subject'), 'role'),
            department=parse_enum(Department, _require(data, 'department', 'Subject'), 'department'),
            clearance=parse_enum(Classification, _require(data, 'clearance', 'Subject'), 'clearance'),
            employment_status=parse_enum(
                EmploymentStatus,
                data.get('employment_status', EmploymentStatus.PERMANENT),
                'employment_status'
            ),
            contract_end_date=contract_end_date,
            mfa_enabled=_bool_field(data, 'mfa_enabled')
        )


@dataclass
class Resource:
    """
    Protected document.

    ``allowed_roles`` may list every role, which is the usual case for
    public and internal documents. ``shared_with_ids`` grants individual
    subjects access regardless of their role.
    """
    id: str
    title: str
    classification: Classification
    owner_id: str
    department: Department
    allowed_roles: List[UserRole] = field(default_factory=list)
    allowed_time_range: Optional[HourWindow] = None
    shared_with_ids: List[str] = field(default_factory=list)
    last_modified: Optional[date] = None
    content: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'id': self.id,
            'title': self.title,
            'classification': self.classification.value,
            'owner_id': self.owner_id,
            'department': self.department.value,
            'allowed_roles': [r.value for r in self.allowed_roles],
            'allowed_time_range': self.allowed_time_range.to_dict() if self.allowed_time_range else None,
            'shared_with_ids': list(self.shared_with_ids),
            'last_modified': self.last_modified.isoformat() if self.last_modified else None,
            'content': self.content
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Resource':
        """Create from dictionary representation."""
        roles = data.get('allowed_roles')
        if isinstance(roles, str):
            if roles.lower() not in ('*', 'all'):
                raise ValidationError(
                    f"allowed_roles must be a list or '*', got {roles!r}",
                    field='allowed_roles',
                    value=roles
                )
            allowed_roles = list(ALL_ROLES)
        else:
            allowed_roles = [parse_enum(UserRole, r, 'allowed_roles') for r in _list_field(data, 'allowed_roles')]

        window = data.get('allowed_time_range')
        if isinstance(window, HourWindow) or window is None:
            allowed_time_range = window
        else:
            allowed_time_range = HourWindow.from_dict(window)

        try:
            last_modified = parse_date(data.get('last_modified'))
        except ValueError as e:
            raise ValidationError(str(e), field='last_modified', value=data.get('last_modified')) from e

        return cls(
            id=str(_require(data, 'id', 'Resource')),
            title=str(_require(data, 'title', 'Resource')),
            classification=parse_enum(Classification, _require(data, 'classification', 'Resource'), 'classification'),
            owner_id=str(_require(data, 'owner_id', 'Resource')),
            department=parse_enum(Department, _require(data, 'department', 'Resource'), 'department'),
            allowed_roles=allowed_roles,
            allowed_time_range=allowed_time_range,
            shared_with_ids=[str(s) for s in _list_field(data, 'shared_with_ids')],
            last_modified=last_modified,
            content=data.get('content', '')
        )


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of one access evaluation.

    ``reason`` is always set on denials, set on the administrative override
    grant, and None on ordinary grants.
    """
    allowed: bool
    model: AccessModel
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'allowed': self.allowed,
            'model': self.model.value,
            'reason': self.reason
        }
