"""
Shared fixtures for SEMS tests.
"""

import pytest

from sems.authz import (
    ALL_ROLES,
    Classification,
    Department,
    EmploymentStatus,
    Resource,
    Subject,
    UserRole,
)


@pytest.fixture
def make_subject():
    """Factory for subjects with sensible defaults"""
    def _make(**overrides):
        values = dict(
            id="EMP-100",
            name="Test Employee",
            role=UserRole.JUNIOR_EMPLOYEE,
            department=Department.OPERATIONS,
            clearance=Classification.INTERNAL,
            employment_status=EmploymentStatus.PERMANENT,
        )
        values.update(overrides)
        return Subject(**values)
    return _make


@pytest.fixture
def make_resource():
    """Factory for documents owned by someone else and open to all roles"""
    def _make(**overrides):
        values = dict(
            id="DOC-100",
            title="Quarterly Update",
            classification=Classification.INTERNAL,
            owner_id="EMP-999",
            department=Department.OPERATIONS,
            allowed_roles=list(ALL_ROLES),
        )
        values.update(overrides)
        return Resource(**values)
    return _make
