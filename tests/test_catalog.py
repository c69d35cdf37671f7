"""
Tests for the directory catalog and its boundary validation.
"""

import copy
import json
from datetime import date, datetime

import pytest
import yaml

from sems.authz import (
    ALL_ROLES,
    AccessModel,
    Classification,
    Department,
    EmploymentStatus,
    HourWindow,
    Resource,
    Subject,
    UserRole,
    accessible_resources,
    evaluate,
)
from sems.catalog import Catalog
from sems.demo.sample_data import SAMPLE_CATALOG
from sems.errors import CatalogError, ErrorCode, ValidationError


NOON = datetime(2025, 12, 24, 12, 0)


@pytest.fixture
def catalog():
    return Catalog.from_dict(SAMPLE_CATALOG)


class TestCatalogLoading:
    """Catalog.from_dict and friends"""

    def test_sample_catalog(self, catalog):
        assert len(catalog.subjects) == 7
        assert len(catalog.resources) == 5
        assert len(catalog) == 12

    def test_subject_fields_parsed(self, catalog):
        ryan = catalog.get_subject("EMP-4001")

        assert ryan.role is UserRole.CONTRACT_EMPLOYEE
        assert ryan.department is Department.MARKETING
        assert ryan.clearance is Classification.PUBLIC
        assert ryan.employment_status is EmploymentStatus.CONTRACT
        assert ryan.contract_end_date == date(2025, 12, 31)
        assert ryan.mfa_enabled is False

    def test_resource_fields_parsed(self, catalog):
        payroll = catalog.get_resource("DOC-7781")

        assert payroll.classification is Classification.CONFIDENTIAL
        assert payroll.allowed_time_range == HourWindow(8, 17)
        assert payroll.last_modified == date(2025, 11, 12)
        assert UserRole.PAYROLL_OFFICER in payroll.allowed_roles

    def test_wildcard_roles(self, catalog):
        assert catalog.get_resource("DOC-3320").allowed_roles == list(ALL_ROLES)

    def test_enum_names_accepted(self):
        subject = Subject.from_dict({
            "id": "E1", "name": "N", "role": "HR_DIRECTOR",
            "department": "HR", "clearance": "CONFIDENTIAL",
        })
        assert subject.role is UserRole.HR_DIRECTOR
        assert subject.employment_status is EmploymentStatus.PERMANENT

    def test_optional_lists(self):
        resource = Resource.from_dict({
            "id": "D", "title": "T", "classification": "Public",
            "owner_id": "E", "department": "Finance",
            "shared_with_ids": ("EMP-1", "EMP-2"),
        })
        assert resource.allowed_roles == []
        assert resource.shared_with_ids == ["EMP-1", "EMP-2"]

    def test_dict_round_trip(self, catalog):
        again = Catalog.from_dict(catalog.to_dict())

        assert again.subjects == catalog.subjects
        assert again.resources == catalog.resources

    def test_lookup_missing(self, catalog):
        with pytest.raises(CatalogError) as exc_info:
            catalog.get_subject("EMP-404")
        assert exc_info.value.error_code is ErrorCode.NOT_FOUND

        with pytest.raises(CatalogError):
            catalog.get_resource("DOC-404")


class TestBoundaryValidation:
    """Malformed directory data is rejected on the way in"""

    def _broken(self, section, index, **changes):
        data = copy.deepcopy(SAMPLE_CATALOG)
        data[section][index].update(changes)
        return data

    @pytest.mark.parametrize("section, field, value", [
        ("subjects", "role", "Wizard"),
        ("subjects", "department", "Legal"),
        ("subjects", "clearance", "Top Secret"),
        ("subjects", "employment_status", "Intern"),
        ("subjects", "contract_end_date", "someday"),
        ("subjects", "mfa_enabled", "false"),
        ("subjects", "mfa_enabled", 1),
        ("resources", "classification", "Secret"),
        ("resources", "allowed_roles", ["Wizard"]),
        ("resources", "allowed_roles", "everyone"),
        ("resources", "allowed_roles", 5),
        ("resources", "allowed_roles", {"HR Director": True}),
        ("resources", "shared_with_ids", "EMP-5001"),
        ("resources", "allowed_time_range", {"start": 8, "end": 24}),
        ("resources", "allowed_time_range", {"start": 8}),
    ])
    def test_invalid_values(self, section, field, value):
        with pytest.raises(CatalogError) as exc_info:
            Catalog.from_dict(self._broken(section, 0, **{field: value}))

        assert exc_info.value.error_code is ErrorCode.VALIDATION_FAILED
        assert exc_info.value.details["field"] == field

    def test_missing_required_field(self):
        data = copy.deepcopy(SAMPLE_CATALOG)
        del data["resources"][1]["owner_id"]

        with pytest.raises(CatalogError) as exc_info:
            Catalog.from_dict(data)

        assert exc_info.value.entity_id == "DOC-3320"
        assert "owner_id" in exc_info.value.message

    def test_duplicate_ids(self):
        data = copy.deepcopy(SAMPLE_CATALOG)
        data["subjects"].append(dict(data["subjects"][0]))

        with pytest.raises(CatalogError, match="Duplicate subject id"):
            Catalog.from_dict(data)

    def test_non_mapping_entry(self):
        with pytest.raises(CatalogError):
            Catalog.from_dict({"subjects": ["EMP-001"]})

    def test_validation_error_from_types(self):
        with pytest.raises(ValidationError):
            Resource.from_dict({"id": "D", "title": "T", "classification": "Nope",
                                "owner_id": "E", "department": "Finance"})


class TestCatalogFiles:
    """Catalog.from_file"""

    def test_yaml(self, tmp_path):
        path = tmp_path / "directory.yaml"
        path.write_text(yaml.safe_dump(SAMPLE_CATALOG), encoding="utf-8")

        catalog = Catalog.from_file(str(path))

        assert catalog.get_resource("DOC-9004").shared_with_ids == ["EMP-5001"]

    def test_json(self, tmp_path):
        path = tmp_path / "directory.json"
        path.write_text(json.dumps(SAMPLE_CATALOG), encoding="utf-8")

        assert len(Catalog.from_file(str(path)).subjects) == 7

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            Catalog.from_file(str(tmp_path / "nope.yaml"))

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "directory.yml"
        path.write_text("subjects: [unclosed", encoding="utf-8")

        with pytest.raises(CatalogError):
            Catalog.from_file(str(path))

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "directory.toml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(CatalogError):
            Catalog.from_file(str(path))


class TestSampleDirectoryDecisions:
    """Decisions over the sample directory"""

    def test_pam_reads_shared_project_update(self, catalog):
        verdict = evaluate(catalog.get_subject("EMP-5001"), catalog.get_resource("DOC-9004"), NOON)
        assert verdict.model is AccessModel.DAC

    def test_payroll_officer_after_hours(self, catalog):
        officer = catalog.get_subject("EMP-1023")
        report = catalog.get_resource("DOC-7781")

        assert evaluate(officer, report, NOON).model is AccessModel.RBAC
        assert evaluate(officer, report, datetime(2025, 12, 24, 18, 0)).model is AccessModel.RUBAC

    def test_admin_override_on_disciplinary_record(self, catalog):
        admin = catalog.get_subject("EMP-001")
        doc = catalog.get_resource("DOC-5512")

        # listed explicitly, so RBAC decides
        assert evaluate(admin, doc, NOON).model is AccessModel.RBAC

    def test_contractor_after_expiry(self, catalog):
        ryan = catalog.get_subject("EMP-4001")
        calendar = catalog.get_resource("DOC-1102")

        assert evaluate(ryan, calendar, NOON).allowed is True
        assert evaluate(ryan, calendar, datetime(2026, 1, 2)).model is AccessModel.ABAC

    def test_accessible_for_department_manager(self, catalog):
        manager = catalog.get_subject("EMP-3091")
        ids = [r.id for r in accessible_resources(manager, catalog.resources, NOON)]
        assert ids == ["DOC-3320", "DOC-1102", "DOC-9004"]
