"""
Tests for the access service and its configuration.
"""

import json
import re
from datetime import datetime, timedelta, timezone

import pytest

from sems.audit import AuditResult, FileAuditLogger, MemoryAuditLogger
from sems.authz import AccessModel, Classification, HourWindow, UserRole
from sems.core import AccessService, Config, UNKNOWN_ORIGIN
from sems.errors import ConfigurationError, ErrorCode


NOON = datetime(2025, 12, 24, 12, 0)
EVENING = datetime(2025, 12, 24, 19, 30)


@pytest.fixture
def service():
    return AccessService(clock=lambda: NOON)


class TestAccessService:
    """AccessService orchestration"""

    def test_defaults(self):
        service = AccessService()
        assert isinstance(service.audit_logger, MemoryAuditLogger)
        assert service.engine.override_role is UserRole.SYSTEM_ADMIN

    def test_check_uses_clock(self, make_subject, make_resource):
        resource = make_resource(allowed_time_range=HourWindow(8, 17))

        assert AccessService(clock=lambda: NOON).check(make_subject(), resource).allowed is True
        assert AccessService(clock=lambda: EVENING).check(make_subject(), resource).model is AccessModel.RUBAC

    def test_explicit_now_wins(self, service, make_subject, make_resource):
        resource = make_resource(allowed_time_range=HourWindow(8, 17))
        assert service.check(make_subject(), resource, now=EVENING).allowed is False

    @pytest.mark.asyncio
    async def test_open_granted(self, service, make_subject, make_resource):
        subject, resource = make_subject(), make_resource()

        verdict, rec = await service.open_document(subject, resource)

        assert verdict.allowed is True
        assert rec.action == "VIEW_DOCUMENT: DOC-100"
        assert rec.result is AuditResult.SUCCESS
        assert rec.reason is None
        assert rec.timestamp == "2025-12-24 12:00:00"
        assert await service.audit_logger.get_records() == [rec]

    @pytest.mark.asyncio
    async def test_open_denied(self, service, make_subject, make_resource):
        subject = make_subject()
        resource = make_resource(classification=Classification.CONFIDENTIAL)

        verdict, rec = await service.open_document(subject, resource, origin="10.0.0.7")

        assert verdict.model is AccessModel.MAC
        assert rec.action == "ACCESS_ATTEMPT: DOC-100"
        assert rec.result is AuditResult.DENIED
        assert rec.reason == verdict.reason
        assert rec.origin == "10.0.0.7"

    @pytest.mark.asyncio
    async def test_log_event_and_activity(self, service, make_subject, make_resource):
        subject = make_subject()
        other = make_subject(id="EMP-200")

        await service.log_event(subject, "IDENTITY_HANDSHAKE_SUCCESS")
        await service.open_document(subject, make_resource())
        await service.open_document(other, make_resource())
        await service.log_event(subject, "CONNECTION_TERMINATED")

        activity = await service.activity(subject.id)

        assert [r.action for r in activity] == [
            "CONNECTION_TERMINATED",
            "VIEW_DOCUMENT: DOC-100",
            "IDENTITY_HANDSHAKE_SUCCESS",
        ]

    @pytest.mark.asyncio
    async def test_log_event_alert(self, service, make_subject):
        rec = await service.log_event(make_subject(), "REPEATED_DENIALS", "ALERT", reason="3 denials")
        assert rec.result is AuditResult.ALERT
        assert rec.reason == "3 denials"

    @pytest.mark.asyncio
    async def test_origin_unknown_by_default(self, service, make_subject, make_resource):
        _, rec = await service.open_document(make_subject(), make_resource())

        assert rec.origin == UNKNOWN_ORIGIN

    @pytest.mark.asyncio
    async def test_origin_placeholder_enabled(self, make_subject, make_resource):
        service = AccessService(Config(simulate_origin=True), clock=lambda: NOON)

        _, rec = await service.open_document(make_subject(), make_resource())

        assert re.match(r"^192\.168\.1\.\d{1,3}$", rec.origin)

    @pytest.mark.asyncio
    async def test_aware_clock_keeps_local_hour_and_stamps_utc(self, make_subject, make_resource):
        pacific = timezone(timedelta(hours=-8))
        service = AccessService(clock=lambda: datetime(2025, 12, 24, 12, 0, tzinfo=pacific))
        resource = make_resource(allowed_time_range=HourWindow(8, 17))

        verdict, rec = await service.open_document(make_subject(), resource)

        assert verdict.allowed is True
        assert rec.timestamp == "2025-12-24 20:00:00"
        assert await service.audit_logger.get_records(
            since=datetime(2025, 12, 24, 19, 59, tzinfo=timezone.utc)) == [rec]
        assert await service.audit_logger.get_records(
            since=datetime(2025, 12, 24, 12, 30, tzinfo=pacific)) == []

    @pytest.mark.asyncio
    async def test_default_clock_records_utc(self, make_subject, make_resource):
        service = AccessService()
        assert service.clock().tzinfo is not None

        _, rec = await service.open_document(make_subject(), make_resource())
        recent = datetime.now(timezone.utc) - timedelta(minutes=1)

        assert await service.audit_logger.get_records(since=recent) == [rec]

    @pytest.mark.asyncio
    async def test_file_sink_from_config(self, tmp_path, make_subject, make_resource):
        path = tmp_path / "audit.jsonl"
        service = AccessService(Config(audit_logger_type="file", audit_file_path=str(path)), clock=lambda: NOON)

        await service.open_document(make_subject(), make_resource())
        await service.close()

        assert isinstance(service.audit_logger, FileAuditLogger)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[0])["result"] == "SUCCESS"

    def test_accessible(self, service, make_subject, make_resource):
        docs = [make_resource(id="A"), make_resource(id="B", allowed_roles=[])]
        assert [d.id for d in service.accessible(make_subject(), docs)] == ["A"]

    def test_override_role_from_config(self, make_subject, make_resource):
        service = AccessService(Config(override_role=UserRole.SECURITY_ADMIN), clock=lambda: NOON)
        subject = make_subject(role=UserRole.SECURITY_ADMIN)

        verdict = service.check(subject, make_resource(allowed_roles=[]))

        assert verdict.model is AccessModel.ABAC
        assert verdict.allowed is True


class TestConfig:
    """Config loading and validation"""

    def test_defaults_validate(self):
        assert Config().validate() is True
        assert Config().simulate_origin is False

    @pytest.mark.parametrize("changes, key", [
        ({"audit_logger_type": "kafka"}, "audit_logger_type"),
        ({"audit_logger_type": "file", "audit_file_path": ""}, "audit_file_path"),
        ({"audit_max_entries": 0}, "audit_max_entries"),
        ({"log_level": "CHATTY"}, "log_level"),
    ])
    def test_invalid(self, changes, key):
        with pytest.raises(ConfigurationError) as exc_info:
            Config(**changes).validate()

        assert exc_info.value.error_code is ErrorCode.CONFIGURATION_ERROR
        assert exc_info.value.config_key == key

    def test_service_rejects_invalid_config(self):
        with pytest.raises(ConfigurationError):
            AccessService(Config(audit_logger_type="kafka"))

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SEMS_AUDIT_LOGGER_TYPE", "file")
        monkeypatch.setenv("SEMS_AUDIT_FILE_PATH", "/tmp/sems-audit.jsonl")
        monkeypatch.setenv("SEMS_AUDIT_MAX_ENTRIES", "50")
        monkeypatch.setenv("SEMS_OVERRIDE_ROLE", "Security Administrator")
        monkeypatch.setenv("SEMS_SIMULATE_ORIGIN", "true")
        monkeypatch.setenv("SEMS_LOG_LEVEL", "debug")

        config = Config.from_env()

        assert config.audit_logger_type == "file"
        assert config.audit_file_path == "/tmp/sems-audit.jsonl"
        assert config.audit_max_entries == 50
        assert config.override_role is UserRole.SECURITY_ADMIN
        assert config.simulate_origin is True
        assert config.log_level == "DEBUG"

    def test_from_env_unknown_role(self, monkeypatch):
        monkeypatch.setenv("SEMS_OVERRIDE_ROLE", "Overlord")

        with pytest.raises(ConfigurationError):
            Config.from_env()

    def test_from_file_with_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "sems.yaml"
        path.write_text(
            "audit_logger_type: memory\naudit_max_entries: 10\noverride_role: SECURITY_ADMIN\nunrelated: 1\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("SEMS_AUDIT_MAX_ENTRIES", "25")
        monkeypatch.setenv("SEMS_SIMULATE_ORIGIN", "yes")

        config = Config.from_file(str(path))

        assert config.audit_max_entries == 25
        assert config.override_role is UserRole.SECURITY_ADMIN
        assert config.simulate_origin is True
