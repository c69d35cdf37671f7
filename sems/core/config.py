"""
Configuration module for SEMS.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict
import logging

from ..authz.types import UserRole, parse_enum
from ..errors import ConfigurationError, ValidationError
from ..util.config import get_config_value, load_config_file, load_config_from_env, merge_configs


AUDIT_LOGGER_TYPES = ("memory", "file")
UNKNOWN_ORIGIN = "unknown"


@dataclass
class Config:
    """Configuration for the SEMS access service"""
    audit_logger_type: str = "memory"
    audit_file_path: str = "audit.log"
    audit_max_entries: int = 1000
    override_role: UserRole = UserRole.SYSTEM_ADMIN
    simulate_origin: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from SEMS_* environment variables"""
        return cls(
            audit_logger_type=get_config_value("audit_logger_type", "memory"),
            audit_file_path=get_config_value("audit_file_path", "audit.log"),
            audit_max_entries=get_config_value("audit_max_entries", 1000, int),
            override_role=_role(get_config_value("override_role", UserRole.SYSTEM_ADMIN.name)),
            simulate_origin=get_config_value("simulate_origin", False, bool),
            log_level=get_config_value("log_level", "INFO").upper(),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from a mapping; unknown keys are ignored"""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if "override_role" in values:
            values["override_role"] = _role(values["override_role"])
        # Environment overrides arrive as strings
        if isinstance(values.get("audit_max_entries"), str):
            try:
                values["audit_max_entries"] = int(values["audit_max_entries"])
            except ValueError as e:
                raise ConfigurationError("audit_max_entries must be an integer",
                                         config_key="audit_max_entries",
                                         config_value=values["audit_max_entries"]) from e
        if isinstance(values.get("simulate_origin"), str):
            values["simulate_origin"] = values["simulate_origin"].lower() in ("true", "1", "yes", "on")
        return cls(**values)

    @classmethod
    def from_file(cls, file_path: str) -> "Config":
        """
        Load configuration from a JSON/YAML file. SEMS_* environment
        variables override values from the file.
        """
        return cls.from_dict(merge_configs(load_config_file(file_path), load_config_from_env()))

    def validate(self) -> bool:
        """Validate the configuration"""
        if self.audit_logger_type not in AUDIT_LOGGER_TYPES:
            raise ConfigurationError(
                f"audit_logger_type must be one of {AUDIT_LOGGER_TYPES}",
                config_key="audit_logger_type",
                config_value=self.audit_logger_type
            )
        if self.audit_logger_type == "file" and not self.audit_file_path:
            raise ConfigurationError("audit_file_path is required for the file audit logger",
                                     config_key="audit_file_path")
        if not isinstance(self.audit_max_entries, int) or self.audit_max_entries <= 0:
            raise ConfigurationError("audit_max_entries must be a positive integer",
                                     config_key="audit_max_entries",
                                     config_value=self.audit_max_entries)
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}",
                                     config_key="log_level",
                                     config_value=self.log_level)
        return True


def _role(value: Any) -> UserRole:
    try:
        return parse_enum(UserRole, value, "override_role")
    except ValidationError as e:
        raise ConfigurationError(e.message, config_key="override_role", config_value=value) from e
