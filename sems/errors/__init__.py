# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Error types and error codes for SEMS.

The decision engine and the audit recorder never raise. These errors belong
to the boundary layers around them: the catalog (directory data coming in),
configuration, and audit storage.
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(str, Enum):
    """Standard error codes used across SEMS."""
    INVALID_REQUEST = "invalid_request"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    CONFIGURATION_ERROR = "configuration_error"
    STORAGE_ERROR = "storage_error"
    INTERNAL_ERROR = "internal_error"

    def __str__(self) -> str:
        return self.value


# Error code constants for easy import
INVALID_REQUEST = ErrorCode.INVALID_REQUEST
NOT_FOUND = ErrorCode.NOT_FOUND
VALIDATION_FAILED = ErrorCode.VALIDATION_FAILED
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
STORAGE_ERROR = ErrorCode.STORAGE_ERROR
INTERNAL_ERROR = ErrorCode.INTERNAL_ERROR


class SEMSError(Exception):
    """Base exception for all SEMS errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class ValidationError(SEMSError):
    """Raised when a value handed over by a collaborator is malformed."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, VALIDATION_FAILED, details)
        self.field = field
        self.value = value

        if field:
            self.details['field'] = field
        if value is not None:
            self.details['value'] = str(value)


class CatalogError(SEMSError):
    """Raised by the directory catalog for lookups and inconsistent data."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INVALID_REQUEST,
        entity_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, error_code, details, cause)
        self.entity_id = entity_id

        if entity_id:
            self.details['entity_id'] = entity_id


class ConfigurationError(SEMSError):
    """Raised when there's a configuration error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, CONFIGURATION_ERROR, details)
        self.config_key = config_key
        self.config_value = config_value

        if config_key:
            self.details['config_key'] = config_key
        if config_value is not None:
            self.details['config_value'] = str(config_value)


__all__ = [
    'ErrorCode',
    'INVALID_REQUEST',
    'NOT_FOUND',
    'VALIDATION_FAILED',
    'CONFIGURATION_ERROR',
    'STORAGE_ERROR',
    'INTERNAL_ERROR',
    'SEMSError',
    'ValidationError',
    'CatalogError',
    'ConfigurationError',
]
