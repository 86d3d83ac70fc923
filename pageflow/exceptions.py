"""
Exception classes for the Pageflow configuration layer

Every error raised by registries, the configuration object and the boot
builder derives from PageflowError, so host applications can translate them
into consistent HTTP responses (see pageflow.exception_handlers).
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes, stable across releases."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    REGISTRY_NOT_FOUND = "REGISTRY_NOT_FOUND"
    REGISTRY_DUPLICATE = "REGISTRY_DUPLICATE"
    REGISTRY_INVALID = "REGISTRY_INVALID"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    CONFIGURATION_SEALED = "CONFIGURATION_SEALED"
    QUOTA_EXHAUSTED = "QUOTA_EXHAUSTED"


class PageflowError(Exception):
    """Base exception class for all Pageflow errors"""

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Registry Exceptions
# ============================================================================


class NotFoundError(PageflowError, LookupError):
    """Raised when looking up a name that was never registered"""

    error_code = ErrorCode.REGISTRY_NOT_FOUND

    def __init__(self, registry: str, name: Any):
        super().__init__(
            message=f"Unknown {registry} '{name}'",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"registry": registry, "name": name},
        )
        self.registry = registry
        self.name = name


class DuplicateRegistrationError(PageflowError):
    """Raised when a registry rejects a second entry under the same name"""

    error_code = ErrorCode.REGISTRY_DUPLICATE

    def __init__(self, registry: str, name: Any):
        super().__init__(
            message=f"{registry} '{name}' is already registered",
            status_code=status.HTTP_409_CONFLICT,
            details={"registry": registry, "name": name},
        )
        self.registry = registry
        self.name = name


class InvalidRegistrationError(PageflowError):
    """Raised when a registration is malformed"""

    error_code = ErrorCode.REGISTRY_INVALID

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=details or {})


# ============================================================================
# Lifecycle Exceptions
# ============================================================================


class ConfigurationError(PageflowError):
    """Raised when the configuration lifecycle is used incorrectly"""

    error_code = ErrorCode.CONFIGURATION_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details or {})


class ConfigurationSealedError(ConfigurationError):
    """Raised when mutating configuration after application boot completed"""

    error_code = ErrorCode.CONFIGURATION_SEALED

    def __init__(self, target: str):
        super().__init__(
            message=f"Cannot modify {target}: configuration is sealed",
            details={"target": target},
        )


# ============================================================================
# Quota Exceptions
# ============================================================================


class QuotaExhaustedError(PageflowError):
    """Raised by Quota.verify_available when a quota is used up"""

    error_code = ErrorCode.QUOTA_EXHAUSTED

    def __init__(self, quota: str, message: str | None = None):
        super().__init__(
            message=message or f"Quota '{quota}' exhausted",
            status_code=status.HTTP_403_FORBIDDEN,
            details={"quota": quota},
        )
