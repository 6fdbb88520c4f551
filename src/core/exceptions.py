"""
Domain exceptions for the insights application.

The generation pipeline itself never raises; these cover the
storage, configuration and request-validation edges around it.
"""

from typing import Any


class InsightsError(Exception):
    """Base exception for all insights errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(InsightsError):
    """Input failed a domain-level check."""

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Invalid {field}: {reason}",
            code="VALIDATION_ERROR",
            details={"field": field, "reason": reason},
        )


class ConfigurationError(InsightsError):
    """Settings are missing or inconsistent."""

    def __init__(self, setting: str, reason: str):
        super().__init__(
            f"Configuration error for '{setting}': {reason}",
            code="CONFIGURATION_ERROR",
            details={"setting": setting, "reason": reason},
        )


# Storage Exceptions
class StorageError(InsightsError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class MigrationError(StorageError):
    """A schema migration could not be applied."""

    def __init__(self, version: str, error: str):
        super().__init__(
            f"Migration v{version} failed: {error}",
            code="MIGRATION_FAILED",
            details={"version": version, "error": error},
        )
