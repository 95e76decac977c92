"""Custom exception hierarchy for estate-reports."""


class ReportingError(Exception):
    """Base exception for all estate-reports errors."""


class InvalidScopeError(ReportingError):
    """Raised when an account scope id is missing or malformed."""


class AccountNotFoundError(ReportingError):
    """Raised when a scope has no backing account record."""


class DataSourceError(ReportingError):
    """Raised when the data access layer cannot return a collection."""


class TransportError(DataSourceError):
    """Raised when the backing store is unreachable or erroring."""


class RecordValidationError(DataSourceError):
    """Raised when a stored row does not match its entity schema."""


class ReferentialIntegrityError(ReportingError):
    """Raised when a record references an entity that does not exist."""


class ReportUnavailableError(ReportingError):
    """Raised when a required fetch failed while assembling a report."""

    def __init__(self, message: str, entity_kind: str | None = None) -> None:
        super().__init__(message)
        self.entity_kind = entity_kind


class ReportCancelledError(ReportingError):
    """Raised when the caller abandoned a report request."""


class ReportAccessDeniedError(ReportingError):
    """Raised when a role may not request a report type."""


class ConfigurationError(ReportingError):
    """Raised when configuration is invalid or missing."""
