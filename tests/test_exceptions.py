"""Tests for the exception hierarchy."""

import pytest

from estate_reports.exceptions import (
    AccountNotFoundError,
    ConfigurationError,
    DataSourceError,
    InvalidScopeError,
    RecordValidationError,
    ReferentialIntegrityError,
    ReportAccessDeniedError,
    ReportCancelledError,
    ReportingError,
    ReportUnavailableError,
    TransportError,
)


class TestExceptionHierarchy:
    """Every error derives from ReportingError."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidScopeError,
            AccountNotFoundError,
            DataSourceError,
            ReferentialIntegrityError,
            ReportCancelledError,
            ReportAccessDeniedError,
            ConfigurationError,
        ],
    )
    def test_subclasses_reporting_error(self, exc_class: type) -> None:
        """Test each error can be caught as ReportingError."""
        with pytest.raises(ReportingError, match="boom"):
            raise exc_class("boom")

    def test_data_source_errors(self) -> None:
        """Test transport and validation errors are data source errors."""
        assert issubclass(TransportError, DataSourceError)
        assert issubclass(RecordValidationError, DataSourceError)
        assert not issubclass(AccountNotFoundError, DataSourceError)


class TestReportUnavailableError:
    """Tests for ReportUnavailableError."""

    def test_carries_entity_kind(self) -> None:
        """Test the failing entity kind is kept on the error."""
        error = ReportUnavailableError("transactions down", entity_kind="transaction")

        assert str(error) == "transactions down"
        assert error.entity_kind == "transaction"

    def test_entity_kind_optional(self) -> None:
        """Test entity kind defaults to None."""
        assert ReportUnavailableError("down").entity_kind is None
