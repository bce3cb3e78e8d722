"""Unit tests for error classification utilities."""

import pytest

from src.core.errors import (
    ErrorCode,
    ErrorSeverity,
    FairnessEngineError,
    ReportValidationError,
    classify_error_with_response,
)


@pytest.mark.unit
class TestClassifyErrorWithResponse:
    """Tests for classify_error_with_response function."""

    def test_report_validation_error(self):
        """Missing weekly data maps to its own code."""
        response = classify_error_with_response(ReportValidationError("weekly_scores required for monthly report"))

        assert response.code == ErrorCode.ERR_WEEKLY_SCORES_REQUIRED
        assert response.severity == ErrorSeverity.LOW
        assert "weekly" in response.suggestion.lower()

    def test_invalid_period(self):
        """Period errors are recognised from their message."""
        response = classify_error_with_response(ValueError("period_end must be after period_start"))

        assert response.code == ErrorCode.ERR_INVALID_PERIOD
        assert response.severity == ErrorSeverity.LOW

    def test_other_value_error(self):
        """Other validation errors are invalid input."""
        response = classify_error_with_response(ValueError("weight must be between 1 and 10"))

        assert response.code == ErrorCode.ERR_INVALID_INPUT
        assert "1-10" in response.suggestion

    def test_unknown_error(self):
        """Anything else is unknown."""
        response = classify_error_with_response(RuntimeError("disk on fire"))

        assert response.code == ErrorCode.ERR_UNKNOWN
        assert response.severity == ErrorSeverity.MEDIUM
        assert "try again later" in response.suggestion.lower()


@pytest.mark.unit
class TestErrorHierarchy:
    """Tests for the engine exception types."""

    def test_report_validation_error_is_value_error(self):
        """Engine errors can be caught as ValueError."""
        with pytest.raises(ValueError, match="weekly_scores required"):
            raise ReportValidationError("weekly_scores required for monthly report")

    def test_base_error_code(self):
        """The base error carries the unknown code."""
        assert FairnessEngineError("x").code == ErrorCode.ERR_UNKNOWN
