"""Error types and classification utilities for the fairness engine."""

from enum import Enum

from pydantic import BaseModel


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCode:
    """Error codes for specific error conditions."""

    # Input errors
    ERR_INVALID_PERIOD = "ERR_INVALID_PERIOD"
    ERR_INVALID_INPUT = "ERR_INVALID_INPUT"

    # Report errors
    ERR_WEEKLY_SCORES_REQUIRED = "ERR_WEEKLY_SCORES_REQUIRED"

    # Generic errors
    ERR_UNKNOWN = "ERR_UNKNOWN"


class FairnessEngineError(ValueError):
    """Base class for errors raised by the fairness engine."""

    code: str = ErrorCode.ERR_UNKNOWN


class ReportValidationError(FairnessEngineError):
    """Raised when a report cannot be built from the supplied data."""

    code = ErrorCode.ERR_WEEKLY_SCORES_REQUIRED


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity


def classify_error_with_response(exception: Exception) -> ErrorResponse:
    """Classify an error and return a structured response with recovery suggestions.

    Args:
        exception: The exception raised while computing fairness data

    Returns:
        ErrorResponse with code, message, suggestion, and severity
    """
    error_str = str(exception).lower()

    if isinstance(exception, ReportValidationError):
        return ErrorResponse(
            code=exception.code,
            message="There is no weekly data to summarise for this month.",
            suggestion="Provide at least one weekly score before requesting a monthly report.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, ValueError) and "period" in error_str:
        return ErrorResponse(
            code=ErrorCode.ERR_INVALID_PERIOD,
            message="The reporting period is invalid.",
            suggestion="Make sure the period end date is after the period start date.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, ValueError):
        return ErrorResponse(
            code=ErrorCode.ERR_INVALID_INPUT,
            message="Some of the submitted data is invalid.",
            suggestion="Check task weights (1-10), dates and member ids, then try again.",
            severity=ErrorSeverity.LOW,
        )

    return ErrorResponse(
        code=ErrorCode.ERR_UNKNOWN,
        message="An unexpected error occurred.",
        suggestion="Please try again later. If the problem persists, contact support.",
        severity=ErrorSeverity.MEDIUM,
    )
