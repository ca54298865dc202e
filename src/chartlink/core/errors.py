"""Error definitions for chartlink."""

from .enums import ErrorCode
from .models import ErrorDetail, ErrorResponse


class ChartlinkError(Exception):
    """Base exception for all chartlink errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize chartlink error.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Optional detailed error information
            hint: Optional correction hint for the user
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or []
        self.hint = hint

    def to_error_response(self) -> ErrorResponse:
        """Convert exception to ErrorResponse model."""
        return ErrorResponse(
            code=self.code.value,
            message=self.message,
            details=self.details if self.details else None,
            hint=self.hint,
        )


class AggregationError(ChartlinkError):
    """Raised when input rows cannot be aggregated into chart records."""

    def __init__(
        self,
        message: str,
        missing_columns: list[str] | None = None,
        hint: str | None = None,
    ) -> None:
        details = [ErrorDetail(field=column, reason="Required column is missing") for column in missing_columns or []]
        if not hint and missing_columns:
            hint = f"Provide the columns: {', '.join(missing_columns)}"

        super().__init__(
            message=message,
            code=ErrorCode.E422_UNPROCESSABLE,
            details=details,
            hint=hint,
        )
        self.missing_columns = list(missing_columns or [])
