"""Operation status and result types.

Uniform result returned by long-running operations (such as the catalog
extraction script) instead of printing and swallowing errors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        INVALID_INPUT: Non-retryable error caused by arguments or input files
        NOT_FOUND: Nothing to operate on (no source files, no paths)
        CANCELLED: The user declined to continue
    """

    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs and terminals
        data: Optional[Any] -- optional payload
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """True if status is SUCCESS."""
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data."""
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            data: Optional payload to include with the error

        Returns:
            OperationResult with specified error status
        """
        return cls(status=status, message=message, error_code=error_code, data=data)

    @classmethod
    def invalid_input(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create an INVALID_INPUT result for validation failures."""
        return cls.error(OperationStatus.INVALID_INPUT, message, error_code)

    @classmethod
    def cancelled(cls, message: str = "Canceled") -> "OperationResult":
        """Create a CANCELLED result."""
        return cls(status=OperationStatus.CANCELLED, message=message)
