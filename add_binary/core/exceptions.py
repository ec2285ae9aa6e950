"""Custom exceptions for binary conversion."""

from typing import Optional, Any, Dict
from fastapi import HTTPException, status


class ConversionError(Exception):
    """Base exception for conversion errors."""

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result = {"message": self.message}
        if self.code:
            result["code"] = self.code
        if self.details:
            result["details"] = self.details
        return result


class OperandOutOfRange(ConversionError):
    """Raised when an operand does not fit the configured integer width."""
    def __init__(self, name: str, value: int, width: int):
        message = f"Operand {name}={value} does not fit a {width}-bit signed integer"
        super().__init__(message, code="OPERAND_OUT_OF_RANGE", details={"operand": name, "width": width})
        self.name = name
        self.value = value
        self.width = width


class ArithmeticOverflow(ConversionError):
    """Raised when the sum leaves the signed range and wraparound is disabled."""
    def __init__(self, a: int, b: int, width: int):
        message = f"Sum of {a} and {b} overflows a {width}-bit signed integer"
        super().__init__(message, code="ARITHMETIC_OVERFLOW", details={"width": width})
        self.a = a
        self.b = b
        self.width = width


class UnsupportedNegativeSum(ConversionError):
    """Raised when the sum is negative and reinterpretation is disabled."""
    def __init__(self, total: int):
        super().__init__(
            f"Sum {total} is negative and cannot be rendered as an unsigned binary string",
            code="UNSUPPORTED_NEGATIVE_SUM",
        )
        self.total = total


class UnknownStrategy(ConversionError):
    """Raised when a conversion strategy is not registered."""
    def __init__(self, name: str, available: Optional[list] = None):
        message = f"Strategy '{name}' not found"
        if available:
            message += f". Available: {available}"
        super().__init__(message, code="UNKNOWN_STRATEGY")
        self.name = name
        self.available = available or []


def service_error_handler(error: ConversionError) -> HTTPException:
    """Convert conversion errors to HTTP exceptions."""
    status_map = {
        OperandOutOfRange: status.HTTP_400_BAD_REQUEST,
        UnknownStrategy: status.HTTP_404_NOT_FOUND,
        ArithmeticOverflow: status.HTTP_422_UNPROCESSABLE_ENTITY,
        UnsupportedNegativeSum: status.HTTP_422_UNPROCESSABLE_ENTITY,
    }

    status_code = status_map.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)

    return HTTPException(
        status_code=status_code,
        detail=error.to_dict()
    )
