"""
Error taxonomy for indicator construction and computation.

Three kinds only:
- InvalidParameter: bad construction parameters
- InsufficientData: batch input shorter than the indicator's minimum
- CalculationError: degenerate arithmetic on a sample (division by zero)

All errors are terminal for the call that raised them. A failed
``calculate`` returns nothing and leaves the indicator reset.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # Parameter errors (1xx)
    PARAM_PERIOD = "E101"
    PARAM_MULTIPLIER = "E102"
    PARAM_ORDER = "E103"
    PARAM_UNKNOWN = "E104"

    # Data errors (2xx)
    DATA_INSUFFICIENT = "E201"

    # Calculation errors (3xx)
    CALC_ZERO_RANGE = "E301"
    CALC_ZERO_VOLUME = "E302"
    CALC_ZERO_REFERENCE = "E303"
    CALC_ZERO_MIDDLE = "E304"


class IndicatorError(Exception):
    """
    Base exception for indicator failures.

    Carries a code, the indicator that raised it and free-form context so
    callers can log or serialize the failure.
    """

    default_code = ErrorCode.PARAM_UNKNOWN

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        indicator: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.code = code or self.default_code
        self.indicator = indicator
        self.context = context or {}
        self.message = message

        parts = [f"[{self.code.value}]"]
        if indicator:
            parts.append(f"[{indicator}]")
        parts.append(message)
        super().__init__(" ".join(parts))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "kind": type(self).__name__,
            "code": self.code.value,
            "message": self.message,
            "indicator": self.indicator,
            "context": self.context,
        }

    def with_indicator(self, indicator: str) -> "IndicatorError":
        """Attach the indicator name if missing and return self for chaining."""
        if self.indicator is None:
            self.indicator = indicator
            self.args = (f"[{self.code.value}] [{indicator}] {self.message}",)
        return self


class InvalidParameter(IndicatorError, ValueError):
    """Raised at construction for out-of-range or inconsistent parameters."""

    default_code = ErrorCode.PARAM_PERIOD


class InsufficientData(IndicatorError):
    """Raised by ``calculate`` when the history is too short."""

    default_code = ErrorCode.DATA_INSUFFICIENT

    def __init__(self, required: int, received: int, indicator: str | None = None):
        self.required = required
        self.received = received
        super().__init__(
            f"Input data length must be at least {required}, got {received}",
            indicator=indicator,
            context={"required": required, "received": received},
        )


class CalculationError(IndicatorError, ArithmeticError):
    """Raised for degenerate arithmetic such as a zero-range candle."""

    default_code = ErrorCode.CALC_ZERO_RANGE
