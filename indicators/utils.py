"""Validation and scalar helpers shared by the indicators."""

import math
from collections.abc import Sequence, Sized

from indicators.errors import (
    CalculationError,
    ErrorCode,
    InsufficientData,
    InvalidParameter,
)


def validate_period(
    period: int,
    minimum: int = 1,
    name: str = "period",
    indicator: str | None = None,
) -> int:
    """Check that a period is an integer no smaller than ``minimum``.

    Args:
        period: Window length to check
        minimum: Smallest accepted value (default: 1)
        name: Parameter name used in the error message
        indicator: Indicator name used in the error message

    Returns:
        The period, unchanged

    Raises:
        InvalidParameter: If period is not an int or is below minimum

    Example:
        >>> validate_period(14)
        14
        >>> validate_period(0)
        Traceback (most recent call last):
        ...
        indicators.errors.InvalidParameter: [E101] period must be greater than or equal to 1, got 0
    """
    # bool is an int subclass but never a meaningful window length
    if isinstance(period, bool) or not isinstance(period, int):
        raise InvalidParameter(
            f"{name} must be an integer, got {type(period).__name__}",
            indicator=indicator,
            context={name: period},
        )
    if period < minimum:
        raise InvalidParameter(
            f"{name} must be greater than or equal to {minimum}, got {period}",
            indicator=indicator,
            context={name: period, "minimum": minimum},
        )
    return period


def validate_multiplier(
    value: float,
    name: str = "multiplier",
    indicator: str | None = None,
) -> float:
    """Check that a multiplier is a finite, strictly positive number.

    Raises:
        InvalidParameter: If value is not a number, not finite, or <= 0
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(
            f"{name} must be a number, got {type(value).__name__}",
            code=ErrorCode.PARAM_MULTIPLIER,
            indicator=indicator,
            context={name: value},
        )
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameter(
            f"{name} must be positive, got {value}",
            code=ErrorCode.PARAM_MULTIPLIER,
            indicator=indicator,
            context={name: value},
        )
    return float(value)


def validate_data_length(
    data: Sized,
    min_length: int,
    indicator: str | None = None,
) -> None:
    """Raise InsufficientData if ``data`` has fewer than ``min_length`` items."""
    if len(data) < min_length:
        raise InsufficientData(min_length, len(data), indicator=indicator)


def standard_deviation(values: Sequence[float], mean: float | None = None) -> float:
    """Calculate population standard deviation.

    Args:
        values: Non-empty list of values
        mean: Precomputed mean (computed from values if omitted)

    Returns:
        sqrt(sum((x - mean)^2) / n)

    Raises:
        InsufficientData: If values is empty

    Example:
        >>> round(standard_deviation([2, 4, 6]), 4)
        1.633
    """
    if not values:
        raise InsufficientData(1, 0)

    n = len(values)
    if mean is None:
        mean = sum(values) / n

    variance = sum((x - mean) ** 2 for x in values) / n
    return math.sqrt(variance)


def rate_of_change(values: Sequence[float], period: int = 1) -> list[float]:
    """Calculate percentage change over ``period`` steps.

    Args:
        values: List of values
        period: Lookback period (default: 1)

    Returns:
        List of len(values) - period percentage changes (0-100 scale)

    Raises:
        InvalidParameter: If period < 1
        InsufficientData: If fewer than period + 1 values
        CalculationError: If a reference value is zero

    Example:
        >>> rate_of_change([100, 110, 121], 1)
        [10.0, 10.0]
    """
    validate_period(period)
    validate_data_length(values, period + 1)

    result = []
    for i in range(period, len(values)):
        past = values[i - period]
        if past == 0:
            raise CalculationError(
                "Division by zero: reference value is zero",
                code=ErrorCode.CALC_ZERO_REFERENCE,
                context={"index": i - period},
            )
        result.append(100.0 * (values[i] - past) / past)

    return result
