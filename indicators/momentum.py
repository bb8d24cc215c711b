"""Momentum indicators."""

from typing import Any

from indicators.base import Indicator, PriceAccessor, Sample
from indicators.errors import CalculationError, ErrorCode
from indicators.utils import validate_period
from indicators.windows import SlidingWindow


class WilliamsR(Indicator[Sample, float]):
    """Williams %R.

    Williams %R = -100 * (Highest High - Close) / (Highest High - Lowest Low)

    Example:
        >>> from indicators.base import Candle
        >>> candles = [
        ...     Candle(0, 8, 10, 5, 9, 100),
        ...     Candle(1, 9, 15, 7, 12, 100),
        ...     Candle(2, 12, 10, 6, 7, 100),
        ... ]
        >>> WilliamsR(3).calculate(candles)
        [-80.0]

    Notes:
        - Values range from -100 (oversold) to 0 (overbought)
        - Returns -50.0 when the window range is zero
        - Mirror of Stochastic %K on a -100..0 scale
    """

    name = "williams_r"

    def __init__(self, period: int = 14):
        self.period = validate_period(period, indicator=self.name)
        self._highs = SlidingWindow(self.period)
        self._lows = SlidingWindow(self.period)

    @property
    def min_data_length(self) -> int:
        return self.period

    @property
    def parameters(self) -> dict[str, Any]:
        return {"period": self.period}

    def next(self, sample: Sample) -> float | None:
        self._highs.push(PriceAccessor.high(sample))
        self._lows.push(PriceAccessor.low(sample))
        if not self._highs.is_full:
            return None

        highest_high = self._highs.max()
        lowest_low = self._lows.min()
        if highest_high == lowest_low:
            return -50.0

        close = PriceAccessor.close(sample)
        return (highest_high - close) / (highest_high - lowest_low) * -100.0

    def reset(self) -> None:
        self._highs.clear()
        self._lows.clear()


class Roc(Indicator[Sample, float]):
    """Price Rate of Change.

    ROC = 100 * (Close - Close[period ago]) / Close[period ago]

    Example:
        >>> Roc(2).calculate([100, 105, 110, 99])
        [10.0, -5.714285714285714]

    Notes:
        - First value appears at index ``period``
        - Values are percentages (not decimals)
    """

    name = "roc"

    def __init__(self, period: int = 12):
        self.period = validate_period(period, indicator=self.name)
        self._closes = SlidingWindow(self.period + 1)

    @property
    def min_data_length(self) -> int:
        return self.period + 1

    @property
    def parameters(self) -> dict[str, Any]:
        return {"period": self.period}

    def next(self, sample: Sample) -> float | None:
        self._closes.push(PriceAccessor.close(sample))
        if not self._closes.is_full:
            return None

        past = self._closes.oldest
        if past == 0:
            raise CalculationError(
                "Division by zero: reference price is zero",
                code=ErrorCode.CALC_ZERO_REFERENCE,
                indicator=self.name,
            )
        return 100.0 * (self._closes.newest - past) / past

    def reset(self) -> None:
        self._closes.clear()
