"""Stochastic Oscillator indicator."""

from typing import Any

from indicators.base import Indicator, PriceAccessor, Sample, StochasticResult
from indicators.utils import validate_period
from indicators.windows import SlidingWindow


def percent_k(close: float, highest_high: float, lowest_low: float) -> float:
    """Position of close within the high/low range on a 0-100 scale.

    Returns 50.0 when the range is zero.
    """
    # WHY: Prevent division by zero in flat markets
    if highest_high == lowest_low:
        return 50.0
    return (close - lowest_low) / (highest_high - lowest_low) * 100.0


class StochasticOscillator(Indicator[Sample, StochasticResult]):
    """Stochastic Oscillator (%K and %D).

    %K = 100 * (Close - Lowest Low) / (Highest High - Lowest Low)
    %D = SMA of %K over ``d_period``

    %K needs ``k_period`` samples; %D chains a second window of ``d_period``
    %K values after it, so the first result appears at index
    ``k_period + d_period - 2``.

    Args:
        k_period: Lookback period for %K (default: 14)
        d_period: SMA period for %D (default: 3)
    """

    name = "stochastic"

    def __init__(self, k_period: int = 14, d_period: int = 3):
        self.k_period = validate_period(k_period, name="k_period", indicator=self.name)
        self.d_period = validate_period(d_period, name="d_period", indicator=self.name)
        self._highs = SlidingWindow(self.k_period)
        self._lows = SlidingWindow(self.k_period)
        self._k_values = SlidingWindow(self.d_period)

    @property
    def min_data_length(self) -> int:
        return self.k_period + self.d_period - 1

    @property
    def parameters(self) -> dict[str, Any]:
        return {"k_period": self.k_period, "d_period": self.d_period}

    def next(self, sample: Sample) -> StochasticResult | None:
        self._highs.push(PriceAccessor.high(sample))
        self._lows.push(PriceAccessor.low(sample))
        if not self._highs.is_full:
            return None

        k = percent_k(PriceAccessor.close(sample), self._highs.max(), self._lows.min())
        self._k_values.push(k)
        if not self._k_values.is_full:
            return None

        return StochasticResult(k=k, d=self._k_values.mean)

    def reset(self) -> None:
        self._highs.clear()
        self._lows.clear()
        self._k_values.clear()
