"""Rolling standard deviation and Bollinger Bands."""

from typing import Any

from indicators.base import BandsResult, Indicator, PriceAccessor, Sample, make_bands
from indicators.utils import validate_multiplier, validate_period
from indicators.windows import SlidingWindow


class StandardDeviation(Indicator[Sample, float]):
    """Rolling population standard deviation of closing prices.

    Divides by ``period``, not ``period - 1``. A period of 1 always yields 0.0.

    Example:
        >>> round(StandardDeviation(3).calculate([2, 4, 6])[0], 4)
        1.633
    """

    name = "std"

    def __init__(self, period: int = 20):
        self.period = validate_period(period, indicator=self.name)
        self._window = SlidingWindow(self.period)

    @property
    def min_data_length(self) -> int:
        return self.period

    @property
    def parameters(self) -> dict[str, Any]:
        return {"period": self.period}

    def next(self, sample: Sample) -> float | None:
        self._window.push(PriceAccessor.close(sample))
        if not self._window.is_full:
            return None
        return self._window.std

    def reset(self) -> None:
        self._window.clear()


class BollingerBands(Indicator[Sample, BandsResult]):
    """Bollinger Bands.

    Upper Band = SMA + (k * standard_deviation)
    Middle Band = SMA
    Lower Band = SMA - (k * standard_deviation)
    Bandwidth = (Upper - Lower) / Middle

    Args:
        period: Period for SMA and standard deviation (default: 20)
        k: Number of standard deviations for bands (default: 2.0)

    Example:
        >>> bands = BollingerBands(3, 2.0).calculate([2, 4, 6])
        >>> bands[0].middle
        4.0

    Notes:
        - Uses population standard deviation over the same window as the SMA
        - A zero middle band raises CalculationError (bandwidth undefined)
    """

    name = "bollinger"

    def __init__(self, period: int = 20, k: float = 2.0):
        self.period = validate_period(period, indicator=self.name)
        self.k = validate_multiplier(k, name="k", indicator=self.name)
        self._window = SlidingWindow(self.period)

    @property
    def min_data_length(self) -> int:
        return self.period

    @property
    def parameters(self) -> dict[str, Any]:
        return {"period": self.period, "k": self.k}

    def next(self, sample: Sample) -> BandsResult | None:
        self._window.push(PriceAccessor.close(sample))
        if not self._window.is_full:
            return None
        return make_bands(self._window.mean, self.k * self._window.std, self.name)

    def reset(self) -> None:
        self._window.clear()
