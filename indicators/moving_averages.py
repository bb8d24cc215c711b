"""Moving average indicators."""

from typing import Any

from indicators.base import Indicator, PriceAccessor, Sample
from indicators.smoothing import ExponentialSmoother
from indicators.utils import validate_period
from indicators.windows import SlidingWindow


class Sma(Indicator[Sample, float]):
    """Simple Moving Average of closing prices.

    Example:
        >>> Sma(3).calculate([2, 4, 6, 8, 10])
        [4.0, 6.0, 8.0]
    """

    name = "sma"

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
        return self._window.mean

    def reset(self) -> None:
        self._window.clear()


class Ema(Indicator[Sample, float]):
    """Exponential Moving Average of closing prices.

    Uses alpha = 2/(period+1). The first value is the simple average of the
    first ``period`` closes, so output starts at index ``period - 1``.

    Args:
        period: Number of periods for the moving average
        initial_value: Optional explicit seed, treated as the EMA before the
            first sample. With a seed, output starts at the first sample.

    Example:
        >>> Ema(3).calculate([2, 4, 6, 8])
        [4.0, 6.0]
        >>> Ema(3, initial_value=2.0).calculate([4, 6])
        [3.0, 4.5]
    """

    name = "ema"

    def __init__(self, period: int = 20, initial_value: float | None = None):
        self.period = validate_period(period, indicator=self.name)
        self.initial_value = initial_value
        self._smoother = ExponentialSmoother(self.period, initial_value)

    @property
    def min_data_length(self) -> int:
        return 1 if self.initial_value is not None else self.period

    @property
    def parameters(self) -> dict[str, Any]:
        params: dict[str, Any] = {"period": self.period}
        if self.initial_value is not None:
            params["initial_value"] = self.initial_value
        return params

    @property
    def alpha(self) -> float:
        return self._smoother.alpha

    def next(self, sample: Sample) -> float | None:
        return self._smoother.update(PriceAccessor.close(sample))

    def reset(self) -> None:
        self._smoother.reset()
