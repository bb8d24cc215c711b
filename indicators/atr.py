"""Average True Range (ATR) indicator."""

from typing import Any

from indicators.base import Indicator, PriceAccessor, Sample
from indicators.smoothing import WilderSmoother
from indicators.utils import validate_period


def true_range(high: float, low: float, prev_close: float | None) -> float:
    """True Range of one bar.

    TR = max(high - low, abs(high - prev_close), abs(low - prev_close)),
    or just high - low when there is no previous close.
    """
    high_low = high - low
    if prev_close is None:
        return high_low
    return max(high_low, abs(high - prev_close), abs(low - prev_close))


class Atr(Indicator[Sample, float]):
    """Average True Range using Wilder's smoothing.

    The first bar's true range is its high - low. The first ATR is the
    simple average of the first ``period`` true ranges (index
    ``period - 1``); later values use Wilder's smoothing.

    Example:
        >>> from indicators.base import Candle
        >>> candles = [Candle(i, 10, 12, 9, 11, 1000) for i in range(3)]
        >>> Atr(2).calculate(candles)
        [3.0, 3.0]

    Notes:
        - Scalar samples have zero intrabar range, so TR reduces to the
          absolute close-to-close change
    """

    name = "atr"

    def __init__(self, period: int = 14):
        self.period = validate_period(period, indicator=self.name)
        self._prev_close: float | None = None
        self._smoother = WilderSmoother(self.period)

    @property
    def min_data_length(self) -> int:
        return self.period

    @property
    def parameters(self) -> dict[str, Any]:
        return {"period": self.period}

    @property
    def value(self) -> float | None:
        """Latest ATR, or None during warm-up."""
        return self._smoother.value

    def next(self, sample: Sample) -> float | None:
        tr = true_range(
            PriceAccessor.high(sample),
            PriceAccessor.low(sample),
            self._prev_close,
        )
        self._prev_close = PriceAccessor.close(sample)
        return self._smoother.update(tr)

    def reset(self) -> None:
        self._prev_close = None
        self._smoother.reset()
