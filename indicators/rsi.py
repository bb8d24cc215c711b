"""Relative Strength Index (RSI) indicator."""

from typing import Any

from indicators.base import Indicator, PriceAccessor, Sample
from indicators.smoothing import WilderSmoother
from indicators.utils import validate_period


def rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    """Convert smoothed gain/loss averages into an RSI value.

    Edge cases:
        - No movement at all (both averages zero): 50.0, neutral
        - Gains but no losses: 100.0

    Example:
        >>> rsi_from_averages(2 / 3, 1 / 6)
        80.0
    """
    if avg_gain == 0 and avg_loss == 0:
        return 50.0
    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


class Rsi(Indicator[Sample, float]):
    """RSI using Wilder's smoothing method.

    Gains and losses come from consecutive close-to-close changes and are
    smoothed independently. The first average is the simple mean of the
    first ``period`` changes, so the first RSI appears at index ``period``
    and ``calculate`` needs ``period + 1`` samples.

    Example:
        >>> Rsi(3).calculate([10, 11, 10.5, 11.5])
        [80.0]

    Notes:
        - Wilder's smoothing: new avg = (prev_avg * (period-1) + current) / period
        - Values on 0-100 scale
    """

    name = "rsi"

    def __init__(self, period: int = 14):
        self.period = validate_period(period, indicator=self.name)
        self._prev_close: float | None = None
        self._gains = WilderSmoother(self.period)
        self._losses = WilderSmoother(self.period)

    @property
    def min_data_length(self) -> int:
        return self.period + 1

    @property
    def parameters(self) -> dict[str, Any]:
        return {"period": self.period}

    def next(self, sample: Sample) -> float | None:
        close = PriceAccessor.close(sample)
        prev_close, self._prev_close = self._prev_close, close
        if prev_close is None:
            return None

        change = close - prev_close
        avg_gain = self._gains.update(max(change, 0.0))
        avg_loss = self._losses.update(max(-change, 0.0))
        if avg_gain is None or avg_loss is None:
            return None

        return rsi_from_averages(avg_gain, avg_loss)

    def reset(self) -> None:
        self._prev_close = None
        self._gains.reset()
        self._losses.reset()
