"""On-Balance Volume (OBV) indicator."""

from typing import Any

from indicators.base import Indicator, PriceAccessor, Sample


class Obv(Indicator[Sample, float]):
    """On-Balance Volume.

    OBV is a cumulative indicator that adds volume on up bars
    and subtracts volume on down bars.

    Example:
        >>> from indicators.base import Candle
        >>> closes = [10, 11, 10, 12, 11]
        >>> volumes = [1000, 1500, 1200, 1800, 1000]
        >>> candles = [Candle(i, c, c, c, c, v) for i, (c, v) in enumerate(zip(closes, volumes))]
        >>> Obv().calculate(candles)
        [0.0, 1500.0, 300.0, 2100.0, 1100.0]

    Notes:
        - First value is always 0
        - If price unchanged, volume is not added or subtracted
        - Unbounded: the total is never windowed
    """

    name = "obv"

    def __init__(self):
        self._prev_close: float | None = None
        self._total = 0.0

    @property
    def min_data_length(self) -> int:
        return 1

    @property
    def parameters(self) -> dict[str, Any]:
        return {}

    def next(self, sample: Sample) -> float:
        close = PriceAccessor.close(sample)
        prev_close, self._prev_close = self._prev_close, close

        if prev_close is None:
            self._total = 0.0
        elif close > prev_close:
            self._total += PriceAccessor.volume(sample)
        elif close < prev_close:
            self._total -= PriceAccessor.volume(sample)

        return self._total

    def reset(self) -> None:
        self._prev_close = None
        self._total = 0.0
