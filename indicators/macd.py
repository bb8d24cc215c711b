"""MACD (Moving Average Convergence Divergence) indicator."""

from typing import Any

from indicators.base import Indicator, MacdResult, PriceAccessor, Sample
from indicators.errors import ErrorCode, InvalidParameter
from indicators.smoothing import ExponentialSmoother
from indicators.utils import validate_period


class Macd(Indicator[Sample, MacdResult]):
    """MACD indicator.

    MACD Line = EMA(fast) - EMA(slow)
    Signal Line = EMA(MACD Line, signal periods)
    Histogram = MACD Line - Signal Line

    Args:
        fast_period: Fast EMA period (default: 12)
        slow_period: Slow EMA period, must exceed fast_period (default: 26)
        signal_period: Signal line EMA period (default: 9)

    Example:
        >>> macd = Macd(3, 5, 2)
        >>> len(macd.calculate(list(range(10, 20))))
        5

    Notes:
        - The fast EMA is ready ``slow - fast`` samples before the slow one;
          the MACD line starts when the slow EMA does (index ``slow - 1``)
        - Signal line needs ``signal_period`` MACD values on top of that,
          so the first result is at index ``slow + signal - 2``
    """

    name = "macd"

    def __init__(self, fast_period: int = 12, slow_period: int = 26, signal_period: int = 9):
        self.fast_period = validate_period(fast_period, name="fast_period", indicator=self.name)
        self.slow_period = validate_period(slow_period, name="slow_period", indicator=self.name)
        self.signal_period = validate_period(
            signal_period, name="signal_period", indicator=self.name
        )

        if self.fast_period >= self.slow_period:
            raise InvalidParameter(
                "slow_period must be greater than fast_period, "
                f"got fast={self.fast_period}, slow={self.slow_period}",
                code=ErrorCode.PARAM_ORDER,
                indicator=self.name,
                context={"fast_period": self.fast_period, "slow_period": self.slow_period},
            )

        self._fast = ExponentialSmoother(self.fast_period)
        self._slow = ExponentialSmoother(self.slow_period)
        self._signal = ExponentialSmoother(self.signal_period)

    @property
    def min_data_length(self) -> int:
        return self.slow_period + self.signal_period - 1

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "fast_period": self.fast_period,
            "slow_period": self.slow_period,
            "signal_period": self.signal_period,
        }

    def next(self, sample: Sample) -> MacdResult | None:
        close = PriceAccessor.close(sample)
        fast = self._fast.update(close)
        slow = self._slow.update(close)
        # fast < slow, so the fast EMA is always ready once the slow one is
        if slow is None:
            return None

        macd_line = fast - slow
        signal = self._signal.update(macd_line)
        if signal is None:
            return None

        return MacdResult(macd=macd_line, signal=signal, histogram=macd_line - signal)

    def reset(self) -> None:
        self._fast.reset()
        self._slow.reset()
        self._signal.reset()
