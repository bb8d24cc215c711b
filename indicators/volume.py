"""Volume-based indicators built on money flow and windowed volume."""

from typing import Any

from indicators.base import Indicator, PriceAccessor, Sample
from indicators.errors import CalculationError, ErrorCode
from indicators.utils import validate_period
from indicators.windows import SlidingWindow


def money_flow_multiplier(high: float, low: float, close: float) -> float:
    """Intrabar position of the close, from -1 (at low) to +1 (at high).

    MFM = ((Close - Low) - (High - Close)) / (High - Low)
        = (2 * Close - High - Low) / (High - Low)

    Raises:
        CalculationError: If high == low
    """
    price_range = high - low
    if price_range == 0:
        raise CalculationError(
            "Division by zero: high and low prices are equal",
            code=ErrorCode.CALC_ZERO_RANGE,
            context={"high": high, "low": low},
        )
    return (2.0 * close - high - low) / price_range


def money_flow_volume(sample: Sample) -> float:
    """Money flow multiplier weighted by the bar's volume."""
    mfm = money_flow_multiplier(
        PriceAccessor.high(sample),
        PriceAccessor.low(sample),
        PriceAccessor.close(sample),
    )
    return mfm * PriceAccessor.volume(sample)


class Adl(Indicator[Sample, float]):
    """Accumulation/Distribution Line.

    Running total of money flow volume. Each bar contributes
    MFM * volume, so closes near the high accumulate and closes near the
    low distribute.

    Example:
        >>> from indicators.base import Candle
        >>> Adl().calculate([Candle(0, 10, 12, 8, 11, 100), Candle(1, 11, 12, 10, 10, 50)])
        [50.0, 0.0]

    Notes:
        - Any bar with high == low raises CalculationError, which aborts
          a whole ``calculate`` call
        - Scalar samples always have high == low, so they always fail
    """

    name = "adl"

    def __init__(self):
        self._total = 0.0

    @property
    def min_data_length(self) -> int:
        return 1

    @property
    def parameters(self) -> dict[str, Any]:
        return {}

    def next(self, sample: Sample) -> float:
        try:
            mfv = money_flow_volume(sample)
        except CalculationError as e:
            raise e.with_indicator(self.name)
        self._total += mfv
        return self._total

    def reset(self) -> None:
        self._total = 0.0


class Cmf(Indicator[Sample, float]):
    """Chaikin Money Flow.

    CMF = sum(money flow volume, period) / sum(volume, period)

    Example:
        >>> from indicators.base import Candle
        >>> candles = [Candle(0, 10, 12, 8, 11, 100), Candle(1, 11, 12, 10, 10, 50)]
        >>> Cmf(2).calculate(candles)
        [0.0]

    Notes:
        - Bounded to [-1, 1]
        - Raises CalculationError on a zero-range bar or a zero window volume
    """

    name = "cmf"

    def __init__(self, period: int = 20):
        self.period = validate_period(period, indicator=self.name)
        self._mfv = SlidingWindow(self.period)
        self._volume = SlidingWindow(self.period)

    @property
    def min_data_length(self) -> int:
        return self.period

    @property
    def parameters(self) -> dict[str, Any]:
        return {"period": self.period}

    def next(self, sample: Sample) -> float | None:
        # Checked before mutating so a degenerate bar leaves the window intact
        try:
            mfv = money_flow_volume(sample)
        except CalculationError as e:
            raise e.with_indicator(self.name)

        self._mfv.push(mfv)
        self._volume.push(PriceAccessor.volume(sample))
        if not self._mfv.is_full:
            return None

        volume_sum = self._volume.sum
        # The running sum can drift off exact zero once volume leaves the window
        if volume_sum == 0 or not any(self._volume):
            raise CalculationError(
                "Division by zero: sum of volumes is zero",
                code=ErrorCode.CALC_ZERO_VOLUME,
                indicator=self.name,
            )
        return self._mfv.sum / volume_sum

    def reset(self) -> None:
        self._mfv.clear()
        self._volume.clear()


class Vroc(Indicator[Sample, float]):
    """Volume Rate of Change.

    VROC = 100 * (Volume - Volume[period ago]) / Volume[period ago]

    Example:
        >>> from indicators.base import Candle
        >>> candles = [Candle(i, 10, 11, 9, 10, v) for i, v in enumerate([100, 150, 300])]
        >>> Vroc(1).calculate(candles)
        [50.0, 100.0]

    Notes:
        - First value appears at index ``period``
        - Raises CalculationError when the reference volume is zero
    """

    name = "vroc"

    def __init__(self, period: int = 14):
        self.period = validate_period(period, indicator=self.name)
        self._volumes = SlidingWindow(self.period + 1)

    @property
    def min_data_length(self) -> int:
        return self.period + 1

    @property
    def parameters(self) -> dict[str, Any]:
        return {"period": self.period}

    def next(self, sample: Sample) -> float | None:
        self._volumes.push(PriceAccessor.volume(sample))
        if not self._volumes.is_full:
            return None

        past = self._volumes.oldest
        if past == 0:
            raise CalculationError(
                "Division by zero: past volume is zero",
                code=ErrorCode.CALC_ZERO_REFERENCE,
                indicator=self.name,
            )
        return 100.0 * (self._volumes.newest - past) / past

    def reset(self) -> None:
        self._volumes.clear()
