"""Keltner Channels indicator."""

from typing import Any

from indicators.atr import Atr
from indicators.base import BandsResult, Indicator, PriceAccessor, Sample, make_bands
from indicators.smoothing import ExponentialSmoother
from indicators.utils import validate_multiplier, validate_period


class KeltnerChannels(Indicator[Sample, BandsResult]):
    """Keltner Channels.

    Middle = EMA(close, ema_period)
    Upper/Lower = Middle +/- multiplier * ATR(atr_period)
    Bandwidth = (Upper - Lower) / Middle

    EMA starts at index ``ema_period - 1`` and ATR at ``atr_period - 1``.
    Both sub-indicators see every sample, so the channel starts once the
    slower one is ready; the faster series is effectively shifted by
    ``abs(ema_period - atr_period)``.

    Args:
        ema_period: Period of the middle EMA (default: 20)
        atr_period: Period of the ATR (default: 10)
        multiplier: ATR multiplier for the channel width (default: 2.0)
    """

    name = "keltner"

    def __init__(self, ema_period: int = 20, atr_period: int = 10, multiplier: float = 2.0):
        self.ema_period = validate_period(ema_period, name="ema_period", indicator=self.name)
        self.atr_period = validate_period(atr_period, name="atr_period", indicator=self.name)
        self.multiplier = validate_multiplier(multiplier, indicator=self.name)
        self._ema = ExponentialSmoother(self.ema_period)
        self._atr = Atr(self.atr_period)

    @property
    def min_data_length(self) -> int:
        return max(self.ema_period, self.atr_period)

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "ema_period": self.ema_period,
            "atr_period": self.atr_period,
            "multiplier": self.multiplier,
        }

    def next(self, sample: Sample) -> BandsResult | None:
        middle = self._ema.update(PriceAccessor.close(sample))
        atr = self._atr.next(sample)
        if middle is None or atr is None:
            return None
        return make_bands(middle, self.multiplier * atr, self.name)

    def reset(self) -> None:
        self._ema.reset()
        self._atr.reset()
