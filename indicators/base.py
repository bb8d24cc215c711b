"""Base types and the shared indicator contract."""

import logging
import numbers
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from indicators.errors import CalculationError, ErrorCode, IndicatorError, InvalidParameter
from indicators.utils import validate_data_length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candle:
    """One OHLCV bar.

    No relationship between fields is enforced (high >= low is assumed).

    Attributes:
        timestamp: Bar time as an unsigned integer (epoch-based, unit is the caller's)
        open: Opening price
        high: High price
        low: Low price
        close: Closing price
        volume: Traded volume

    Example:
        >>> Candle(timestamp=0, open=10.0, high=12.0, low=9.0, close=11.0, volume=1000.0)
        Candle(timestamp=0, open=10.0, high=12.0, low=9.0, close=11.0, volume=1000.0)
    """
    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: float

    def __post_init__(self) -> None:
        if self.timestamp < 0:
            raise InvalidParameter(
                f"timestamp must be non-negative, got {self.timestamp}",
                context={"timestamp": self.timestamp},
            )

    @classmethod
    def from_price(cls, price: float, timestamp: int = 0) -> "Candle":
        """Degenerate candle for a bare price: all prices equal, zero volume."""
        price = float(price)
        return cls(timestamp, price, price, price, price, 0.0)


Sample = Union[float, Candle]

T = TypeVar("T")
O = TypeVar("O")


def _scalar(sample: Sample) -> float:
    """Price of a bare-number sample; anything else is a caller bug."""
    if isinstance(sample, bool) or not isinstance(sample, numbers.Real):
        raise TypeError(f"sample must be a number or Candle, got {type(sample).__name__}")
    return float(sample)


class PriceAccessor:
    """Reads price views off a sample.

    A bare number is treated as a candle whose open, high, low and close all
    equal the number and whose volume is zero. This lets every algorithm be
    written once against close/high/low/volume.
    """

    @staticmethod
    def close(sample: Sample) -> float:
        if isinstance(sample, Candle):
            return sample.close
        return _scalar(sample)

    @staticmethod
    def high(sample: Sample) -> float:
        if isinstance(sample, Candle):
            return sample.high
        return _scalar(sample)

    @staticmethod
    def low(sample: Sample) -> float:
        if isinstance(sample, Candle):
            return sample.low
        return _scalar(sample)

    @staticmethod
    def open(sample: Sample) -> float:
        if isinstance(sample, Candle):
            return sample.open
        return _scalar(sample)

    @staticmethod
    def volume(sample: Sample) -> float:
        if isinstance(sample, Candle):
            return sample.volume
        _scalar(sample)
        return 0.0


@dataclass(frozen=True)
class StochasticResult:
    """%K and %D for one time step."""
    k: float
    d: float


@dataclass(frozen=True)
class BandsResult:
    """Channel output shared by Bollinger Bands and Keltner Channels."""
    middle: float
    upper: float
    lower: float
    bandwidth: float


@dataclass(frozen=True)
class MacdResult:
    """MACD line, signal line and histogram for one time step."""
    macd: float
    signal: float
    histogram: float


def make_bands(middle: float, width: float, indicator: str) -> BandsResult:
    """Build a channel ``middle +/- width`` and its normalized bandwidth.

    Raises:
        CalculationError: If the middle line is zero (bandwidth undefined)
    """
    upper = middle + width
    lower = middle - width
    if middle == 0:
        raise CalculationError(
            "Division by zero: middle band is zero",
            code=ErrorCode.CALC_ZERO_MIDDLE,
            indicator=indicator,
        )
    return BandsResult(
        middle=middle,
        upper=upper,
        lower=lower,
        bandwidth=(upper - lower) / middle,
    )


class Indicator(ABC, Generic[T, O]):
    """Contract implemented by every indicator.

    Two consumption modes share one state machine:

    - ``calculate(data)`` treats ``data`` as the entire history. It resets
      first, then feeds every sample through ``next`` in order and returns
      the non-None outputs. Output therefore always matches streaming.
    - ``next(sample)`` consumes one sample and returns None during warm-up,
      then a value on every call.

    ``reset()`` restores the freshly constructed state; parameters never
    change after construction.

    Instances own their state exclusively. They are not thread-safe: use one
    instance per series or synchronize externally.
    """

    #: Short catalog name, also used in error messages.
    name: str = "indicator"

    @property
    @abstractmethod
    def min_data_length(self) -> int:
        """Minimum number of samples ``calculate`` accepts."""

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """Construction parameters, for display and logging."""

    @abstractmethod
    def next(self, sample: T) -> O | None:
        """Consume one sample and return the new value, or None while warming up."""

    @abstractmethod
    def reset(self) -> None:
        """Clear all state back to the newly constructed equivalent."""

    def calculate(self, data: Sequence[T]) -> list[O]:
        """Compute the full output series for a complete history.

        Args:
            data: Complete history, oldest first

        Returns:
            One output per time step from the first valid output onward

        Raises:
            InsufficientData: If ``data`` is shorter than ``min_data_length``
            CalculationError: If any sample is degenerate (no partial result)
        """
        self.reset()
        validate_data_length(data, self.min_data_length, indicator=self.name)
        logger.debug(f"Calculating {self!r} over {len(data)} samples")

        results: list[O] = []
        try:
            for sample in data:
                value = self.next(sample)
                if value is not None:
                    results.append(value)
        except IndicatorError as e:
            self.reset()
            e.with_indicator(self.name)
            if isinstance(e, CalculationError):
                logger.warning(f"Aborted {self!r}: {e.to_dict()}")
            raise

        return results

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.parameters.items())
        return f"{type(self).__name__}({params})"
