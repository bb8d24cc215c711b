"""Exponential and Wilder recurrence engine.

Both recurrences keep O(1) state. Until ``period`` values have been seen they
accumulate a plain sum; the first output is the simple average of those
values, and every later output applies the recurrence to the previous one.

- EMA:    new = (value - prev) * alpha + prev,  alpha = 2 / (period + 1)
- Wilder: new = (prev * (period - 1) + value) / period
"""

from abc import ABC, abstractmethod

from indicators.utils import validate_period


class SeededSmoother(ABC):
    """Recurrence seeded with the average of its first ``period`` inputs."""

    __slots__ = ("period", "_initial", "_seed_sum", "_seed_count", "_value")

    def __init__(self, period: int, initial_value: float | None = None):
        self.period = validate_period(period)
        self._initial = None if initial_value is None else float(initial_value)
        self._seed_sum = 0.0
        self._seed_count = 0
        self._value = self._initial

    @abstractmethod
    def smooth(self, previous: float, value: float) -> float:
        """Apply one step of the recurrence."""

    def update(self, value: float) -> float | None:
        """Feed one input and return the smoothed value, or None while seeding."""
        if self._value is not None:
            self._value = self.smooth(self._value, value)
            return self._value

        self._seed_sum += value
        self._seed_count += 1
        if self._seed_count < self.period:
            return None

        self._value = self._seed_sum / self.period
        return self._value

    def reset(self) -> None:
        self._seed_sum = 0.0
        self._seed_count = 0
        self._value = self._initial

    @property
    def value(self) -> float | None:
        """Current smoothed value, or None before the seed is complete."""
        return self._value

    @property
    def is_ready(self) -> bool:
        return self._value is not None


class ExponentialSmoother(SeededSmoother):
    """Standard EMA recurrence with ``alpha = 2 / (period + 1)``.

    An explicit ``initial_value`` replaces the period-average seed: it is
    treated as the previous EMA, so the first input already yields output.

    Example:
        >>> ema = ExponentialSmoother(3)
        >>> [ema.update(v) for v in [2, 4, 6, 8]]
        [None, None, 4.0, 6.0]
    """

    __slots__ = ("alpha",)

    def __init__(self, period: int, initial_value: float | None = None):
        super().__init__(period, initial_value)
        self.alpha = 2.0 / (period + 1)

    def smooth(self, previous: float, value: float) -> float:
        return (value - previous) * self.alpha + previous


class WilderSmoother(SeededSmoother):
    """Wilder's smoothing (RMA), used for RSI averages and ATR.

    Example:
        >>> rma = WilderSmoother(2)
        >>> [rma.update(v) for v in [1, 3, 5]]
        [None, 2.0, 3.5]
    """

    __slots__ = ()

    def smooth(self, previous: float, value: float) -> float:
        return (previous * (self.period - 1) + value) / self.period
