"""Sliding-window aggregate engine.

A bounded FIFO of the last ``period`` values with a running sum, updated in
O(1) on every push/evict instead of rescanning the window. Variance and
extrema are recomputed over the window in O(period).
"""

import math
from collections import deque

from indicators.utils import validate_period


class SlidingWindow:
    """Fixed-capacity window with a running sum.

    Args:
        period: Window capacity

    Example:
        >>> w = SlidingWindow(3)
        >>> for v in [2, 4, 6, 8]:
        ...     _ = w.push(v)
        >>> w.mean
        6.0
    """

    __slots__ = ("period", "_values", "_sum")

    def __init__(self, period: int):
        self.period = validate_period(period)
        self._values: deque[float] = deque()
        self._sum = 0.0

    def push(self, value: float) -> float | None:
        """Append a value, evicting the oldest once full.

        Returns:
            The evicted value, or None if nothing was evicted
        """
        self._values.append(value)
        self._sum += value

        if len(self._values) <= self.period:
            return None

        evicted = self._values.popleft()
        self._sum -= evicted
        return evicted

    def clear(self) -> None:
        self._values.clear()
        self._sum = 0.0

    @property
    def is_full(self) -> bool:
        return len(self._values) == self.period

    @property
    def sum(self) -> float:
        return self._sum

    @property
    def mean(self) -> float:
        return self._sum / len(self._values)

    @property
    def variance(self) -> float:
        """Population variance (divides by the window length, not n - 1).

        Two-pass over the window: the mean is taken from the values
        themselves, then the squared deviations are summed. A window of
        identical values is exactly 0.0.
        """
        first = self._values[0]
        if all(v == first for v in self._values):
            return 0.0

        n = len(self._values)
        mean = math.fsum(self._values) / n
        return math.fsum((x - mean) ** 2 for x in self._values) / n

    @property
    def std(self) -> float:
        return math.sqrt(self.variance)

    @property
    def oldest(self) -> float:
        return self._values[0]

    @property
    def newest(self) -> float:
        return self._values[-1]

    def max(self) -> float:
        return max(self._values)

    def min(self) -> float:
        return min(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __repr__(self) -> str:
        return f"SlidingWindow(period={self.period}, size={len(self._values)})"
