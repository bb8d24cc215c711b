"""Shared test fixtures.

Provides deterministic price and candle series built from a seeded random
walk so expected relationships can be checked without external data.
"""

import random

import pytest

from indicators import Candle


def make_candles(n: int, seed: int = 42, start: float = 100.0) -> list[Candle]:
    """Random-walk OHLCV bars with a strictly positive intrabar range."""
    rng = random.Random(seed)
    candles = []
    close = start

    for i in range(n):
        open_ = close
        close = max(1.0, open_ * (1.0 + rng.gauss(0.0005, 0.015)))
        high = max(open_, close) * (1.0 + rng.uniform(0.001, 0.02))
        low = min(open_, close) * (1.0 - rng.uniform(0.001, 0.02))
        volume = float(rng.randint(500_000, 2_000_000))
        candles.append(Candle(1_700_000_000 + i * 86_400, open_, high, low, close, volume))

    return candles


def flat_candle(timestamp: int, price: float, volume: float = 1000.0) -> Candle:
    """Bar with high == low, the degenerate case for money-flow indicators."""
    return Candle(timestamp, price, price, price, price, volume)


@pytest.fixture()
def candles() -> list[Candle]:
    """A 120-bar random walk starting at $100."""
    return make_candles(120)


@pytest.fixture()
def prices(candles) -> list[float]:
    """Closing prices of the ``candles`` fixture."""
    return [c.close for c in candles]
