"""Technical indicators with matching batch and streaming computation.

Every indicator implements one contract (see ``indicators.base.Indicator``):

    calculate(data)  -> full output series for a complete history
    next(sample)     -> None during warm-up, then one value per sample
    reset()          -> back to the freshly constructed state

Feeding a history through ``next`` one sample at a time yields exactly the
values ``calculate`` returns for the same history.

Samples are bare prices (floats) or ``Candle`` OHLCV bars. A bare price acts
as a candle with open = high = low = close and zero volume.

Indicators:
    - Trend: Sma, Ema, Macd
    - Momentum: Rsi, StochasticOscillator, WilliamsR, Roc
    - Volatility: StandardDeviation, Atr, BollingerBands, KeltnerChannels
    - Volume: Obv, Adl, Cmf, Vroc

Example:
    >>> from indicators import Rsi
    >>>
    >>> closes = [44, 44.34, 44.09, 43.61, 44.33, 44.83, 45.10, 45.42,
    ...           45.84, 46.08, 45.89, 46.03, 45.61, 46.28, 46.28, 46.00]
    >>>
    >>> rsi = Rsi(period=14)
    >>> batch = rsi.calculate(closes)
    >>> rsi.reset()
    >>> streamed = [v for v in map(rsi.next, closes) if v is not None]
    >>> len(batch) == len(streamed) == 2
    True
"""

from indicators.atr import Atr
from indicators.base import (
    BandsResult,
    Candle,
    Indicator,
    MacdResult,
    PriceAccessor,
    Sample,
    StochasticResult,
)
from indicators.bollinger import BollingerBands, StandardDeviation
from indicators.errors import (
    CalculationError,
    ErrorCode,
    IndicatorError,
    InsufficientData,
    InvalidParameter,
)
from indicators.keltner import KeltnerChannels
from indicators.macd import Macd
from indicators.momentum import Roc, WilliamsR
from indicators.moving_averages import Ema, Sma
from indicators.obv import Obv
from indicators.registry import INDICATORS, available_indicators, create_indicator
from indicators.rsi import Rsi
from indicators.smoothing import ExponentialSmoother, WilderSmoother
from indicators.stochastic import StochasticOscillator
from indicators.utils import rate_of_change, standard_deviation
from indicators.volume import Adl, Cmf, Vroc
from indicators.windows import SlidingWindow

__all__ = [
    # Base types
    "Indicator",
    "Candle",
    "Sample",
    "PriceAccessor",
    "StochasticResult",
    "BandsResult",
    "MacdResult",
    # Errors
    "IndicatorError",
    "InvalidParameter",
    "InsufficientData",
    "CalculationError",
    "ErrorCode",
    # Engines
    "SlidingWindow",
    "ExponentialSmoother",
    "WilderSmoother",
    # Trend
    "Sma",
    "Ema",
    "Macd",
    # Momentum
    "Rsi",
    "StochasticOscillator",
    "WilliamsR",
    "Roc",
    # Volatility
    "StandardDeviation",
    "Atr",
    "BollingerBands",
    "KeltnerChannels",
    # Volume
    "Obv",
    "Adl",
    "Cmf",
    "Vroc",
    # Catalog
    "INDICATORS",
    "available_indicators",
    "create_indicator",
    # Utilities
    "standard_deviation",
    "rate_of_change",
]
