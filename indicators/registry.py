"""Indicator catalog and construction from configured defaults."""

import logging
from typing import Any

from config import StreamTAConfig, get_config
from indicators.atr import Atr
from indicators.base import Indicator
from indicators.bollinger import BollingerBands, StandardDeviation
from indicators.errors import ErrorCode, InvalidParameter
from indicators.keltner import KeltnerChannels
from indicators.macd import Macd
from indicators.momentum import Roc, WilliamsR
from indicators.moving_averages import Ema, Sma
from indicators.obv import Obv
from indicators.rsi import Rsi
from indicators.stochastic import StochasticOscillator
from indicators.volume import Adl, Cmf, Vroc

logger = logging.getLogger(__name__)

INDICATORS: dict[str, type[Indicator]] = {
    cls.name: cls
    for cls in (
        Sma,
        Ema,
        StandardDeviation,
        Rsi,
        StochasticOscillator,
        WilliamsR,
        Roc,
        Atr,
        BollingerBands,
        KeltnerChannels,
        Macd,
        Obv,
        Adl,
        Cmf,
        Vroc,
    )
}


def available_indicators() -> list[str]:
    """Sorted catalog names accepted by ``create_indicator``."""
    return sorted(INDICATORS)


def create_indicator(
    name: str,
    config: StreamTAConfig | None = None,
    **overrides: Any,
) -> Indicator:
    """Build a catalog indicator from configured defaults.

    Args:
        name: Catalog name, e.g. "rsi" or "macd" (case-insensitive)
        config: Configuration to read defaults from (default: get_config())
        **overrides: Constructor arguments that take precedence over config

    Returns:
        A freshly constructed indicator

    Raises:
        InvalidParameter: If the name is unknown or a parameter is invalid

    Example:
        >>> create_indicator("rsi", period=7)
        Rsi(period=7)
    """
    key = name.lower().strip()
    cls = INDICATORS.get(key)
    if cls is None:
        raise InvalidParameter(
            f"Unknown indicator: {name!r}. Available: {', '.join(available_indicators())}",
            code=ErrorCode.PARAM_UNKNOWN,
            context={"name": name},
        )

    if config is None:
        config = get_config()

    kwargs = {**config.defaults_for(key), **overrides}
    try:
        indicator = cls(**kwargs)
    except TypeError as e:
        raise InvalidParameter(
            f"Invalid arguments for {key}: {e}",
            code=ErrorCode.PARAM_UNKNOWN,
            indicator=key,
            context={"arguments": sorted(kwargs)},
        ) from e

    logger.debug(f"Created {indicator!r}")
    return indicator
