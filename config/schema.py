"""
Configuration schema with validation.

Holds default parameters for every indicator in the catalog. All
configuration is validated at load time using Pydantic.
"""

from pydantic import BaseModel, Field, field_validator


class PeriodConfig(BaseModel):
    """Single-period indicator defaults."""

    period: int = Field(default=20, ge=1, description="Window length")


class SmaConfig(PeriodConfig):
    """Simple Moving Average defaults."""


class EmaConfig(PeriodConfig):
    """Exponential Moving Average defaults."""


class StdConfig(PeriodConfig):
    """Rolling standard deviation defaults."""


class RsiConfig(PeriodConfig):
    """RSI defaults."""

    period: int = Field(default=14, ge=1)


class WilliamsRConfig(PeriodConfig):
    """Williams %R defaults."""

    period: int = Field(default=14, ge=1)


class RocConfig(PeriodConfig):
    """Price Rate of Change defaults."""

    period: int = Field(default=12, ge=1)


class AtrConfig(PeriodConfig):
    """ATR defaults."""

    period: int = Field(default=14, ge=1)


class CmfConfig(PeriodConfig):
    """Chaikin Money Flow defaults."""


class VrocConfig(PeriodConfig):
    """Volume Rate of Change defaults."""

    period: int = Field(default=14, ge=1)


class StochasticConfig(BaseModel):
    """Stochastic Oscillator defaults."""

    k_period: int = Field(default=14, ge=1, description="%K lookback")
    d_period: int = Field(default=3, ge=1, description="%D smoothing")


class BollingerConfig(BaseModel):
    """Bollinger Bands defaults."""

    period: int = Field(default=20, ge=1)
    k: float = Field(default=2.0, gt=0.0, description="Standard deviations for the bands")


class KeltnerConfig(BaseModel):
    """Keltner Channels defaults."""

    ema_period: int = Field(default=20, ge=1)
    atr_period: int = Field(default=10, ge=1)
    multiplier: float = Field(default=2.0, gt=0.0, description="ATR multiplier")


class MacdConfig(BaseModel):
    """MACD defaults."""

    fast_period: int = Field(default=12, ge=1)
    slow_period: int = Field(default=26, ge=2)
    signal_period: int = Field(default=9, ge=1)

    @field_validator("slow_period")
    @classmethod
    def slow_gt_fast(cls, v: int, info) -> int:
        # fast_period failed its own validation; that error is the one to report
        if "fast_period" not in info.data:
            return v
        if v <= info.data["fast_period"]:
            raise ValueError("slow_period must be greater than fast_period")
        return v


class StreamTAConfig(BaseModel):
    """
    Root configuration model.

    All settings are validated on load.
    """

    # Absolute tolerance for comparing batch and streaming output
    tolerance: float = Field(default=1e-9, gt=0.0, le=1e-3)

    # Per-indicator defaults
    sma: SmaConfig = Field(default_factory=SmaConfig)
    ema: EmaConfig = Field(default_factory=EmaConfig)
    std: StdConfig = Field(default_factory=StdConfig)
    rsi: RsiConfig = Field(default_factory=RsiConfig)
    stochastic: StochasticConfig = Field(default_factory=StochasticConfig)
    williams_r: WilliamsRConfig = Field(default_factory=WilliamsRConfig)
    roc: RocConfig = Field(default_factory=RocConfig)
    atr: AtrConfig = Field(default_factory=AtrConfig)
    bollinger: BollingerConfig = Field(default_factory=BollingerConfig)
    keltner: KeltnerConfig = Field(default_factory=KeltnerConfig)
    macd: MacdConfig = Field(default_factory=MacdConfig)
    cmf: CmfConfig = Field(default_factory=CmfConfig)
    vroc: VrocConfig = Field(default_factory=VrocConfig)

    def defaults_for(self, name: str) -> dict:
        """Get the default constructor arguments for a catalog name.

        Indicators without parameters (obv, adl) have no section and get {}.
        """
        section = getattr(self, name, None)
        if not isinstance(section, BaseModel):
            return {}
        return section.model_dump()
