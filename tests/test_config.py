"""Tests for configuration loading and the indicator catalog."""

import pytest
from pydantic import ValidationError

from config import ConfigError, StreamTAConfig, load_config, reload_config
from config.schema import BollingerConfig, MacdConfig
from indicators import (
    INDICATORS,
    ErrorCode,
    InvalidParameter,
    Macd,
    Obv,
    Rsi,
    available_indicators,
    create_indicator,
)


class TestSchema:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = StreamTAConfig()
        assert config.tolerance == 1e-9
        assert config.rsi.period == 14
        assert config.sma.period == 20
        assert config.stochastic.k_period == 14
        assert config.stochastic.d_period == 3
        assert config.bollinger.k == 2.0
        assert config.keltner.atr_period == 10
        assert (config.macd.fast_period, config.macd.slow_period, config.macd.signal_period) == (
            12,
            26,
            9,
        )
        assert config.roc.period == 12
        assert config.vroc.period == 14

    def test_macd_order(self):
        with pytest.raises(ValidationError):
            MacdConfig(fast_period=26, slow_period=12)

    def test_macd_invalid_fast_reports_one_error(self):
        with pytest.raises(ValidationError) as exc_info:
            MacdConfig(fast_period=0, slow_period=26)

        errors = exc_info.value.errors()
        assert [e["loc"] for e in errors] == [("fast_period",)]

    def test_bollinger_k_positive(self):
        with pytest.raises(ValidationError):
            BollingerConfig(k=0)

    def test_period_positive(self):
        with pytest.raises(ValidationError):
            StreamTAConfig(rsi={"period": 0})

    def test_defaults_for(self):
        config = StreamTAConfig()
        assert config.defaults_for("rsi") == {"period": 14}
        assert config.defaults_for("keltner") == {
            "ema_period": 20,
            "atr_period": 10,
            "multiplier": 2.0,
        }

    def test_defaults_for_parameterless(self):
        config = StreamTAConfig()
        assert config.defaults_for("obv") == {}
        assert config.defaults_for("adl") == {}

    def test_every_section_builds_its_indicator(self):
        config = StreamTAConfig()
        for name, cls in INDICATORS.items():
            indicator = cls(**config.defaults_for(name))
            assert indicator.name == name


class TestLoader:
    """Test file and environment loading."""

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "streamta.toml"
        path.write_text('tolerance = 1e-6\n\n[rsi]\nperiod = 21\n\n[macd]\nfast_period = 5\n')

        config = load_config(path, environ={})

        assert config.tolerance == 1e-6
        assert config.rsi.period == 21
        assert config.macd.fast_period == 5
        assert config.macd.slow_period == 26
        assert config.sma.period == 20

    def test_env_overrides_file(self, tmp_path):
        path = tmp_path / "streamta.toml"
        path.write_text("[rsi]\nperiod = 21\n\n[bollinger]\nperiod = 10\n")

        config = load_config(
            path,
            environ={
                "STREAMTA_RSI__PERIOD": "7",
                "STREAMTA_BOLLINGER__K": "2.5",
                "STREAMTA_WILLIAMS_R__PERIOD": "9",
                "UNRELATED": "1",
            },
        )

        assert config.rsi.period == 7
        assert config.bollinger.period == 10
        assert config.bollinger.k == 2.5
        assert config.williams_r.period == 9

    def test_env_top_level(self):
        config = load_config(environ={"STREAMTA_TOLERANCE": "1e-7"})
        assert config.tolerance == 1e-7

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "nope.toml", environ={})
        assert "not found" in str(exc_info.value)

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[rsi\nperiod = ")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path, environ={})
        assert exc_info.value.source == str(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "streamta.toml"
        path.write_text("[macd]\nfast_period = 30\nslow_period = 26\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path, environ={})
        assert exc_info.value.field == "macd.slow_period"

    def test_invalid_env_value(self):
        with pytest.raises(ConfigError) as exc_info:
            load_config(environ={"STREAMTA_RSI__PERIOD": "fourteen"})
        assert exc_info.value.field == "rsi.period"

    def test_reload_with_explicit_path(self, tmp_path):
        path = tmp_path / "streamta.toml"
        path.write_text("[sma]\nperiod = 50\n")
        assert reload_config(path).sma.period == 50


class TestRegistry:
    """Test building indicators by name."""

    def test_available_indicators(self):
        names = available_indicators()
        assert names == sorted(names)
        assert len(names) == 15
        assert {"sma", "ema", "rsi", "macd", "keltner", "obv", "vroc"} <= set(names)

    def test_create_with_defaults(self):
        rsi = create_indicator("rsi", config=StreamTAConfig())
        assert isinstance(rsi, Rsi)
        assert rsi.period == 14

    def test_create_from_config(self):
        config = StreamTAConfig(macd={"fast_period": 5, "slow_period": 35, "signal_period": 5})
        macd = create_indicator("MACD", config=config)
        assert isinstance(macd, Macd)
        assert macd.parameters == {"fast_period": 5, "slow_period": 35, "signal_period": 5}

    def test_overrides_win(self):
        rsi = create_indicator("rsi", config=StreamTAConfig(), period=7)
        assert repr(rsi) == "Rsi(period=7)"

    def test_parameterless(self):
        assert isinstance(create_indicator(" obv ", config=StreamTAConfig()), Obv)

    def test_unknown_name(self):
        with pytest.raises(InvalidParameter) as exc_info:
            create_indicator("ichimoku", config=StreamTAConfig())
        assert exc_info.value.code == ErrorCode.PARAM_UNKNOWN
        assert "Available:" in str(exc_info.value)

    def test_unexpected_argument(self):
        with pytest.raises(InvalidParameter) as exc_info:
            create_indicator("obv", config=StreamTAConfig(), period=3)
        assert exc_info.value.indicator == "obv"

    def test_invalid_override(self):
        with pytest.raises(InvalidParameter):
            create_indicator("macd", config=StreamTAConfig(), fast_period=40)
