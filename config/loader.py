"""
Indicator defaults from TOML and the environment.

Sources, lowest precedence first:
1. Schema defaults
2. The first TOML file found in CONFIG_PATHS (or an explicit path)
3. STREAMTA_<SECTION>__<FIELD> environment variables
"""

import logging
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .schema import StreamTAConfig

logger = logging.getLogger(__name__)

# Searched in order; the first existing file wins
CONFIG_PATHS = [
    Path("streamta.toml"),                             # Current directory
    Path(".streamta.toml"),                            # Hidden in current directory
    Path.home() / ".config" / "streamta" / "config.toml",  # User config
]

ENV_PREFIX = "STREAMTA_"

# Separates section from field: STREAMTA_MACD__FAST_PERIOD
ENV_NESTING = "__"


class ConfigError(Exception):
    """Invalid or unreadable configuration, with where it came from."""

    def __init__(self, message: str, source: str | None = None, field: str | None = None):
        self.source = source
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.source:
            parts.append(f"Source: {self.source}")
        if self.field:
            parts.append(f"Field: {self.field}")
        return " | ".join(parts)


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Parse a TOML file, or return {} if there is none."""
    if not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError(f"Failed to parse TOML: {e}", source=str(path)) from e

    logger.info(f"Loaded config from: {path}")
    return data


def _find_config_file() -> Path | None:
    """First path in CONFIG_PATHS that exists, if any."""
    for path in CONFIG_PATHS:
        if path.exists():
            return path
    return None


def _load_env_overrides(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Collect STREAMTA_* overrides into a nested dict.

    ``STREAMTA_TOLERANCE=1e-6`` sets a top-level key and
    ``STREAMTA_RSI__PERIOD=21`` sets a key inside a section. Values stay
    strings; pydantic coerces them during validation.
    """
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}

    for key, value in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        path = key[len(ENV_PREFIX):].lower()
        if not path:
            continue

        section, _, field = path.partition(ENV_NESTING)
        if field:
            overrides.setdefault(section, {})[field] = value
        else:
            overrides[section] = value

    if overrides:
        logger.debug(f"Loaded {len(overrides)} override(s) from environment")
    return overrides


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge ``override`` into ``base`` recursively without mutating either."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    config_path: Path | str | None = None,
    environ: dict[str, str] | None = None,
) -> StreamTAConfig:
    """
    Build a validated configuration from file and environment.

    Args:
        config_path: Explicit path to config file (optional)
        environ: Environment mapping to read overrides from (default: os.environ)

    Returns:
        Validated StreamTAConfig

    Raises:
        ConfigError: If configuration is invalid
    """
    if config_path:
        path: Path | None = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", source=str(path))
    else:
        path = _find_config_file()

    config_data = _load_toml_file(path) if path else {}

    # Environment wins over the file
    config_data = _deep_merge(config_data, _load_env_overrides(environ))

    try:
        config = StreamTAConfig(**config_data)
    except ValidationError as e:
        # Report the first problem only; pydantic lists every failing field
        first = e.errors()[0]
        raise ConfigError(
            f"Invalid configuration: {first['msg']}",
            source=str(path) if path else "environment",
            field=".".join(str(loc) for loc in first["loc"]),
        ) from e

    return config


@lru_cache
def get_config() -> StreamTAConfig:
    """Process-wide configuration, loaded on first use."""
    return load_config()


def reload_config(config_path: Path | str | None = None) -> StreamTAConfig:
    """
    Drop the cached configuration and load it again.

    Clears the cache and reloads from file/environment. An explicit path
    is loaded directly and not cached.
    """
    get_config.cache_clear()
    if config_path:
        return load_config(config_path)
    return get_config()
