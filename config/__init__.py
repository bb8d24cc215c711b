from .loader import ConfigError, get_config, load_config, reload_config
from .schema import StreamTAConfig

__all__ = [
    "ConfigError",
    "load_config",
    "get_config",
    "reload_config",
    "StreamTAConfig",
]
