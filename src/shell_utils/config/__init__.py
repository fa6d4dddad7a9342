"""shell-utils settings: typed models and the layers they are loaded from."""

from ._models import (
    CleanPathConfig,
    Config,
    LogFormat,
    LoggingConfig,
    LogLevel,
    WatchConfig,
)
from ._sources import (
    ENV_PREFIX,
    env_overrides,
    load_config,
    merge_layers,
    read_config_file,
    user_config_path,
)

__all__ = [
    "ENV_PREFIX",
    "CleanPathConfig",
    "Config",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "WatchConfig",
    "env_overrides",
    "load_config",
    "merge_layers",
    "read_config_file",
    "user_config_path",
]
