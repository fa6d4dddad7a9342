"""Where settings come from and how they are combined.

Layers, lowest precedence first:

1. Built-in defaults (the model defaults).
2. A TOML config file: ``--config`` when given, else the user config file
   when it exists.
3. ``SHELL_UTILS_<SECTION>__<KEY>`` environment variables.
4. Overrides from command-line flags.
"""

import os
import tomllib
from typing import TYPE_CHECKING, Any

import platformdirs
from pydantic import ValidationError

from shell_utils.exceptions import ConfigFileError, ConfigValueError

from ._models import Config

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

APP_NAME = "shell-utils"
ENV_PREFIX = "SHELL_UTILS_"

Layer = dict[str, Any]


def user_config_path() -> "Path":
    """Return ``<user config dir>/shell-utils/config.toml`` (it may not exist)."""
    return platformdirs.user_config_path(APP_NAME) / "config.toml"


def read_config_file(path: "Path") -> Layer:
    """Parse a TOML config file into a layer.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            f"{path}: {e}",
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e
    except OSError as e:
        raise ConfigFileError(f"{path}: {e.strerror or e}", path=path) from e


def env_overrides(environ: "Mapping[str, str] | None" = None) -> Layer:
    """Collect ``SHELL_UTILS_<SECTION>__<KEY>`` variables into a layer.

    Names are lowercased and values stay strings; the models coerce them.
    Variables without the ``__`` separator, such as ``SHELL_UTILS_DEBUG``,
    are not settings and are skipped.
    """
    layer: Layer = {}
    for name, value in (os.environ if environ is None else environ).items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, sep, key = name.removeprefix(ENV_PREFIX).lower().partition("__")
        if sep and section and key:
            layer.setdefault(section, {})[key] = value
    return layer


def merge_layers(*layers: "Mapping[str, Any]") -> Layer:
    """Combine layers section by section; later layers win per key."""
    merged: Layer = {}
    for layer in layers:
        for name, value in layer.items():
            current = merged.get(name)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[name] = {**current, **value}
            else:
                merged[name] = value
    return merged


def _value_error(error: ValidationError) -> ConfigValueError:
    first = error.errors()[0]
    key = ".".join(str(part) for part in first["loc"])
    if first["type"] == "extra_forbidden":
        return ConfigValueError(f"unknown setting '{key}'", key=key)
    return ConfigValueError(
        f"invalid value for '{key}': {first['msg']}",
        key=key,
        value=first.get("input"),
    )


def load_config(
    *,
    config_file: "Path | None" = None,
    overrides: "Mapping[str, Any] | None" = None,
    environ: "Mapping[str, str] | None" = None,
) -> Config:
    """Build the settings for one run from every layer.

    Args:
        config_file: Explicit config file. It must exist; without it the
            user config file is read when present.
        overrides: Settings from command-line flags, e.g.
            ``{"logging": {"level": "debug"}}``.
        environ: Environment to read overrides from. Defaults to ``os.environ``.

    Raises:
        ConfigFileError: If the config file cannot be read or parsed.
        ConfigValueError: If a setting is unknown or has an invalid value.
    """
    path = config_file if config_file is not None else user_config_path()
    from_file = (
        read_config_file(path) if config_file is not None or path.is_file() else {}
    )
    merged = merge_layers(from_file, env_overrides(environ), overrides or {})
    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        raise _value_error(e) from e
