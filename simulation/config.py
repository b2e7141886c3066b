# simulation/config.py

import sys
from typing import NamedTuple

from utils.exceptions import ConfigError

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib

__all__ = ('SimulationConfig', 'basic_config', 'get_config', 'load_config')


class SimulationConfig(NamedTuple):
    total_time: float = 2.0    # [s]
    step: float = 0.1          # [s]
    gravity: float = 9.81      # [m/s²]
    output_file: str = "motion_data.ser"


_SIM_CONFIG = SimulationConfig()


def basic_config(config: SimulationConfig):
    global _SIM_CONFIG
    _SIM_CONFIG = config


def get_config() -> SimulationConfig:
    return _SIM_CONFIG


def load_config(path) -> SimulationConfig:
    """
    Read a ``[simulation]`` table from a TOML file.

    Missing keys keep their defaults. Unknown keys or values of the wrong
    type raise ConfigError.

    Example file:
        [simulation]
        total_time = 3.0
        step = 0.05
        output_file = "shot.ser"
    """
    try:
        with open(path, "rb") as fp:
            data = tomllib.load(fp)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Can't parse {path}: {exc}") from exc

    table = data.get("simulation", {})
    if not isinstance(table, dict):
        raise ConfigError("'simulation' must be a table")

    unknown = set(table) - set(SimulationConfig._fields)
    if unknown:
        raise ConfigError(f"Unknown keys in [simulation]: {', '.join(sorted(unknown))}")

    values = {}
    for key, value in table.items():
        default = SimulationConfig._field_defaults[key]
        if isinstance(default, float):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"'{key}' must be a number, got {value!r}")
            value = float(value)
            if value <= 0:
                raise ConfigError(f"'{key}' must be positive, got {value!r}")
        elif not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string, got {value!r}")
        values[key] = value

    return SimulationConfig(**values)
