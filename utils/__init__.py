from .exceptions import (
    ConfigError,
    InvalidParameterError,
    MotionSimError,
    SerializationError,
    UnknownModelError,
)

__all__ = [
    "MotionSimError",
    "InvalidParameterError",
    "UnknownModelError",
    "SerializationError",
    "ConfigError",
]
