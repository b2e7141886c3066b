"""motionsim exception types"""

__all__ = (
    'MotionSimError',
    'InvalidParameterError',
    'UnknownModelError',
    'SerializationError',
    'ConfigError',
)


class MotionSimError(Exception):
    """Base class for all motionsim errors"""


class InvalidParameterError(MotionSimError, ValueError):
    """Launch or stepping parameter out of range"""


class UnknownModelError(MotionSimError, KeyError):
    """
    Raised when a motion model name is not found in the registry.
    Contains:
    - name: the requested model name
    - available: the registered names
    """

    def __init__(self, name: str, available):
        self.name: str = name
        self.available = tuple(available)
        super().__init__(f"Unknown motion model '{name}', "
                         f"expected one of: {', '.join(self.available)}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class SerializationError(MotionSimError, ValueError):
    """Persisted motion record is malformed or unsupported"""


class ConfigError(MotionSimError, ValueError):
    """Invalid simulation configuration"""
