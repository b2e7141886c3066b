from abc import ABC, abstractmethod
from typing import List

import numpy as np

from trajectories.base import Trajectory, format_trajectory
from utils.exceptions import InvalidParameterError


class Displayable(ABC):
    """Objects able to print their results to standard output."""

    @abstractmethod
    def display_results(self) -> None:
        pass


class BaseMotionData(Displayable):
    """
    Abstract base class for launch parameter objects.

    A motion-data object holds the initial speed ``v0`` and the launch angle
    ``alpha`` (converted to radians on construction) and owns the trajectory
    computed from them. The trajectory is transient: it is rebuilt by every
    ``calculate`` call and is never persisted.

    Subclasses must set ``model_name`` (the registry key written by the
    serializer) and implement ``calculate``.
    """
    model_name: str = ""
    G: float = 9.81  # [m/s²]

    def __init__(self, v0: float, alpha: float):
        """
        Args:
            v0 (float): Initial speed [m/s], > 0.
            alpha (float): Launch angle [deg].
        """
        self.v0 = self._check_v0(v0)
        self.alpha = float(np.deg2rad(self._check_finite("alpha", alpha)))
        self.trajectory: Trajectory = []

    @classmethod
    def from_radians(cls, v0: float, alpha: float) -> "BaseMotionData":
        """Build an instance from an angle already in radians, kept as is."""
        obj = cls.__new__(cls)
        obj.v0 = cls._check_v0(v0)
        obj.alpha = cls._check_finite("alpha", alpha)
        obj.trajectory = []
        return obj

    @staticmethod
    def _check_v0(v0: float) -> float:
        v0 = float(v0)
        if not np.isfinite(v0) or v0 <= 0.0:
            raise InvalidParameterError(f"v0 must be a positive finite number, got {v0!r}")
        return v0

    @staticmethod
    def _check_finite(name: str, value: float) -> float:
        value = float(value)
        if not np.isfinite(value):
            raise InvalidParameterError(f"{name} must be a finite number, got {value!r}")
        return value

    @property
    def alpha_degrees(self) -> float:
        return float(np.rad2deg(self.alpha))

    @abstractmethod
    def calculate(self, total_time: float, step: float) -> Trajectory:
        """
        Recompute ``self.trajectory`` over ``[0, total_time]`` and return it.

        Args:
            total_time (float): Simulated horizon [s].
            step (float): Time step [s].
        """
        raise NotImplementedError

    def format_results(self) -> List[str]:
        return format_trajectory(self.trajectory)

    def display_results(self) -> None:
        for line in self.format_results():
            print(line)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BaseMotionData):
            return NotImplemented
        return type(self) is type(other) and (self.v0, self.alpha) == (other.v0, other.alpha)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(v0={self.v0!r}, alpha={self.alpha!r} rad)"
