from abc import ABC, abstractmethod

from .base_model import BaseMotionData
from .trajectory_model import TrajectoryData


class BaseMotionDataFactory(ABC):
    """Creates motion-data objects from user-facing launch parameters."""

    @abstractmethod
    def create_motion_data(self, v0: float, alpha: float) -> BaseMotionData:
        """
        Args:
            v0 (float): Initial speed [m/s].
            alpha (float): Launch angle [deg].
        """
        pass


class TrajectoryDataFactory(BaseMotionDataFactory):
    def create_motion_data(self, v0: float, alpha: float) -> TrajectoryData:
        return TrajectoryData(v0, alpha)
