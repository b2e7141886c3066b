from typing import Optional

from simulation.stepping import compute_trajectory_radians
from trajectories.base import Trajectory
from .base_model import BaseMotionData


class TrajectoryData(BaseMotionData):
    """Point-mass projectile under constant gravity, no drag."""
    model_name = "trajectory"

    def calculate(
            self,
            total_time: float,
            step: float,
            g: Optional[float] = None,
            ) -> Trajectory:
        self.trajectory = compute_trajectory_radians(
            self.v0,
            self.alpha,
            total_time,
            step,
            g=self.G if g is None else g,
        )
        return self.trajectory
