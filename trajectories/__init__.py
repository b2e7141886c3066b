# trajectories/__init__.py

from .base import (
    Trajectory,
    TrajectorySample,
    format_sample,
    format_trajectory,
    trajectory_to_array,
)

__all__ = [
    "Trajectory",
    "TrajectorySample",
    "format_sample",
    "format_trajectory",
    "trajectory_to_array",
]
