# trajectories/base.py
from dataclasses import dataclass
from typing import List, Sequence
import numpy as np

@dataclass(frozen=True)
class TrajectorySample:
    x: int  # horizontal distance, truncated
    y: int  # height, truncated

    def to_dict(self) -> dict:
        return dict(x=self.x, y=self.y)

    def __str__(self) -> str:
        return format_sample(self)


Trajectory = List[TrajectorySample]


def format_sample(sample: TrajectorySample) -> str:
    """Text form of one sample, e.g. ``"x: 14, y: 9"``."""
    return f"x: {sample.x}, y: {sample.y}"


def format_trajectory(trajectory: Sequence[TrajectorySample]) -> List[str]:
    """One formatted line per sample, in time order."""
    return [format_sample(sample) for sample in trajectory]


def trajectory_to_array(trajectory: Sequence[TrajectorySample]) -> np.ndarray:
    """
    Retourne un tableau numpy de forme (N, 2): [x, y]

    An empty trajectory gives an array of shape (0, 2).
    """
    if len(trajectory) == 0:
        return np.empty((0, 2), dtype=int)
    return np.array([[s.x, s.y] for s in trajectory], dtype=int)
