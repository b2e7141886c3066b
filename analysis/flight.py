# analysis/flight.py

from typing import Dict, Sequence
import numpy as np
from trajectories.base import TrajectorySample, trajectory_to_array

def compute_flight_metrics(trajectory: Sequence[TrajectorySample]) -> Dict[str, int]:
    """
    Compute summary metrics of a computed trajectory.

    Parameters
    ----------
    trajectory : Sequence[TrajectorySample]
        Samples returned by ``compute_trajectory`` or ``TrajectoryData.calculate``.

    Returns
    -------
    Dict[str, int]
        - ``n_samples``    : number of samples.
        - ``max_height``   : highest truncated y.
        - ``max_distance`` : largest truncated x.
        - ``apex_index``   : index of the first sample reaching ``max_height``.

    Raises
    ------
    ValueError
        If the trajectory is empty.

    Example
    -------
    >>> metrics = compute_flight_metrics(data.calculate(2.0, 0.1))
    >>> metrics["max_height"]
    10
    """
    points = trajectory_to_array(trajectory)
    if points.shape[0] == 0:
        raise ValueError("Flight metrics require at least one sample.")

    x, y = points[:, 0], points[:, 1]

    return {
        "n_samples": int(points.shape[0]),
        "max_height": int(y.max()),
        "max_distance": int(x.max()),
        "apex_index": int(np.argmax(y)),
    }
