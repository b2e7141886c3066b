# simulation/stepping.py

import math
from typing import Iterator

import numpy as np

from trajectories.base import Trajectory, TrajectorySample
from utils.exceptions import InvalidParameterError
from utils.logger import logger

G = 9.81  # [m/s²]


def _check_positive(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameterError(f"{name} must be a positive finite number, got {value!r}")
    return value


def _check_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be a finite number, got {value!r}")
    return value


def time_steps(total_time: float, step: float) -> Iterator[float]:
    """
    Yield t = 0, step, 2*step, ... while t <= total_time.

    Time is advanced by repeated addition, so the last instant included
    follows floating-point accumulation (e.g. ten steps of 0.1 give
    0.9999999999999999, not 1.0).
    """
    total_time = _check_positive("total_time", total_time)
    step = _check_positive("step", step)

    t = 0.0
    while t <= total_time:
        yield t
        t += step


def compute_trajectory_radians(
    v0: float,
    alpha: float,
    total_time: float,
    step: float,
    g: float = G,
) -> Trajectory:
    """
    Constant-gravity projectile stepping with the launch angle in radians.

    Positions are truncated toward zero (``int()``), never rounded. Stepping
    stops at the first sample whose truncated height is negative; that sample
    is not included.

    Args:
        v0 (float): Initial speed [m/s].
        alpha (float): Launch angle [rad].
        total_time (float): Simulated horizon [s], > 0.
        step (float): Time step [s], > 0.
        g (float): Gravitational acceleration [m/s²].

    Returns:
        Trajectory: Samples in time order, possibly empty.
    """
    alpha = _check_finite("alpha", alpha)
    vx = v0 * np.cos(alpha)
    vy = v0 * np.sin(alpha)

    trajectory: Trajectory = []
    for t in time_steps(total_time, step):
        x = int(vx * t)
        y = int(vy * t - (g * t * t) / 2)
        if y < 0:
            logger.debug("Height below ground at t=%s, stopping after %d samples", t, len(trajectory))
            break
        trajectory.append(TrajectorySample(x=x, y=y))
    else:
        logger.debug("Reached total_time=%s with %d samples", total_time, len(trajectory))

    return trajectory


def compute_trajectory(
    v0: float,
    alpha_degrees: float,
    total_time: float,
    step: float,
) -> Trajectory:
    """
    Compute the truncated (x, y) samples of a projectile launched at
    ``v0`` with angle ``alpha_degrees``.

    >>> compute_trajectory(20, 45, 0.2, 0.1)[0]
    TrajectorySample(x=0, y=0)
    """
    return compute_trajectory_radians(v0, float(np.deg2rad(alpha_degrees)), total_time, step)
