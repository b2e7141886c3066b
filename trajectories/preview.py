import matplotlib.pyplot as plt

from .base import trajectory_to_array

def plot_trajectory(trajectory, label="Trajectory", ax=None):
    """Draw the samples as a polyline with markers and return the axes."""
    if ax is None:
        ax = plt.gca()
    points = trajectory_to_array(trajectory)
    x, y = points[:, 0], points[:, 1]
    ax.plot(x, y, marker="o", label=label)
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("x [m]")
    ax.set_ylabel("y [m]")
    ax.grid(True)
    ax.legend()
    return ax
