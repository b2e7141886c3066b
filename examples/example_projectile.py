import matplotlib.pyplot as plt

from analysis import compute_flight_metrics
from models.motion import get_factory
from trajectories.preview import plot_trajectory

factory = get_factory("trajectory")

plt.figure(figsize=(10, 5))
for alpha in (15.0, 30.0, 45.0, 60.0, 75.0):
    data = factory.create_motion_data(20.0, alpha)
    trajectory = data.calculate(total_time=4.0, step=0.05)
    metrics = compute_flight_metrics(trajectory)
    print(f"alpha={alpha:>4} deg  max_height={metrics['max_height']:>3}  "
          f"max_distance={metrics['max_distance']:>3}  samples={metrics['n_samples']}")
    plot_trajectory(trajectory, label=f"α = {alpha:g}°")

plt.title("v0 = 20 m/s")
plt.show()
