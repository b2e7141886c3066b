import numpy as np
import pytest
from simulation.stepping import compute_trajectory, compute_trajectory_radians, time_steps
from trajectories import TrajectorySample
from utils.exceptions import InvalidParameterError

@pytest.fixture
def reference_shot():
    return compute_trajectory(20.0, 45.0, 2.0, 0.1)

def test_first_sample_is_origin(reference_shot):
    assert reference_shot[0] == TrajectorySample(x=0, y=0)

def test_no_negative_height(reference_shot):
    assert len(reference_shot) > 0
    assert all(s.y >= 0 for s in reference_shot)

@pytest.mark.parametrize("index, expected", [
    (1, (1, 1)),    # t = 0.1
    (5, (7, 5)),    # t = 0.5, y = 5.84 truncated, not rounded
    (10, (14, 9)),  # t ~ 1.0
])
def test_known_samples(reference_shot, index, expected):
    sample = reference_shot[index]
    assert (sample.x, sample.y) == expected

def test_time_steps_exact_grid():
    assert list(time_steps(1.0, 0.25)) == [0.0, 0.25, 0.5, 0.75, 1.0]

def test_time_steps_accumulates_by_addition():
    ts = list(time_steps(0.35, 0.1))
    assert ts[3] == 0.1 + 0.1 + 0.1
    assert len(ts) == 4

def test_zero_angle_keeps_truncated_zero_heights():
    """Raw height is negative for t > 0 but truncates to 0 until it reaches -1."""
    samples = compute_trajectory(10.0, 0.0, 2.0, 0.1)
    assert [s.x for s in samples] == [0, 1, 2, 3, 4]
    assert all(s.y == 0 for s in samples)

def test_downward_launch_stops_after_origin():
    samples = compute_trajectory(100.0, -30.0, 2.0, 0.1)
    assert samples == [TrajectorySample(0, 0)]

def test_flat_backward_launch_matches_zero_angle():
    """sin(180°) is ~1e-16, so heights truncate exactly as for a 0° launch."""
    samples = compute_trajectory(100.0, 180.0, 2.0, 0.1)
    assert len(samples) == 5
    assert all(s.y == 0 for s in samples)
    assert all(s.x <= 0 for s in samples)

def test_past_horizontal_launch_stops_after_origin():
    assert compute_trajectory(100.0, 190.0, 2.0, 0.1) == [TrajectorySample(0, 0)]

def test_vertical_launch_has_zero_x():
    samples = compute_trajectory(1.0, 90.0, 2.0, 0.05)
    assert len(samples) > 0
    assert all(s.x == 0 for s in samples)

def test_stops_before_total_time_when_landing():
    samples = compute_trajectory(20.0, 45.0, 10.0, 0.1)
    # flight time is 2 * v0 * sin(45°) / g ~ 2.88 s
    assert len(samples) < len(list(time_steps(10.0, 0.1)))
    assert samples[-1].x < 45
    assert all(s.y >= 0 for s in samples)

def test_idempotent():
    a = compute_trajectory(35.0, 60.0, 2.0, 0.1)
    b = compute_trajectory(35.0, 60.0, 2.0, 0.1)
    assert a == b

def test_degrees_and_radians_agree():
    a = compute_trajectory(25.0, 30.0, 2.0, 0.1)
    b = compute_trajectory_radians(25.0, np.deg2rad(30.0), 2.0, 0.1)
    assert a == b

def test_gravity_override():
    moon = compute_trajectory_radians(20.0, np.pi / 4, 2.0, 0.1, g=1.62)
    earth = compute_trajectory_radians(20.0, np.pi / 4, 2.0, 0.1)
    assert moon[-1].y > earth[-1].y

@pytest.mark.parametrize("total_time, step", [
    (0.0, 0.1),
    (2.0, 0.0),
    (2.0, -0.1),
    (float("nan"), 0.1),
    (2.0, float("inf")),
])
def test_invalid_stepping_parameters(total_time, step):
    with pytest.raises(InvalidParameterError):
        compute_trajectory(20.0, 45.0, total_time, step)

@pytest.mark.parametrize("alpha", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_angle(alpha):
    with pytest.raises(InvalidParameterError, match="alpha"):
        compute_trajectory(20.0, alpha, 2.0, 0.1)
    with pytest.raises(InvalidParameterError, match="alpha"):
        compute_trajectory_radians(20.0, alpha, 2.0, 0.1)

def test_invalid_parameter_is_value_error():
    with pytest.raises(ValueError):
        compute_trajectory(20.0, 45.0, 2.0, 0.0)

if __name__ == "__main__":
    pytest.main([__file__])
