import numpy as np
import pytest
from models.motion import (
    BaseMotionData,
    TrajectoryData,
    TrajectoryDataFactory,
    MOTION_MODEL_REGISTRY,
    get_factory,
    get_model_class,
)
from simulation.stepping import compute_trajectory
from utils.exceptions import InvalidParameterError, UnknownModelError

@pytest.fixture
def motion_data():
    return TrajectoryDataFactory().create_motion_data(20.0, 45.0)

def test_factory_creates_trajectory_data(motion_data):
    assert isinstance(motion_data, TrajectoryData)
    assert isinstance(motion_data, BaseMotionData)
    assert motion_data.trajectory == []

def test_alpha_stored_in_radians(motion_data):
    assert motion_data.alpha == np.deg2rad(45.0)
    assert np.isclose(motion_data.alpha_degrees, 45.0)

def test_calculate_matches_stepping(motion_data):
    result = motion_data.calculate(2.0, 0.1)
    assert result is motion_data.trajectory
    assert result == compute_trajectory(20.0, 45.0, 2.0, 0.1)

def test_calculate_replaces_trajectory(motion_data):
    first = list(motion_data.calculate(2.0, 0.1))
    motion_data.calculate(2.0, 0.1)
    assert motion_data.trajectory == first
    motion_data.calculate(0.5, 0.1)
    assert len(motion_data.trajectory) < len(first)

def test_display_results(motion_data, capsys):
    motion_data.calculate(0.2, 0.1)
    motion_data.display_results()
    out = capsys.readouterr().out
    assert out.splitlines() == ["x: 0, y: 0", "x: 1, y: 1", "x: 2, y: 2"]

def test_display_empty_trajectory(motion_data, capsys):
    motion_data.display_results()
    assert capsys.readouterr().out == ""

@pytest.mark.parametrize("v0", [0.0, -5.0, float("nan")])
def test_invalid_speed(v0):
    with pytest.raises(InvalidParameterError):
        TrajectoryData(v0, 45.0)

@pytest.mark.parametrize("alpha", [float("nan"), float("inf")])
def test_invalid_angle(alpha):
    with pytest.raises(InvalidParameterError):
        TrajectoryData(20.0, alpha)
    with pytest.raises(InvalidParameterError):
        TrajectoryData.from_radians(20.0, alpha)

def test_from_radians_keeps_angle():
    reference = TrajectoryData(20.0, 45.0)
    data = TrajectoryData.from_radians(20.0, reference.alpha)
    assert data.alpha == reference.alpha
    assert data.trajectory == []
    assert data == reference

def test_equality_ignores_trajectory(motion_data):
    other = TrajectoryData(20.0, 45.0)
    motion_data.calculate(2.0, 0.1)
    assert motion_data == other
    assert motion_data != TrajectoryData(21.0, 45.0)

def test_registry_lookup():
    assert get_model_class("trajectory") is TrajectoryData
    assert isinstance(get_factory("trajectory"), TrajectoryDataFactory)
    assert set(MOTION_MODEL_REGISTRY) == {"trajectory"}

def test_unknown_model():
    with pytest.raises(UnknownModelError) as excinfo:
        get_factory("drag")
    assert "drag" in str(excinfo.value)
    assert isinstance(excinfo.value, KeyError)

if __name__ == "__main__":
    pytest.main([__file__])
