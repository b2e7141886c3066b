from .base_model import BaseMotionData, Displayable
from .trajectory_model import TrajectoryData
from .factory import BaseMotionDataFactory, TrajectoryDataFactory
from .registry import (
    MOTION_FACTORY_REGISTRY,
    MOTION_MODEL_REGISTRY,
    get_factory,
    get_model_class,
)

__all__ = [
    "Displayable",
    "BaseMotionData",
    "TrajectoryData",
    "BaseMotionDataFactory",
    "TrajectoryDataFactory",
    "MOTION_MODEL_REGISTRY",
    "MOTION_FACTORY_REGISTRY",
    "get_factory",
    "get_model_class",
]
