from typing import Dict, Type

from utils.exceptions import UnknownModelError
from .base_model import BaseMotionData
from .factory import BaseMotionDataFactory, TrajectoryDataFactory
from .trajectory_model import TrajectoryData

MOTION_MODEL_REGISTRY: Dict[str, Type[BaseMotionData]] = {
    TrajectoryData.model_name: TrajectoryData,
}

MOTION_FACTORY_REGISTRY: Dict[str, Type[BaseMotionDataFactory]] = {
    TrajectoryData.model_name: TrajectoryDataFactory,
}


def get_model_class(name: str) -> Type[BaseMotionData]:
    try:
        return MOTION_MODEL_REGISTRY[name]
    except KeyError:
        raise UnknownModelError(name, MOTION_MODEL_REGISTRY) from None


def get_factory(name: str = TrajectoryData.model_name) -> BaseMotionDataFactory:
    try:
        return MOTION_FACTORY_REGISTRY[name]()
    except KeyError:
        raise UnknownModelError(name, MOTION_FACTORY_REGISTRY) from None
