# simulation/serializer.py
"""
Binary persistence of motion-data objects.

Only the launch parameters are stored, as a single fixed-size little-endian
record:

    offset  size  field
    0       4     magic     b"MTND"
    4       2     version   uint16
    6       2     reserved  uint16, zero
    8       16    model     registry name, ASCII, NUL padded
    24      8     v0        float64 [m/s]
    32      8     alpha     float64 [rad], as stored on the object

The trajectory is transient and must be recomputed after loading.
"""

from os import PathLike
from typing import Union

import numpy as np

from models.motion.base_model import BaseMotionData
from models.motion.registry import get_model_class
from utils.exceptions import InvalidParameterError, SerializationError, UnknownModelError
from utils.logger import logger

__all__ = ('MAGIC', 'FORMAT_VERSION', 'RECORD_DTYPE', 'dumps', 'loads', 'save', 'load')

MAGIC = b"MTND"
FORMAT_VERSION = 1

RECORD_DTYPE = np.dtype([
    ("magic", "S4"),
    ("version", "<u2"),
    ("reserved", "<u2"),
    ("model", "S16"),
    ("v0", "<f8"),
    ("alpha", "<f8"),
])


def dumps(data: BaseMotionData) -> bytes:
    """Encode the launch parameters of ``data`` as one record."""
    name = data.model_name.encode("ascii")
    if not name or len(name) > RECORD_DTYPE["model"].itemsize:
        raise SerializationError(f"Model name {data.model_name!r} can't be stored")

    record = np.zeros(1, dtype=RECORD_DTYPE)
    record["magic"] = MAGIC
    record["version"] = FORMAT_VERSION
    record["model"] = name
    record["v0"] = data.v0
    record["alpha"] = data.alpha
    return record.tobytes()


def loads(payload: bytes) -> BaseMotionData:
    """Decode a record produced by ``dumps``. The trajectory comes back empty."""
    if len(payload) != RECORD_DTYPE.itemsize:
        raise SerializationError(
            f"Expected {RECORD_DTYPE.itemsize} bytes, got {len(payload)}"
        )
    record = np.frombuffer(payload, dtype=RECORD_DTYPE, count=1)[0]

    if bytes(record["magic"]) != MAGIC:
        raise SerializationError(f"Bad magic {bytes(record['magic'])!r}")
    version = int(record["version"])
    if version != FORMAT_VERSION:
        raise SerializationError(f"Unsupported format version {version}")

    name = bytes(record["model"]).decode("ascii", errors="replace")
    try:
        cls = get_model_class(name)
    except UnknownModelError as exc:
        raise SerializationError(str(exc)) from exc

    try:
        return cls.from_radians(float(record["v0"]), float(record["alpha"]))
    except InvalidParameterError as exc:
        raise SerializationError(str(exc)) from exc


def save(data: BaseMotionData, path: Union[str, PathLike]) -> None:
    payload = dumps(data)
    with open(path, "wb") as fp:
        fp.write(payload)
    logger.debug("Saved %r to %s", data, path)


def load(path: Union[str, PathLike]) -> BaseMotionData:
    with open(path, "rb") as fp:
        payload = fp.read()
    data = loads(payload)
    logger.debug("Loaded %r from %s", data, path)
    return data
