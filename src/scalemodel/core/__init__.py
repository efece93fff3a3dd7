"""Core identifiers, protocol interface, types and errors for scalemodel."""

from .exceptions import (
    ScalingError,
    NotFittedError,
    UnrecognizedScalerTypeError,
    InvalidParameterError,
    ShapeMismatchError,
)
from .identifiers import ScalerType
from .interfaces import Scaler
from .config import ScalingConfig, DEFAULT_MIN_VALUE, DEFAULT_MAX_VALUE, DEFAULT_EPSILON

__all__ = [
    "ScalerType",
    "Scaler",
    "ScalingConfig",
    "DEFAULT_MIN_VALUE",
    "DEFAULT_MAX_VALUE",
    "DEFAULT_EPSILON",
    "ScalingError",
    "NotFittedError",
    "UnrecognizedScalerTypeError",
    "InvalidParameterError",
    "ShapeMismatchError",
]
