# Package init
# Enforce 64-bit precision globally for numerical stability and determinism
import os
os.environ["JAX_ENABLE_X64"] = "True"

import jax
jax.config.update("jax_enable_x64", True)

from scalemodel.core.identifiers import ScalerType  # noqa: E402
from scalemodel.core.config import ScalingConfig  # noqa: E402
from scalemodel.core.exceptions import (  # noqa: E402
    ScalingError,
    NotFittedError,
    UnrecognizedScalerTypeError,
    InvalidParameterError,
    ShapeMismatchError,
)
from scalemodel.model import ScalingModel  # noqa: E402

__version__ = "0.1.0"

__all__ = [
    "ScalerType",
    "ScalingConfig",
    "ScalingModel",
    "ScalingError",
    "NotFittedError",
    "UnrecognizedScalerTypeError",
    "InvalidParameterError",
    "ShapeMismatchError",
]
