"""Scaling strategies and the factory that selects among them."""

from .base import BaseScaler  # noqa: F401
from .standard import StandardScaler  # noqa: F401
from .min_max import MinMaxScaler  # noqa: F401
from .max_abs import MaxAbsScaler  # noqa: F401
from .mean_normalization import MeanNormalization  # noqa: F401
from .pca_whitening import PcaWhitening  # noqa: F401
from .zca_whitening import ZcaWhitening  # noqa: F401
from .factory import ScalerFactory, SCALER_CLASSES  # noqa: F401

__all__ = [
    "BaseScaler",
    "StandardScaler",
    "MinMaxScaler",
    "MaxAbsScaler",
    "MeanNormalization",
    "PcaWhitening",
    "ZcaWhitening",
    "ScalerFactory",
    "SCALER_CLASSES",
]
