"""
src/scalemodel/scalers/standard.py
Standardization: center every feature and scale it to unit variance.
"""
from __future__ import annotations

from typing import Optional

import jax.numpy as jnp

from scalemodel.core.identifiers import ScalerType
from scalemodel.core.types import JaxF64
from scalemodel.scalers.base import BaseScaler, replace_zeros


class StandardScaler(BaseScaler):
    """z = (x - mean) / std, with the population std of each feature.

    Constant features get std = 1 so they map to 0 instead of NaN.
    """

    scaler_type = ScalerType.STANDARD_SCALER
    _STATE_FIELDS = ("mean", "std")

    def __init__(self) -> None:
        super().__init__()
        self.mean: Optional[JaxF64] = None
        self.std: Optional[JaxF64] = None

    def _fit(self, X: JaxF64) -> None:
        self.mean = jnp.mean(X, axis=0)
        self.std = replace_zeros(jnp.std(X, axis=0))

    def _transform(self, X: JaxF64) -> JaxF64:
        return (X - self.mean) / self.std

    def _inverse_transform(self, X: JaxF64) -> JaxF64:
        return X * self.std + self.mean


__all__ = ["StandardScaler"]
