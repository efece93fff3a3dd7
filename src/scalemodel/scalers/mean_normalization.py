"""Mean normalization: center by the mean, divide by the observed range."""
from __future__ import annotations

from typing import Optional

import jax.numpy as jnp

from scalemodel.core.identifiers import ScalerType
from scalemodel.core.types import JaxF64
from scalemodel.scalers.base import BaseScaler, replace_zeros


class MeanNormalization(BaseScaler):
    """z = (x - mean) / (max - min), per feature; a zero range counts as 1."""

    scaler_type = ScalerType.MEAN_NORMALIZATION
    _STATE_FIELDS = ("mean", "item_min", "item_max", "scale")

    def __init__(self) -> None:
        super().__init__()
        self.mean: Optional[JaxF64] = None
        self.item_min: Optional[JaxF64] = None
        self.item_max: Optional[JaxF64] = None
        self.scale: Optional[JaxF64] = None

    def _fit(self, X: JaxF64) -> None:
        self.mean = jnp.mean(X, axis=0)
        self.item_min = jnp.min(X, axis=0)
        self.item_max = jnp.max(X, axis=0)
        self.scale = replace_zeros(self.item_max - self.item_min)

    def _transform(self, X: JaxF64) -> JaxF64:
        return (X - self.mean) / self.scale

    def _inverse_transform(self, X: JaxF64) -> JaxF64:
        return X * self.scale + self.mean


__all__ = ["MeanNormalization"]
