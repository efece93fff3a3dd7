"""Max-abs scaling: divide every feature by its largest absolute value."""
from __future__ import annotations

from typing import Optional

import jax.numpy as jnp

from scalemodel.core.identifiers import ScalerType
from scalemodel.core.types import JaxF64
from scalemodel.scalers.base import BaseScaler, replace_zeros


class MaxAbsScaler(BaseScaler):
    """Scale each feature into [-1, 1] without shifting it (sparsity preserving)."""

    scaler_type = ScalerType.MAX_ABS_SCALER
    _STATE_FIELDS = ("max_abs",)

    def __init__(self) -> None:
        super().__init__()
        self.max_abs: Optional[JaxF64] = None

    def _fit(self, X: JaxF64) -> None:
        self.max_abs = replace_zeros(jnp.max(jnp.abs(X), axis=0))

    def _transform(self, X: JaxF64) -> JaxF64:
        return X / self.max_abs

    def _inverse_transform(self, X: JaxF64) -> JaxF64:
        return X * self.max_abs


__all__ = ["MaxAbsScaler"]
