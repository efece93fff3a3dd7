"""
src/scalemodel/scalers/min_max.py
Min-max scaling of every feature into [min_value, max_value].
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import jax.numpy as jnp

from scalemodel.core.config import DEFAULT_MAX_VALUE, DEFAULT_MIN_VALUE
from scalemodel.core.exceptions import InvalidParameterError
from scalemodel.core.identifiers import ScalerType
from scalemodel.core.types import JaxF64
from scalemodel.scalers.base import BaseScaler, replace_zeros


class MinMaxScaler(BaseScaler):
    """Linearly map each feature's observed [min, max] onto [min_value, max_value].

    Learned parameters:
        item_min, item_max: per-feature extremes of the training data
        scale: (max_value - min_value) / (item_max - item_min); a zero data
            range is treated as 1
        scale_row_min: min_value - item_min * scale

    transform:          x * scale + scale_row_min
    inverse_transform:  (y - scale_row_min) / scale

    min_value == max_value is accepted and maps every input to that value;
    the collapsed range cannot be inverted, so inverse_transform raises
    InvalidParameterError.
    """

    scaler_type = ScalerType.MIN_MAX_SCALER
    _STATE_FIELDS = ("item_min", "item_max", "scale", "scale_row_min")

    def __init__(self, min_value: int = DEFAULT_MIN_VALUE, max_value: int = DEFAULT_MAX_VALUE) -> None:
        super().__init__()
        if min_value > max_value:
            raise InvalidParameterError(
                f"MinMaxScaler range is not valid: min_value={min_value} > max_value={max_value}.",
                context={"min_value": min_value, "max_value": max_value},
            )
        self.min_value = int(min_value)
        self.max_value = int(max_value)
        self.item_min: Optional[JaxF64] = None
        self.item_max: Optional[JaxF64] = None
        self.scale: Optional[JaxF64] = None
        self.scale_row_min: Optional[JaxF64] = None

    def _init_params(self) -> Dict[str, Any]:
        return {"min_value": self.min_value, "max_value": self.max_value}

    @classmethod
    def _init_keys(cls) -> Tuple[str, ...]:
        return ("min_value", "max_value")

    def _fit(self, X: JaxF64) -> None:
        self.item_min = jnp.min(X, axis=0)
        self.item_max = jnp.max(X, axis=0)
        data_range = replace_zeros(self.item_max - self.item_min)
        self.scale = (self.max_value - self.min_value) / data_range
        self.scale_row_min = self.min_value - self.item_min * self.scale

    def _transform(self, X: JaxF64) -> JaxF64:
        return X * self.scale + self.scale_row_min

    def _inverse_transform(self, X: JaxF64) -> JaxF64:
        if bool(jnp.any(self.scale == 0.0)):
            raise InvalidParameterError(
                f"MinMaxScaler cannot invert a collapsed range: min_value == max_value == {self.min_value}.",
                context={"min_value": self.min_value, "max_value": self.max_value},
            )
        return (X - self.scale_row_min) / self.scale


__all__ = ["MinMaxScaler"]
