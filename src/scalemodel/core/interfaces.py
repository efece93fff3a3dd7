"""
scalemodel/core/interfaces.py
Protocol interface shared by every scaling strategy.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from scalemodel.core.identifiers import ScalerType
from scalemodel.core.types import ConfigDict, JaxF64


@runtime_checkable
class Scaler(Protocol):
    """Fit / transform / inverse-transform contract of a scaling strategy."""

    scaler_type: ScalerType

    @property
    def is_fitted(self) -> bool:
        ...

    def fit(self, data: Any) -> "Scaler":
        ...

    def transform(self, data: Any) -> JaxF64:
        ...

    def inverse_transform(self, data: Any) -> JaxF64:
        ...

    def fit_transform(self, data: Any) -> JaxF64:
        ...

    def copy(self) -> "Scaler":
        ...

    def to_dict(self) -> ConfigDict:
        ...


__all__ = ["Scaler"]
