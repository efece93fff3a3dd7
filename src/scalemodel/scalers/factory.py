"""Factory for creating scaler instances from a ScalerType tag."""
from __future__ import annotations

from typing import Any, Dict, Type

from scalemodel.core.config import DEFAULT_EPSILON, DEFAULT_MAX_VALUE, DEFAULT_MIN_VALUE
from scalemodel.core.exceptions import UnrecognizedScalerTypeError
from scalemodel.core.identifiers import ScalerType
from scalemodel.core.interfaces import Scaler
from scalemodel.scalers.base import BaseScaler
from scalemodel.scalers.max_abs import MaxAbsScaler
from scalemodel.scalers.mean_normalization import MeanNormalization
from scalemodel.scalers.min_max import MinMaxScaler
from scalemodel.scalers.pca_whitening import PcaWhitening
from scalemodel.scalers.standard import StandardScaler
from scalemodel.scalers.zca_whitening import ZcaWhitening

SCALER_CLASSES: Dict[ScalerType, Type[BaseScaler]] = {
    ScalerType.STANDARD_SCALER: StandardScaler,
    ScalerType.MIN_MAX_SCALER: MinMaxScaler,
    ScalerType.MEAN_NORMALIZATION: MeanNormalization,
    ScalerType.MAX_ABS_SCALER: MaxAbsScaler,
    ScalerType.PCA_WHITENING: PcaWhitening,
    ScalerType.ZCA_WHITENING: ZcaWhitening,
}


class ScalerFactory:
    """Builds fresh scaler instances and restores serialized ones."""

    @staticmethod
    def scaler_class(scaler_type: Any) -> Type[BaseScaler]:
        stype = ScalerType.parse(scaler_type)
        if stype not in SCALER_CLASSES:
            raise UnrecognizedScalerTypeError(
                f"Scaler type '{stype}' does not name a scaling strategy. "
                f"Available: {', '.join(t.value for t in SCALER_CLASSES)}",
                context={"scaler_type": stype.value},
            )
        return SCALER_CLASSES[stype]

    @classmethod
    def create_scaler(
        cls,
        scaler_type: Any,
        *,
        min_value: int = DEFAULT_MIN_VALUE,
        max_value: int = DEFAULT_MAX_VALUE,
        epsilon: float = DEFAULT_EPSILON,
    ) -> Scaler:
        """Return an unfitted scaler; only the parameters its strategy uses are passed on."""
        scaler_cls = cls.scaler_class(scaler_type)
        if scaler_cls is MinMaxScaler:
            return MinMaxScaler(min_value, max_value)
        if scaler_cls in (PcaWhitening, ZcaWhitening):
            return scaler_cls(epsilon)
        return scaler_cls()

    @classmethod
    def from_dict(cls, scaler_type: Any, params: Dict[str, Any]) -> Scaler:
        return cls.scaler_class(scaler_type).from_dict(params)


__all__ = ["ScalerFactory", "SCALER_CLASSES"]
