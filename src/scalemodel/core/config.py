"""
Configuration for ScalingModel construction.
config shouldnt have initial value! Defaults live in the module constants below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from scalemodel.core.exceptions import InvalidParameterError
from scalemodel.core.identifiers import ScalerType

DEFAULT_MIN_VALUE = 0
DEFAULT_MAX_VALUE = 1
DEFAULT_EPSILON = 0.00005


@dataclass(frozen=True)
class ScalingConfig:
    """Tag plus the strategy parameters a ScalingModel needs to build its scaler."""

    scaler_type: ScalerType
    min_value: int
    max_value: int
    epsilon: float

    def validate(self, context: str = "scaling") -> "ScalingConfig":
        stype = ScalerType.parse(self.scaler_type)
        if not stype.is_strategy:
            raise InvalidParameterError(f"{context}: scaler_type must name a scaling strategy, got {stype}.")
        if self.min_value is None or self.max_value is None:
            raise InvalidParameterError(f"{context}: min_value and max_value are required.")
        if int(self.min_value) > int(self.max_value):
            raise InvalidParameterError(
                f"{context}: min_value must not exceed max_value, got {self.min_value} > {self.max_value}."
            )
        if self.epsilon is None or float(self.epsilon) < 0.0:
            raise InvalidParameterError(f"{context}: epsilon must be non-negative, got {self.epsilon}.")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scaler_type": ScalerType.parse(self.scaler_type).value,
            "min_value": int(self.min_value),
            "max_value": int(self.max_value),
            "epsilon": float(self.epsilon),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScalingConfig":
        """Build a config from a plain dict; missing bounds/epsilon fall back to the defaults."""
        if "scaler_type" not in data:
            raise InvalidParameterError("ScalingConfig requires 'scaler_type'.")
        return cls(
            scaler_type=ScalerType.parse(data["scaler_type"]),
            min_value=int(data.get("min_value", DEFAULT_MIN_VALUE)),
            max_value=int(data.get("max_value", DEFAULT_MAX_VALUE)),
            epsilon=float(data.get("epsilon", DEFAULT_EPSILON)),
        ).validate()


__all__ = ["ScalingConfig", "DEFAULT_MIN_VALUE", "DEFAULT_MAX_VALUE", "DEFAULT_EPSILON"]
