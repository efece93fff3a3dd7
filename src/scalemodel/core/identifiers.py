"""
src/scalemodel/core/identifiers.py
Enum-based identifiers for scaling strategies.
"""

from __future__ import annotations

import enum
from typing import Any

from scalemodel.core.exceptions import UnrecognizedScalerTypeError


class ScalerType(str, enum.Enum):
    """Tag selecting which scaling strategy a ScalingModel builds on fit."""

    NONE = "none"
    STANDARD_SCALER = "standard_scaler"
    MIN_MAX_SCALER = "min_max_scaler"
    MEAN_NORMALIZATION = "mean_normalization"
    MAX_ABS_SCALER = "max_abs_scaler"
    PCA_WHITENING = "pca_whitening"
    ZCA_WHITENING = "zca_whitening"

    @classmethod
    def parse(cls, value: Any) -> "ScalerType":
        """Resolve an enum member or a (case-insensitive) name/value string.

        Raises UnrecognizedScalerTypeError for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            for member in cls:
                if key == member.value or key == member.name.lower():
                    return member
        raise UnrecognizedScalerTypeError(
            f"Unrecognized scaler type {value!r}. Available: {', '.join(m.value for m in cls)}",
            context={"scaler_type": repr(value)},
        )

    @property
    def is_strategy(self) -> bool:
        """True for the six tags that name an actual scaling strategy."""
        return self is not ScalerType.NONE

    @property
    def is_whitening(self) -> bool:
        return self in (ScalerType.PCA_WHITENING, ScalerType.ZCA_WHITENING)

    def __str__(self) -> str:
        return self.value


__all__ = ["ScalerType"]
