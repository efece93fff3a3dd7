"""Exception hierarchy for scalemodel.

All errors raised by the package derive from ScalingError. The concrete
classes also derive from the matching builtin (RuntimeError / ValueError) so
callers that only know the builtin still catch them.

Exception Categories:
- NotFittedError: transform requested before the matching strategy was fitted
- UnrecognizedScalerTypeError: tag does not name one of the six strategies
- InvalidParameterError: bad bounds / regulariser / config values
- ShapeMismatchError: data incompatible with the fitted strategy
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ScalingError(Exception):
    """Base exception for all scalemodel errors.

    Attributes:
        message: Error message
        context: Additional context information
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        base_msg = self.message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" (Context: {context_str})"
        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class NotFittedError(ScalingError, RuntimeError):
    """Raised when transform/inverse_transform runs without a fitted strategy."""


class UnrecognizedScalerTypeError(ScalingError, ValueError):
    """Raised when a scaler tag does not resolve to one of the six strategies."""


class InvalidParameterError(ScalingError, ValueError):
    """Raised for invalid scaling parameters (e.g. min > max, epsilon < 0)."""


class ShapeMismatchError(ScalingError, ValueError):
    """Raised when data does not match the feature count seen at fit time."""

    def __init__(self, expected: int, actual: int, where: str = "transform"):
        super().__init__(
            f"Expected data with {expected} features, got {actual}.",
            context={"expected": expected, "actual": actual, "operation": where},
        )
        self.expected = expected
        self.actual = actual


__all__ = [
    "ScalingError",
    "NotFittedError",
    "UnrecognizedScalerTypeError",
    "InvalidParameterError",
    "ShapeMismatchError",
]
