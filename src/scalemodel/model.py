"""
src/scalemodel/model.py
Serializable scaling model: one tag-selected scaler behind a single slot.

Typical use::

    model = ScalingModel(min_value=0, max_value=1, epsilon=1e-6)
    model.scaler_type = ScalerType.MIN_MAX_SCALER
    scaled = model.fit(train).transform(test)
    restored = model.inverse_transform(scaled)
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from scalemodel.core.config import (
    DEFAULT_EPSILON,
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_VALUE,
    ScalingConfig,
)
from scalemodel.core.exceptions import NotFittedError, UnrecognizedScalerTypeError
from scalemodel.core.identifiers import ScalerType
from scalemodel.core.interfaces import Scaler
from scalemodel.core.types import ConfigDict, JaxF64
from scalemodel.scalers.factory import ScalerFactory

logger = logging.getLogger(__name__)


class ScalingModel:
    """Owns at most one scaling strategy, chosen by ``scaler_type`` at fit time.

    ``min_value``/``max_value`` are only used to build the min-max scaler and
    ``epsilon`` only to build the whitening scalers. ``scaler_type`` may be
    assigned freely (enum member or name string); it is resolved when an
    operation needs it, so an unknown tag surfaces as
    UnrecognizedScalerTypeError from fit/transform rather than on assignment.

    The slot holds the strategy built by the most recent successful fit.
    transform/inverse_transform require that strategy to match the current
    tag; otherwise the model reports NotFittedError.
    """

    def __init__(
        self,
        min_value: int = DEFAULT_MIN_VALUE,
        max_value: int = DEFAULT_MAX_VALUE,
        epsilon: float = DEFAULT_EPSILON,
        scaler_type: Any = ScalerType.NONE,
    ) -> None:
        self.scaler_type = scaler_type
        self.min_value = int(min_value)
        self.max_value = int(max_value)
        self.epsilon = float(epsilon)
        self._scaler: Optional[Scaler] = None

    @classmethod
    def from_config(cls, config: ScalingConfig) -> "ScalingModel":
        config.validate()
        return cls(
            min_value=config.min_value,
            max_value=config.max_value,
            epsilon=config.epsilon,
            scaler_type=ScalerType.parse(config.scaler_type),
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def scaler(self) -> Optional[Scaler]:
        """The fitted strategy, or None before the first successful fit."""
        return self._scaler

    @property
    def is_fitted(self) -> bool:
        """True when a fitted strategy matching the current tag is held."""
        try:
            self._active_scaler("is_fitted")
        except (NotFittedError, UnrecognizedScalerTypeError):
            return False
        return True

    def _resolve_type(self, operation: str) -> ScalerType:
        stype = ScalerType.parse(self.scaler_type)
        if not stype.is_strategy:
            raise UnrecognizedScalerTypeError(
                f"ScalingModel.{operation}() requires scaler_type to name a scaling strategy; "
                f"got '{stype}'.",
                context={"scaler_type": stype.value},
            )
        return stype

    def _active_scaler(self, operation: str) -> Scaler:
        stype = self._resolve_type(operation)
        if self._scaler is None or self._scaler.scaler_type is not stype:
            held = "nothing" if self._scaler is None else f"a fitted {self._scaler.scaler_type} scaler"
            raise NotFittedError(
                f"No {stype} scaler has been fitted (model holds {held}). Call fit() before {operation}().",
                context={"scaler_type": stype.value},
            )
        return self._scaler

    # ------------------------------------------------------------------
    # Fit / transform
    # ------------------------------------------------------------------
    def fit(self, data: Any) -> "ScalingModel":
        """Build a fresh scaler for the current tag, fit it and install it.

        Any previously held scaler is replaced only after the new one fitted
        successfully; a failing fit leaves the model unchanged.
        """
        stype = self._resolve_type("fit")
        scaler = ScalerFactory.create_scaler(
            stype,
            min_value=self.min_value,
            max_value=self.max_value,
            epsilon=self.epsilon,
        )
        scaler.fit(data)
        if self._scaler is not None:
            logger.debug(f"Replacing fitted {self._scaler.scaler_type} scaler with {stype}")
        self._scaler = scaler
        return self

    def transform(self, data: Any) -> JaxF64:
        return self._active_scaler("transform").transform(data)

    def inverse_transform(self, data: Any) -> JaxF64:
        return self._active_scaler("inverse_transform").inverse_transform(data)

    def fit_transform(self, data: Any) -> JaxF64:
        return self.fit(data).transform(data)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------
    def copy(self) -> "ScalingModel":
        """Deep copy; the duplicate shares no fitted state with this model."""
        duplicate = ScalingModel(self.min_value, self.max_value, self.epsilon, self.scaler_type)
        duplicate._scaler = None if self._scaler is None else self._scaler.copy()
        return duplicate

    def __copy__(self) -> "ScalingModel":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "ScalingModel":
        return self.copy()

    def move(self) -> "ScalingModel":
        """Transfer tag, parameters and scaler into a new model.

        This model is reset to the default-constructed state afterwards.
        """
        moved = ScalingModel(self.min_value, self.max_value, self.epsilon, self.scaler_type)
        moved._scaler = self._scaler
        self._reset()
        return moved

    def _reset(self) -> None:
        self.scaler_type = ScalerType.NONE
        self.min_value = DEFAULT_MIN_VALUE
        self.max_value = DEFAULT_MAX_VALUE
        self.epsilon = DEFAULT_EPSILON
        self._scaler = None

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def _tag_value(self) -> Any:
        try:
            return ScalerType.parse(self.scaler_type).value
        except UnrecognizedScalerTypeError:
            return self.scaler_type

    def to_dict(self) -> ConfigDict:
        scaler: Optional[Dict[str, Any]] = None
        if self._scaler is not None:
            scaler = {"type": self._scaler.scaler_type.value, "params": self._scaler.to_dict()}
        return {
            "scaler_type": self._tag_value(),
            "min_value": self.min_value,
            "max_value": self.max_value,
            "epsilon": self.epsilon,
            "scaler": scaler,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScalingModel":
        tag = data.get("scaler_type", ScalerType.NONE.value)
        try:
            tag = ScalerType.parse(tag)
        except UnrecognizedScalerTypeError:
            logger.warning(f"Restoring ScalingModel with unrecognized scaler_type {tag!r}")
        model = cls(
            min_value=int(data.get("min_value", DEFAULT_MIN_VALUE)),
            max_value=int(data.get("max_value", DEFAULT_MAX_VALUE)),
            epsilon=float(data.get("epsilon", DEFAULT_EPSILON)),
            scaler_type=tag,
        )
        scaler = data.get("scaler")
        if scaler is not None:
            model._scaler = ScalerFactory.from_dict(scaler["type"], scaler.get("params", {}))
        return model

    def save(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info(f"Saved ScalingModel ({self._tag_value()}) to {path}")

    @classmethod
    def load(cls, path: Path | str) -> "ScalingModel":
        data = json.loads(Path(path).read_text())
        return cls.from_dict(data)

    def __repr__(self) -> str:
        return (
            f"ScalingModel(scaler_type={self._tag_value()!r}, min_value={self.min_value}, "
            f"max_value={self.max_value}, epsilon={self.epsilon}, scaler={self._scaler!r})"
        )


__all__ = ["ScalingModel"]
