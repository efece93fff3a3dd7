"""
src/scalemodel/scalers/base.py
ABC for all scaling strategies.

Data layout: rows are samples, columns are features. A 1-D array is treated
as a single feature column and results are returned in the caller's shape.
"""
from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Tuple

import jax.numpy as jnp
import numpy as np

from scalemodel.core.exceptions import NotFittedError, ShapeMismatchError
from scalemodel.core.identifiers import ScalerType
from scalemodel.core.types import ConfigDict, JaxF64, to_jax_f64, to_np_f64

logger = logging.getLogger(__name__)


class BaseScaler(ABC):
    """Shared fit / transform plumbing; subclasses implement the math."""

    scaler_type: ClassVar[ScalerType]
    # Names of learned array attributes written by _fit and serialized by to_dict
    _STATE_FIELDS: ClassVar[Tuple[str, ...]] = ()

    def __init__(self) -> None:
        self.n_features: Optional[int] = None

    # ------------------------------------------------------------------
    # Math hooks
    # ------------------------------------------------------------------
    @abstractmethod
    def _fit(self, X: JaxF64) -> None:
        """Learn parameters from a validated (n_samples, n_features) matrix."""

    @abstractmethod
    def _transform(self, X: JaxF64) -> JaxF64:
        """Apply the learned transform to a validated matrix."""

    @abstractmethod
    def _inverse_transform(self, X: JaxF64) -> JaxF64:
        """Undo _transform on a validated matrix."""

    def _init_params(self) -> Dict[str, Any]:
        """Constructor arguments needed to rebuild this scaler."""
        return {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def is_fitted(self) -> bool:
        return self.n_features is not None

    def fit(self, data: Any) -> "BaseScaler":
        X, _ = self._prepare(data, fitting=True)
        logger.info(f"Fitting {type(self).__name__} on data of shape {tuple(X.shape)}")
        self._fit(X)
        self.n_features = int(X.shape[1])
        return self

    def transform(self, data: Any) -> JaxF64:
        self._check_fitted("transform")
        X, was_1d = self._prepare(data, fitting=False)
        return self._restore_shape(self._transform(X), was_1d)

    def inverse_transform(self, data: Any) -> JaxF64:
        self._check_fitted("inverse_transform")
        X, was_1d = self._prepare(data, fitting=False)
        return self._restore_shape(self._inverse_transform(X), was_1d)

    def fit_transform(self, data: Any) -> JaxF64:
        return self.fit(data).transform(data)

    def copy(self) -> "BaseScaler":
        """Deep, independent duplicate (learned state included)."""
        return copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_dict(self) -> ConfigDict:
        data: ConfigDict = dict(self._init_params())
        data["n_features"] = self.n_features
        for name in self._STATE_FIELDS:
            value = getattr(self, name)
            data[name] = None if value is None else to_np_f64(value).tolist()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseScaler":
        init_keys = cls._init_keys()
        scaler = cls(**{k: data[k] for k in init_keys if k in data})
        n_features = data.get("n_features")
        scaler.n_features = None if n_features is None else int(n_features)
        for name in cls._STATE_FIELDS:
            value = data.get(name)
            if value is not None:
                setattr(scaler, name, jnp.asarray(value, dtype=jnp.float64))
        return scaler

    @classmethod
    def _init_keys(cls) -> Tuple[str, ...]:
        return ()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _check_fitted(self, operation: str) -> None:
        if not self.is_fitted:
            raise NotFittedError(
                f"{type(self).__name__} is not fitted. Call fit() before {operation}().",
                context={"scaler": type(self).__name__},
            )

    def _prepare(self, data: Any, *, fitting: bool) -> Tuple[JaxF64, bool]:
        arr = np.asarray(data, dtype=np.float64)
        if arr.ndim not in (1, 2):
            raise ValueError(f"{type(self).__name__} expects 1-D or 2-D data, got shape {arr.shape}")
        was_1d = arr.ndim == 1
        if was_1d:
            arr = arr.reshape(-1, 1)
        if fitting and arr.shape[0] == 0:
            raise ValueError(f"{type(self).__name__} cannot be fitted on an empty dataset.")
        if not fitting and arr.shape[1] != self.n_features:
            raise ShapeMismatchError(expected=int(self.n_features), actual=int(arr.shape[1]))
        return to_jax_f64(arr), was_1d

    @staticmethod
    def _restore_shape(X: JaxF64, was_1d: bool) -> JaxF64:
        return X.reshape(-1) if was_1d else X

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self._init_params().items())
        state = "fitted" if self.is_fitted else "unfitted"
        return f"{type(self).__name__}({params}) [{state}]"


def replace_zeros(values: JaxF64, fill: float = 1.0) -> JaxF64:
    """Replace exact zeros (constant features) so later divisions stay finite."""
    return jnp.where(values == 0.0, fill, values)


__all__ = ["BaseScaler", "replace_zeros"]
