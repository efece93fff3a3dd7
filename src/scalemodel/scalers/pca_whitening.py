"""
src/scalemodel/scalers/pca_whitening.py
PCA whitening: rotate onto the covariance eigenbasis and normalize variance.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import jax.numpy as jnp

from scalemodel.core.config import DEFAULT_EPSILON
from scalemodel.core.exceptions import InvalidParameterError
from scalemodel.core.identifiers import ScalerType
from scalemodel.core.types import JaxF64
from scalemodel.scalers.base import BaseScaler


def check_epsilon(epsilon: float, owner: str) -> float:
    epsilon = float(epsilon)
    if epsilon < 0.0:
        raise InvalidParameterError(
            f"{owner} regularization parameter must be non-negative, got {epsilon}.",
            context={"epsilon": epsilon},
        )
    return epsilon


class PcaWhitening(BaseScaler):
    """Whitening in the PCA basis.

    Fit computes the sample covariance C of the centered data (normalized by
    N - 1, or by N for a single sample) and its eigendecomposition
    C = V diag(lambda) V^T. The regulariser ``epsilon`` is added to every
    eigenvalue so near-singular covariances stay invertible:

        transform:          y = (x - mean) V / sqrt(lambda + epsilon)
        inverse_transform:  x = (y * sqrt(lambda + epsilon)) V^T + mean

    With epsilon = 0 and a rank-deficient covariance the transform divides
    by zero; that is the caller's choice of regulariser.
    """

    scaler_type = ScalerType.PCA_WHITENING
    _STATE_FIELDS = ("mean", "eigenvalues", "eigenvectors")

    def __init__(self, epsilon: float = DEFAULT_EPSILON) -> None:
        super().__init__()
        self.epsilon = check_epsilon(epsilon, "PcaWhitening")
        self.mean: Optional[JaxF64] = None
        self.eigenvalues: Optional[JaxF64] = None
        self.eigenvectors: Optional[JaxF64] = None

    def _init_params(self) -> Dict[str, Any]:
        return {"epsilon": self.epsilon}

    @classmethod
    def _init_keys(cls) -> Tuple[str, ...]:
        return ("epsilon",)

    def _fit(self, X: JaxF64) -> None:
        n_samples = X.shape[0]
        self.mean = jnp.mean(X, axis=0)
        centered = X - self.mean
        covariance = centered.T @ centered / max(n_samples - 1, 1)
        eigenvalues, eigenvectors = jnp.linalg.eigh(covariance)
        # eigh can return tiny negative values for PSD matrices
        self.eigenvalues = jnp.maximum(eigenvalues, 0.0) + self.epsilon
        self.eigenvectors = eigenvectors

    def _transform(self, X: JaxF64) -> JaxF64:
        return ((X - self.mean) @ self.eigenvectors) / jnp.sqrt(self.eigenvalues)

    def _inverse_transform(self, X: JaxF64) -> JaxF64:
        return (X * jnp.sqrt(self.eigenvalues)) @ self.eigenvectors.T + self.mean


__all__ = ["PcaWhitening", "check_epsilon"]
