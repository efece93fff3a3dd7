"""
src/scalemodel/scalers/zca_whitening.py
ZCA whitening: PCA whitening rotated back into the original feature basis.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from scalemodel.core.config import DEFAULT_EPSILON
from scalemodel.core.identifiers import ScalerType
from scalemodel.core.types import ConfigDict, JaxF64
from scalemodel.scalers.base import BaseScaler
from scalemodel.scalers.pca_whitening import PcaWhitening, check_epsilon


class ZcaWhitening(BaseScaler):
    """y = pca(x) V^T, i.e. (x - mean) V diag(1/sqrt(lambda + epsilon)) V^T.

    The learned state is an inner PcaWhitening; ZCA keeps whitened data as
    close as possible to the input in the least-squares sense.
    """

    scaler_type = ScalerType.ZCA_WHITENING

    def __init__(self, epsilon: float = DEFAULT_EPSILON) -> None:
        super().__init__()
        self.epsilon = check_epsilon(epsilon, "ZcaWhitening")
        self.pca = PcaWhitening(self.epsilon)

    def _init_params(self) -> Dict[str, Any]:
        return {"epsilon": self.epsilon}

    # Learned parameters, read through the inner PCA whitening
    @property
    def mean(self) -> Optional[JaxF64]:
        return self.pca.mean

    @property
    def eigenvalues(self) -> Optional[JaxF64]:
        return self.pca.eigenvalues

    @property
    def eigenvectors(self) -> Optional[JaxF64]:
        return self.pca.eigenvectors

    def _fit(self, X: JaxF64) -> None:
        self.pca._fit(X)
        self.pca.n_features = int(X.shape[1])

    def _transform(self, X: JaxF64) -> JaxF64:
        return self.pca._transform(X) @ self.pca.eigenvectors.T

    def _inverse_transform(self, X: JaxF64) -> JaxF64:
        return self.pca._inverse_transform(X @ self.pca.eigenvectors)

    def to_dict(self) -> ConfigDict:
        return {
            "epsilon": self.epsilon,
            "n_features": self.n_features,
            "pca": self.pca.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ZcaWhitening":
        scaler = cls(epsilon=float(data.get("epsilon", DEFAULT_EPSILON)))
        n_features = data.get("n_features")
        scaler.n_features = None if n_features is None else int(n_features)
        if data.get("pca") is not None:
            scaler.pca = PcaWhitening.from_dict(data["pca"])
        return scaler


__all__ = ["ZcaWhitening"]
