"""
scalemodel/core/types.py: central type definitions and the NumPy/JAX gateway

NUMPY Domain → NpF64 (caller-supplied data, serialized params)
JAX Domain   → JaxF64 (learned parameters and transformed output)

Every array entering a scaler passes through to_jax_f64(); every array
leaving for serialization passes through to_np_f64().
"""

from beartype import beartype
from jaxtyping import Float64, jaxtyped
import jax
from jax import Array
import jax.numpy as jnp
import numpy as np

# ==========================================
# Type aliases
# ==========================================
NpF64 = Float64[np.ndarray, "..."]
JaxF64 = Float64[Array, "..."]

# Values allowed in a serialized scaler / model dict
PrimitiveValue = str | float | int | bool | None
ParamValue = PrimitiveValue | list[float] | list[list[float]]
ConfigL1 = ParamValue | dict[str, ParamValue]
ConfigL2 = ConfigL1 | dict[str, ConfigL1]
ConfigDict = dict[str, ConfigL2]


# ==========================================
# Domain Gateway: NumPy <-> JAX transfer
# ==========================================

@jaxtyped(typechecker=beartype)
def to_jax_f64(x: NpF64) -> JaxF64:
    """NumPy → JAX conversion gateway.

    - beartype accepts numpy.float64 arrays only
    - NaN/Inf is rejected here, before any statistic is computed
    """
    if np.any(np.isnan(x)):
        raise ValueError(f"NaN detected in scaler input! shape={x.shape}")
    if np.any(np.isinf(x)):
        raise ValueError(f"Inf detected in scaler input! shape={x.shape}")
    return jax.device_put(jnp.array(x, dtype=jnp.float64))


@jaxtyped(typechecker=beartype)
def to_np_f64(x: JaxF64) -> NpF64:
    """JAX → NumPy conversion gateway."""
    return np.asarray(x, dtype=np.float64)


__all__ = [
    "NpF64",
    "JaxF64",
    "ConfigDict",
    "to_jax_f64",
    "to_np_f64",
]
