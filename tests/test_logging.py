"""Tests for fit logging through module loggers."""
import logging

import jax
import jax.numpy as jnp

import scalemodel
from scalemodel import ScalerType, ScalingModel


def test_fit_is_logged(caplog):
    model = ScalingModel()
    model.scaler_type = ScalerType.MEAN_NORMALIZATION
    with caplog.at_level(logging.INFO, logger="scalemodel"):
        model.fit([[1.0, 2.0], [3.0, 5.0]])
    assert any("Fitting MeanNormalization" in record.getMessage() for record in caplog.records)


def test_library_installs_no_handlers():
    ScalingModel(scaler_type=ScalerType.STANDARD_SCALER).fit([[1.0], [2.0]])
    for name in ("scalemodel", "scalemodel.model", "scalemodel.scalers.base"):
        assert logging.getLogger(name).handlers == []


def test_package_import_enables_x64():
    assert jax.config.jax_enable_x64
    assert jnp.zeros(2).dtype == jnp.float64
    assert not hasattr(scalemodel, "utils")
