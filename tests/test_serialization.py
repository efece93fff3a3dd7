"""Persistence tests: to_dict / from_dict and JSON save / load."""
import json

import numpy as np
import pytest

from scalemodel import ScalerType, ScalingModel
from scalemodel.scalers import ScalerFactory

from conftest import STRATEGY_TYPES


@pytest.mark.parametrize("scaler_type", STRATEGY_TYPES)
class TestModelRoundTrip:

    def test_dict_round_trip_is_exact(self, scaler_type, correlated_dataset):
        model = ScalingModel(min_value=-1, max_value=2, epsilon=1e-4)
        model.scaler_type = scaler_type
        model.fit(correlated_dataset)

        restored = ScalingModel.from_dict(json.loads(json.dumps(model.to_dict())))

        assert restored.scaler_type is scaler_type
        assert (restored.min_value, restored.max_value, restored.epsilon) == (-1, 2, 1e-4)
        scaled = model.transform(correlated_dataset)
        np.testing.assert_array_equal(np.asarray(restored.transform(correlated_dataset)), np.asarray(scaled))
        np.testing.assert_array_equal(
            np.asarray(restored.inverse_transform(scaled)),
            np.asarray(model.inverse_transform(scaled)),
        )

    def test_save_load(self, scaler_type, dataset, tmp_path):
        model = ScalingModel()
        model.scaler_type = scaler_type
        model.fit(dataset)
        path = tmp_path / "models" / "scaling.json"
        model.save(path)

        loaded = ScalingModel.load(path)
        np.testing.assert_allclose(
            np.asarray(loaded.transform(dataset)),
            np.asarray(model.transform(dataset)),
            rtol=0.0,
            atol=0.0,
        )


class TestSerializedLayout:

    def test_unfitted_model(self):
        data = ScalingModel().to_dict()
        assert data == {
            "scaler_type": "none",
            "min_value": 0,
            "max_value": 1,
            "epsilon": 0.00005,
            "scaler": None,
        }
        restored = ScalingModel.from_dict(data)
        assert restored.scaler is None
        assert restored.scaler_type is ScalerType.NONE

    def test_fitted_payload(self):
        model = ScalingModel()
        model.scaler_type = ScalerType.MIN_MAX_SCALER
        model.fit([1.0, 2.0, 3.0, 4.0, 5.0])
        payload = model.to_dict()["scaler"]
        assert payload["type"] == "min_max_scaler"
        assert payload["params"]["item_min"] == [1.0]
        assert payload["params"]["item_max"] == [5.0]
        assert payload["params"]["n_features"] == 1

    def test_zca_nests_pca_state(self, correlated_dataset):
        scaler = ScalerFactory.create_scaler(ScalerType.ZCA_WHITENING, epsilon=1e-3).fit(correlated_dataset)
        params = scaler.to_dict()
        assert params["epsilon"] == 1e-3
        assert len(params["pca"]["eigenvectors"]) == 3

    def test_unrecognized_tag_is_kept(self):
        restored = ScalingModel.from_dict({"scaler_type": "robust_scaler"})
        assert restored.scaler_type == "robust_scaler"
        assert restored.to_dict()["scaler_type"] == "robust_scaler"
