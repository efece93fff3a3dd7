"""Tests for ScalerType parsing, ScalingConfig validation and ScalerFactory."""
import pytest

from scalemodel import InvalidParameterError, ScalerType, ScalingConfig, UnrecognizedScalerTypeError
from scalemodel.core.interfaces import Scaler
from scalemodel.scalers import SCALER_CLASSES, MinMaxScaler, PcaWhitening, ScalerFactory, StandardScaler

from conftest import STRATEGY_TYPES


class TestScalerType:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("standard_scaler", ScalerType.STANDARD_SCALER),
            ("MIN_MAX_SCALER", ScalerType.MIN_MAX_SCALER),
            ("pca-whitening", ScalerType.PCA_WHITENING),
            (" zca_whitening ", ScalerType.ZCA_WHITENING),
            (ScalerType.NONE, ScalerType.NONE),
        ],
    )
    def test_parse(self, raw, expected):
        assert ScalerType.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["robust", "", 3, None])
    def test_parse_rejects(self, raw):
        with pytest.raises(UnrecognizedScalerTypeError):
            ScalerType.parse(raw)

    def test_six_strategies(self):
        assert len(STRATEGY_TYPES) == 6
        assert not ScalerType.NONE.is_strategy
        assert str(ScalerType.MAX_ABS_SCALER) == "max_abs_scaler"


class TestScalingConfig:

    def test_round_trip(self):
        config = ScalingConfig(ScalerType.PCA_WHITENING, min_value=0, max_value=1, epsilon=1e-5).validate()
        assert ScalingConfig.from_dict(config.to_dict()) == config

    def test_from_dict_defaults(self):
        config = ScalingConfig.from_dict({"scaler_type": "mean_normalization"})
        assert (config.min_value, config.max_value, config.epsilon) == (0, 1, 0.00005)

    @pytest.mark.parametrize(
        "kwargs",
        [
            dict(scaler_type=ScalerType.NONE, min_value=0, max_value=1, epsilon=0.1),
            dict(scaler_type=ScalerType.MIN_MAX_SCALER, min_value=4, max_value=1, epsilon=0.1),
            dict(scaler_type=ScalerType.ZCA_WHITENING, min_value=0, max_value=1, epsilon=-0.1),
        ],
    )
    def test_validate_rejects(self, kwargs):
        with pytest.raises(InvalidParameterError) as excinfo:
            ScalingConfig(**kwargs).validate(context="preset")
        assert "preset" in str(excinfo.value)
        assert excinfo.value.to_dict()["type"] == "InvalidParameterError"

    def test_missing_tag(self):
        with pytest.raises(InvalidParameterError):
            ScalingConfig.from_dict({"min_value": 0})


class TestScalerFactory:

    @pytest.mark.parametrize("scaler_type", STRATEGY_TYPES)
    def test_creates_unfitted_protocol_instances(self, scaler_type):
        scaler = ScalerFactory.create_scaler(scaler_type)
        assert isinstance(scaler, SCALER_CLASSES[scaler_type])
        assert isinstance(scaler, Scaler)
        assert not scaler.is_fitted

    def test_parameters_routed(self):
        assert isinstance(ScalerFactory.create_scaler("standard_scaler", epsilon=3.0), StandardScaler)
        min_max = ScalerFactory.create_scaler(ScalerType.MIN_MAX_SCALER, min_value=-4, max_value=4)
        assert isinstance(min_max, MinMaxScaler)
        assert (min_max.min_value, min_max.max_value) == (-4, 4)
        pca = ScalerFactory.create_scaler(ScalerType.PCA_WHITENING, epsilon=0.25)
        assert isinstance(pca, PcaWhitening)
        assert pca.epsilon == 0.25

    def test_none_is_not_a_strategy(self):
        with pytest.raises(UnrecognizedScalerTypeError):
            ScalerFactory.create_scaler(ScalerType.NONE)
