"""Tests for building temperature dependence records from configuration."""

import json

import jax
import jax.numpy as jnp
import pytest

import canopy
from canopy import kinetics, kinetics_utils
from canopy.kinetics_types import ArrheniusParams, EnzymeParams, Q10Params

jax.config.update("jax_enable_x64", True)


@pytest.fixture
def temp_deps_json(tmp_path):
    """Write a parameter file in the named-object layout."""
    data = {
        "Vcmax": {
            "model": "enzyme",
            "gibbs_free_energy_activation": 6e4,
            "enthalpy_deactivation": 2e5,
            "entropy_deactivation": 650.0,
            "reference_temperature": 298.15,
            "reference_rate": 60.0,
        },
        "Rd": {
            "model": "q10",
            "q10": 2.0,
            "reference_temperature": 298.15,
            "reference_rate": 2.0,
        },
    }
    json_path = tmp_path / "temp_deps.json"
    json_path.write_text(json.dumps(data), encoding="utf-8")
    return json_path


class TestTemperatureDependenceConfig:
    def test_build_arrhenius(self):
        config = kinetics_utils.TemperatureDependenceConfig(
            model="arrhenius",
            parameters={
                "activation_energy": 5e4,
                "reference_temperature": 298.15,
                "reference_rate": 1.0,
            },
        )

        params = kinetics_utils.build_temp_dep_from_config(config)

        assert params == ArrheniusParams(5e4, 298.15, 1.0)
        assert jnp.isclose(
            kinetics.evaluate(params, 283.15), 0.3435224255653669, atol=1e-10
        )

    def test_model_and_parameters_are_required(self):
        with pytest.raises(TypeError):
            kinetics_utils.TemperatureDependenceConfig()

    def test_unknown_model(self):
        with pytest.raises(ValueError, match="model must be one of"):
            kinetics_utils.TemperatureDependenceConfig(model="eyring", parameters={})

    def test_missing_parameter(self):
        with pytest.raises(ValueError, match="Missing parameters.*reference_rate"):
            kinetics_utils.TemperatureDependenceConfig(
                model="q10", parameters={"q10": 2.0, "reference_temperature": 298.15}
            )

    def test_unknown_parameter(self):
        with pytest.raises(ValueError, match="Unknown parameters.*e_act"):
            kinetics_utils.TemperatureDependenceConfig(
                model="arrhenius",
                parameters={
                    "activation_energy": 5e4,
                    "reference_temperature": 298.15,
                    "reference_rate": 1.0,
                    "e_act": 5e4,
                },
            )


class TestTempDepFromDict:
    def test_model_name_is_case_insensitive(self):
        params = kinetics_utils.temp_dep_from_dict(
            {
                "model": "Q10",
                "q10": 2.0,
                "reference_temperature": 298.15,
                "reference_rate": 1.0,
            }
        )
        assert params == Q10Params(2.0, 298.15, 1.0)

    def test_missing_model(self):
        with pytest.raises(ValueError, match="no 'model'"):
            kinetics_utils.temp_dep_from_dict({"q10": 2.0})


class TestLoadTempDepsFromJson:
    def test_named_object_layout(self, temp_deps_json):
        temp_deps = kinetics_utils.load_temp_deps_from_json(temp_deps_json)

        assert list(temp_deps) == ["Vcmax", "Rd"]
        assert isinstance(temp_deps["Vcmax"], EnzymeParams)
        assert temp_deps["Rd"] == Q10Params(2.0, 298.15, 2.0)

    def test_array_layout(self, tmp_path):
        data = {
            "temp_deps": [
                {
                    "name": "hydrolysis",
                    "model": "arrhenius",
                    "activation_energy": 4e4,
                    "reference_temperature": 293.15,
                    "reference_rate": 0.5,
                }
            ]
        }
        json_path = tmp_path / "temp_deps.json"
        json_path.write_text(json.dumps(data), encoding="utf-8")

        temp_deps = kinetics_utils.load_temp_deps_from_json(json_path)

        assert temp_deps == {"hydrolysis": ArrheniusParams(4e4, 293.15, 0.5)}

    def test_duplicate_names(self, tmp_path):
        entry = {
            "name": "Rd",
            "model": "q10",
            "q10": 2.0,
            "reference_temperature": 298.15,
            "reference_rate": 1.0,
        }
        json_path = tmp_path / "temp_deps.json"
        json_path.write_text(json.dumps({"temp_deps": [entry, entry]}), encoding="utf-8")

        with pytest.raises(ValueError, match="Duplicate"):
            kinetics_utils.load_temp_deps_from_json(json_path)

    def test_entry_not_an_object(self, tmp_path):
        json_path = tmp_path / "temp_deps.json"
        json_path.write_text(json.dumps({"Rd": 2.0}), encoding="utf-8")

        with pytest.raises(ValueError, match="must be an object"):
            kinetics_utils.load_temp_deps_from_json(json_path)

    def test_array_entry_not_an_object(self, tmp_path):
        json_path = tmp_path / "temp_deps.json"
        json_path.write_text(json.dumps({"temp_deps": ["Rd"]}), encoding="utf-8")

        with pytest.raises(ValueError, match="must be an object"):
            kinetics_utils.load_temp_deps_from_json(json_path)

    def test_non_numeric_parameter(self, tmp_path):
        data = {
            "Rd": {
                "model": "q10",
                "q10": None,
                "reference_temperature": 298.15,
                "reference_rate": 1.0,
            }
        }
        json_path = tmp_path / "temp_deps.json"
        json_path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(ValueError, match="Parameter 'q10' of model 'q10'"):
            kinetics_utils.load_temp_deps_from_json(json_path)

    def test_invalid_layout(self, tmp_path):
        json_path = tmp_path / "temp_deps.json"
        json_path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")

        with pytest.raises(ValueError, match="JSON must contain"):
            kinetics_utils.load_temp_deps_from_json(json_path)


def test_loaders_are_exported():
    assert canopy.temp_dep_from_dict is kinetics_utils.temp_dep_from_dict
    assert canopy.load_temp_deps_from_json is kinetics_utils.load_temp_deps_from_json
    assert canopy.build_temp_dep_from_config is kinetics_utils.build_temp_dep_from_config


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
