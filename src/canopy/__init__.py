"""Building blocks for biometeorological canopy models.

Formulas are written with `jax.numpy`, which computes in single precision
unless double precision is enabled before the first call:

    import jax
    jax.config.update("jax_enable_x64", True)

In single precision results carry relative errors of about 1e-6.
"""

from .air import air_molar
from .kinetics import (
    arrhenius_ratio,
    enzyme_ratio,
    enzyme_temperature_optimum,
    evaluate,
    q10_ratio,
)
from .kinetics_types import (
    ArrheniusParams,
    EnzymeParams,
    Q10Params,
    TemperatureDependenceParams,
)
from .kinetics_utils import (
    TemperatureDependenceConfig,
    build_temp_dep_from_config,
    load_temp_deps_from_json,
    temp_dep_from_dict,
)
from .solubility import solubility_co2, solubility_gas, solubility_ocs

__all__ = [
    "air_molar",
    "arrhenius_ratio",
    "enzyme_ratio",
    "enzyme_temperature_optimum",
    "evaluate",
    "q10_ratio",
    "ArrheniusParams",
    "EnzymeParams",
    "Q10Params",
    "TemperatureDependenceParams",
    "TemperatureDependenceConfig",
    "build_temp_dep_from_config",
    "load_temp_deps_from_json",
    "temp_dep_from_dict",
    "solubility_co2",
    "solubility_gas",
    "solubility_ocs",
]
