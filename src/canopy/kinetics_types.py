from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

import jax
from jaxtyping import Array, Float


TempDepModel = Literal["q10", "arrhenius", "enzyme"]


class TemperatureDependenceParams:
    """Base class of the temperature dependence parameter records.

    The family is closed: `Q10Params`, `ArrheniusParams` and `EnzymeParams`.
    Every record carries the reaction rate at its reference temperature
    (`reference_rate`), which `kinetics.evaluate` scales by the
    dimensionless ratio of the model.
    """

    model: ClassVar[TempDepModel]


@jax.tree_util.register_dataclass
@dataclass(frozen=True)
class Q10Params(TemperatureDependenceParams):
    """Q10 temperature dependence parameters.

    Attributes:
        q10: Rate change factor per 10 K warming [-].
        reference_temperature: Reference temperature [K].
        reference_rate: Reaction rate at the reference temperature, arbitrary unit.
    """

    model: ClassVar[TempDepModel] = "q10"

    q10: Float[Array, "..."] | float
    reference_temperature: Float[Array, "..."] | float  # [K]
    reference_rate: Float[Array, "..."] | float


@jax.tree_util.register_dataclass
@dataclass(frozen=True)
class ArrheniusParams(TemperatureDependenceParams):
    """Arrhenius temperature dependence parameters.

    Attributes:
        activation_energy: Activation energy [J/mol].
        reference_temperature: Reference temperature [K].
        reference_rate: Reaction rate at the reference temperature, arbitrary unit.
    """

    model: ClassVar[TempDepModel] = "arrhenius"

    activation_energy: Float[Array, "..."] | float  # [J/mol]
    reference_temperature: Float[Array, "..."] | float  # [K]
    reference_rate: Float[Array, "..."] | float


@jax.tree_util.register_dataclass
@dataclass(frozen=True)
class EnzymeParams(TemperatureDependenceParams):
    """Parameters of an enzyme reaction with a temperature optimum.

    Attributes:
        gibbs_free_energy_activation: Standard Gibbs free energy of activation
            of the active enzyme state [J/mol].
        enthalpy_deactivation: Standard enthalpy change from the active to the
            deactivated state [J/mol].
        entropy_deactivation: Standard entropy change from the active to the
            deactivated state [J/(mol K)].
        reference_temperature: Reference temperature [K].
        reference_rate: Reaction rate at the reference temperature, arbitrary unit.
    """

    model: ClassVar[TempDepModel] = "enzyme"

    gibbs_free_energy_activation: Float[Array, "..."] | float  # [J/mol]
    enthalpy_deactivation: Float[Array, "..."] | float  # [J/mol]
    entropy_deactivation: Float[Array, "..."] | float  # [J/(mol K)]
    reference_temperature: Float[Array, "..."] | float  # [K]
    reference_rate: Float[Array, "..."] | float


TEMP_DEP_TYPES: dict[str, type[TemperatureDependenceParams]] = {
    "q10": Q10Params,
    "arrhenius": ArrheniusParams,
    "enzyme": EnzymeParams,
}
