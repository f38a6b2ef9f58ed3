"""Temperature dependence of reaction rates.

Three models of the ratio k(T) / k(T_ref):
    - Q10: exponential change by a factor Q10 per 10 K
    - Arrhenius: exponential in 1/T, governed by an activation energy
    - Enzyme: two-state (active/deactivated) model with a temperature optimum
      (Johnson et al. 1942; Sharpe & DeMichele 1977; Peterson et al. 2004)

All temperatures are in kelvin. The ratio functions do not guard against
invalid input; zero temperatures or a negative Q10 give inf/NaN.
"""

from __future__ import annotations

import jax.numpy as jnp
from jaxtyping import Array, Float

from canopy import constants
from canopy.kinetics_types import (
    ArrheniusParams,
    EnzymeParams,
    Q10Params,
    TemperatureDependenceParams,
)


def arrhenius_ratio(
    activation_energy: Float[Array, "..."] | float,
    reference_temperature: Float[Array, "..."] | float,
    temperature: Float[Array, "..."] | float,
) -> Float[Array, "..."]:
    """Rate ratio k(T) / k(T_ref) from the Arrhenius function.

        k / k_ref = exp[-E_act / R * (1/T - 1/T_ref)]

    Args:
        activation_energy: Activation energy E_act [J/mol].
        reference_temperature: Reference temperature T_ref [K].
        temperature: Temperature T [K].

    Returns:
        Dimensionless rate ratio.
    """
    temperature = jnp.asarray(temperature)
    return jnp.exp(
        activation_energy
        * (temperature - reference_temperature)
        / (constants.R * reference_temperature * temperature)
    )


def q10_ratio(
    q10: Float[Array, "..."] | float,
    reference_temperature: Float[Array, "..."] | float,
    temperature: Float[Array, "..."] | float,
) -> Float[Array, "..."]:
    """Rate ratio k(T) / k(T_ref) from a Q10 value.

        k / k_ref = Q10 ** ((T - T_ref) / 10 K)

    Args:
        q10: Q10 value [-]. Must be positive for a real result.
        reference_temperature: Reference temperature T_ref [K].
        temperature: Temperature T [K].

    Returns:
        Dimensionless rate ratio.
    """
    return jnp.power(q10, 0.1 * (jnp.asarray(temperature) - reference_temperature))


def _enzyme_rate(
    gibbs_free_energy_activation: Float[Array, "..."] | float,
    enthalpy_deactivation: Float[Array, "..."] | float,
    entropy_deactivation: Float[Array, "..."] | float,
    temperature: Float[Array, "..."] | float,
) -> Float[Array, "..."]:
    """Enzyme reaction rate in an arbitrary unit.

        f(T) = exp(-dG_a / (R T)) / (1 + exp(-(dH_d - T dS_d) / (R T)))
    """
    R = constants.R
    temperature = jnp.asarray(temperature)
    return jnp.exp(-gibbs_free_energy_activation / (R * temperature)) / (
        1.0 + jnp.exp((entropy_deactivation - enthalpy_deactivation / temperature) / R)
    )


def enzyme_ratio(
    gibbs_free_energy_activation: Float[Array, "..."] | float,
    enthalpy_deactivation: Float[Array, "..."] | float,
    entropy_deactivation: Float[Array, "..."] | float,
    reference_temperature: Float[Array, "..."] | float,
    temperature: Float[Array, "..."] | float,
) -> Float[Array, "..."]:
    """Rate ratio V(T) / V(T_ref) of an enzyme reaction with a temperature optimum.

        V(T) / V(T_ref) = f(T) / f(T_ref)
        f(T) = exp(-dG_a / (R T)) / (1 + exp(-(dH_d - T dS_d) / (R T)))

    Interpretations of the thermodynamic parameters differ in the literature,
    the functional form is the same.

    Args:
        gibbs_free_energy_activation: Gibbs free energy of activation dG_a [J/mol].
        enthalpy_deactivation: Enthalpy change of deactivation dH_d [J/mol].
        entropy_deactivation: Entropy change of deactivation dS_d [J/(mol K)].
        reference_temperature: Reference temperature T_ref [K].
        temperature: Temperature T [K].

    Returns:
        Dimensionless rate ratio.
    """
    return _enzyme_rate(
        gibbs_free_energy_activation,
        enthalpy_deactivation,
        entropy_deactivation,
        temperature,
    ) / _enzyme_rate(
        gibbs_free_energy_activation,
        enthalpy_deactivation,
        entropy_deactivation,
        reference_temperature,
    )


def enzyme_temperature_optimum(
    gibbs_free_energy_activation: Float[Array, "..."] | float,
    enthalpy_deactivation: Float[Array, "..."] | float,
    entropy_deactivation: Float[Array, "..."] | float,
) -> Float[Array, "..."]:
    """Temperature optimum of an enzyme reaction [K].

        T_opt = dH_d / (dS_d + R ln(dH_d / dG_a - 1))

    Raises:
        ValueError: If dH_d / dG_a <= 1 or is not finite, where no optimum
            exists.
    """
    enthalpy_ratio = jnp.asarray(enthalpy_deactivation) / gibbs_free_energy_activation
    if jnp.any(~jnp.isfinite(enthalpy_ratio)) or jnp.any(enthalpy_ratio <= 1.0):
        raise ValueError(
            "No temperature optimum: enthalpy_deactivation / "
            f"gibbs_free_energy_activation must be finite and > 1, got {enthalpy_ratio}."
        )

    return enthalpy_deactivation / (
        entropy_deactivation + constants.R * jnp.log(enthalpy_ratio - 1.0)
    )


def evaluate(
    parameters: TemperatureDependenceParams,
    temperature: Float[Array, "..."] | float,
) -> Float[Array, "..."]:
    """Reaction rate at `temperature` for a temperature dependence record.

    The rate is `parameters.reference_rate` times the ratio of the model the
    record belongs to.

    Args:
        parameters: One of `Q10Params`, `ArrheniusParams`, `EnzymeParams`.
        temperature: Temperature [K].

    Returns:
        Reaction rate in the unit of `parameters.reference_rate`.
    """
    if isinstance(parameters, Q10Params):
        ratio = q10_ratio(
            parameters.q10, parameters.reference_temperature, temperature
        )
    elif isinstance(parameters, ArrheniusParams):
        ratio = arrhenius_ratio(
            parameters.activation_energy, parameters.reference_temperature, temperature
        )
    elif isinstance(parameters, EnzymeParams):
        ratio = enzyme_ratio(
            parameters.gibbs_free_energy_activation,
            parameters.enthalpy_deactivation,
            parameters.entropy_deactivation,
            parameters.reference_temperature,
            temperature,
        )
    else:
        raise TypeError(
            f"Unknown temperature dependence parameters: {type(parameters).__name__}"
        )

    return parameters.reference_rate * ratio
