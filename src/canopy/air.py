"""Properties of air needed by the solubility conversions."""

from __future__ import annotations

import jax.numpy as jnp
from jaxtyping import Array, Float

from canopy import constants


def air_molar(
    temperature: Float[Array, "..."] | float,
    pressure: Float[Array, "..."] | float = constants.atm,
) -> Float[Array, "..."]:
    """Molar density of air from the ideal gas law.

        n / V = p / (R * T)

    Args:
        temperature: Temperature [K].
        pressure: Air pressure [Pa]. Defaults to one standard atmosphere.

    Returns:
        Molar density of air [mol/m³].
    """
    return jnp.asarray(pressure) / (constants.R * jnp.asarray(temperature))
