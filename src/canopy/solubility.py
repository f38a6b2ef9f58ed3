"""Gas solubility in water.

Two unit conventions are supported:
    - Bunsen solubility coefficient [-] (default)
    - Henry solubility coefficient, concentration per partial pressure
      [mol/L/atm]

They convert into each other through the molar density of air at one
standard atmosphere (`air.air_molar`), with a factor 1000 L/m³.
"""

from __future__ import annotations

import jax.numpy as jnp
import pydantic
from jaxtyping import Array, Float

from canopy import constants
from canopy.air import air_molar


def solubility_co2(
    temperature: Float[Array, "..."] | float,
    salinity: pydantic.NonNegativeFloat | Float[Array, "..."] = 0.0,
    return_bunsen: bool = True,
) -> Float[Array, "..."]:
    """CO2 solubility in natural water.

    Empirical fit of Weiss (1974) to the data of Murray & Riley (1971), in the
    scaled temperature t = T / 100 K. Valid for roughly 273-313 K; outside
    that range the fit is extrapolated without warning.

    Args:
        temperature: Water temperature [K].
        salinity: Salinity [g/kg seawater].
        return_bunsen: Return the Bunsen coefficient [-] if True, otherwise
            the Henry coefficient [mol/L/atm].

    Returns:
        CO2 solubility coefficient.
    """
    t = jnp.asarray(temperature) * 1e-2
    kcp_co2 = jnp.exp(
        -58.0931
        + 90.5069 / t
        + 22.2940 * jnp.log(t)
        + salinity * (0.027766 - 0.025888 * t + 0.0050578 * t * t)
    )  # [mol/L/atm]

    if return_bunsen:
        return kcp_co2 * 1e3 / air_molar(temperature, constants.atm)
    return kcp_co2


def solubility_ocs(
    temperature: Float[Array, "..."] | float,
    return_bunsen: bool = True,
) -> Float[Array, "..."]:
    """Carbonyl sulfide (OCS) solubility in pure water.

    Fit of Elliott et al. (1989), as used in COSSM v1 (Sun et al. 2015).

    Args:
        temperature: Water temperature [K].
        return_bunsen: Return the Bunsen coefficient [-] if True, otherwise
            the Henry coefficient [mol/L/atm].

    Returns:
        OCS solubility coefficient.
    """
    k_ocs = temperature * jnp.exp(4050.32 / jnp.asarray(temperature) - 20.0007)  # [-]

    if return_bunsen:
        return k_ocs
    return k_ocs * air_molar(temperature, constants.atm) * 1e-3


def solubility_gas(gas: str, temperature: Float[Array, "..."] | float, **kwargs):
    """Solubility of an arbitrary gas species. Not implemented yet."""
    raise NotImplementedError(f"Solubility of '{gas}' is not implemented.")
