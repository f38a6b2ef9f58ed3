"""Temperature response curves of the kinetics and solubility models.

This script evaluates the Q10, Arrhenius and enzyme temperature dependences
with typical leaf-level parameters, together with CO2 and OCS solubility in
water, over the 0-40 degC range where the solubility fits are valid.
"""

import jax
import jax.numpy as jnp
import matplotlib.pyplot as plt

from canopy import constants
from canopy.kinetics import enzyme_temperature_optimum, evaluate
from canopy.kinetics_types import ArrheniusParams, EnzymeParams, Q10Params
from canopy.solubility import solubility_co2, solubility_ocs

jax.config.update("jax_enable_x64", True)

print("=" * 80)
print("Temperature response of reaction rates and gas solubility")
print("=" * 80)

# Parameters (rates normalized to 1 at 25 degC)
T_ref = 298.15  # [K]
temp_deps = {
    "Q10 (Q10 = 2)": Q10Params(q10=2.0, reference_temperature=T_ref, reference_rate=1.0),
    "Arrhenius (E = 50 kJ/mol)": ArrheniusParams(
        activation_energy=5e4, reference_temperature=T_ref, reference_rate=1.0
    ),
    "Enzyme (dHd = 200 kJ/mol)": EnzymeParams(
        gibbs_free_energy_activation=4e4,
        enthalpy_deactivation=2e5,
        entropy_deactivation=660.0,
        reference_temperature=T_ref,
        reference_rate=1.0,
    ),
}

T_opt = enzyme_temperature_optimum(4e4, 2e5, 660.0)
print(f"\nEnzyme temperature optimum: {T_opt:.2f} K ({T_opt - constants.T_0:.2f} °C)")

T = jnp.linspace(273.15, 313.15, 81)
T_celsius = T - constants.T_0

print("\nRate at 15 °C relative to 25 °C:")
for label, params in temp_deps.items():
    print(f"  {label:<28s} {evaluate(params, 288.15):.4f}")

print("\nSolubility at 25 °C:")
print(f"  CO2 Bunsen: {solubility_co2(298.15):.4f}")
print(f"  CO2 Bunsen (S = 35 g/kg): {solubility_co2(298.15, salinity=35.0):.4f}")
print(f"  OCS Bunsen: {solubility_ocs(298.15):.4f}")
print(f"  OCS Henry:  {solubility_ocs(298.15, return_bunsen=False):.5f} mol/L/atm")

# Plot
fig, axes = plt.subplots(1, 2, figsize=(12, 4.5))

for label, params in temp_deps.items():
    axes[0].plot(T_celsius, evaluate(params, T), label=label)
axes[0].axvline(T_opt - constants.T_0, color="gray", linestyle="--", linewidth=0.8)
axes[0].set_xlabel("Temperature [°C]")
axes[0].set_ylabel("k / k(25 °C) [-]")
axes[0].set_title("Temperature dependence")
axes[0].legend()
axes[0].grid(True, alpha=0.3)

axes[1].plot(T_celsius, solubility_co2(T), label="CO2, fresh water")
axes[1].plot(T_celsius, solubility_co2(T, salinity=35.0), label="CO2, S = 35 g/kg")
axes[1].plot(T_celsius, solubility_ocs(T), label="OCS, fresh water")
axes[1].set_xlabel("Temperature [°C]")
axes[1].set_ylabel("Bunsen solubility [-]")
axes[1].set_title("Gas solubility")
axes[1].legend()
axes[1].grid(True, alpha=0.3)

plt.tight_layout()
plt.savefig("temperature_response.png", dpi=150)
print("\nPlot saved to: temperature_response.png")
