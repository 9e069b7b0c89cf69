"""A much simpler (and thus potentially less buggy) version of pure water."""

import typing

from porefluids import toolbox
from porefluids.components.base import Component
from porefluids.components.ideal_gas import IdealGas
from porefluids.constants import c
from porefluids.types import Scalar

__all__ = ["SimpleH2O", "iapws_region4_vapor_pressure"]

_REGION4_COEFFICIENTS: typing.Tuple[float, ...] = (
    0.11670521452767e4,
    -0.72421316703206e6,
    -0.17073846940092e2,
    0.12020824702470e5,
    -0.32325550322333e7,
    0.14915108613530e2,
    -0.48232657361591e4,
    0.40511340542057e6,
    -0.23855557567849,
    0.65017534844798e3,
)


def iapws_region4_vapor_pressure(
    temperature: Scalar,
    triple_temperature: float = 273.16,
    critical_temperature: float = 647.096,
    critical_pressure: float = 22.064e6,
) -> Scalar:
    """
    Vapour pressure of water using the saturation equation of IAPWS-IF97 (region 4).

    Returns 0 below the triple point and the critical pressure above the critical point.

    :param temperature: Temperature (K)
    :return: Vapour pressure (Pa)
    """
    if temperature > critical_temperature:
        return toolbox.to_lhs(critical_pressure, toolbox.scalar_type_of(temperature))
    if temperature < triple_temperature:
        return toolbox.to_lhs(0.0, toolbox.scalar_type_of(temperature))

    n = _REGION4_COEFFICIENTS
    sigma = temperature + n[8] / (temperature - n[9])
    A = (sigma + n[0]) * sigma + n[1]
    B = (n[2] * sigma + n[3]) * sigma + n[4]
    C = (n[5] * sigma + n[6]) * sigma + n[7]

    tmp = 2.0 * C / (toolbox.sqrt(B * B - 4.0 * A * C) - B)
    tmp = tmp * tmp
    tmp = tmp * tmp
    return 1e6 * tmp


class SimpleH2O(Component):
    """
    Simple water model with constant liquid properties and an ideal-gas vapour.

    Liquid: incompressible, ρ = 1000 kg/m³, μ = 1e-3 Pa·s.
    Vapour: ideal gas, μ = 1e-5 Pa·s.
    Enthalpies are linear in temperature relative to 293.15 K.
    """

    _REFERENCE_TEMPERATURE = 293.15
    _LIQUID_HEAT_CAPACITY = 4180.0
    _GAS_HEAT_CAPACITY = 1976.0
    _LATENT_HEAT = 2.501e6

    def name(self) -> str:
        return "H2O"

    def molar_mass(self) -> float:
        return 18e-3

    def critical_temperature(self) -> float:
        return 647.096

    def critical_pressure(self) -> float:
        return 22.064e6

    def acentric_factor(self) -> float:
        return 0.344

    def triple_temperature(self) -> float:
        return 273.16

    def triple_pressure(self) -> float:
        return 611.657

    def gas_is_ideal(self) -> bool:
        return True

    def gas_is_compressible(self) -> bool:
        return True

    def liquid_is_compressible(self) -> bool:
        return False

    def vapor_pressure(self, temperature: Scalar) -> Scalar:
        return iapws_region4_vapor_pressure(
            temperature,
            triple_temperature=self.triple_temperature(),
            critical_temperature=self.critical_temperature(),
            critical_pressure=self.critical_pressure(),
        )

    def gas_density(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return IdealGas.density(self.molar_mass(), temperature, pressure)

    def liquid_density(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return toolbox.to_lhs(1000.0, toolbox.scalar_type_of(temperature, pressure))

    def gas_enthalpy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return (
            temperature - self._REFERENCE_TEMPERATURE
        ) * self._GAS_HEAT_CAPACITY + self._LATENT_HEAT

    def liquid_enthalpy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return (temperature - self._REFERENCE_TEMPERATURE) * self._LIQUID_HEAT_CAPACITY

    def gas_internal_energy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return (
            self.gas_enthalpy(temperature, pressure)
            - c.GAS_CONSTANT * temperature / self.molar_mass()
        )

    def liquid_internal_energy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return self.liquid_enthalpy(temperature, pressure) - pressure / self.liquid_density(
            temperature, pressure
        )

    def gas_heat_capacity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return toolbox.to_lhs(
            self._GAS_HEAT_CAPACITY, toolbox.scalar_type_of(temperature, pressure)
        )

    def liquid_heat_capacity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return toolbox.to_lhs(
            self._LIQUID_HEAT_CAPACITY, toolbox.scalar_type_of(temperature, pressure)
        )

    def gas_viscosity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return toolbox.to_lhs(1e-05, toolbox.scalar_type_of(temperature, pressure))

    def liquid_viscosity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return toolbox.to_lhs(1e-03, toolbox.scalar_type_of(temperature, pressure))

    def gas_thermal_conductivity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return toolbox.to_lhs(0.028224, toolbox.scalar_type_of(temperature, pressure))

    def liquid_thermal_conductivity(
        self, temperature: Scalar, pressure: Scalar
    ) -> Scalar:
        return toolbox.to_lhs(0.578078, toolbox.scalar_type_of(temperature, pressure))
