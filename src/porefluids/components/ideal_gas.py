"""Relations valid for an ideal gas."""

from porefluids.constants import c
from porefluids.types import Scalar

__all__ = ["IdealGas"]


class IdealGas:
    """Ideal gas law, p = ρ_molar R T."""

    @staticmethod
    def gas_constant() -> float:
        """The ideal gas constant (J/(mol·K))."""
        return c.GAS_CONSTANT

    @staticmethod
    def density(average_molar_mass: Scalar, temperature: Scalar, pressure: Scalar) -> Scalar:
        """
        Mass density of an ideal gas.

        :param average_molar_mass: Molar mass of the gas (kg/mol)
        :param temperature: Temperature (K)
        :param pressure: Pressure (Pa)
        :return: Density (kg/m³)
        """
        return pressure * average_molar_mass / (c.GAS_CONSTANT * temperature)

    @staticmethod
    def molar_density(temperature: Scalar, pressure: Scalar) -> Scalar:
        """Molar density of an ideal gas (mol/m³)."""
        return pressure / (c.GAS_CONSTANT * temperature)

    @staticmethod
    def pressure(temperature: Scalar, molar_density: Scalar) -> Scalar:
        """Pressure of an ideal gas (Pa) given its molar density (mol/m³)."""
        return c.GAS_CONSTANT * temperature * molar_density
