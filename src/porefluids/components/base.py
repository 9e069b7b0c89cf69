"""Capability interface shared by all pure-component models."""

import typing

from porefluids.types import Scalar

__all__ = ["Component"]


class Component:
    """
    Base class of pure chemical substances.

    Defines the static data and the phase-specific correlations fluid systems
    may query. Every correlation is a pure function of temperature (K) and
    pressure (Pa) that accepts floats or `Evaluation`s. Concrete components
    override what they provide; everything else raises `NotImplementedError`
    naming the component and the missing method.
    """

    is_tabulated: typing.ClassVar[bool] = False
    """Whether the component serves its properties from precomputed tables."""

    def _not_implemented(self, method: str) -> NotImplementedError:
        return NotImplementedError(
            f"{type(self).__name__}.{method} is not implemented"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # Static data

    def name(self) -> str:
        """A human readable name for the component."""
        raise self._not_implemented("name")

    def molar_mass(self) -> float:
        """The molar mass of the component (kg/mol)."""
        raise self._not_implemented("molar_mass")

    def critical_temperature(self) -> float:
        """Critical temperature of the component (K)."""
        raise self._not_implemented("critical_temperature")

    def critical_pressure(self) -> float:
        """Critical pressure of the component (Pa)."""
        raise self._not_implemented("critical_pressure")

    def acentric_factor(self) -> float:
        """Acentric factor of the component (dimensionless)."""
        raise self._not_implemented("acentric_factor")

    def triple_temperature(self) -> float:
        """Temperature at the component's triple point (K)."""
        raise self._not_implemented("triple_temperature")

    def triple_pressure(self) -> float:
        """Pressure at the component's triple point (Pa)."""
        raise self._not_implemented("triple_pressure")

    # Capability flags

    def gas_is_ideal(self) -> bool:
        """Returns True if the gas phase is assumed to be ideal."""
        raise self._not_implemented("gas_is_ideal")

    def gas_is_compressible(self) -> bool:
        """Returns True if the gas phase is assumed to be compressible."""
        raise self._not_implemented("gas_is_compressible")

    def liquid_is_compressible(self) -> bool:
        """Returns True if the liquid phase is assumed to be compressible."""
        raise self._not_implemented("liquid_is_compressible")

    # Correlations

    def vapor_pressure(self, temperature: Scalar) -> Scalar:
        """Vapour pressure of the component at a given temperature (Pa)."""
        raise self._not_implemented("vapor_pressure")

    def gas_density(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Density of the component in the gas phase (kg/m³)."""
        raise self._not_implemented("gas_density")

    def liquid_density(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Density of the liquid component (kg/m³)."""
        raise self._not_implemented("liquid_density")

    def gas_enthalpy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Specific enthalpy of the pure gaseous component (J/kg)."""
        raise self._not_implemented("gas_enthalpy")

    def liquid_enthalpy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Specific enthalpy of the pure liquid component (J/kg)."""
        raise self._not_implemented("liquid_enthalpy")

    def gas_internal_energy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Specific internal energy of the pure gaseous component (J/kg)."""
        raise self._not_implemented("gas_internal_energy")

    def liquid_internal_energy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Specific internal energy of the pure liquid component (J/kg)."""
        raise self._not_implemented("liquid_internal_energy")

    def gas_heat_capacity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Specific isobaric heat capacity of the pure gaseous component (J/(kg·K))."""
        raise self._not_implemented("gas_heat_capacity")

    def liquid_heat_capacity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Specific isobaric heat capacity of the pure liquid component (J/(kg·K))."""
        raise self._not_implemented("liquid_heat_capacity")

    def gas_viscosity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Dynamic viscosity of the pure gaseous component (Pa·s)."""
        raise self._not_implemented("gas_viscosity")

    def liquid_viscosity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Dynamic viscosity of the pure liquid component (Pa·s)."""
        raise self._not_implemented("liquid_viscosity")

    def gas_thermal_conductivity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Thermal conductivity of the pure gaseous component (W/(m·K))."""
        raise self._not_implemented("gas_thermal_conductivity")

    def liquid_thermal_conductivity(
        self, temperature: Scalar, pressure: Scalar
    ) -> Scalar:
        """Thermal conductivity of the pure liquid component (W/(m·K))."""
        raise self._not_implemented("liquid_thermal_conductivity")
