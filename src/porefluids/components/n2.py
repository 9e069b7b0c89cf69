"""Properties of pure molecular nitrogen (N₂)."""

from porefluids import toolbox
from porefluids.components.base import Component
from porefluids.components.ideal_gas import IdealGas
from porefluids.constants import c
from porefluids.types import Scalar

__all__ = ["N2"]

# Joback coefficients of the molar isobaric heat capacity of the vapour,
# c_p = A + B T + C T² + D T³ in J/(mol·K)
_CP_VAPOR_A = 31.12
_CP_VAPOR_B = -1.356e-2
_CP_VAPOR_C = 2.678e-5
_CP_VAPOR_D = -1.168e-8


class N2(Component):
    """
    Molecular nitrogen, treated as an ideal gas.

    References:
        Span, R. et al. (2000). "A Reference Equation of State for the Thermodynamic
        Properties of Nitrogen for Temperatures from 63.151 to 1000 K and Pressures
        to 2200 MPa." J. Phys. Chem. Ref. Data 29, 1361-1433.

        Reid, R.C., Prausnitz, J.M., Poling, B.E. (1987). "The Properties of Gases
        and Liquids", 4th edition, McGraw-Hill.
    """

    def name(self) -> str:
        return "N2"

    def molar_mass(self) -> float:
        return 28.0134e-3

    def critical_temperature(self) -> float:
        return 126.192

    def critical_pressure(self) -> float:
        return 3.39858e6

    def acentric_factor(self) -> float:
        return 0.039

    def triple_temperature(self) -> float:
        return 63.151

    def triple_pressure(self) -> float:
        return 12.523e3

    def gas_is_ideal(self) -> bool:
        return True

    def gas_is_compressible(self) -> bool:
        return True

    def liquid_is_compressible(self) -> bool:
        return True

    def vapor_pressure(self, temperature: Scalar) -> Scalar:
        """
        Vapour pressure of nitrogen using the ancillary equation of Span et al. (2000).

        :param temperature: Temperature (K)
        :return: Vapour pressure (Pa)
        """
        critical_temperature = self.critical_temperature()
        if temperature > critical_temperature:
            return toolbox.to_lhs(
                self.critical_pressure(), toolbox.scalar_type_of(temperature)
            )
        if temperature < self.triple_temperature():
            return toolbox.to_lhs(0.0, toolbox.scalar_type_of(temperature))

        sigma = 1.0 - temperature / critical_temperature
        sqrt_sigma = toolbox.sqrt(sigma)
        N1 = -6.12445284
        N2 = 1.26327220
        N3 = -0.765910082
        N4 = -1.77570564
        return self.critical_pressure() * toolbox.exp(
            critical_temperature
            / temperature
            * (
                sigma
                * (N1 + sqrt_sigma * N2 + sigma * (sqrt_sigma * N3 + sigma * sigma * sigma * N4))
            )
        )

    def gas_density(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return IdealGas.density(self.molar_mass(), temperature, pressure)

    def gas_enthalpy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """
        Specific enthalpy of nitrogen gas, ∫₀ᵀ c_p dT with Joback's heat capacity.

        :param temperature: Temperature (K)
        :param pressure: Pressure (Pa), unused for an ideal gas
        :return: Specific enthalpy (J/kg)
        """
        T = temperature
        return (
            T
            * (
                _CP_VAPOR_A
                + T * (_CP_VAPOR_B / 2 + T * (_CP_VAPOR_C / 3 + T * (_CP_VAPOR_D / 4)))
            )
            / self.molar_mass()
        )

    def gas_internal_energy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return (
            self.gas_enthalpy(temperature, pressure)
            - c.GAS_CONSTANT * temperature / self.molar_mass()
        )

    def gas_heat_capacity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """Specific isobaric heat capacity of nitrogen gas after Joback (J/(kg·K))."""
        T = temperature
        return (
            _CP_VAPOR_A + T * (_CP_VAPOR_B + T * (_CP_VAPOR_C + T * _CP_VAPOR_D))
        ) / self.molar_mass()

    def gas_viscosity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """
        Dynamic viscosity of nitrogen gas using the method of Chung et al.
        (Reid et al., 1987, pp. 396-397).

        :param temperature: Temperature (K)
        :param pressure: Pressure (Pa), the low-pressure method ignores it
        :return: Viscosity (Pa·s)
        """
        critical_temperature = self.critical_temperature()
        critical_volume = 90.1  # cm³/mol
        omega = 0.037
        molar_mass = self.molar_mass() * 1e3  # g/mol
        dipole = 0.0  # debye

        mu_r4 = 131.3 * dipole / (critical_volume * critical_temperature) ** 0.5
        mu_r4 *= mu_r4
        mu_r4 *= mu_r4

        Fc = 1 - 0.2756 * omega + 0.059035 * mu_r4
        Tstar = 1.2593 * temperature / critical_temperature
        Omega_v = (
            1.16145 * toolbox.pow_(Tstar, -0.14874)
            + 0.52487 * toolbox.exp(-0.77320 * Tstar)
            + 2.16178 * toolbox.exp(-2.43787 * Tstar)
        )
        return (
            40.785
            * Fc
            * toolbox.sqrt(molar_mass * temperature)
            / (critical_volume ** (2.0 / 3.0) * Omega_v)
            * 1e-7
        )

    def gas_thermal_conductivity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """
        Thermal conductivity of nitrogen gas from a linear fit at atmospheric pressure.

        :param temperature: Temperature (K)
        :param pressure: Pressure (Pa), unused
        :return: Thermal conductivity (W/(m·K))
        """
        temperature_in_celsius = temperature - c.CELSIUS_TO_KELVIN_OFFSET
        return 6.525e-5 * temperature_in_celsius + 0.024031
