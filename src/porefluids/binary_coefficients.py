"""
Binary interaction coefficients: Henry coefficients and mutual diffusion
coefficients of component pairs.
"""

import typing

import attrs

from porefluids import toolbox
from porefluids.components.base import Component
from porefluids.components.n2 import N2
from porefluids.components.simple_h2o import SimpleH2O
from porefluids.types import Scalar

__all__ = ["henry_iapws", "fuller_method", "H2ON2Coefficients"]

_HENRY_IAPWS_C = (
    1.99274064,
    1.09965342,
    -0.510839303,
    -1.75493479,
    -45.5170352,
    -6.7469445e5,
)
_HENRY_IAPWS_D = (1 / 3, 2 / 3, 5 / 3, 16 / 3, 43 / 3, 110 / 3)
_HENRY_IAPWS_Q = -0.023767


def henry_iapws(
    E: float,
    F: float,
    G: float,
    H: float,
    temperature: Scalar,
    water: typing.Optional[Component] = None,
) -> Scalar:
    """
    Henry coefficient of a gas dissolved in liquid water, using the form of the
    IAPWS guideline on the solubility of gases in water (2004).

    :param E: Fitted coefficient E of the gas (K)
    :param F: Fitted coefficient F of the gas
    :param G: Fitted coefficient G of the gas
    :param H: Fitted coefficient H of the gas
    :param temperature: Temperature (K)
    :param water: Water model providing the critical and triple temperatures
        and the vapour pressure. Defaults to `SimpleH2O`.
    :return: Henry coefficient (Pa)
    """
    water = water or SimpleH2O()
    reduced_temperature = temperature / water.critical_temperature()
    tau = 1.0 - reduced_temperature

    f = 0.0
    for c_i, d_i in zip(_HENRY_IAPWS_C, _HENRY_IAPWS_D):
        f = f + c_i * toolbox.pow_(tau, d_i)

    exponent = (
        _HENRY_IAPWS_Q * F
        + E / temperature * f
        + (F + G * toolbox.pow_(tau, 2.0 / 3.0) + H * tau)
        * toolbox.exp((water.triple_temperature() - temperature) / 100.0)
    )
    return toolbox.exp(exponent) * water.vapor_pressure(temperature)


def fuller_method(
    molar_masses: typing.Sequence[float],
    diffusion_volumes: typing.Sequence[float],
    temperature: Scalar,
    pressure: Scalar,
) -> Scalar:
    """
    Binary diffusion coefficient of two gases after Fuller, Schettler and Giddings.

    Reference:
        Reid, R.C., Prausnitz, J.M., Poling, B.E. (1987). "The Properties of Gases
        and Liquids", 4th edition, McGraw-Hill, p. 587.

    :param molar_masses: Molar masses of both components (g/mol)
    :param diffusion_volumes: Atomic diffusion volume sums of both components
    :param temperature: Temperature (K)
    :param pressure: Pressure (Pa)
    :return: Diffusion coefficient (m²/s)
    """
    # harmonic mean of the molar masses
    Mab = 2.0 / (1.0 / molar_masses[0] + 1.0 / molar_masses[1])
    tmp = diffusion_volumes[0] ** (1 / 3) + diffusion_volumes[1] ** (1 / 3)
    return (
        1e-4
        * (143.0 * toolbox.pow_(temperature, 1.75))
        / (pressure * Mab**0.5 * tmp * tmp)
    )


@attrs.frozen
class H2ON2Coefficients:
    """Binary coefficients of water and molecular nitrogen."""

    water: Component = attrs.field(factory=SimpleH2O)
    """Water model used by the Henry coefficient and the Fuller method."""
    nitrogen: Component = attrs.field(factory=N2)

    HENRY_E: typing.ClassVar[float] = 2388.8777
    HENRY_F: typing.ClassVar[float] = -14.9593
    HENRY_G: typing.ClassVar[float] = 42.0179
    HENRY_H: typing.ClassVar[float] = -29.4396
    DIFFUSION_VOLUMES: typing.ClassVar[typing.Tuple[float, float]] = (13.1, 18.5)
    """Atomic diffusion volumes of H2O and N2 for the Fuller method."""

    def henry(self, temperature: Scalar) -> Scalar:
        """
        Henry coefficient of molecular nitrogen in liquid water.

        :param temperature: Temperature (K)
        :return: Henry coefficient (Pa)
        """
        return henry_iapws(
            self.HENRY_E,
            self.HENRY_F,
            self.HENRY_G,
            self.HENRY_H,
            temperature,
            water=self.water,
        )

    def gas_diffusion_coefficient(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        """
        Binary diffusion coefficient of water vapour and nitrogen (m²/s).

        :param temperature: Temperature (K)
        :param pressure: Pressure (Pa)
        """
        molar_masses = (
            self.water.molar_mass() * 1e3,
            self.nitrogen.molar_mass() * 1e3,
        )
        return fuller_method(
            molar_masses, self.DIFFUSION_VOLUMES, temperature, pressure
        )

    def liquid_diffusion_coefficient(
        self, temperature: Scalar, pressure: Scalar
    ) -> Scalar:
        """
        Diffusion coefficient of nitrogen in liquid water (m²/s).

        Reference: Ferrell, R.T. and Himmelblau, D.M. (1967). "Diffusion
        coefficients of nitrogen and oxygen in water." J. Chem. Eng. Data 12, 111-115.
        """
        return 2.01e-9 * temperature / 298.15
