"""Pure water after the IAPWS-95 formulation, evaluated through CoolProp."""

import functools
import math
import typing

from CoolProp.CoolProp import PropsSI  # type: ignore[import]

from porefluids import toolbox
from porefluids.components.base import Component
from porefluids.components.ideal_gas import IdealGas
from porefluids.constants import c
from porefluids.errors import ComputationError
from porefluids.types import Scalar

__all__ = ["IAPWSH2O", "clip_temperature", "clip_pressure"]

_FLUID = "Water"


@functools.lru_cache(maxsize=32)
def _fluid_constant(key: str, fluid: str = _FLUID) -> float:
    """Trivial (state independent) CoolProp output such as "Tcrit" or "M"."""
    return float(PropsSI(key, fluid))


def clip_temperature(temperature: float, fluid: str = _FLUID) -> float:
    """
    Clips temperature to be within CoolProp's valid temperature range for the given fluid.

    :param temperature: Temperature (K)
    :param fluid: CoolProp fluid name
    :return: Clipped temperature (K)
    """
    t_min = _fluid_constant("Tmin", fluid)
    t_max = _fluid_constant("Tmax", fluid)
    return min(max(temperature, t_min + 0.1), t_max - 0.1)  # Add small buffer


def clip_pressure(pressure: float, fluid: str = _FLUID) -> float:
    """
    Clips pressure to be within CoolProp's valid pressure range for the given fluid.

    :param pressure: Pressure (Pa)
    :param fluid: CoolProp fluid name
    :return: Clipped pressure (Pa)
    """
    p_min = _fluid_constant("pmin", fluid)
    p_max = _fluid_constant("pmax", fluid)
    return min(max(pressure, p_min + 1.0), p_max - 1.0)  # Add small buffer


def _props_si(output: str, temperature: float, pressure: float) -> float:
    try:
        result = PropsSI(output, "T", temperature, "P", pressure, _FLUID)
    except ValueError as exc:
        raise ComputationError(
            f"CoolProp failed to evaluate {output!r} of water at T={temperature} K, p={pressure} Pa: {exc}"
        ) from exc
    if not math.isfinite(result):
        raise ComputationError(
            f"CoolProp returned a non-finite {output!r} for water at T={temperature} K, p={pressure} Pa"
        )
    return float(result)


FloatFunction = typing.Callable[[float, float], float]


def _differentiate(
    func: FloatFunction, temperature: Scalar, pressure: Scalar
) -> Scalar:
    """
    Evaluate a float-only correlation and, for `Evaluation` inputs, attach
    derivatives obtained from central differences.
    """
    T = toolbox.value_of(temperature)
    p = toolbox.value_of(pressure)
    value = func(T, p)
    if not (toolbox.is_evaluation(temperature) or toolbox.is_evaluation(pressure)):
        return value

    step = c.FINITE_DIFFERENCE_RELATIVE_STEP
    dvalue_dT = 0.0
    if toolbox.is_evaluation(temperature):
        dT = step * max(abs(T), 1.0)
        dvalue_dT = (func(T + dT, p) - func(T - dT, p)) / (2.0 * dT)
    dvalue_dp = 0.0
    if toolbox.is_evaluation(pressure):
        dp = step * max(abs(p), 1.0)
        dvalue_dp = (func(T, p + dp) - func(T, p - dp)) / (2.0 * dp)
    return toolbox.chain(value, (dvalue_dT, temperature), (dvalue_dp, pressure))


class IAPWSH2O(Component):
    """
    Water according to IAPWS-95, via CoolProp's reference equation of state.

    Single-phase properties are regularised across the saturation curve: liquid
    properties are evaluated at `p >= p_sat(T)` and vapour properties at
    `p <= p_sat(T)`, so the correlations stay defined for metastable states the
    flow solver visits between iterations. Vapour below the triple-point pressure
    follows the ideal-gas law.

    References:
        Wagner, W. and Pruß, A. (2002). "The IAPWS Formulation 1995 for the
        Thermodynamic Properties of Ordinary Water Substance for General and
        Scientific Use." J. Phys. Chem. Ref. Data 31, 387-535.
    """

    def name(self) -> str:
        return "H2O"

    def molar_mass(self) -> float:
        return _fluid_constant("M")

    def critical_temperature(self) -> float:
        return _fluid_constant("Tcrit")

    def critical_pressure(self) -> float:
        return _fluid_constant("pcrit")

    def acentric_factor(self) -> float:
        return _fluid_constant("acentric")

    def triple_temperature(self) -> float:
        return _fluid_constant("Ttriple")

    def triple_pressure(self) -> float:
        return _fluid_constant("ptriple")

    def gas_is_ideal(self) -> bool:
        return False

    def gas_is_compressible(self) -> bool:
        return True

    def liquid_is_compressible(self) -> bool:
        return True

    def _saturation_pressure(self, temperature: float) -> float:
        if temperature >= self.critical_temperature():
            return self.critical_pressure()
        if temperature < self.triple_temperature():
            return 0.0
        try:
            result = PropsSI("P", "T", temperature, "Q", 0, _FLUID)
        except ValueError as exc:
            raise ComputationError(
                f"CoolProp failed to evaluate the vapour pressure of water at T={temperature} K: {exc}"
            ) from exc
        return float(result)

    def _liquid_state(self, temperature: float, pressure: float) -> typing.Tuple[float, float]:
        temperature = clip_temperature(temperature)
        if temperature < self.critical_temperature():
            saturation_pressure = self._saturation_pressure(temperature)
            pressure = max(pressure, saturation_pressure * (1.0 + c.SATURATION_PRESSURE_MARGIN))
        return temperature, clip_pressure(pressure)

    def _gas_state(self, temperature: float, pressure: float) -> typing.Tuple[float, float]:
        temperature = clip_temperature(temperature)
        pressure = max(pressure, self.triple_pressure())
        if temperature < self.critical_temperature():
            saturation_pressure = self._saturation_pressure(temperature)
            pressure = min(pressure, saturation_pressure * (1.0 - c.SATURATION_PRESSURE_MARGIN))
        return temperature, clip_pressure(pressure)

    def _liquid_property(self, output: str) -> FloatFunction:
        def evaluate(temperature: float, pressure: float) -> float:
            return _props_si(output, *self._liquid_state(temperature, pressure))

        return evaluate

    def _gas_property(self, output: str) -> FloatFunction:
        def evaluate(temperature: float, pressure: float) -> float:
            return _props_si(output, *self._gas_state(temperature, pressure))

        return evaluate

    def vapor_pressure(self, temperature: Scalar) -> Scalar:
        return _differentiate(
            lambda T, _: self._saturation_pressure(T), temperature, 0.0
        )

    def gas_density(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        if pressure < self.triple_pressure():
            # dilute vapour
            return IdealGas.density(self.molar_mass(), temperature, pressure)
        return _differentiate(self._gas_property("Dmass"), temperature, pressure)

    def liquid_density(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return _differentiate(self._liquid_property("Dmass"), temperature, pressure)

    def gas_enthalpy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return _differentiate(self._gas_property("Hmass"), temperature, pressure)

    def liquid_enthalpy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return _differentiate(self._liquid_property("Hmass"), temperature, pressure)

    def gas_internal_energy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return _differentiate(self._gas_property("Umass"), temperature, pressure)

    def liquid_internal_energy(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return _differentiate(self._liquid_property("Umass"), temperature, pressure)

    def gas_heat_capacity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return _differentiate(self._gas_property("Cpmass"), temperature, pressure)

    def liquid_heat_capacity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return _differentiate(self._liquid_property("Cpmass"), temperature, pressure)

    def gas_viscosity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return _differentiate(self._gas_property("V"), temperature, pressure)

    def liquid_viscosity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return _differentiate(self._liquid_property("V"), temperature, pressure)

    def gas_thermal_conductivity(self, temperature: Scalar, pressure: Scalar) -> Scalar:
        return _differentiate(self._gas_property("L"), temperature, pressure)

    def liquid_thermal_conductivity(
        self, temperature: Scalar, pressure: Scalar
    ) -> Scalar:
        return _differentiate(self._liquid_property("L"), temperature, pressure)
